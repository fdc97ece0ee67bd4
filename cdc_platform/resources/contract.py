"""Contract lookups."""

from __future__ import annotations

from typing import Optional

from cdc_platform.config import ClientConfig, resolve_config
from cdc_platform.models import Abi, ApiResponse
from cdc_platform.platform_api import default_client


async def get_contract_abi(
    contract_address: str, *, client=default_client, config: Optional[ClientConfig] = None
) -> ApiResponse[Abi]:
    cfg = resolve_config(config)
    return await client.fetch_contract_abi(
        cfg.require_network_id(), contract_address, api_key=cfg.require_api_key()
    )
