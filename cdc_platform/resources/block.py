"""Block lookups."""

from __future__ import annotations

from typing import Optional

from cdc_platform.config import ClientConfig, resolve_config
from cdc_platform.models import ApiResponse, BlockData
from cdc_platform.platform_api import default_client


async def get_block_by_tag(
    block_tag: str,
    tx_detail: str = "",
    *,
    client=default_client,
    config: Optional[ClientConfig] = None,
) -> ApiResponse[BlockData]:
    """Fetch a block by number or tag; ``tx_detail="true"`` includes full transactions."""
    cfg = resolve_config(config)
    return await client.fetch_block_by_tag(
        cfg.require_network_id(), block_tag, tx_detail, api_key=cfg.require_api_key()
    )
