"""Wallet operations."""

from __future__ import annotations

from typing import Optional

from cdc_platform.config import ClientConfig, resolve_config
from cdc_platform.models import ApiResponse, Balance, CreateWalletData
from cdc_platform.platform_api import default_client


async def create(
    *, client=default_client, config: Optional[ClientConfig] = None
) -> ApiResponse[CreateWalletData]:
    """Create a new wallet and return its credentials."""
    cfg = resolve_config(config)
    return await client.create_wallet(api_key=cfg.require_api_key())


async def balance(
    address: str, *, client=default_client, config: Optional[ClientConfig] = None
) -> ApiResponse[Balance]:
    cfg = resolve_config(config)
    return await client.fetch_wallet_balance(
        cfg.require_network_id(), address, api_key=cfg.require_api_key()
    )
