"""Transaction lookups."""

from __future__ import annotations

from typing import Optional

from cdc_platform.config import ClientConfig, resolve_config
from cdc_platform.models import (
    ApiResponse,
    GetTransactionByHashData,
    GetTransactionsByAddressData,
    GetTransactionStatusData,
)
from cdc_platform.platform_api import default_client


async def get_transactions_by_address(
    address: str,
    session: str = "",
    limit: str = "20",
    *,
    client=default_client,
    config: Optional[ClientConfig] = None,
) -> ApiResponse[GetTransactionsByAddressData]:
    """List transactions of an address.

    Pass the ``session`` cursor from a previous page's pagination block to
    continue listing.
    """
    cfg = resolve_config(config)
    return await client.fetch_transactions_by_address(
        cfg.require_network_id(), address, session, limit, api_key=cfg.require_api_key()
    )


async def get_transaction_by_hash(
    tx_hash: str, *, client=default_client, config: Optional[ClientConfig] = None
) -> ApiResponse[GetTransactionByHashData]:
    cfg = resolve_config(config)
    return await client.fetch_transaction_by_hash(
        cfg.require_network_id(), tx_hash, api_key=cfg.require_api_key()
    )


async def get_transaction_status(
    tx_hash: str, *, client=default_client, config: Optional[ClientConfig] = None
) -> ApiResponse[GetTransactionStatusData]:
    cfg = resolve_config(config)
    return await client.fetch_transaction_status(
        cfg.require_network_id(), tx_hash, api_key=cfg.require_api_key()
    )
