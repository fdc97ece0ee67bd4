"""Native and ERC20 token operations.

Balance reads are plain queries. ``transfer``, ``wrap`` and ``swap`` do not
move funds themselves: the service answers with a magic link the user opens
to sign, using the configured ``provider`` endpoint when one is set.
"""

from __future__ import annotations

from typing import Optional

from cdc_platform.config import ClientConfig, resolve_config
from cdc_platform.models import ApiResponse, Balance, MagicLinkData, TokenBalance
from cdc_platform.platform_api import default_client

Amount = int | float | str


async def get_native_token_balance(
    address: str, *, client=default_client, config: Optional[ClientConfig] = None
) -> ApiResponse[Balance]:
    cfg = resolve_config(config)
    return await client.fetch_native_token_balance(
        cfg.require_network_id(), address, api_key=cfg.require_api_key()
    )


async def get_erc20_token_balance(
    address: str,
    contract_address: str,
    block_height: str = "latest",
    *,
    client=default_client,
    config: Optional[ClientConfig] = None,
) -> ApiResponse[TokenBalance]:
    cfg = resolve_config(config)
    return await client.fetch_erc20_token_balance(
        cfg.require_network_id(),
        address,
        contract_address,
        block_height,
        api_key=cfg.require_api_key(),
    )


async def transfer(
    to: str,
    amount: Amount,
    contract_address: Optional[str] = None,
    *,
    client=default_client,
    config: Optional[ClientConfig] = None,
) -> ApiResponse[MagicLinkData]:
    """Transfer native tokens, or ERC20 tokens when ``contract_address`` is given."""
    cfg = resolve_config(config)
    payload = {"to": to, "amount": amount, "contractAddress": contract_address}
    return await client.transfer_token(
        cfg.require_network_id(),
        payload,
        api_key=cfg.require_api_key(),
        provider=cfg.provider,
    )


async def wrap(
    from_contract_address: str,
    to_contract_address: str,
    amount: Amount,
    *,
    client=default_client,
    config: Optional[ClientConfig] = None,
) -> ApiResponse[MagicLinkData]:
    cfg = resolve_config(config)
    payload = {
        "fromContractAddress": from_contract_address,
        "toContractAddress": to_contract_address,
        "amount": amount,
    }
    return await client.wrap_token(
        cfg.require_network_id(),
        payload,
        api_key=cfg.require_api_key(),
        provider=cfg.provider,
    )


async def swap(
    from_contract_address: str,
    to_contract_address: str,
    amount: Amount,
    *,
    client=default_client,
    config: Optional[ClientConfig] = None,
) -> ApiResponse[MagicLinkData]:
    cfg = resolve_config(config)
    payload = {
        "fromContractAddress": from_contract_address,
        "toContractAddress": to_contract_address,
        "amount": amount,
    }
    return await client.swap_token(
        cfg.require_network_id(),
        payload,
        api_key=cfg.require_api_key(),
        provider=cfg.provider,
    )
