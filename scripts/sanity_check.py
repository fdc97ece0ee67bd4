"""Minimal sanity checks against the live Developer Platform API."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from cdc_platform import CronosEvm, initialize  # noqa: E402
from cdc_platform.logging_config import configure_logging  # noqa: E402
from cdc_platform.metrics import default_metrics  # noqa: E402
from cdc_platform.platform_api import default_client  # noqa: E402
from cdc_platform.resources import block, contract, token, transaction, wallet  # noqa: E402

# Sample inputs; override via env.
SAMPLE_ADDRESS = os.getenv("CDC_PLATFORM_SAMPLE_ADDRESS", "0x0000000000000000000000000000000000000000")
SAMPLE_CONTRACT = os.getenv("CDC_PLATFORM_SAMPLE_CONTRACT", "0x6a3173618859C7cd40fAF6921b5E9eB6A76f1fD4")
# Opt-in to wallet creation (creates a fresh keypair on every run).
RUN_WALLET_CREATE = os.getenv("RUN_WALLET_CREATE_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    configure_logging()
    # api_key=None falls back to CDC_PLATFORM_API_KEY / apikey.txt
    initialize(chain=CronosEvm.TESTNET)
    try:
        print("Wallet balance:", await wallet.balance(SAMPLE_ADDRESS))
        print("Native balance:", await token.get_native_token_balance(SAMPLE_ADDRESS))
        print("ERC20 balance:", await token.get_erc20_token_balance(SAMPLE_ADDRESS, SAMPLE_CONTRACT))
        print("Transactions (limit 3):", await transaction.get_transactions_by_address(SAMPLE_ADDRESS, limit="3"))
        print("Contract ABI:", await contract.get_contract_abi(SAMPLE_CONTRACT))
        print("Latest block:", await block.get_block_by_tag("latest"))
        if RUN_WALLET_CREATE:
            print("New wallet:", await wallet.create())
    finally:
        await default_client.aclose()
    print("Metrics:", default_metrics.snapshot())


if __name__ == "__main__":
    asyncio.run(main())
