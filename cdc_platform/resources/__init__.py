"""Resource facades: one module per platform resource."""

from . import block, contract, token, transaction, wallet

__all__ = ["block", "contract", "token", "transaction", "wallet"]
