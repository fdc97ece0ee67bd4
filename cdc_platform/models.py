"""Typed shapes of the envelopes and payloads returned by the platform API.

These are typing aids only: the client hands responses back exactly as the
service sent them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypedDict, TypeVar, Union

T = TypeVar("T")


class Status(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"


class BlockTag(str, Enum):
    LATEST = "latest"
    EARLIEST = "earliest"


class ApiResponse(TypedDict, Generic[T]):
    status: str
    data: T


class Balance(TypedDict, total=False):
    balance: str


class TokenBalance(TypedDict):
    tokenBalance: str


class CreateWalletData(TypedDict, total=False):
    address: str
    privateKey: str
    mnemonic: str


class MagicLinkData(TypedDict):
    magicLink: str


class Pagination(TypedDict):
    totalRecord: int
    totalPage: int
    currentPage: int
    limit: int
    session: str


class AddressRef(TypedDict):
    address: str
    isContract: bool


# "from" is a keyword, hence the functional form.
ExplorerTransaction = TypedDict(
    "ExplorerTransaction",
    {
        "blockNumber": int,
        "transactionHash": str,
        "status": int,
        "error": str,
        "from": AddressRef,
        "to": AddressRef,
        "gas": str,
        "gasPrice": str,
        "gasLimit": str,
        "timestamp": int,
        "methodId": str,
        "methodName": str,
        "index": int,
        "value": str,
        "type": str,
        "nonce": int,
        "input": str,
        "contractAddress": str,
        "confirmations": int,
        "transactionIndex": str,
    },
    total=False,
)


class GetTransactionsByAddressData(TypedDict, total=False):
    transactions: List[ExplorerTransaction]
    pagination: Pagination


GetTransactionByHashData = TypedDict(
    "GetTransactionByHashData",
    {
        "blockNumber": int,
        "from": str,
        "to": str,
        "value": str,
        "gasPrice": str,
        "nonce": int,
        "transactionIndex": int,
        "gas": int,
    },
)


class GetTransactionStatusData(TypedDict, total=False):
    status: int | str
    errDescription: str


class Abi(TypedDict):
    abi: Optional[str]


class BlockData(TypedDict, total=False):
    """Block as returned by the node's ``eth_getBlockByNumber`` proxy.

    ``transactions`` holds hashes, or full transaction objects when the
    block was requested with ``tx_detail="true"``.
    """

    size: str
    parentHash: str
    logsBloom: str
    difficulty: str
    transactions: List[Union[str, Dict[str, Any]]]
    hash: str
    l1BatchNumber: int
    mixHash: str
    gasLimit: str
    l1BatchTimestamp: int
    totalDifficulty: str
    uncles: List[str]
    sha3Uncles: str
    miner: str
    transactionsRoot: str
    gasUsed: str
    extraData: str
    timestamp: str
    sealFields: List[str]
    nonce: str
    stateRoot: str
    receiptsRoot: str
    number: str
    baseFeePerGas: str


def is_success(envelope: Any) -> bool:
    """True when an envelope reports ``status == "Success"``."""
    return isinstance(envelope, dict) and envelope.get("status") == Status.SUCCESS.value
