"""
Thin async HTTP client for the Crypto.com Developer Platform API.

Every endpoint goes through ``PlatformApiClient.request``: one outbound call,
JSON envelope returned verbatim on success, and failures normalized into
``PlatformApiError`` subclasses that name the operation which failed.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from cdc_platform.config import API_PREFIX, HttpSettings, default_settings
from cdc_platform.metrics import default_metrics

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}
ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


class PlatformApiError(Exception):
    """Base exception for Developer Platform API errors."""

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
        self.detail = detail


class RemoteApiError(PlatformApiError):
    """Raised when the service answers with a non-success HTTP status."""


class UnauthorizedError(RemoteApiError):
    """Raised when the service rejects the API key."""


class MalformedResponseError(PlatformApiError):
    """Raised when a response body is not the JSON the client expected."""


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class PlatformApiClient:
    """Async client for the Developer Platform REST surface."""

    def __init__(
        self,
        settings: HttpSettings | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings or default_settings
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.base_url,
                timeout=self.settings.timeout,
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def build_path(resource: str, *segments: str) -> str:
        """Join ``/cdc-developer-platform/<resource>/<segments...>`` with encoded segments."""
        parts = [API_PREFIX, _segment(resource)]
        parts.extend(_segment(segment) for segment in segments)
        return "/" + "/".join(part.strip("/") for part in parts)

    def _fail(self, error: PlatformApiError) -> PlatformApiError:
        logger.error(
            "[%s] - %s",
            error.operation,
            error.detail,
            extra={
                "operation": error.operation,
                "error": error.detail,
                "status_code": error.status_code,
            },
        )
        if error.operation:
            default_metrics.record_operation(
                error.operation, success=False, error=type(error).__name__
            )
        return error

    def _process_response(self, response: httpx.Response, *, operation: str, action: str) -> Any:
        status_code = response.status_code
        default_metrics.record_status(status_code)
        try:
            data: Any = response.json()
            parse_error: Optional[ValueError] = None
        except ValueError as exc:
            data = None
            parse_error = exc

        if not 200 <= status_code < 300:
            if parse_error is not None:
                detail = f"HTTP error! status: {status_code} (response body is not valid JSON)"
                raise self._fail(
                    MalformedResponseError(
                        f"Failed to {action}: {detail}",
                        operation=operation,
                        status_code=status_code,
                        detail=detail,
                    )
                ) from parse_error
            server_error = data.get("error") if isinstance(data, dict) else None
            detail = str(server_error) if server_error else f"HTTP error! status: {status_code}"
            error_cls = UnauthorizedError if status_code in {401, 403} else RemoteApiError
            raise self._fail(
                error_cls(
                    f"Failed to {action}: {detail}",
                    operation=operation,
                    status_code=status_code,
                    detail=detail,
                )
            )

        if parse_error is not None:
            detail = f"Invalid JSON in response body: {parse_error}"
            raise self._fail(
                MalformedResponseError(
                    f"Failed to {action}: {detail}",
                    operation=operation,
                    status_code=status_code,
                    detail=detail,
                )
            ) from parse_error

        default_metrics.record_operation(operation, success=True)
        return data

    async def request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        action: str,
        api_key: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Issue a single request and return the decoded JSON envelope.

        Args:
            method: One of GET, POST, PUT or DELETE.
            path: Path below the configured base URL, already holding the network id.
            operation: Short name used in logs, metrics and raised errors.
            action: Human readable phrase completing "Failed to ...".
            api_key: Sent as the ``apiKey`` query parameter when given.
            params: Query parameters.
            body: JSON body for mutating calls.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        query: Dict[str, Any] = dict(params or {})
        if api_key:
            query["apiKey"] = api_key

        client = await self._get_client()
        request_id = str(uuid.uuid4())
        start = time.time()
        default_metrics.incr_request()
        logger.debug(
            "operation=%s method=%s path=%s request_id=%s",
            operation,
            method,
            path,
            request_id,
            extra={"operation": operation, "request_id": request_id},
        )
        try:
            response = await client.request(
                method,
                path,
                params=query or None,
                json=body,
                headers=JSON_HEADERS,
            )
        except httpx.RequestError as exc:
            logger.error(
                "[%s] - transport failure: %s",
                operation,
                exc,
                extra={"operation": operation, "request_id": request_id, "error": str(exc)},
            )
            default_metrics.record_operation(operation, success=False, error=type(exc).__name__)
            raise
        finally:
            default_metrics.record_duration(request_id, (time.time() - start) * 1000)
        return self._process_response(response, operation=operation, action=action)

    async def create_wallet(self, *, api_key: str) -> Dict[str, Any]:
        """Create a new wallet."""
        return await self.request(
            "POST",
            self.build_path("wallet"),
            operation="wallet/create",
            action="create wallet",
            api_key=api_key,
        )

    async def fetch_wallet_balance(self, network_id: str, address: str, *, api_key: str) -> Dict[str, Any]:
        """Retrieve the native balance of a wallet address."""
        return await self.request(
            "GET",
            self.build_path("wallet", network_id, "balance"),
            operation="wallet/balance",
            action="fetch wallet balance",
            api_key=api_key,
            params={"address": address},
        )

    async def fetch_native_token_balance(
        self, network_id: str, address: str, *, api_key: str
    ) -> Dict[str, Any]:
        """Retrieve the native token balance of an address."""
        return await self.request(
            "GET",
            self.build_path("token", network_id, "native-token-balance"),
            operation="token/getNativeTokenBalance",
            action="fetch native token balance",
            api_key=api_key,
            params={"address": address},
        )

    async def fetch_erc20_token_balance(
        self,
        network_id: str,
        address: str,
        contract_address: str,
        block_height: str = "latest",
        *,
        api_key: str,
    ) -> Dict[str, Any]:
        """Retrieve an ERC20 balance at a block height (``latest`` by default)."""
        return await self.request(
            "GET",
            self.build_path("token", network_id, "erc20-token-balance"),
            operation="token/getERC20TokenBalance",
            action="fetch ERC20 token balance",
            api_key=api_key,
            params={
                "address": address,
                "contractAddress": contract_address,
                "blockHeight": block_height,
            },
        )

    async def transfer_token(
        self,
        network_id: str,
        payload: Dict[str, Any],
        *,
        api_key: str,
        provider: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Request a native or ERC20 transfer."""
        return await self.request(
            "POST",
            self.build_path("token", network_id, "transfer"),
            operation="token/transfer",
            action="transfer token",
            api_key=api_key,
            body=_with_provider(payload, provider),
        )

    async def wrap_token(
        self,
        network_id: str,
        payload: Dict[str, Any],
        *,
        api_key: str,
        provider: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Request a token wrap."""
        return await self.request(
            "POST",
            self.build_path("transaction", network_id, "wrap"),
            operation="token/wrap",
            action="wrap token",
            api_key=api_key,
            body=_with_provider(payload, provider),
        )

    async def swap_token(
        self,
        network_id: str,
        payload: Dict[str, Any],
        *,
        api_key: str,
        provider: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Request a token swap."""
        return await self.request(
            "POST",
            self.build_path("transaction", network_id, "swap"),
            operation="token/swap",
            action="swap token",
            api_key=api_key,
            body=_with_provider(payload, provider),
        )

    async def fetch_transactions_by_address(
        self,
        network_id: str,
        address: str,
        session: str = "",
        limit: str = "20",
        *,
        api_key: str,
    ) -> Dict[str, Any]:
        """List transactions of an address, one page per session cursor."""
        return await self.request(
            "GET",
            self.build_path("transaction", network_id, "address"),
            operation="transaction/getTransactionsByAddress",
            action="fetch transactions by address",
            api_key=api_key,
            params={"address": address, "session": session, "limit": limit},
        )

    async def fetch_transaction_by_hash(self, network_id: str, tx_hash: str, *, api_key: str) -> Dict[str, Any]:
        return await self.request(
            "GET",
            self.build_path("transaction", network_id, "tx-hash"),
            operation="transaction/getTransactionByHash",
            action="fetch transaction by hash",
            api_key=api_key,
            params={"txHash": tx_hash},
        )

    async def fetch_transaction_status(self, network_id: str, tx_hash: str, *, api_key: str) -> Dict[str, Any]:
        return await self.request(
            "GET",
            self.build_path("transaction", network_id, "status"),
            operation="transaction/getTransactionStatus",
            action="fetch transaction status",
            api_key=api_key,
            params={"txHash": tx_hash},
        )

    async def fetch_contract_abi(self, network_id: str, contract_address: str, *, api_key: str) -> Dict[str, Any]:
        """Retrieve the verified ABI of a contract."""
        return await self.request(
            "GET",
            self.build_path("contract", network_id, "contract-abi"),
            operation="contract/getContractABI",
            action="fetch contract ABI",
            api_key=api_key,
            params={"contractAddress": contract_address},
        )

    async def fetch_block_by_tag(
        self, network_id: str, block_tag: str, tx_detail: str = "", *, api_key: str
    ) -> Dict[str, Any]:
        """Retrieve a block by number or tag (``latest``, ``earliest``)."""
        return await self.request(
            "GET",
            self.build_path("block", network_id, "block-tag"),
            operation="block/getBlockByTag",
            action="fetch block by tag",
            api_key=api_key,
            params={"blockTag": block_tag, "txDetail": tx_detail},
        )


def _with_provider(payload: Dict[str, Any], provider: Optional[str]) -> Dict[str, Any]:
    body = {key: value for key, value in payload.items() if value is not None}
    if provider:
        body["provider"] = provider
    return body


default_client = PlatformApiClient()
