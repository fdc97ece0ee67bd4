"""HTTP client wrappers for the Crypto.com Developer Platform API."""

from .client import (
    MalformedResponseError,
    PlatformApiClient,
    PlatformApiError,
    RemoteApiError,
    UnauthorizedError,
    default_client,
)

__all__ = [
    "PlatformApiClient",
    "PlatformApiError",
    "RemoteApiError",
    "UnauthorizedError",
    "MalformedResponseError",
    "default_client",
]
