"""
Async Python client for the Crypto.com Developer Platform API on Cronos.

Call ``initialize`` once at startup, then use the resource modules
(``wallet``, ``token``, ``transaction``, ``contract``, ``block``). See
DESIGN.md for full details.
"""

from cdc_platform.config import (
    ChainName,
    ClientConfig,
    ConfigurationMissingError,
    CronosEvm,
    CronosZkEvm,
    current_api_key,
    current_network_id,
    current_signer_endpoint,
    initialize,
)
from cdc_platform.models import BlockTag, Status, is_success
from cdc_platform.platform_api import (
    MalformedResponseError,
    PlatformApiClient,
    PlatformApiError,
    RemoteApiError,
    UnauthorizedError,
)
from cdc_platform.resources import block, contract, token, transaction, wallet

__version__ = "0.1.0"

__all__ = [
    "initialize",
    "current_api_key",
    "current_network_id",
    "current_signer_endpoint",
    "ClientConfig",
    "ConfigurationMissingError",
    "CronosEvm",
    "CronosZkEvm",
    "ChainName",
    "Status",
    "BlockTag",
    "is_success",
    "PlatformApiClient",
    "PlatformApiError",
    "RemoteApiError",
    "UnauthorizedError",
    "MalformedResponseError",
    "wallet",
    "token",
    "transaction",
    "contract",
    "block",
]
