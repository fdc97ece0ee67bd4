"""
Configuration helpers for the Cronos Developer Platform client.

This module centralizes base URL selection, API key loading, default timeouts
and the process-wide client configuration written once by ``initialize``.
No secrets are stored in the repository; the API key is passed by the caller
or read from environment or a local file if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

# Default connection settings
DEFAULT_BASE_URL = os.getenv(
    "CDC_PLATFORM_BASE_URL", "https://developer-platform-api.crypto.com/api/v1"
)
API_PREFIX = "/cdc-developer-platform"


def _load_timeout() -> float:
    raw_timeout = os.getenv("CDC_PLATFORM_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 10.0
    return 10.0


DEFAULT_TIMEOUT = _load_timeout()

# API key handling
API_KEY_ENV_VAR = "CDC_PLATFORM_API_KEY"
API_KEY_FILE_ENV_VAR = "CDC_PLATFORM_API_KEY_FILE"
DEFAULT_API_KEY_FILE = "apikey.txt"

LOG_LEVEL = os.getenv("CDC_PLATFORM_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("CDC_PLATFORM_LOG_FORMAT", "json")  # json or plain


class CronosEvm(str, Enum):
    """Chain IDs for Cronos EVM."""

    MAINNET = "25"
    TESTNET = "338"


class CronosZkEvm(str, Enum):
    """Chain IDs for Cronos ZK EVM."""

    MAINNET = "388"
    TESTNET = "240"


Chain = Union[CronosEvm, CronosZkEvm]


class ChainName(str, Enum):
    CRONOS_EVM = "Cronos EVM Mainnet"
    CRONOS_EVM_TESTNET = "Cronos EVM Testnet"
    CRONOS_ZKEVM = "Cronos ZK EVM Mainnet"
    CRONOS_ZKEVM_TESTNET = "Cronos ZK EVM Testnet"


_CHAIN_NAMES = {
    CronosEvm.MAINNET.value: ChainName.CRONOS_EVM,
    CronosEvm.TESTNET.value: ChainName.CRONOS_EVM_TESTNET,
    CronosZkEvm.MAINNET.value: ChainName.CRONOS_ZKEVM,
    CronosZkEvm.TESTNET.value: ChainName.CRONOS_ZKEVM_TESTNET,
}


def network_id_of(chain: Chain | str) -> str:
    """Return the bare network identifier for an enum member or raw string."""
    if isinstance(chain, Enum):
        return str(chain.value)
    return str(chain)


def chain_name(chain: Chain | str) -> Optional[ChainName]:
    """Human readable name of a supported chain, or None if unknown."""
    return _CHAIN_NAMES.get(network_id_of(chain))


class ConfigurationMissingError(Exception):
    """Raised when an operation runs before ``initialize`` supplied its settings."""


def load_api_key() -> Optional[str]:
    """
    Load the platform API key from environment or a local file.

    Returns:
        The API key string if available, otherwise None. The key is never logged.
    """
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(API_KEY_FILE_ENV_VAR, DEFAULT_API_KEY_FILE)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip() or None

    return None


@dataclass(slots=True)
class HttpSettings:
    """Transport and logging settings shared by every request."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Network selector, API key and optional signer endpoint for one process."""

    chain: Chain | str
    api_key: str
    provider: Optional[str] = None

    @property
    def network_id(self) -> str:
        return network_id_of(self.chain)

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationMissingError(
                "API key not configured. Call initialize(chain=..., api_key='your-api-key') first."
            )
        return self.api_key

    def require_network_id(self) -> str:
        network_id = self.network_id if self.chain else ""
        if not network_id:
            raise ConfigurationMissingError(
                "Chain ID not configured. Call initialize(chain=CronosZkEvm.TESTNET, ...) first."
            )
        return network_id


default_settings = HttpSettings()

_active_config: Optional[ClientConfig] = None


def initialize(
    chain: Chain | str,
    api_key: Optional[str] = None,
    provider: Optional[str] = None,
) -> ClientConfig:
    """
    Install the process-wide configuration, replacing any previous one.

    ``api_key`` defaults to ``load_api_key()``. Meant to be called once at
    startup, before any resource operation runs.
    """
    global _active_config
    if api_key is None:
        api_key = load_api_key() or ""
    _active_config = ClientConfig(chain=chain, api_key=api_key, provider=provider)
    return _active_config


def current_config() -> ClientConfig:
    if _active_config is None:
        raise ConfigurationMissingError(
            "Client not configured. Call initialize(chain=..., api_key=...) first."
        )
    return _active_config


def current_api_key() -> str:
    return current_config().require_api_key()


def current_network_id() -> str:
    return current_config().require_network_id()


def current_signer_endpoint() -> Optional[str]:
    if _active_config is None:
        return None
    return _active_config.provider or None


def resolve_config(config: Optional[ClientConfig] = None) -> ClientConfig:
    """Return the explicitly injected config, falling back to the process-wide one."""
    return config if config is not None else current_config()
