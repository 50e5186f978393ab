"""
Runtime Configuration Module

Provides configuration loading for signer key handling.
"""

from .runtime import (
    DEFAULT_MAX_PAYLOAD_LENGTH,
    DEFAULT_MIN_PAYLOAD_LENGTH,
    SignerKeyConfig,
    get_config,
    set_config,
)

__all__ = [
    "DEFAULT_MAX_PAYLOAD_LENGTH",
    "DEFAULT_MIN_PAYLOAD_LENGTH",
    "SignerKeyConfig",
    "get_config",
    "set_config",
]
