"""
Runtime Configuration

Protocol parameters for signer key handling. The signed-payload length
bounds belong to the enclosing protocol, so they are configuration rather
than constants baked into the codec.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()


# Enclosing protocol declares the signed payload as opaque<64>
DEFAULT_MAX_PAYLOAD_LENGTH = 64
DEFAULT_MIN_PAYLOAD_LENGTH = 0


@dataclass(frozen=True)
class SignerKeyConfig:
    """
    Configuration for signer key parsing and construction.

    Can be loaded from:
    - Environment variables (optionally via a .env file)
    - A dictionary
    - Programmatic construction
    """
    max_payload_length: int = DEFAULT_MAX_PAYLOAD_LENGTH
    min_payload_length: int = DEFAULT_MIN_PAYLOAD_LENGTH

    def __post_init__(self) -> None:
        if self.min_payload_length < 0:
            raise ValueError(
                f"min_payload_length must be non-negative, got {self.min_payload_length}"
            )
        if self.max_payload_length < self.min_payload_length:
            raise ValueError(
                f"max_payload_length ({self.max_payload_length}) is below "
                f"min_payload_length ({self.min_payload_length})"
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SIGNERKEYS_MAX_PAYLOAD_LENGTH: upper bound on signed payload bytes
        - SIGNERKEYS_MIN_PAYLOAD_LENGTH: lower bound on signed payload bytes
        """
        overrides: dict[str, Any] = {}

        if os.getenv("SIGNERKEYS_MAX_PAYLOAD_LENGTH"):
            overrides["max_payload_length"] = int(os.getenv("SIGNERKEYS_MAX_PAYLOAD_LENGTH", ""))
        if os.getenv("SIGNERKEYS_MIN_PAYLOAD_LENGTH"):
            overrides["min_payload_length"] = int(os.getenv("SIGNERKEYS_MIN_PAYLOAD_LENGTH", ""))

        return overrides

    @classmethod
    def from_env(cls) -> "SignerKeyConfig":
        """Load configuration from environment variables, defaulting the rest."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SignerKeyConfig":
        """Load configuration from a dictionary (supports partial data)."""
        return cls(
            max_payload_length=int(data.get("max_payload_length", DEFAULT_MAX_PAYLOAD_LENGTH)),
            min_payload_length=int(data.get("min_payload_length", DEFAULT_MIN_PAYLOAD_LENGTH)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "max_payload_length": self.max_payload_length,
            "min_payload_length": self.min_payload_length,
        }


_config: Optional[SignerKeyConfig] = None


def get_config() -> SignerKeyConfig:
    """Return the process-wide configuration, loading it from env on first use."""
    global _config
    if _config is None:
        _config = SignerKeyConfig.from_env()
    return _config


def set_config(config: Optional[SignerKeyConfig]) -> None:
    """Replace the process-wide configuration. Passing None forces a reload from env."""
    global _config
    _config = config
