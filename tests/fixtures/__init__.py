"""
Test fixtures package for signer key tests.

- common.py: factories for signer keys of every type
- vectors.py: known-good and known-bad strkey addresses

Usage:
    from fixtures import make_hash_x_key, ZERO_ACCOUNT_ADDRESS
"""

from .common import (
    make_all_signer_keys,
    make_ed25519_key,
    make_hash_x_key,
    make_key_bytes,
    make_pre_auth_tx_key,
    make_signed_payload_key,
)
from .vectors import *  # noqa: F401,F403

__all__ = [
    "make_all_signer_keys",
    "make_ed25519_key",
    "make_hash_x_key",
    "make_key_bytes",
    "make_pre_auth_tx_key",
    "make_signed_payload_key",
]
