"""
Common test fixtures shared by all modules.

Provides factory functions for signer keys of every type, so tests can
ask for "a HASH_X key" without caring about its bytes.
"""

from typing import Optional

from signerkeys.signer.types import SignerKey, SignerKeyType
from signerkeys.xdr.signed_payload import Ed25519SignedPayload

from .vectors import SAMPLE_ACCOUNT_KEY, PAYLOAD_3


def make_key_bytes(fill: int = 0x11) -> bytes:
    """Create 32 distinct-but-deterministic bytes starting at fill."""
    return bytes((fill + i) % 256 for i in range(32))


def make_ed25519_key(key: Optional[bytes] = None) -> SignerKey:
    return SignerKey(SignerKeyType.ED25519, key if key is not None else SAMPLE_ACCOUNT_KEY)


def make_pre_auth_tx_key(tx_hash: Optional[bytes] = None) -> SignerKey:
    return SignerKey(SignerKeyType.PRE_AUTH_TX, tx_hash if tx_hash is not None else make_key_bytes(0x40))


def make_hash_x_key(hash_x: Optional[bytes] = None) -> SignerKey:
    return SignerKey(SignerKeyType.HASH_X, hash_x if hash_x is not None else make_key_bytes(0x80))


def make_signed_payload_key(
    key: Optional[bytes] = None,
    payload: bytes = PAYLOAD_3,
) -> SignerKey:
    return SignerKey(
        SignerKeyType.ED25519_SIGNED_PAYLOAD,
        Ed25519SignedPayload(
            ed25519=key if key is not None else SAMPLE_ACCOUNT_KEY,
            payload=payload,
        ),
    )


def make_all_signer_keys() -> list[SignerKey]:
    """One key of every type."""
    return [
        make_ed25519_key(),
        make_pre_auth_tx_key(),
        make_hash_x_key(),
        make_signed_payload_key(),
    ]
