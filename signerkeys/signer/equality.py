"""
Structural equality for signer keys.

Keys of different types are never equal, even when they carry the same
32 bytes. Signed payloads compare key and payload as opaque bytes.
"""
from __future__ import annotations

from signerkeys.schemas.errors import UnknownKeyTypeException
from signerkeys.signer.types import FIXED_SIZE_TYPES, SignerKey, SignerKeyType, is_known_type


def signer_keys_equal(a: SignerKey, b: SignerKey) -> bool:
    """
    Return True if a and b are the same signer key.

    Raises:
        UnknownKeyTypeException: If either key carries an unknown tag
    """
    for key in (a, b):
        if not is_known_type(key.type):
            raise UnknownKeyTypeException(key.type)

    if a.type is not b.type:
        return False

    if a.type in FIXED_SIZE_TYPES:
        return a.value == b.value

    left = a.as_ed25519_signed_payload()
    right = b.as_ed25519_signed_payload()
    return left.ed25519 == right.ed25519 and left.payload == right.payload


__all__ = ["signer_keys_equal"]
