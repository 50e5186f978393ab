"""
Hashing Utilities
Hash and checksum primitives used by signer keys and the strkey codec.

This module provides:
- SHA-256 hashing for raw bytes (HashX commitments)
- CRC-16/XModem checksums (strkey trailer)

Determinism Notes:
- Always hash raw bytes exactly as given
- All operations are deterministic
"""
from __future__ import annotations

import binascii
import hashlib


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def crc16_xmodem(data: bytes) -> int:
    """
    Compute the CRC-16/XModem checksum of raw bytes.

    Polynomial 0x1021, initial value 0, no reflection, no final xor.
    binascii.crc_hqx implements exactly this when seeded with 0.

    Example:
        >>> hex(crc16_xmodem(b"123456789"))
        '0x31c3'
    """
    return binascii.crc_hqx(data, 0)


__all__ = [
    "sha256",
    "crc16_xmodem",
]
