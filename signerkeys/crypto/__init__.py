"""
Core cryptographic utilities.

Hashing and checksum helpers shared by the strkey codec and signer keys.
"""
from .hashing import (
    sha256,
    crc16_xmodem,
)

__all__ = [
    "sha256",
    "crc16_xmodem",
]
