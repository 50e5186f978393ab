"""
StrKey Codec
Text-address encoding for raw key material.

Format (Hard Contract):
    strkey = base32(version_byte || payload || crc16_le(version_byte || payload))

- RFC 4648 base32 alphabet, upper case, "=" padding stripped
- Checksum is CRC-16/XModem over version byte and payload, little-endian
- Only canonical encodings decode: re-encoding the decoded bytes must
  reproduce the input exactly

This module knows nothing about signer keys. It validates alphabet,
checksum and version byte only; payload length policy belongs to callers.
"""
from __future__ import annotations

import base64
import binascii
import logging
import struct

from signerkeys.crypto.hashing import crc16_xmodem
from signerkeys.schemas.errors import StrKeyDecodeException, StrKeyEncodeException
from signerkeys.strkey.versions import VersionByte


logger = logging.getLogger(__name__)

# version byte + 2 checksum bytes
_MIN_DECODED_LENGTH = 3


def _checksum(data: bytes) -> bytes:
    return struct.pack("<H", crc16_xmodem(data))


def _parse_version(value: int) -> VersionByte | None:
    try:
        return VersionByte(value)
    except ValueError:
        return None


def encode(version_byte: VersionByte | int, raw: bytes) -> str:
    """
    Encode raw bytes as a strkey with the given version byte.

    Args:
        version_byte: One of the VersionByte values
        raw: Payload bytes, copied verbatim into the address

    Returns:
        Upper-case base32 address without padding

    Raises:
        StrKeyEncodeException: If the version byte is not recognized
    """
    version = _parse_version(int(version_byte))
    if version is None:
        raise StrKeyEncodeException(
            f"invalid version byte: {int(version_byte)}",
            version_byte=int(version_byte),
        )

    body = bytes([version]) + bytes(raw)
    encoded = base64.b32encode(body + _checksum(body))
    return encoded.decode("ascii").rstrip("=")


def _decode_check(text: str) -> tuple[VersionByte, bytes]:
    """Decode and fully validate a strkey, returning version and payload."""
    if not isinstance(text, str):
        raise StrKeyDecodeException(
            f"strkey must be a str, got {type(text).__name__}"
        )
    if "=" in text:
        raise StrKeyDecodeException("strkey must not carry base32 padding")

    try:
        data = text.encode("ascii")
    except UnicodeEncodeError as e:
        raise StrKeyDecodeException("strkey contains non-ascii characters") from e

    padded = data + b"=" * (-len(data) % 8)
    try:
        decoded = base64.b32decode(padded)
    except (binascii.Error, ValueError) as e:
        logger.debug("base32 decode failed for %r: %s", text, e)
        raise StrKeyDecodeException(
            f"strkey is not valid base32: {e}",
            details={"length": len(text)},
        ) from e

    if len(decoded) < _MIN_DECODED_LENGTH:
        raise StrKeyDecodeException(
            f"strkey too short: {len(decoded)} decoded bytes",
            details={"length": len(decoded)},
        )

    body, checksum = decoded[:-2], decoded[-2:]
    version = _parse_version(body[0])
    if version is None:
        raise StrKeyDecodeException(
            f"invalid version byte: {body[0]}",
            details={"version_byte": body[0]},
        )

    if _checksum(body) != checksum:
        raise StrKeyDecodeException("strkey checksum mismatch")

    payload = body[1:]

    # Trailing base32 bits must be zero
    if encode(version, payload) != text:
        raise StrKeyDecodeException("strkey is not canonically encoded")

    return version, payload


def decode_version(text: str) -> VersionByte:
    """
    Return the version byte of a strkey after validating it.

    Raises:
        StrKeyDecodeException: If the address is malformed
    """
    version, _ = _decode_check(text)
    return version


def decode(expected_version: VersionByte | int, text: str) -> bytes:
    """
    Decode a strkey and return its raw payload.

    Args:
        expected_version: Version byte the address must carry
        text: The address

    Returns:
        Payload bytes (without version byte and checksum)

    Raises:
        StrKeyDecodeException: If the address is malformed or carries a
            different version byte
    """
    version, payload = _decode_check(text)
    if version != int(expected_version):
        raise StrKeyDecodeException(
            f"version byte mismatch: expected {int(expected_version)}, got {int(version)}",
            details={"expected": int(expected_version), "actual": int(version)},
        )
    return payload


def is_valid(version_byte: VersionByte | int, text: str) -> bool:
    """Return True if text is a well-formed strkey with the given version byte."""
    try:
        decode(version_byte, text)
    except StrKeyDecodeException:
        return False
    return True


__all__ = [
    "encode",
    "decode",
    "decode_version",
    "is_valid",
]
