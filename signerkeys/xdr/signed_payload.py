"""
Signed-Payload Codec
Binary layout of the Ed25519 signed-payload signer key.

Layout (Hard Contract):
    ed25519[32] || uint32 len || payload[len] || zero padding to 4 bytes

This is the protocol's canonical XDR struct {uint256 ed25519; opaque
payload<64>;}. The same bytes are the raw payload of a "P..." strkey.

No payload length bound is applied here unless the caller passes one;
the bound is a protocol parameter (see signerkeys.config).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from signerkeys.schemas.errors import MalformedPayloadException, TypeMismatchException
from signerkeys.xdr.opaque import XdrUnpacker, pack_fixed_opaque, pack_var_opaque


ED25519_KEY_SIZE = 32


@dataclass(frozen=True)
class Ed25519SignedPayload:
    """
    An Ed25519 public key paired with the payload its signature must cover.

    Attributes:
        ed25519: 32-byte Ed25519 public key
        payload: Opaque payload bytes, snapshotted on construction
    """
    ed25519: bytes
    payload: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.ed25519, (bytes, bytearray, memoryview)):
            raise TypeMismatchException(
                f"ed25519 key must be bytes, got {type(self.ed25519).__name__}"
            )
        if not isinstance(self.payload, (bytes, bytearray, memoryview)):
            raise TypeMismatchException(
                f"payload must be bytes, got {type(self.payload).__name__}"
            )
        key = bytes(self.ed25519)
        if len(key) != ED25519_KEY_SIZE:
            raise TypeMismatchException(
                f"ed25519 key must be {ED25519_KEY_SIZE} bytes, got {len(key)}"
            )
        # Frozen dataclass: snapshot caller buffers into immutable bytes
        object.__setattr__(self, "ed25519", key)
        object.__setattr__(self, "payload", bytes(self.payload))

    def to_bytes(self) -> bytes:
        return encode_signed_payload(self.ed25519, self.payload)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        max_payload_length: Optional[int] = None,
    ) -> "Ed25519SignedPayload":
        key, payload = decode_signed_payload(data, max_payload_length)
        return cls(ed25519=key, payload=payload)


def encode_signed_payload(key: bytes, payload: bytes) -> bytes:
    """
    Marshal an Ed25519 key and payload into their canonical binary form.

    Args:
        key: 32-byte Ed25519 public key
        payload: Payload bytes of any length

    Returns:
        key || uint32 len || payload || zero padding

    Raises:
        MalformedPayloadException: If key is not 32 bytes
    """
    return pack_fixed_opaque(key, ED25519_KEY_SIZE) + pack_var_opaque(payload)


def decode_signed_payload(
    data: bytes,
    max_payload_length: Optional[int] = None,
) -> tuple[bytes, bytes]:
    """
    Unmarshal the canonical binary form back into (key, payload).

    Args:
        data: Encoded bytes
        max_payload_length: Optional bound on the payload length

    Returns:
        Tuple of (32-byte key, payload bytes)

    Raises:
        MalformedPayloadException: If the input is shorter than the key,
            the declared length disagrees with the remaining bytes,
            padding is non-zero, or the payload exceeds max_payload_length
    """
    if len(data) < ED25519_KEY_SIZE:
        raise MalformedPayloadException(
            f"signed payload shorter than the {ED25519_KEY_SIZE}-byte key: {len(data)} bytes",
            details={"length": len(data)},
        )

    unpacker = XdrUnpacker(data)
    key = unpacker.unpack_fixed_opaque(ED25519_KEY_SIZE)
    payload = unpacker.unpack_var_opaque(max_payload_length)
    unpacker.done()
    return key, payload


def check_payload_length(payload: bytes, min_length: int, max_length: int) -> None:
    """
    Enforce configured payload bounds, inclusive on both ends.

    Raises:
        MalformedPayloadException: If len(payload) is outside [min_length, max_length]
    """
    if not min_length <= len(payload) <= max_length:
        raise MalformedPayloadException(
            f"payload length {len(payload)} outside [{min_length}, {max_length}]",
            details={
                "length": len(payload),
                "min_length": min_length,
                "max_length": max_length,
            },
        )
