"""
XDR binary framing for signer keys.
"""
from .opaque import (
    WORD_SIZE,
    XdrUnpacker,
    pack_fixed_opaque,
    pack_int32,
    pack_uint32,
    pack_var_opaque,
    padding_length,
)
from .signed_payload import (
    ED25519_KEY_SIZE,
    Ed25519SignedPayload,
    check_payload_length,
    decode_signed_payload,
    encode_signed_payload,
)

__all__ = [
    "WORD_SIZE",
    "XdrUnpacker",
    "pack_fixed_opaque",
    "pack_int32",
    "pack_uint32",
    "pack_var_opaque",
    "padding_length",
    "ED25519_KEY_SIZE",
    "Ed25519SignedPayload",
    "check_payload_length",
    "decode_signed_payload",
    "encode_signed_payload",
]
