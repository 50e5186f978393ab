"""
StrKey text-address codec.

Signer key code talks to this package only through encode,
decode_version and decode.
"""
from .codec import decode, decode_version, encode, is_valid
from .versions import VersionByte

__all__ = [
    "VersionByte",
    "encode",
    "decode",
    "decode_version",
    "is_valid",
]
