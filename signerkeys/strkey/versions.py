"""
StrKey version bytes.

The version byte is the first decoded byte of every strkey. Values are
multiples of 8 so the first base32 character is the same for every
address of a kind (G for accounts, P for signed payloads, ...).
"""

from enum import IntEnum


class VersionByte(IntEnum):
    """Version byte tagging the semantic type of a strkey payload."""

    ACCOUNT_ID = 6 << 3  # G
    MUXED_ACCOUNT = 12 << 3  # M
    SEED = 18 << 3  # S
    HASH_TX = 19 << 3  # T
    HASH_X = 23 << 3  # X
    SIGNED_PAYLOAD = 15 << 3  # P
    CONTRACT = 2 << 3  # C
