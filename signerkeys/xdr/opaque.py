"""
XDR Framing Primitives
Canonical binary layout for the fixed and variable-length opaque fields
used by signer keys.

Canonical Framing Rules (Hard Contracts):
1. Integers are 4 bytes, big-endian
2. Fixed opaque[n]: n bytes, zero-padded to a multiple of 4
3. Variable opaque<max>: uint32 length, bytes, zero-padded to a multiple of 4
4. Padding bytes must be zero on decode
5. A full decode must consume every byte
"""
from __future__ import annotations

import struct
from typing import Optional

from signerkeys.schemas.errors import MalformedPayloadException


WORD_SIZE = 4


def padding_length(length: int) -> int:
    """Return the number of zero bytes that align length to a 4-byte word."""
    return (WORD_SIZE - length % WORD_SIZE) % WORD_SIZE


def pack_uint32(value: int) -> bytes:
    return struct.pack(">I", value)


def pack_int32(value: int) -> bytes:
    return struct.pack(">i", value)


def pack_fixed_opaque(data: bytes, size: int) -> bytes:
    """
    Pack a fixed-size opaque field.

    Raises:
        MalformedPayloadException: If data is not exactly size bytes
    """
    if len(data) != size:
        raise MalformedPayloadException(
            f"fixed opaque expects {size} bytes, got {len(data)}"
        )
    return bytes(data) + b"\x00" * padding_length(size)


def pack_var_opaque(data: bytes, max_length: Optional[int] = None) -> bytes:
    """
    Pack a variable-length opaque field: length prefix, data, zero padding.

    Args:
        data: Field content
        max_length: Optional protocol bound on the content length

    Raises:
        MalformedPayloadException: If data exceeds max_length
    """
    if max_length is not None and len(data) > max_length:
        raise MalformedPayloadException(
            f"opaque length {len(data)} exceeds maximum {max_length}",
            details={"length": len(data), "max_length": max_length},
        )
    return pack_uint32(len(data)) + bytes(data) + b"\x00" * padding_length(len(data))


class XdrUnpacker:
    """
    Cursor over a byte string that reads XDR fields in order.

    Every read checks bounds and padding; on failure it raises
    MalformedPayloadException with the offset of the offending field.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise MalformedPayloadException(
                f"need {size} bytes, only {self.remaining} remain",
                offset=self._offset,
            )
        chunk = self._data[self._offset:self._offset + size]
        self._offset += size
        return chunk

    def _skip_padding(self, length: int) -> None:
        pad_offset = self._offset
        pad = self._take(padding_length(length))
        if pad.strip(b"\x00"):
            raise MalformedPayloadException("non-zero padding bytes", offset=pad_offset)

    def unpack_uint32(self) -> int:
        return struct.unpack(">I", self._take(4))[0]

    def unpack_int32(self) -> int:
        return struct.unpack(">i", self._take(4))[0]

    def unpack_fixed_opaque(self, size: int) -> bytes:
        data = self._take(size)
        self._skip_padding(size)
        return data

    def unpack_var_opaque(self, max_length: Optional[int] = None) -> bytes:
        length_offset = self._offset
        length = self.unpack_uint32()
        if max_length is not None and length > max_length:
            raise MalformedPayloadException(
                f"opaque length {length} exceeds maximum {max_length}",
                offset=length_offset,
                details={"length": length, "max_length": max_length},
            )
        if length > self.remaining:
            raise MalformedPayloadException(
                f"declared length {length} exceeds remaining {self.remaining} bytes",
                offset=length_offset,
            )
        data = self._take(length)
        self._skip_padding(length)
        return data

    def done(self) -> None:
        """
        Assert that the whole input was consumed.

        Raises:
            MalformedPayloadException: If trailing bytes remain
        """
        if self.remaining:
            raise MalformedPayloadException(
                f"{self.remaining} trailing bytes after decode",
                offset=self._offset,
            )
