"""
XDR Framing Unit Tests
Tests for signerkeys/xdr/opaque.py
"""
import pytest

from signerkeys.schemas.errors import MalformedPayloadException
from signerkeys.xdr.opaque import (
    XdrUnpacker,
    pack_fixed_opaque,
    pack_int32,
    pack_uint32,
    pack_var_opaque,
    padding_length,
)


class TestPadding:

    @pytest.mark.parametrize("length,expected", [(0, 0), (1, 3), (2, 2), (3, 1), (4, 0), (29, 3), (32, 0)])
    def test_padding_length(self, length, expected):
        assert padding_length(length) == expected


class TestPack:

    def test_uint32_big_endian(self):
        assert pack_uint32(3) == b"\x00\x00\x00\x03"

    def test_int32_negative(self):
        assert pack_int32(-1) == b"\xff\xff\xff\xff"

    def test_fixed_opaque_exact_size(self):
        assert pack_fixed_opaque(b"\x01\x02\x03", 3) == b"\x01\x02\x03\x00"

    def test_fixed_opaque_wrong_size(self):
        with pytest.raises(MalformedPayloadException):
            pack_fixed_opaque(b"\x01\x02", 3)

    def test_var_opaque_layout(self):
        assert pack_var_opaque(b"\x01\x02\x03") == b"\x00\x00\x00\x03\x01\x02\x03\x00"

    def test_var_opaque_empty(self):
        assert pack_var_opaque(b"") == b"\x00\x00\x00\x00"

    def test_var_opaque_aligned_has_no_padding(self):
        assert pack_var_opaque(b"abcd") == b"\x00\x00\x00\x04abcd"

    def test_var_opaque_over_max(self):
        with pytest.raises(MalformedPayloadException, match="exceeds maximum"):
            pack_var_opaque(bytes(5), max_length=4)


class TestUnpacker:

    def test_reads_fields_in_order(self):
        data = pack_int32(-7) + pack_uint32(9) + pack_var_opaque(b"xyz")
        unpacker = XdrUnpacker(data)

        assert unpacker.unpack_int32() == -7
        assert unpacker.unpack_uint32() == 9
        assert unpacker.unpack_var_opaque() == b"xyz"
        unpacker.done()
        assert unpacker.remaining == 0

    def test_truncated_integer(self):
        with pytest.raises(MalformedPayloadException) as exc_info:
            XdrUnpacker(b"\x00\x00").unpack_uint32()
        assert exc_info.value.details["offset"] == 0

    def test_declared_length_exceeds_data(self):
        data = pack_uint32(16) + b"\x01\x02\x03\x00"
        with pytest.raises(MalformedPayloadException, match="declared length"):
            XdrUnpacker(data).unpack_var_opaque()

    def test_non_zero_padding(self):
        data = pack_uint32(3) + b"\x01\x02\x03\xff"
        with pytest.raises(MalformedPayloadException, match="padding") as exc_info:
            XdrUnpacker(data).unpack_var_opaque()
        assert exc_info.value.details["offset"] == 7

    def test_missing_padding(self):
        data = pack_uint32(3) + b"\x01\x02\x03"
        with pytest.raises(MalformedPayloadException):
            XdrUnpacker(data).unpack_var_opaque()

    def test_over_max(self):
        data = pack_var_opaque(bytes(8))
        with pytest.raises(MalformedPayloadException, match="exceeds maximum"):
            XdrUnpacker(data).unpack_var_opaque(max_length=4)

    def test_trailing_bytes(self):
        unpacker = XdrUnpacker(pack_uint32(1) + b"\x00")
        unpacker.unpack_uint32()
        with pytest.raises(MalformedPayloadException, match="trailing"):
            unpacker.done()

    def test_does_not_alias_input(self):
        buf = bytearray(pack_var_opaque(b"abc"))
        unpacker = XdrUnpacker(buf)
        buf[4] = ord("z")
        assert unpacker.unpack_var_opaque() == b"abc"
