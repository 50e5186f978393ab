"""
Hashing Unit Tests
Tests for signerkeys/crypto/hashing.py

Tests:
- sha256 stability
- crc16_xmodem against the standard check value
"""
import hashlib
import pytest

from signerkeys.crypto.hashing import (
    sha256,
    crc16_xmodem,
)


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        """Test sha256 produces correct hash for known input."""
        expected = hashlib.sha256(b"hello").digest()
        result = sha256(b"hello")

        assert result == expected
        assert len(result) == 32

    def test_sha256_empty_bytes(self):
        """Test sha256 of empty bytes."""
        assert sha256(b"") == hashlib.sha256(b"").digest()

    def test_sha256_different_inputs_different_outputs(self):
        """Test different inputs produce different hashes."""
        assert sha256(b"input1") != sha256(b"input2")


class TestCrc16Xmodem:
    """Tests for crc16_xmodem()."""

    def test_check_value(self):
        """CRC-16/XModem check value for '123456789' is 0x31C3."""
        assert crc16_xmodem(b"123456789") == 0x31C3

    def test_empty_is_zero(self):
        assert crc16_xmodem(b"") == 0

    def test_zero_account_checksum(self):
        """Checksum trailer of the all-zero account strkey is 0xE558."""
        assert crc16_xmodem(bytes([6 << 3]) + bytes(32)) == 0xE558

    def test_fits_in_sixteen_bits(self):
        assert 0 <= crc16_xmodem(bytes(range(256))) <= 0xFFFF
