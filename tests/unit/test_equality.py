"""
Equality Unit Tests
Tests for signerkeys/signer/equality.py
"""
import pytest

from signerkeys.schemas.errors import ContractViolationException, UnknownKeyTypeException
from signerkeys.signer.equality import signer_keys_equal
from signerkeys.signer.types import SignerKey, SignerKeyType

from fixtures.common import make_all_signer_keys, make_key_bytes, make_signed_payload_key
from fixtures.vectors import SAMPLE_ACCOUNT_KEY, ZERO_KEY


class TestEquality:

    def test_reflexive(self, any_signer_key):
        assert signer_keys_equal(any_signer_key, any_signer_key)
        assert any_signer_key.equals(any_signer_key)

    def test_equal_copies(self):
        for left, right in zip(make_all_signer_keys(), make_all_signer_keys()):
            assert left is not right
            assert left == right
            assert hash(left) == hash(right)

    def test_symmetric(self):
        keys = make_all_signer_keys()
        for left in keys:
            for right in keys:
                assert signer_keys_equal(left, right) == signer_keys_equal(right, left)

    @pytest.mark.parametrize("left_type,right_type", [
        (SignerKeyType.ED25519, SignerKeyType.HASH_X),
        (SignerKeyType.ED25519, SignerKeyType.PRE_AUTH_TX),
        (SignerKeyType.HASH_X, SignerKeyType.PRE_AUTH_TX),
    ])
    def test_tag_discriminating(self, left_type, right_type):
        """Identical 32-byte content under different tags is not equal."""
        left = SignerKey(left_type, ZERO_KEY)
        right = SignerKey(right_type, ZERO_KEY)
        assert not signer_keys_equal(left, right)
        assert left != right

    def test_fixed_content_differs(self):
        assert SignerKey.from_hash_x(ZERO_KEY) != SignerKey.from_hash_x(make_key_bytes())

    def test_signed_payload_trailing_zero_matters(self):
        left = make_signed_payload_key(payload=b"\x01\x02\x03")
        right = make_signed_payload_key(payload=b"\x01\x02\x03\x00")
        assert not signer_keys_equal(left, right)

    def test_signed_payload_key_matters(self):
        left = make_signed_payload_key(key=SAMPLE_ACCOUNT_KEY)
        right = make_signed_payload_key(key=ZERO_KEY)
        assert left != right

    def test_signed_payload_vs_ed25519_same_key(self):
        assert make_signed_payload_key(payload=b"") != SignerKey.from_ed25519(SAMPLE_ACCOUNT_KEY)

    def test_not_equal_to_other_objects(self):
        key = SignerKey.from_ed25519(ZERO_KEY)
        assert key != ZERO_KEY
        assert key != key.address()

    def test_usable_in_sets(self):
        keys = make_all_signer_keys() + make_all_signer_keys()
        assert len(set(keys)) == 4


class TestUnknownTypeEquality:
    """Comparing a key with an unknown tag is a caller bug, never a silent False."""

    def test_left_unknown(self):
        with pytest.raises(UnknownKeyTypeException):
            signer_keys_equal(SignerKey(9, ZERO_KEY), SignerKey.from_ed25519(ZERO_KEY))

    def test_right_unknown(self):
        with pytest.raises(UnknownKeyTypeException):
            signer_keys_equal(SignerKey.from_ed25519(ZERO_KEY), SignerKey(9, ZERO_KEY))

    def test_both_unknown(self):
        with pytest.raises(ContractViolationException):
            SignerKey(9, ZERO_KEY) == SignerKey(9, ZERO_KEY)
