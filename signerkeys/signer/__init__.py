"""
Signer keys: the variant type, address translation and equality.
"""
from .types import (
    FIXED_KEY_SIZE,
    FIXED_SIZE_TYPES,
    SignerKey,
    SignerKeyType,
    is_known_type,
)
from .address import (
    TYPE_BY_VERSION_BYTE,
    VERSION_BYTE_BY_TYPE,
    must_signer,
    signer_key_address,
    signer_key_from_address,
    signer_key_from_signed_payload,
    version_byte_for,
)
from .equality import signer_keys_equal
from .models import SignerKeyRef, SignerKeyTypeName

__all__ = [
    "FIXED_KEY_SIZE",
    "FIXED_SIZE_TYPES",
    "SignerKey",
    "SignerKeyType",
    "is_known_type",
    "TYPE_BY_VERSION_BYTE",
    "VERSION_BYTE_BY_TYPE",
    "must_signer",
    "signer_key_address",
    "signer_key_from_address",
    "signer_key_from_signed_payload",
    "version_byte_for",
    "signer_keys_equal",
    "SignerKeyRef",
    "SignerKeyTypeName",
]
