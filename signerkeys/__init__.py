"""
Signer keys for an account-based ledger.

A signer key names one way an action can be authorized: an Ed25519 key,
a hash preimage commitment, a pre-authorized transaction, or an Ed25519
key bound to a payload. This package models them as a closed variant and
converts them to and from strkey text addresses.
"""
from . import strkey
from .config import SignerKeyConfig, get_config, set_config
from .schemas import (
    ContractViolationException,
    InvalidAddressException,
    MalformedPayloadException,
    SignerKeyException,
    TypeMismatchException,
    UnknownKeyTypeException,
    WrongVariantException,
)
from .signer import (
    SignerKey,
    SignerKeyRef,
    SignerKeyType,
    must_signer,
    signer_key_address,
    signer_key_from_address,
    signer_key_from_signed_payload,
    signer_keys_equal,
)
from .xdr import Ed25519SignedPayload

__version__ = "0.1.0"

__all__ = [
    "strkey",
    "SignerKeyConfig",
    "get_config",
    "set_config",
    "ContractViolationException",
    "InvalidAddressException",
    "MalformedPayloadException",
    "SignerKeyException",
    "TypeMismatchException",
    "UnknownKeyTypeException",
    "WrongVariantException",
    "SignerKey",
    "SignerKeyRef",
    "SignerKeyType",
    "must_signer",
    "signer_key_address",
    "signer_key_from_address",
    "signer_key_from_signed_payload",
    "signer_keys_equal",
    "Ed25519SignedPayload",
]
