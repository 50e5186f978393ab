"""
Schemas & Errors
File: __init__.py

Purpose: Export the error taxonomy used across the package.
"""

from .errors import (
    ContractViolationException,
    ErrorCodes,
    InvalidAddressException,
    MalformedPayloadException,
    SignerKeyError,
    SignerKeyException,
    StrKeyDecodeException,
    StrKeyEncodeException,
    TypeMismatchException,
    UnknownKeyTypeException,
    WrongVariantException,
)

__all__ = [
    "ContractViolationException",
    "ErrorCodes",
    "InvalidAddressException",
    "MalformedPayloadException",
    "SignerKeyError",
    "SignerKeyException",
    "StrKeyDecodeException",
    "StrKeyEncodeException",
    "TypeMismatchException",
    "UnknownKeyTypeException",
    "WrongVariantException",
]
