"""
Schemas & Errors
File: errors.py

Purpose: Error taxonomy shared by the strkey codec, the XDR framing and
the signer key modules. Defines a Pydantic model for structured error
communication and Python exceptions for control flow.

Two families of exceptions are kept apart:
- Input errors (InvalidAddress, MalformedPayload, TypeMismatch, StrKey*):
  the caller handed us bad data.
- Contract violations (UnknownKeyType, WrongVariant): the caller has a bug.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Address errors
    INVALID_ADDRESS = "INVALID_ADDRESS"
    STRKEY_ENCODE_ERROR = "STRKEY_ENCODE_ERROR"
    STRKEY_DECODE_ERROR = "STRKEY_DECODE_ERROR"

    # Binary framing errors
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"

    # Construction errors
    TYPE_MISMATCH = "TYPE_MISMATCH"

    # Contract violations
    CONTRACT_VIOLATION = "CONTRACT_VIOLATION"
    UNKNOWN_KEY_TYPE = "UNKNOWN_KEY_TYPE"
    WRONG_VARIANT = "WRONG_VARIANT"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class SignerKeyError(BaseModel):
    """
    Serializable form of a SignerKeyException.

    Produced by SignerKeyException.to_error_model(); to_exception() turns
    it back into a raisable exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_ADDRESS],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "SignerKeyException":
        """Convert this error model to a raised exception."""
        return SignerKeyException(
            message=self.message,
            code=self.code,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SignerKeyException(Exception):
    """
    Base exception for all signer key errors.

    Carries structured error information and can be converted to a
    SignerKeyError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "SIGNER_KEY_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> SignerKeyError:
        """Convert this exception to a SignerKeyError model."""
        return SignerKeyError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class StrKeyEncodeException(SignerKeyException):
    """Raised when raw bytes cannot be encoded as a strkey."""

    def __init__(
        self,
        message: str,
        version_byte: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if version_byte is not None:
            full_details["version_byte"] = version_byte
        super().__init__(
            message=message,
            code=ErrorCodes.STRKEY_ENCODE_ERROR,
            details=full_details,
        )


class StrKeyDecodeException(SignerKeyException):
    """Raised when a strkey fails alphabet, length, version or checksum checks."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.STRKEY_DECODE_ERROR,
            details=details,
        )


class InvalidAddressException(SignerKeyException):
    """Raised when a text address does not describe a valid signer key."""

    def __init__(
        self,
        message: str,
        address: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if address is not None:
            full_details["address"] = address
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ADDRESS,
            details=full_details,
        )


class MalformedPayloadException(SignerKeyException):
    """Raised when binary framing is inconsistent (length, padding, truncation)."""

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if offset is not None:
            full_details["offset"] = offset
        super().__init__(
            message=message,
            code=ErrorCodes.MALFORMED_PAYLOAD,
            details=full_details,
        )


class TypeMismatchException(SignerKeyException):
    """Raised when a constructor value does not match the shape its tag requires."""

    def __init__(
        self,
        message: str,
        key_type: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key_type is not None:
            full_details["key_type"] = str(key_type)
        super().__init__(
            message=message,
            code=ErrorCodes.TYPE_MISMATCH,
            details=full_details,
        )


class ContractViolationException(SignerKeyException):
    """
    Raised when a caller breaks the API contract.

    These are programming defects, not bad input. Catch them only at a
    top-level boundary.
    """

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.CONTRACT_VIOLATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            details=details,
        )


class UnknownKeyTypeException(ContractViolationException):
    """Raised when a signer key carries a tag outside the closed set."""

    def __init__(
        self,
        key_type: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["key_type"] = repr(key_type)
        super().__init__(
            message=f"unknown signer key type: {key_type!r}",
            code=ErrorCodes.UNKNOWN_KEY_TYPE,
            details=full_details,
        )
        self.key_type = key_type


class WrongVariantException(ContractViolationException):
    """Raised when a typed accessor is called on a key of another type."""

    def __init__(
        self,
        expected: Any,
        actual: Any,
    ) -> None:
        super().__init__(
            message=f"signer key is {actual!r}, not {expected!r}",
            code=ErrorCodes.WRONG_VARIANT,
            details={"expected": repr(expected), "actual": repr(actual)},
        )
        self.expected = expected
        self.actual = actual
