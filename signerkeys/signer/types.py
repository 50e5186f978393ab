"""
Signer Key Variant
The closed set of mechanisms that may authorize an action on the ledger.

Cases (Hard Contract, adding one is a breaking protocol change):
- ED25519: 32-byte public key, authorized by a matching signature
- PRE_AUTH_TX: 32-byte transaction hash, authorized once that tx applies
- HASH_X: 32-byte sha256 commitment, authorized by revealing the preimage
- ED25519_SIGNED_PAYLOAD: key + payload, authorized by a signature over
  data that includes the payload

A SignerKey is an immutable value. "Setting" a key from an address means
building a new one with SignerKey.from_address and rebinding the name;
a failed parse raises before anything is rebound.
"""
from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional, Union

from signerkeys.crypto.hashing import sha256
from signerkeys.schemas.errors import (
    MalformedPayloadException,
    TypeMismatchException,
    UnknownKeyTypeException,
    WrongVariantException,
)
from signerkeys.xdr.opaque import (
    XdrUnpacker,
    pack_fixed_opaque,
    pack_int32,
    pack_var_opaque,
)
from signerkeys.xdr.signed_payload import (
    ED25519_KEY_SIZE,
    Ed25519SignedPayload,
    check_payload_length,
)

if TYPE_CHECKING:
    from signerkeys.config.runtime import SignerKeyConfig


FIXED_KEY_SIZE = 32


class SignerKeyType(IntEnum):
    """Signer key discriminant. Values are the XDR union discriminants."""

    ED25519 = 0
    PRE_AUTH_TX = 1
    HASH_X = 2
    ED25519_SIGNED_PAYLOAD = 3


FIXED_SIZE_TYPES: frozenset[SignerKeyType] = frozenset({
    SignerKeyType.ED25519,
    SignerKeyType.PRE_AUTH_TX,
    SignerKeyType.HASH_X,
})


SignerKeyValue = Union[bytes, Ed25519SignedPayload]


def _coerce_type(key_type: Any) -> Any:
    # Known discriminants become enum members; anything else is kept as-is
    # so dispatch can report it as an unknown type.
    if isinstance(key_type, SignerKeyType):
        return key_type
    try:
        return SignerKeyType(key_type)
    except (ValueError, TypeError):
        return key_type


def is_known_type(key_type: Any) -> bool:
    return isinstance(key_type, SignerKeyType)


@dataclass(frozen=True, eq=False)
class SignerKey:
    """
    Tagged union over the four signer key cases.

    Attributes:
        type: Which case is active
        value: 32 bytes for the fixed-size cases, an Ed25519SignedPayload
            for ED25519_SIGNED_PAYLOAD

    Raises:
        TypeMismatchException: If value does not have the shape type requires
    """
    type: SignerKeyType
    value: SignerKeyValue

    def __post_init__(self) -> None:
        key_type = _coerce_type(self.type)
        object.__setattr__(self, "type", key_type)

        if key_type in FIXED_SIZE_TYPES:
            if not isinstance(self.value, (bytes, bytearray, memoryview)):
                raise TypeMismatchException(
                    f"{key_type.name} expects {FIXED_KEY_SIZE} bytes, "
                    f"got {type(self.value).__name__}",
                    key_type=key_type.name,
                )
            raw = bytes(self.value)
            if len(raw) != FIXED_KEY_SIZE:
                raise TypeMismatchException(
                    f"{key_type.name} expects {FIXED_KEY_SIZE} bytes, got {len(raw)}",
                    key_type=key_type.name,
                )
            object.__setattr__(self, "value", raw)
        elif key_type is SignerKeyType.ED25519_SIGNED_PAYLOAD:
            if not isinstance(self.value, Ed25519SignedPayload):
                raise TypeMismatchException(
                    f"{key_type.name} expects Ed25519SignedPayload, "
                    f"got {type(self.value).__name__}",
                    key_type=key_type.name,
                )
        elif isinstance(self.value, (bytearray, memoryview)):
            # Unknown tag: keep the value, but never a mutable buffer
            object.__setattr__(self, "value", bytes(self.value))

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, key_type: SignerKeyType, value: SignerKeyValue) -> "SignerKey":
        """
        Build a signer key from a tag and its value.

        Unlike the raw dataclass constructor this refuses tags outside the
        closed set.

        Raises:
            TypeMismatchException: If the tag is unknown or value has the wrong shape
        """
        if not is_known_type(_coerce_type(key_type)):
            raise TypeMismatchException(
                f"unknown signer key type: {key_type!r}",
                key_type=key_type,
            )
        return cls(key_type, value)

    @classmethod
    def from_ed25519(cls, public_key: bytes) -> "SignerKey":
        return cls(SignerKeyType.ED25519, public_key)

    @classmethod
    def from_pre_auth_tx(cls, tx_hash: bytes) -> "SignerKey":
        return cls(SignerKeyType.PRE_AUTH_TX, tx_hash)

    @classmethod
    def from_hash_x(cls, hash_x: bytes) -> "SignerKey":
        return cls(SignerKeyType.HASH_X, hash_x)

    @classmethod
    def hash_x_from_preimage(cls, preimage: bytes) -> "SignerKey":
        """Build a HASH_X key committing to sha256(preimage)."""
        return cls(SignerKeyType.HASH_X, sha256(bytes(preimage)))

    @classmethod
    def from_ed25519_signed_payload(cls, public_key: bytes, payload: bytes) -> "SignerKey":
        return cls(
            SignerKeyType.ED25519_SIGNED_PAYLOAD,
            Ed25519SignedPayload(ed25519=public_key, payload=payload),
        )

    @classmethod
    def from_address(
        cls,
        address: str,
        config: Optional["SignerKeyConfig"] = None,
    ) -> "SignerKey":
        """Parse a strkey address (G..., X..., T... or P...)."""
        from signerkeys.signer.address import signer_key_from_address
        return signer_key_from_address(address, config)

    @classmethod
    def from_signed_payload(
        cls,
        account_address: str,
        payload: bytes,
        config: Optional["SignerKeyConfig"] = None,
    ) -> "SignerKey":
        """Build a signed-payload key from a G... account address and payload."""
        from signerkeys.signer.address import signer_key_from_signed_payload
        return signer_key_from_signed_payload(account_address, payload, config)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def _must(self, expected: SignerKeyType) -> SignerKeyValue:
        if self.type is not expected:
            raise WrongVariantException(expected=expected, actual=self.type)
        return self.value

    def as_ed25519(self) -> bytes:
        return self._must(SignerKeyType.ED25519)  # type: ignore[return-value]

    def as_pre_auth_tx(self) -> bytes:
        return self._must(SignerKeyType.PRE_AUTH_TX)  # type: ignore[return-value]

    def as_hash_x(self) -> bytes:
        return self._must(SignerKeyType.HASH_X)  # type: ignore[return-value]

    def as_ed25519_signed_payload(self) -> Ed25519SignedPayload:
        return self._must(SignerKeyType.ED25519_SIGNED_PAYLOAD)  # type: ignore[return-value]

    def get_ed25519(self) -> Optional[bytes]:
        return self.value if self.type is SignerKeyType.ED25519 else None  # type: ignore[return-value]

    def get_pre_auth_tx(self) -> Optional[bytes]:
        return self.value if self.type is SignerKeyType.PRE_AUTH_TX else None  # type: ignore[return-value]

    def get_hash_x(self) -> Optional[bytes]:
        return self.value if self.type is SignerKeyType.HASH_X else None  # type: ignore[return-value]

    def get_ed25519_signed_payload(self) -> Optional[Ed25519SignedPayload]:
        if self.type is SignerKeyType.ED25519_SIGNED_PAYLOAD:
            return self.value  # type: ignore[return-value]
        return None

    # -------------------------------------------------------------------------
    # Address & equality
    # -------------------------------------------------------------------------

    def address(self, config: Optional["SignerKeyConfig"] = None) -> str:
        """
        Return the strkey form of this key.

        Raises:
            UnknownKeyTypeException: If the tag is outside the closed set
            MalformedPayloadException: If a signed payload is outside the configured bounds
        """
        from signerkeys.signer.address import signer_key_address
        return signer_key_address(self, config)

    def equals(self, other: "SignerKey") -> bool:
        from signerkeys.signer.equality import signer_keys_equal
        return signer_keys_equal(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignerKey):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    # -------------------------------------------------------------------------
    # XDR wire form
    # -------------------------------------------------------------------------

    def to_xdr_bytes(self, config: Optional["SignerKeyConfig"] = None) -> bytes:
        """
        Serialize as the protocol's XDR union: int32 discriminant, then the arm.

        Raises:
            UnknownKeyTypeException: If the tag is outside the closed set
            MalformedPayloadException: If a signed payload is outside the configured bounds
        """
        if self.type in FIXED_SIZE_TYPES:
            return pack_int32(self.type) + pack_fixed_opaque(self.value, FIXED_KEY_SIZE)  # type: ignore[arg-type]
        if self.type is SignerKeyType.ED25519_SIGNED_PAYLOAD:
            from signerkeys.config.runtime import get_config
            cfg = config or get_config()
            signed = self.as_ed25519_signed_payload()
            check_payload_length(signed.payload, cfg.min_payload_length, cfg.max_payload_length)
            return (
                pack_int32(self.type)
                + pack_fixed_opaque(signed.ed25519, ED25519_KEY_SIZE)
                + pack_var_opaque(signed.payload, cfg.max_payload_length)
            )
        raise UnknownKeyTypeException(self.type)

    @classmethod
    def from_xdr_bytes(
        cls,
        data: bytes,
        config: Optional["SignerKeyConfig"] = None,
    ) -> "SignerKey":
        """
        Parse the XDR union form.

        Raises:
            MalformedPayloadException: On an unknown discriminant, bad framing,
                or a signed payload outside the configured bounds
        """
        unpacker = XdrUnpacker(data)
        discriminant = unpacker.unpack_int32()
        try:
            key_type = SignerKeyType(discriminant)
        except ValueError as e:
            raise MalformedPayloadException(
                f"unknown signer key discriminant: {discriminant}",
                offset=0,
            ) from e

        if key_type in FIXED_SIZE_TYPES:
            value: SignerKeyValue = unpacker.unpack_fixed_opaque(FIXED_KEY_SIZE)
        else:
            from signerkeys.config.runtime import get_config
            cfg = config or get_config()
            key = unpacker.unpack_fixed_opaque(ED25519_KEY_SIZE)
            payload = unpacker.unpack_var_opaque(cfg.max_payload_length)
            check_payload_length(payload, cfg.min_payload_length, cfg.max_payload_length)
            value = Ed25519SignedPayload(ed25519=key, payload=payload)
        unpacker.done()
        return cls(key_type, value)

    def to_xdr(self, config: Optional["SignerKeyConfig"] = None) -> str:
        """Base64 of to_xdr_bytes()."""
        return base64.b64encode(self.to_xdr_bytes(config)).decode("ascii")

    @classmethod
    def from_xdr(
        cls,
        xdr: str,
        config: Optional["SignerKeyConfig"] = None,
    ) -> "SignerKey":
        try:
            data = base64.b64decode(xdr, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedPayloadException(f"signer key XDR is not valid base64: {e}") from e
        return cls.from_xdr_bytes(data, config)
