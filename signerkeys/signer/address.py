"""
Address Translator
Maps signer keys to and from strkey text addresses.

Version byte mapping (Hard Contract):
    ED25519                 <-> ACCOUNT_ID      (G...)
    HASH_X                  <-> HASH_X          (X...)
    PRE_AUTH_TX             <-> HASH_TX         (T...)
    ED25519_SIGNED_PAYLOAD  <-> SIGNED_PAYLOAD  (P...)

Fixed-size cases carry their 32 bytes verbatim. The signed-payload case
carries the output of the signed-payload codec.

Every decode either returns a complete SignerKey or raises; no partial
value is ever produced.
"""
from __future__ import annotations

import logging
from typing import Optional

from signerkeys import strkey
from signerkeys.config.runtime import SignerKeyConfig, get_config
from signerkeys.schemas.errors import (
    ContractViolationException,
    InvalidAddressException,
    MalformedPayloadException,
    StrKeyDecodeException,
    UnknownKeyTypeException,
)
from signerkeys.signer.types import FIXED_KEY_SIZE, FIXED_SIZE_TYPES, SignerKey, SignerKeyType
from signerkeys.strkey import VersionByte
from signerkeys.xdr.signed_payload import Ed25519SignedPayload, check_payload_length


logger = logging.getLogger(__name__)


VERSION_BYTE_BY_TYPE: dict[SignerKeyType, VersionByte] = {
    SignerKeyType.ED25519: VersionByte.ACCOUNT_ID,
    SignerKeyType.HASH_X: VersionByte.HASH_X,
    SignerKeyType.PRE_AUTH_TX: VersionByte.HASH_TX,
    SignerKeyType.ED25519_SIGNED_PAYLOAD: VersionByte.SIGNED_PAYLOAD,
}

TYPE_BY_VERSION_BYTE: dict[VersionByte, SignerKeyType] = {
    version: key_type for key_type, version in VERSION_BYTE_BY_TYPE.items()
}


def version_byte_for(key_type: SignerKeyType) -> VersionByte:
    """
    Return the strkey version byte for a signer key type.

    Raises:
        UnknownKeyTypeException: If key_type is outside the closed set
    """
    version = VERSION_BYTE_BY_TYPE.get(key_type) if isinstance(key_type, SignerKeyType) else None
    if version is None:
        raise UnknownKeyTypeException(key_type)
    return version


def _check_payload_length(payload: bytes, config: SignerKeyConfig) -> None:
    check_payload_length(payload, config.min_payload_length, config.max_payload_length)


def signer_key_address(
    key: SignerKey,
    config: Optional[SignerKeyConfig] = None,
) -> str:
    """
    Encode a signer key as its strkey address.

    Signed payloads are held to the same bounds as on decode, so every
    address produced here parses back under the same configuration.
    Errors from the strkey codec propagate unchanged.

    Raises:
        UnknownKeyTypeException: If the key carries an unknown tag
        MalformedPayloadException: If a signed payload is outside the configured bounds
    """
    version = version_byte_for(key.type)

    if key.type is SignerKeyType.ED25519_SIGNED_PAYLOAD:
        signed = key.as_ed25519_signed_payload()
        _check_payload_length(signed.payload, config or get_config())
        raw = signed.to_bytes()
    else:
        raw = key.value  # type: ignore[assignment]

    return strkey.encode(version, raw)


def signer_key_from_address(
    address: str,
    config: Optional[SignerKeyConfig] = None,
) -> SignerKey:
    """
    Parse a strkey address into a signer key.

    Args:
        address: G..., X..., T... or P... address
        config: Payload bounds; defaults to the process-wide configuration

    Returns:
        A fully constructed SignerKey

    Raises:
        InvalidAddressException: If the address fails strkey validation,
            carries a version byte that is not a signer key type, has the
            wrong raw length, or holds a malformed signed payload
    """
    cfg = config or get_config()

    try:
        version = strkey.decode_version(address)
        raw = strkey.decode(version, address)
    except StrKeyDecodeException as e:
        logger.debug("rejecting signer address %r: %s", address, e.message)
        raise InvalidAddressException(
            f"failed to decode address: {e.message}",
            address=address,
        ) from e

    key_type = TYPE_BY_VERSION_BYTE.get(version)
    if key_type is None:
        raise InvalidAddressException(
            f"invalid version byte: {int(version)}",
            address=address,
            details={"version_byte": int(version)},
        )

    if key_type in FIXED_SIZE_TYPES:
        if len(raw) != FIXED_KEY_SIZE:
            raise InvalidAddressException(
                f"{key_type.name} address must hold {FIXED_KEY_SIZE} bytes, got {len(raw)}",
                address=address,
                details={"length": len(raw)},
            )
        return SignerKey(key_type, raw)

    try:
        signed = Ed25519SignedPayload.from_bytes(raw, cfg.max_payload_length)
        _check_payload_length(signed.payload, cfg)
    except MalformedPayloadException as e:
        logger.debug("rejecting signed payload address %r: %s", address, e.message)
        raise InvalidAddressException(
            f"malformed signed payload: {e.message}",
            address=address,
            details=dict(e.details),
        ) from e
    return SignerKey(key_type, signed)


def signer_key_from_signed_payload(
    account_address: str,
    payload: bytes,
    config: Optional[SignerKeyConfig] = None,
) -> SignerKey:
    """
    Build a signed-payload signer key from an account address and payload.

    Args:
        account_address: G... address of the Ed25519 key
        payload: Payload bytes the signature must cover

    Raises:
        InvalidAddressException: If account_address is not a valid G... address
        MalformedPayloadException: If the payload length is outside the configured bounds
        TypeMismatchException: If payload is not a bytes-like value
    """
    cfg = config or get_config()

    try:
        raw = strkey.decode(VersionByte.ACCOUNT_ID, account_address)
    except StrKeyDecodeException as e:
        raise InvalidAddressException(
            f"failed to decode account address: {e.message}",
            address=account_address,
        ) from e

    if len(raw) != FIXED_KEY_SIZE:
        raise InvalidAddressException(
            f"account address must hold {FIXED_KEY_SIZE} bytes, got {len(raw)}",
            address=account_address,
        )

    signed = Ed25519SignedPayload(ed25519=raw, payload=payload)
    _check_payload_length(signed.payload, cfg)
    return SignerKey(SignerKeyType.ED25519_SIGNED_PAYLOAD, signed)


def must_signer(address: str) -> SignerKey:
    """
    Parse an address that the caller guarantees is valid, e.g. a literal.

    Raises:
        ContractViolationException: If the address does not parse
    """
    try:
        return signer_key_from_address(address)
    except InvalidAddressException as e:
        raise ContractViolationException(
            f"invalid signer key address literal: {address!r}",
            details={"cause": e.message},
        ) from e
