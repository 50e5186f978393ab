"""
Transport model for signer keys.

SignerKeyRef is the JSON-friendly form of a signer key: its type name and
strkey address. Validation parses the address, so a SignerKeyRef that
exists always describes a well-formed key.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from signerkeys.schemas.errors import InvalidAddressException
from signerkeys.signer.address import signer_key_from_address
from signerkeys.signer.types import SignerKey


SignerKeyTypeName = Literal["ed25519", "pre_auth_tx", "hash_x", "ed25519_signed_payload"]


class SignerKeyRef(BaseModel):
    """A signer key as exchanged in JSON documents."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: SignerKeyTypeName = Field(
        ...,
        description="Signer key type",
        examples=["ed25519"],
    )
    address: str = Field(
        ...,
        description="Strkey address of the signer key",
        examples=["GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"],
    )

    @model_validator(mode="after")
    def validate_address_matches_type(self) -> "SignerKeyRef":
        """Ensure the address parses and its decoded type matches `type`."""
        try:
            key = signer_key_from_address(self.address)
        except InvalidAddressException as e:
            raise ValueError(e.message) from e
        if key.type.name.lower() != self.type:
            raise ValueError(
                f"address decodes to {key.type.name.lower()}, not {self.type}"
            )
        return self

    def to_signer_key(self) -> SignerKey:
        return signer_key_from_address(self.address)

    @classmethod
    def from_signer_key(cls, key: SignerKey) -> "SignerKeyRef":
        address = key.address()
        return cls(type=key.type.name.lower(), address=address)
