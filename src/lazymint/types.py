"""
Type definitions for lazy-minting vouchers
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from lazymint.abi import UINT256_MAX, VOUCHER_PRIMARY_TYPE
from lazymint.exceptions import InvalidInputError


def _coerce_uint(value: Any) -> Any:
    """Accept exact integers only; floats lose precision above 2**53."""
    if isinstance(value, bool):
        raise ValueError("booleans are not integers")
    if isinstance(value, str) and value.isascii() and value.isdigit():
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"expected an exact integer, got {type(value).__name__}")
    if not 0 <= value <= UINT256_MAX:
        raise ValueError("must be within the uint256 range")
    return value


class NFTVoucher(BaseModel):
    """An un-minted NFT: id, metadata URI and the minimum price (in wei) the creator accepts"""

    token_id: int = Field(alias="tokenId")
    uri: str = Field(strict=True)
    min_price: int = Field(0, alias="minPrice")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("token_id", "min_price", mode="before")
    @classmethod
    def _exact_integer(cls, value: Any) -> Any:
        return _coerce_uint(value)

    @field_validator("uri")
    @classmethod
    def _utf8_encodable(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"not encodable as UTF-8 at position {e.start}")
        return value

    @classmethod
    def from_fields(cls, token_id: Any, uri: Any, min_price: Any = 0) -> "NFTVoucher":
        """Build a voucher, raising InvalidInputError instead of pydantic's ValidationError."""
        try:
            return cls(token_id=token_id, uri=uri, min_price=min_price)
        except PydanticValidationError as e:
            error = e.errors()[0]
            loc = error.get("loc") or ("voucher",)
            name = str(loc[0])
            field = (cls.model_fields[name].alias if name in cls.model_fields else None) or name
            raise InvalidInputError(field, f"Invalid {field}: {error.get('msg')}") from e

    def to_message(self) -> dict[str, Any]:
        """EIP-712 message dict"""
        return self.model_dump(by_alias=True)


class SigningDomain(BaseModel):
    """EIP-712 signing domain"""

    name: str
    version: str
    chain_id: int = Field(alias="chainId", ge=0)
    verifying_contract: str = Field(alias="verifyingContract")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TypedDataEnvelope(BaseModel):
    """Full EIP-712 typed data: domain, type schema, primary type and message"""

    types: dict[str, list[dict[str, str]]]
    primary_type: str = Field(VOUCHER_PRIMARY_TYPE, alias="primaryType")
    domain: SigningDomain
    message: NFTVoucher

    model_config = ConfigDict(populate_by_name=True)

    def to_eip712(self) -> dict[str, Any]:
        """Plain dict in the layout eth_account / ethers expect"""
        return self.model_dump(by_alias=True)


class SignedVoucher(BaseModel):
    """Result of LazyMinter.create_voucher()"""

    voucher: NFTVoucher
    digest: bytes
    signature: bytes

    model_config = ConfigDict(frozen=True)

    @field_validator("digest")
    @classmethod
    def _digest_length(cls, value: bytes) -> bytes:
        if len(value) != 32:
            raise ValueError(f"digest must be 32 bytes, got {len(value)}")
        return value

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation with 0x-prefixed hex bytes"""
        return {
            "voucher": self.voucher.to_message(),
            "digest": "0x" + self.digest.hex(),
            "signature": "0x" + self.signature.hex(),
        }

    def to_contract_tuple(self) -> tuple[int, int, str, bytes]:
        """Voucher struct as passed to the redeeming contract: (tokenId, minPrice, uri, signature)"""
        return (
            self.voucher.token_id,
            self.voucher.min_price,
            self.voucher.uri,
            self.signature,
        )
