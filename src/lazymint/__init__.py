"""
lazymint - EIP-712 voucher signing for lazy NFT minting

Builds NFT vouchers and signs them so the NFT can be minted later,
at redemption time, instead of on creation.
"""

__version__ = "0.1.0"

from lazymint.abi import (
    EIP712_DOMAIN_TYPE,
    SIGNING_DOMAIN_NAME,
    SIGNING_DOMAIN_VERSION,
    VOUCHER_PRIMARY_TYPE,
    VOUCHER_TYPE,
    VOUCHER_TYPES,
)
from lazymint.config import NetworkConfig
from lazymint.eip712 import encode_digest, signable_message
from lazymint.exceptions import (
    ConfigurationError,
    DomainResolutionError,
    EncodingError,
    InvalidInputError,
    LazyMintError,
    SignatureError,
    SigningError,
    UnsupportedNetworkError,
    ValidationError,
)
from lazymint.minter import LazyMinter
from lazymint.signers import EvmVoucherSigner, VoucherSigner
from lazymint.types import NFTVoucher, SignedVoucher, SigningDomain, TypedDataEnvelope

__all__ = [
    "__version__",
    # Minter
    "LazyMinter",
    # Signers
    "VoucherSigner",
    "EvmVoucherSigner",
    # Types
    "NFTVoucher",
    "SigningDomain",
    "TypedDataEnvelope",
    "SignedVoucher",
    # Schema
    "EIP712_DOMAIN_TYPE",
    "VOUCHER_TYPE",
    "VOUCHER_TYPES",
    "VOUCHER_PRIMARY_TYPE",
    "SIGNING_DOMAIN_NAME",
    "SIGNING_DOMAIN_VERSION",
    # EIP-712
    "signable_message",
    "encode_digest",
    # Config
    "NetworkConfig",
    # Exceptions
    "LazyMintError",
    "ValidationError",
    "InvalidInputError",
    "EncodingError",
    "ConfigurationError",
    "DomainResolutionError",
    "UnsupportedNetworkError",
    "SignatureError",
    "SigningError",
]
