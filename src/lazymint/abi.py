"""
Shared EIP-712 schema definitions for the LazyNFT voucher
"""

from typing import Any, List

# These constants must match the ones compiled into the redeeming contract.
SIGNING_DOMAIN_NAME = "LazyNFT-Voucher"
SIGNING_DOMAIN_VERSION = "1"

# EIP-712 Primary Type for vouchers
VOUCHER_PRIMARY_TYPE = "Voucher"

# EIP-712 Domain Type
# keccak256("EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)")
EIP712_DOMAIN_TYPE: List[dict[str, str]] = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

# keccak256("Voucher(uint256 tokenId,uint256 minPrice,string uri)")
VOUCHER_TYPE: List[dict[str, str]] = [
    {"name": "tokenId", "type": "uint256"},
    {"name": "minPrice", "type": "uint256"},
    {"name": "uri", "type": "string"},
]

VOUCHER_TYPES: dict[str, Any] = {
    "EIP712Domain": EIP712_DOMAIN_TYPE,
    VOUCHER_PRIMARY_TYPE: VOUCHER_TYPE,
}

UINT256_MAX = 2**256 - 1
