import pytest
from eth_hash.auto import keccak

from lazymint.abi import VOUCHER_TYPES
from lazymint.eip712 import encode_digest, signable_message
from lazymint.exceptions import EncodingError, InvalidInputError

# Reference example from the EIP-712 specification
MAIL_TYPED_DATA = {
    "types": {
        "EIP712Domain": [
            {"name": "name", "type": "string"},
            {"name": "version", "type": "string"},
            {"name": "chainId", "type": "uint256"},
            {"name": "verifyingContract", "type": "address"},
        ],
        "Person": [
            {"name": "name", "type": "string"},
            {"name": "wallet", "type": "address"},
        ],
        "Mail": [
            {"name": "from", "type": "Person"},
            {"name": "to", "type": "Person"},
            {"name": "contents", "type": "string"},
        ],
    },
    "primaryType": "Mail",
    "domain": {
        "name": "Ether Mail",
        "version": "1",
        "chainId": 1,
        "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
    },
    "message": {
        "from": {"name": "Cow", "wallet": "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"},
        "to": {"name": "Bob", "wallet": "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB"},
        "contents": "Hello, Bob!",
    },
}

VOUCHER_DOMAIN_TYPE_HASH = keccak(
    b"EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
)
VOUCHER_TYPE_HASH = keccak(b"Voucher(uint256 tokenId,uint256 minPrice,string uri)")
CONTRACT = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


def _voucher_typed_data(types=VOUCHER_TYPES, token_id=42, uri="ipfs://test", min_price=1000):
    return {
        "types": types,
        "primaryType": "Voucher",
        "domain": {
            "name": "LazyNFT-Voucher",
            "version": "1",
            "chainId": 31337,
            "verifyingContract": CONTRACT,
        },
        "message": {"tokenId": token_id, "uri": uri, "minPrice": min_price},
    }


def _word(value: int) -> bytes:
    return value.to_bytes(32, "big")


def test_mail_reference_vectors():
    """Test against the hashes published with the EIP-712 specification"""
    signable = signable_message(MAIL_TYPED_DATA)

    assert signable.header.hex() == (
        "f2cee375fa42b42143804025fc449deafd50cc031ca257e0b194a650a912090f"
    )
    assert signable.body.hex() == (
        "c52c0ee5d84264471806290a3f2c4cecfc5490626bf912d01f240d7a274b371e"
    )
    assert encode_digest(MAIL_TYPED_DATA).hex() == (
        "be609aee343fb3c4b28e1df9e632fca64fcfaede20f02e86244efddf30957bd2"
    )


def test_domain_type_hash_constant():
    """Test EIP712Domain type hash matches the well-known constant"""
    assert VOUCHER_DOMAIN_TYPE_HASH.hex() == (
        "8b73c3c69bb8fe3d512ecc4cf759cc79239f7b179b0ffacaa9a75d522b39400f"
    )


def test_voucher_digest_layout():
    """Test the digest equals the hashStruct layout written out field by field"""
    domain_separator = keccak(
        VOUCHER_DOMAIN_TYPE_HASH
        + keccak(b"LazyNFT-Voucher")
        + keccak(b"1")
        + _word(31337)
        + bytes(12)
        + bytes.fromhex(CONTRACT[2:])
    )
    message_hash = keccak(VOUCHER_TYPE_HASH + _word(42) + _word(1000) + keccak(b"ipfs://test"))

    signable = signable_message(_voucher_typed_data())

    assert signable.header == domain_separator
    assert signable.body == message_hash
    assert encode_digest(_voucher_typed_data()) == keccak(
        b"\x19\x01" + domain_separator + message_hash
    )


def test_large_uint256_values():
    """Test values above 2**53 keep full precision"""
    big = 2**256 - 1
    signable = signable_message(_voucher_typed_data(token_id=big, min_price=2**53 + 1))

    assert signable.body == keccak(
        VOUCHER_TYPE_HASH + _word(big) + _word(2**53 + 1) + keccak(b"ipfs://test")
    )


def test_swapped_field_order_changes_digest():
    """Test schema fidelity: reordering Voucher fields changes the digest"""
    swapped = {
        "EIP712Domain": VOUCHER_TYPES["EIP712Domain"],
        "Voucher": [
            {"name": "minPrice", "type": "uint256"},
            {"name": "tokenId", "type": "uint256"},
            {"name": "uri", "type": "string"},
        ],
    }

    assert encode_digest(_voucher_typed_data()) != encode_digest(_voucher_typed_data(swapped))


def test_changed_type_string_changes_digest():
    retyped = {
        "EIP712Domain": VOUCHER_TYPES["EIP712Domain"],
        "Voucher": [
            {"name": "tokenId", "type": "uint128"},
            {"name": "minPrice", "type": "uint256"},
            {"name": "uri", "type": "string"},
        ],
    }

    assert encode_digest(_voucher_typed_data()) != encode_digest(_voucher_typed_data(retyped))


def test_negative_uint_raises():
    with pytest.raises(EncodingError):
        encode_digest(_voucher_typed_data(token_id=-1))


def test_oversized_uint_raises():
    with pytest.raises(EncodingError):
        encode_digest(_voucher_typed_data(token_id=2**256))


@pytest.mark.parametrize("key", ["types", "primaryType", "domain", "message"])
def test_incomplete_envelope_raises(key):
    typed_data = _voucher_typed_data()
    del typed_data[key]

    with pytest.raises(EncodingError):
        encode_digest(typed_data)


def test_encoding_error_is_invalid_input():
    assert issubclass(EncodingError, InvalidInputError)
