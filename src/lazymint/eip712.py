"""
EIP-712 digest utilities for voucher typed data.

Encoding is delegated to eth_account; this module only adds the final
``keccak256(0x19 ‖ 0x01 ‖ domainSeparator ‖ hashStruct(message))`` step and
maps encoder failures into the lazymint error hierarchy.
"""

from typing import Any, Mapping

from eth_account.messages import SignableMessage, encode_typed_data
from eth_hash.auto import keccak

from lazymint.exceptions import EncodingError

_ENVELOPE_KEYS = ("types", "primaryType", "domain", "message")


def signable_message(typed_data: Mapping[str, Any]) -> SignableMessage:
    """
    Encode a full typed-data envelope per EIP-712.

    Args:
        typed_data: Dict with ``types``, ``primaryType``, ``domain`` and ``message``

    Returns:
        SignableMessage whose header is the domain separator and whose body
        is hashStruct(message)

    Raises:
        EncodingError: If the envelope is incomplete or a value does not fit its type
    """
    missing = [key for key in _ENVELOPE_KEYS if key not in typed_data]
    if missing:
        raise EncodingError(f"Typed data is missing {missing[0]!r}")

    try:
        return encode_typed_data(full_message=dict(typed_data))
    except Exception as e:
        raise EncodingError(f"Cannot encode typed data: {e}") from e


def encode_digest(typed_data: Mapping[str, Any]) -> bytes:
    """Compute the 32-byte EIP-712 digest that gets signed."""
    signable = signable_message(typed_data)
    return keccak(b"\x19" + signable.version + signable.header + signable.body)
