"""
Voucher signer base interface
"""

from abc import ABC, abstractmethod


class VoucherSigner(ABC):
    """
    Abstract base class for voucher signers.

    Reports the chain id that scopes the signing domain and signs
    EIP-712 digests with the minting authority's key.
    """

    @abstractmethod
    async def get_chain_id(self) -> int:
        """
        Get the chain id of the network the signer is bound to.

        Returns:
            Chain id as integer
        """
        pass

    @abstractmethod
    async def sign_digest(self, digest: bytes) -> bytes:
        """
        Sign a 32-byte digest as-is (no EIP-191 prefix, no re-hashing).

        Args:
            digest: EIP-712 digest bytes

        Returns:
            Signature bytes
        """
        pass
