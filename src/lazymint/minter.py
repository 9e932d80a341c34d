"""
LazyMinter - creates NFT vouchers and signs them for later redemption
"""

import asyncio
import logging
from typing import Any

from eth_utils import is_address, to_checksum_address

from lazymint.abi import (
    SIGNING_DOMAIN_NAME,
    SIGNING_DOMAIN_VERSION,
    UINT256_MAX,
    VOUCHER_PRIMARY_TYPE,
    VOUCHER_TYPES,
)
from lazymint.eip712 import encode_digest
from lazymint.exceptions import DomainResolutionError, InvalidInputError, SigningError
from lazymint.signers.base import VoucherSigner
from lazymint.types import NFTVoucher, SignedVoucher, SigningDomain, TypedDataEnvelope

logger = logging.getLogger(__name__)


class LazyMinter:
    """
    Creates NFTVoucher objects and signs them with the minting authority's key.

    The signing domain is tied to the signer's chain id. It is resolved on the
    first create_voucher() call and cached for the lifetime of the instance.
    """

    def __init__(self, contract_address: str, signer: VoucherSigner) -> None:
        if not isinstance(contract_address, str) or not is_address(contract_address):
            raise InvalidInputError(
                "contractAddress", f"Invalid contract address: {contract_address!r}"
            )
        self._contract_address = to_checksum_address(contract_address)
        self._signer = signer
        self._domain: SigningDomain | None = None
        self._domain_lock = asyncio.Lock()
        self.types = VOUCHER_TYPES

    @classmethod
    def from_private_key(
        cls,
        contract_address: str,
        private_key: str,
        network: str | None = None,
        chain_id: int | None = None,
    ) -> "LazyMinter":
        """Create a minter backed by an EvmVoucherSigner."""
        from lazymint.signers.evm_signer import EvmVoucherSigner

        return cls(contract_address, EvmVoucherSigner(private_key, network, chain_id))

    @property
    def contract_address(self) -> str:
        return self._contract_address

    @property
    def signer(self) -> VoucherSigner:
        return self._signer

    @property
    def domain_resolved(self) -> bool:
        return self._domain is not None

    async def create_voucher(
        self,
        token_id: int,
        uri: str,
        min_price: int = 0,
    ) -> SignedVoucher:
        """
        Create a new NFTVoucher and sign it.

        Args:
            token_id: Id of the un-minted NFT
            uri: Metadata URI to associate with the NFT
            min_price: Minimum price (in wei) the creator will accept to redeem it

        Returns:
            SignedVoucher with the voucher, its EIP-712 digest and the signature

        Raises:
            InvalidInputError: If token_id, uri or min_price are invalid
            DomainResolutionError: If the signer's chain id cannot be resolved
            SigningError: If the signer fails to sign the digest
        """
        voucher = NFTVoucher.from_fields(token_id, uri, min_price)
        typed_data = await self.typed_data(voucher)
        digest = encode_digest(typed_data)
        signature = await self._sign(digest)

        logger.info(
            "Voucher signed",
            extra={
                "token_id": voucher.token_id,
                "min_price": voucher.min_price,
                "contract": self._contract_address,
                "digest": "0x" + digest.hex(),
            },
        )
        return SignedVoucher(voucher=voucher, digest=digest, signature=signature)

    async def signing_domain(self) -> SigningDomain:
        """Return the EIP-712 signing domain, resolving it once on first use."""
        if self._domain is not None:
            return self._domain

        async with self._domain_lock:
            if self._domain is None:
                chain_id = await self._query_chain_id()
                self._domain = SigningDomain(
                    name=SIGNING_DOMAIN_NAME,
                    version=SIGNING_DOMAIN_VERSION,
                    chain_id=chain_id,
                    verifying_contract=self._contract_address,
                )
                logger.debug(
                    "Signing domain resolved",
                    extra={"chain_id": chain_id, "contract": self._contract_address},
                )
        return self._domain

    async def typed_data(self, voucher: NFTVoucher) -> dict[str, Any]:
        """The voucher formatted with type info and the other EIP-712 trappings."""
        domain = await self.signing_domain()
        envelope = TypedDataEnvelope(
            types=self.types,
            primary_type=VOUCHER_PRIMARY_TYPE,
            domain=domain,
            message=voucher,
        )
        return envelope.to_eip712()

    async def _query_chain_id(self) -> int:
        try:
            chain_id = await self._signer.get_chain_id()
        except DomainResolutionError as e:
            logger.error("Signing domain resolution failed", extra={"error": str(e)})
            raise
        except Exception as e:
            logger.error("Signing domain resolution failed", extra={"error": str(e)})
            raise DomainResolutionError(f"Failed to resolve chain id: {e}") from e

        if (
            isinstance(chain_id, bool)
            or not isinstance(chain_id, int)
            or not 0 <= chain_id <= UINT256_MAX
        ):
            raise DomainResolutionError(f"Signer returned an invalid chain id: {chain_id!r}")
        return chain_id

    async def _sign(self, digest: bytes) -> bytes:
        try:
            signature = await self._signer.sign_digest(digest)
        except SigningError as e:
            logger.error("Voucher signing failed", extra={"error": str(e)})
            raise
        except Exception as e:
            logger.error("Voucher signing failed", extra={"error": str(e)})
            raise SigningError(f"Failed to sign voucher digest: {e}") from e

        if isinstance(signature, str):
            try:
                signature = bytes.fromhex(signature[2:] if signature.startswith("0x") else signature)
            except ValueError as e:
                raise SigningError(f"Signer returned a malformed signature: {signature!r}") from e
        if not isinstance(signature, (bytes, bytearray)) or not signature:
            raise SigningError(f"Signer returned no signature: {signature!r}")
        return bytes(signature)
