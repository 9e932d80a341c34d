"""
EvmVoucherSigner - EVM voucher signer implementation
"""

import logging
import os
from typing import Any

from lazymint.config import NetworkConfig
from lazymint.exceptions import (
    ConfigurationError,
    DomainResolutionError,
    InvalidInputError,
    SigningError,
)
from lazymint.signers.base import VoucherSigner
from lazymint.signers.utils import resolve_provider_uri

logger = logging.getLogger(__name__)


class EvmVoucherSigner(VoucherSigner):
    """EVM voucher signer implementation using eth_account and web3.py"""

    def __init__(
        self,
        private_key: str,
        network: str | None = None,
        chain_id: int | None = None,
    ) -> None:
        if not private_key.startswith("0x"):
            private_key = "0x" + private_key
        self._private_key = private_key
        self._network = network
        self._chain_id = chain_id
        self._address = self._derive_address(private_key)
        self._async_web3_clients: dict[str, Any] = {}
        logger.debug(
            "EvmVoucherSigner initialized",
            extra={"address": self._address, "network": network, "chain_id": chain_id},
        )

    @classmethod
    def from_private_key(
        cls,
        private_key: str,
        network: str | None = None,
        chain_id: int | None = None,
    ) -> "EvmVoucherSigner":
        """Create signer from private key."""
        return cls(private_key, network, chain_id)

    @classmethod
    def from_env(cls) -> "EvmVoucherSigner":
        """Create signer from LAZYMINT_PRIVATE_KEY, LAZYMINT_NETWORK and LAZYMINT_CHAIN_ID."""
        private_key = os.getenv(NetworkConfig.ENV_PRIVATE_KEY, "")
        if not private_key:
            raise ConfigurationError(
                f"{NetworkConfig.ENV_PRIVATE_KEY} environment variable is required"
            )

        chain_id = None
        raw_chain_id = os.getenv(NetworkConfig.ENV_CHAIN_ID)
        if raw_chain_id:
            try:
                chain_id = int(raw_chain_id)
            except ValueError:
                raise ConfigurationError(
                    f"{NetworkConfig.ENV_CHAIN_ID} must be an integer, got {raw_chain_id!r}"
                )

        return cls(private_key, os.getenv(NetworkConfig.ENV_NETWORK) or None, chain_id)

    @staticmethod
    def _derive_address(private_key: str) -> str:
        """Derive EVM address from private key"""
        from eth_account import Account

        try:
            return Account.from_key(private_key).address
        except Exception as e:
            # Never echo the key itself
            raise InvalidInputError(
                "privateKey", f"Invalid EVM private key: {type(e).__name__}"
            ) from None

    def get_address(self) -> str:
        return self._address

    def _ensure_async_web3_client(self, provider_uri: str) -> Any:
        """Lazy initialize async web3 client for the given provider."""
        if provider_uri not in self._async_web3_clients:
            from web3 import AsyncHTTPProvider, AsyncWeb3

            self._async_web3_clients[provider_uri] = AsyncWeb3(AsyncHTTPProvider(provider_uri))

        return self._async_web3_clients[provider_uri]

    async def get_chain_id(self) -> int:
        """Resolve the chain id: explicit value, then network identifier, then live RPC query."""
        if self._chain_id is not None:
            return self._chain_id

        if not self._network:
            raise DomainResolutionError("EvmVoucherSigner has neither a chain id nor a network")

        provider_uri = resolve_provider_uri(self._network)
        if provider_uri is None:
            return NetworkConfig.get_chain_id(self._network)

        w3 = self._ensure_async_web3_client(provider_uri)
        try:
            chain_id = await w3.eth.chain_id
        except Exception as e:
            logger.error(
                "Failed to query chain id",
                extra={"network": self._network, "provider": provider_uri, "error": str(e)},
            )
            raise DomainResolutionError(f"Failed to query chain id from {provider_uri}: {e}") from e
        return int(chain_id)

    async def sign_digest(self, digest: bytes) -> bytes:
        """Sign a raw 32-byte digest with ECDSA (secp256k1), returning r ‖ s ‖ v"""
        if not isinstance(digest, (bytes, bytearray)) or len(digest) != 32:
            raise SigningError("Digest must be exactly 32 bytes")

        try:
            from eth_account import Account

            signed = Account.unsafe_sign_hash(bytes(digest), private_key=self._private_key)
            return bytes(signed.signature)
        except Exception as e:
            raise SigningError(f"Failed to sign digest: {e}") from e
