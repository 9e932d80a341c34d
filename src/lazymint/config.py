"""
lazymint Network Configuration
Centralized configuration for chain IDs, RPC endpoints and environment settings
"""

from typing import Dict

from lazymint.exceptions import UnsupportedNetworkError


class NetworkConfig:
    """Network configuration for chain IDs and RPC endpoints"""

    # EVM Networks
    EVM_MAINNET = "eip155:1"
    EVM_SEPOLIA = "eip155:11155111"
    EVM_HOLESKY = "eip155:17000"
    POLYGON_MAINNET = "eip155:137"
    POLYGON_AMOY = "eip155:80002"
    HARDHAT = "eip155:31337"

    # Named aliases accepted in place of CAIP-2 identifiers
    CHAIN_IDS: Dict[str, int] = {
        "mainnet": 1,
        "sepolia": 11155111,
        "holesky": 17000,
        "polygon": 137,
        "amoy": 80002,
        "hardhat": 31337,
    }

    # RPC URLs for networks whose chain id should be queried live
    RPC_URLS: Dict[str, str] = {
        "localhost": "http://127.0.0.1:8545",
        # "eip155:1": "https://eth.llamarpc.com",
    }

    # Environment variables read by EvmVoucherSigner.from_env()
    ENV_PRIVATE_KEY = "LAZYMINT_PRIVATE_KEY"
    ENV_NETWORK = "LAZYMINT_NETWORK"
    ENV_CHAIN_ID = "LAZYMINT_CHAIN_ID"

    @classmethod
    def get_rpc_url(cls, network: str) -> str | None:
        """Get RPC URL for a network.

        Args:
            network: Network identifier (e.g., "localhost", "eip155:1")

        Returns:
            RPC URL string, or None if not configured
        """
        return cls.RPC_URLS.get(network)

    @classmethod
    def get_chain_id(cls, network: str) -> int:
        """Get chain ID for network

        Args:
            network: Network identifier (e.g., "eip155:11155111", "sepolia")

        Returns:
            Chain ID as integer

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        # EVM networks encode chain ID directly in the identifier
        if network.startswith("eip155:"):
            try:
                return int(network.split(":", 1)[1])
            except (ValueError, IndexError):
                raise UnsupportedNetworkError(f"Invalid EVM network: {network}")

        chain_id = cls.CHAIN_IDS.get(network)
        if chain_id is None:
            raise UnsupportedNetworkError(f"Unsupported network: {network}")
        return chain_id
