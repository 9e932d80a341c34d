"""
Signer utility functions
"""

from lazymint.config import NetworkConfig


def resolve_provider_uri(network: str) -> str | None:
    """Resolve a network identifier to an RPC provider URI.

    Checks in order:
    1. If network is already an HTTP(S) URL, return as-is
    2. Look up in NetworkConfig.RPC_URLS
    3. Return None (chain id must be resolvable offline)

    Args:
        network: Network identifier (e.g., "localhost") or direct URL

    Returns:
        Provider URI string, or None if not resolvable
    """
    if network.startswith(("http://", "https://")):
        return network
    return NetworkConfig.get_rpc_url(network)
