"""
RPC Provider
Builds a Web3 handle for a node endpoint given on the command line
"""

from urllib.parse import urlparse
from web3 import Web3, HTTPProvider, IPCProvider, LegacyWebSocketProvider
from loguru import logger

from blockchain.errors import UnsupportedEndpointError

HTTP_SCHEMES = ('http', 'https')
WS_SCHEMES = ('ws', 'wss')


def is_ipc_path(endpoint: str) -> bool:
    """Local socket path (no URL scheme) ending in .ipc"""
    return '://' not in endpoint and endpoint.endswith('.ipc')


def normalize_endpoint(endpoint: str) -> str:
    """
    Normalize a node endpoint

    A bare "host:port" is taken as an HTTP JSON-RPC endpoint, the same way
    a connection URL is assembled from a join ip and an rpc port.

    Args:
        endpoint: URL, host:port pair, or path to a geth.ipc socket

    Returns:
        Endpoint with an explicit scheme (IPC paths are returned unchanged)
    """
    endpoint = endpoint.strip()

    if not endpoint:
        raise UnsupportedEndpointError("Node endpoint is empty")

    if is_ipc_path(endpoint):
        return endpoint

    if '://' not in endpoint:
        endpoint = f"http://{endpoint}"

    parsed = urlparse(endpoint)
    scheme = parsed.scheme.lower()

    if scheme not in HTTP_SCHEMES + WS_SCHEMES:
        raise UnsupportedEndpointError(f"Unsupported endpoint scheme: {parsed.scheme}")

    if not parsed.netloc:
        raise UnsupportedEndpointError(f"Endpoint has no host: {endpoint}")

    return endpoint


def connect(endpoint: str) -> Web3:
    """
    Create a Web3 instance for an endpoint

    No request is made here; the provider connects on first use.

    Args:
        endpoint: HTTP(S) / WS(S) URL, host:port, or IPC path

    Returns:
        Web3 instance
    """
    endpoint = normalize_endpoint(endpoint)

    if is_ipc_path(endpoint):
        provider = IPCProvider(endpoint)
    elif urlparse(endpoint).scheme.lower() in WS_SCHEMES:
        provider = LegacyWebSocketProvider(endpoint)
    else:
        provider = HTTPProvider(endpoint)

    logger.info(f"Using {type(provider).__name__} for {endpoint}")

    return Web3(provider)
