"""
Deployment Errors
Exception hierarchy for artifact loading, endpoint selection and deployment
"""

from typing import Optional


class DeployerError(Exception):
    """Base class for all contract deployer errors"""


class FileAccessError(DeployerError, OSError):
    """Compiled artifact could not be read from disk"""


class MalformedArtifactError(DeployerError, ValueError):
    """Compiled artifact is not valid JSON or lacks abi/bytecode"""


class UnsupportedEndpointError(DeployerError, ValueError):
    """Node endpoint uses a transport web3 cannot reach"""


class DeploymentFailedError(DeployerError):
    """Deployment transaction resolved without a usable contract address"""

    def __init__(self, message: str = "Deployment failed!", tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash
