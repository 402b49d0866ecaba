"""
Blockchain Interaction Package
Handles compiled artifacts and contract deployment
"""

from .artifact import CompiledArtifact, load_artifact
from .contract_deployer import ContractDeployer, DeploymentResult, GAS_LIMIT
from .errors import (
    DeployerError,
    FileAccessError,
    MalformedArtifactError,
    UnsupportedEndpointError,
    DeploymentFailedError
)

__all__ = [
    'CompiledArtifact',
    'load_artifact',
    'ContractDeployer',
    'DeploymentResult',
    'GAS_LIMIT',
    'DeployerError',
    'FileAccessError',
    'MalformedArtifactError',
    'UnsupportedEndpointError',
    'DeploymentFailedError'
]
