"""
safe-predeployments: register Safe Singleton Factory pre-deployments for chains
that ship the factory as a system contract
"""

from importlib.metadata import PackageNotFoundError, version

from .config import PredeploymentConfig, parse_chain_id
from .constants import ADDRESS, CODEHASH, PREDEPLOYMENT_ARTIFACT
from .exceptions import (
    ArtifactExistsError,
    ChainIdMismatchError,
    ChainIdNotProvidedError,
    ChainNotListedError,
    FactoryBytecodeMismatchError,
    FactoryNotDeployedError,
    FailureCause,
    InvalidChainIdError,
    PredeploymentError,
    RegistryFetchError,
    RpcError,
)
from .pipeline import add_predeployment, register_predeployment
from .types import RegistryEntry, RunSummary, VerificationOutcome

try:
    __version__ = version("safe-predeployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "add_predeployment",
    "register_predeployment",
    "parse_chain_id",
    "PredeploymentConfig",
    "RegistryEntry",
    "RunSummary",
    "VerificationOutcome",
    "ADDRESS",
    "CODEHASH",
    "PREDEPLOYMENT_ARTIFACT",
    "FailureCause",
    "PredeploymentError",
    "ChainIdNotProvidedError",
    "InvalidChainIdError",
    "ArtifactExistsError",
    "RegistryFetchError",
    "ChainNotListedError",
    "ChainIdMismatchError",
    "FactoryNotDeployedError",
    "FactoryBytecodeMismatchError",
    "RpcError",
]
