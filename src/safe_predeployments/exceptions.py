"""Custom exception classes for safe-predeployments."""

from enum import Enum
from typing import Optional


class FailureCause(Enum):
    """
    Machine-usable failure causes.

    Value strings appear as the ``cause`` of a failed run summary.
    """

    CHAIN_ID_NOT_PROVIDED = "Chain ID not provided"
    INVALID_CHAIN_ID = "Invalid chain ID"
    ARTIFACT_ALREADY_EXISTS = "Artifact already exists"
    REGISTRY_FETCH_FAILED = "Chainlist fetch failed"
    CHAIN_NOT_LISTED = "Chain not listed"
    CHAIN_ID_MISMATCH = "Chain ID mismatch"
    FACTORY_NOT_DEPLOYED = "Factory not deployed"
    FACTORY_DIFFERENT_BYTECODE = "Factory different bytecode"
    RPC_ERROR = "RPC error"
    UNEXPECTED = "Unexpected error"


class PredeploymentError(Exception):
    """Base exception for pre-deployment errors."""

    cause = FailureCause.UNEXPECTED


class ChainIdNotProvidedError(PredeploymentError, ValueError):
    """Raised when no chain ID is configured."""

    cause = FailureCause.CHAIN_ID_NOT_PROVIDED

    def __init__(self):
        super().__init__("Chain ID not provided")


class InvalidChainIdError(PredeploymentError, ValueError):
    """Raised when the chain ID is not a positive base-10 integer."""

    cause = FailureCause.INVALID_CHAIN_ID

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid chain ID: {value!r}")


class ArtifactExistsError(PredeploymentError, FileExistsError):
    """Raised when an artifact is already registered for the chain."""

    cause = FailureCause.ARTIFACT_ALREADY_EXISTS

    def __init__(self, chain_id: int, path: Optional[str] = None):
        self.chain_id = chain_id
        self.path = path
        super().__init__(f"Artifact already exists for chain ID {chain_id}")


class RegistryFetchError(PredeploymentError, RuntimeError):
    """Raised when the chain registry cannot be retrieved."""

    cause = FailureCause.REGISTRY_FETCH_FAILED

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            super().__init__(f"Network error retrieving chain list: {body}")
        else:
            super().__init__(f"HTTP {status_code} error retrieving chain list: {body}")


class ChainNotListedError(PredeploymentError, LookupError):
    """Raised when the chain is missing from the chain registry."""

    cause = FailureCause.CHAIN_NOT_LISTED

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Chain {chain_id} is not listed in the chainlist")


class ChainIdMismatchError(PredeploymentError, ValueError):
    """Raised when the RPC endpoint reports a different chain ID."""

    cause = FailureCause.CHAIN_ID_MISMATCH

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Chain ID mismatch: expected {expected}, RPC returned {actual}")


class FactoryNotDeployedError(PredeploymentError):
    """Raised when there is no code at the factory address."""

    cause = FailureCause.FACTORY_NOT_DEPLOYED

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Factory not deployed at {address}")


class FactoryBytecodeMismatchError(PredeploymentError):
    """Raised when the code at the factory address has an unexpected hash."""

    cause = FailureCause.FACTORY_DIFFERENT_BYTECODE

    def __init__(self, address: str, codehash: str):
        self.address = address
        self.codehash = codehash
        super().__init__(f"Unexpected code hash {codehash} at {address}")


class RpcError(PredeploymentError, RuntimeError):
    """Raised when a JSON-RPC call fails."""

    cause = FailureCause.RPC_ERROR

    def __init__(self, method: str, detail: str):
        self.method = method
        self.detail = detail
        super().__init__(f"{method} failed: {detail}")
