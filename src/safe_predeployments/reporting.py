"""Run summary rendering for safe-predeployments."""

import json
from pathlib import Path
from typing import Union

from .constants import CHAINLIST_DOCS_URL, ENV_CHAIN_ID, ENV_SKIP_CHAINLIST_CHECK
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
from .types import RunSummary

ERROR_HEADER = "**⛔️ Error:**<br>"
SUCCESS_HEADER = "**✅ Success:**<br>"


def render_success(chain_id: int) -> RunSummary:
    """Build the summary for a registered chain."""
    return RunSummary(
        message=f"Pre-deployment artifact added for chain ID {chain_id}",
        comment=(
            SUCCESS_HEADER
            + f"Pre-deployment artifact added for chain ID {chain_id}.<br>"
            + "The Safe Singleton Factory is pre-installed on this network."
        ),
        success=True,
    )


def _error_details(error: PredeploymentError) -> str:
    if isinstance(error, ChainIdNotProvidedError):
        return f"Chain ID not provided. Please set the {ENV_CHAIN_ID} environment variable."
    if isinstance(error, InvalidChainIdError):
        return f'Invalid chain ID: "{error.value}". Chain ID must be a positive integer.'
    if isinstance(error, ArtifactExistsError):
        return f"Artifact already exists for chain ID {error.chain_id}."
    if isinstance(error, RegistryFetchError):
        if error.status_code is None:
            return f"Error retrieving chain list.<br>Error Details: {error.body}"
        return (
            f"HTTP {error.status_code} error retrieving chain list.<br>"
            f"Response: {error.body}"
        )
    if isinstance(error, ChainNotListedError):
        return (
            f"Chain {error.chain_id} is not listed in the chainlist.<br>"
            "For more information on how to add a chain, please refer to the "
            f"[chainlist documentation]({CHAINLIST_DOCS_URL}).<br>"
            f"Set {ENV_SKIP_CHAINLIST_CHECK}=true to bypass this check."
        )
    if isinstance(error, ChainIdMismatchError):
        return (
            f"Chain ID mismatch. Expected {error.expected}, "
            f"but RPC returned {error.actual}."
        )
    if isinstance(error, FactoryNotDeployedError):
        return (
            f"The Safe Singleton Factory is not deployed at {error.address}.<br>"
            "This chain may not have the factory pre-installed."
        )
    if isinstance(error, FactoryBytecodeMismatchError):
        return (
            f"The contract at {error.address} has different bytecode than expected.<br>"
            "This may not be the Safe Singleton Factory."
        )
    if isinstance(error, RpcError):
        return f"RPC request {error.method} failed.<br>Error Details: {error.detail}"
    return f"Error Details: {error}"


def render_error(error: BaseException) -> RunSummary:
    """
    Build the summary for a failed run.

    Known errors render their own explanation; anything else is reported as
    an unexpected error with its details.

    Args:
        error: Exception caught by the pipeline

    Returns:
        RunSummary with success=False
    """
    if isinstance(error, PredeploymentError):
        return RunSummary(
            message=str(error),
            comment=ERROR_HEADER + _error_details(error),
            success=False,
            cause=error.cause.value,
        )

    return RunSummary(
        message=f"Unexpected error adding pre-deployment: {error}",
        comment=(
            ERROR_HEADER
            + "Unexpected error adding pre-deployment.<br>"
            + f"Error Details: {error!r}"
        ),
        success=False,
        cause=FailureCause.UNEXPECTED.value,
    )


def write_summary(summary: RunSummary, summary_path: Union[Path, str]) -> None:
    """
    Save a run summary as JSON.

    Creates parent directories if they don't exist.
    """
    summary_path = Path(summary_path)
    summary_path.parent.mkdir(parents=True, exist_ok=True)
    with open(summary_path, "w") as f:
        json.dump(summary.to_dict(), f, indent=2)
