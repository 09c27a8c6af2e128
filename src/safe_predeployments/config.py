"""Run configuration for safe-predeployments."""

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    CHAINLIST_URL,
    CODEHASH,
    DEFAULT_TIMEOUT,
    ENV_ARTIFACTS_DIR,
    ENV_CHAIN_ID,
    ENV_CHAINLIST_URL,
    ENV_RPC,
    ENV_SKIP_CHAINLIST_CHECK,
    ENV_SUMMARY_FILE,
)
from .exceptions import ChainIdNotProvidedError, InvalidChainIdError


@dataclass
class PredeploymentConfig:
    """Inputs of a single pre-deployment run."""

    chain_id: Optional[str] = None  # Raw value, validated by parse_chain_id
    rpc_url: Optional[str] = None
    skip_registry_check: bool = False
    summary_file: Optional[str] = None
    artifacts_dir: Optional[str] = None  # Defaults to ./artifacts
    registry_url: str = CHAINLIST_URL
    expected_codehash: str = CODEHASH
    timeout: int = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PredeploymentConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Variable mapping (defaults to os.environ)

        Returns:
            PredeploymentConfig with empty variables treated as unset
        """
        if environ is None:
            environ = os.environ

        def get(name: str) -> Optional[str]:
            return environ.get(name) or None

        return cls(
            chain_id=get(ENV_CHAIN_ID),
            rpc_url=get(ENV_RPC),
            skip_registry_check=_parse_flag(get(ENV_SKIP_CHAINLIST_CHECK)),
            summary_file=get(ENV_SUMMARY_FILE),
            artifacts_dir=get(ENV_ARTIFACTS_DIR),
            registry_url=get(ENV_CHAINLIST_URL) or CHAINLIST_URL,
        )


_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _parse_flag(value: Optional[str]) -> bool:
    return value == "true"


def parse_chain_id(value: Optional[str]) -> int:
    """
    Validate a chain ID supplied by the operator.

    Args:
        value: Raw chain ID string

    Returns:
        Chain ID as a positive integer

    Raises:
        ChainIdNotProvidedError: If value is missing or empty
        InvalidChainIdError: If value is not a positive base-10 integer
    """
    if value is None or not value.strip():
        raise ChainIdNotProvidedError()

    text = value.strip()
    if not _DECIMAL.fullmatch(text):
        raise InvalidChainIdError(value)

    chain_id = int(text)
    if chain_id <= 0:
        raise InvalidChainIdError(value)

    return chain_id
