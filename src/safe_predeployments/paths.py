"""Path management utilities for safe-predeployments."""

from pathlib import Path
from typing import Optional, Union

from .constants import ARTIFACT_FILENAME


def get_default_artifacts_dir() -> Path:
    """
    Get default artifacts directory.

    Returns:
        Path to ./artifacts
    """
    return Path.cwd() / "artifacts"


def get_artifact_path(
    chain_id: int, artifacts_dir: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the deployment artifact path for a chain.

    Args:
        chain_id: Validated chain ID
        artifacts_dir: Custom artifacts directory (defaults to ./artifacts)

    Returns:
        Path to <artifacts_dir>/<chain_id>/deployment.json
    """
    if artifacts_dir is None:
        artifacts_dir = get_default_artifacts_dir()
    else:
        artifacts_dir = Path(artifacts_dir).absolute()

    return artifacts_dir / str(chain_id) / ARTIFACT_FILENAME
