"""Pre-deployment artifact storage for safe-predeployments."""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .constants import PREDEPLOYMENT_ARTIFACT
from .exceptions import ArtifactExistsError
from .paths import get_artifact_path

logger = logging.getLogger(__name__)


def ensure_artifact_absent(
    chain_id: int, artifacts_dir: Optional[Union[Path, str]] = None
) -> Path:
    """
    Check that no artifact has been registered for a chain yet.

    Only the deployment file counts; an empty chain directory left behind by
    an interrupted run does not block a retry.

    Args:
        chain_id: Validated chain ID
        artifacts_dir: Custom artifacts directory (defaults to ./artifacts)

    Returns:
        Path where the artifact will be written

    Raises:
        ArtifactExistsError: If the artifact file already exists
    """
    artifact_path = get_artifact_path(chain_id, artifacts_dir)
    if artifact_path.exists():
        raise ArtifactExistsError(chain_id, str(artifact_path))
    return artifact_path


def write_artifact(artifact_path: Path, chain_id: Optional[int] = None) -> Path:
    """
    Write the pre-deployment artifact.

    Creates parent directories if they don't exist. The file is opened in
    exclusive mode and is never overwritten.

    Args:
        artifact_path: Target path from ensure_artifact_absent
        chain_id: Chain ID, used for error reporting

    Returns:
        The written path

    Raises:
        ArtifactExistsError: If the file appeared after the duplicate check
    """
    artifact_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(PREDEPLOYMENT_ARTIFACT, indent="\t") + "\n"
    try:
        with open(artifact_path, "x") as f:
            f.write(content)
    except FileExistsError:
        if chain_id is None:
            chain_id = int(artifact_path.parent.name)
        raise ArtifactExistsError(chain_id, str(artifact_path)) from None

    logger.info("Pre-deployment artifact created at: %s", artifact_path)
    return artifact_path

