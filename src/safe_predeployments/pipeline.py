"""Pre-deployment registration pipeline."""

import logging
from pathlib import Path
from typing import Optional

from .artifacts import ensure_artifact_absent, write_artifact
from .config import PredeploymentConfig, parse_chain_id
from .exceptions import ChainNotListedError
from .registry import ChainRegistry
from .reporting import render_error, render_success, write_summary
from .sources import RpcSource, build_rpc_source
from .types import RunSummary
from .verification import verify_predeployment

logger = logging.getLogger(__name__)


def register_predeployment(
    config: PredeploymentConfig,
    registry: Optional[ChainRegistry] = None,
    rpc_source: Optional[RpcSource] = None,
) -> Path:
    """
    Validate a chain and write its pre-deployment artifact.

    Steps, in order: chain ID validation, duplicate artifact check, RPC
    resolution, on-chain verification (skipped without an endpoint), chainlist
    presence check (unless skipped), artifact write. The artifact is written
    only after every enabled check has passed.

    Args:
        config: Run configuration
        registry: Chain registry (defaults to one built from config)
        rpc_source: RPC endpoint source (defaults to build_rpc_source)

    Returns:
        Path of the written artifact

    Raises:
        PredeploymentError: If any check fails
    """
    chain_id = parse_chain_id(config.chain_id)
    artifact_path = ensure_artifact_absent(chain_id, config.artifacts_dir)

    if registry is None:
        registry = ChainRegistry(config.registry_url, config.timeout)
    if rpc_source is None:
        rpc_source = build_rpc_source(config, chain_id, registry)

    rpc_url = rpc_source.resolve()
    if rpc_url is not None:
        verify_predeployment(rpc_url, chain_id, config.expected_codehash)
    else:
        logger.warning("No RPC URL available. Skipping on-chain verification.")

    if not config.skip_registry_check:
        if not registry.has_chain(chain_id):
            raise ChainNotListedError(chain_id)
        logger.info("Chain %d found in chainlist.", chain_id)

    return write_artifact(artifact_path, chain_id)


def add_predeployment(
    config: PredeploymentConfig,
    registry: Optional[ChainRegistry] = None,
    rpc_source: Optional[RpcSource] = None,
) -> RunSummary:
    """
    Run the pipeline and report its outcome.

    Never raises: every failure is rendered into the returned summary. The
    summary is logged and, if config.summary_file is set, written there.

    Args:
        config: Run configuration
        registry: Chain registry (defaults to one built from config)
        rpc_source: RPC endpoint source (defaults to build_rpc_source)

    Returns:
        RunSummary with success=True only if the artifact was written
    """
    try:
        register_predeployment(config, registry, rpc_source)
        summary = render_success(parse_chain_id(config.chain_id))
    except Exception as e:
        logger.debug("Pre-deployment failed", exc_info=True)
        summary = render_error(e)

    if summary.success:
        logger.info(summary.message)
    else:
        logger.error(summary.message)

    if config.summary_file:
        try:
            write_summary(summary, config.summary_file)
        except OSError as e:
            logger.error("Could not write summary to %s: %s", config.summary_file, e)
            summary = render_error(e)

    return summary
