"""RPC endpoint sources for on-chain verification."""

import logging
from typing import Optional

from .config import PredeploymentConfig
from .registry import ChainRegistry, first_http_rpc

logger = logging.getLogger(__name__)


class RpcSource:
    """Something that may know an RPC endpoint for the target chain."""

    def resolve(self) -> Optional[str]:
        raise NotImplementedError


class ExplicitRpcSource(RpcSource):
    """RPC endpoint supplied by the operator."""

    def __init__(self, url: Optional[str]):
        self.url = url

    def resolve(self) -> Optional[str]:
        return self.url or None


class RegistryRpcSource(RpcSource):
    """First http(s) RPC endpoint listed for the chain in the registry."""

    def __init__(self, registry: ChainRegistry, chain_id: int):
        self.registry = registry
        self.chain_id = chain_id

    def resolve(self) -> Optional[str]:
        url = first_http_rpc(self.registry.find(self.chain_id))
        if url is not None:
            logger.info("Using RPC %s from chainlist", url)
        return url


class FirstAvailableRpcSource(RpcSource):
    """Tries each source in order and returns the first endpoint found."""

    def __init__(self, *sources: RpcSource):
        self.sources = sources

    def resolve(self) -> Optional[str]:
        for source in self.sources:
            url = source.resolve()
            if url is not None:
                return url
        return None


def build_rpc_source(
    config: PredeploymentConfig, chain_id: int, registry: ChainRegistry
) -> RpcSource:
    """
    Compose the RPC source for a run.

    An explicit endpoint always wins. The registry is consulted only when the
    registry check is enabled, so skipping the check never triggers a fetch.
    """
    explicit = ExplicitRpcSource(config.rpc_url)
    if config.skip_registry_check:
        return explicit
    return FirstAvailableRpcSource(explicit, RegistryRpcSource(registry, chain_id))
