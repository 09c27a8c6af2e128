"""Unit tests for RPC endpoint sources."""

import responses

from safe_predeployments.registry import ChainRegistry
from safe_predeployments.sources import (
    ExplicitRpcSource,
    FirstAvailableRpcSource,
    RegistryRpcSource,
    build_rpc_source,
)


class StaticSource:
    def __init__(self, url):
        self.url = url
        self.calls = 0

    def resolve(self):
        self.calls += 1
        return self.url


class TestExplicitRpcSource:
    def test_returns_url(self):
        assert ExplicitRpcSource("https://rpc.example.org").resolve() == "https://rpc.example.org"

    def test_empty_is_none(self):
        assert ExplicitRpcSource("").resolve() is None
        assert ExplicitRpcSource(None).resolve() is None


class TestRegistryRpcSource:
    @responses.activate
    def test_first_http_rpc_of_listed_chain(self, chainlist_url, mock_chainlist):
        mock_chainlist()
        source = RegistryRpcSource(ChainRegistry(chainlist_url), 10)

        assert source.resolve() == "https://mainnet.optimism.io"

    @responses.activate
    def test_skips_unusable_rpcs(self, chainlist_url, mock_chainlist):
        mock_chainlist()
        registry = ChainRegistry(chainlist_url)

        assert RegistryRpcSource(registry, 1).resolve() == "https://ethereum-rpc.publicnode.com"
        assert RegistryRpcSource(registry, 4242).resolve() is None
        assert RegistryRpcSource(registry, 5151).resolve() is None

    @responses.activate
    def test_unlisted_chain(self, chainlist_url, mock_chainlist):
        mock_chainlist()
        assert RegistryRpcSource(ChainRegistry(chainlist_url), 999999).resolve() is None


class TestFirstAvailableRpcSource:
    def test_first_non_empty_wins(self):
        later = StaticSource("https://later.example.org")
        source = FirstAvailableRpcSource(
            StaticSource(None), StaticSource("https://first.example.org"), later
        )

        assert source.resolve() == "https://first.example.org"
        assert later.calls == 0

    def test_all_empty(self):
        assert FirstAvailableRpcSource(StaticSource(None), StaticSource(None)).resolve() is None

    def test_no_sources(self):
        assert FirstAvailableRpcSource().resolve() is None


class TestBuildRpcSource:
    @responses.activate
    def test_explicit_url_avoids_registry_fetch(self, make_config, chainlist_url):
        # No responses registered - resolving must not touch the registry
        config = make_config(rpc_url="https://explicit.example.org")
        source = build_rpc_source(config, 10, ChainRegistry(chainlist_url))

        assert source.resolve() == "https://explicit.example.org"

    @responses.activate
    def test_falls_back_to_registry(self, make_config, chainlist_url, mock_chainlist):
        mock_chainlist()
        source = build_rpc_source(make_config(), 324, ChainRegistry(chainlist_url))

        assert source.resolve() == "https://mainnet.era.zksync.io"

    @responses.activate
    def test_skipped_registry_is_not_consulted(self, make_config, chainlist_url):
        config = make_config(skip_registry_check=True)
        source = build_rpc_source(config, 10, ChainRegistry(chainlist_url))

        assert source.resolve() is None
