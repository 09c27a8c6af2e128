"""Shared pytest fixtures for safe-predeployments tests."""

import json
from pathlib import Path
from typing import Any, Callable, List

import pytest
import responses
from eth_utils import decode_hex, keccak, to_hex

from safe_predeployments.config import PredeploymentConfig
from safe_predeployments.constants import ADDRESS

CHAINLIST_TEST_URL = "https://chainlist.test/rpcs.json"
RPC_TEST_URL = "http://test-rpc.example.com"

# Runtime bytecode of the deterministic deployment proxy
FACTORY_CODE = (
    "0x7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe036016000"
    "81602082378035828234f58015156039578182fd5b8082525050506014600cf3"
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_chainlist_json(fixtures_dir: Path) -> List[Any]:
    """Load and return the sample chainlist fixture."""
    with open(fixtures_dir / "chainlist_sample.json") as f:
        return json.load(f)


@pytest.fixture
def factory_codehash() -> str:
    """Keccak-256 of FACTORY_CODE."""
    return to_hex(keccak(decode_hex(FACTORY_CODE)))


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    """Create a temporary artifacts directory for tests."""
    path = tmp_path / "artifacts"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def make_config(artifacts_dir: Path) -> Callable[..., PredeploymentConfig]:
    """Build a config pointing at test URLs and the temporary artifacts directory.

    The expected code hash is left at its production default.
    """

    def _make(**kwargs) -> PredeploymentConfig:
        values = {
            "chain_id": "10",
            "artifacts_dir": str(artifacts_dir),
            "registry_url": CHAINLIST_TEST_URL,
        }
        values.update(kwargs)
        return PredeploymentConfig(**values)

    return _make


@pytest.fixture
def mock_chainlist(sample_chainlist_json: List[Any]) -> Callable[..., None]:
    """Register the sample chainlist response (requires responses.activate)."""

    def _mock(status: int = 200, body: Any = None) -> None:
        if status == 200:
            responses.add(
                responses.GET,
                CHAINLIST_TEST_URL,
                json=sample_chainlist_json if body is None else body,
                status=200,
            )
        else:
            responses.add(responses.GET, CHAINLIST_TEST_URL, body=body or "", status=status)

    return _mock


@pytest.fixture
def mock_rpc() -> Callable[..., None]:
    """Register a JSON-RPC node answering eth_chainId and eth_getCode."""

    def _mock(chain_id: int = 10, code: str = FACTORY_CODE, url: str = RPC_TEST_URL) -> None:
        def request_callback(request):
            body = json.loads(request.body)
            if body["method"] == "eth_chainId":
                result = hex(chain_id)
            elif body["method"] == "eth_getCode":
                assert body["params"] == [ADDRESS, "latest"]
                result = code
            else:
                return (
                    200,
                    {},
                    json.dumps(
                        {
                            "jsonrpc": "2.0",
                            "id": body["id"],
                            "error": {"code": -32601, "message": "Method not found"},
                        }
                    ),
                )
            return (200, {}, json.dumps({"jsonrpc": "2.0", "id": body["id"], "result": result}))

        responses.add_callback(
            responses.POST,
            url,
            callback=request_callback,
            content_type="application/json",
        )

    return _mock


@pytest.fixture
def factory_code() -> str:
    """Runtime bytecode served by the mocked RPC node."""
    return FACTORY_CODE


@pytest.fixture
def chainlist_url() -> str:
    return CHAINLIST_TEST_URL


@pytest.fixture
def rpc_url() -> str:
    return RPC_TEST_URL
