"""Minimal JSON-RPC client for safe-predeployments."""

import logging
from typing import Any, List, Optional

import requests

from .constants import DEFAULT_TIMEOUT
from .exceptions import RpcError

logger = logging.getLogger(__name__)


class JsonRpcClient:
    """Issues JSON-RPC 2.0 requests against a single endpoint."""

    def __init__(self, url: str, timeout: int = DEFAULT_TIMEOUT):
        self.url = url
        self.timeout = timeout
        self._next_id = 1

    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Call a JSON-RPC method.

        Args:
            method: RPC method name, e.g. "eth_chainId"
            params: Positional parameters

        Returns:
            The "result" member of the response

        Raises:
            RpcError: On network errors, non-200 responses or RPC errors
        """
        request_id = self._next_id
        self._next_id += 1

        logger.debug("RPC %s %s", method, params)
        try:
            response = requests.post(
                self.url,
                json={
                    "jsonrpc": "2.0",
                    "method": method,
                    "params": params or [],
                    "id": request_id,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RpcError(method, f"network error: {e}") from e

        if response.status_code != 200:
            raise RpcError(method, f"HTTP {response.status_code}: {response.text}")

        try:
            result = response.json()
        except ValueError as e:
            raise RpcError(method, f"invalid JSON response: {response.text}") from e

        if not isinstance(result, dict):
            raise RpcError(method, f"unexpected response: {result!r}")
        if "error" in result:
            raise RpcError(method, f"RPC error: {result['error']}")
        if "result" not in result:
            raise RpcError(method, "response has no result")

        return result["result"]

    def chain_id(self) -> int:
        """Get the chain ID reported by the node."""
        return int(self.call("eth_chainId"), 16)

    def get_code(self, address: str, block: str = "latest") -> str:
        """Get the runtime bytecode at an address as a 0x-prefixed hex string."""
        return self.call("eth_getCode", [address, block])
