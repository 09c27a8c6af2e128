"""Public chain registry (chainlist) lookups for safe-predeployments."""

import logging
from typing import Any, Dict, List, Optional

import requests

from .constants import CHAINLIST_URL, DEFAULT_TIMEOUT
from .exceptions import RegistryFetchError
from .types import RegistryEntry

logger = logging.getLogger(__name__)


def is_valid_chain_id(value: Any) -> bool:
    """Check that a registry chainId is a JSON integer (booleans excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def parse_registry_entry(item: Dict[str, Any]) -> RegistryEntry:
    """
    Parse a single chainlist item.

    RPCs are listed either as plain URL strings or as objects with a "url"
    key; both are normalized to URL strings. Anything else is dropped.

    Args:
        item: Raw chainlist entry

    Returns:
        RegistryEntry

    Raises:
        KeyError: If chainId is missing

    Note:
        Callers filter entries with is_valid_chain_id first; chainId is
        taken as is and never coerced.
    """
    rpc_urls: List[str] = []
    for rpc in item.get("rpc") or []:
        if isinstance(rpc, str):
            rpc_urls.append(rpc)
        elif isinstance(rpc, dict) and isinstance(rpc.get("url"), str):
            rpc_urls.append(rpc["url"])

    return RegistryEntry(
        chain_id=item["chainId"],
        name=item.get("name"),
        rpc=rpc_urls,
    )


def fetch_chainlist(
    url: str = CHAINLIST_URL, timeout: int = DEFAULT_TIMEOUT
) -> List[RegistryEntry]:
    """
    Fetch the public chain registry.

    Args:
        url: Registry URL serving a JSON list of chains
        timeout: Request timeout in seconds

    Returns:
        List of registry entries; items without a chainId are skipped

    Raises:
        RegistryFetchError: If the request fails or returns a non-2xx status
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise RegistryFetchError(None, str(e)) from e

    if not 200 <= response.status_code < 300:
        logger.error(
            "Chainlist request failed: status=%s body=%s",
            response.status_code,
            response.text,
        )
        raise RegistryFetchError(response.status_code, response.text)

    entries = []
    for item in response.json():
        # Malformed entries (missing, null, boolean or string chainId) are skipped
        if not isinstance(item, dict) or not is_valid_chain_id(item.get("chainId")):
            continue
        entries.append(parse_registry_entry(item))

    logger.debug("Fetched %d chains from %s", len(entries), url)
    return entries


def find_chain(entries: List[RegistryEntry], chain_id: int) -> Optional[RegistryEntry]:
    """
    Find the first registry entry for a chain.

    Args:
        entries: Registry entries
        chain_id: Chain ID to search for

    Returns:
        Matching entry, or None if the chain is not listed
    """
    for entry in entries:
        if entry.chain_id == chain_id:
            return entry
    return None


def is_listed(entries: List[RegistryEntry], chain_id: int) -> bool:
    """Check whether a chain appears in the registry."""
    return find_chain(entries, chain_id) is not None


def first_http_rpc(entry: Optional[RegistryEntry]) -> Optional[str]:
    """
    Pick a usable RPC endpoint from a registry entry.

    URLs are scanned in order. Websocket endpoints and URLs that need an API
    key substituted (e.g. ".../${INFURA_API_KEY}") are skipped.

    Args:
        entry: Registry entry (may be None)

    Returns:
        First http(s) URL, or None if none qualifies
    """
    if entry is None:
        return None

    for url in entry.rpc:
        if url.startswith(("http://", "https://")) and "${" not in url:
            return url
    return None


class ChainRegistry:
    """Chain registry fetched on first use and reused for one run."""

    def __init__(self, url: str = CHAINLIST_URL, timeout: int = DEFAULT_TIMEOUT):
        self.url = url
        self.timeout = timeout
        self._entries: Optional[List[RegistryEntry]] = None

    @property
    def entries(self) -> List[RegistryEntry]:
        if self._entries is None:
            self._entries = fetch_chainlist(self.url, self.timeout)
        return self._entries

    def find(self, chain_id: int) -> Optional[RegistryEntry]:
        return find_chain(self.entries, chain_id)

    def has_chain(self, chain_id: int) -> bool:
        return is_listed(self.entries, chain_id)
