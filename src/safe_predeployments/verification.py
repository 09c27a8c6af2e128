"""On-chain verification of the pre-installed factory."""

import logging
from typing import Optional

from eth_utils import decode_hex, keccak, to_hex

from .constants import ADDRESS, CODEHASH
from .exceptions import (
    ChainIdMismatchError,
    FactoryBytecodeMismatchError,
    FactoryNotDeployedError,
)
from .rpc import JsonRpcClient
from .types import VerificationOutcome

logger = logging.getLogger(__name__)


def verify_predeployment(
    rpc_url: str,
    expected_chain_id: int,
    expected_codehash: str = CODEHASH,
    address: str = ADDRESS,
    client: Optional[JsonRpcClient] = None,
) -> VerificationOutcome:
    """
    Confirm that the factory is pre-installed on the chain behind an RPC endpoint.

    Args:
        rpc_url: JSON-RPC endpoint URL
        expected_chain_id: Chain ID the endpoint must report
        expected_codehash: Keccak-256 of the factory runtime bytecode
        address: Factory address
        client: RPC client to use (defaults to a JsonRpcClient for rpc_url)

    Returns:
        VerificationOutcome with the observed chain ID, code size and hash

    Raises:
        ChainIdMismatchError: If the endpoint serves a different chain
        FactoryNotDeployedError: If there is no code at the address
        FactoryBytecodeMismatchError: If the code hash differs
        RpcError: If an RPC call fails
    """
    if client is None:
        client = JsonRpcClient(rpc_url)

    chain_id = client.chain_id()
    if chain_id != expected_chain_id:
        raise ChainIdMismatchError(expected_chain_id, chain_id)

    code = decode_hex(client.get_code(address))
    if len(code) == 0:
        raise FactoryNotDeployedError(address)

    codehash = to_hex(keccak(code))
    if codehash.lower() != expected_codehash.lower():
        raise FactoryBytecodeMismatchError(address, codehash)

    logger.info("Factory verified at %s on chain %d", address, chain_id)
    return VerificationOutcome(chain_id=chain_id, code_size=len(code), codehash=codehash)
