"""Configuration constants for safe-predeployments."""

# Safe Singleton Factory, as pre-installed by OP Stack and ZKsync networks
ADDRESS = "0x914d7Fec6aaC8cd542e72Bca78B30650d45643d7"
CODEHASH = "0x2fa86add0aed31f33a762c9d88e807c475bd51d0f52bd0955754b2608f7e4989"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Artifact for networks where no deployment transaction is needed
PREDEPLOYMENT_ARTIFACT = {
    "gasPrice": 0,
    "gasLimit": 0,
    "signerAddress": ZERO_ADDRESS,
    "transaction": "0x",
    "address": ADDRESS,
}

ARTIFACT_FILENAME = "deployment.json"

CHAINLIST_URL = "https://chainlist.org/rpcs.json"
CHAINLIST_DOCS_URL = "https://github.com/DefiLlama/chainlist?tab=readme-ov-file#add-a-chain"

DEFAULT_TIMEOUT = 30

# Environment variables read by PredeploymentConfig.from_env
ENV_CHAIN_ID = "CHAIN_ID"
ENV_RPC = "RPC"
ENV_SKIP_CHAINLIST_CHECK = "SKIP_CHAINLIST_CHECK"
ENV_SUMMARY_FILE = "SUMMARY_FILE"
ENV_ARTIFACTS_DIR = "ARTIFACTS_DIR"
ENV_CHAINLIST_URL = "CHAINLIST_URL"
