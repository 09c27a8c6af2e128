"""Command-line entry point for safe-predeployments."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .config import PredeploymentConfig
from .pipeline import add_predeployment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="add-predeployment",
        description=(
            "Register a pre-deployment artifact for a chain where the Safe "
            "Singleton Factory is pre-installed. Options override the CHAIN_ID, "
            "RPC, SKIP_CHAINLIST_CHECK, SUMMARY_FILE, ARTIFACTS_DIR and "
            "CHAINLIST_URL environment variables."
        ),
    )
    parser.add_argument("--chain-id", help="Target chain ID")
    parser.add_argument("--rpc", help="RPC URL used for on-chain verification")
    parser.add_argument(
        "--skip-chainlist-check",
        action="store_true",
        help="Do not require the chain to be listed on chainlist.org",
    )
    parser.add_argument("--summary-file", help="Write the JSON run summary to this path")
    parser.add_argument("--artifacts-dir", help="Artifacts directory (default: ./artifacts)")
    parser.add_argument("--chainlist-url", help="Chain registry URL")
    parser.add_argument("--no-dotenv", action="store_true", help="Do not load a .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_config(args: argparse.Namespace) -> PredeploymentConfig:
    """Merge command-line options over the environment configuration."""
    config = PredeploymentConfig.from_env()

    overrides = {}
    if args.chain_id is not None:
        overrides["chain_id"] = args.chain_id
    if args.rpc is not None:
        overrides["rpc_url"] = args.rpc
    if args.skip_chainlist_check:
        overrides["skip_registry_check"] = True
    if args.summary_file is not None:
        overrides["summary_file"] = args.summary_file
    if args.artifacts_dir is not None:
        overrides["artifacts_dir"] = args.artifacts_dir
    if args.chainlist_url is not None:
        overrides["registry_url"] = args.chainlist_url

    return replace(config, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    if not args.no_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    summary = add_predeployment(build_config(args))
    print(json.dumps(summary.to_dict(), indent=2))
    return 0 if summary.success else 1


if __name__ == "__main__":
    sys.exit(main())
