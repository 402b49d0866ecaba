"""
Contract Deployment CLI
Deploys a compiled contract artifact and prints the new contract address

Usage:
    python deploy.py <sender> <artifact.json> <node-endpoint>
"""

import argparse
import os
import sys
from dataclasses import dataclass
from typing import List, Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from blockchain import ContractDeployer, DeploymentFailedError, load_artifact
from blockchain.errors import UnsupportedEndpointError
from utils.rpc_provider import connect, normalize_endpoint


@dataclass(frozen=True)
class DeployArgs:
    """Validated command line arguments"""

    sender: str
    artifact_path: str
    endpoint: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='deploy-contract',
        allow_abbrev=False,
        description='Deploy a compiled smart contract and print its address.',
        epilog='Set DEPLOYER_LOG_LEVEL / DEPLOYER_LOG_FILE to enable diagnostics.'
    )
    parser.add_argument('sender', metavar='SENDER', help='Account the deployment is sent from (must be unlocked on the node).')
    parser.add_argument('artifact_path', metavar='ARTIFACT', help='Compiled contract JSON containing "abi" and "bytecode".')
    parser.add_argument('endpoint', metavar='ENDPOINT', help='Node endpoint: http(s)://, ws(s)://, host:port or a .ipc path.')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> DeployArgs:
    """
    Parse and validate positional arguments

    Exits with status 2 on a usage error, before anything is read or sent.
    """
    parser = build_parser()
    ns = parser.parse_args(argv)

    sender = ns.sender.strip()
    if not Web3.is_address(sender):
        parser.error(f"SENDER is not a valid account address: {ns.sender!r}")

    if not ns.artifact_path:
        parser.error("ARTIFACT must not be empty")

    try:
        endpoint = normalize_endpoint(ns.endpoint)
    except UnsupportedEndpointError as e:
        parser.error(f"ENDPOINT {ns.endpoint!r}: {e}")

    return DeployArgs(sender=sender, artifact_path=ns.artifact_path, endpoint=endpoint)


def configure_logging():
    """Install loguru sinks; stdout/stderr stay quiet unless asked for"""
    load_dotenv()

    logger.remove()

    log_level = os.getenv('DEPLOYER_LOG_LEVEL')
    if log_level:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            level=log_level.upper()
        )

    log_file = os.getenv('DEPLOYER_LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one deployment

    Artifact, transport and node errors are not handled here and
    propagate to the interpreter.

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    configure_logging()

    # Read the artifact before touching the network
    artifact = load_artifact(args.artifact_path)

    w3 = connect(args.endpoint)
    deployer = ContractDeployer(w3)

    try:
        result = deployer.deploy(artifact, args.sender)
    except DeploymentFailedError as e:
        print(e, file=sys.stderr)
        return 1

    print(result.address)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
