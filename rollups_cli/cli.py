"""
Command line interface

Read-only commands over the rollups contracts. Options default to the
values from the environment / .env (see rollups_cli.config).

    rollups-cli factory-address --deployment deployments/localhost.json
    rollups-cli account --account-index 1
    rollups-cli inputs --dapp 0x...
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .config import get_config, setup_logging
from .connect import factory, rollups
from .errors import RollupsCliError, SignerError
from .infra import EVMSigner, account_path

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    cfg = get_config()

    parser = argparse.ArgumentParser(
        prog="rollups-cli",
        description="Query Cartesi Rollups contracts",
    )
    parser.add_argument("--rpc", default=cfg.rpc.url, help=f"JSON-RPC endpoint (default {cfg.rpc.url})")
    parser.add_argument("--mnemonic", default=cfg.signer.mnemonic, help="wallet mnemonic (env MNEMONIC)")
    parser.add_argument(
        "--account-index",
        type=int,
        default=cfg.signer.account_index,
        help="account index derived from the mnemonic",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")

    sub = parser.add_subparsers(dest="command", required=True)

    p_factory = sub.add_parser("factory-address", help="print the DApp factory address of the network")
    p_factory.add_argument(
        "--deployment",
        default=cfg.deployment.path,
        help="deployment file of the local network (env DEPLOYMENT_PATH)",
    )

    sub.add_parser("account", help="print the address derived from the mnemonic")

    p_inputs = sub.add_parser("inputs", help="print the number of inputs of a DApp")
    p_inputs.add_argument("--dapp", required=True, help="DApp address")

    return parser


def _factory_address(args: argparse.Namespace) -> str:
    contract = factory(args.rpc, args.mnemonic, args.account_index, args.deployment)
    return contract.address


def _account(args: argparse.Namespace) -> str:
    if not args.mnemonic:
        raise SignerError.not_configured()
    return EVMSigner.from_mnemonic(args.mnemonic, account_path(args.account_index)).address


def _inputs(args: argparse.Namespace) -> str:
    contracts = rollups(args.rpc, args.dapp, args.mnemonic)
    return str(contracts.input_contract.functions.getNumberOfInputs().call())


COMMANDS = {
    "factory-address": _factory_address,
    "account": _account,
    "inputs": _inputs,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    log_config = get_config().logging
    if args.log_level:
        log_config = dataclasses.replace(log_config, log_level=args.log_level)
    setup_logging(log_config)

    try:
        print(COMMANDS[args.command](args))
    except RollupsCliError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
