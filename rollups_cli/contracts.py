"""
Contract proxies for the Cartesi Rollups interfaces

Binds packaged ABIs to an address through a connection's Web3 client.
A signing connection makes transactions on these proxies go out signed by
its account; a read-only connection only supports calls.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from web3 import Web3
from web3.contract import Contract

from .errors import ConfigurationError
from .infra import Connection

logger = logging.getLogger(__name__)

ABI_DIR = Path(__file__).parent / "data" / "abi"

INPUT_FACET = "InputFacet"
OUTPUT_FACET = "OutputFacet"
ERC20_PORTAL_FACET = "ERC20PortalFacet"
DAPP_FACTORY = "CartesiDAppFactory"

KNOWN_CONTRACTS = (INPUT_FACET, OUTPUT_FACET, ERC20_PORTAL_FACET, DAPP_FACTORY)


@lru_cache(maxsize=None)
def _load_abi_text(name: str) -> str:
    return (ABI_DIR / f"{name}.json").read_text(encoding="utf-8")


def load_abi(name: str) -> List[Dict[str, Any]]:
    """
    Load the packaged ABI of a rollups contract interface

    Raises:
        ConfigurationError: If name is not a known interface
    """
    if name not in KNOWN_CONTRACTS:
        raise ConfigurationError.invalid("contract", f"unknown interface '{name}'")
    return json.loads(_load_abi_text(name))


@dataclass
class RollupsContracts:
    """Facets of one DApp, all bound to the same address"""
    input_contract: Contract
    output_contract: Contract
    erc20_portal: Contract


def bind_contract(name: str, address: str, connection: Connection) -> Contract:
    """
    Bind one interface to an address

    The address is checksummed here, so a malformed one raises ValueError
    at binding time. It is not checked on chain: a well-formed address with
    no contract behind it fails when a proxy method is used.
    """
    contract = connection.web3.eth.contract(
        address=Web3.to_checksum_address(address),
        abi=load_abi(name),
    )
    logger.debug(f"Bound {name} at {contract.address}")
    return contract


def bind_rollups(address: str, connection: Connection) -> RollupsContracts:
    """Bind the input, output and ERC20 portal facets of a DApp"""
    return RollupsContracts(
        input_contract=bind_contract(INPUT_FACET, address, connection),
        output_contract=bind_contract(OUTPUT_FACET, address, connection),
        erc20_portal=bind_contract(ERC20_PORTAL_FACET, address, connection),
    )


def bind_factory(address: str, connection: Connection) -> Contract:
    """Bind the DApp factory"""
    return bind_contract(DAPP_FACTORY, address, connection)
