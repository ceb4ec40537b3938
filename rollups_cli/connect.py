"""
Entry points: connect to a DApp or to the DApp factory

Usage:
    from rollups_cli import rollups, factory

    contracts = rollups("http://localhost:8545", dapp_address, mnemonic)
    count = contracts.input_contract.functions.getNumberOfInputs().call()

    dapp_factory = factory(
        "http://localhost:8545",
        mnemonic,
        account_index=1,
        deployment_path="deployments/localhost.json",
    )
"""

import logging
from typing import Optional

from web3.contract import Contract

from .contracts import RollupsContracts, bind_factory, bind_rollups
from .deployments import FACTORY_CONTRACT, address_book_for
from .infra import (
    DEFAULT_ACCOUNT_PATH,
    account_path,
    create_connection,
    fetch_chain_id,
    inject_poa_middleware,
)
from .networks import Network

logger = logging.getLogger(__name__)


def rollups(
    rpc: str,
    address: str,
    mnemonic: Optional[str] = None,
) -> RollupsContracts:
    """
    Bind the input, output and ERC20 portal facets of a DApp

    Makes no JSON-RPC request. With a mnemonic, the first account
    (m/44'/60'/0'/0/0) signs transactions.

    Args:
        rpc: JSON-RPC endpoint URL
        address: DApp address
        mnemonic: Optional BIP-39 phrase

    Returns:
        RollupsContracts
    """
    connection = create_connection(rpc, mnemonic, DEFAULT_ACCOUNT_PATH)
    return bind_rollups(address, connection)


def factory(
    rpc: str,
    mnemonic: Optional[str] = None,
    account_index: Optional[int] = None,
    deployment_path: Optional[str] = None,
) -> Contract:
    """
    Bind the CartesiDAppFactory of the connected network

    Queries the chain id once, then reads the factory address from the
    packaged table (public networks) or from deployment_path (local
    development network).

    Args:
        rpc: JSON-RPC endpoint URL
        mnemonic: Optional BIP-39 phrase
        account_index: Index of the account derived from the mnemonic (default 0)
        deployment_path: Deployment file, required on the local network

    Returns:
        Factory contract proxy

    Raises:
        UnsupportedNetwork: Chain id is not a supported network
        ConfigurationError: Local network without deployment_path
        DeploymentNotFound: deployment_path does not exist
    """
    path = account_path(account_index) if mnemonic else DEFAULT_ACCOUNT_PATH
    connection = create_connection(rpc, mnemonic, path)

    network = Network.from_chain_id(fetch_chain_id(connection))
    if network.poa:
        inject_poa_middleware(connection.web3)

    address = address_book_for(network, deployment_path).address_of(FACTORY_CONTRACT)
    logger.info(f"{FACTORY_CONTRACT} on {network}: {address}")

    return bind_factory(address, connection)
