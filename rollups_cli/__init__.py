"""
Rollups CLI - connection layer for the Cartesi Rollups contracts

Usage:
    from rollups_cli import rollups, factory

    # DApp facets, read-only
    contracts = rollups("http://localhost:8545", "0x...")

    # DApp factory of the connected network, signing with account 1
    dapp_factory = factory(
        "http://localhost:8545",
        mnemonic="test test test test test test test test test test test junk",
        account_index=1,
        deployment_path="deployments/localhost.json",
    )
"""

from .connect import rollups, factory
from .contracts import RollupsContracts, bind_contract, bind_factory, bind_rollups
from .deployments import (
    AddressBook,
    StaticAddressBook,
    DeploymentFileAddressBook,
    address_book_for,
    resolve_factory_address,
)
from .networks import Network, AddressSource
from .infra import (
    EVMSigner,
    ReadOnlyConnection,
    SigningConnection,
    create_connection,
    fetch_chain_id,
)
from .errors import (
    ErrorCode,
    RollupsCliError,
    ConfigurationError,
    DeploymentNotFound,
    DeploymentError,
    UnsupportedNetwork,
    SignerError,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "rollups",
    "factory",
    # Binding
    "RollupsContracts",
    "bind_contract",
    "bind_factory",
    "bind_rollups",
    # Address resolution
    "AddressBook",
    "StaticAddressBook",
    "DeploymentFileAddressBook",
    "address_book_for",
    "resolve_factory_address",
    "Network",
    "AddressSource",
    # Connection
    "EVMSigner",
    "ReadOnlyConnection",
    "SigningConnection",
    "create_connection",
    "fetch_chain_id",
    # Errors
    "ErrorCode",
    "RollupsCliError",
    "ConfigurationError",
    "DeploymentNotFound",
    "DeploymentError",
    "UnsupportedNetwork",
    "SignerError",
]
