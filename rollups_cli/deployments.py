"""
Contract address books

An address book answers "what is the address of contract X" for one network.
Public networks use a table packaged under rollups_cli/data/deployments;
the local development network uses the deployment file exported by the
node that deployed the contracts. Both share the document shape:

    {"contracts": {"CartesiDAppFactory": {"address": "0x..."}}}
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import ConfigurationError, DeploymentError, DeploymentNotFound
from .networks import AddressSource, Network

logger = logging.getLogger(__name__)

FACTORY_CONTRACT = "CartesiDAppFactory"

PACKAGED_DEPLOYMENTS_DIR = Path(__file__).parent / "data" / "deployments"


def extract_address(document: Dict[str, Any], contract: str, source: str) -> str:
    """
    Read contracts.<contract>.address from a deployment document

    Raises:
        DeploymentError: If the document has no address for the contract
    """
    try:
        return document["contracts"][contract]["address"]
    except (KeyError, TypeError) as e:
        raise DeploymentError.contract_missing(source, contract) from e


class AddressBook(ABC):
    """Resolves contract addresses by name for one network"""

    @property
    @abstractmethod
    def source(self) -> str:
        """Human readable origin of the addresses"""

    @abstractmethod
    def _document(self) -> Dict[str, Any]:
        """Load the deployment document"""

    def address_of(self, contract: str) -> str:
        address = extract_address(self._document(), contract, self.source)
        logger.debug(f"{contract} at {address} ({self.source})")
        return address


class StaticAddressBook(AddressBook):
    """Addresses packaged with the library for a public network"""

    def __init__(self, network: Network):
        self._network = network

    @property
    def source(self) -> str:
        return f"packaged table for {self._network}"

    @property
    def path(self) -> Path:
        return PACKAGED_DEPLOYMENTS_DIR / f"{self._network.network_name}.json"

    def _document(self) -> Dict[str, Any]:
        return json.loads(self.path.read_text(encoding="utf-8"))


class DeploymentFileAddressBook(AddressBook):
    """
    Addresses from a user supplied deployment file

    The file is only read on the first lookup.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._loaded: Optional[Dict[str, Any]] = None

    @property
    def source(self) -> str:
        return f"'{self._path}'"

    @property
    def path(self) -> Path:
        return self._path

    def _document(self) -> Dict[str, Any]:
        if self._loaded is None:
            logger.debug(f"Reading deployment file {self._path}")
            with open(self._path, "r", encoding="utf-8") as f:
                self._loaded = json.load(f)
        return self._loaded


def address_book_for(
    network: Network,
    deployment_path: Optional[str] = None,
) -> AddressBook:
    """
    Pick the single address source for a network

    Args:
        network: Resolved network
        deployment_path: Deployment file, required for the local network only

    Returns:
        AddressBook for the network

    Raises:
        ConfigurationError: Local network without a deployment path
        DeploymentNotFound: Deployment path does not exist
    """
    if network.address_source is AddressSource.PACKAGED:
        return StaticAddressBook(network)

    if network.address_source is AddressSource.DEPLOYMENT_FILE:
        if not deployment_path:
            raise ConfigurationError.undefined_deployment_path(network.chain_id)
        if not Path(deployment_path).exists():
            raise DeploymentNotFound.file_not_found(deployment_path)
        return DeploymentFileAddressBook(deployment_path)

    raise ConfigurationError.invalid("address_source", f"unknown source {network.address_source}")


def resolve_factory_address(
    chain_id: int,
    deployment_path: Optional[str] = None,
) -> str:
    """
    Resolve the CartesiDAppFactory address for a chain id

    Raises:
        UnsupportedNetwork: If chain_id is not a supported network
        ConfigurationError: Local network without a deployment path
        DeploymentNotFound: Deployment path does not exist
        DeploymentError: Document has no factory entry
    """
    network = Network.from_chain_id(chain_id)
    return address_book_for(network, deployment_path).address_of(FACTORY_CONTRACT)
