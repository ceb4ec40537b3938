"""
Supported networks for the Cartesi Rollups contracts

Each network carries the way its contract addresses are found: a table
packaged with this library, or a deployment file written by a local
development node.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import UnsupportedNetwork


class AddressSource(Enum):
    """Where contract addresses for a network come from"""
    PACKAGED = "packaged"
    DEPLOYMENT_FILE = "deployment_file"


@dataclass(frozen=True)
class NetworkInfo:
    """Static parameters of a network"""
    chain_id: int
    name: str
    address_source: AddressSource
    # Proof-of-authority chains put 97+ bytes in extraData
    poa: bool = False


class Network(Enum):
    """Networks the rollups contracts can be resolved on"""
    POLYGON_MUMBAI = NetworkInfo(80001, "polygon_mumbai", AddressSource.PACKAGED, poa=True)
    HARDHAT = NetworkInfo(31337, "hardhat", AddressSource.DEPLOYMENT_FILE)

    @property
    def chain_id(self) -> int:
        return self.value.chain_id

    @property
    def network_name(self) -> str:
        return self.value.name

    @property
    def address_source(self) -> AddressSource:
        return self.value.address_source

    @property
    def poa(self) -> bool:
        return self.value.poa

    @classmethod
    def from_chain_id(cls, chain_id: int) -> "Network":
        """
        Look up a network by chain id

        Raises:
            UnsupportedNetwork: If no supported network has this chain id
        """
        for network in cls:
            if network.chain_id == chain_id:
                return network
        raise UnsupportedNetwork.from_chain_id(chain_id)

    def __str__(self) -> str:
        return f"{self.network_name} ({self.chain_id})"
