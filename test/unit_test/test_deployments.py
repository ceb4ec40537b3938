"""
Test Deployments Module

Tests for network lookup and factory address resolution.
"""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

FACTORY_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


def _write_deployment(path: Path, address: str = FACTORY_ADDRESS) -> Path:
    path.write_text(json.dumps({
        "name": "localhost",
        "chainId": "31337",
        "contracts": {"CartesiDAppFactory": {"address": address}},
    }))
    return path


def _packaged_factory_address() -> str:
    from rollups_cli.deployments import PACKAGED_DEPLOYMENTS_DIR

    document = json.loads((PACKAGED_DEPLOYMENTS_DIR / "polygon_mumbai.json").read_text())
    return document["contracts"]["CartesiDAppFactory"]["address"]


def test_network_from_chain_id():
    """Test Network lookup by chain id"""
    from rollups_cli.networks import Network, AddressSource
    from rollups_cli.errors import UnsupportedNetwork

    print("Testing Network.from_chain_id...")

    assert Network.from_chain_id(80001) is Network.POLYGON_MUMBAI
    assert Network.from_chain_id(31337) is Network.HARDHAT
    assert Network.POLYGON_MUMBAI.address_source is AddressSource.PACKAGED
    assert Network.HARDHAT.address_source is AddressSource.DEPLOYMENT_FILE
    assert Network.POLYGON_MUMBAI.poa is True
    assert Network.HARDHAT.poa is False
    assert str(Network.HARDHAT) == "hardhat (31337)"

    with pytest.raises(UnsupportedNetwork) as exc_info:
        Network.from_chain_id(1)
    assert exc_info.value.chain_id == 1

    print("  Network.from_chain_id: PASSED")


def test_packaged_table_lookup():
    """Public network resolves from the packaged table"""
    from rollups_cli.deployments import resolve_factory_address

    print("Testing packaged table lookup...")

    address = resolve_factory_address(80001)
    assert address == _packaged_factory_address()

    print("  Packaged table lookup: PASSED")


def test_packaged_table_ignores_deployment_path(tmp_path):
    """Public network never reads the deployment path, even an invalid one"""
    from rollups_cli.deployments import address_book_for, StaticAddressBook
    from rollups_cli.networks import Network

    print("Testing packaged table ignores deployment path...")

    missing = tmp_path / "does-not-exist.json"
    with patch("rollups_cli.deployments.DeploymentFileAddressBook") as file_book:
        book = address_book_for(Network.POLYGON_MUMBAI, str(missing))
        assert isinstance(book, StaticAddressBook)
        assert book.address_of("CartesiDAppFactory") == _packaged_factory_address()
        file_book.assert_not_called()

    print("  Packaged table ignores deployment path: PASSED")


def test_deployment_file_lookup(tmp_path):
    """Local network resolves from the deployment file"""
    from rollups_cli.deployments import resolve_factory_address

    print("Testing deployment file lookup...")

    deployment = _write_deployment(tmp_path / "localhost.json")
    assert resolve_factory_address(31337, str(deployment)) == FACTORY_ADDRESS

    print("  Deployment file lookup: PASSED")


@pytest.mark.parametrize("deployment_path", [None, ""])
def test_deployment_path_missing(deployment_path):
    """Local network without a path fails naming the network"""
    from rollups_cli.deployments import resolve_factory_address
    from rollups_cli.errors import ConfigurationError

    with pytest.raises(ConfigurationError) as exc_info:
        resolve_factory_address(31337, deployment_path)
    assert exc_info.value.message == "undefined deployment path for network 31337"


def test_deployment_file_not_found(tmp_path):
    """Local network with a non-existent file fails naming the path"""
    from rollups_cli.deployments import resolve_factory_address
    from rollups_cli.errors import DeploymentNotFound

    print("Testing deployment file not found...")

    missing = str(tmp_path / "missing.json")
    try:
        resolve_factory_address(31337, missing)
        assert False, "Should raise for missing deployment file"
    except DeploymentNotFound as e:
        assert e.path == missing
        assert e.message == f"deployment file '{missing}' not found"

    print("  Deployment file not found: PASSED")


def test_unsupported_chain_id(tmp_path):
    """Unknown chain id is an explicit error rather than an empty address"""
    from rollups_cli.deployments import resolve_factory_address
    from rollups_cli.errors import UnsupportedNetwork

    deployment = _write_deployment(tmp_path / "localhost.json")
    with pytest.raises(UnsupportedNetwork):
        resolve_factory_address(5, str(deployment))


def test_contract_missing_from_deployment(tmp_path):
    """Deployment file without the factory entry"""
    from rollups_cli.deployments import resolve_factory_address
    from rollups_cli.errors import DeploymentError

    deployment = tmp_path / "localhost.json"
    deployment.write_text(json.dumps({"contracts": {"InputFacet": {"address": FACTORY_ADDRESS}}}))

    with pytest.raises(DeploymentError) as exc_info:
        resolve_factory_address(31337, str(deployment))
    assert exc_info.value.contract == "CartesiDAppFactory"


def test_malformed_deployment_file(tmp_path):
    """JSON errors come through unchanged"""
    from rollups_cli.deployments import resolve_factory_address

    deployment = tmp_path / "localhost.json"
    deployment.write_text("{not json")

    with pytest.raises(json.JSONDecodeError):
        resolve_factory_address(31337, str(deployment))


def test_deployment_file_read_lazily(tmp_path):
    """The file is read on first lookup, then kept"""
    from rollups_cli.deployments import DeploymentFileAddressBook

    print("Testing lazy deployment file read...")

    other = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"
    deployment = _write_deployment(tmp_path / "localhost.json")
    book = DeploymentFileAddressBook(deployment)

    # Not read yet: content written now is what the first lookup sees
    _write_deployment(deployment, other)
    assert book.address_of("CartesiDAppFactory") == other

    # Already loaded: later changes are not picked up
    _write_deployment(deployment, FACTORY_ADDRESS)
    assert book.address_of("CartesiDAppFactory") == other

    print("  Lazy deployment file read: PASSED")
