"""
Test Connection Module

Tests for rollups_cli.infra (client, mnemonic signer, connections).
No node is needed: nothing here issues a JSON-RPC request.
"""

import sys
from pathlib import Path

import pytest

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

RPC_URL = "http://localhost:8545"

# Default development mnemonic and its first two accounts
TEST_MNEMONIC = "test test test test test test test test test test test junk"
ACCOUNT_0 = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
ACCOUNT_1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


def test_account_path():
    """Test derivation path construction"""
    from rollups_cli.infra import account_path, DEFAULT_ACCOUNT_PATH
    from rollups_cli.errors import ConfigurationError

    print("Testing account_path...")

    assert DEFAULT_ACCOUNT_PATH == "m/44'/60'/0'/0/0"
    assert account_path() == DEFAULT_ACCOUNT_PATH
    assert account_path(0) == DEFAULT_ACCOUNT_PATH
    assert account_path(7) == "m/44'/60'/0'/0/7"

    with pytest.raises(ConfigurationError):
        account_path(-1)

    print("  account_path: PASSED")


def test_signer_from_mnemonic():
    """Test EVMSigner derivation"""
    from rollups_cli.infra import EVMSigner, account_path

    print("Testing EVMSigner.from_mnemonic...")

    signer0 = EVMSigner.from_mnemonic(TEST_MNEMONIC)
    assert signer0.address == ACCOUNT_0

    signer1 = EVMSigner.from_mnemonic(TEST_MNEMONIC, account_path(1))
    assert signer1.address == ACCOUNT_1
    assert repr(signer1) == f"EVMSigner(address={ACCOUNT_1})"

    print("  EVMSigner.from_mnemonic: PASSED")


def test_signer_derivation_is_deterministic():
    """Same mnemonic and path give the same key every time"""
    from rollups_cli.infra import EVMSigner, account_path

    first = EVMSigner.from_mnemonic(TEST_MNEMONIC, account_path(3))
    second = EVMSigner.from_mnemonic(TEST_MNEMONIC, account_path(3))

    assert first.address == second.address
    assert first.account.key == second.account.key


def test_invalid_mnemonic():
    """Malformed mnemonic fails immediately with the eth-account error"""
    from eth_utils import ValidationError
    from rollups_cli.infra import create_connection

    with pytest.raises(ValidationError):
        create_connection(RPC_URL, "definitely not a valid seed phrase")


def test_create_web3():
    """Test Web3 client construction"""
    from web3 import HTTPProvider, Web3
    from rollups_cli.infra import create_web3

    print("Testing create_web3...")

    web3 = create_web3(RPC_URL, timeout=5)
    assert isinstance(web3, Web3)
    assert isinstance(web3.provider, HTTPProvider)
    assert web3.provider.endpoint_uri == RPC_URL

    print("  create_web3: PASSED")


def test_read_only_connection():
    """No mnemonic gives a read-only connection"""
    from rollups_cli.infra import create_connection, ReadOnlyConnection

    print("Testing read-only connection...")

    for mnemonic in (None, ""):
        connection = create_connection(RPC_URL, mnemonic)
        assert isinstance(connection, ReadOnlyConnection)
        assert connection.is_signing is False
        assert connection.signer is None
        assert not connection.web3.eth.default_account

    print("  Read-only connection: PASSED")


def test_signing_connection():
    """Mnemonic gives a signing connection bound to the derived account"""
    from rollups_cli.infra import create_connection, SigningConnection, account_path

    print("Testing signing connection...")

    connection = create_connection(RPC_URL, TEST_MNEMONIC, account_path(1))
    assert isinstance(connection, SigningConnection)
    assert connection.is_signing is True
    assert connection.signer.address == ACCOUNT_1
    assert connection.web3.eth.default_account == ACCOUNT_1

    print("  Signing connection: PASSED")
