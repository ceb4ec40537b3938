"""
JSON-RPC connection, read-only or signing

A connection is either ReadOnlyConnection (no mnemonic given) or
SigningConnection (client plus a signer derived from the mnemonic).
Contract binding only ever needs `connection.web3`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from web3 import Web3

from .evm_signer import DEFAULT_ACCOUNT_PATH, EVMSigner, create_web3
from ..config import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadOnlyConnection:
    """Client bound to one endpoint, calls only"""
    web3: Web3

    @property
    def signer(self) -> None:
        return None

    @property
    def is_signing(self) -> bool:
        return False


@dataclass(frozen=True)
class SigningConnection:
    """Client bound to one endpoint with a local signer attached"""
    web3: Web3
    signer: EVMSigner

    @property
    def is_signing(self) -> bool:
        return True


Connection = Union[ReadOnlyConnection, SigningConnection]


def create_connection(
    rpc_url: str,
    mnemonic: Optional[str] = None,
    path: str = DEFAULT_ACCOUNT_PATH,
    timeout: Optional[float] = None,
) -> Connection:
    """
    Connect to a JSON-RPC endpoint, optionally with a mnemonic wallet

    Args:
        rpc_url: RPC endpoint URL
        mnemonic: Optional BIP-39 phrase; when empty the connection is read-only
        path: Derivation path used with the mnemonic
        timeout: Request timeout in seconds (defaults to RPC_TIMEOUT_SECONDS)

    Returns:
        ReadOnlyConnection or SigningConnection
    """
    if timeout is None:
        timeout = config.rpc.timeout_seconds

    web3 = create_web3(rpc_url, timeout=timeout)

    if not mnemonic:
        logger.debug(f"Read-only connection to {rpc_url}")
        return ReadOnlyConnection(web3)

    signer = EVMSigner.from_mnemonic(mnemonic, path)
    signer.attach(web3)
    logger.info(f"Signing connection to {rpc_url} as {signer.address}")
    return SigningConnection(web3, signer)


def fetch_chain_id(connection: Connection) -> int:
    """Query the chain id of the connected network (one eth_chainId round trip)"""
    chain_id = connection.web3.eth.chain_id
    logger.debug(f"Connected network chain id: {chain_id}")
    return chain_id
