"""
Infrastructure layer for Rollups CLI

Provides:
- EVMSigner: mnemonic-derived local signer
- create_web3: HTTP-backed Web3 client
- ReadOnlyConnection / SigningConnection: client with or without signer
"""

from .evm_signer import (
    ACCOUNT_PATH_TEMPLATE,
    DEFAULT_ACCOUNT_PATH,
    EVMSigner,
    account_path,
    create_web3,
    inject_poa_middleware,
)
from .connection import (
    Connection,
    ReadOnlyConnection,
    SigningConnection,
    create_connection,
    fetch_chain_id,
)

__all__ = [
    "ACCOUNT_PATH_TEMPLATE",
    "DEFAULT_ACCOUNT_PATH",
    "EVMSigner",
    "account_path",
    "create_web3",
    "inject_poa_middleware",
    "Connection",
    "ReadOnlyConnection",
    "SigningConnection",
    "create_connection",
    "fetch_chain_id",
]
