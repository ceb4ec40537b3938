"""
EVM signer and client construction using web3.py

Provides a local signer derived from a BIP-39 mnemonic and the
HTTP-backed Web3 client the contract proxies are bound to.
"""

from __future__ import annotations

import logging
from typing import Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import HTTPProvider, Web3
from web3.middleware import ExtraDataToPOAMiddleware, SignAndSendRawMiddlewareBuilder

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

# Mnemonic derivation is gated behind this flag in eth-account
Account.enable_unaudited_hdwallet_features()

# BIP-44 path for Ethereum accounts, last component is the account index
ACCOUNT_PATH_TEMPLATE = "m/44'/60'/0'/0/{index}"
DEFAULT_ACCOUNT_PATH = ACCOUNT_PATH_TEMPLATE.format(index=0)


def account_path(index: Optional[int] = None) -> str:
    """
    Build the derivation path for an account index

    Args:
        index: Account index. None selects the first account.

    Returns:
        Derivation path string

    Raises:
        ConfigurationError: If index is negative
    """
    if index is None:
        index = 0
    if index < 0:
        raise ConfigurationError.invalid("account_index", f"must be non-negative, got {index}")
    return ACCOUNT_PATH_TEMPLATE.format(index=index)


class EVMSigner:
    """
    Local EVM signer using eth-account

    Usage:
        signer = EVMSigner.from_mnemonic("test test ... junk")
        signer.attach(web3)
    """

    def __init__(self, account: LocalAccount):
        """
        Initialize with eth_account LocalAccount

        Args:
            account: LocalAccount from eth_account
        """
        self._account = account

    @property
    def address(self) -> str:
        """Get wallet address (checksummed)"""
        return self._account.address

    @property
    def account(self) -> LocalAccount:
        return self._account

    def attach(self, web3: Web3) -> Web3:
        """
        Make web3 send transactions from this account.

        Installs the sign-and-send middleware and sets the default account so
        contract transactions built from web3 are signed locally.
        """
        web3.middleware_onion.inject(
            SignAndSendRawMiddlewareBuilder.build(self._account),
            name="signer",
            layer=0,
        )
        web3.eth.default_account = self._account.address
        return web3

    @classmethod
    def from_mnemonic(
        cls,
        mnemonic: str,
        path: str = DEFAULT_ACCOUNT_PATH,
    ) -> "EVMSigner":
        """
        Create signer from a BIP-39 mnemonic phrase

        Args:
            mnemonic: Space separated seed words
            path: HD derivation path

        Returns:
            EVMSigner instance

        Raises:
            eth_utils.ValidationError: If the mnemonic is not a valid BIP-39 phrase
        """
        account = Account.from_mnemonic(mnemonic, account_path=path)
        logger.debug(f"Derived account {account.address} at {path}")
        return cls(account)

    def __repr__(self) -> str:
        return f"EVMSigner(address={self.address})"


def create_web3(
    rpc_url: str,
    timeout: float = 30,
) -> Web3:
    """
    Create Web3 instance for a JSON-RPC endpoint

    No request is made here; the endpoint is first contacted on use.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Web3 instance
    """
    provider = HTTPProvider(
        rpc_url,
        request_kwargs={"timeout": timeout},
    )
    return Web3(provider)


def inject_poa_middleware(web3: Web3) -> Web3:
    """Accept the oversized extraData field of proof-of-authority blocks"""
    web3.middleware_onion.inject(ExtraDataToPOAMiddleware, name="poa", layer=0)
    return web3
