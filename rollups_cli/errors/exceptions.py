"""
Exception definitions for Rollups CLI
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """
    Unified error codes for connection and address resolution

    4xxx - Network errors
    5xxx - Deployment errors
    6xxx - Signer errors
    9xxx - Configuration errors
    """
    # Network errors
    NETWORK_UNSUPPORTED = "4001"

    # Deployment errors
    DEPLOYMENT_NOT_FOUND = "5001"
    DEPLOYMENT_CONTRACT_MISSING = "5002"

    # Signer errors
    SIGNER_NOT_CONFIGURED = "6001"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"


class RollupsCliError(Exception):
    """
    Base exception for all rollups CLI errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class ConfigurationError(RollupsCliError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing
    - Configuration values are invalid
    - A local network is targeted without a deployment path
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
        details: Optional[dict] = None,
    ):
        super().__init__(message, code, details=details)

    @classmethod
    def missing(cls, param: str) -> "ConfigurationError":
        return cls(f"Missing required configuration: {param}", ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)

    @classmethod
    def undefined_deployment_path(cls, chain_id: int) -> "ConfigurationError":
        return cls(
            f"undefined deployment path for network {chain_id}",
            ErrorCode.CONFIG_MISSING,
            details={"chain_id": chain_id},
        )


class DeploymentNotFound(RollupsCliError):
    """
    Deployment descriptor file does not exist
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message,
            ErrorCode.DEPLOYMENT_NOT_FOUND,
            details={"path": path},
        )
        self.path = path

    @classmethod
    def file_not_found(cls, path: str) -> "DeploymentNotFound":
        return cls(f"deployment file '{path}' not found", path=path)


class DeploymentError(RollupsCliError):
    """
    Deployment descriptor content errors

    Raised when:
    - The descriptor has no entry for a requested contract
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        contract: Optional[str] = None,
    ):
        super().__init__(
            message,
            ErrorCode.DEPLOYMENT_CONTRACT_MISSING,
            details={"source": source, "contract": contract},
        )
        self.source = source
        self.contract = contract

    @classmethod
    def contract_missing(cls, source: str, contract: str) -> "DeploymentError":
        return cls(
            f"contract '{contract}' not found in deployment {source}",
            source=source,
            contract=contract,
        )


class UnsupportedNetwork(RollupsCliError):
    """
    Chain id does not match any supported network
    """

    def __init__(self, message: str, chain_id: Optional[int] = None):
        super().__init__(
            message,
            ErrorCode.NETWORK_UNSUPPORTED,
            details={"chain_id": chain_id},
        )
        self.chain_id = chain_id

    @classmethod
    def from_chain_id(cls, chain_id: int) -> "UnsupportedNetwork":
        return cls(f"unsupported network {chain_id}", chain_id=chain_id)


class SignerError(RollupsCliError):
    """
    Signing-related errors

    Raised when:
    - An operation needs a signer but no mnemonic was configured
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SIGNER_NOT_CONFIGURED,
    ):
        super().__init__(message, code)

    @classmethod
    def not_configured(cls) -> "SignerError":
        return cls("No signer configured. Provide a mnemonic.")
