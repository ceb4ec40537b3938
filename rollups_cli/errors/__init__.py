"""
Error definitions for Rollups CLI
"""

from .exceptions import (
    ErrorCode,
    RollupsCliError,
    ConfigurationError,
    DeploymentNotFound,
    DeploymentError,
    UnsupportedNetwork,
    SignerError,
)

__all__ = [
    "ErrorCode",
    "RollupsCliError",
    "ConfigurationError",
    "DeploymentNotFound",
    "DeploymentError",
    "UnsupportedNetwork",
    "SignerError",
]
