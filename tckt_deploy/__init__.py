"""Compile the TCKT contract and build a deployment-ready contract factory."""

from .config import DeploymentConfig, SourceLayout, load_config
from .deploy import deploy_to_chain
from .errors import (
    ArtifactMissingError,
    CompilationError,
    CompilerInstallError,
    ConfigError,
    DeployError,
    NotFoundError,
    SignerError,
    SourceUnavailableError,
)

__version__ = "0.1.0"

__all__ = [
    "ArtifactMissingError",
    "CompilationError",
    "CompilerInstallError",
    "ConfigError",
    "DeployError",
    "DeploymentConfig",
    "NotFoundError",
    "SignerError",
    "SourceLayout",
    "SourceUnavailableError",
    "deploy_to_chain",
    "load_config",
]
