"""
Deployment errors.

Every failure the pipeline can report derives from DeployError so the
command line can tell an expected failure from a bug.
"""


class DeployError(Exception):
    """Base exception for the deployment helper."""
    pass


class ConfigError(DeployError):
    """foundry.toml is missing or has no usable default profile."""
    pass


class NotFoundError(DeployError):
    """A Solidity source file does not exist or cannot be read."""

    def __init__(self, name, path):
        self.name = name
        self.path = path
        super().__init__(f"Source {name!r} not found at {path}")


class SourceUnavailableError(DeployError):
    """A source requested for the compiler input could not be loaded."""
    pass


class CompilationError(DeployError):
    """solc failed or reported errors for the compiler input."""

    def __init__(self, message, diagnostics=None):
        self.diagnostics = list(diagnostics or [])
        super().__init__(message)


class ArtifactMissingError(DeployError):
    """The compiler output has no entry for the requested contract."""

    def __init__(self, source_file, contract_name, field=None):
        self.source_file = source_file
        self.contract_name = contract_name
        self.field = field
        target = f"{source_file}:{contract_name}"
        if field:
            super().__init__(f"Compiler output for {target} has no {field}")
        else:
            super().__init__(f"Compiler output has no artifact for {target}")


class SignerError(DeployError):
    """The deployer private key is not a valid key."""
    pass


class CompilerInstallError(CompilationError):
    """The requested solc binary could not be downloaded or installed."""
    pass
