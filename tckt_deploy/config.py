"""
foundry.toml configuration.

The default profile supplies the optimizer settings and the solc version the
deployment compiles with. The loaded DeploymentConfig is frozen and passed
explicitly to every stage of the pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

try:
    import tomllib as tomli  # Python 3.11+
except ImportError:
    import tomli  # type: ignore[no-redef]

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "foundry.toml"
DEFAULT_PROFILE = "default"
DEFAULT_SOLC_VERSION = "0.8.20"
DEFAULT_OPTIMIZER_RUNS = 200


@dataclass(frozen=True)
class SourceLayout:
    """Where contract sources and shared interface sources live."""
    contracts_dir: Path
    interfaces_dir: Path

    @classmethod
    def for_root(cls, root: Union[str, Path]) -> "SourceLayout":
        root = Path(root)
        return cls(
            contracts_dir=root / "contracts",
            interfaces_dir=root / "lib" / "interfaces" / "contracts",
        )


@dataclass(frozen=True)
class DeploymentConfig:
    """[profile.default] of foundry.toml."""
    optimizer: bool = False
    optimizer_runs: int = DEFAULT_OPTIMIZER_RUNS
    solc_version: str = DEFAULT_SOLC_VERSION
    root: Path = Path(".")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], root: Union[str, Path] = ".") -> "DeploymentConfig":
        return cls(
            optimizer=data.get("optimizer", False),
            optimizer_runs=data.get("optimizer_runs", DEFAULT_OPTIMIZER_RUNS),
            solc_version=str(data.get("solc_version", data.get("solc", DEFAULT_SOLC_VERSION))),
            root=Path(root),
        )

    @property
    def layout(self) -> SourceLayout:
        return SourceLayout.for_root(self.root)


def load_config(root: Union[str, Path] = ".") -> DeploymentConfig:
    """
    Load the default profile of ``<root>/foundry.toml``.

    Raises:
        ConfigError: The file is missing, is not valid TOML, or has no
            [profile.default] table.
    """
    path = Path(root) / CONFIG_FILE
    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    profiles = data.get("profile")
    profile = profiles.get(DEFAULT_PROFILE) if isinstance(profiles, dict) else None
    if not isinstance(profile, dict):
        raise ConfigError(f"{path} has no [profile.{DEFAULT_PROFILE}] table")

    config = DeploymentConfig.from_dict(profile, root=root)
    logger.debug(
        "Loaded %s: optimizer=%s runs=%s solc=%s",
        path, config.optimizer, config.optimizer_runs, config.solc_version,
    )
    return config
