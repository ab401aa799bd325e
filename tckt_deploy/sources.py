"""Resolve logical source names to files and read them."""

import logging
from pathlib import Path

from .config import SourceLayout
from .errors import NotFoundError

logger = logging.getLogger(__name__)

INTERFACES_PREFIX = "interfaces"
TCKT_SOURCE = "TCKT.sol"


def process_tckt(source: str, chain_id: str) -> str:
    """Per-chain rewrite hook for TCKT.sol. Currently returns the source unchanged."""
    return source


def resolve_source_path(name: str, layout: SourceLayout) -> Path:
    # "interfaces/IERC20.sol" -> <interfaces_dir>/IERC20.sol
    if name.startswith(INTERFACES_PREFIX):
        return Path(str(layout.interfaces_dir) + name[len(INTERFACES_PREFIX):])
    return layout.contracts_dir / name


def load_source(name: str, layout: SourceLayout, chain_id: str) -> str:
    path = resolve_source_path(name, layout)
    logger.debug("Reading %s from %s", name, path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise NotFoundError(name, path) from e

    if name == TCKT_SOURCE:
        source = process_tckt(source, chain_id)
    return source
