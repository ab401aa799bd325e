"""
Compile TCKT and build its contract factory.

Usage:
    python scripts/deploy.py [--root DIR] [--chain-id 0xa86a] [--private-key KEY] [--out build/TCKT.json]

The deployer key may also come from the DEPLOYER_PRIVATE_KEY environment
variable. Without a key the factory is built with no signer.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from eth_account.signers.local import LocalAccount

from .compiler import (
    TCKT_CONTRACT,
    TCKT_SOURCE_FILE,
    TCKT_SOURCES,
    ContractArtifact,
    build_compiler_input,
    compile_input,
    extract_artifact,
)
from .config import DeploymentConfig, SourceLayout, load_config
from .errors import DeployError
from .factory import FactoryHandle, build_factory, signer_from_key
from .logger import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CHAIN_ID = "0xa86a"
PRIVATE_KEY_ENV = "DEPLOYER_PRIVATE_KEY"


def deploy_to_chain(
    chain_id: str,
    signer: Optional[LocalAccount],
    config: DeploymentConfig,
    layout: Optional[SourceLayout] = None,
) -> FactoryHandle:
    """
    Run the full pipeline for one chain.

    Reads the TCKT sources, compiles them, extracts the TCKT artifact and
    binds it to ``signer``. Nothing is sent to the chain.
    """
    layout = layout or config.layout
    logger.info("Building TCKT for chain %s", chain_id)

    compiler_input = build_compiler_input(TCKT_SOURCES, chain_id, config, layout)
    output = compile_input(compiler_input, config.solc_version)
    artifact = extract_artifact(output, TCKT_SOURCE_FILE, TCKT_CONTRACT)
    logger.info("Extracted %s:%s (%d ABI entries)", TCKT_SOURCE_FILE, TCKT_CONTRACT, len(artifact.abi))

    return build_factory(artifact, signer)


def write_artifact(artifact: ContractArtifact, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"abi": artifact.abi, "bytecode": artifact.bytecode}, f, indent=2)
    logger.info("ABI + bytecode saved to %s", path)
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile TCKT and build its contract factory.")
    parser.add_argument("--root", type=Path, default=Path("."), help="Project root holding foundry.toml")
    parser.add_argument("--chain-id", default=DEFAULT_CHAIN_ID, help="Target chain id (default: %(default)s)")
    parser.add_argument("--private-key", default=None, help=f"Deployer private key (or set {PRIVATE_KEY_ENV})")
    parser.add_argument("--out", type=Path, default=None, help="Write ABI and bytecode to this JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.root)
        private_key = args.private_key or os.environ.get(PRIVATE_KEY_ENV)
        signer = signer_from_key(private_key) if private_key else None
        factory = deploy_to_chain(args.chain_id, signer, config)
        if args.out:
            write_artifact(ContractArtifact(abi=factory.abi, bytecode=factory.bytecode), args.out)
    except DeployError as e:
        logger.error("%s", e)
        return 1

    print(f"{TCKT_CONTRACT} factory ready for chain {args.chain_id}")
    print(f"   ABI entries : {len(factory.abi)}")
    print(f"   Bytecode    : {factory.bytecode_size} bytes")
    print(f"   Signer      : {factory.signer.address if factory.can_deploy else 'none'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
