"""
Standard JSON compilation of the TCKT sources.

build_compiler_input assembles the solc request, compile_input runs it
through py-solc-x and extract_artifact pulls the TCKT ABI and bytecode out
of the response.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import requests
import solcx
from solcx.exceptions import SolcError, SolcInstallationError

from .config import DeploymentConfig, SourceLayout
from .errors import (
    ArtifactMissingError,
    CompilationError,
    CompilerInstallError,
    NotFoundError,
    SourceUnavailableError,
)
from .sources import load_source

logger = logging.getLogger(__name__)

LANGUAGE = "Solidity"

TCKT_SOURCE_FILE = "TCKT.sol"
TCKT_CONTRACT = "TCKT"

TCKT_SOURCES = (
    "IDIDSigners.sol",
    "interfaces/Addresses.sol",
    "interfaces/IERC20.sol",
    "interfaces/IERC20Permit.sol",
    "interfaces/IERC721.sol",
    "TCKT.sol",
)

# Kept in sync with TCKT_SOURCE_FILE / TCKT_CONTRACT by hand.
OUTPUT_SELECTION = {
    TCKT_SOURCE_FILE: {
        TCKT_CONTRACT: ["abi", "evm.bytecode.object", "bytecode"],
    },
}


@dataclass(frozen=True)
class ContractArtifact:
    abi: List[Dict[str, Any]]
    bytecode: str


def build_compiler_input(
    source_names: Sequence[str],
    chain_id: str,
    config: DeploymentConfig,
    layout: Optional[SourceLayout] = None,
) -> Dict[str, Any]:
    """
    Build a Standard JSON compiler input for the given sources.

    Sources appear in the order requested. Optimizer settings are copied from
    the config as-is.

    Raises:
        SourceUnavailableError: One of the sources could not be read.
    """
    layout = layout or config.layout
    sources = {}
    for name in source_names:
        try:
            sources[name] = {"content": load_source(name, layout, chain_id)}
        except NotFoundError as e:
            raise SourceUnavailableError(f"Cannot build compiler input: {e}") from e

    return {
        "language": LANGUAGE,
        "sources": sources,
        "settings": {
            "optimizer": {
                "enabled": config.optimizer,
                "runs": config.optimizer_runs,
            },
            "outputSelection": {
                source: {contract: list(kinds) for contract, kinds in contracts.items()}
                for source, contracts in OUTPUT_SELECTION.items()
            },
        },
    }


def format_diagnostic(entry: Dict[str, Any]) -> str:
    return entry.get("formattedMessage") or entry.get("message") or str(entry)


def collect_diagnostics(output: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return the error-severity entries and log everything else."""
    errors = []
    for entry in output.get("errors", []):
        if entry.get("severity") == "error":
            errors.append(entry)
        else:
            logger.warning("solc: %s", format_diagnostic(entry).strip())
    return errors


def compilation_error(errors: List[Dict[str, Any]]) -> CompilationError:
    message = "\n".join(format_diagnostic(e).strip() for e in errors)
    return CompilationError(f"solc reported {len(errors)} error(s):\n{message}", errors)


def check_diagnostics(output: Dict[str, Any]) -> None:
    """Raise CompilationError if solc reported any error; log the rest."""
    errors = collect_diagnostics(output)
    if errors:
        raise compilation_error(errors)


def diagnostics_from_solc_error(error: SolcError) -> List[Dict[str, Any]]:
    # py-solc-x raises on error diagnostics itself; the Standard JSON response is kept on stdout_data.
    try:
        output = json.loads(error.stdout_data or "")
    except (TypeError, ValueError):
        return []
    if not isinstance(output, dict):
        return []
    return collect_diagnostics(output)


def install_compiler(solc_version: str) -> None:
    try:
        solcx.install_solc(solc_version)
    except (SolcInstallationError, requests.RequestException, OSError) as e:
        raise CompilerInstallError(f"Cannot install solc {solc_version}: {e}") from e


def compile_input(compiler_input: Dict[str, Any], solc_version: str) -> Dict[str, Any]:
    """
    Compile a Standard JSON input with the given solc version.

    The binary is installed first if py-solc-x does not have it yet.

    Raises:
        CompilerInstallError: The solc binary could not be installed.
        CompilationError: solc failed or reported errors.
    """
    install_compiler(solc_version)
    logger.info("Compiling %d source(s) with solc %s", len(compiler_input["sources"]), solc_version)
    try:
        output = solcx.compile_standard(compiler_input, solc_version=solc_version)
    except SolcError as e:
        errors = diagnostics_from_solc_error(e)
        if errors:
            raise compilation_error(errors) from e
        raise CompilationError(f"solc {solc_version} failed: {e}") from e

    check_diagnostics(output)
    return output


def extract_artifact(
    output: Dict[str, Any],
    source_file: str = TCKT_SOURCE_FILE,
    contract_name: str = TCKT_CONTRACT,
) -> ContractArtifact:
    try:
        contract = output["contracts"][source_file][contract_name]
    except (KeyError, TypeError):
        raise ArtifactMissingError(source_file, contract_name) from None

    if not isinstance(contract, dict):
        raise ArtifactMissingError(source_file, contract_name)
    if "abi" not in contract:
        raise ArtifactMissingError(source_file, contract_name, "abi")
    try:
        bytecode = contract["evm"]["bytecode"]["object"]
    except (KeyError, TypeError):
        raise ArtifactMissingError(source_file, contract_name, "evm.bytecode.object") from None

    return ContractArtifact(abi=contract["abi"], bytecode=bytecode)
