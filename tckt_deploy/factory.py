"""Bind a compiled artifact to a web3 contract factory and a signer."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_keys.exceptions import ValidationError as KeyValidationError
from web3 import Web3
from web3.contract import Contract

from .compiler import ContractArtifact
from .errors import SignerError

logger = logging.getLogger(__name__)


@dataclass
class FactoryHandle:
    """A contract factory that has not been submitted to any chain."""
    abi: List[Dict[str, Any]]
    bytecode: str
    contract: Type[Contract]
    signer: Optional[LocalAccount] = None

    @property
    def can_deploy(self) -> bool:
        return self.signer is not None

    @property
    def bytecode_size(self) -> int:
        code = self.bytecode[2:] if self.bytecode.startswith("0x") else self.bytecode
        return len(code) // 2


def signer_from_key(private_key: str) -> LocalAccount:
    try:
        return Account.from_key(private_key)
    except (ValueError, TypeError, KeyValidationError) as e:
        raise SignerError(f"Invalid deployer private key: {e}") from e


def build_factory(
    artifact: ContractArtifact,
    signer: Optional[LocalAccount] = None,
    w3: Optional[Web3] = None,
) -> FactoryHandle:
    # The factory only needs the ABI and bytecode, so no provider is required.
    w3 = w3 or Web3()
    contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
    if signer is None:
        logger.info("No signer supplied; factory cannot submit a deployment")
    return FactoryHandle(
        abi=artifact.abi,
        bytecode=artifact.bytecode,
        contract=contract,
        signer=signer,
    )
