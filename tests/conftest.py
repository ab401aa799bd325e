import pytest
import solcx

TCKT_ABI = [
    {"type": "constructor", "inputs": [], "stateMutability": "nonpayable"},
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "owner", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
]
TCKT_BYTECODE = "0xabc123"

# Hardhat's first default account.
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

CONTRACT_SOURCES = {
    "IDIDSigners.sol": "// SPDX-License-Identifier: MIT\ninterface IDIDSigners {}\n",
    "TCKT.sol": "// SPDX-License-Identifier: MIT\nimport \"./IDIDSigners.sol\";\ncontract TCKT {}\n",
}
INTERFACE_SOURCES = {
    "Addresses.sol": "// Addresses\n",
    "IERC20.sol": "interface IERC20 {}\n",
    "IERC20Permit.sol": "interface IERC20Permit {}\n",
    "IERC721.sol": "interface IERC721 {}\n",
}

FOUNDRY_TOML = """\
[profile.default]
src = "contracts"
optimizer = true
optimizer_runs = 200
solc_version = "0.8.17"
"""


def tckt_output(abi=None, bytecode=TCKT_BYTECODE, errors=None):
    output = {
        "contracts": {
            "TCKT.sol": {
                "TCKT": {
                    "abi": TCKT_ABI if abi is None else abi,
                    "evm": {"bytecode": {"object": bytecode}},
                }
            }
        }
    }
    if errors is not None:
        output["errors"] = errors
    return output


@pytest.fixture
def project(tmp_path):
    """A project root with foundry.toml, contracts/ and lib/interfaces/contracts/."""
    contracts = tmp_path / "contracts"
    interfaces = tmp_path / "lib" / "interfaces" / "contracts"
    contracts.mkdir()
    interfaces.mkdir(parents=True)
    for name, content in CONTRACT_SOURCES.items():
        (contracts / name).write_text(content, encoding="utf-8")
    for name, content in INTERFACE_SOURCES.items():
        (interfaces / name).write_text(content, encoding="utf-8")
    (tmp_path / "foundry.toml").write_text(FOUNDRY_TOML, encoding="utf-8")
    return tmp_path


class FakeSolc:
    def __init__(self, output):
        self.output = output
        self.installed = []
        self.install_error = None
        self.calls = []

    def install_solc(self, version, **kwargs):
        if self.install_error is not None:
            raise self.install_error
        self.installed.append(version)

    def compile_standard(self, input_data, **kwargs):
        self.calls.append((input_data, kwargs))
        if isinstance(self.output, Exception):
            raise self.output
        return self.output


@pytest.fixture
def fake_solc(monkeypatch):
    fake = FakeSolc(tckt_output())
    monkeypatch.setattr(solcx, "install_solc", fake.install_solc)
    monkeypatch.setattr(solcx, "compile_standard", fake.compile_standard)
    return fake
