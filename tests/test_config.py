from pathlib import Path

import pytest

from tckt_deploy.config import DeploymentConfig, SourceLayout, load_config
from tckt_deploy.errors import ConfigError


def test_load_default_profile(project):
    config = load_config(project)
    assert config.optimizer is True
    assert config.optimizer_runs == 200
    assert config.solc_version == "0.8.17"
    assert config.root == project


def test_defaults_when_keys_missing(tmp_path):
    (tmp_path / "foundry.toml").write_text("[profile.default]\n")
    config = load_config(tmp_path)
    assert config.optimizer is False
    assert config.optimizer_runs == 200
    assert config.solc_version == "0.8.20"


def test_solc_key_alias(tmp_path):
    (tmp_path / "foundry.toml").write_text('[profile.default]\nsolc = "0.8.19"\n')
    assert load_config(tmp_path).solc_version == "0.8.19"


def test_runs_are_not_validated(tmp_path):
    (tmp_path / "foundry.toml").write_text("[profile.default]\noptimizer_runs = -5\n")
    assert load_config(tmp_path).optimizer_runs == -5


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path)


def test_invalid_toml(tmp_path):
    (tmp_path / "foundry.toml").write_text("[profile.default\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_missing_default_profile(tmp_path):
    (tmp_path / "foundry.toml").write_text("[profile.ci]\noptimizer = true\n")
    with pytest.raises(ConfigError, match="profile.default"):
        load_config(tmp_path)


def test_config_is_frozen():
    config = DeploymentConfig()
    with pytest.raises(AttributeError):
        config.optimizer = True


def test_layout_for_root():
    layout = SourceLayout.for_root("/work")
    assert layout.contracts_dir == Path("/work/contracts")
    assert layout.interfaces_dir == Path("/work/lib/interfaces/contracts")
    assert DeploymentConfig(root=Path("/work")).layout == layout


@pytest.mark.parametrize("body", ['profile = "default"\n', "[profile]\ndefault = 3\n"])
def test_profile_not_a_table(tmp_path, body):
    (tmp_path / "foundry.toml").write_text(body)
    with pytest.raises(ConfigError, match="profile.default"):
        load_config(tmp_path)
