"""Tests for configuration loading."""

from pathlib import Path

import pytest

from netbindgen.config import load_config
from netbindgen.models import Network


class TestLoadConfig:
    def test_load_project_config(self, project_root):
        """Load the example netbindgen.toml from the project root."""
        config = load_config(project_root / "netbindgen.toml")

        assert config.output.path == "src/networks.rs"
        assert [n.name for n in config.networks] == ["ethereum", "polygon", "base"]
        assert config.networks[0].compute_units_per_second == 660
        assert config.networks[1].compute_units_per_second is None

    def test_load_minimal_config(self, tmp_path: Path):
        config_file = tmp_path / "test.toml"
        config_file.write_text(
            '[[networks]]\nname = "ethereum"\nurl = "https://eth.example/rpc"\n'
        )
        config = load_config(config_file)

        assert config.networks == [
            Network(name="ethereum", url="https://eth.example/rpc"),
        ]
        assert config.output.path == ""

    def test_empty_config(self, tmp_path: Path):
        config_file = tmp_path / "test.toml"
        config_file.write_text("")
        config = load_config(config_file)

        assert config.networks == []
        assert config.output.path == ""

    def test_preserves_file_order(self, tmp_path: Path):
        config_file = tmp_path / "test.toml"
        config_file.write_text(
            '[[networks]]\nname = "zeta"\nurl = "https://z/rpc"\n'
            '[[networks]]\nname = "alpha"\nurl = "https://a/rpc"\n'
        )
        config = load_config(config_file)
        assert [n.name for n in config.networks] == ["zeta", "alpha"]

    def test_values_not_validated(self, tmp_path: Path):
        config_file = tmp_path / "test.toml"
        config_file.write_text(
            '[[networks]]\nname = "Base"\n'
            '[[networks]]\nname = "BASE"\ncompute_units_per_second = 0\n'
        )
        config = load_config(config_file)

        assert config.networks[0].url == ""
        assert config.networks[1].compute_units_per_second == 0

    def test_default_path(self, tmp_path: Path, monkeypatch):
        (tmp_path / "netbindgen.toml").write_text('[output]\npath = "out.rs"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().output.path == "out.rs"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")
