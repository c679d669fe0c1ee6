"""Load the network manifest from netbindgen.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from netbindgen.models.network import Network

DEFAULT_CONFIG = "netbindgen.toml"


@dataclass
class OutputConfig:
    """Where the generated module is written.

    An empty path means the CLI prints to stdout.
    """

    path: str = ""


@dataclass
class PipelineConfig:
    """Full configuration loaded from netbindgen.toml."""

    networks: list[Network] = field(default_factory=list)
    output: OutputConfig = field(default_factory=OutputConfig)


def _build_networks(data: dict) -> list[Network]:
    """Build Network descriptors from [[networks]] tables, in file order.

    Values are taken as written; checking them is left to
    netbindgen.constraints.validators.
    """
    networks = []
    for section in data.get("networks", []):
        networks.append(Network(
            name=section.get("name", ""),
            url=section.get("url", ""),
            compute_units_per_second=section.get("compute_units_per_second"),
        ))
    return networks


def _build_output(data: dict) -> OutputConfig:
    """Build output config from parsed TOML data."""
    section = data.get("output", {})
    if not section:
        return OutputConfig()
    return OutputConfig(path=section.get("path", ""))


def load_config(config_path: Path | str | None = None) -> PipelineConfig:
    """Load configuration from a TOML file.

    If config_path is None, looks for netbindgen.toml in the current
    directory.
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG)
    else:
        config_path = Path(config_path)

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return PipelineConfig(
        networks=_build_networks(data),
        output=_build_output(data),
    )
