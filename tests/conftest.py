"""Shared test fixtures for netbindgen."""

import pathlib

import pytest

from netbindgen.models import Network

PROJECT_ROOT = pathlib.Path(__file__).parent.parent


@pytest.fixture
def project_root():
    """Return the repository root, where the example manifest lives."""
    return PROJECT_ROOT


@pytest.fixture
def ethereum():
    return Network(name="Ethereum", url="https://eth.example/rpc")


@pytest.fixture
def two_networks():
    return [
        Network(name="A", url="https://a.example/rpc", compute_units_per_second=100),
        Network(name="B", url="https://b.example/rpc"),
    ]
