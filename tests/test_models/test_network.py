"""Tests for the Network descriptor model."""

import dataclasses

import pytest

from netbindgen.models import Network


class TestNetwork:
    def test_compute_units_default_absent(self):
        network = Network(name="ethereum", url="https://eth.example/rpc")
        assert network.compute_units_per_second is None
        assert not network.has_compute_units

    def test_compute_units_present(self):
        network = Network(
            name="ethereum", url="https://eth.example/rpc",
            compute_units_per_second=660,
        )
        assert network.has_compute_units
        assert network.compute_units_per_second == 660

    def test_frozen(self):
        network = Network(name="ethereum", url="https://eth.example/rpc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            network.name = "polygon"

    def test_str(self):
        network = Network(name="ethereum", url="https://eth.example/rpc")
        assert str(network) == "ethereum (https://eth.example/rpc)"

    def test_equality(self):
        a = Network(name="base", url="https://base.example/rpc", compute_units_per_second=1)
        b = Network(name="base", url="https://base.example/rpc", compute_units_per_second=1)
        assert a == b
        assert hash(a) == hash(b)
