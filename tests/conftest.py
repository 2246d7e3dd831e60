"""Shared fixtures for the delivery network tests."""

import os

import pytest

from delivery_network.config import reset_config
from delivery_network.graph.network import reference_graph


@pytest.fixture
def graph():
    return reference_graph()


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate every test from DLN_* variables and the cached config."""
    for name in list(os.environ):
        if name.startswith("DLN_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
