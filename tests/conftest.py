"""Shared test fixtures."""

import pytest

import modglobal
from modglobal import StoreServer
from modglobal.stores import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def server(store):
    with StoreServer(store=store) as running:
        yield running


@pytest.fixture
def global_store():
    """Start the process-wide store for one test and tear it down afterwards."""
    server = modglobal.start()
    yield server
    modglobal.stop()


@pytest.fixture(autouse=True)
def _stop_process_store():
    yield
    modglobal.stop()
