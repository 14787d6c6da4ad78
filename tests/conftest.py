# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from statemodel.core.actions import RegistryActionResolver
from statemodel.uml.builder import ModelBuilder


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


@pytest.fixture
def builder():
    """An empty model builder."""
    return ModelBuilder()


@pytest.fixture
def entry_action():
    """A stand-in entry action."""
    return MagicMock(name="entryAction")


@pytest.fixture
def exit_action():
    """A stand-in exit action."""
    return MagicMock(name="exitAction")


@pytest.fixture
def resolver(entry_action, exit_action):
    """A resolver knowing 'entryAction' and 'exitAction' only."""
    return RegistryActionResolver({"entryAction": entry_action, "exitAction": exit_action})


@pytest.fixture
def mock_resolver():
    """A resolver double that never finds anything and records lookups."""
    r = MagicMock()
    r.resolve = MagicMock(return_value=None)
    return r


@pytest.fixture
def simple_model(builder):
    """
    S1 (initial) --GO--> S2
    """
    builder.state("S1", initial=True)
    builder.state("S2")
    builder.transition("S1", "S2", "GO")
    return builder.build()


@pytest.fixture
def nested_model(builder):
    """
    Builds this hierarchy:

    P (composite) [initial]
    ├─ C1 [initial of P]
    └─ C2 (composite)
        └─ D1 [initial of C2]
    Q

    Transitions:
    1) C1 -> C2 on "E1"
    2) P -> Q on "E2"
    3) D1 -> C1 on "E3"
    """
    builder.state("P", initial=True, entry="entryAction", exit="exitAction")
    builder.state("C1", parent="P", initial=True)
    builder.state("C2", parent="P")
    builder.state("D1", parent="C2", initial=True)
    builder.state("Q")
    builder.transition("C1", "C2", "E1")
    builder.transition("P", "Q", "E2")
    builder.transition("D1", "C1", "E3")
    return builder.build()
