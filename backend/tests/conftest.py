import pytest

from unitgraph.core.context import UnitContext


@pytest.fixture
def context():
    """A context with every measurement system loaded, private to one test."""
    return UnitContext()


@pytest.fixture
def units(context):
    return context.units
