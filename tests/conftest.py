"""Shared fixtures for dsfilter tests."""

import pytest

from dsfilter.boolexp import FunctionRegistry
from dsfilter.context import EvaluationContext, reset_context
from dsfilter.facts import VariableStore
from dsfilter.functions import register_builtins


LINUX_FACTS = {
    "agent.id": "agent-0001",
    "agent.version": "7.6.0",
    "host.architecture": "x86_64",
    "os.family": "linux",
    "os.kernel": "5.4.0-42-generic",
    "os.platform": "debian",
    "os.version": "20.04",
}


@pytest.fixture(autouse=True)
def clean_context():
    """Never leak the process-wide context between tests."""
    reset_context()
    yield
    reset_context()


@pytest.fixture
def make_context():
    """Build an EvaluationContext from LINUX_FACTS plus overrides."""
    def _make(overrides=None):
        variables = dict(LINUX_FACTS)
        variables.update(overrides or {})
        return EvaluationContext(
            variables=VariableStore(variables),
            functions=register_builtins(FunctionRegistry()),
        )
    return _make


@pytest.fixture
def linux_context(make_context):
    return make_context()
