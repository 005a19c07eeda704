"""
Pytest configuration and fixtures for toy_runtime tests.
"""

import pytest
import sys
import os

# Add grandparent directory to path for imports (to find toy_runtime package)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from toy_runtime.tables import VariableTable
from toy_runtime.toy_runtime import ToyRuntime, RuntimeOptions


@pytest.fixture
def table():
    """Variable table with a few bindings already in place."""
    t = VariableTable()
    t.set('x', 10)
    t.set('y', -3)
    t.set('_tmp1', 7)
    return t


@pytest.fixture
def runtime():
    """Fresh strict runtime."""
    return ToyRuntime()


@pytest.fixture
def lenient_runtime():
    """Runtime that treats a missing trailing left operand as 0."""
    return ToyRuntime(RuntimeOptions(lenient=True))
