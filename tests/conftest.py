"""Pytest configuration and fixtures."""

import pytest
import tempfile
from array import array
from collections import Counter, OrderedDict, deque
from pathlib import Path

from container_bridge.codec import create_context


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def context():
    """Codec context with every built-in kind registered."""
    return create_context()


@pytest.fixture
def long_values():
    """Mix of 32-bit and 64-bit integers; the last two do not fit in 32 bits."""
    return [42, 23, 666666666666, 4200000000000000]


@pytest.fixture
def sample_std_containers():
    """One populated instance of each general-purpose container kind."""
    return {
        "list": ["alpha", 1, 2.5, None, True],
        "deque": deque(["left", "middle", "right"]),
        "set": {"a", "b", 3},
        "counter": Counter({"apple": 3, "pear": 1}),
        "dict": {"name": "Alice", "age": 30, "score": 9.5},
        "ordered_dict": OrderedDict([("z", 1), ("a", 2), ("m", 3)]),
        "int_array": array("i", [1, -2, 2147483647, -2147483648]),
        "long_array": array("q", [42, 23, 666666666666, 4200000000000000]),
        "float_array": array("f", [1.5, -0.25, 3.0]),
        "double_array": array("d", [0.1, 2.718281828459045, -1e300]),
    }
