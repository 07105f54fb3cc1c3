"""Test configuration for package."""

import pytest


@pytest.fixture
def complex_object():
    """Nested mapping with a sequence that itself holds a mapping."""
    return {
        "propA": 1,
        "propB": {
            "propA": [1, {"propA": "a", "propB": "b"}, 3],
            "propB": 1,
            "propC": 2,
        },
    }


@pytest.fixture
def complex_object_copy():
    """An equal but distinct copy of complex_object."""
    return {
        "propA": 1,
        "propB": {
            "propA": [1, {"propA": "a", "propB": "b"}, 3],
            "propB": 1,
            "propC": 2,
        },
    }
