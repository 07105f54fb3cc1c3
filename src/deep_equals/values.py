"""
Value model for the comparator.

Every input is classified once into a ValueKind at the Python boundary. Mappings and sequences
are then treated uniformly as keyed containers: a mapping's keys are its own keys, a sequence's
keys are its indices, and primitives have no keys at all.

Rendering follows the string conversion the failure messages were designed around, so `True`
renders as `true`, `1.0` as `1` and a nested list as its comma-joined elements.
"""

import dataclasses
import math
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from .constants import ValueKind
from .exceptions import UnsupportedValueError


class _Undefined:
    """Sentinel type for an absent value (a missing key or an out-of-range index)."""

    _instance = None

    def __new__(cls) -> '_Undefined':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def normalize(value: Any) -> Any:  # noqa: ANN401
    """Convert pydantic models and dataclass instances into plain mappings."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def classify(value: Any) -> ValueKind:  # noqa: ANN401, PLR0911
    """
    Classify a value into its ValueKind.

    Raises:
        UnsupportedValueError: If the value is not one of the supported shapes
    """
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int | float):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list | tuple):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    raise UnsupportedValueError(
        f"Unsupported value of type {type(value).__name__}: {value!r}", value=value,
    )


def is_index(key: object) -> bool:
    """True if a key addresses a sequence position (an int or its canonical digit string)."""
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return key >= 0
    return (
        isinstance(key, str) and key.isascii() and key.isdigit() and key == str(int(key))
    )


def keys_of(value: Any) -> list[Any]:  # noqa: ANN401
    """Own keys of a container, in order; empty for primitives."""
    if isinstance(value, Mapping):
        return list(value.keys())
    if isinstance(value, list | tuple):
        return list(range(len(value)))
    return []


def has_key(value: Any, key: object) -> bool:  # noqa: ANN401
    """True if `value` has an own key `key`."""
    if isinstance(value, Mapping):
        return key in value
    if isinstance(value, list | tuple) and is_index(key):
        return int(key) < len(value)
    return False


def child_of(value: Any, key: object) -> Any:  # noqa: ANN401
    """Value stored under `key`, or UNDEFINED when absent."""
    if not has_key(value, key):
        return UNDEFINED
    if isinstance(value, Mapping):
        return normalize(value[key])
    return normalize(value[int(key)])


def flatten(sequence: list | tuple) -> list[Any]:
    """Recursively collapse nested sequences into a single flat list."""
    return list(_iter_flat(sequence))


def _iter_flat(sequence: list | tuple) -> Iterator[Any]:
    for item in sequence:
        item = normalize(item)  # noqa: PLW2901
        if isinstance(item, list | tuple):
            yield from _iter_flat(item)
        else:
            yield item


def is_nan(value: Any) -> bool:  # noqa: ANN401
    """True for a float NaN."""
    return isinstance(value, float) and math.isnan(value)


def strictly_equal(expected: Any, actual: Any, nan_equals_nan: bool = True) -> bool:  # noqa: ANN401
    """
    Compare two values without any type coercion.

    Values of different kinds are never equal (so `True` differs from `1`). Containers are equal
    only when they are the same object.
    """
    expected_kind = classify(expected)
    if expected_kind != classify(actual):
        return False
    if expected_kind in (ValueKind.NULL, ValueKind.UNDEFINED):
        return True
    if expected_kind.is_structured:
        return expected is actual
    if is_nan(expected) or is_nan(actual):
        return nan_equals_nan and is_nan(expected) and is_nan(actual)
    return expected == actual


def render(value: Any) -> str:  # noqa: ANN401, PLR0911
    """Render a value the way it is interpolated into failure messages."""
    if value is None:
        return 'null'
    if value is UNDEFINED:
        return 'undefined'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return _render_float(value)
    if isinstance(value, int | str):
        return str(value)
    if isinstance(value, list | tuple):
        return ','.join('' if item is None or item is UNDEFINED else render(item) for item in value)
    if isinstance(value, Mapping | BaseModel) or dataclasses.is_dataclass(value):
        return '[object Object]'
    return str(value)


def _render_float(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
