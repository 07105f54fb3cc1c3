"""
Constants and enums for deep-equals.

All enums inherit from str so they serialize cleanly to JSON and compare equal to their
string values.
"""

from enum import Enum


class ValueKind(str, Enum):
    """The variant a compared value is classified into."""

    NULL = 'null'
    UNDEFINED = 'undefined'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    ARRAY = 'array'
    OBJECT = 'object'

    def __str__(self) -> str:
        """Return the enum value as string."""
        return str(self.value)

    @property
    def tag(self) -> str:
        """Type name used in type-tag mismatch messages (e.g. 'Array', 'Number')."""
        return self.value.capitalize()

    @property
    def typeof(self) -> str:
        """Coarse type name used in null mismatch messages; containers are 'object'."""
        if self in (ValueKind.NULL, ValueKind.ARRAY, ValueKind.OBJECT):
            return 'object'
        return self.value

    @property
    def is_structured(self) -> bool:
        """True for kinds that have keys (sequences and mappings)."""
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


class FailureKind(str, Enum):
    """Kinds of mismatch reported by the comparator."""

    NULL_TYPE_MISMATCH = 'null_type_mismatch'
    TYPE_MISMATCH = 'type_mismatch'
    VALUE_MISMATCH = 'value_mismatch'
    ARRAY_LENGTH_MISMATCH = 'array_length_mismatch'
    ARRAY_ELEMENT_MISMATCH = 'array_element_mismatch'
    MISSING_KEY = 'missing_key'
    MISSING_NESTED_KEY = 'missing_nested_key'
    UNEXPECTED_KEY = 'unexpected_key'
    NESTED_VALUE_MISMATCH = 'nested_value_mismatch'

    def __str__(self) -> str:
        """Return the enum value as string."""
        return str(self.value)


class Status(str, Enum):
    """Outcome of running a single assertion case."""

    PASSED = 'passed'
    FAILED = 'failed'
    ERROR = 'error'

    def __str__(self) -> str:
        """Return the enum value as string."""
        return str(self.value)
