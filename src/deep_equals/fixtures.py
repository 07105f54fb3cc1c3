"""
Demonstration suite.

Twenty-two scenarios covering strings, sequences, nested mappings, null, NaN and booleans. The
labels skip 'Test 12'.
"""

from .schemas import AssertionCase
from .values import UNDEFINED


def _complex_object() -> dict:
    return {
        'propA': 1,
        'propB': {
            'propA': [1, {'propA': 'a', 'propB': 'b'}, 3],
            'propB': 1,
            'propC': 2,
        },
    }


def demo_cases() -> list[AssertionCase]:
    """Build a fresh copy of the demonstration suite."""
    complex_object_1 = _complex_object()
    complex_object_1_copy = _complex_object()
    complex_object_2 = {
        'propA': 1,
        'propB': {
            'propB': 1,
            'propA': [1, {'propA': 'a', 'propB': 'c'}, 3],
            'propC': 2,
        },
    }
    complex_object_3 = {
        'propA': 1,
        'propB': {'propA': [1, {'propA': 'a', 'propB': 'b'}, 3], 'propB': 1},
    }
    complex_object_4 = {
        'propA': UNDEFINED,
        'propB': {'propA': [1, {'propA': 'a', 'propB': 'b'}, 3], 'propB': 1},
    }
    complex_object_4_copy = {
        'propA': UNDEFINED,
        'propB': {'propA': [1, {'propA': 'a', 'propB': 'b'}, 3], 'propB': 1},
    }
    complex_object_5 = {
        'propA': 1,
        'propB': {'propA': [1, {'propA': 'a', 'propB': 'b'}, 3], 'propB': 1},
        'propC': 1,
    }
    complex_object_6 = {'propA': 1, 'propB': 2, 'propC': 1}
    complex_object_7 = {'propA': 1, 'propB': 3, 'propC': 1}
    complex_object_8 = {'propA': 1, 'propB': [1, 2, 3], 'propC': 1}
    complex_object_9 = {'propA': 1, 'propB': [1, 2, 3], 'propC': 1}

    pairs = [
        ('Test 01: ', 'abc', 'abc'),
        ('Test 02: ', 'abcdef', 'abc'),
        ('Test 03: ', ['a'], {0: 'a'}),
        ('Test 04: ', ['a', 'b'], ['a', 'b', 'c']),
        ('Test 05: ', ['a', 'b', 'c'], ['a', 'b', 'c']),
        ('Test 06: ', complex_object_1, complex_object_1_copy),
        ('Test 07: ', complex_object_1, complex_object_2),
        ('Test 08: ', complex_object_1, complex_object_3),
        ('Test 09: ', None, {}),
        ('Test 10: ', ['a', 'b', 'c'], ['x', 'y', 'z']),
        ('Test 11: ', ['a', ['b', 'c']], ['a', ['b', 'c']]),
        ('Test 13: ', complex_object_6, complex_object_7),
        ('Test 14: ', complex_object_8, complex_object_9),
        ('Test 15: ', complex_object_4, complex_object_4_copy),
        ('Test 16: ', complex_object_3, complex_object_5),
        ('Test 17: ', float('nan'), float('nan')),
        ('Test 18: ', None, None),
        ('Test 19: ', 1, 1),
        ('Test 20: ', 2, 1),
        ('Test 21: ', True, 1),
        ('Test 22: ', True, True),
        ('Test 23: ', True, False),
    ]
    return [
        AssertionCase(message=message, expected=expected, actual=actual)
        for message, expected, actual in pairs
    ]
