"""
Path rendering and resolution.

A path is a tuple of segments recorded while the comparator descends: `int` segments are
sequence indices, anything else is a mapping key. The path is only turned into text when a
failure is built, either as the legacy message form (`Expected propB[2].propA`) or as a JSONPath
expression (`$.propB[2].propA`) that can be resolved back into a document.
"""

import re
from functools import lru_cache
from typing import Any

from jsonpath_ng import parse as jsonpath_parse
from jsonpath_ng.exceptions import JSONPathError as JSONPathNGError
from jsonpath_ng.exceptions import JsonPathLexerError

from .exceptions import PathError
from .values import is_index

Path = tuple[Any, ...]

_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def render_message_path(message: str, path: Path) -> str:
    """
    Append a path to a message prefix.

    Index-like segments replace the trailing character of the message with `[<index>].`, every
    other segment appends `<key>.`. With the prefix `'Expected '` the path `('propB', 2)` renders
    as `'Expected propB[2].'`.
    """
    rendered = message
    for segment in path:
        if is_index(segment):
            rendered = f'{rendered[:-1]}[{segment}].'
        else:
            rendered += f'{segment}.'
    return rendered


def to_jsonpath(path: Path) -> str:
    """Render a path as a JSONPath expression rooted at `$`."""
    parts = ['$']
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            parts.append(f'[{segment}]')
        elif isinstance(segment, str) and _IDENTIFIER.match(segment):
            parts.append(f'.{segment}')
        else:
            escaped = str(segment).replace('\\', '\\\\').replace("'", "\\'")
            parts.append(f".'{escaped}'")
    return ''.join(parts)


@lru_cache(maxsize=256)
def _parse(expression: str) -> Any:  # noqa: ANN401
    try:
        return jsonpath_parse(expression)
    except (JSONPathNGError, JsonPathLexerError) as e:
        raise PathError(
            f"Invalid JSONPath expression '{expression}': {e}", jsonpath_expression=expression,
        ) from e


def resolve(document: Any, path: Path) -> Any:  # noqa: ANN401
    """
    Resolve a path against a document.

    Args:
        document: Mapping or sequence to look the path up in
        path: Segments recorded by the comparator

    Returns:
        The value stored at the path

    Raises:
        PathError: If nothing in the document matches the path
    """
    if not path:
        return document
    expression = to_jsonpath(path)
    matches = _parse(expression).find(document)
    if not matches:
        raise PathError(
            f"JSONPath '{expression}' did not match any data", jsonpath_expression=expression,
        )
    return matches[0].value
