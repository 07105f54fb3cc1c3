"""Tests for path rendering and resolution."""

import pytest

from deep_equals import PathError
from deep_equals.paths import _parse, render_message_path, resolve, to_jsonpath


class TestRenderMessagePath:
    """Test the message form of a path."""

    def test_empty_path(self):
        """Test an empty path leaves the message unchanged."""
        assert render_message_path("Expected ", ()) == "Expected "

    def test_keys_append_with_dots(self):
        """Test mapping keys append '<key>.'."""
        assert render_message_path("Expected ", ("propB", "propA")) == "Expected propB.propA."

    def test_indices_rewrite_trailing_dot(self):
        """Test indices replace the trailing character with '[<index>].'."""
        path = ("propB", "propA", 1)
        assert render_message_path("Expected ", path) == "Expected propB.propA[1]."

    def test_index_at_root_replaces_trailing_space(self):
        """Test a root index consumes the space of the prefix."""
        assert render_message_path("Test 01: Expected ", (0,)) == "Test 01: Expected[0]."

    def test_digit_string_keys_are_indices(self):
        """Test digit-only mapping keys render like indices."""
        assert render_message_path("Expected ", ("rows", "3")) == "Expected rows[3]."


class TestToJsonpath:
    """Test the JSONPath form of a path."""

    def test_root(self):
        """Test the empty path is the root."""
        assert to_jsonpath(()) == "$"

    def test_fields_and_indices(self):
        """Test fields use dots and indices use brackets."""
        assert to_jsonpath(("propB", "propA", 1, "propB")) == "$.propB.propA[1].propB"

    def test_non_identifier_keys_are_quoted(self):
        """Test keys that are not identifiers are quoted."""
        assert to_jsonpath(("my key",)) == "$.'my key'"
        assert to_jsonpath(("0",)) == "$.'0'"
        assert to_jsonpath(("it's",)) == "$.'it\\'s'"


class TestResolve:
    """Test resolving a path against a document."""

    def setup_method(self):
        """Set up test fixtures."""
        self.document = {
            "propA": 1,
            "propB": {"propA": [1, {"propA": "a", "propB": "b"}, 3]},
        }

    def test_resolve_nested_leaf(self):
        """Test a leaf inside a sequence inside a mapping."""
        assert resolve(self.document, ("propB", "propA", 1, "propB")) == "b"

    def test_resolve_root(self):
        """Test the empty path resolves to the document."""
        assert resolve(self.document, ()) is self.document

    def test_resolve_sequence_root(self):
        """Test an index path against a list document."""
        assert resolve([10, [20, 30]], (1, 0)) == 20

    def test_missing_path_raises(self):
        """Test a path with no match raises PathError."""
        with pytest.raises(PathError, match="did not match any data") as exc_info:
            resolve(self.document, ("propC",))
        assert exc_info.value.jsonpath_expression == "$.propC"


class TestParse:
    """Test JSONPath parse error handling."""

    def test_invalid_expression_raises_path_error(self):
        """Test jsonpath-ng parse errors are wrapped in PathError."""
        with pytest.raises(PathError, match="Invalid JSONPath expression") as exc_info:
            _parse("$.a[")
        assert exc_info.value.jsonpath_expression == "$.a["

    def test_unrelated_errors_propagate(self):
        """Test errors other than jsonpath-ng's are not converted."""
        with pytest.raises(Exception) as exc_info:  # noqa: PT011
            _parse(None)
        assert not isinstance(exc_info.value, PathError)
