"""
Unit tests for texpages/latex/cursor.py - LineCursor
"""
from texpages.latex.cursor import LineCursor


class TestLineCursor:
    """Test forward line cursor."""

    def test_from_text(self):
        cursor = LineCursor.from_text("a\nb")
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"
        assert cursor.at_end()

    def test_peek_does_not_consume(self):
        cursor = LineCursor(["a", "b"])
        assert cursor.peek() == "a"
        assert cursor.position == 0
        assert cursor.advance() == "a"

    def test_end_returns_none(self):
        cursor = LineCursor([])
        assert cursor.at_end()
        assert cursor.peek() is None
        assert cursor.advance() is None

    def test_advance_until_inclusive(self):
        cursor = LineCursor(["x", "y", "stop", "z"])
        assert cursor.advance_until(lambda line: line == "stop") == ["x", "y", "stop"]
        assert cursor.peek() == "z"

    def test_advance_until_consumes_rest_without_match(self):
        cursor = LineCursor(["x", "y"])
        assert cursor.advance_until(lambda line: False) == ["x", "y"]
        assert cursor.at_end()

    def test_skip_while(self):
        cursor = LineCursor(["", "", "text"])
        assert cursor.skip_while(lambda line: not line) == 2
        assert cursor.advance() == "text"

    def test_cursors_are_independent(self):
        lines = ["a", "b"]
        first = LineCursor(lines)
        first.advance()
        second = LineCursor(lines)
        assert second.peek() == "a"

    def test_none_text(self):
        cursor = LineCursor.from_text(None)
        assert cursor.advance() == ""
        assert cursor.at_end()
