"""
Line cursor for multi-line lookahead.

A forward-only view over a list of lines. Create one per scan; it is
never shared between runs.
"""

from typing import Callable, List, Optional


class LineCursor:
    """
    Forward cursor over lines.

    Usage:
        cursor = LineCursor(text.split('\\n'))
        while not cursor.at_end():
            line = cursor.advance()
            if opens_block(line):
                block = [line] + cursor.advance_until(closes_block)
    """

    def __init__(self, lines: List[str]):
        self._lines = list(lines)
        self._index = 0

    @classmethod
    def from_text(cls, text: str) -> 'LineCursor':
        return cls((text or '').split('\n'))

    @property
    def position(self) -> int:
        return self._index

    def at_end(self) -> bool:
        return self._index >= len(self._lines)

    def peek(self) -> Optional[str]:
        """Next line without consuming it, or None at the end."""
        if self.at_end():
            return None
        return self._lines[self._index]

    def advance(self) -> Optional[str]:
        """Consume and return the next line, or None at the end."""
        if self.at_end():
            return None
        line = self._lines[self._index]
        self._index += 1
        return line

    def advance_until(self, predicate: Callable[[str], bool]) -> List[str]:
        """
        Consume lines up to and including the first one matching predicate.

        If no line matches, everything up to the end is consumed.
        """
        consumed: List[str] = []
        while not self.at_end():
            line = self.advance()
            consumed.append(line)
            if predicate(line):
                break
        return consumed

    def skip_while(self, predicate: Callable[[str], bool]) -> int:
        """Consume lines while predicate holds; return how many were skipped."""
        skipped = 0
        while not self.at_end() and predicate(self.peek()):
            self._index += 1
            skipped += 1
        return skipped
