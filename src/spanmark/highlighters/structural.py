"""Structural highlighter: whitespace anomalies and escape sequences.

Scans the string once from the left (plus one short scan from each end)
and reports:

- leading and trailing blank runs
- every non-breaking space
- interior runs of two or more blanks
- backslash escapes from ESCAPE_LETTERS

All whitespace findings use TextKind.LEADING_WHITESPACE.

Complexity: O(n) where n = len(text)

"""

from __future__ import annotations

from collections.abc import Callable

from spanmark.charsets import BACKSLASH, NBSP, is_blank
from spanmark.escaping import ESCAPE_LETTERS
from spanmark.kinds import HighlightCallback, TextKind


class StructuralHighlighter:
    """Highlights whitespace problems and escape sequences.

    Thread Safety:
        Holds only the blank predicate; all scan state is local.

    Example:
        >>> spans = []
        >>> StructuralHighlighter().highlight("hi  ", lambda *s: spans.append(s))
        >>> spans
        [(2, 4, <TextKind.LEADING_WHITESPACE: 1>)]
    """

    __slots__ = ("_is_blank",)

    def __init__(self, *, is_blank: Callable[[str], bool] = is_blank) -> None:
        """Initialize with an optional blank predicate.

        Args:
            is_blank: Returns True for horizontal whitespace characters
        """
        self._is_blank = is_blank

    def __repr__(self) -> str:
        return "StructuralHighlighter()"

    def highlight(self, text: str, callback: HighlightCallback) -> None:
        if not text:
            return

        blank = self._is_blank
        length = len(text)

        # Leading whitespace
        for pos in range(length):
            if not blank(text[pos]):
                if pos:
                    callback(0, pos, TextKind.LEADING_WHITESPACE)
                break

        # Trailing whitespace
        for pos in range(length - 1, -1, -1):
            if not blank(text[pos]):
                width = length - 1 - pos
                if width:
                    callback(length - width, length, TextKind.LEADING_WHITESPACE)
                break

        run_start = -1
        pos = 0
        while pos < length:
            char = text[pos]

            if char == NBSP:
                callback(pos, pos + 1, TextKind.LEADING_WHITESPACE)
            elif blank(char):
                if run_start == -1:
                    run_start = pos
            elif run_start != -1:
                if pos - run_start >= 2:
                    callback(run_start, pos, TextKind.LEADING_WHITESPACE)
                run_start = -1

            if char == BACKSLASH:
                pos += 1
                if pos == length:
                    break
                # The escaped character is consumed, never scanned as blank
                if text[pos] in ESCAPE_LETTERS:
                    callback(pos - 1, pos + 1, TextKind.ESCAPE)

            pos += 1
