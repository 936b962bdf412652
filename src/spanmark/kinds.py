"""TextKind and Span definitions for Spanmark highlighters.

Highlighters report spans of a string through a callback. Each span has a
half-open ``[start, end)`` range and a TextKind describing what was found.

Thread Safety:
TextKind is an enum (inherently immutable).
Span is a NamedTuple and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Callable
from enum import Flag, auto
from typing import NamedTuple


class TextKind(Flag):
    """Categories of highlighted text.

    Members double as request-mask flags: pass a combination such as
    ``TextKind.MARKUP | TextKind.PLACEHOLDER`` to the selector to restrict
    which categories are computed. Highlight callbacks only ever receive
    single members.

    LEADING_WHITESPACE is also reported for trailing whitespace, the
    non-breaking space and interior runs of 2+ blanks.

    """

    LEADING_WHITESPACE = auto()  # also trailing, NBSP, duplicate blanks
    ESCAPE = auto()  # \n, \t, ...
    MARKUP = auto()  # <b>, &amp;
    PLACEHOLDER = auto()  # %s, {name}, %{var}

    # Request-mask shortcuts
    STRUCTURAL = LEADING_WHITESPACE | ESCAPE
    ALL = LEADING_WHITESPACE | ESCAPE | MARKUP | PLACEHOLDER


class Span(NamedTuple):
    """A highlighted range ``[start, end)`` of a string."""

    start: int
    end: int
    kind: TextKind

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this span."""
        return text[self.start : self.end]


# Sink for (start, end, kind) triples, called once per discovered span
HighlightCallback = Callable[[int, int, TextKind], None]


__all__ = [
    "HighlightCallback",
    "Span",
    "TextKind",
]
