"""Pattern highlighter: one span per regular-expression match.

Binds one compiled pattern to one TextKind. Matches from different pattern
highlighters may overlap; nothing here deduplicates them.
"""

from __future__ import annotations

import re

from spanmark.kinds import HighlightCallback, TextKind
from spanmark.utils.logger import get_logger

logger = get_logger(__name__)

# Engine failures that mean "input too hard", not "bug": the scan is dropped
RESOURCE_ERRORS: tuple[type[BaseException], ...] = (RecursionError, MemoryError)


class PatternHighlighter:
    """Highlights every non-empty match of a compiled pattern.

    The pattern is shared, never copied or modified; compiled ``re``
    patterns are safe for concurrent ``finditer()`` calls.

    Failure Handling:
        If the regex engine runs out of stack or memory part way through,
        spans already reported stand and the rest of the scan is silently
        dropped. Every other exception propagates to the caller.

    """

    __slots__ = ("_kind", "_pattern")

    def __init__(self, pattern: re.Pattern[str], kind: TextKind) -> None:
        """Initialize pattern highlighter.

        Args:
            pattern: Precompiled pattern (anything with ``finditer``)
            kind: TextKind reported for every match
        """
        self._pattern = pattern
        self._kind = kind

    @property
    def pattern(self) -> re.Pattern[str]:
        """The compiled pattern this highlighter matches."""
        return self._pattern

    @property
    def kind(self) -> TextKind:
        """The TextKind reported for matches."""
        return self._kind

    def __repr__(self) -> str:
        return f"PatternHighlighter({self._kind.name})"

    def highlight(self, text: str, callback: HighlightCallback) -> None:
        kind = self._kind
        try:
            for match in self._pattern.finditer(text):
                start, end = match.span()
                if start == end:
                    continue
                callback(start, end, kind)
        except RESOURCE_ERRORS as e:
            logger.debug(
                "%s scan aborted on %d-character input: %s",
                kind.name,
                len(text),
                type(e).__name__,
            )
