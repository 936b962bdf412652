"""Highlighter protocol for Spanmark.

Every highlighter, primitive or composite, exposes one method that scans a
string and reports spans through a callback. Composites hold other
highlighters through this same protocol, so they nest freely.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from spanmark.kinds import HighlightCallback


@runtime_checkable
class Highlighter(Protocol):
    """Protocol for span highlighters.

    Thread Safety:
        Implementations must be stateless between calls. Shared instances
        are invoked concurrently from multiple threads.
    """

    def highlight(self, text: str, callback: HighlightCallback) -> None:
        """Scan text and report every span found.

        Args:
            text: String to scan (read-only)
            callback: Called as ``callback(start, end, kind)`` for each span,
                in discovery order

        Contract:
            - MUST report only ranges with ``0 <= start < end <= len(text)``
            - MUST NOT raise for any input string
            - MUST NOT keep per-call state on the instance
        """
        ...
