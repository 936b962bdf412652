"""Composite highlighter: runs several highlighters over the same text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from spanmark.highlighters.protocol import Highlighter
from spanmark.kinds import HighlightCallback


class CompositeHighlighter:
    """Ordered collection of highlighters applied one after another.

    Each sub-highlighter sees the same text and callback. Order decides
    only the order in which spans are delivered; spans from different
    sub-highlighters are not merged, sorted, or deduplicated.

    Sub-highlighters are held by reference. A composite never owns them
    exclusively, so the same shared instance may sit in many composites.

    Usage:
        composite = CompositeHighlighter()
        composite.add(markup_highlighter)
        composite.add(structural_highlighter)
        composite.highlight(text, callback)

    """

    __slots__ = ("_highlighters",)

    def __init__(self, highlighters: Iterable[Highlighter] = ()) -> None:
        self._highlighters: list[Highlighter] = []
        for highlighter in highlighters:
            self.add(highlighter)

    def add(self, highlighter: Highlighter) -> None:
        """Append a highlighter to run after the ones already added.

        Raises:
            TypeError: If ``highlighter`` has no callable ``highlight``.
        """
        if not callable(getattr(highlighter, "highlight", None)):
            raise TypeError(
                f"expected a highlighter, got {type(highlighter).__name__}"
            )
        self._highlighters.append(highlighter)

    def __len__(self) -> int:
        return len(self._highlighters)

    def __iter__(self) -> Iterator[Highlighter]:
        return iter(self._highlighters)

    def __repr__(self) -> str:
        inner = ", ".join(repr(h) for h in self._highlighters)
        return f"CompositeHighlighter([{inner}])"

    def highlight(self, text: str, callback: HighlightCallback) -> None:
        for highlighter in self._highlighters:
            highlighter.highlight(text, callback)
