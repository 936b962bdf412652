"""Highlighter selection for catalog items.

Decides which highlighters a given item needs and assembles them in
priority order:

1. Markup (lowest priority, only when the item contains markup)
2. Common placeholders (only when the item contains one)
3. The placeholder pattern for the item's declared format language
4. Structural whitespace and escape highlighting (highest priority)

Later highlighters are the more specific ones; a renderer that paints
spans in delivery order lets them win where spans overlap.

Thread Safety:
    The primitive highlighters are built once, on first use, under a lock
    and are read-only afterwards. Each selection returns a fresh composite
    that references the shared instances.

"""

from __future__ import annotations

import re
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import NamedTuple

from spanmark.config import get_highlight_config
from spanmark.highlighters import (
    CompositeHighlighter,
    Highlighter,
    PatternHighlighter,
    StructuralHighlighter,
)
from spanmark.items import TextItem
from spanmark.kinds import HighlightCallback, Span, TextKind
from spanmark.patterns import COMMON_PLACEHOLDERS_RE, FORMAT_PATTERNS, MARKUP_RE
from spanmark.utils.logger import get_logger

logger = get_logger(__name__)


class _SharedHighlighters(NamedTuple):
    structural: StructuralHighlighter
    markup: PatternHighlighter
    placeholders: PatternHighlighter
    formats: Mapping[str, PatternHighlighter]


_shared: _SharedHighlighters | None = None
_shared_lock = threading.Lock()


def _get_shared() -> _SharedHighlighters:
    """Return the process-wide highlighters, building them on first use."""
    global _shared
    # Simple read is atomic; only first use takes the lock
    shared = _shared
    if shared is not None:
        return shared

    with _shared_lock:
        if _shared is None:
            _shared = _SharedHighlighters(
                structural=StructuralHighlighter(),
                markup=PatternHighlighter(MARKUP_RE, TextKind.MARKUP),
                placeholders=PatternHighlighter(COMMON_PLACEHOLDERS_RE, TextKind.PLACEHOLDER),
                formats=MappingProxyType(
                    {
                        flag: PatternHighlighter(pattern, TextKind.PLACEHOLDER)
                        for flag, pattern in FORMAT_PATTERNS.items()
                    }
                ),
            )
        return _shared


def shared_highlighters() -> Mapping[str, Highlighter]:
    """Read-only view of the shared highlighters by name.

    Names are "structural", "markup", "placeholders" and "format:<flag>"
    for each supported format language.
    """
    shared = _get_shared()
    view: dict[str, Highlighter] = {
        "structural": shared.structural,
        "markup": shared.markup,
        "placeholders": shared.placeholders,
    }
    for flag, highlighter in shared.formats.items():
        view[f"format:{flag}"] = highlighter
    return MappingProxyType(view)


def _item_contains(item: TextItem, pattern: re.Pattern[str], sniff_plural: bool) -> bool:
    if pattern.search(item.string):
        return True
    return sniff_plural and item.has_plural and pattern.search(item.plural_string) is not None


def select_highlighter(item: TextItem, kinds: TextKind | None = None) -> Highlighter | None:
    """Choose the highlighter for one catalog item.

    Markup and common placeholders are detected from the content of the
    item (message and plural); the language-specific placeholder pattern
    comes from the item's declared format flag.

    Args:
        item: The text item to highlight
        kinds: Categories to compute; defaults to the active
            HighlightConfig.kinds

    Returns:
        The shared structural highlighter when nothing else applies, a
        fresh CompositeHighlighter otherwise, or None when nothing was
        requested that could apply. Unknown format flags contribute
        nothing.

    Example:
        >>> from spanmark import Message, TextKind, collect_spans
        >>> item = Message("<b>bold</b>")
        >>> highlighter = select_highlighter(item, TextKind.MARKUP)
        >>> [span[:2] for span in collect_spans(highlighter, item.string)]
        [(0, 3), (7, 11)]
    """
    config = get_highlight_config()
    if kinds is None:
        kinds = config.kinds

    needs_markup = bool(kinds & TextKind.MARKUP) and _item_contains(
        item, MARKUP_RE, config.sniff_plural
    )
    needs_placeholders = bool(kinds & TextKind.PLACEHOLDER) and _item_contains(
        item, COMMON_PLACEHOLDERS_RE, config.sniff_plural
    )
    format_flag = item.format_flag or ""
    wants_structural = bool(kinds & TextKind.STRUCTURAL)

    shared = _get_shared()
    if not needs_markup and not needs_placeholders and not format_flag:
        return shared.structural if wants_structural else None

    composite = CompositeHighlighter()

    if needs_markup:
        composite.add(shared.markup)

    if needs_placeholders:
        composite.add(shared.placeholders)

    if kinds & TextKind.PLACEHOLDER:
        format_highlighter = shared.formats.get(format_flag)
        if format_highlighter is not None:
            composite.add(format_highlighter)
        elif format_flag:
            logger.debug("No placeholder pattern for format flag %r", format_flag)

    if wants_structural:
        composite.add(shared.structural)

    return composite


def collect_spans(highlighter: Highlighter | None, text: str) -> list[Span]:
    """Run a highlighter and return its spans in delivery order.

    Args:
        highlighter: Highlighter to run (None yields no spans)
        text: String to scan

    Returns:
        List of Span tuples
    """
    if highlighter is None:
        return []

    spans: list[Span] = []

    def _collect(start: int, end: int, kind: TextKind) -> None:
        spans.append(Span(start, end, kind))

    callback: HighlightCallback = _collect
    highlighter.highlight(text, callback)
    return spans


class ItemHighlights(NamedTuple):
    """Spans for a message and, when present, its plural."""

    string: list[Span]
    plural: list[Span] | None


def highlight_item(item: TextItem, kinds: TextKind | None = None) -> ItemHighlights:
    """Select a highlighter for item and run it over message and plural.

    Args:
        item: The text item to highlight
        kinds: Categories to compute (see select_highlighter)

    Returns:
        ItemHighlights; ``plural`` is None when the item has no plural
    """
    highlighter = select_highlighter(item, kinds)
    plural = collect_spans(highlighter, item.plural_string) if item.has_plural else None
    return ItemHighlights(string=collect_spans(highlighter, item.string), plural=plural)


__all__ = [
    "ItemHighlights",
    "collect_spans",
    "highlight_item",
    "select_highlighter",
    "shared_highlighters",
]
