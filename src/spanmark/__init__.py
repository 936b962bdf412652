"""
Spanmark: Span Highlighting for Translatable Messages

Annotates spans of message text with semantic kinds: whitespace anomalies,
escape sequences, markup, and format-string placeholders. Spans are
advisory, meant for presentation; nothing is parsed or rewritten.

Quick Start:
    >>> from spanmark import Message, TextKind, highlight_item
    >>> result = highlight_item(Message("Hi <b>there</b> "))
    >>> [(s.start, s.end, s.kind.name) for s in result.string]
    [(3, 6, 'MARKUP'), (11, 15, 'MARKUP'), (15, 16, 'LEADING_WHITESPACE')]

Select once, highlight several strings:
    highlighter = select_highlighter(item, TextKind.ALL)
    if highlighter is not None:
        highlighter.highlight(item.string, callback)
        highlighter.highlight(item.plural_string, callback)

Custom Composition:
    from spanmark.patterns import MARKUP_RE

    composite = CompositeHighlighter([
        PatternHighlighter(MARKUP_RE, TextKind.MARKUP),
        StructuralHighlighter(),
    ])

Installation:
    pip install spanmark              # zero runtime dependencies
"""

from spanmark.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from spanmark.errors import ConfigError, SpanmarkError
from spanmark.escaping import ESCAPE_LETTERS, escape_plain_text, unescape_plain_text
from spanmark.highlighters import (
    CompositeHighlighter,
    Highlighter,
    PatternHighlighter,
    StructuralHighlighter,
)
from spanmark.items import Message, TextItem
from spanmark.kinds import HighlightCallback, Span, TextKind
from spanmark.selector import (
    ItemHighlights,
    collect_spans,
    highlight_item,
    select_highlighter,
    shared_highlighters,
)

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "select_highlighter",
    "highlight_item",
    "collect_spans",
    "shared_highlighters",
    "ItemHighlights",
    # Kinds and spans
    "TextKind",
    "Span",
    "HighlightCallback",
    # Highlighters
    "Highlighter",
    "StructuralHighlighter",
    "PatternHighlighter",
    "CompositeHighlighter",
    # Items
    "TextItem",
    "Message",
    # Escaping
    "ESCAPE_LETTERS",
    "escape_plain_text",
    "unescape_plain_text",
    # Configuration (ContextVar-based)
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
    # Errors
    "SpanmarkError",
    "ConfigError",
]
