"""Highlighter implementations.

- StructuralHighlighter: whitespace anomalies and escape sequences
- PatternHighlighter: one compiled pattern bound to one TextKind
- CompositeHighlighter: ordered union of other highlighters
"""

from spanmark.highlighters.composite import CompositeHighlighter
from spanmark.highlighters.pattern import PatternHighlighter
from spanmark.highlighters.protocol import Highlighter
from spanmark.highlighters.structural import StructuralHighlighter

__all__ = [
    "CompositeHighlighter",
    "Highlighter",
    "PatternHighlighter",
    "StructuralHighlighter",
]
