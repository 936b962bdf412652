"""Build a custom highlighter stack with an extra pattern.

Shows that any object with a highlight(text, callback) method composes with
the built-in highlighters.
"""

import re

from spanmark import (
    CompositeHighlighter,
    PatternHighlighter,
    StructuralHighlighter,
    TextKind,
    collect_spans,
)
from spanmark.patterns import MARKUP_RE

# ICU MessageFormat-style arguments: {count, plural, ...}
ICU_ARGUMENT_RE = re.compile(r"\{\w+,\s*\w+")

highlighter = CompositeHighlighter(
    [
        PatternHighlighter(MARKUP_RE, TextKind.MARKUP),
        PatternHighlighter(ICU_ARGUMENT_RE, TextKind.PLACEHOLDER),
        StructuralHighlighter(),
    ]
)

text = "<b>{count, plural, one {# file} other {# files}}</b>  removed"
for span in collect_spans(highlighter, text):
    print(span.kind.name, repr(span.slice(text)))
