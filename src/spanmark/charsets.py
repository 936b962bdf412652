"""Character classification for the structural highlighter.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from spanmark.charsets import is_blank, NBSP

    if is_blank(char):  # horizontal whitespace only
        ...
"""

import unicodedata

# Non-breaking space; always highlighted on its own
NBSP = "\u00a0"

BACKSLASH = "\\"

# ASCII horizontal whitespace, checked before the category lookup
ASCII_BLANKS: frozenset[str] = frozenset(" \t")


def is_blank(char: str) -> bool:
    """Check if character is horizontal whitespace.

    Matches the Unicode "blank" property: TAB plus every space separator
    (category Zs, which includes U+00A0 and U+3000). Line breaks are not
    blank.

    """
    if char in ASCII_BLANKS:
        return True
    return unicodedata.category(char) == "Zs"
