r"""Plain-text escaping for editable message text.

Control characters are shown to translators as backslash sequences
(``\n``, ``\t``, ...). The structural highlighter marks exactly these
sequences, so both sides share ESCAPE_LETTERS.

Example:
    >>> from spanmark.escaping import escape_plain_text
    >>> escape_plain_text("Line one\nLine two")
    'Line one\\nLine two'
"""

from __future__ import annotations

# Letters that form a recognized escape when preceded by a backslash
ESCAPE_LETTERS: frozenset[str] = frozenset("0abfnrtv\\")

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}

_UNESCAPES: dict[str, str] = {seq[1]: char for char, seq in _ESCAPES.items()}

_ESCAPE_TABLE = str.maketrans(_ESCAPES)


def escape_plain_text(text: str) -> str:
    r"""Replace control characters and backslashes with escape sequences.

    Args:
        text: Raw message text

    Returns:
        Text with each control character from the escape table, and each
        backslash, written as a two-character backslash sequence

    Examples:
        >>> escape_plain_text("a\tb")
        'a\\tb'
        >>> escape_plain_text("C:\\dir")
        'C:\\\\dir'
    """
    if not text:
        return ""
    return text.translate(_ESCAPE_TABLE)


def unescape_plain_text(text: str) -> str:
    """Inverse of escape_plain_text().

    Unrecognized sequences and a dangling trailing backslash are kept
    literally.

    Args:
        text: Escaped text as shown in the editor

    Returns:
        Raw message text
    """
    if "\\" not in text:
        return text

    out: list[str] = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char == "\\" and pos + 1 < length:
            replacement = _UNESCAPES.get(text[pos + 1])
            if replacement is not None:
                out.append(replacement)
                pos += 2
                continue
        out.append(char)
        pos += 1
    return "".join(out)


__all__ = [
    "ESCAPE_LETTERS",
    "escape_plain_text",
    "unescape_plain_text",
]
