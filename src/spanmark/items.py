"""Text items consumed by the selector.

The selector needs four facts about a catalog entry: its message, its
plural (if any), and the format language declared for it. Any object with
these attributes works; Message is a ready-made frozen implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class TextItem(Protocol):
    """Read-only view of a translatable entry."""

    @property
    def string(self) -> str: ...

    @property
    def plural_string(self) -> str: ...

    @property
    def has_plural(self) -> bool: ...

    @property
    def format_flag(self) -> str:
        """Declared format language ("c", "php", "python", "ruby", or "")."""
        ...


@dataclass(frozen=True, slots=True)
class Message:
    """A translatable message with optional plural form.

    Attributes:
        string: The singular message text
        plural_string: The plural message text ("" if none)
        format_flag: Declared format language, "" when unset
        plural: Force the plural flag; by default an item has a plural
            when ``plural_string`` is non-empty

    Example:
        >>> msg = Message("%d file", "%d files", format_flag="c")
        >>> msg.has_plural
        True
    """

    string: str
    plural_string: str = ""
    format_flag: str = ""
    plural: bool | None = field(default=None, repr=False)

    @property
    def has_plural(self) -> bool:
        if self.plural is not None:
            return self.plural
        return bool(self.plural_string)
