"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from spanmark import Message


@pytest.fixture
def catalog() -> list[Message]:
    """Generate a catalog of ~1000 mixed messages."""
    messages = []
    for i in range(250):
        messages.append(Message(f"Saved {i} files to <b>%s</b>\\n", format_flag="c"))
        messages.append(Message(f"  Item {i}  ", f"  Items {i}  "))
        messages.append(
            Message(f"%(user)s has {{count}} new messages ({i})", format_flag="python")
        )
        messages.append(Message(f"Visit @link or %{{page}} for step {i}", format_flag="ruby"))
    return messages


@pytest.fixture
def long_message() -> str:
    """A single ~100KB message with markup and escapes."""
    return "<p>Line with  <em>emphasis</em> &amp; %d items\\n</p> " * 2000
