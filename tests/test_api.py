"""Tests for the high-level Spanmark API."""


class TestHighlightItem:
    """Tests for highlight_item()."""

    def test_message_without_plural(self) -> None:
        from spanmark import Message, Span, TextKind, highlight_item

        result = highlight_item(Message("  Hello"))
        assert result.string == [
            Span(0, 2, TextKind.LEADING_WHITESPACE),
            Span(0, 2, TextKind.LEADING_WHITESPACE),
        ]
        assert result.plural is None

    def test_message_with_plural(self) -> None:
        from spanmark import Message, Span, TextKind, highlight_item

        item = Message("%d file", "%d files", format_flag="c")
        result = highlight_item(item, TextKind.PLACEHOLDER)
        assert result.string == [Span(0, 2, TextKind.PLACEHOLDER)] * 2
        assert result.plural == [Span(0, 2, TextKind.PLACEHOLDER)] * 2

    def test_plural_highlighted_with_same_selection(self) -> None:
        from spanmark import Message, Span, TextKind, highlight_item

        # Markup is only in the plural, but both strings get the markup pass
        item = Message("a file", "<i>files</i>")
        result = highlight_item(item, TextKind.MARKUP)
        assert result.string == []
        assert result.plural == [Span(0, 3, TextKind.MARKUP), Span(8, 12, TextKind.MARKUP)]

    def test_nothing_requested(self) -> None:
        from spanmark import Message, TextKind, highlight_item

        result = highlight_item(Message("plain", "plains"), TextKind.PLACEHOLDER)
        assert result.string == []
        assert result.plural == []


class TestCollectSpans:
    """Tests for collect_spans()."""

    def test_none_highlighter(self) -> None:
        from spanmark import collect_spans

        assert collect_spans(None, "anything") == []

    def test_span_slice(self) -> None:
        from spanmark import StructuralHighlighter, collect_spans

        text = "Line\\n"
        (span,) = collect_spans(StructuralHighlighter(), text)
        assert span.slice(text) == "\\n"


class TestMessage:
    """Tests for the Message item."""

    def test_has_plural_from_string(self) -> None:
        from spanmark import Message

        assert Message("a").has_plural is False
        assert Message("a", "b").has_plural is True

    def test_plural_override(self) -> None:
        from spanmark import Message

        assert Message("a", "", plural=True).has_plural is True
        assert Message("a", "b", plural=False).has_plural is False

    def test_immutable(self) -> None:
        import dataclasses

        import pytest

        from spanmark import Message

        with pytest.raises(dataclasses.FrozenInstanceError):
            Message("a").string = "b"  # type: ignore[misc]


class TestTextKind:
    """Tests for TextKind masks."""

    def test_structural_mask(self) -> None:
        from spanmark import TextKind

        assert TextKind.STRUCTURAL == TextKind.LEADING_WHITESPACE | TextKind.ESCAPE
        assert TextKind.MARKUP not in TextKind.STRUCTURAL

    def test_all_mask(self) -> None:
        from spanmark import TextKind

        for kind in (TextKind.LEADING_WHITESPACE, TextKind.ESCAPE, TextKind.MARKUP, TextKind.PLACEHOLDER):
            assert kind in TextKind.ALL

    def test_iteration_lists_single_kinds(self) -> None:
        from spanmark import TextKind

        assert [kind.name for kind in TextKind] == [
            "LEADING_WHITESPACE",
            "ESCAPE",
            "MARKUP",
            "PLACEHOLDER",
        ]
