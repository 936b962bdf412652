"""Property-based tests for span invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from spanmark import (
    ESCAPE_LETTERS,
    Message,
    StructuralHighlighter,
    TextKind,
    collect_spans,
    escape_plain_text,
    select_highlighter,
    unescape_plain_text,
)
from spanmark.charsets import is_blank

# Text biased toward the characters the highlighters care about
interesting_text = st.text(
    alphabet=st.sampled_from(list(" \t\u00a0\u3000\\nqt0<>/&;%{}@:'\"$.-_aZ9\n(")),
    max_size=200,
)
format_flags = st.sampled_from(["", "c", "php", "python", "ruby", "perl"])


class TestSpanBounds:
    @given(interesting_text, format_flags)
    @settings(max_examples=200)
    def test_spans_within_string(self, text: str, flag: str) -> None:
        highlighter = select_highlighter(Message(text, format_flag=flag), TextKind.ALL)
        for start, end, kind in collect_spans(highlighter, text):
            assert 0 <= start < end <= len(text)
            assert kind in TextKind.ALL

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_structural_spans_within_arbitrary_text(self, text: str) -> None:
        for start, end, _ in collect_spans(StructuralHighlighter(), text):
            assert 0 <= start < end <= len(text)


class TestStructuralProperties:
    @given(interesting_text)
    @settings(max_examples=200)
    def test_edges_reported_without_overlap(self, text: str) -> None:
        if all(is_blank(c) for c in text):
            return
        lead = next(i for i, c in enumerate(text) if not is_blank(c))
        trail = next(i for i, c in enumerate(reversed(text)) if not is_blank(c))
        spans = collect_spans(StructuralHighlighter(), text)
        whitespace = {(s.start, s.end) for s in spans if s.kind is TextKind.LEADING_WHITESPACE}

        if lead:
            assert (0, lead) in whitespace
        if trail:
            assert (len(text) - trail, len(text)) in whitespace
        assert lead <= len(text) - trail

    @given(interesting_text)
    @settings(max_examples=200)
    def test_escape_spans_cover_backslash_and_letter(self, text: str) -> None:
        for span in collect_spans(StructuralHighlighter(), text):
            if span.kind is TextKind.ESCAPE:
                assert span.end - span.start == 2
                assert text[span.start] == "\\"
                assert text[span.start + 1] in ESCAPE_LETTERS

    @given(interesting_text)
    @settings(max_examples=200)
    def test_escape_spans_increase(self, text: str) -> None:
        starts = [s.start for s in collect_spans(StructuralHighlighter(), text) if s.kind is TextKind.ESCAPE]
        assert starts == sorted(set(starts))

    @given(st.text(alphabet=" \t\u3000", max_size=50))
    def test_all_blank_reports_nothing(self, text: str) -> None:
        assert collect_spans(StructuralHighlighter(), text) == []


class TestDeterminism:
    @given(interesting_text, format_flags)
    @settings(max_examples=100)
    def test_repeated_highlighting_identical(self, text: str, flag: str) -> None:
        highlighter = select_highlighter(Message(text, format_flag=flag), TextKind.ALL)
        assert collect_spans(highlighter, text) == collect_spans(highlighter, text)


class TestEscaping:
    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_unescape_inverts_escape(self, text: str) -> None:
        assert unescape_plain_text(escape_plain_text(text)) == text
