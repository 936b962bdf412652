"""Benchmark highlighter selection and scanning.

Run with:
    pytest benchmarks/benchmark_highlight.py -v --benchmark-only
"""

import pytest

from spanmark import Message, StructuralHighlighter, TextKind, highlight_item, select_highlighter


@pytest.mark.benchmark(group="select")
def test_benchmark_select_catalog(benchmark, catalog):
    """Benchmark selecting a highlighter for every catalog entry."""

    def select_all():
        for item in catalog:
            select_highlighter(item, TextKind.ALL)

    benchmark(select_all)


@pytest.mark.benchmark(group="highlight")
def test_benchmark_highlight_catalog(benchmark, catalog):
    """Benchmark full highlighting (select + message + plural) of a catalog."""

    def highlight_all():
        for item in catalog:
            highlight_item(item, TextKind.ALL)

    benchmark(highlight_all)


@pytest.mark.benchmark(group="highlight")
def test_benchmark_structural_long(benchmark, long_message):
    """Benchmark the structural scan of one long message."""
    highlighter = StructuralHighlighter()
    benchmark(highlighter.highlight, long_message, lambda s, e, k: None)


@pytest.mark.benchmark(group="highlight")
def test_benchmark_all_kinds_long(benchmark, long_message):
    """Benchmark every highlighter on one long message."""
    highlighter = select_highlighter(Message(long_message, format_flag="c"), TextKind.ALL)
    benchmark(highlighter.highlight, long_message, lambda s, e, k: None)
