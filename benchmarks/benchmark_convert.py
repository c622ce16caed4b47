"""Benchmark Llano conversion against bare markdown-it-py tokenization.

The gap between the two groups is the cost of the event adapter and the
plain-text renderer.

Run with:
    pytest benchmarks/benchmark_convert.py -v --benchmark-only
"""

import pytest

from llano import PlainText, convert
from llano.renderers.plain import PlainTextRenderer


@pytest.mark.benchmark(group="large-doc")
def test_benchmark_convert_large_document(benchmark, large_document):
    """Full Markdown to plain text on a ~100KB document."""
    benchmark(convert, large_document)


@pytest.mark.benchmark(group="large-doc")
def test_benchmark_markdown_it_tokenize(benchmark, large_document):
    """markdown-it-py tokenization alone, for comparison."""
    from markdown_it import MarkdownIt

    md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    benchmark(md.parse, large_document)


@pytest.mark.benchmark(group="large-doc")
def test_benchmark_render_only(benchmark, large_document):
    """Renderer alone over pre-parsed events."""
    events = PlainText().events(large_document)
    renderer = PlainTextRenderer()
    benchmark(renderer.render, events)


@pytest.mark.benchmark(group="real-world")
def test_benchmark_real_world_docs(benchmark, real_world_docs):
    plain = PlainText()

    def convert_all():
        for doc in real_world_docs:
            plain(doc)

    benchmark(convert_all)


@pytest.mark.benchmark(group="nesting")
def test_benchmark_deep_nesting(benchmark, deeply_nested):
    """Many deeply nested containers."""
    result = benchmark(convert, deeply_nested)
    assert result.startswith("deep 0\n\ndeep 1")
