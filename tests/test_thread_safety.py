"""Thread safety tests for convert() and shared processors.

Every call owns its stack and buffer, so concurrent conversions must give
exactly the single-threaded results.
"""

from concurrent.futures import ThreadPoolExecutor

from llano import ListMarkers, PlainText, RenderConfig, convert, render_config_context
from llano.renderers.plain import PlainTextRenderer

DOCUMENTS = [
    "# Title {n}\n\nBody **{n}** with [link](https://x.com/{n}).",
    "- a{n}\n- b{n}\n  - c{n}",
    "```\ncode {n}\n    indented\n```",
    "> quote {n}\n>\n> more",
    "| h | {n} |\n| - | - |\n| x | y |",
]


def _corpus(count: int) -> list[str]:
    return [DOCUMENTS[i % len(DOCUMENTS)].format(n=i) for i in range(count)]


class TestConcurrentConvert:
    def test_parallel_matches_serial(self) -> None:
        sources = _corpus(200)
        expected = [convert(source) for source in sources]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(convert, sources))
        assert actual == expected

    def test_shared_processor(self) -> None:
        plain = PlainText(RenderConfig(list_markers=ListMarkers.BULLET))
        sources = _corpus(100)
        expected = [plain(source) for source in sources]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(plain, sources))
        assert actual == expected

    def test_shared_renderer(self) -> None:
        plain = PlainText()
        renderer = PlainTextRenderer(RenderConfig())
        event_lists = [plain.events(source) for source in _corpus(100)]
        expected = [renderer.render(events) for events in event_lists]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(renderer.render, event_lists))
        assert actual == expected

    def test_per_thread_configs_do_not_leak(self) -> None:
        policies = [ListMarkers.NONE, ListMarkers.BULLET, ListMarkers.ORDINAL]

        def convert_with(i: int) -> tuple[ListMarkers, str]:
            policy = policies[i % len(policies)]
            with render_config_context(RenderConfig(list_markers=policy)):
                return policy, convert("1. a\n2. b")

        expected = {
            ListMarkers.NONE: "a\nb",
            ListMarkers.BULLET: "• a\n• b",
            ListMarkers.ORDINAL: "1. a\n2. b",
        }
        with ThreadPoolExecutor(max_workers=6) as pool:
            results = list(pool.map(convert_with, range(60)))
        for policy, text in results:
            assert text == expected[policy]
