"""
Llano — Markdown to plain text for Python

Strips headings, emphasis, lists, links, images, code fences, blockquotes,
tables and thematic breaks, keeping the readable content in reading order.
Markdown is tokenized by markdown-it-py; Llano renders the resulting event
stream with an explicit container stack.

Quick Start:
    >>> from llano import convert
    >>> convert("# Hello\\n\\n**bold** and [a link](https://example.com)")
    'Hello\\n\\nbold and a link'

    >>> # Or use the reusable PlainText processor
    >>> from llano import ListMarkers, PlainText, RenderConfig
    >>> plain = PlainText(RenderConfig(list_markers=ListMarkers.BULLET))
    >>> plain("- alpha\\n- beta")
    '• alpha\\n• beta'

Rendering events from another parser:
    >>> from llano import render_events
    >>> from llano.serialization import from_json
    >>> text = render_events(from_json(payload))

Installation:
    pip install llano
"""

from collections.abc import Iterable

from llano.config import (
    ListMarkers,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from llano.errors import LlanoError, MalformedDocument, SerializationError
from llano.events import (
    BlockEnd,
    BlockQuote,
    BlockStart,
    CodeBlock,
    CodeSpan,
    CodeText,
    Emphasis,
    Event,
    HardBreak,
    Heading,
    Image,
    InlineEnd,
    InlineStart,
    Link,
    List,
    ListItem,
    Paragraph,
    SoftBreak,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from llano.parser import Parser, iter_events, parse_events, parser_for
from llano.renderers.plain import PlainTextRenderer, render_plain
from llano.renderers.protocol import EventRenderer

__version__ = "0.1.0"


def convert(markdown_text: str) -> str:
    """Convert Markdown text to plain text.

    Uses the render configuration active in the calling context; with none
    set, behaviour is fixed (markers dropped, one blank line between blocks).

    Args:
        markdown_text: Markdown source text

    Returns:
        Plain text with all markup removed

    Raises:
        MalformedDocument: If the parser produced an unbalanced event stream

    Example:
        >>> convert("- item1\\n- item2")
        'item1\\nitem2'
    """
    config = get_render_config()
    events = parser_for(config).iter_events(markdown_text)
    return PlainTextRenderer(config).render(events)


def render_events(events: Iterable[Event]) -> str:
    """Render an already-parsed event sequence to plain text.

    Raises:
        MalformedDocument: If the events are not balanced
    """
    return PlainTextRenderer().render(events)


class PlainText:
    """High-level processor combining parser and renderer.

    Usage:
        >>> plain = PlainText()
        >>> plain("## Title\\n\\n*Body*")
        'Title\\n\\nBody'

        >>> # Inspect the events
        >>> plain.events("*x*")[1]
        InlineStart(kind=Emphasis())

    Thread Safety:
        Configuration is fixed at construction and both collaborators are
        immutable. Safe to share one instance across threads.

    """

    __slots__ = ("_config", "_parser", "_renderer")

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize processor.

        Args:
            config: Render configuration (uses the active one if None)
        """
        self._config = config or get_render_config()
        self._parser = Parser(self._config)
        self._renderer = PlainTextRenderer(self._config)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call."""
        return self._renderer.render(self._parser.iter_events(source))

    def events(self, source: str) -> list[Event]:
        """Parse Markdown source into events."""
        return self._parser.parse(source)

    def render(self, events: Iterable[Event]) -> str:
        """Render events to plain text."""
        return self._renderer.render(events)

    def convert_many(self, sources: Iterable[str]) -> list[str]:
        """Convert multiple Markdown sources, reusing one parser.

        Example:
            >>> PlainText().convert_many(["# One", "*Two*"])
            ['One', 'Two']
        """
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "convert",
    "render_events",
    "parse_events",
    "iter_events",
    # High-level
    "PlainText",
    # Components
    "Parser",
    "PlainTextRenderer",
    "EventRenderer",
    "render_plain",
    # Events
    "Event",
    "BlockStart",
    "BlockEnd",
    "InlineStart",
    "InlineEnd",
    "Text",
    "CodeText",
    "SoftBreak",
    "HardBreak",
    # Block kinds
    "BlockQuote",
    "CodeBlock",
    "Heading",
    "List",
    "ListItem",
    "Paragraph",
    "Table",
    "TableCell",
    "TableRow",
    "ThematicBreak",
    # Inline kinds
    "CodeSpan",
    "Emphasis",
    "Image",
    "Link",
    "Strikethrough",
    "Strong",
    # Configuration (ContextVar-based)
    "ListMarkers",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "LlanoError",
    "MalformedDocument",
    "SerializationError",
]
