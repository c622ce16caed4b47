"""Plain-text renderer — document events projected to unformatted text.

Consumes the event sequence in a single forward pass. Open containers live
on an explicit stack of ``ContainerFrame`` objects, so arbitrarily deep
nesting never touches the call stack.

Separators are owed, not written: ending a block only records how many
newlines must precede the next visible content. This is what guarantees
exactly one blank line between top-level blocks and nothing trailing.

Output rules:
- Structural markers are never emitted (headings, emphasis, fences, quotes).
- Code blocks and code spans are copied verbatim; newlines at the edges of
  a code block belong to the surrounding separators.
- Links keep their display text; images become their alt text.
- Outside code, runs of spaces and tabs collapse to one space.

Example:
    >>> from llano.events import BlockStart, BlockEnd, Paragraph, Text
    >>> p = Paragraph()
    >>> render_plain([BlockStart(p), Text("Hello   world"), BlockEnd(p)])
    'Hello world'

Thread Safety:
    PlainTextRenderer is immutable. Per-call state lives in a private
    object created inside render(), so one renderer can serve many threads.

"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import assert_never

from llano.buffer import OutputBuffer
from llano.config import BULLET_MARKER, ListMarkers, RenderConfig, get_render_config
from llano.errors import MalformedDocument
from llano.events import (
    BLOCK_KINDS,
    INLINE_KINDS,
    BlockEnd,
    BlockKind,
    BlockQuote,
    BlockStart,
    CodeBlock,
    CodeSpan,
    CodeText,
    ContainerKind,
    Emphasis,
    Event,
    HardBreak,
    Heading,
    Image,
    InlineEnd,
    InlineKind,
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
from llano.utils.logger import get_logger

logger = get_logger(__name__)

_WHITESPACE_RUN = re.compile(r"[ \t]+")

# Newlines owed before a block that is not the first in its container
_TOP_LEVEL_SEPARATOR = 2
_NESTED_SEPARATOR = 1


@dataclass(slots=True)
class ContainerFrame:
    """One open container on the render stack.

    Attributes:
        kind: Container kind (None for the document root)
        blocks: Number of child blocks started inside this container so far
        ordinal: Next item number (lists only)

    """

    kind: ContainerKind | None
    blocks: int = 0
    ordinal: int = 1


def _name(kind: ContainerKind | None) -> str:
    return "document" if kind is None else type(kind).__name__


class _RenderState:
    """Mutable state of a single render() call."""

    __slots__ = (
        "_at_boundary",
        "_buf",
        "_config",
        "_hidden",
        "_literal",
        "_marker",
        "_pending_newlines",
        "_pending_space",
        "_stack",
    )

    def __init__(self, config: RenderConfig) -> None:
        self._config = config
        self._buf = OutputBuffer()
        self._stack: list[ContainerFrame] = [ContainerFrame(None)]
        self._pending_newlines = 0
        self._pending_space = False
        # True until the first content of the current block or line
        self._at_boundary = True
        # Depth of open code containers
        self._literal = 0
        # Depth of containers whose content is not shown (image, dropped strikethrough)
        self._hidden = 0
        # List item marker, written before the item's first visible content
        self._marker = ""

    def feed(self, index: int, event: Event) -> None:
        match event:
            case BlockStart(kind):
                self._check_category(kind, BLOCK_KINDS, "a block", index)
                self._start_block(kind)
            case BlockEnd(kind):
                self._check_category(kind, BLOCK_KINDS, "a block", index)
                self._pop(kind, index)
                self._end_block(kind)
            case InlineStart(kind):
                self._check_category(kind, INLINE_KINDS, "an inline", index)
                self._start_inline(kind)
            case InlineEnd(kind):
                self._check_category(kind, INLINE_KINDS, "an inline", index)
                self._pop(kind, index)
                self._end_inline(kind)
            case Text(content):
                if self._hidden:
                    return
                if self._literal:
                    self._write_literal(content)
                else:
                    self._write_text(content)
            case CodeText(content):
                if not self._hidden:
                    self._write_literal(content)
            case SoftBreak():
                if self._hidden:
                    return
                if self._literal:
                    self._write(" ")
                else:
                    self._pending_space = True
            case HardBreak():
                if not self._hidden:
                    self._break(1)
            case _:
                assert_never(event)

    def finish(self) -> str:
        if len(self._stack) > 1:
            raise MalformedDocument(
                f"{_name(self._stack[-1].kind)} still open at end of document"
            )
        return self._buf.build().strip("\n")

    # -- Containers -------------------------------------------------------------

    def _start_block(self, kind: BlockKind) -> None:
        parent = self._stack[-1]
        if parent.blocks:
            self._separate(parent)
        parent.blocks += 1

        frame = ContainerFrame(kind)
        self._stack.append(frame)
        self._at_boundary = True
        self._pending_space = False

        match kind:
            case CodeBlock():
                self._literal += 1
            case List(start=start):
                frame.ordinal = start
            case ListItem():
                self._start_item(parent)
            case ThematicBreak():
                self._break(_TOP_LEVEL_SEPARATOR)
            case (
                Paragraph()
                | Heading()
                | BlockQuote()
                | Table()
                | TableRow()
                | TableCell()
            ):
                pass
            case _:
                assert_never(kind)

    def _end_block(self, kind: BlockKind) -> None:
        match kind:
            case CodeBlock():
                self._literal -= 1
                # Blank lines closing the code are not content
                self._pending_newlines = 0
                self._break(_NESTED_SEPARATOR)
            case ListItem():
                self._marker = ""
                self._break(_NESTED_SEPARATOR)
            case ThematicBreak():
                self._break(_TOP_LEVEL_SEPARATOR)
            case TableCell():
                self._at_boundary = True
                self._pending_space = False
            case _:
                self._break(_NESTED_SEPARATOR)

    def _start_inline(self, kind: InlineKind) -> None:
        self._stack.append(ContainerFrame(kind))
        match kind:
            case CodeSpan():
                self._literal += 1
            case Image(alt=alt):
                if not self._hidden:
                    self._write_text(alt)
                self._hidden += 1
            case Strikethrough():
                if self._config.drop_strikethrough:
                    self._hidden += 1
            case Emphasis() | Strong() | Link():
                pass
            case _:
                assert_never(kind)

    def _end_inline(self, kind: InlineKind) -> None:
        match kind:
            case CodeSpan():
                self._literal -= 1
            case Image():
                self._hidden -= 1
            case Strikethrough():
                if self._config.drop_strikethrough:
                    self._hidden -= 1
            case Emphasis() | Strong() | Link():
                pass
            case _:
                assert_never(kind)

    def _separate(self, parent: ContainerFrame) -> None:
        """Owe the separator ``parent`` puts between its child blocks."""
        match parent.kind:
            case None:
                self._break(_TOP_LEVEL_SEPARATOR)
            case TableRow():
                self._write(self._config.table_cell_separator)
                self._at_boundary = True
            case _:
                self._break(_NESTED_SEPARATOR)

    def _start_item(self, parent: ContainerFrame) -> None:
        if not isinstance(parent.kind, List):
            return
        ordinal = parent.ordinal
        parent.ordinal += 1

        policy = self._config.list_markers
        if policy is ListMarkers.NONE:
            return
        if policy is ListMarkers.ORDINAL and parent.kind.ordered:
            self._marker = f"{ordinal}. "
        else:
            self._marker = BULLET_MARKER

    def _pop(self, kind: ContainerKind, index: int) -> None:
        if len(self._stack) == 1:
            raise MalformedDocument(f"end of {_name(kind)} without a matching start", index)
        top = self._stack[-1]
        if top.kind != kind:
            raise MalformedDocument(
                f"end of {_name(kind)} does not match open {_name(top.kind)}", index
            )
        self._stack.pop()

    @staticmethod
    def _check_category(
        kind: ContainerKind, allowed: tuple[type, ...], category: str, index: int
    ) -> None:
        if not isinstance(kind, allowed):
            raise MalformedDocument(f"{_name(kind)} is not {category} kind", index)

    # -- Output -----------------------------------------------------------------

    def _break(self, newlines: int) -> None:
        self._pending_newlines = max(self._pending_newlines, newlines)
        self._pending_space = False
        self._at_boundary = True

    def _write(self, s: str) -> None:
        if not s:
            return
        if self._pending_newlines:
            self._buf.ensure_newlines(self._pending_newlines)
            self._pending_newlines = 0
        elif self._pending_space and not self._at_boundary:
            self._buf.append(" ")
        if self._marker:
            self._buf.append(self._marker)
            self._marker = ""
        self._pending_space = False
        self._at_boundary = False
        self._buf.append(s)

    def _write_literal(self, content: str) -> None:
        # Newlines at the edges of code merge into the surrounding separators
        if self._at_boundary:
            content = content.lstrip("\n")
        body = content.rstrip("\n")
        self._write(body)
        if len(body) < len(content):
            self._pending_newlines = max(self._pending_newlines, len(content) - len(body))

    def _write_text(self, content: str) -> None:
        collapsed = _WHITESPACE_RUN.sub(" ", content)
        if collapsed.startswith(" "):
            self._pending_space = True
            collapsed = collapsed[1:]
        trailing = collapsed.endswith(" ")
        if trailing:
            collapsed = collapsed[:-1]
        if collapsed:
            self._write(collapsed)
        if trailing:
            self._pending_space = True


class PlainTextRenderer:
    """Render an event sequence to plain text.

    No markup of any kind is emitted. Raises MalformedDocument when the
    events are not balanced.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. When None, the configuration
                active in the calling context is read at render time.
        """
        self._config = config

    def render(self, events: Iterable[Event]) -> str:
        """Render events to plain text."""
        state = _RenderState(self._config or get_render_config())
        debug = logger.isEnabledFor(logging.DEBUG)
        for index, event in enumerate(events):
            if debug:
                logger.debug("event %d: %r", index, event)
            state.feed(index, event)
        return state.finish()


def render_plain(events: Iterable[Event], *, config: RenderConfig | None = None) -> str:
    """Render events to plain text.

    Args:
        events: Balanced event sequence.
        config: Optional render configuration (defaults to the active one).

    Returns:
        Plain text with no trailing separators.
    """
    return PlainTextRenderer(config).render(events)
