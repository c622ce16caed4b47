"""Typed document events for Llano.

A parsed Markdown document is a flat, ordered sequence of events. Containers
open with a ``BlockStart``/``InlineStart`` and close with the matching
``BlockEnd``/``InlineEnd``; literal content arrives as ``Text`` or ``CodeText``.

All events and kinds are frozen dataclasses with slots for:
- Immutability: Safe sharing across threads
- Equality: an end event carries a kind equal to its start's kind
- Pattern matching: the unions below are closed, so ``match`` can be exhaustive

Event Hierarchy:
Event
├── BlockStart(kind: BlockKind)
├── BlockEnd(kind: BlockKind)
├── InlineStart(kind: InlineKind)
├── InlineEnd(kind: InlineKind)
├── Text(content)
├── CodeText(content)
├── SoftBreak
└── HardBreak

Example:
    >>> from llano.events import BlockStart, BlockEnd, Heading, Text
    >>> kind = Heading(level=1)
    >>> events = [BlockStart(kind), Text("Hello"), BlockEnd(kind)]

"""

from dataclasses import dataclass

# =============================================================================
# Block kinds
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph:
    """A run of inline content."""


@dataclass(frozen=True, slots=True)
class Heading:
    """ATX or setext heading.

    Markdown: # text / text + ===

    """

    level: int


@dataclass(frozen=True, slots=True)
class List:
    """Ordered or bullet list. Children are ``ListItem`` blocks.

    ``start`` is the first ordinal of an ordered list (1 for bullet lists).

    """

    ordered: bool = False
    start: int = 1


@dataclass(frozen=True, slots=True)
class ListItem:
    """One item of a ``List``."""


@dataclass(frozen=True, slots=True)
class BlockQuote:
    """Quoted block. Markdown: > text"""


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced or indented code block.

    ``info`` is the fence info string ("" for indented code). It is never
    rendered; it is kept so events carry what the parser saw.

    """

    info: str = ""


@dataclass(frozen=True, slots=True)
class ThematicBreak:
    """Horizontal rule. Markdown: ---, ***, ___"""


@dataclass(frozen=True, slots=True)
class Table:
    """GFM table. Children are ``TableRow`` blocks (head rows first)."""


@dataclass(frozen=True, slots=True)
class TableRow:
    """Table row. Children are ``TableCell`` blocks."""


@dataclass(frozen=True, slots=True)
class TableCell:
    """Table cell holding inline content."""

    header: bool = False


# =============================================================================
# Inline kinds
# =============================================================================


@dataclass(frozen=True, slots=True)
class Emphasis:
    """Markdown: *text* or _text_"""


@dataclass(frozen=True, slots=True)
class Strong:
    """Markdown: **text** or __text__"""


@dataclass(frozen=True, slots=True)
class Strikethrough:
    """Markdown: ~~text~~"""


@dataclass(frozen=True, slots=True)
class CodeSpan:
    """Inline code. Markdown: `code`"""


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink. Markdown: [text](destination "title")"""

    destination: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Image:
    """Image. Markdown: ![alt](destination)

    The alt text is carried on the kind; events between start and end are
    not part of the visible content.

    """

    destination: str
    alt: str = ""


# =============================================================================
# Events
# =============================================================================

type BlockKind = (
    Paragraph
    | Heading
    | List
    | ListItem
    | BlockQuote
    | CodeBlock
    | ThematicBreak
    | Table
    | TableRow
    | TableCell
)

type InlineKind = Emphasis | Strong | Strikethrough | CodeSpan | Link | Image

type ContainerKind = BlockKind | InlineKind


@dataclass(frozen=True, slots=True)
class BlockStart:
    kind: BlockKind


@dataclass(frozen=True, slots=True)
class BlockEnd:
    kind: BlockKind


@dataclass(frozen=True, slots=True)
class InlineStart:
    kind: InlineKind


@dataclass(frozen=True, slots=True)
class InlineEnd:
    kind: InlineKind


@dataclass(frozen=True, slots=True)
class Text:
    """Markdown text. Whitespace runs are collapsed outside code."""

    content: str


@dataclass(frozen=True, slots=True)
class CodeText:
    """Literal text, always copied verbatim."""

    content: str


@dataclass(frozen=True, slots=True)
class SoftBreak:
    """Line ending inside a paragraph."""


@dataclass(frozen=True, slots=True)
class HardBreak:
    """Forced line break (two trailing spaces or a backslash)."""


type Event = (
    BlockStart
    | BlockEnd
    | InlineStart
    | InlineEnd
    | Text
    | CodeText
    | SoftBreak
    | HardBreak
)

BLOCK_KINDS: tuple[type, ...] = (
    Paragraph,
    Heading,
    List,
    ListItem,
    BlockQuote,
    CodeBlock,
    ThematicBreak,
    Table,
    TableRow,
    TableCell,
)

INLINE_KINDS: tuple[type, ...] = (Emphasis, Strong, Strikethrough, CodeSpan, Link, Image)


__all__ = [
    "BLOCK_KINDS",
    "INLINE_KINDS",
    "BlockEnd",
    "BlockKind",
    "BlockQuote",
    "BlockStart",
    "CodeBlock",
    "CodeSpan",
    "CodeText",
    "ContainerKind",
    "Emphasis",
    "Event",
    "HardBreak",
    "Heading",
    "Image",
    "InlineEnd",
    "InlineKind",
    "InlineStart",
    "Link",
    "List",
    "ListItem",
    "Paragraph",
    "SoftBreak",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
]
