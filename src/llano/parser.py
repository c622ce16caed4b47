"""Markdown to event adapter built on markdown-it-py.

markdown-it-py tokenizes the source (CommonMark, plus GFM tables and
strikethrough when enabled). This module walks its flat token stream and
yields Llano events. Open containers are tracked on an explicit stack so
every end event carries the very kind object its start carried.

Token mapping:
    paragraph, heading, bullet/ordered list, list item, blockquote,
    table, tr, th/td     -> BlockStart/BlockEnd
    fence, code_block    -> CodeBlock with a single CodeText
    hr                   -> ThematicBreak
    em, strong, s, link  -> InlineStart/InlineEnd
    code_inline          -> CodeSpan with a single CodeText
    image                -> Image (alt text carried on the kind)
    html_block/inline    -> dropped

Thread Safety:
    A Parser is not mutated after construction. Each parse keeps its stack
    in local variables.

"""

from collections.abc import Callable, Iterable, Iterator
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.token import Token

from llano.config import RenderConfig, get_render_config
from llano.events import (
    BlockEnd,
    BlockKind,
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


def _ordered_list(token: Token) -> List:
    start = token.attrGet("start")
    return List(ordered=True, start=1 if start is None else int(start))


def _link(token: Token) -> Link:
    title = token.attrGet("title")
    return Link(
        destination=str(token.attrGet("href") or ""),
        title=None if title is None else str(title),
    )


_BLOCK_OPENERS: dict[str, Callable[[Token], BlockKind]] = {
    "paragraph_open": lambda token: Paragraph(),
    "heading_open": lambda token: Heading(level=int(token.tag[1:])),
    "bullet_list_open": lambda token: List(ordered=False),
    "ordered_list_open": _ordered_list,
    "list_item_open": lambda token: ListItem(),
    "blockquote_open": lambda token: BlockQuote(),
    "table_open": lambda token: Table(),
    "tr_open": lambda token: TableRow(),
    "th_open": lambda token: TableCell(header=True),
    "td_open": lambda token: TableCell(header=False),
}

_INLINE_OPENERS: dict[str, Callable[[Token], InlineKind]] = {
    "em_open": lambda token: Emphasis(),
    "strong_open": lambda token: Strong(),
    "s_open": lambda token: Strikethrough(),
    "link_open": _link,
}

# Grouping tokens with no plain-text meaning
_TRANSPARENT = frozenset({"thead_open", "thead_close", "tbody_open", "tbody_close"})


class Parser:
    """Markdown parser producing Llano events.

    Usage:
        >>> parser = Parser()
        >>> parser.parse("# Hi")
        [BlockStart(kind=Heading(level=1)), Text(content='Hi'), BlockEnd(kind=Heading(level=1))]

    """

    __slots__ = ("_drop_struck", "_md")

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize parser.

        Args:
            config: Configuration deciding which GFM rules are enabled and
                whether struck text is kept in image alt text. Defaults to
                the configuration active in the calling context.
        """
        config = config or get_render_config()
        md = MarkdownIt("commonmark")
        rules = []
        if config.tables_enabled:
            rules.append("table")
        if config.strikethrough_enabled:
            rules.append("strikethrough")
        if rules:
            md.enable(rules)
        self._md = md
        self._drop_struck = config.drop_strikethrough

    def parse(self, source: str) -> list[Event]:
        """Parse Markdown source into a list of events."""
        return list(self.iter_events(source))

    def iter_events(self, source: str) -> Iterator[Event]:
        """Parse Markdown source, yielding events in document order."""
        stack: list[BlockKind | None] = []
        for token in self._md.parse(source):
            if token.type == "inline":
                yield from self._inline_events(token.children or ())
            elif token.type in ("fence", "code_block"):
                yield from _code_block(token)
            elif token.type == "hr":
                kind = ThematicBreak()
                yield BlockStart(kind)
                yield BlockEnd(kind)
            elif token.type in _TRANSPARENT:
                continue
            elif token.nesting == 1:
                opener = _BLOCK_OPENERS.get(token.type)
                if opener is None:
                    logger.debug("Skipping unsupported block %r", token.type)
                    stack.append(None)
                    continue
                kind = opener(token)
                stack.append(kind)
                yield BlockStart(kind)
            elif token.nesting == -1:
                kind = stack.pop()
                if kind is not None:
                    yield BlockEnd(kind)
            else:
                logger.debug("Dropping %r token", token.type)

    def _inline_events(self, children: Iterable[Token]) -> Iterator[Event]:
        stack: list[InlineKind | None] = []
        for token in children:
            match token.type:
                case "text" | "text_special":
                    if token.content:
                        yield Text(token.content)
                case "softbreak":
                    yield SoftBreak()
                case "hardbreak":
                    yield HardBreak()
                case "code_inline":
                    kind = CodeSpan()
                    yield InlineStart(kind)
                    yield CodeText(token.content)
                    yield InlineEnd(kind)
                case "image":
                    kind = Image(
                        destination=str(token.attrGet("src") or ""),
                        alt=_alt_text(token, self._drop_struck),
                    )
                    yield InlineStart(kind)
                    yield InlineEnd(kind)
                case _ if token.nesting == 1:
                    opener = _INLINE_OPENERS.get(token.type)
                    if opener is None:
                        logger.debug("Skipping unsupported inline %r", token.type)
                        stack.append(None)
                        continue
                    kind = opener(token)
                    stack.append(kind)
                    yield InlineStart(kind)
                case _ if token.nesting == -1:
                    kind = stack.pop()
                    if kind is not None:
                        yield InlineEnd(kind)
                case _:
                    logger.debug("Dropping %r token", token.type)


def _alt_text(token: Token, drop_struck: bool) -> str:
    # token.content holds the raw label; alt is its text without markup
    parts: list[str] = []
    struck = 0
    pending = list(reversed(token.children or ()))
    while pending:
        child = pending.pop()
        if drop_struck and child.type in ("s_open", "s_close"):
            struck += child.nesting
        elif struck:
            continue
        elif child.type == "image":
            pending.extend(reversed(child.children or ()))
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
        elif child.type in ("text", "text_special", "code_inline"):
            parts.append(child.content)
    return "".join(parts)


def _code_block(token: Token) -> Iterator[Event]:
    # The final line terminator ends the block; it is not content
    kind = CodeBlock(info=token.info.strip())
    content = token.content
    if content.endswith("\n"):
        content = content[:-1]
    yield BlockStart(kind)
    if content:
        yield CodeText(content)
    yield BlockEnd(kind)


@lru_cache(maxsize=16)
def parser_for(config: RenderConfig) -> Parser:
    """Return the Parser shared by every caller using ``config``."""
    return Parser(config)


def iter_events(source: str) -> Iterator[Event]:
    """Parse Markdown source with the active configuration, yielding events."""
    return parser_for(get_render_config()).iter_events(source)


def parse_events(source: str) -> list[Event]:
    """Parse Markdown source with the active configuration.

    Example:
        >>> parse_events("Hello *world*")[2]
        InlineStart(kind=Emphasis())
    """
    return parser_for(get_render_config()).parse(source)
