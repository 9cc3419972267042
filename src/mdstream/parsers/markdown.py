#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/parsers/markdown.py
"""Markdown to event-stream adapter.

This module drives the mistune parser and flattens its token tree into the
balanced Start/End event stream consumed by the renderers. mistune is
configured with ``renderer=None`` so that it returns raw tokens, which are
then walked depth-first.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from mdstream.constants import DEPS_MARKDOWN
from mdstream.events import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    Event,
    FootnoteDefinition,
    FootnoteReference,
    HardBreak,
    Header,
    Html,
    Image,
    InlineHtml,
    Item,
    Link,
    List,
    Paragraph,
    Rule,
    SoftBreak,
    Start,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Tag,
    Text,
)
from mdstream.exceptions import InvalidOptionsError
from mdstream.options.markdown import MarkdownParserOptions
from mdstream.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_SILENT_TOKENS = frozenset({"blank_line"})


class MarkdownEventParser:
    """Turn markdown text into a stream of events.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Which markdown extensions to enable

    Examples
    --------
        >>> from mdstream.parsers.markdown import MarkdownEventParser
        >>> list(MarkdownEventParser().parse("*hi*"))
        [Start(tag=Paragraph()), Start(tag=Emphasis()), Text(text='hi'), End(tag=Emphasis()), End(tag=Paragraph())]

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                converter_name="markdown",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options = options or MarkdownParserOptions()
        self._handlers: dict[str, Callable[[dict[str, Any]], Iterator[Event]]] = {
            # Block-level tokens
            "paragraph": self._wrap_children(Paragraph),
            "block_text": self._iter_children,
            "heading": self._handle_heading,
            "block_code": self._handle_block_code,
            "block_quote": self._wrap_children(BlockQuote),
            "list": self._handle_list,
            "list_item": self._wrap_children(Item),
            "thematic_break": self._handle_thematic_break,
            "block_html": self._handle_block_html,
            "table": self._handle_table,
            "table_head": self._handle_table_head,
            "table_body": self._iter_children,
            "table_row": self._wrap_children(TableRow),
            "table_cell": self._wrap_children(TableCell),
            "footnotes": self._iter_children,
            "footnote_item": self._handle_footnote_item,
            # Inline tokens
            "text": self._handle_text,
            "emphasis": self._wrap_children(Emphasis),
            "strong": self._wrap_children(Strong),
            "strikethrough": self._wrap_children(Strikethrough),
            "codespan": self._handle_codespan,
            "link": self._handle_link,
            "image": self._handle_image,
            "softbreak": self._handle_softbreak,
            "linebreak": self._handle_linebreak,
            "inline_html": self._handle_inline_html,
            "footnote_ref": self._handle_footnote_ref,
        }

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, text: str) -> Iterator[Event]:
        """Parse markdown text into events.

        Parsing happens eagerly; the returned iterator walks the finished
        token tree lazily.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        iterator of Event
            Balanced event stream

        Raises
        ------
        DependencyError
            If mistune is not installed

        """
        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(text)
        logger.debug(f"mistune produced {len(tokens)} top-level tokens")
        return self._iter_tokens(tokens)

    def _iter_tokens(self, tokens: list[dict[str, Any]]) -> Iterator[Event]:
        for token in tokens:
            yield from self._iter_token(token)

    def _iter_token(self, token: dict[str, Any]) -> Iterator[Event]:
        token_type = token.get("type", "")
        handler = self._handlers.get(token_type)
        if handler is None:
            if token_type not in _SILENT_TOKENS:
                logger.debug(f"Skipping unsupported mistune token: {token_type}")
            return iter(())
        return handler(token)

    def _iter_children(self, token: dict[str, Any]) -> Iterator[Event]:
        children = token.get("children", [])
        if isinstance(children, list):
            yield from self._iter_tokens(children)

    def _wrap(self, tag: Tag, token: dict[str, Any]) -> Iterator[Event]:
        yield Start(tag)
        yield from self._iter_children(token)
        yield End(tag)

    def _wrap_children(self, tag_type: Callable[[], Tag]) -> Callable[[dict[str, Any]], Iterator[Event]]:
        """Build a handler that encloses a token's children in a payload-free tag."""

        def handler(token: dict[str, Any]) -> Iterator[Event]:
            return self._wrap(tag_type(), token)

        return handler

    @staticmethod
    def _attrs(token: dict[str, Any]) -> dict[str, Any]:
        attrs = token.get("attrs", {})
        return attrs if isinstance(attrs, dict) else {}

    @staticmethod
    def _footnote_key(key: str) -> str:
        # mistune releases disagree on the case of normalized keys
        return key.lower()

    # Block-level tokens

    def _handle_heading(self, token: dict[str, Any]) -> Iterator[Event]:
        level = self._attrs(token).get("level", 1)
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1
        return self._wrap(Header(level), token)

    def _handle_block_code(self, token: dict[str, Any]) -> Iterator[Event]:
        info = self._attrs(token).get("info") or ""
        tag = CodeBlock(info.strip())
        yield Start(tag)
        raw = token.get("raw", "")
        if raw:
            yield Text(raw)
        yield End(tag)

    def _handle_list(self, token: dict[str, Any]) -> Iterator[Event]:
        attrs = self._attrs(token)
        start = attrs.get("start", 1) if attrs.get("ordered", False) else None
        return self._wrap(List(start), token)

    def _handle_thematic_break(self, token: dict[str, Any]) -> Iterator[Event]:
        yield Start(Rule())
        yield End(Rule())

    def _handle_block_html(self, token: dict[str, Any]) -> Iterator[Event]:
        yield Html(token.get("raw", ""))

    def _handle_table(self, token: dict[str, Any]) -> Iterator[Event]:
        """Emit a table; column alignments come from the header cells."""
        alignments: list[Any] = []
        for child in token.get("children", []):
            if child.get("type") == "table_head":
                alignments = [
                    self._attrs(cell).get("align")
                    for cell in child.get("children", [])
                    if cell.get("type") == "table_cell"
                ]
                break
        return self._wrap(Table(tuple(alignments)), token)

    def _handle_table_head(self, token: dict[str, Any]) -> Iterator[Event]:
        # Header cells sit directly under the head, with no row in between.
        return self._wrap(TableHead(), token)

    def _handle_footnote_item(self, token: dict[str, Any]) -> Iterator[Event]:
        key = self._footnote_key(self._attrs(token).get("key", ""))
        return self._wrap(FootnoteDefinition(key), token)

    # Inline tokens

    def _handle_text(self, token: dict[str, Any]) -> Iterator[Event]:
        raw = token.get("raw", "")
        if raw:
            yield Text(raw)

    def _handle_codespan(self, token: dict[str, Any]) -> Iterator[Event]:
        yield Start(Code())
        yield Text(token.get("raw", ""))
        yield End(Code())

    def _handle_link(self, token: dict[str, Any]) -> Iterator[Event]:
        attrs = self._attrs(token)
        return self._wrap(Link(attrs.get("url", ""), attrs.get("title") or ""), token)

    def _handle_image(self, token: dict[str, Any]) -> Iterator[Event]:
        attrs = self._attrs(token)
        return self._wrap(Image(attrs.get("url", ""), attrs.get("title") or ""), token)

    def _handle_softbreak(self, token: dict[str, Any]) -> Iterator[Event]:
        yield SoftBreak()

    def _handle_linebreak(self, token: dict[str, Any]) -> Iterator[Event]:
        yield HardBreak()

    def _handle_inline_html(self, token: dict[str, Any]) -> Iterator[Event]:
        yield InlineHtml(token.get("raw", ""))

    def _handle_footnote_ref(self, token: dict[str, Any]) -> Iterator[Event]:
        yield FootnoteReference(self._footnote_key(token.get("raw", "")))


def markdown_to_events(text: str, options: MarkdownParserOptions | None = None) -> Iterator[Event]:
    """Parse markdown text into a balanced event stream.

    Parameters
    ----------
    text : str
        Markdown source
    options : MarkdownParserOptions or None, default = None
        Which markdown extensions to enable

    Returns
    -------
    iterator of Event
        Event stream ready for a renderer

    """
    return MarkdownEventParser(options).parse(text)
