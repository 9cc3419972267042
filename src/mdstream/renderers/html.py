#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/renderers/html.py
"""HTML rendering from a markdown event stream.

This module provides the HtmlRenderer class which turns a flat sequence of
events (see :mod:`mdstream.events`) into a single HTML string in one pass.
The markup targets a simple display widget: headers become ``<big>``, code
becomes ``<tt>``, emphasis and strong become ``<i>`` and ``<b>``.

Optional layers are switched on through HtmlRendererOptions:

- autolink: bare URLs inside text are wrapped in anchors
- table_support: table tags drive a small table render state
- render_images: images get their alt text from raw-text mode
- footnote_definitions: footnote bodies become numbered blocks
- raw_text_links_as_plain: links degrade to ``text: destination``

Raw-text mode flattens the events up to a matching End into escaped plain
text. It is used for image alt text and is available directly through
:meth:`HtmlRenderer.render_raw_text`.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional

from mdstream.constants import (
    CODE_BLOCK_CLOSE,
    CODE_BLOCK_OPEN,
    CODE_CLOSE,
    CODE_OPEN,
    EMPHASIS_CLOSE,
    EMPHASIS_OPEN,
    FOOTNOTE_DEFINITION_CLOSE,
    FOOTNOTE_DEFINITION_LABEL,
    FOOTNOTE_DEFINITION_OPEN,
    FOOTNOTE_REFERENCE_CLOSE,
    FOOTNOTE_REFERENCE_OPEN,
    HARD_BREAK,
    HEADER_CLOSE,
    HEADER_OPEN,
    LINK_CLOSE,
    PLAIN_LINK_SEPARATOR,
    RAW_TEXT_BREAK,
    SOFT_BREAK,
    STRONG_CLOSE,
    STRONG_OPEN,
    TABLE_CLOSE,
    TABLE_HEAD_CLOSE,
    TABLE_HEAD_OPEN,
    TABLE_OPEN,
    TABLE_ROW_CLOSE,
    TABLE_ROW_OPEN,
    Alignment,
    TableSection,
)
from mdstream.events import (
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
    Link,
    SoftBreak,
    Start,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Tag,
    Text,
    same_kind,
)
from mdstream.exceptions import UnbalancedEventsError
from mdstream.options.html import HtmlRendererOptions
from mdstream.renderers.base import BaseRenderer
from mdstream.utils.decorators import debug_timer
from mdstream.utils.escape import escape_href, escape_html
from mdstream.utils.links import find_urls

logger = logging.getLogger(__name__)


@dataclass
class TableState:
    """Bookkeeping for the table currently being rendered.

    Parameters
    ----------
    section : {"head", "body"}, default "head"
        Which part of the table the next cell belongs to
    alignments : tuple
        Column alignments captured at table start
    cell_index : int, default 0
        Index of the next cell within the current row

    """

    section: TableSection = "head"
    alignments: tuple[Optional[Alignment], ...] = field(default_factory=tuple)
    cell_index: int = 0

    def reset(self, alignments: Iterable[Optional[Alignment]] = ()) -> None:
        """Start a new table with the given column alignments."""
        self.section = "head"
        self.alignments = tuple(alignments)
        self.cell_index = 0

    def current_alignment(self) -> Optional[Alignment]:
        """Return the alignment of the current column, None if unset."""
        if self.cell_index < len(self.alignments):
            return self.alignments[self.cell_index]
        return None

    @property
    def cell_tag(self) -> str:
        """Return the cell element name for the current section."""
        return "th" if self.section == "head" else "td"


class HtmlRenderer(BaseRenderer):
    """Render a markdown event stream to HTML.

    Each call to :meth:`render` starts from a clean slate: the output buffer,
    the footnote number table and the table state are reset, so one renderer
    instance can be reused for any number of documents.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from mdstream.events import End, Header, Start, Text
        >>> from mdstream.renderers.html import HtmlRenderer
        >>> HtmlRenderer().render([Start(Header(1)), Text("Title"), End(Header(1))])
        '<big>Title</big>'

    With autolinking:

        >>> from mdstream.options import HtmlRendererOptions
        >>> renderer = HtmlRenderer(HtmlRendererOptions(autolink=True))
        >>> renderer.render([Text("see http://example.com")])
        'see <a href="http://example.com">http://example.com</a>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._events: Iterator[Event] = iter(())
        self._output: list[str] = []
        self._footnote_numbers: dict[str, int] = {}
        self._table = TableState()
        self._open_tags: list[Tag] = []
        self._event_handlers: dict[type, Callable] = {
            Start: self._handle_start,
            End: self._handle_end,
            Text: self._handle_text,
            Html: self._handle_html,
            InlineHtml: self._handle_html,
            SoftBreak: self._handle_soft_break,
            HardBreak: self._handle_hard_break,
            FootnoteReference: self._handle_footnote_reference,
        }

    def _reset(self, events: Iterable[Event], numbers: dict[str, int] | None = None) -> None:
        self._events = iter(events)
        self._output = []
        self._footnote_numbers = {} if numbers is None else numbers
        self._table = TableState()
        self._open_tags = []

    def render(self, events: Iterable[Event]) -> str:
        """Render an event stream to an HTML string.

        Parameters
        ----------
        events : iterable of Event
            Balanced event stream; consumed exactly once, in order

        Returns
        -------
        str
            HTML text

        Raises
        ------
        UnbalancedEventsError
            Only when ``check_balance`` is enabled and the stream is not
            balanced

        """
        self._reset(events)
        count = 0

        with debug_timer(logger, "Rendering (html)"):
            # Handlers may pull further events from self._events (raw-text
            # mode), so the loop must read from the shared iterator.
            for event in self._events:
                count += 1
                handler = self._event_handlers.get(type(event))
                if handler is None:
                    logger.debug(f"Ignoring unsupported event type: {type(event).__name__}")
                    continue
                handler(event)

            if self.options.check_balance and self._open_tags:
                raise UnbalancedEventsError(
                    f"Event stream ended with {len(self._open_tags)} unclosed tag(s)",
                    open_tags=self._open_tags,
                )

        logger.debug(f"Rendered {count} top-level events, {len(self._footnote_numbers)} footnote(s)")
        return "".join(self._output)

    def render_raw_text(self, events: Iterator[Event], numbers: dict[str, int] | None = None) -> str:
        """Flatten events up to the matching End into escaped plain text.

        The iterator must be positioned just after a Start event. Events are
        consumed up to and including the End that matches that Start; any
        later events remain in the iterator.

        Parameters
        ----------
        events : iterator of Event
            Shared event iterator positioned after a Start
        numbers : dict or None, default None
            Footnote number table to share with an enclosing render. A new
            table is used when omitted.

        Returns
        -------
        str
            Escaped text content of the subtree

        Examples
        --------
            >>> from mdstream.events import Emphasis, End, Start, Strong, Text
            >>> stream = iter([Start(Strong()), Text("hi"), End(Strong()), End(Emphasis()), Text("after")])
            >>> HtmlRenderer().render_raw_text(stream)
            'hi'
            >>> next(stream)
            Text(text='after')

        """
        self._reset(events, numbers)
        self._raw_text(closes_open_tag=False)
        return "".join(self._output)

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _push(self, text: str) -> None:
        if text:
            self._output.append(text)

    def _fresh_line(self) -> None:
        """Start a new line unless the output is empty or already ends with one."""
        if self._output and not self._output[-1].endswith("\n"):
            self._output.append("\n")

    def _footnote_number(self, name: str) -> int:
        """Return the number for ``name``, assigning the next one on first use."""
        return self._footnote_numbers.setdefault(name, len(self._footnote_numbers) + 1)

    # ------------------------------------------------------------------
    # Balance tracking
    # ------------------------------------------------------------------

    def _track_open(self, tag: Tag) -> None:
        if self.options.check_balance:
            self._open_tags.append(tag)

    def _track_close(self, event: End) -> None:
        if not self.options.check_balance:
            return
        if not self._open_tags:
            raise UnbalancedEventsError(
                f"End({type(event.tag).__name__}) without a matching Start", event=event
            )
        if not same_kind(self._open_tags[-1], event.tag):
            raise UnbalancedEventsError(
                f"End({type(event.tag).__name__}) does not close Start({type(self._open_tags[-1]).__name__})",
                event=event,
                open_tags=self._open_tags,
            )
        self._open_tags.pop()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _handle_start(self, event: Start) -> None:
        self._track_open(event.tag)
        self._start_tag(event.tag)

    def _handle_end(self, event: End) -> None:
        self._track_close(event)
        self._end_tag(event.tag)

    def _handle_text(self, event: Text) -> None:
        escaped = escape_html(event.text)
        if self.options.autolink:
            escaped = self._autolink(escaped)
        self._push(escaped)

    def _handle_html(self, event: Html | InlineHtml) -> None:
        self._push(event.html)

    def _handle_soft_break(self, event: SoftBreak) -> None:
        self._push(SOFT_BREAK)

    def _handle_hard_break(self, event: HardBreak) -> None:
        self._push(HARD_BREAK)

    def _handle_footnote_reference(self, event: FootnoteReference) -> None:
        number = self._footnote_number(event.name)
        self._push(FOOTNOTE_REFERENCE_OPEN)
        self._push(escape_html(event.name))
        self._push('">')
        self._push(str(number))
        self._push(FOOTNOTE_REFERENCE_CLOSE)

    def _autolink(self, escaped: str) -> str:
        """Wrap URL ranges of already-escaped text in anchors.

        Ranges are applied in ascending start order. A range that starts
        before the end of the previously wrapped one is skipped.

        Parameters
        ----------
        escaped : str
            HTML-escaped text fragment

        Returns
        -------
        str
            Fragment with anchors inserted around each URL

        """
        ranges = find_urls(escaped)
        if not ranges:
            return escaped

        parts: list[str] = []
        consumed = 0
        for start, end in sorted(ranges):
            if start < consumed:
                logger.debug(f"Skipping overlapping URL range {start}-{end} in text fragment")
                continue
            url = escaped[start:end]
            parts.append(escaped[consumed:start])
            parts.append('<a href="')
            parts.append(escape_href(url))
            parts.append('">')
            parts.append(url)
            parts.append(LINK_CLOSE)
            consumed = end
        parts.append(escaped[consumed:])
        return "".join(parts)

    # ------------------------------------------------------------------
    # Tag handlers
    # ------------------------------------------------------------------

    def _start_tag(self, tag: Tag) -> None:
        """Emit the opening markup for ``tag``; unknown kinds are ignored."""
        if isinstance(tag, Header):
            self._fresh_line()
            self._push(HEADER_OPEN)
        elif isinstance(tag, CodeBlock):
            self._fresh_line()
            self._push(CODE_BLOCK_OPEN)
        elif isinstance(tag, Emphasis):
            self._push(EMPHASIS_OPEN)
        elif isinstance(tag, Strong):
            self._push(STRONG_OPEN)
        elif isinstance(tag, Code):
            self._push(CODE_OPEN)
        elif isinstance(tag, Link):
            if not self.options.raw_text_links_as_plain:
                self._push('<a href="')
                self._push(escape_href(tag.destination))
                if tag.title:
                    self._push('" title="')
                    self._push(escape_html(tag.title))
                self._push('">')
        elif isinstance(tag, Image) and self.options.render_images:
            self._start_image(tag)
        elif isinstance(tag, FootnoteDefinition) and self.options.footnote_definitions:
            self._fresh_line()
            self._push(FOOTNOTE_DEFINITION_OPEN)
            self._push(escape_html(tag.name))
            self._push(FOOTNOTE_DEFINITION_LABEL)
            self._push(str(self._footnote_number(tag.name)))
            self._push("</sup>")
        elif self.options.table_support and isinstance(tag, (Table, TableHead, TableRow, TableCell)):
            self._start_table_tag(tag)
        else:
            logger.debug(f"Ignoring start of unrendered tag: {type(tag).__name__}")

    def _end_tag(self, tag: Tag) -> None:
        """Emit the closing markup for ``tag``; unknown kinds are ignored."""
        if isinstance(tag, Header):
            self._push(HEADER_CLOSE)
        elif isinstance(tag, CodeBlock):
            self._push(CODE_BLOCK_CLOSE)
        elif isinstance(tag, Emphasis):
            self._push(EMPHASIS_CLOSE)
        elif isinstance(tag, Strong):
            self._push(STRONG_CLOSE)
        elif isinstance(tag, Code):
            self._push(CODE_CLOSE)
        elif isinstance(tag, Link):
            if self.options.raw_text_links_as_plain:
                self._push(PLAIN_LINK_SEPARATOR)
                self._push(tag.destination)
            else:
                self._push(LINK_CLOSE)
        elif isinstance(tag, FootnoteDefinition) and self.options.footnote_definitions:
            self._push(FOOTNOTE_DEFINITION_CLOSE)
        elif self.options.table_support and isinstance(tag, (Table, TableHead, TableRow, TableCell)):
            self._end_table_tag(tag)

    def _start_image(self, tag: Image) -> None:
        """Render an image; consumes the events up to the image's End."""
        self._push('<img src="')
        self._push(escape_href(tag.destination))
        self._push('" alt="')
        self._raw_text(closes_open_tag=True)
        if tag.title:
            self._push('" title="')
            self._push(escape_html(tag.title))
        self._push('" />')

    def _start_table_tag(self, tag: Tag) -> None:
        if isinstance(tag, Table):
            self._table.reset(tag.alignments)
            self._push(TABLE_OPEN)
        elif isinstance(tag, TableHead):
            self._table.section = "head"
            self._table.cell_index = 0
            self._push(TABLE_HEAD_OPEN)
        elif isinstance(tag, TableRow):
            self._table.cell_index = 0
            self._push(TABLE_ROW_OPEN)
        elif isinstance(tag, TableCell):
            self._push(f"<{self._table.cell_tag}")
            alignment = self._table.current_alignment()
            if alignment:
                self._push(f' style="text-align: {alignment}"')
            self._push(">")

    def _end_table_tag(self, tag: Tag) -> None:
        if isinstance(tag, Table):
            self._push(TABLE_CLOSE)
        elif isinstance(tag, TableHead):
            self._push(TABLE_HEAD_CLOSE)
            self._table.section = "body"
        elif isinstance(tag, TableRow):
            self._push(TABLE_ROW_CLOSE)
        elif isinstance(tag, TableCell):
            self._push(f"</{self._table.cell_tag}>")
            self._table.cell_index += 1

    # ------------------------------------------------------------------
    # Raw-text mode
    # ------------------------------------------------------------------

    def _raw_text(self, closes_open_tag: bool) -> None:
        """Consume events up to the matching End, emitting only escaped text.

        Parameters
        ----------
        closes_open_tag : bool
            Whether the terminating End closes a Start that was recorded by
            the balance check (True when entered from the dispatch loop)

        """
        depth = 0
        for event in self._events:
            if isinstance(event, Start):
                self._track_open(event.tag)
                depth += 1
            elif isinstance(event, End):
                if depth == 0:
                    if closes_open_tag:
                        self._track_close(event)
                    return
                self._track_close(event)
                depth -= 1
            elif isinstance(event, Text):
                self._push(escape_html(event.text))
            elif isinstance(event, InlineHtml):
                self._push(escape_html(event.html))
            elif isinstance(event, (SoftBreak, HardBreak)):
                self._push(RAW_TEXT_BREAK)
            elif isinstance(event, FootnoteReference):
                self._push(f"[{self._footnote_number(event.name)}]")
            # Html blocks are dropped
