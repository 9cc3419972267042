#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/events.py
"""Event and tag types for the flattened markdown structure stream.

A markdown parser does not hand the renderer a tree. It produces a linear
sequence of events in which nesting is expressed by explicit ``Start`` and
``End`` markers around other events:

    Start(Emphasis()), Text("hi"), End(Emphasis())

Every ``Start(tag)`` is matched by exactly one later ``End`` carrying a tag
of the same kind, with any number of balanced pairs in between.

Events
------
- Start, End: tag boundaries
- Text: a run of plain text (escaped on output)
- Html, InlineHtml: trusted raw HTML
- SoftBreak, HardBreak: line breaks
- FootnoteReference: an inline footnote marker

Tags
----
Rendered by every configuration:
    - Header, CodeBlock, Emphasis, Strong, Code, Link

Emitted by upstream parsers and rendered only when the matching renderer
option is enabled (ignored otherwise):
    - Table, TableHead, TableRow, TableCell
    - Image, FootnoteDefinition
    - Paragraph, Rule, BlockQuote, List, Item, Strikethrough

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mdstream.constants import Alignment


@dataclass(frozen=True)
class Tag:
    """Base class for all tag payloads carried by Start and End events."""


@dataclass(frozen=True)
class Paragraph(Tag):
    """Paragraph block."""


@dataclass(frozen=True)
class Rule(Tag):
    """Thematic break."""


@dataclass(frozen=True)
class Header(Tag):
    """Heading block.

    Parameters
    ----------
    level : int
        Heading level as reported by the parser (1-6)

    """

    level: int = 1


@dataclass(frozen=True)
class BlockQuote(Tag):
    """Block quote."""


@dataclass(frozen=True)
class CodeBlock(Tag):
    """Fenced or indented code block.

    Parameters
    ----------
    info : str, default ""
        The fence info string (usually the language)

    """

    info: str = ""


@dataclass(frozen=True)
class List(Tag):
    """List block; ``start`` is set for ordered lists."""

    start: Optional[int] = None


@dataclass(frozen=True)
class Item(Tag):
    """List item."""


@dataclass(frozen=True)
class FootnoteDefinition(Tag):
    """Body of a named footnote."""

    name: str = ""


@dataclass(frozen=True)
class Table(Tag):
    """Table block.

    Parameters
    ----------
    alignments : tuple of Alignment or None
        Per-column alignment; None is the default (unstyled) alignment

    """

    alignments: tuple[Optional[Alignment], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TableHead(Tag):
    """Header row of a table; holds cells directly."""


@dataclass(frozen=True)
class TableRow(Tag):
    """Body row of a table."""


@dataclass(frozen=True)
class TableCell(Tag):
    """Single table cell."""


@dataclass(frozen=True)
class Emphasis(Tag):
    """Emphasized inline span."""


@dataclass(frozen=True)
class Strong(Tag):
    """Strong inline span."""


@dataclass(frozen=True)
class Strikethrough(Tag):
    """Struck-through inline span."""


@dataclass(frozen=True)
class Code(Tag):
    """Inline code span."""


@dataclass(frozen=True)
class Link(Tag):
    """Hyperlink.

    Parameters
    ----------
    destination : str
        Link target, unescaped
    title : str, default ""
        Link title; omitted from output when empty

    """

    destination: str = ""
    title: str = ""


@dataclass(frozen=True)
class Image(Tag):
    """Image; the nested events between Start and End form its alt text."""

    destination: str = ""
    title: str = ""


@dataclass(frozen=True)
class Event:
    """Base class for stream events."""


@dataclass(frozen=True)
class Start(Event):
    """Opening boundary of ``tag``."""

    tag: Tag


@dataclass(frozen=True)
class End(Event):
    """Closing boundary of ``tag``."""

    tag: Tag


@dataclass(frozen=True)
class Text(Event):
    """Plain text run."""

    text: str


@dataclass(frozen=True)
class Html(Event):
    """Block-level raw HTML, passed through verbatim."""

    html: str


@dataclass(frozen=True)
class InlineHtml(Event):
    """Inline raw HTML, passed through verbatim."""

    html: str


@dataclass(frozen=True)
class SoftBreak(Event):
    """Soft line break."""


@dataclass(frozen=True)
class HardBreak(Event):
    """Hard line break."""


@dataclass(frozen=True)
class FootnoteReference(Event):
    """Inline reference to the footnote called ``name``."""

    name: str


def same_kind(opening: Tag, closing: Tag) -> bool:
    """Return True if ``closing`` can terminate a span opened by ``opening``.

    Payloads are not compared; only the tag kind must agree.
    """
    return type(opening) is type(closing)
