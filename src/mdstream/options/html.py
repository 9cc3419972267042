#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

This module defines the switches that select which optional layers of the
HTML renderer are active.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdstream.constants import (
    DEFAULT_AUTOLINK,
    DEFAULT_FOOTNOTE_DEFINITIONS,
    DEFAULT_RAW_TEXT_LINKS_AS_PLAIN,
    DEFAULT_RENDER_IMAGES,
    DEFAULT_TABLE_SUPPORT,
)
from mdstream.options.base import BaseRendererOptions


# src/mdstream/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering an event stream to HTML.

    The defaults give the plain renderer: headers, code, emphasis, strong
    and links are rendered and every other tag kind is ignored.

    Parameters
    ----------
    autolink : bool, default False
        Scan text events for bare URLs and wrap them in anchors.
    raw_text_links_as_plain : bool, default False
        Degrade links to plain text: the link text is followed by
        ``": "`` and the destination instead of being wrapped in ``<a>``.
    table_support : bool, default False
        Render Table, TableHead, TableRow and TableCell tags.
    render_images : bool, default False
        Render Image tags as ``<img>`` with the nested content flattened
        into the alt attribute.
    footnote_definitions : bool, default False
        Render FootnoteDefinition tags as numbered ``<div>`` blocks.

    """

    autolink: bool = field(
        default=DEFAULT_AUTOLINK,
        metadata={"help": "Wrap bare URLs in text with anchors", "importance": "core"},
    )
    raw_text_links_as_plain: bool = field(
        default=DEFAULT_RAW_TEXT_LINKS_AS_PLAIN,
        metadata={
            "help": "Render links as 'text: destination' instead of anchors",
            "importance": "advanced",
        },
    )
    table_support: bool = field(
        default=DEFAULT_TABLE_SUPPORT,
        metadata={"help": "Render table tags", "importance": "core"},
    )
    render_images: bool = field(
        default=DEFAULT_RENDER_IMAGES,
        metadata={"help": "Render image tags with flattened alt text", "importance": "core"},
    )
    footnote_definitions: bool = field(
        default=DEFAULT_FOOTNOTE_DEFINITIONS,
        metadata={"help": "Render footnote definition blocks", "importance": "core"},
    )
