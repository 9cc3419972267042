#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mdstream - render markdown event streams to HTML.

mdstream consumes the flat sequence of structural events produced by a
markdown parser (Start/End tag markers, text runs, raw HTML, line breaks
and footnote references) and emits a single HTML string in one pass.

The markup targets a simple display widget rather than a browser:
headers render as ``<big>``, code as ``<tt>``, emphasis and strong as
``<i>`` and ``<b>``.

Key Features
------------
- Single-pass, pull-based rendering with no lookahead
- Footnote numbering in order of first reference
- Optional autolinking of bare URLs (via linkify-it-py)
- Optional table, image and footnote-definition rendering
- Raw-text mode for flattening nested markup into plain text
- A mistune-based adapter for rendering markdown text directly

Examples
--------
    >>> from mdstream import render
    >>> from mdstream.events import End, Header, Start, Text
    >>> render([Text("x"), Start(Header(1)), Text("Title"), End(Header(1))])
    'x\\n<big>Title</big>'

"""

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdstream requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mdstream.api import markdown_to_html, push_html, raw_text, render
from mdstream.exceptions import (
    DependencyError,
    InvalidOptionsError,
    MdStreamError,
    RenderingError,
    UnbalancedEventsError,
    ValidationError,
)
from mdstream.options import HtmlRendererOptions, MarkdownParserOptions
from mdstream.parsers.markdown import MarkdownEventParser, markdown_to_events
from mdstream.renderers.html import HtmlRenderer

__all__ = [
    "__version__",
    "render",
    "push_html",
    "raw_text",
    "markdown_to_html",
    "markdown_to_events",
    "HtmlRenderer",
    "MarkdownEventParser",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "MdStreamError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "UnbalancedEventsError",
    "DependencyError",
]
