#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdstream/renderers/__init__.py
"""Renderers for markdown event streams.

Available renderers:
- HtmlRenderer: Render to HTML for the ``<big>``/``<tt>`` display widget

Examples
--------
    >>> from mdstream.events import Emphasis, End, Start, Text
    >>> from mdstream.renderers import HtmlRenderer
    >>> HtmlRenderer().render([Start(Emphasis()), Text("a < b"), End(Emphasis())])
    '<i>a &lt; b</i>'

"""

from mdstream.renderers.base import BaseRenderer
from mdstream.renderers.html import HtmlRenderer, TableState

__all__ = ["BaseRenderer", "HtmlRenderer", "TableState"]
