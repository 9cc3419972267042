#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the mdstream renderer and markdown adapter.

Options are frozen dataclasses: build a modified copy with
``create_updated()`` instead of mutating an instance.
"""

from __future__ import annotations

from mdstream.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdstream.options.html import HtmlRendererOptions
from mdstream.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
]
