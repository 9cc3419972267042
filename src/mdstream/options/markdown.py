#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the markdown event adapter."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdstream.constants import DEFAULT_PARSE_FOOTNOTES, DEFAULT_PARSE_STRIKETHROUGH, DEFAULT_PARSE_TABLES
from mdstream.options.base import BaseParserOptions


# src/mdstream/options/markdown.py
@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for turning markdown text into events.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
