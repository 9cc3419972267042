#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdstream/parsers/__init__.py
"""Adapters that turn source text into event streams."""

from mdstream.parsers.markdown import MarkdownEventParser, markdown_to_events

__all__ = ["MarkdownEventParser", "markdown_to_events"]
