#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/__init__.py
"""Utility modules for the mdstream package.

This package contains the escaping contracts, URL detection and
dependency-checking helpers used by the renderer.
"""

from mdstream.utils.escape import escape_href, escape_html
from mdstream.utils.links import find_urls

__all__ = [
    "escape_href",
    "escape_html",
    "find_urls",
]
