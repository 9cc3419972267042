#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/escape.py
"""HTML text and attribute escaping utilities.

Two escaping contracts are used by the renderer:

- ``escape_html`` for text content and quoted attribute values that hold
  text (titles, footnote ids)
- ``escape_href`` for URLs placed in ``href``/``src`` attributes

"""

from __future__ import annotations

import html
from urllib.parse import quote

from mdstream.constants import HREF_SAFE_CHARS


def escape_html(text: str, escape_quotes: bool = False) -> str:
    """Escape HTML special characters in text.

    Parameters
    ----------
    text : str
        Text to escape
    escape_quotes : bool, default False
        Also escape double quotes to ``&quot;``. Single quotes are never
        touched.

    Returns
    -------
    str
        Text with ``&``, ``<`` and ``>`` (and optionally ``"``) replaced by
        entities

    Examples
    --------
        >>> escape_html('<b>"x" & y</b>')
        '&lt;b&gt;"x" &amp; y&lt;/b&gt;'
        >>> escape_html('"x"', escape_quotes=True)
        '&quot;x&quot;'

    """
    if not text:
        return text

    escaped = html.escape(text, quote=False)
    if escape_quotes:
        escaped = escaped.replace('"', "&quot;")
    return escaped


def escape_href(url: str) -> str:
    """Escape a URL for use inside a double-quoted href attribute.

    ASCII letters, digits and ``-_.~!#$%()*+,/:;=?@`` pass through.
    ``&`` becomes ``&amp;`` and ``'`` becomes ``&#x27;``. Everything else,
    including non-ASCII characters, is percent-encoded byte by byte from
    its UTF-8 form. Existing percent escapes are left alone.

    Parameters
    ----------
    url : str
        URL to escape

    Returns
    -------
    str
        URL safe to place between double quotes in an attribute

    Examples
    --------
        >>> escape_href("http://example.com/a b?x=1&y=2")
        'http://example.com/a%20b?x=1&amp;y=2'
        >>> escape_href('javascript:alert("x")')
        'javascript:alert(%22x%22)'

    """
    if not url:
        return url

    encoded = quote(url, safe=HREF_SAFE_CHARS, encoding="utf-8", errors="strict")
    return encoded.replace("&", "&amp;").replace("'", "&#x27;")
