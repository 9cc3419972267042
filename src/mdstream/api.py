#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/api.py
"""Public convenience functions for rendering event streams.

These functions build a renderer for a single call. Create an
:class:`~mdstream.renderers.html.HtmlRenderer` directly to reuse options
across many documents.

"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from mdstream.events import Event
from mdstream.options.html import HtmlRendererOptions
from mdstream.options.markdown import MarkdownParserOptions
from mdstream.parsers.markdown import markdown_to_events
from mdstream.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)


def render(events: Iterable[Event], options: HtmlRendererOptions | None = None) -> str:
    """Render an event stream to HTML.

    Parameters
    ----------
    events : iterable of Event
        Balanced event stream; consumed exactly once, in order
    options : HtmlRendererOptions or None, default = None
        Renderer configuration

    Returns
    -------
    str
        HTML text

    Examples
    --------
        >>> from mdstream import render
        >>> from mdstream.events import End, Link, Start, Text
        >>> link = Link("http://x.test")
        >>> render([Start(link), Text("click"), End(link)])
        '<a href="http://x.test">click</a>'

    """
    return HtmlRenderer(options).render(events)


def push_html(buffer: list[str], events: Iterable[Event], options: HtmlRendererOptions | None = None) -> None:
    """Render an event stream and append the HTML to ``buffer``.

    Parameters
    ----------
    buffer : list of str
        Caller-owned list of output fragments
    events : iterable of Event
        Balanced event stream
    options : HtmlRendererOptions or None, default = None
        Renderer configuration

    """
    HtmlRenderer(options).push(buffer, events)


def raw_text(
    events: Iterator[Event],
    numbers: dict[str, int] | None = None,
) -> str:
    """Flatten the events up to the next unmatched End into escaped text.

    ``events`` must be positioned just after a Start event. The matching
    End is consumed; later events stay in the iterator.

    Parameters
    ----------
    events : iterator of Event
        Shared event iterator
    numbers : dict or None, default = None
        Footnote number table to share with an enclosing render

    Returns
    -------
    str
        Escaped text with markup wrappers removed

    """
    return HtmlRenderer().render_raw_text(events, numbers)


def markdown_to_html(
    text: str,
    options: HtmlRendererOptions | None = None,
    parser_options: MarkdownParserOptions | None = None,
) -> str:
    """Parse markdown text with mistune and render it to HTML.

    Parameters
    ----------
    text : str
        Markdown source
    options : HtmlRendererOptions or None, default = None
        Renderer configuration
    parser_options : MarkdownParserOptions or None, default = None
        Markdown extensions to enable

    Returns
    -------
    str
        HTML text

    Raises
    ------
    DependencyError
        If mistune is not installed

    """
    logger.debug(f"Converting {len(text)} characters of markdown")
    return render(markdown_to_events(text, parser_options), options)
