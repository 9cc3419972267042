#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/links.py
"""Bare URL detection for the autolink layer.

URL detection is delegated to ``linkify-it-py``. Only scheme-qualified
links count as URLs: fuzzy (scheme-less) links, e-mail addresses and
protocol-relative ``//host`` links are not reported.

"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from mdstream.constants import AUTOLINK_EXCLUDED_SCHEMAS, DEPS_AUTOLINK, LINKIFY_OPTIONS
from mdstream.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from linkify_it import LinkifyIt

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
@requires_dependencies("autolink", DEPS_AUTOLINK)
def get_link_finder() -> LinkifyIt:
    """Return the shared, lazily built linkify-it matcher.

    Returns
    -------
    LinkifyIt
        Matcher configured with fuzzy matching disabled

    Raises
    ------
    DependencyError
        If linkify-it-py is not installed

    """
    from linkify_it import LinkifyIt

    logger.debug("Building linkify-it matcher with options %s", LINKIFY_OPTIONS)
    return LinkifyIt(options=dict(LINKIFY_OPTIONS))


def find_urls(text: str) -> list[tuple[int, int]]:
    """Find URL-shaped substrings in ``text``.

    Parameters
    ----------
    text : str
        Text to scan; typically already HTML-escaped

    Returns
    -------
    list of tuple[int, int]
        ``(start, end)`` index ranges into ``text`` in ascending start
        order; empty when nothing matches

    Examples
    --------
        >>> find_urls("see http://example.com now")
        [(4, 22)]
        >>> find_urls("mail me@example.com")
        []

    """
    if not text:
        return []

    matches = get_link_finder().match(text) or []
    return [
        (match.index, match.last_index)
        for match in matches
        if match.schema not in AUTOLINK_EXCLUDED_SCHEMAS and match.schema
    ]
