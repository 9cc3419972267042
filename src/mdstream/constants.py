#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdstream library.

This module centralizes the literal markup strings, default option values
and dependency specifications used across mdstream.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Renderer Defaults - Default values for renderer options
3. Markup - Literal HTML fragments emitted by the renderer
4. Autolinking - URL detection settings
5. Dependency Specifications
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "center", "right"]
TableSection = Literal["head", "body"]

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_AUTOLINK = False
DEFAULT_RAW_TEXT_LINKS_AS_PLAIN = False
DEFAULT_TABLE_SUPPORT = False
DEFAULT_RENDER_IMAGES = False
DEFAULT_FOOTNOTE_DEFINITIONS = False
DEFAULT_CHECK_BALANCE = False

# Markdown adapter defaults
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_STRIKETHROUGH = True

# =============================================================================
# Markup
# =============================================================================

# The target display widget understands <big>/<tt>/<i>/<b>, not the
# conventional h1-h6/pre/em/strong set.
HEADER_OPEN = "<big>"
HEADER_CLOSE = "</big>"
CODE_BLOCK_OPEN = "<tt>"
CODE_BLOCK_CLOSE = "</tt>\n"
EMPHASIS_OPEN = "<i>"
EMPHASIS_CLOSE = "</i>"
STRONG_OPEN = "<b>"
STRONG_CLOSE = "</b>"
CODE_OPEN = "<tt>"
CODE_CLOSE = "</tt>"
LINK_CLOSE = "</a>"
PLAIN_LINK_SEPARATOR = ": "

SOFT_BREAK = "\n"
HARD_BREAK = "<br />\n"
RAW_TEXT_BREAK = " "

FOOTNOTE_REFERENCE_OPEN = '<sup class="footnote-reference"><a href="#'
FOOTNOTE_REFERENCE_CLOSE = "</a></sup>"
FOOTNOTE_DEFINITION_OPEN = '<div class="footnote-definition" id="'
FOOTNOTE_DEFINITION_LABEL = '"><sup class="footnote-definition-label">'
FOOTNOTE_DEFINITION_CLOSE = "</div>\n"

TABLE_OPEN = "<table>"
TABLE_CLOSE = "</tbody></table>\n"
TABLE_HEAD_OPEN = "<thead><tr>"
TABLE_HEAD_CLOSE = "</tr></thead><tbody>\n"
TABLE_ROW_OPEN = "<tr>"
TABLE_ROW_CLOSE = "</tr>\n"

# =============================================================================
# Autolinking
# =============================================================================

# linkify-it schemas that do not count as URLs: e-mail addresses and
# protocol-relative links.
AUTOLINK_EXCLUDED_SCHEMAS = frozenset({"mailto:", "//"})

LINKIFY_OPTIONS = {
    "fuzzy_link": False,
    "fuzzy_email": False,
    "fuzzy_ip": False,
}

# Characters that pass through escape_href unchanged in addition to ASCII
# letters, digits and "_.-~". "&" and "'" are kept here so that quote()
# leaves them for entity escaping afterwards.
HREF_SAFE_CHARS = "!#$%&'()*+,/:;=?@"

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each DEPS_* value is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_AUTOLINK = [("linkify-it-py", "linkify_it", ">=2.0.0")]
