#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_html_optional_layers.py
"""Unit tests for the optional HtmlRenderer layers.

Tests cover:
- Autolinking of bare URLs in text
- Table rendering state
- Images with flattened alt text
- Footnote definitions
- Balance checking

"""

import pytest

from mdstream.events import (
    Emphasis,
    End,
    FootnoteDefinition,
    FootnoteReference,
    Image,
    Link,
    Start,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Text,
)
from mdstream.exceptions import RenderingError, UnbalancedEventsError
from mdstream.options import HtmlRendererOptions
from mdstream.renderers import html as html_module
from mdstream.renderers.html import HtmlRenderer, TableState


def wrap(tag, *inner):
    """Build Start(tag), *inner, End(tag)."""
    return [Start(tag), *inner, End(tag)]


def cells(*texts):
    """Build a run of table cells holding the given texts."""
    events = []
    for text in texts:
        events.extend(wrap(TableCell(), Text(text)))
    return events


@pytest.fixture
def autolink_renderer() -> HtmlRenderer:
    return HtmlRenderer(HtmlRendererOptions(autolink=True))


@pytest.mark.unit
class TestAutolink:
    """Tests for the autolink layer."""

    def test_single_url(self, autolink_renderer):
        """Test a bare URL is wrapped once, surrounding text untouched."""
        result = autolink_renderer.render([Text("see http://example.com now")])
        assert result == 'see <a href="http://example.com">http://example.com</a> now'
        assert result.count("<a ") == 1

    def test_multiple_urls(self, autolink_renderer):
        """Test every URL in one fragment is wrapped."""
        result = autolink_renderer.render([Text("a http://one.test b https://two.test")])
        assert '<a href="http://one.test">http://one.test</a>' in result
        assert '<a href="https://two.test">https://two.test</a>' in result
        assert result.startswith("a ")

    def test_text_without_urls(self, autolink_renderer):
        """Test text without URLs is only escaped."""
        assert autolink_renderer.render([Text("1 < 2")]) == "1 &lt; 2"

    def test_email_is_not_a_url(self, autolink_renderer):
        """Test e-mail addresses are not linked."""
        assert "<a" not in autolink_renderer.render([Text("write to me@example.com")])

    def test_scheme_less_domain_is_not_a_url(self, autolink_renderer):
        """Test fuzzy links without a scheme are not linked."""
        assert "<a" not in autolink_renderer.render([Text("visit example.com today")])

    def test_disabled_by_default(self, renderer):
        """Test the plain renderer leaves URLs alone."""
        assert renderer.render([Text("http://example.com")]) == "http://example.com"

    def test_link_tag_text_is_also_scanned(self, autolink_renderer):
        """Test text inside a Link tag goes through the same text handler."""
        result = autolink_renderer.render(wrap(Link("http://x.test"), Text("plain")))
        assert result == '<a href="http://x.test">plain</a>'

    def test_overlapping_ranges_first_wins(self, autolink_renderer, monkeypatch):
        """Test a range starting inside the previous one is skipped."""
        monkeypatch.setattr(html_module, "find_urls", lambda text: [(0, 4), (2, 6), (4, 8)])
        result = autolink_renderer.render([Text("abcdefgh")])
        assert result == '<a href="abcd">abcd</a><a href="efgh">efgh</a>'

    def test_ranges_processed_in_start_order(self, autolink_renderer, monkeypatch):
        """Test unordered ranges are applied by ascending start."""
        monkeypatch.setattr(html_module, "find_urls", lambda text: [(6, 8), (0, 2)])
        result = autolink_renderer.render([Text("ab cd ef")])
        assert result == '<a href="ab">ab</a> cd <a href="ef">ef</a>'

    def test_url_href_uses_href_escaping(self, autolink_renderer, monkeypatch):
        """Test the href is escaped with the href contract, the text is not re-escaped."""
        monkeypatch.setattr(html_module, "find_urls", lambda text: [(0, len(text))])
        result = autolink_renderer.render([Text("x'y")])
        assert result == '<a href="x&#x27;y">x\'y</a>'


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    @pytest.fixture
    def table_events(self):
        table = Table(("left", None, "right"))
        return [
            Start(table),
            *wrap(TableHead(), *cells("a", "b", "c")),
            *wrap(TableRow(), *cells("d", "e", "f")),
            *wrap(TableRow(), *cells("g", "h", "i")),
            End(table),
        ]

    def test_full_table(self, table_events):
        """Test head cells are th, body cells td, with alignment styles."""
        renderer = HtmlRenderer(HtmlRendererOptions(table_support=True))
        assert renderer.render(table_events) == (
            "<table><thead><tr>"
            '<th style="text-align: left">a</th><th>b</th><th style="text-align: right">c</th>'
            "</tr></thead><tbody>\n"
            '<tr><td style="text-align: left">d</td><td>e</td><td style="text-align: right">f</td></tr>\n'
            '<tr><td style="text-align: left">g</td><td>h</td><td style="text-align: right">i</td></tr>\n'
            "</tbody></table>\n"
        )

    def test_cell_tag_follows_section(self):
        """Test cells are th in the head and td in the body."""
        state = TableState()
        assert state.cell_tag == "th"
        state.section = "body"
        assert state.cell_tag == "td"
        state.reset((None,))
        assert state.cell_tag == "th"

    def test_tables_ignored_without_support(self, renderer, table_events):
        """Test table tags are no-ops in the plain configuration."""
        assert renderer.render(table_events) == "abcdefghi"

    def test_extra_cells_have_no_alignment(self):
        """Test cells beyond the captured alignments are unstyled."""
        renderer = HtmlRenderer(HtmlRendererOptions(table_support=True))
        table = Table(("center",))
        events = [Start(table), *wrap(TableHead(), *cells("a", "b")), End(table)]
        result = renderer.render(events)
        assert '<th style="text-align: center">a</th><th>b</th>' in result

    def test_state_resets_between_tables(self):
        """Test a second table starts in the head section."""
        renderer = HtmlRenderer(HtmlRendererOptions(table_support=True))
        first = Table((None,))
        second = Table(("right",))
        events = [
            Start(first),
            *wrap(TableHead(), *cells("a")),
            *wrap(TableRow(), *cells("b")),
            End(first),
            Start(second),
            *wrap(TableHead(), *cells("c")),
            End(second),
        ]
        result = renderer.render(events)
        assert '<th style="text-align: right">c</th>' in result


@pytest.mark.unit
class TestImages:
    """Tests for image rendering through raw-text mode."""

    @pytest.fixture
    def image_renderer(self):
        return HtmlRenderer(HtmlRendererOptions(render_images=True))

    def test_image_with_title(self, image_renderer):
        """Test image alt text is flattened and the title is kept."""
        image = Image("/img.png", "T")
        events = [Start(image), Text("alt "), *wrap(Emphasis(), Text("x")), End(image), Text("after")]
        assert image_renderer.render(events) == '<img src="/img.png" alt="alt x" title="T" />after'

    def test_image_without_title(self, image_renderer):
        """Test the title attribute is omitted when empty."""
        image = Image("a b.png")
        result = image_renderer.render(wrap(image, Text("pic")))
        assert result == '<img src="a%20b.png" alt="pic" />'

    def test_image_alt_footnote(self, image_renderer):
        """Test footnote references inside alt text become bracketed numbers."""
        image = Image("/i.png")
        events = [FootnoteReference("n"), *wrap(image, Text("see"), FootnoteReference("n"))]
        result = image_renderer.render(events)
        assert result.endswith('<img src="/i.png" alt="see[1]" />')

    def test_images_ignored_by_default(self, renderer):
        """Test image tags are no-ops in the plain configuration."""
        assert renderer.render(wrap(Image("/i.png"), Text("alt"))) == "alt"


@pytest.mark.unit
class TestFootnoteDefinitions:
    """Tests for footnote definition blocks."""

    @pytest.fixture
    def footnote_renderer(self):
        return HtmlRenderer(HtmlRendererOptions(footnote_definitions=True))

    def test_definition_after_reference(self, footnote_renderer):
        """Test a definition reuses the number of its reference."""
        events = [Text("x"), FootnoteReference("n"), *wrap(FootnoteDefinition("n"), Text("body"))]
        assert footnote_renderer.render(events) == (
            'x<sup class="footnote-reference"><a href="#n">1</a></sup>\n'
            '<div class="footnote-definition" id="n"><sup class="footnote-definition-label">1</sup>'
            "body</div>\n"
        )

    def test_definition_before_reference(self, footnote_renderer):
        """Test a definition seen first claims the next number."""
        events = [
            *wrap(FootnoteDefinition("z"), Text("zed")),
            FootnoteReference("a"),
            FootnoteReference("z"),
        ]
        result = footnote_renderer.render(events)
        assert '<sup class="footnote-definition-label">1</sup>' in result
        assert '<a href="#a">2</a>' in result
        assert '<a href="#z">1</a>' in result


@pytest.mark.unit
class TestBalanceCheck:
    """Tests for the opt-in balance check."""

    @pytest.fixture
    def checking_renderer(self):
        return HtmlRenderer(HtmlRendererOptions(check_balance=True, render_images=True))

    def test_balanced_stream_unchanged(self, checking_renderer, renderer):
        """Test balanced input renders exactly as without checking."""
        events = [*wrap(Strong(), Text("a"), *wrap(Emphasis(), Text("b"))), Text("c")]
        assert checking_renderer.render(list(events)) == renderer.render(list(events))

    def test_mismatched_end(self, checking_renderer):
        """Test an End of the wrong kind is reported."""
        with pytest.raises(UnbalancedEventsError) as exc_info:
            checking_renderer.render([Start(Emphasis()), End(Strong())])
        assert exc_info.value.event == End(Strong())
        assert exc_info.value.open_tags == [Emphasis()]

    def test_end_without_start(self, checking_renderer):
        """Test a stray End is reported."""
        with pytest.raises(UnbalancedEventsError):
            checking_renderer.render([Text("x"), End(Emphasis())])

    def test_unclosed_start(self, checking_renderer):
        """Test tags left open at the end of the stream are reported."""
        with pytest.raises(RenderingError) as exc_info:
            checking_renderer.render([Start(Strong()), Text("x")])
        assert exc_info.value.rendering_stage == "balance-check"

    def test_payload_differences_allowed(self, checking_renderer):
        """Test only the tag kind has to match."""
        result = checking_renderer.render([Start(Link("a")), Text("x"), End(Link("b"))])
        assert result == '<a href="a">x</a>'

    def test_image_subtree_checked(self, checking_renderer):
        """Test nesting inside image alt text is checked as well."""
        image = Image("/i.png")
        with pytest.raises(UnbalancedEventsError):
            checking_renderer.render([Start(image), Start(Emphasis()), End(Strong()), End(image)])

    def test_image_balanced(self, checking_renderer):
        """Test a balanced image passes the check."""
        image = Image("/i.png")
        assert checking_renderer.render(wrap(image, *wrap(Emphasis(), Text("a")))) == '<img src="/i.png" alt="a" />'

    def test_unbalanced_not_checked_by_default(self, renderer):
        """Test unbalanced input is not validated without check_balance."""
        assert renderer.render([Start(Strong()), Text("x")]) == "<b>x"
