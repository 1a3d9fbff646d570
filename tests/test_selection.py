"""Tests for range resolution and selection rules."""

import pytest
from bs4 import BeautifulSoup

from docextract.dom import resolve_range
from docextract.errors import BoundaryNotFoundError
from docextract.models import QueryRule, RangeRule, parse_rule
from docextract.selection import remove_matches, resolve_for_deletion, resolve_for_extraction

PAGE = """<html><body>
<h1>Terms</h1>
<p class="intro">Intro</p>
<h2>First</h2>
<p class="body">One</p>
<h2>Second</h2>
<p class="body">Two</p>
<footer>Footer</footer>
</body></html>"""


@pytest.fixture
def soup():
    """Parsed sample page."""
    return BeautifulSoup(PAGE, "html.parser")


class TestResolveRange:
    """Tests for resolve_range."""

    def test_missing_start_anchor(self, soup):
        """Test that a start anchor without match names the start boundary."""
        rule = parse_rule({"startAfter": "#missing", "endBefore": "footer"})

        with pytest.raises(BoundaryNotFoundError) as exc_info:
            resolve_range(soup, rule)

        assert exc_info.value.boundary == "start"
        assert exc_info.value.rule is rule
        assert "#missing" in str(exc_info.value)

    def test_missing_end_anchor(self, soup):
        """Test that an end anchor without match names the end boundary."""
        rule = parse_rule({"startAfter": "h1", "endBefore": "#missing"})

        with pytest.raises(BoundaryNotFoundError) as exc_info:
            resolve_range(soup, rule)

        assert exc_info.value.boundary == "end"
        assert '"end"' in str(exc_info.value)

    def test_first_match_is_anchor(self, soup):
        """Test that the first match in document order is the anchor."""
        rule = parse_rule({"startAfter": "h2", "endBefore": "footer"})

        fragment = resolve_range(soup, rule).clone_contents()

        assert "One" in fragment.get_text()
        assert "First" not in fragment.get_text()


class TestResolveForExtraction:
    """Tests for resolve_for_extraction."""

    def test_query_returns_live_tags(self, soup):
        """Test that query matches are the document's own tags."""
        fragments = resolve_for_extraction(soup, QueryRule(selector="p.body"))

        assert len(fragments) == 2
        assert fragments[0] is soup.select("p.body")[0]
        assert [f.get_text() for f in fragments] == ["One", "Two"]

    def test_query_without_match(self, soup):
        """Test that a query without match yields nothing."""
        assert resolve_for_extraction(soup, QueryRule(selector="article")) == []

    def test_range_returns_clone(self, soup):
        """Test that range extraction clones the span."""
        rule = parse_rule({"startAfter": "h1", "endBefore": "h2"})

        fragments = resolve_for_extraction(soup, rule)

        assert len(fragments) == 1
        assert fragments[0].get_text(strip=True) == "Intro"
        assert soup.select_one("p.intro") is not None

    def test_empty_range_returns_empty_fragment(self, soup):
        """Test that an inverted range yields one empty fragment."""
        rule = parse_rule({"startAfter": "footer", "endBefore": "h1"})

        fragments = resolve_for_extraction(soup, rule)

        assert len(fragments) == 1
        assert str(fragments[0]) == ""


class TestRemoval:
    """Tests for resolve_for_deletion and remove_matches."""

    def test_resolve_query_targets(self, soup):
        """Test that query targets are the matching tags."""
        targets = resolve_for_deletion(soup, QueryRule(selector="h2"))
        assert [t.get_text() for t in targets] == ["First", "Second"]

    def test_resolve_range_target(self, soup):
        """Test that a range rule resolves to one range."""
        targets = resolve_for_deletion(soup, RangeRule.model_validate({"startAfter": "h1", "endBefore": "footer"}))
        assert len(targets) == 1

    def test_remove_query_matches(self, soup):
        """Test removing every query match."""
        removed = remove_matches(soup, QueryRule(selector="p.body"))

        assert removed == 2
        assert soup.select("p.body") == []
        assert soup.select_one("p.intro") is not None

    def test_remove_nested_matches(self, soup):
        """Test that nested matches are removed without error."""
        soup = BeautifulSoup("<div class='x'><div class='x'>inner</div></div><p>keep</p>", "html.parser")

        remove_matches(soup, QueryRule(selector=".x"))

        assert str(soup) == "<p>keep</p>"

    def test_remove_range(self, soup):
        """Test removing a range."""
        remove_matches(soup, parse_rule({"startAfter": "h1", "endBefore": "footer"}))

        assert soup.select("p") == []
        assert soup.h1 is not None
        assert soup.footer is not None
