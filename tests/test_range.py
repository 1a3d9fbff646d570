"""Tests for document ranges."""

import pytest
from bs4 import BeautifulSoup

from docextract.dom import DomRange


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestDomRangeBoundaries:
    """Tests for setting range boundaries."""

    def test_new_range_is_collapsed(self):
        """Test that a new range is empty."""
        soup = _soup("<p>text</p>")
        assert DomRange(soup).collapsed is True

    def test_before_and_after_offsets(self):
        """Test boundary offsets around an anchor."""
        soup = _soup("<div><h1>T</h1><p>A</p><footer>F</footer></div>")
        rng = DomRange(soup)

        rng.set_start_after(soup.h1)
        rng.set_end_before(soup.footer)

        assert rng.start_container is soup.div
        assert rng.start_offset == 1
        assert rng.end_container is soup.div
        assert rng.end_offset == 2
        assert rng.collapsed is False

    def test_inverted_boundaries_collapse(self):
        """Test that a start after the end yields an empty range."""
        soup = _soup("<div><h1>T</h1><p>A</p><footer>F</footer></div>")
        rng = DomRange(soup)

        rng.set_start_after(soup.footer)
        rng.set_end_before(soup.h1)

        assert rng.collapsed is True

    def test_offset_out_of_bounds(self):
        """Test that offsets beyond the node length are rejected."""
        soup = _soup("<p>text</p>")
        rng = DomRange(soup)

        with pytest.raises(IndexError):
            rng.set_start(soup.p, 5)

    def test_detached_anchor_rejected(self):
        """Test that a node without parent cannot anchor a boundary."""
        soup = _soup("<p>text</p>")
        rng = DomRange(soup)

        with pytest.raises(ValueError):
            rng.set_start_before(soup)


class TestDomRangeClone:
    """Tests for DomRange.clone_contents."""

    def test_clone_between_siblings(self):
        """Test cloning the nodes between two siblings."""
        soup = _soup("<div><h1>T</h1><p>A</p><p>B</p><footer>F</footer></div>")
        rng = DomRange(soup)
        rng.set_start_after(soup.h1)
        rng.set_end_before(soup.footer)

        fragment = rng.clone_contents()

        assert str(fragment) == "<p>A</p><p>B</p>"

    def test_clone_leaves_document_untouched(self):
        """Test that cloning does not mutate the document."""
        html = "<div><h1>T</h1><p>A</p><footer>F</footer></div>"
        soup = _soup(html)
        rng = DomRange(soup)
        rng.set_start_after(soup.h1)
        rng.set_end_before(soup.footer)

        rng.clone_contents()

        assert str(soup) == html

    def test_clone_is_independent(self):
        """Test that the clone does not share nodes with the document."""
        soup = _soup("<div><h1>T</h1><p>A</p><footer>F</footer></div>")
        rng = DomRange(soup)
        rng.set_start_after(soup.h1)
        rng.set_end_before(soup.footer)

        fragment = rng.clone_contents()
        soup.p.string = "changed"

        assert str(fragment) == "<p>A</p>"

    def test_clone_inclusive_edges(self):
        """Test that before/after edges include the anchors."""
        soup = _soup("<div><h1>T</h1><p>A</p><footer>F</footer></div>")
        rng = DomRange(soup)
        rng.set_start_before(soup.h1)
        rng.set_end_after(soup.p)

        assert str(rng.clone_contents()) == "<h1>T</h1><p>A</p>"

    def test_clone_partially_contained_elements(self):
        """Test cloning across element boundaries."""
        soup = _soup("<div><p>one<b>two</b></p><p>three<i>four</i></p></div>")
        rng = DomRange(soup)
        rng.set_start_before(soup.b)
        rng.set_end_after(soup.i)

        fragment = rng.clone_contents()

        assert str(fragment) == "<p><b>two</b></p><p>three<i>four</i></p>"

    def test_clone_across_depths(self):
        """Test a range starting inside a nested element and ending outside it."""
        soup = _soup("<div><section><h2>Intro</h2><p>A</p></section><p>B</p><hr/></div>")
        rng = DomRange(soup)
        rng.set_start_after(soup.h2)
        rng.set_end_before(soup.hr)

        fragment = rng.clone_contents()

        assert str(fragment) == "<section><p>A</p></section><p>B</p>"

    def test_clone_text_offsets(self):
        """Test cloning part of a text node."""
        soup = _soup("<p>hello</p>")
        text = soup.p.contents[0]
        rng = DomRange(soup)
        rng.set_start(text, 1)
        rng.set_end(text, 3)

        assert str(rng.clone_contents()) == "el"

    def test_clone_collapsed_range_is_empty(self):
        """Test that an empty range clones to an empty fragment."""
        soup = _soup("<div><h1>T</h1><footer>F</footer></div>")
        rng = DomRange(soup)
        rng.set_start_after(soup.footer)
        rng.set_end_before(soup.h1)

        assert str(rng.clone_contents()) == ""


class TestDomRangeDelete:
    """Tests for DomRange.delete_contents."""

    def test_delete_between_siblings(self):
        """Test deleting the nodes between two siblings."""
        soup = _soup("<div><h1>T</h1><p>A</p><p>B</p><footer>F</footer></div>")
        rng = DomRange(soup)
        rng.set_start_after(soup.h1)
        rng.set_end_before(soup.footer)

        rng.delete_contents()

        assert str(soup) == "<div><h1>T</h1><footer>F</footer></div>"
        assert rng.collapsed is True

    def test_delete_partially_contained_elements(self):
        """Test that partially contained elements keep their outside children."""
        soup = _soup("<div><p>one<b>two</b></p><p>three<i>four</i></p><p>five</p></div>")
        rng = DomRange(soup)
        rng.set_start_before(soup.b)
        rng.set_end_after(soup.i)

        rng.delete_contents()

        assert str(soup) == "<div><p>one</p><p></p><p>five</p></div>"

    def test_delete_text_offsets(self):
        """Test deleting part of a text node."""
        soup = _soup("<p>hello</p>")
        text = soup.p.contents[0]
        rng = DomRange(soup)
        rng.set_start(text, 1)
        rng.set_end(text, 3)

        rng.delete_contents()

        assert str(soup) == "<p>hlo</p>"
        assert rng.collapsed is True
        assert rng.start_container is soup.p.contents[0]

    def test_delete_collapsed_range_is_noop(self):
        """Test that deleting an empty range changes nothing."""
        html = "<div><h1>T</h1><footer>F</footer></div>"
        soup = _soup(html)
        rng = DomRange(soup)
        rng.set_start_after(soup.footer)
        rng.set_end_before(soup.h1)

        rng.delete_contents()

        assert str(soup) == html
