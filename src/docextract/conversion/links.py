"""Conversion of relative hyperlinks to absolute URLs."""

from urllib.parse import urljoin

from bs4 import BeautifulSoup

# Hyperlinks, except same-page anchors
LINKS_TO_CONVERT_SELECTOR = 'a[href]:not([href^="#"])'


def absolutize_links(document: BeautifulSoup, base_url: str) -> None:
    """
    Convert relative link targets to absolute URLs, in place.

    Args:
        document: Parsed document
        base_url: URL the document was retrieved from
    """
    for link in document.select(LINKS_TO_CONVERT_SELECTOR):
        link["href"] = urljoin(base_url, link["href"])
