"""Content conversion for docextract (link rewriting, HTML to Markdown)."""

from .links import LINKS_TO_CONVERT_SELECTOR, absolutize_links
from .markdown import HtmlToMarkdown
from .protocols import DocumentFilter, MarkdownSerializer

__all__ = [
    # Protocols
    "DocumentFilter",
    "MarkdownSerializer",
    # Implementations
    "HtmlToMarkdown",
    "absolutize_links",
    "LINKS_TO_CONVERT_SELECTOR",
]
