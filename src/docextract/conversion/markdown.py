"""HTML to Markdown serialization."""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

import html2text
from bs4 import BeautifulSoup, Tag

from ..models.config import MarkdownConfig

logger = logging.getLogger(__name__)


class _GfmHTML2Text(html2text.HTML2Text):
    """html2text with GitHub task-list markers for checkbox inputs."""

    task_lists = True

    def handle_tag(self, tag: str, attrs: dict[str, Optional[str]], start: bool) -> None:
        super().handle_tag(tag, attrs, start)
        if self.task_lists and start and tag == "input" and (attrs.get("type") or "").lower() == "checkbox":
            self.o("[x]" if "checked" in attrs else "[ ]")
            # Single separator whether or not the label text starts with whitespace
            self.space = True


class HtmlToMarkdown:
    """
    Converts HTML fragments to clean Markdown.

    Uses html2text with settings tuned for stable, diffable output:
    no wrapping, inline links, tables, ``~~`` strikethrough and
    ``[x]``/``[ ]`` task-list markers.

    Example:
        converter = HtmlToMarkdown()
        markdown = converter.serialize(soup.select_one("main"))
    """

    def __init__(
        self,
        body_width: int = 0,
        inline_links: bool = True,
        protect_links: bool = False,
        ignore_images: bool = False,
        unicode_snob: bool = True,
        escape_snob: bool = False,
        mark_code: bool = True,
        task_lists: bool = True,
    ):
        """
        Initialize the Markdown converter.

        Args:
            body_width: Max line width (0 = no wrapping)
            inline_links: Use inline [text](url) vs reference style
            protect_links: Wrap link targets in angle brackets
            ignore_images: Skip image conversion
            unicode_snob: Use Unicode chars where possible
            escape_snob: Escape every special Markdown char
            mark_code: Mark code blocks with backticks
            task_lists: Render checkbox inputs as task-list markers
        """
        self._options = {
            "body_width": body_width,
            "inline_links": inline_links,
            "protect_links": protect_links,
            "ignore_images": ignore_images,
            "unicode_snob": unicode_snob,
            "escape_snob": escape_snob,
            "mark_code": mark_code,
            "task_lists": task_lists,
        }

    @classmethod
    def from_config(cls, config: MarkdownConfig) -> HtmlToMarkdown:
        return cls(**config.model_dump())

    def _build_converter(self) -> _GfmHTML2Text:
        # html2text instances keep parser state, one per conversion
        converter = _GfmHTML2Text()
        for name, value in self._options.items():
            setattr(converter, name, value)

        converter.ignore_tables = False
        converter.wrap_links = False
        converter.default_image_alt = ""
        converter.single_line_break = False
        return converter

    def _clean_output(self, markdown: str) -> str:
        """Clean up the converted Markdown."""
        # Remove excessive blank lines
        markdown = re.sub(r"\n{3,}", "\n\n", markdown)

        # Remove trailing whitespace on each line
        markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))

        return markdown.strip()

    def convert(self, html: str) -> str:
        """
        Convert an HTML string to Markdown.

        Args:
            html: HTML content string

        Returns:
            Markdown string without surrounding blank lines
        """
        markdown = self._build_converter().handle(html)
        return self._clean_output(markdown)

    def serialize(self, fragment: Union[Tag, BeautifulSoup]) -> str:
        """
        Convert a fragment's children to Markdown.

        The fragment is treated as a root: its own tag is not rendered,
        only what it contains.

        Args:
            fragment: Tag from a document, or a standalone fragment

        Returns:
            Markdown string
        """
        return self.convert(fragment.decode_contents())
