"""Pipeline step parsing raw markup into a document tree."""

import logging
import re
from typing import Union

from bs4 import BeautifulSoup

from ..base import ExtractionContext

logger = logging.getLogger(__name__)


def _detect_encoding(html: bytes) -> str:
    """Detect character encoding from HTML content."""
    # Quick regex check for meta charset
    head = html[:2048].decode("latin-1", errors="ignore")
    charset_match = re.search(r'charset=["\']?([^"\'\s>]+)', head, re.IGNORECASE)
    if charset_match:
        return charset_match.group(1).strip()
    return "utf-8"


def decode_markup(content: Union[str, bytes]) -> str:
    """
    Decode raw markup to text.

    Bytes are decoded with the charset declared in the markup, falling back
    to UTF-8 with replacement characters.
    """
    if isinstance(content, str):
        return content
    encoding = _detect_encoding(content)
    try:
        return content.decode(encoding, errors="replace")
    except LookupError:
        logger.debug(f"Unknown charset {encoding}, decoding as utf-8")
        return content.decode("utf-8", errors="replace")


class ParseStep:
    """
    Pipeline step that parses ctx.content into a fresh document.

    Example:
        step = ParseStep(parser="lxml")
        ctx = step.execute(ctx)
        # ctx.document now holds the parsed tree
    """

    name = "parse"

    def __init__(self, parser: str = "html.parser"):
        """
        Initialize the parse step.

        Args:
            parser: BeautifulSoup tree builder name
        """
        self._parser = parser

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        ctx.document = BeautifulSoup(decode_markup(ctx.content), self._parser)
        return ctx
