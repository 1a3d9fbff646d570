"""Pipeline step serializing fragments to text."""

import logging
from typing import Optional

from ...conversion.markdown import HtmlToMarkdown
from ...conversion.protocols import MarkdownSerializer
from ..base import ExtractionContext

logger = logging.getLogger(__name__)


class SerializeStep:
    """
    Pipeline step that serializes each fragment and joins the results.

    Reads ctx.fragments, writes ctx.text. Fragments are serialized
    independently and joined with a single newline, in collection order.
    """

    name = "serialize"

    def __init__(self, serializer: Optional[MarkdownSerializer] = None):
        """
        Initialize the serialize step.

        Args:
            serializer: Fragment serializer (uses HtmlToMarkdown if None)
        """
        self._serializer = serializer or HtmlToMarkdown()

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        ctx.text = "\n".join(self._serializer.serialize(fragment) for fragment in ctx.fragments)
        logger.debug(f"Serialized {len(ctx.fragments)} fragment(s) from {ctx.rule_set.location}")
        return ctx
