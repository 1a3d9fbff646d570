"""Main extractor class for docextract."""

import logging
from typing import Any, Optional, Union

from ..conversion.markdown import HtmlToMarkdown
from ..conversion.protocols import MarkdownSerializer
from ..filters.registry import FilterRegistry
from ..models.config import ExtractorConfig
from ..models.rules import RuleSet
from ..pipeline.base import ExtractionPipeline
from ..pipeline.steps import (
    AbsolutizeLinksStep,
    ParseStep,
    RemoveStep,
    SelectStep,
    SerializeStep,
    ServiceFilterStep,
)

logger = logging.getLogger(__name__)


class Extractor:
    """
    Extracts the meaningful text of a document snapshot.

    Stages run in a fixed order: parse, service filters, link
    absolutization, removal rules, extraction rules, serialization.
    The extractor holds no per-document state, so one instance can serve
    concurrent calls.

    Example:
        extractor = Extractor(filters=FilterRegistry.from_file("filters.py"))
        text = extractor.extract(html, {
            "location": "https://example.com/terms",
            "select": "main",
            "remove": ".cookie-banner",
        })
    """

    def __init__(
        self,
        filters: Optional[FilterRegistry] = None,
        serializer: Optional[MarkdownSerializer] = None,
        config: Optional[ExtractorConfig] = None,
    ):
        """
        Initialize the extractor.

        Args:
            filters: Service filters available to rule sets (empty if None)
            serializer: Fragment serializer (built from config if None)
            config: Extractor configuration (defaults if None)
        """
        self.config = config if config is not None else ExtractorConfig()
        # Empty registries are falsy, keep the caller's instance
        self.filters = filters if filters is not None else FilterRegistry()
        self._serializer = serializer if serializer is not None else HtmlToMarkdown.from_config(self.config.markdown)
        self._pipeline = self._create_pipeline()

    def _create_pipeline(self) -> ExtractionPipeline:
        return ExtractionPipeline(
            steps=[
                ParseStep(parser=self.config.parser),
                ServiceFilterStep(self.filters),
                AbsolutizeLinksStep(),
                RemoveStep(),
                SelectStep(),
                SerializeStep(self._serializer),
            ]
        )

    def extract(self, content: Union[str, bytes], rule_set: Union[RuleSet, dict[str, Any]]) -> str:
        """
        Extract text from raw markup.

        Args:
            content: Raw HTML (bytes are decoded using the declared charset)
            rule_set: RuleSet, or its declaration mapping

        Returns:
            Serialized text of every extracted fragment, joined by newlines

        Raises:
            BoundaryNotFoundError: If a range anchor matches nothing
            UnknownFilterError: If a service filter is not registered
            NoMatchError: If extraction produced no fragment
            pydantic.ValidationError: If a rule set mapping is invalid
        """
        if not isinstance(rule_set, RuleSet):
            rule_set = RuleSet.model_validate(rule_set)

        ctx = self._pipeline.execute(content, rule_set)
        logger.debug(f"Extracted {len(ctx.text)} characters from {rule_set.location}")
        return ctx.text


def extract(
    content: Union[str, bytes],
    rule_set: Union[RuleSet, dict[str, Any]],
    filters: Optional[FilterRegistry] = None,
) -> str:
    """
    Extract text from raw markup with default settings.

    Example:
        text = extract(html, {"location": url, "select": "main"})
    """
    return Extractor(filters=filters).extract(content, rule_set)
