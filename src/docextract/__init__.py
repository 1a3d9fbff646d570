"""
docextract - Extract a stable Markdown rendition of a document snapshot.

Usage:
    from docextract import Extractor, FilterRegistry, RuleSet

    filters = FilterRegistry()

    @filters.register()
    def remove_dates(document):
        for node in document.select(".last-updated"):
            node.decompose()

    rules = RuleSet(
        location="https://example.com/terms",
        select=["main", {"startAfter": "h1", "endBefore": "footer"}],
        remove=".cookie-banner",
        filters=["remove_dates"],
    )

    text = Extractor(filters=filters).extract(html, rules)
"""

__version__ = "1.0.0"

from .core.extractor import Extractor, extract
from .errors import BoundaryNotFoundError, ExtractionError, NoMatchError, UnknownFilterError
from .filters.registry import FilterRegistry
from .models.config import ExtractorConfig, MarkdownConfig
from .models.rules import Boundary, Edge, QueryRule, RangeRule, RuleSet, SelectionRule

__all__ = [
    "__version__",
    # Core
    "Extractor",
    "extract",
    "FilterRegistry",
    # Rules
    "RuleSet",
    "SelectionRule",
    "QueryRule",
    "RangeRule",
    "Boundary",
    "Edge",
    # Config
    "ExtractorConfig",
    "MarkdownConfig",
    # Errors
    "ExtractionError",
    "BoundaryNotFoundError",
    "UnknownFilterError",
    "NoMatchError",
]
