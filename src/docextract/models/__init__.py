"""Rule and configuration models for docextract."""

from .config import ExtractorConfig, MarkdownConfig
from .rules import Boundary, Edge, QueryRule, RangeRule, RuleSet, SelectionRule, parse_rule

__all__ = [
    # Rules
    "Boundary",
    "Edge",
    "QueryRule",
    "RangeRule",
    "RuleSet",
    "SelectionRule",
    "parse_rule",
    # Config
    "ExtractorConfig",
    "MarkdownConfig",
]
