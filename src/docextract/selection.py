"""Resolution of selection rules into removal targets and fragments."""

import logging
from typing import Union

from bs4 import BeautifulSoup, Tag

from .dom.range import DomRange
from .dom.resolver import resolve_range
from .models.rules import QueryRule, RangeRule, SelectionRule

logger = logging.getLogger(__name__)

# Live tag (query match) or cloned standalone fragment (range)
Fragment = Union[Tag, BeautifulSoup]
RemovalTarget = Union[Tag, DomRange]


def resolve_for_deletion(document: BeautifulSoup, rule: SelectionRule) -> list[RemovalTarget]:
    """
    Resolve a rule into the things it would remove.

    Args:
        document: Parsed document
        rule: Query or range rule

    Returns:
        Matched tags in document order, or a single resolved range
    """
    if isinstance(rule, QueryRule):
        return list(document.select(rule.selector))
    if isinstance(rule, RangeRule):
        return [resolve_range(document, rule)]
    raise TypeError(f"Unsupported selection rule: {rule!r}")


def remove_matches(document: BeautifulSoup, rule: SelectionRule) -> int:
    """
    Remove everything a rule selects from the document.

    Returns:
        Number of removal targets processed
    """
    targets = resolve_for_deletion(document, rule)
    for target in targets:
        if isinstance(target, DomRange):
            target.delete_contents()
        else:
            target.extract()
    return len(targets)


def resolve_for_extraction(document: BeautifulSoup, rule: SelectionRule) -> list[Fragment]:
    """
    Resolve a rule into fragments to serialize.

    Query matches are returned as live tags; ranges are cloned so the
    fragment no longer depends on the document.

    Args:
        document: Parsed document
        rule: Query or range rule

    Returns:
        Fragments in document order (possibly empty)
    """
    if isinstance(rule, QueryRule):
        return list(document.select(rule.selector))
    if isinstance(rule, RangeRule):
        return [resolve_range(document, rule).clone_contents()]
    raise TypeError(f"Unsupported selection rule: {rule!r}")
