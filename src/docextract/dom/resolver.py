"""Resolution of range rules against a parsed document."""

import logging

from bs4 import BeautifulSoup

from ..errors import BoundaryNotFoundError
from ..models.rules import Edge, RangeRule
from .range import DomRange

logger = logging.getLogger(__name__)


def resolve_range(document: BeautifulSoup, rule: RangeRule) -> DomRange:
    """
    Build the range described by a range rule.

    Each anchor selector resolves to its first match in document order.
    Start and end edges are applied independently.

    Args:
        document: Parsed document
        rule: Range rule with start and end boundaries

    Returns:
        DomRange spanning the two boundaries

    Raises:
        BoundaryNotFoundError: If an anchor selector matches nothing
    """
    start_node = document.select_one(rule.start.anchor)
    if start_node is None:
        raise BoundaryNotFoundError("start", rule)

    end_node = document.select_one(rule.end.anchor)
    if end_node is None:
        raise BoundaryNotFoundError("end", rule)

    selection = DomRange(document)
    if rule.start.edge == Edge.BEFORE:
        selection.set_start_before(start_node)
    else:
        selection.set_start_after(start_node)

    if rule.end.edge == Edge.BEFORE:
        selection.set_end_before(end_node)
    else:
        selection.set_end_after(end_node)

    if selection.collapsed:
        logger.debug(f"Range {rule} resolved to an empty span")

    return selection
