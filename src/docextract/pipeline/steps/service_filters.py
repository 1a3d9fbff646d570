"""Pipeline step applying service filters to the document."""

import logging

from ...filters.registry import FilterRegistry
from ..base import ExtractionContext

logger = logging.getLogger(__name__)


class ServiceFilterStep:
    """
    Pipeline step that runs the rule set's service filters in order.

    Filters mutate ctx.document in place. An unknown filter name fails the
    step at that point; filters listed before it have already run.
    """

    name = "service_filters"

    def __init__(self, filters: FilterRegistry):
        self._filters = filters

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        for filter_name in ctx.rule_set.filters:
            service_filter = self._filters.get(filter_name)
            service_filter(ctx.document)
            logger.debug(f"Applied service filter {filter_name} to {ctx.rule_set.location}")
        return ctx
