"""Pipeline step deleting content matched by removal rules."""

import logging

from ...selection import remove_matches
from ..base import ExtractionContext

logger = logging.getLogger(__name__)


class RemoveStep:
    """
    Pipeline step that applies every removal rule, in declaration order.

    Runs to completion before any extraction, so removed content can never
    be extracted.
    """

    name = "remove"

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        for rule in ctx.rule_set.remove:
            removed = remove_matches(ctx.document, rule)
            logger.debug(f"Removal rule {rule} removed {removed} target(s)")
        return ctx
