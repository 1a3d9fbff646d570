"""Pipeline step collecting fragments matched by extraction rules."""

import logging

from ...errors import NoMatchError
from ...selection import resolve_for_extraction
from ..base import ExtractionContext

logger = logging.getLogger(__name__)


class SelectStep:
    """
    Pipeline step that resolves every extraction rule into fragments.

    Fragments are collected per rule in declaration order, so results of an
    earlier rule always precede those of a later one whatever their position
    in the page. Overlapping rules are not deduplicated.

    Raises:
        NoMatchError: If no rule produced a fragment
    """

    name = "select"

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        for rule in ctx.rule_set.select:
            fragments = resolve_for_extraction(ctx.document, rule)
            logger.debug(f"Extraction rule {rule} matched {len(fragments)} fragment(s)")
            ctx.fragments.extend(fragments)

        if not ctx.fragments:
            raise NoMatchError(ctx.rule_set.select)

        return ctx
