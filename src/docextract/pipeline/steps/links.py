"""Pipeline step converting relative links to absolute URLs."""

from ...conversion.links import absolutize_links
from ..base import ExtractionContext


class AbsolutizeLinksStep:
    """Pipeline step resolving every hyperlink against the rule set location."""

    name = "absolutize_links"

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        absolutize_links(ctx.document, ctx.rule_set.location)
        return ctx
