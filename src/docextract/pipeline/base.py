"""Base classes for the extraction pipeline architecture."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, Union, runtime_checkable

from bs4 import BeautifulSoup

from ..models.rules import RuleSet
from ..selection import Fragment

logger = logging.getLogger(__name__)


@dataclass
class ExtractionContext:
    """
    Context object passed through pipeline steps.

    Holds all state for a single extraction. The document is created by the
    parse step and owned by this context; every later step mutates that same
    tree.

    Attributes:
        content: Raw markup to extract from
        rule_set: Rules driving the extraction
        document: Parsed document tree
        fragments: Extracted fragments, in rule declaration order
        text: Final serialized text
    """

    content: Union[str, bytes]
    rule_set: RuleSet

    # Accumulated through pipeline
    document: Optional[BeautifulSoup] = None
    fragments: list[Fragment] = field(default_factory=list)
    text: Optional[str] = None


@runtime_checkable
class ExtractionStep(Protocol):
    """
    Protocol for pipeline steps.

    Each step receives an ExtractionContext, processes it, and returns
    the (possibly modified) context.

    Error Handling Contract:
    - Steps raise on failure; the pipeline does not recover and returns
      no partial result
    - A step whose rule list is empty does nothing

    Example implementation:
        class AbsolutizeLinksStep:
            name = "absolutize_links"

            def execute(self, ctx: ExtractionContext) -> ExtractionContext:
                absolutize_links(ctx.document, ctx.rule_set.location)
                return ctx
    """

    name: str

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        """
        Execute this pipeline step.

        Args:
            ctx: The extraction context with accumulated state

        Returns:
            The (possibly modified) extraction context
        """
        ...


@dataclass
class ExtractionPipeline:
    """
    Pipeline turning raw markup into text through ordered steps.

    Steps run in order and all of them run. If a step raises, the exception
    propagates to the caller unchanged and the remaining steps are not run.

    Example:
        pipeline = ExtractionPipeline(steps=[
            ParseStep(),
            ServiceFilterStep(filters),
            AbsolutizeLinksStep(),
            RemoveStep(),
            SelectStep(),
            SerializeStep(HtmlToMarkdown()),
        ])

        ctx = pipeline.execute(html, rule_set)
        print(ctx.text)
    """

    steps: list[ExtractionStep]

    def execute(self, content: Union[str, bytes], rule_set: RuleSet) -> ExtractionContext:
        """
        Execute the pipeline for a document.

        Args:
            content: Raw markup
            rule_set: Extraction rules

        Returns:
            ExtractionContext with final state
        """
        ctx = ExtractionContext(content=content, rule_set=rule_set)

        for step in self.steps:
            try:
                ctx = step.execute(ctx)
            except Exception as e:
                logger.debug(f"Step {step.name} failed for {rule_set.location}: {e}")
                raise

        return ctx

    def add_step(self, step: ExtractionStep) -> "ExtractionPipeline":
        """
        Add a step to the pipeline (fluent API).

        Args:
            step: The step to add

        Returns:
            Self for chaining
        """
        self.steps.append(step)
        return self
