"""Exceptions raised by the extraction pipeline."""

from typing import Any, Iterable


class ExtractionError(Exception):
    """Base class for extraction failures caused by a rule set or registry."""


class BoundaryNotFoundError(ExtractionError):
    """
    A range boundary anchor matched nothing in the document.

    Attributes:
        boundary: Which boundary failed ("start" or "end")
        rule: The range rule being resolved
    """

    def __init__(self, boundary: str, rule: Any):
        self.boundary = boundary
        self.rule = rule
        super().__init__(f'The "{boundary}" selector has no match in document in: {rule}')


class UnknownFilterError(ExtractionError, KeyError):
    """A service filter name is not present in the filter registry."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(self.available) or "none"
        return f'Unknown service filter "{self.name}" (registered filters: {known})'


class NoMatchError(ExtractionError):
    """
    Extraction produced no fragment after every select rule ran.

    Attributes:
        rules: The select rules that were tried
    """

    def __init__(self, rules: Iterable[Any]):
        self.rules = list(rules)
        selectors = ", ".join(str(rule) for rule in self.rules)
        super().__init__(f'The provided selector "{selectors}" has no match in the web page.')
