"""Protocol definitions for document conversion."""

from typing import Protocol, Union

from bs4 import BeautifulSoup, Tag


class MarkdownSerializer(Protocol):
    """
    Protocol for serializing extracted fragments to text.

    Implementations must be deterministic: identical fragments always
    produce identical text.
    """

    def serialize(self, fragment: Union[Tag, BeautifulSoup]) -> str:
        """
        Serialize a fragment.

        Args:
            fragment: Live tag or standalone fragment

        Returns:
            Text without surrounding blank lines
        """
        ...


class DocumentFilter(Protocol):
    """
    Protocol for service filters.

    A service filter mutates the parsed document in place to work around
    source-specific page quirks. Its return value is ignored.
    """

    def __call__(self, document: BeautifulSoup) -> None: ...
