"""Document ranges over BeautifulSoup trees.

BeautifulSoup has no notion of a range, so this module provides one with the
boundary-point semantics of the DOM standard: a boundary is a (container,
offset) pair, where the offset counts children for elements and characters
for text nodes.
"""

import copy
from typing import Optional

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag


def _index(node: PageElement) -> int:
    """Position of `node` among its parent's children (by identity)."""
    parent = node.parent
    if parent is None:
        raise ValueError(f"Node has no parent: {node!r}")
    for i, child in enumerate(parent.contents):
        if child is node:
            return i
    raise ValueError(f"Node is not a child of its parent: {node!r}")


def _path(node: PageElement) -> list[int]:
    path = []
    while node.parent is not None:
        path.append(_index(node))
        node = node.parent
    path.reverse()
    return path


def _length(node: PageElement) -> int:
    if isinstance(node, NavigableString):
        return len(node)
    return len(node.contents)


def _clone_between(node: PageElement, start: Optional[list[int]], end: Optional[list[int]]) -> list[PageElement]:
    """
    Clone the part of `node` between two relative boundary paths.

    A path is a list of child offsets descending from `node`; its last item is
    the offset inside the innermost container. None means "from the beginning"
    (start) or "to the end" (end).
    """
    if isinstance(node, NavigableString):
        lo = start[0] if start else 0
        hi = end[0] if end else len(node)
        return [type(node)(str(node)[lo:hi])]

    children = list(node.contents)
    first = start[0] if start else 0
    last = end[0] if end else len(children)
    start_inside = start is not None and len(start) > 1
    end_inside = end is not None and len(end) > 1

    if start_inside and end_inside and first == last:
        return [_partial_clone(children[first], start[1:], end[1:])]

    result = []
    if start_inside:
        result.append(_partial_clone(children[first], start[1:], None))
        first += 1
    result.extend(copy.copy(child) for child in children[first:last])
    if end_inside:
        result.append(_partial_clone(children[last], None, end[1:]))
    return result


def _partial_clone(node: PageElement, start: Optional[list[int]], end: Optional[list[int]]) -> PageElement:
    if isinstance(node, NavigableString):
        return _clone_between(node, start, end)[0]
    clone = copy.copy(node)
    clone.clear()
    for child in _clone_between(node, start, end):
        clone.append(child)
    return clone


def _delete_between(node: PageElement, start: Optional[list[int]], end: Optional[list[int]]) -> None:
    """Remove the part of `node` between two relative boundary paths, in place."""
    if isinstance(node, NavigableString):
        lo = start[0] if start else 0
        hi = end[0] if end else len(node)
        text = str(node)
        node.replace_with(type(node)(text[:lo] + text[hi:]))
        return

    children = list(node.contents)
    first = start[0] if start else 0
    last = end[0] if end else len(children)
    start_inside = start is not None and len(start) > 1
    end_inside = end is not None and len(end) > 1

    if start_inside and end_inside and first == last:
        _delete_between(children[first], start[1:], end[1:])
        return

    first_contained = first + 1 if start_inside else first
    if end_inside:
        _delete_between(children[last], None, end[1:])
    for child in children[first_contained:last]:
        child.extract()
    if start_inside:
        _delete_between(children[first], start[1:], None)


class DomRange:
    """
    A span of a document between two boundary points.

    Example:
        rng = DomRange(soup)
        rng.set_start_after(soup.select_one("h1"))
        rng.set_end_before(soup.select_one("footer"))
        fragment = rng.clone_contents()

    Setting a start that lies after the current end (or an end before the
    current start) collapses the range at the point just set, so an inverted
    pair of boundaries yields an empty range.
    """

    def __init__(self, root: Tag):
        self.root = root
        self.start_container: PageElement = root
        self.start_offset = 0
        self.end_container: PageElement = root
        self.end_offset = 0

    def __repr__(self) -> str:
        return (
            f"DomRange(start=({self.start_container.name!r}, {self.start_offset}), "
            f"end=({self.end_container.name!r}, {self.end_offset}))"
        )

    @property
    def collapsed(self) -> bool:
        return self.start_container is self.end_container and self.start_offset == self.end_offset

    def _check_offset(self, node: PageElement, offset: int) -> None:
        if not 0 <= offset <= _length(node):
            raise IndexError(f"Offset {offset} is out of bounds for {node!r}")

    def set_start(self, node: PageElement, offset: int) -> None:
        self._check_offset(node, offset)
        self.start_container, self.start_offset = node, offset
        if _path(node) + [offset] > _path(self.end_container) + [self.end_offset]:
            self.end_container, self.end_offset = node, offset

    def set_end(self, node: PageElement, offset: int) -> None:
        self._check_offset(node, offset)
        self.end_container, self.end_offset = node, offset
        if _path(node) + [offset] < _path(self.start_container) + [self.start_offset]:
            self.start_container, self.start_offset = node, offset

    def set_start_before(self, node: PageElement) -> None:
        self.set_start(node.parent, _index(node))

    def set_start_after(self, node: PageElement) -> None:
        self.set_start(node.parent, _index(node) + 1)

    def set_end_before(self, node: PageElement) -> None:
        self.set_end(node.parent, _index(node))

    def set_end_after(self, node: PageElement) -> None:
        self.set_end(node.parent, _index(node) + 1)

    def _relative_paths(self) -> tuple[PageElement, list[int], list[int]]:
        """Common ancestor of both containers and the boundary paths below it."""
        start_path = _path(self.start_container)
        end_path = _path(self.end_container)
        depth = 0
        while depth < min(len(start_path), len(end_path)) and start_path[depth] == end_path[depth]:
            depth += 1

        ancestor = self.start_container
        for _ in range(len(start_path) - depth):
            ancestor = ancestor.parent

        return ancestor, start_path[depth:] + [self.start_offset], end_path[depth:] + [self.end_offset]

    def clone_contents(self) -> BeautifulSoup:
        """
        Copy everything inside the range into a new fragment.

        Partially contained elements are cloned without the children that lie
        outside the range. The document is left untouched.

        Returns:
            A standalone BeautifulSoup fragment
        """
        fragment = BeautifulSoup("", "html.parser")
        if self.collapsed:
            return fragment

        ancestor, start, end = self._relative_paths()
        for node in _clone_between(ancestor, start, end):
            fragment.append(node)
        return fragment

    def delete_contents(self) -> None:
        """
        Remove everything inside the range from the document.

        Partially contained elements stay in place with only their contained
        children removed; partially contained text is truncated. The range
        collapses to its start afterwards.
        """
        if self.collapsed:
            return

        # Text containers are replaced on truncation, find the new one by position
        parent: Optional[Tag] = None
        position = 0
        if isinstance(self.start_container, NavigableString):
            parent = self.start_container.parent
            position = _index(self.start_container)

        ancestor, start, end = self._relative_paths()
        _delete_between(ancestor, start, end)

        if parent is not None:
            self.start_container = parent.contents[position]
        self.end_container, self.end_offset = self.start_container, self.start_offset
