"""Range primitives over parsed documents."""

from .range import DomRange
from .resolver import resolve_range

__all__ = ["DomRange", "resolve_range"]
