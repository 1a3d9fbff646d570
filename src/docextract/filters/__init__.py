"""Service filter registry."""

from .registry import FilterRegistry

__all__ = ["FilterRegistry"]
