"""Core extraction API."""

from .extractor import Extractor, extract

__all__ = ["Extractor", "extract"]
