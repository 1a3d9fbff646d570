"""Pipeline architecture for extraction."""

from .base import ExtractionContext, ExtractionPipeline, ExtractionStep

__all__ = ["ExtractionContext", "ExtractionPipeline", "ExtractionStep"]
