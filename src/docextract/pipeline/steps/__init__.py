"""Pipeline steps for extraction."""

from .links import AbsolutizeLinksStep
from .parse import ParseStep, decode_markup
from .remove import RemoveStep
from .select import SelectStep
from .serialize import SerializeStep
from .service_filters import ServiceFilterStep

__all__ = [
    "AbsolutizeLinksStep",
    "ParseStep",
    "RemoveStep",
    "SelectStep",
    "SerializeStep",
    "ServiceFilterStep",
    "decode_markup",
]
