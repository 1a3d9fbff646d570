"""Registry of named service filters."""

import importlib.util
import inspect
import logging
import re
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional, Union

from ..conversion.protocols import DocumentFilter
from ..errors import UnknownFilterError

logger = logging.getLogger(__name__)


class FilterRegistry:
    """
    Maps service filter names to document filters.

    A registry is passed to each extractor explicitly; nothing is registered
    globally.

    Example:
        filters = FilterRegistry()

        @filters.register()
        def remove_share_buttons(document):
            for button in document.select(".share"):
                button.decompose()

        extractor = Extractor(filters=filters)
    """

    def __init__(self, filters: Optional[dict[str, DocumentFilter]] = None):
        self._filters: dict[str, DocumentFilter] = {}
        for name, func in (filters or {}).items():
            self.add(name, func)

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._filters)

    def names(self) -> list[str]:
        return list(self._filters)

    def add(self, name: str, func: DocumentFilter) -> None:
        """
        Register a filter under a name, replacing any previous one.

        Raises:
            TypeError: If func is not callable
        """
        if not callable(func):
            raise TypeError(f"Filter {name} is not callable: {func!r}")
        if name in self._filters:
            logger.warning(f"Replacing service filter: {name}")
        self._filters[name] = func
        logger.debug(f"Registered service filter: {name}")

    def register(self, name: Optional[str] = None) -> Callable[[DocumentFilter], DocumentFilter]:
        """Decorator registering a function, under its own name by default."""

        def decorator(func: DocumentFilter) -> DocumentFilter:
            self.add(name or func.__name__, func)
            return func

        return decorator

    def get(self, name: str) -> DocumentFilter:
        """
        Look up a filter by name.

        Raises:
            UnknownFilterError: If no filter has that name
        """
        try:
            return self._filters[name]
        except KeyError:
            raise UnknownFilterError(name, self._filters) from None

    @classmethod
    def from_module(cls, module: ModuleType) -> "FilterRegistry":
        """
        Build a registry from the public functions of a module.

        Functions whose name starts with an underscore and functions
        imported from other modules are skipped.
        """
        registry = cls()
        for name, obj in inspect.getmembers(module, inspect.isfunction):
            if name.startswith("_") or obj.__module__ != module.__name__:
                continue
            registry.add(name, obj)
        return registry

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "FilterRegistry":
        """
        Build a registry from a Python file of filter functions.

        Args:
            file_path: Path to the filters file

        Raises:
            FileNotFoundError: If the file does not exist
            ImportError: If the file cannot be loaded as a module
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Filter file not found: {file_path}")

        module_name = "docextract_filters_" + re.sub(r"\W", "_", file_path.stem)
        spec = importlib.util.spec_from_file_location(module_name, file_path)
        if not spec or not spec.loader:
            raise ImportError(f"Could not load {file_path}")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        registry = cls.from_module(module)
        logger.info(f"Loaded {len(registry)} service filters from {file_path}")
        return registry
