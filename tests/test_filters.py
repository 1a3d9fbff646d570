"""Tests for the service filter registry."""

import pytest

from docextract.errors import UnknownFilterError
from docextract.filters import FilterRegistry


def remove_ads(document):
    for node in document.select(".ad"):
        node.decompose()


class TestFilterRegistry:
    """Tests for FilterRegistry."""

    def test_register_decorator_uses_function_name(self):
        """Test registering with the decorator."""
        registry = FilterRegistry()

        @registry.register()
        def strip_dates(document):
            pass

        assert "strip_dates" in registry
        assert registry.get("strip_dates") is strip_dates

    def test_register_with_name(self):
        """Test registering under an explicit name."""
        registry = FilterRegistry()

        @registry.register("removeDates")
        def strip_dates(document):
            pass

        assert registry.names() == ["removeDates"]

    def test_init_from_mapping(self):
        """Test building a registry from a mapping."""
        registry = FilterRegistry({"removeAds": remove_ads})

        assert len(registry) == 1
        assert list(registry) == ["removeAds"]

    def test_unknown_filter(self):
        """Test that unknown names raise UnknownFilterError."""
        registry = FilterRegistry({"removeAds": remove_ads})

        with pytest.raises(UnknownFilterError) as exc_info:
            registry.get("removeDates")

        assert exc_info.value.name == "removeDates"
        assert exc_info.value.available == ["removeAds"]
        assert "removeDates" in str(exc_info.value)

    def test_unknown_filter_is_key_error(self):
        """Test that lookups failures can be caught as KeyError."""
        with pytest.raises(KeyError):
            FilterRegistry().get("missing")

    def test_non_callable_rejected(self):
        """Test that only callables can be registered."""
        with pytest.raises(TypeError):
            FilterRegistry().add("broken", "not a function")

    def test_from_file(self, tmp_path):
        """Test loading public functions from a filters file."""
        filters_file = tmp_path / "service.filters.py"
        filters_file.write_text(
            """
from os.path import join


def remove_share_buttons(document):
    for node in document.select(".share"):
        node.decompose()


def _helper(document):
    pass


CONSTANT = 3
"""
        )

        registry = FilterRegistry.from_file(filters_file)

        assert registry.names() == ["remove_share_buttons"]

    def test_from_file_missing(self, tmp_path):
        """Test that a missing filters file raises."""
        with pytest.raises(FileNotFoundError):
            FilterRegistry.from_file(tmp_path / "missing.py")
