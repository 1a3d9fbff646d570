"""Pydantic models for extraction rule declarations."""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


class Edge(str, Enum):
    """Side of an anchor node on which a range boundary sits."""

    BEFORE = "before"
    AFTER = "after"


class Boundary(BaseModel):
    """A point immediately before or after the first node matching `anchor`."""

    edge: Edge = Field(..., description="Whether the boundary lies before or after the anchor")
    anchor: str = Field(..., min_length=1, description="CSS selector of the reference node")

    model_config = {"extra": "forbid", "frozen": True}


class QueryRule(BaseModel):
    """Selects every node matching a CSS selector."""

    selector: str = Field(..., min_length=1, description="CSS selector")

    model_config = {"extra": "forbid", "frozen": True}

    def to_declaration(self) -> str:
        return self.selector

    def __str__(self) -> str:
        return self.selector


def _parse_boundary(data: dict[str, Any], side: str) -> dict[str, Any]:
    keys = {edge: f"{side}{edge.value.capitalize()}" for edge in Edge}
    present = [(edge, data[key]) for edge, key in keys.items() if key in data]
    if len(present) != 1:
        raise ValueError(f'Range selector needs exactly one of "{side}Before" or "{side}After", got: {data}')
    edge, anchor = present[0]
    return {"edge": edge, "anchor": anchor}


_DECLARATION_KEYS = {"startBefore", "startAfter", "endBefore", "endAfter"}


class RangeRule(BaseModel):
    """
    Selects the structural span between two boundaries.

    Accepts the declaration form used in rule files:

        {"startAfter": "h1", "endBefore": "footer"}

    as well as explicit `start`/`end` boundaries.
    """

    start: Boundary
    end: Boundary

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _from_declaration(cls, data: Any) -> Any:
        if isinstance(data, dict) and _DECLARATION_KEYS.intersection(data):
            unknown = set(data) - _DECLARATION_KEYS
            if unknown:
                raise ValueError(f"Unknown range selector keys: {', '.join(sorted(unknown))}")
            return {"start": _parse_boundary(data, "start"), "end": _parse_boundary(data, "end")}
        return data

    def to_declaration(self) -> dict[str, str]:
        return {
            f"start{self.start.edge.value.capitalize()}": self.start.anchor,
            f"end{self.end.edge.value.capitalize()}": self.end.anchor,
        }

    def __str__(self) -> str:
        return json.dumps(self.to_declaration())


SelectionRule = Union[QueryRule, RangeRule]


def parse_rule(value: Any) -> SelectionRule:
    """
    Build a selection rule from its declaration.

    Args:
        value: A rule instance, a CSS selector string, or a mapping
            (range declaration or `{"selector": ...}`)

    Returns:
        QueryRule or RangeRule

    Raises:
        ValueError: If the value cannot describe a rule
    """
    if isinstance(value, (QueryRule, RangeRule)):
        return value
    if isinstance(value, str):
        return QueryRule(selector=value)
    if isinstance(value, dict):
        if "selector" in value:
            return QueryRule.model_validate(value)
        return RangeRule.model_validate(value)
    raise ValueError(f"Invalid selection rule: {value!r}")


class RuleSet(BaseModel):
    """
    Extraction rules for one document.

    Example:
        rules = RuleSet(
            location="https://example.com/terms",
            select=["main", {"startAfter": "h1", "endBefore": "footer"}],
            remove=".cookie-banner",
            filters=["removeTrackingLinks"],
        )

    YAML format:
        location: https://example.com/terms
        select:
          - main
        remove: .cookie-banner
        filters:
          - removeTrackingLinks
    """

    location: str = Field(
        ...,
        validation_alias=AliasChoices("location", "fetch"),
        description="URL the document was retrieved from, used to absolutize links",
    )
    select: list[SelectionRule] = Field(default_factory=list, description="Rules for content to extract")
    remove: list[SelectionRule] = Field(default_factory=list, description="Rules for content to delete first")
    filters: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("filters", "serviceFilters", "filter"),
        description="Names of service filters to apply, in order",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("select", "remove", mode="before")
    @classmethod
    def _normalize_rules(cls, value: Any) -> list[SelectionRule]:
        if value is None:
            return []
        if isinstance(value, (str, dict, QueryRule, RangeRule)):
            value = [value]
        return [parse_rule(item) for item in value]

    @field_validator("filters", mode="before")
    @classmethod
    def _normalize_filters(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def to_dict(self) -> dict[str, Any]:
        """Convert to the declaration mapping accepted by `from_dict`."""
        return {
            "location": self.location,
            "select": [rule.to_declaration() for rule in self.select],
            "remove": [rule.to_declaration() for rule in self.remove],
            "filters": list(self.filters),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuleSet":
        return cls.model_validate(data)

    def to_yaml(self) -> str:
        """Serialize rules to YAML string."""
        import yaml

        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "RuleSet":
        """Load rules from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "RuleSet":
        """Load rules from YAML file."""
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))
