"""Pydantic configuration models for docextract."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


class MarkdownConfig(BaseModel):
    """Configuration for the HTML to Markdown serializer."""

    body_width: int = Field(0, ge=0, description="Max line width (0 = no wrapping)")
    inline_links: bool = Field(True, description="Use inline [text](url) vs reference style")
    protect_links: bool = Field(False, description="Wrap link targets in angle brackets")
    ignore_images: bool = Field(False, description="Skip image conversion")
    unicode_snob: bool = Field(True, description="Use Unicode chars where possible")
    escape_snob: bool = Field(False, description="Escape every special Markdown char")
    mark_code: bool = Field(True, description="Mark code blocks with backticks")
    task_lists: bool = Field(True, description="Render checkbox inputs as [x] / [ ] markers")

    model_config = {"extra": "forbid"}


class ExtractorConfig(BaseModel):
    """
    Root configuration model for docextract.

    YAML format:
        parser: lxml
        markdown:
          body_width: 0
        log_level: DEBUG
    """

    parser: Literal["html.parser", "lxml", "html5lib"] = Field(
        "html.parser",
        description="BeautifulSoup tree builder used to parse documents",
    )
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ExtractorConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ExtractorConfig":
        """Load config from YAML file."""
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))
