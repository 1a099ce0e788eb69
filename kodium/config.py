from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .content.models import Site

DEFAULT_CONFIG_FILENAME = "kodium.yml"


class SiteSettings(BaseModel):
    """Identity of the published website."""

    url: str = Field(default="http://kodium.mk")
    name: str = Field(default="Kodium")
    description: str = Field(default="Mobile Software Engineering at it's best!")
    language: str = Field(default="en", description="Language tag declared on every document.")
    image_path: str | None = Field(
        default=None,
        description="Optional site-relative path of the image used in social previews.",
    )

    @field_validator("url")
    def _validate_url(cls, value: str) -> str:
        text = value.strip()
        if not text.startswith(("http://", "https://")):
            raise ValueError("Site url must start with 'http://' or 'https://'.")
        return text.rstrip("/")

    @field_validator("name", "language")
    def _require_text(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("value cannot be empty")
        return text

    def to_site(self) -> Site:
        return Site(
            url=self.url,
            name=self.name,
            description=self.description,
            language=self.language,
            image_path=self.image_path,
        )


class FeedConfig(BaseModel):
    """Options controlling RSS feed generation."""

    enabled: bool = Field(default=True, description="Toggle RSS feed generation.")
    limit: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Maximum number of items to include in the feed.",
    )
    path: str = Field(default="feed.rss", description="Feed location relative to the output directory.")

    @field_validator("path")
    def _relative_path(cls, value: str) -> str:
        return _output_file(value, "Feed")


class SitemapConfig(BaseModel):
    """Options controlling sitemap generation."""

    enabled: bool = Field(default=True, description="Toggle sitemap.xml generation.")
    path: str = Field(default="sitemap.xml", description="Sitemap location relative to the output directory.")

    @field_validator("path")
    def _relative_path(cls, value: str) -> str:
        return _output_file(value, "Sitemap")


class Config(BaseModel):
    site: SiteSettings = Field(default_factory=SiteSettings)
    content_dir: Path = Field(default=Path("content"))
    output_dir: Path = Field(default=Path("Output"))
    feed: FeedConfig = Field(default_factory=FeedConfig)
    sitemap: SitemapConfig = Field(default_factory=SitemapConfig)

    @field_validator("content_dir", "output_dir", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)


def _output_file(value: str, label: str) -> str:
    text = value.strip().lstrip("/")
    if not text or ".." in Path(text).parts:
        raise ValueError(f"{label} path must be a file inside the output directory.")
    return text


def load_config(path: str | Path) -> Config:
    """Load configuration and resolve relative paths based on the config location.

    ``path`` may point to a file (e.g. ``/site/kodium.yml``) or to a directory
    containing that file. A directory without a config file yields the defaults
    anchored to that directory.
    """
    candidate = Path(path)
    data: Any = {}
    if candidate.is_dir():
        config_file = candidate / DEFAULT_CONFIG_FILENAME
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        with candidate.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        base_dir = candidate.parent.resolve()

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {candidate} must be a mapping.")

    cfg = Config(**data)

    def _abs_required(value: Path) -> Path:
        return value if value.is_absolute() else (base_dir / value).resolve()

    cfg.content_dir = _abs_required(cfg.content_dir)
    cfg.output_dir = _abs_required(cfg.output_dir)
    return cfg
