"""Front matter schema for Markdown content files."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ContentMeta(BaseModel):
    """Front-matter metadata for an index, section, item or page file."""

    slug: str = Field(description="URL-friendly identifier.")
    title: Optional[str] = Field(default=None, description="Display title.")
    description: str = Field(default="", description="Short summary shown in lists and meta tags.")
    tags: list[str] = Field(default_factory=list, description="Free-form tags, in display order.")
    date: Optional[datetime] = Field(default=None, description="Publication timestamp.")

    @field_validator("slug")
    def _normalize_slug(cls, value: str) -> str:
        cleaned = value.strip().strip("/")
        if not cleaned:
            raise ValueError("slug cannot be empty")
        if any(char.isspace() for char in cleaned):
            raise ValueError("slug cannot contain whitespace")
        return cleaned

    @field_validator("description", mode="before")
    def _blank_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    def _split_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("date", mode="before")
    def _promote_date(cls, value: Any) -> Any:
        # YAML parses bare dates (2023-06-01) into `date` objects.
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min)
        return value

    @field_validator("date")
    def _ensure_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ContentDocument(BaseModel):
    """A parsed source file: metadata plus its raw Markdown body."""

    meta: ContentMeta = Field(description="Front-matter metadata.")
    body: str = Field(description="Raw markdown body.")
    source_path: str = Field(description="Path to the source file.")

    @property
    def slug(self) -> str:
        return self.meta.slug
