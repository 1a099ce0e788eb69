"""Typed representations of the Kodium website's content."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from markupsafe import Markup

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_TAG_CHARS_RE = re.compile(r"[^\w-]")


class SectionID(str, Enum):
    """Sections published on the website, in navigation order."""

    POSTS = "posts"


@dataclass(frozen=True, order=True, slots=True)
class Tag:
    """Classification label attached to items; compares by label."""

    label: str

    def normalized(self) -> str:
        """URL-safe form of the label used in tag paths."""
        dashed = _WHITESPACE_RE.sub("-", self.label.strip().lower())
        return _UNSAFE_TAG_CHARS_RE.sub("", dashed)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True)
class Site:
    """Site-wide identity plus the closed set of sections it publishes."""

    url: str
    name: str
    description: str
    language: str = "en"
    image_path: str | None = None
    section_ids: type[Enum] = SectionID
    tag_base_path: str = "tags"

    @property
    def tag_list_path(self) -> str:
        return f"/{self.tag_base_path}"

    def path_for(self, tag: Tag) -> str:
        """Canonical path of the detail page for ``tag``."""
        return f"{self.tag_list_path}/{tag.normalized()}"

    def url_for(self, path: str) -> str:
        """Absolute URL for a site-relative path."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.url.rstrip('/')}/{path.lstrip('/')}"


@dataclass(frozen=True, slots=True)
class Item:
    """A dated, tagged piece of content published inside a section."""

    section_id: Enum
    slug: str
    title: str
    date: datetime
    description: str = ""
    tags: tuple[Tag, ...] = ()
    body: Markup = Markup("")

    def __post_init__(self) -> None:
        if self.date.tzinfo is None:
            object.__setattr__(self, "date", self.date.replace(tzinfo=timezone.utc))

    @property
    def path(self) -> str:
        return f"/{self.section_id.value}/{self.slug}"


@dataclass(frozen=True, slots=True)
class Section:
    """One published section and its items, in the order the content layer assigned."""

    id: Enum
    title: str
    items: tuple[Item, ...] = ()
    description: str = ""

    @property
    def path(self) -> str:
        return f"/{self.id.value}"


@dataclass(frozen=True, slots=True)
class Page:
    """Standalone document outside any section."""

    slug: str
    title: str
    body: Markup = Markup("")
    description: str = ""

    @property
    def path(self) -> str:
        return f"/{self.slug}"


@dataclass(frozen=True, slots=True)
class Index:
    """The site's home page; its copy comes from the theme."""

    title: str
    description: str = ""

    @property
    def path(self) -> str:
        return "/"


@dataclass(frozen=True, slots=True)
class TagListPage:
    tags: frozenset[Tag]
    path: str
    title: str = "Browse all tags"
    description: str = ""


@dataclass(frozen=True, slots=True)
class TagDetailsPage:
    tag: Tag
    path: str
    description: str = ""
    title: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", f"Tagged with {self.tag.label}")
