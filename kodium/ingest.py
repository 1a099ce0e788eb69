"""Load the content directory into a `PublishingContext`."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable

from .config import Config
from .content import ContentDocument, Index, Item, Page, Site, Tag, load_markdown_document
from .context import PublishingContext
from .markdown import render_markdown

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".md", ".markdown"}
INDEX_STEM = "index"


class ContentError(ValueError):
    """Raised when a content file cannot be turned into a site entity."""


def load_context(config: Config, site: Site | None = None) -> PublishingContext:
    """Read index, section, item and page files from the configured content directory."""
    site = site or config.site.to_site()
    root = config.content_dir

    index: Index | None = None
    items: list[Item] = []
    pages: list[Page] = []
    section_titles: dict[Enum, str] = {}
    section_descriptions: dict[Enum, str] = {}

    if not root.exists():
        logger.warning("Content directory %s does not exist; publishing an empty site.", root)
        return PublishingContext.assemble(site)

    sections_by_value = {str(section_id.value): section_id for section_id in site.section_ids}

    for path in _iter_content_files(root):
        document = load_markdown_document(path)
        if path.stem == INDEX_STEM:
            index = _build_index(document, site)
            continue
        pages.append(_build_page(document))

    for directory in sorted(p for p in root.iterdir() if p.is_dir()):
        section_id = sections_by_value.get(directory.name)
        if section_id is None:
            logger.warning("Directory %s does not match a declared section; skipping.", directory)
            continue

        section_items: list[Item] = []
        for path in _iter_content_files(directory):
            document = load_markdown_document(path)
            if path.stem == INDEX_STEM:
                if document.meta.title:
                    section_titles[section_id] = document.meta.title
                section_descriptions[section_id] = document.meta.description
                continue
            section_items.append(_build_item(document, section_id))

        items.extend(sorted(section_items, key=_newest_first))

    return PublishingContext.assemble(
        site,
        index=index,
        items=items,
        pages=pages,
        section_titles=section_titles,
        section_descriptions=section_descriptions,
    )


def _build_index(document: ContentDocument, site: Site) -> Index:
    if document.body.strip():
        logger.warning("Ignoring body of %s; the home page copy is set by the theme.", document.source_path)
    return Index(title=document.meta.title or site.name, description=document.meta.description)


def _build_page(document: ContentDocument) -> Page:
    return Page(
        slug=document.slug,
        title=_require_title(document),
        body=render_markdown(document.body),
        description=document.meta.description,
    )


def _build_item(document: ContentDocument, section_id: Enum) -> Item:
    meta = document.meta
    if meta.date is None:
        raise ContentError(f"Item {document.source_path} is missing a 'date'.")
    return Item(
        section_id=section_id,
        slug=document.slug,
        title=_require_title(document),
        date=meta.date,
        description=meta.description,
        tags=tuple(Tag(label) for label in meta.tags),
        body=render_markdown(document.body),
    )


def _require_title(document: ContentDocument) -> str:
    if not document.meta.title:
        raise ContentError(f"{document.source_path} is missing a 'title'.")
    return document.meta.title


def _newest_first(item: Item) -> tuple[float, str]:
    return (-item.date.timestamp(), item.slug)


def _iter_content_files(directory: Path) -> Iterable[Path]:
    for path in sorted(directory.iterdir()):
        if path.is_file() and path.suffix.lower() in SUPPORTED_SUFFIXES:
            yield path
