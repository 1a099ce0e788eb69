"""Render every page through a theme and write the site into the output directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Iterator

from .config import Config
from .context import PublishingContext
from .feeds import write_feed
from .markup import Document
from .sitemap import write_sitemap
from .theme import KODIUM_THEME, Theme

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "kodium.resources"
INDEX_FILENAME = "index.html"


@dataclass(slots=True)
class PublishResult:
    """Files produced by a publishing run."""

    pages: list[Path] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    resources: list[Path] = field(default_factory=list)
    feed: Path | None = None
    sitemap: Path | None = None

    @property
    def total_files(self) -> int:
        extras = [path for path in (self.feed, self.sitemap) if path is not None]
        return len(self.pages) + len(self.resources) + len(extras)


def publish(
    context: PublishingContext,
    config: Config,
    theme: Theme = KODIUM_THEME,
) -> PublishResult:
    """Write documents, theme resources, the RSS feed and the sitemap for ``context``.

    Raises ``ValueError`` before touching the output directory when two pages
    would be written to the same path.
    """
    output_root = config.output_dir
    if config.content_dir.resolve().is_relative_to(output_root.resolve()):
        msg = f"Output directory {output_root} must not contain the content directory."
        raise ValueError(msg)
    result = PublishResult()
    pending: list[tuple[str, Document]] = []
    claimed = {name: f"theme resource '{name}'" for name in theme.resource_paths}
    if config.feed.enabled:
        claimed[config.feed.path] = "RSS feed"
    if config.sitemap.enabled:
        claimed[config.sitemap.path] = "sitemap"

    for path, source, rendered in render_documents(context, theme):
        if rendered is None:
            logger.debug("Nothing to publish for %s; skipping.", path)
            result.skipped.append(path)
            continue
        key = path.strip("/")
        if key in claimed:
            msg = f"{source} and {claimed[key]} both publish to '/{key}'."
            raise ValueError(msg)
        claimed[key] = source
        pending.append((path, rendered))

    reset_directory(output_root)
    for path, rendered in pending:
        result.pages.append(write_document(rendered, output_root, path))

    result.resources.extend(copy_resources(theme, output_root))
    result.feed = write_feed(context, output_root, config.feed)
    result.sitemap = write_sitemap(context, output_root, config.sitemap)
    logger.info(
        "Published %d page(s) and %d resource(s) to %s",
        len(result.pages),
        len(result.resources),
        output_root,
    )
    return result


def render_documents(
    context: PublishingContext, theme: Theme
) -> Iterator[tuple[str, str, Document | None]]:
    """Yield ``(site path, source, document)`` for every page the site exposes.

    ``source`` names the content a page was generated for, for error messages.
    """
    factory = theme.html_factory
    yield context.index.path, "index", factory.make_index_html(context.index, context)

    for section_id in context.site.section_ids:
        section = context.section(section_id)
        source = f"section '{section_id.value}'"
        yield section.path, source, factory.make_section_html(section, context)
        for item in section.items:
            source = f"item '{item.path.lstrip('/')}'"
            yield item.path, source, factory.make_item_html(item, context)

    for page in context.pages:
        yield page.path, f"page '{page.slug}'", factory.make_page_html(page, context)

    tag_list = context.tag_list_page()
    yield tag_list.path, "tag list", factory.make_tag_list_html(tag_list, context)
    for tag_page in context.tag_details_pages():
        source = f"tag '{tag_page.tag.label}'"
        yield tag_page.path, source, factory.make_tag_details_html(tag_page, context)


def write_document(document: Document, output_root: Path, site_path: str) -> Path:
    """Write ``document`` to ``<output_root>/<site_path>/index.html``."""
    relative = Path(site_path.strip("/"))
    if ".." in relative.parts:
        msg = f"Page path '{site_path}' must stay inside the output directory."
        raise ValueError(msg)
    destination = output_root / relative / INDEX_FILENAME
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(document.render(), encoding="utf-8")
    return destination


def copy_resources(theme: Theme, output_root: Path) -> list[Path]:
    """Copy the theme's packaged resources into the output directory."""
    staged: list[Path] = []
    package_root = resources.files(RESOURCE_PACKAGE)
    for name in theme.resource_paths:
        source = package_root.joinpath(name)
        if not source.is_file():
            logger.warning("Theme resource %s not found; skipping.", name)
            continue
        destination = output_root / name
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(source.read_bytes())
        staged.append(destination)
    return staged


def reset_directory(path: Path) -> None:
    """Remove a directory and recreate it empty."""
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)
