"""sitemap.xml generation for the published pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Sequence

from markupsafe import escape

from .config import SitemapConfig
from .context import PublishingContext

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(slots=True)
class SitemapEntry:
    """One ``<url>`` element of the sitemap."""

    url: str
    changefreq: str
    priority: float
    modified: datetime | None = None


def write_sitemap(context: PublishingContext, output_dir: Path, settings: SitemapConfig) -> Path | None:
    """Write the sitemap for every page of the site; return its path, if written."""
    if not settings.enabled:
        return None

    entries = collect_entries(context)
    destination = output_dir / settings.path
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_sitemap(entries), encoding="utf-8")
    logger.info("Wrote sitemap with %d URL(s) to %s", len(entries), destination)
    return destination


def collect_entries(context: PublishingContext) -> list[SitemapEntry]:
    """Sitemap entries in publishing order.

    Tag pages are listed only when some item carries a tag, matching the pages
    the publisher actually writes.
    """
    site = context.site
    entries = [
        SitemapEntry(
            url=site.url_for(context.index.path),
            changefreq="daily",
            priority=1.0,
            modified=_latest(item.date for item in context.all_items()),
        )
    ]

    for section_id in site.section_ids:
        section = context.section(section_id)
        entries.append(
            SitemapEntry(
                url=site.url_for(section.path),
                changefreq="daily",
                priority=1.0,
                modified=_latest(item.date for item in section.items),
            )
        )
        entries.extend(
            SitemapEntry(
                url=site.url_for(item.path),
                changefreq="monthly",
                priority=0.5,
                modified=item.date,
            )
            for item in section.items
        )

    entries.extend(
        SitemapEntry(url=site.url_for(page.path), changefreq="monthly", priority=0.5)
        for page in context.pages
    )

    if context.all_tags:
        entries.append(
            SitemapEntry(url=site.url_for(site.tag_list_path), changefreq="weekly", priority=0.5)
        )
        for tag_page in context.tag_details_pages():
            entries.append(
                SitemapEntry(
                    url=site.url_for(tag_page.path),
                    changefreq="weekly",
                    priority=0.5,
                    modified=_latest(item.date for item in context.items_tagged_with(tag_page.tag)),
                )
            )
    return entries


def render_sitemap(entries: Sequence[SitemapEntry]) -> str:
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">',
    ]
    for entry in entries:
        parts.extend(
            [
                "  <url>",
                f"    <loc>{escape(entry.url)}</loc>",
                f"    <changefreq>{entry.changefreq}</changefreq>",
                f"    <priority>{entry.priority:.1f}</priority>",
            ]
        )
        if entry.modified is not None:
            parts.append(f"    <lastmod>{_format_date(entry.modified)}</lastmod>")
        parts.append("  </url>")
    parts.append("</urlset>")
    return "\n".join(parts) + "\n"


def _latest(dates: Iterable[datetime]) -> datetime | None:
    return max(dates, default=None)


def _format_date(value: datetime) -> str:
    normalized = value
    if normalized.tzinfo is None:
        normalized = normalized.replace(tzinfo=timezone.utc)
    return normalized.astimezone(timezone.utc).date().isoformat()
