"""RSS feed generation for the published items."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime as format_rfc2822
from pathlib import Path
from typing import Sequence

from markupsafe import escape

from .config import FeedConfig
from .context import PublishingContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FeedEntry:
    """Normalized feed entry derived from an item."""

    title: str
    url: str
    summary: str
    tags: list[str]
    published: datetime

    @property
    def identifier(self) -> str:
        return self.url


def write_feed(context: PublishingContext, output_dir: Path, settings: FeedConfig) -> Path | None:
    """Write the RSS feed for the most recent items; return its path, if written."""
    if not settings.enabled:
        return None

    entries = collect_entries(context, limit=settings.limit)
    destination = output_dir / settings.path
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_rss(context, entries), encoding="utf-8")
    logger.info("Wrote RSS feed with %d item(s) to %s", len(entries), destination)
    return destination


def collect_entries(context: PublishingContext, *, limit: int) -> list[FeedEntry]:
    site = context.site
    collected = [
        FeedEntry(
            title=item.title,
            url=site.url_for(item.path),
            summary=item.description,
            tags=[tag.label for tag in item.tags],
            published=item.date,
        )
        for item in context.all_items()
    ]
    collected.sort(key=lambda entry: entry.published, reverse=True)
    return collected[:limit]


def render_rss(context: PublishingContext, entries: Sequence[FeedEntry]) -> str:
    site = context.site
    updated = entries[0].published if entries else datetime.now(timezone.utc)
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0">',
        "  <channel>",
        f"    <title>{escape(site.name)}</title>",
        f"    <link>{escape(site.url_for('/'))}</link>",
        f"    <description>{escape(site.description)}</description>",
        f"    <language>{escape(site.language)}</language>",
        f"    <lastBuildDate>{_format_rfc2822(updated)}</lastBuildDate>",
    ]

    for entry in entries:
        parts.extend(
            [
                "    <item>",
                f"      <title>{escape(entry.title)}</title>",
                f"      <link>{escape(entry.url)}</link>",
                f'      <guid isPermaLink="true">{escape(entry.identifier)}</guid>',
                f"      <pubDate>{_format_rfc2822(entry.published)}</pubDate>",
            ]
        )
        if entry.summary:
            parts.append(f"      <description>{escape(entry.summary)}</description>")
        for tag in entry.tags:
            parts.append(f"      <category>{escape(tag)}</category>")
        parts.append("    </item>")

    parts.extend(["  </channel>", "</rss>"])
    return "\n".join(parts) + "\n"


def _format_rfc2822(value: datetime) -> str:
    normalized = value
    if normalized.tzinfo is None:
        normalized = normalized.replace(tzinfo=timezone.utc)
    return format_rfc2822(normalized.astimezone(timezone.utc))
