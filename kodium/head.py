"""Build the `<head>` element shared by every generated page."""

from __future__ import annotations

from typing import Protocol, Sequence

from .content.models import Site
from .markup import Node, each, element, when

DEFAULT_STYLESHEETS: tuple[str, ...] = ("/styles.css",)
DEFAULT_FAVICON = "/images/favicon.png"
DEFAULT_FEED_PATH = "/feed.rss"


class Location(Protocol):
    """Anything a page can be generated for."""

    @property
    def path(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def description(self) -> str: ...


def page_title(location: Location, site: Site) -> str:
    title = location.title.strip()
    if not title or title == site.name:
        return site.name
    return f"{title} | {site.name}"


def head_for(
    location: Location,
    site: Site,
    *,
    stylesheet_paths: Sequence[str] = DEFAULT_STYLESHEETS,
    feed_path: str | None = DEFAULT_FEED_PATH,
    favicon_path: str | None = DEFAULT_FAVICON,
) -> Node:
    """Render title, description, social and link metadata for ``location``."""
    title = page_title(location, site)
    description = location.description.strip() or site.description
    image_url = site.url_for(site.image_path) if site.image_path else None

    return element(
        "head",
        element("meta", charset="UTF-8"),
        element("meta", name="og:site_name", content=site.name),
        element("link", rel="canonical", href=site.url_for(location.path)),
        element("meta", name="twitter:url", content=site.url_for(location.path)),
        element("meta", name="og:url", content=site.url_for(location.path)),
        element("title", title),
        element("meta", name="twitter:title", content=title),
        element("meta", name="og:title", content=title),
        element("meta", name="description", content=description),
        element("meta", name="twitter:description", content=description),
        element("meta", name="og:description", content=description),
        element("meta", name="twitter:card", content="summary"),
        each(
            stylesheet_paths,
            lambda path: element("link", rel="stylesheet", href=path, type="text/css"),
        ),
        element("meta", name="viewport", content="width=device-width, initial-scale=1.0"),
        when(
            favicon_path is not None,
            element("link", rel="shortcut icon", href=favicon_path, type="image/png"),
        ),
        when(
            feed_path is not None,
            element(
                "link",
                rel="alternate",
                href=feed_path,
                type="application/rss+xml",
                title=f"Subscribe to {site.name}",
            ),
        ),
        when(
            image_url is not None,
            element("meta", name="twitter:image", content=image_url),
            element("meta", name="og:image", content=image_url),
        ),
    )
