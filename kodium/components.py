"""Reusable page building blocks shared by every page the theme renders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .content.models import Item, Site
from .context import PublishingContext
from .head import DEFAULT_FEED_PATH
from .markup import Child, Node, each, element, when

GENERATOR_NAME = "Python"
GENERATOR_URL = "https://www.python.org"


@dataclass(frozen=True, slots=True, init=False)
class Wrapper:
    """Layout container around arbitrary content."""

    content: tuple[Child, ...]

    def __init__(self, *content: Child) -> None:
        object.__setattr__(self, "content", content)

    def render(self) -> Node:
        return element("div", self.content, class_="wrapper")


@dataclass(frozen=True, slots=True)
class SiteHeader:
    """Site name plus, for multi-section sites, the section navigation.

    ``selected_section_id`` marks the navigation entry of the page's own section.
    """

    context: PublishingContext
    selected_section_id: Enum | None = None

    def render(self) -> Node:
        site = self.context.site
        section_ids = list(site.section_ids)
        return element(
            "header",
            Wrapper(
                element("a", site.name, href="/", class_="site-name"),
                when(len(section_ids) > 1, self._navigation(section_ids)),
            ),
        )

    def _navigation(self, section_ids: Sequence[Enum]) -> Node:
        return element("nav", element("ul", each(section_ids, self._navigation_entry)))

    def _navigation_entry(self, section_id: Enum) -> Node:
        section = self.context.section(section_id)
        selected = section_id is self.selected_section_id
        return element(
            "li",
            element("a", section.title, href=section.path, class_="selected" if selected else None),
        )


@dataclass(frozen=True, slots=True)
class SiteFooter:
    """Generator credit and a link to the RSS feed."""

    generator_name: str = GENERATOR_NAME
    generator_url: str = GENERATOR_URL
    feed_path: str = DEFAULT_FEED_PATH

    def render(self) -> Node:
        return element(
            "footer",
            element(
                "p",
                "Generated using ",
                element("a", self.generator_name, href=self.generator_url),
            ),
            element("p", element("a", "RSS feed", href=self.feed_path)),
        )


@dataclass(frozen=True, slots=True)
class ItemList:
    """List of item summaries in the order given; callers sort."""

    items: Sequence[Item]
    site: Site

    def render(self) -> Node:
        return element("ul", each(self.items, self._entry), class_="item-list")

    def _entry(self, item: Item) -> Node:
        return element(
            "li",
            element(
                "article",
                element("h1", element("a", item.title, href=item.path)),
                ItemTagList(item, self.site),
                element("p", item.description),
            ),
        )


@dataclass(frozen=True, slots=True)
class ItemTagList:
    """Links to the tag pages of one item, in the item's own tag order."""

    item: Item
    site: Site

    def render(self) -> Node:
        return element(
            "ul",
            each(
                self.item.tags,
                lambda tag: element("li", element("a", tag.label, href=self.site.path_for(tag))),
            ),
            class_="tag-list",
        )
