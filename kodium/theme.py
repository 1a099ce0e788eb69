"""The Kodium theme: one page mapper per kind of generated page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .components import ItemList, ItemTagList, SiteFooter, SiteHeader, Wrapper
from .content.models import Index, Item, Page, Section, TagDetailsPage, TagListPage
from .context import PublishingContext
from .head import head_for
from .markup import Document, document, each, element

CONTACT_EMAIL = "kodium.mk@gmail.com"

INTRODUCTION = (
    "Welcome to Kodium, where innovation meets mobility! We're a dynamic mobile app "
    "development company committed to crafting outstanding digital experiences. Our goal "
    "is to empower clients with cutting-edge mobile solutions that captivate users worldwide.",
    "Kodium specializes in creating visually stunning and highly functional mobile apps. "
    "Our team's expertise spans various platforms, ensuring your app reaches a broad "
    "audience. We prioritize user-centric design, utilize the latest technology, and offer "
    "end-to-end services, making us your trusted partner for mobile success. Join us in "
    "shaping the future of mobile technology with Kodium!",
)


class HTMLFactory(Protocol):
    """Page mappers a theme provides; tag pages may decline to render."""

    def make_index_html(self, index: Index, context: PublishingContext) -> Document: ...

    def make_section_html(self, section: Section, context: PublishingContext) -> Document: ...

    def make_item_html(self, item: Item, context: PublishingContext) -> Document: ...

    def make_page_html(self, page: Page, context: PublishingContext) -> Document: ...

    def make_tag_list_html(
        self, page: TagListPage, context: PublishingContext
    ) -> Document | None: ...

    def make_tag_details_html(
        self, page: TagDetailsPage, context: PublishingContext
    ) -> Document | None: ...


class KodiumHTMLFactory:
    """Maps site content to documents for the Kodium marketing site."""

    def make_index_html(self, index: Index, context: PublishingContext) -> Document:
        site = context.site
        return document(
            site.language,
            head_for(index, site),
            element(
                "body",
                SiteHeader(context),
                Wrapper(
                    element("h1", index.title),
                    element("p", site.description, class_="description"),
                    element("h2", "Introduction"),
                    each(INTRODUCTION, lambda text: element("p", text, class_="description")),
                    element("h2", "Contact"),
                    element(
                        "p",
                        "Write us at ",
                        element("a", CONTACT_EMAIL, href=f"mailto:{CONTACT_EMAIL}"),
                    ),
                ),
                SiteFooter(),
            ),
        )

    def make_section_html(self, section: Section, context: PublishingContext) -> Document:
        site = context.site
        return document(
            site.language,
            head_for(section, site),
            element(
                "body",
                SiteHeader(context, section.id),
                Wrapper(
                    element("h1", section.title),
                    ItemList(section.items, site),
                ),
                SiteFooter(),
            ),
        )

    def make_item_html(self, item: Item, context: PublishingContext) -> Document:
        site = context.site
        return document(
            site.language,
            head_for(item, site),
            element(
                "body",
                SiteHeader(context, item.section_id),
                Wrapper(
                    element(
                        "article",
                        element("div", item.body, class_="content"),
                        element("span", "Tagged with: "),
                        ItemTagList(item, site),
                    )
                ),
                SiteFooter(),
                class_="item-page",
            ),
        )

    def make_page_html(self, page: Page, context: PublishingContext) -> Document:
        site = context.site
        return document(
            site.language,
            head_for(page, site),
            element(
                "body",
                SiteHeader(context),
                Wrapper(page.body),
                SiteFooter(),
            ),
        )

    def make_tag_list_html(
        self, page: TagListPage, context: PublishingContext
    ) -> Document | None:
        if not page.tags:
            return None

        site = context.site
        return document(
            site.language,
            head_for(page, site),
            element(
                "body",
                SiteHeader(context),
                Wrapper(
                    element("h1", "Browse all tags"),
                    element(
                        "ul",
                        each(
                            sorted(page.tags),
                            lambda tag: element(
                                "li",
                                element("a", tag.label, href=site.path_for(tag)),
                                class_="tag",
                            ),
                        ),
                        class_="all-tags",
                    ),
                ),
                SiteFooter(),
            ),
        )

    def make_tag_details_html(
        self, page: TagDetailsPage, context: PublishingContext
    ) -> Document | None:
        items = context.items_tagged_with(page.tag)
        if not items:
            return None

        site = context.site
        return document(
            site.language,
            head_for(page, site),
            element(
                "body",
                SiteHeader(context),
                Wrapper(
                    element(
                        "h1",
                        "Tagged with ",
                        element("span", page.tag.label, class_="tag"),
                    ),
                    element("a", "Browse all tags", href=site.tag_list_path, class_="browse-all"),
                    ItemList(items, site),
                ),
                SiteFooter(),
            ),
        )


@dataclass(frozen=True, slots=True)
class Theme:
    """Page mappers together with the static resources they expect to be published."""

    html_factory: HTMLFactory
    resource_paths: tuple[str, ...] = field(default_factory=tuple)


KODIUM_THEME = Theme(
    html_factory=KodiumHTMLFactory(),
    resource_paths=("styles.css",),
)
