"""Read-only view over the assembled site content handed to the theme."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping

from .content.models import Index, Item, Page, Section, Site, Tag, TagDetailsPage, TagListPage


@dataclass(frozen=True, slots=True)
class PublishingContext:
    """Site, sections (one per declared section identifier), pages and the index."""

    site: Site
    index: Index
    sections: Mapping[Enum, Section]
    pages: tuple[Page, ...] = ()

    @classmethod
    def assemble(
        cls,
        site: Site,
        *,
        index: Index | None = None,
        items: Iterable[Item] = (),
        pages: Iterable[Page] = (),
        section_titles: Mapping[Enum, str] | None = None,
        section_descriptions: Mapping[Enum, str] | None = None,
    ) -> "PublishingContext":
        """Group ``items`` into sections, keeping the order they were supplied in.

        Every declared section gets a :class:`Section`, even when it has no items.
        """
        declared = list(site.section_ids)
        grouped: dict[Enum, list[Item]] = {section_id: [] for section_id in declared}
        for item in items:
            if not isinstance(item.section_id, site.section_ids):
                raise ValueError(
                    f"Item '{item.slug}' belongs to undeclared section {item.section_id!r}."
                )
            grouped[item.section_id].append(item)

        titles = section_titles or {}
        descriptions = section_descriptions or {}
        sections = {
            section_id: Section(
                id=section_id,
                title=titles.get(section_id) or default_section_title(section_id),
                items=tuple(grouped[section_id]),
                description=descriptions.get(section_id, ""),
            )
            for section_id in declared
        }
        return cls(
            site=site,
            index=index or Index(title=site.name, description=site.description),
            sections=sections,
            pages=tuple(pages),
        )

    def section(self, section_id: Enum) -> Section:
        return self.sections[section_id]

    def all_items(self) -> list[Item]:
        """Every item, section by section in declaration order."""
        return [item for section_id in self.site.section_ids for item in self.sections[section_id].items]

    def items_tagged_with(self, tag: Tag) -> list[Item]:
        """Items carrying ``tag``, most recent first; equal dates keep `all_items` order."""
        tagged = [item for item in self.all_items() if tag in item.tags]
        return sorted(tagged, key=lambda item: item.date, reverse=True)

    @property
    def all_tags(self) -> frozenset[Tag]:
        return frozenset(tag for item in self.all_items() for tag in item.tags)

    def tag_list_page(self) -> TagListPage:
        return TagListPage(tags=self.all_tags, path=self.site.tag_list_path)

    def tag_details_pages(self) -> list[TagDetailsPage]:
        return [
            TagDetailsPage(tag=tag, path=self.site.path_for(tag))
            for tag in sorted(self.all_tags)
        ]


def default_section_title(section_id: Enum) -> str:
    return str(section_id.value).replace("-", " ").capitalize()
