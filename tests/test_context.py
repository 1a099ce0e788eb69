from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

import pytest

from kodium.content import Index, Item, SectionID, Site, Tag
from kodium.context import PublishingContext


class StudioSection(str, Enum):
    POSTS = "posts"
    APPS = "apps"


class OtherSection(str, Enum):
    NEWS = "news"


def _site(section_ids: type[Enum] = SectionID) -> Site:
    return Site(url="http://kodium.mk", name="Kodium", description="Apps.", section_ids=section_ids)


def _item(slug: str, day: datetime, *tags: str, section_id: Enum = SectionID.POSTS) -> Item:
    return Item(
        section_id=section_id,
        slug=slug,
        title=slug.title(),
        date=day,
        tags=tuple(Tag(tag) for tag in tags),
    )


def test_assemble_creates_a_section_for_every_identifier() -> None:
    context = PublishingContext.assemble(_site(StudioSection))

    assert list(context.sections) == [StudioSection.POSTS, StudioSection.APPS]
    assert context.section(StudioSection.APPS).items == ()
    assert context.section(StudioSection.APPS).path == "/apps"
    assert context.index == Index(title="Kodium", description="Apps.")


def test_assemble_keeps_supplied_item_order_per_section() -> None:
    early = _item("early", datetime(2023, 1, 1, tzinfo=UTC))
    late = _item("late", datetime(2023, 6, 1, tzinfo=UTC))
    app = _item("app", datetime(2023, 3, 1, tzinfo=UTC), section_id=StudioSection.APPS)
    posts_early = _item("early", datetime(2023, 1, 1, tzinfo=UTC), section_id=StudioSection.POSTS)
    posts_late = _item("late", datetime(2023, 6, 1, tzinfo=UTC), section_id=StudioSection.POSTS)

    context = PublishingContext.assemble(
        _site(StudioSection), items=[posts_early, app, posts_late]
    )

    assert context.section(StudioSection.POSTS).items == (posts_early, posts_late)
    assert context.all_items() == [posts_early, posts_late, app]
    assert early.path == "/posts/early" and late.path == "/posts/late"


def test_assemble_rejects_items_from_undeclared_sections() -> None:
    stray = _item("stray", datetime(2023, 1, 1, tzinfo=UTC), section_id=OtherSection.NEWS)

    with pytest.raises(ValueError, match="stray"):
        PublishingContext.assemble(_site(), items=[stray])


def test_items_tagged_with_sorts_most_recent_first() -> None:
    january = _item("january", datetime(2023, 1, 1, tzinfo=UTC), "swift")
    june = _item("june", datetime(2023, 6, 1, tzinfo=UTC), "swift", "ios")
    other = _item("other", datetime(2023, 9, 1, tzinfo=UTC), "android")

    context = PublishingContext.assemble(_site(), items=[january, june, other])

    assert context.items_tagged_with(Tag("swift")) == [june, january]
    assert context.items_tagged_with(Tag("kotlin")) == []


def test_items_tagged_with_keeps_source_order_for_equal_dates() -> None:
    day = datetime(2023, 5, 5, tzinfo=UTC)
    first = _item("first", day, "swift")
    second = _item("second", day, "swift")
    third = _item("third", day, "swift")

    context = PublishingContext.assemble(_site(), items=[first, second, third])

    assert context.items_tagged_with(Tag("swift")) == [first, second, third]


def test_tag_pages_are_derived_from_item_tags() -> None:
    context = PublishingContext.assemble(
        _site(),
        items=[
            _item("a", datetime(2023, 1, 1, tzinfo=UTC), "swift", "ios"),
            _item("b", datetime(2023, 1, 2, tzinfo=UTC), "swift"),
        ],
    )

    assert context.all_tags == frozenset({Tag("swift"), Tag("ios")})
    tag_list = context.tag_list_page()
    assert tag_list.path == "/tags"
    assert [page.path for page in context.tag_details_pages()] == ["/tags/ios", "/tags/swift"]
    assert context.tag_details_pages()[0].title == "Tagged with ios"


def test_naive_dates_are_treated_as_utc() -> None:
    item = _item("naive", datetime(2023, 1, 1))

    assert item.date.tzinfo is not None


def test_tag_normalization_and_ordering() -> None:
    assert Tag("Swift UI").normalized() == "swift-ui"
    assert Tag("C++ & Kotlin!").normalized() == "c--kotlin"
    assert sorted([Tag("swift"), Tag("android"), Tag("ios")]) == [
        Tag("android"),
        Tag("ios"),
        Tag("swift"),
    ]
    assert Tag("swift") == Tag("swift")
