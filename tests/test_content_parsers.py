from datetime import UTC, datetime
from pathlib import Path

import pytest

from kodium.content.parsers import FrontMatterError, load_markdown_document

FIXTURE_DIR = Path(__file__).parent / "fixtures" / "content" / "posts"


def test_loads_complete_document() -> None:
    path = FIXTURE_DIR / "example.md"
    document = load_markdown_document(path)

    assert document.slug == "example-post"
    assert document.meta.title == "Example Post"
    assert document.meta.description == "A post used by the parser tests."
    assert document.meta.tags == ["testing", "examples"]
    assert document.meta.date == datetime(2023, 6, 1, 9, 30, tzinfo=UTC)
    assert "Hello world" in document.body


def test_slug_defaults_to_filename_when_missing() -> None:
    path = FIXTURE_DIR / "minimal.md"
    document = load_markdown_document(path)

    assert document.slug == "minimal"
    assert document.meta.title == "Minimal Post"
    assert document.meta.date is None
    assert document.meta.tags == []


def test_bare_dates_and_comma_separated_tags(tmp_path: Path) -> None:
    source = tmp_path / "Release Notes.md"
    source.write_text(
        "---\ntitle: Release\ndate: 2023-01-15\ntags: swift, ios ,\n---\nBody",
        encoding="utf-8",
    )

    document = load_markdown_document(source)

    assert document.slug == "release-notes"
    assert document.meta.date == datetime(2023, 1, 15, tzinfo=UTC)
    assert document.meta.tags == ["swift", "ios"]


def test_file_without_front_matter_uses_whole_text_as_body(tmp_path: Path) -> None:
    source = tmp_path / "plain.md"
    source.write_text("# Heading\n\nText", encoding="utf-8")

    document = load_markdown_document(source)

    assert document.meta.title is None
    assert document.body == "# Heading\n\nText"


def test_rejects_missing_front_matter_end(tmp_path: Path) -> None:
    markdown = "---\ntitle: Missing\n"
    tmp = tmp_path / "broken.md"
    tmp.write_text(markdown, encoding="utf-8")
    with pytest.raises(FrontMatterError):
        load_markdown_document(tmp)


def test_rejects_invalid_metadata(tmp_path: Path) -> None:
    tmp = tmp_path / "bad.md"
    tmp.write_text('---\nslug: "Bad Slug"\ntitle: Invalid\n---\nBody', encoding="utf-8")

    with pytest.raises(FrontMatterError) as excinfo:
        load_markdown_document(tmp)

    assert "bad.md" in str(excinfo.value)


def test_rejects_non_mapping_front_matter(tmp_path: Path) -> None:
    tmp = tmp_path / "list.md"
    tmp.write_text("---\n- one\n- two\n---\nBody", encoding="utf-8")

    with pytest.raises(FrontMatterError):
        load_markdown_document(tmp)
