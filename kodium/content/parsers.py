"""Parse Markdown source files into `ContentDocument` instances."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .metadata import ContentDocument, ContentMeta


class FrontMatterError(ValueError):
    """Raised when a markdown file has malformed front matter."""


def load_markdown_document(path: str | Path) -> ContentDocument:
    """Load a markdown file with YAML front matter into a content document."""
    source_path = Path(path)
    text = source_path.read_text(encoding="utf-8")
    front_matter, body = _split_front_matter(text, source_path)

    data = dict(front_matter)
    if "slug" not in data:
        data["slug"] = source_path.stem.replace(" ", "-").lower()

    try:
        meta = ContentMeta(**data)
    except ValidationError as exc:
        raise FrontMatterError(f"Invalid metadata in {source_path}") from exc

    return ContentDocument(meta=meta, body=body.strip(), source_path=str(source_path))


def _split_front_matter(text: str, source_path: Path) -> tuple[dict[str, Any], str]:
    lines = text.splitlines()
    if not lines:
        return {}, ""
    if lines[0].strip() != "---":
        return {}, text

    front_lines: list[str] = []
    for idx, line in enumerate(lines[1:], start=1):
        if line.strip() == "---":
            try:
                data = yaml.safe_load("\n".join(front_lines)) or {}
            except yaml.YAMLError as exc:
                raise FrontMatterError(f"Unreadable front matter in {source_path}") from exc
            if not isinstance(data, dict):
                raise FrontMatterError(f"Front matter in {source_path} must be a mapping.")
            body = "\n".join(lines[idx + 1 :])
            return data, body
        front_lines.append(line)
    raise FrontMatterError(f"Closing front matter delimiter '---' missing in {source_path}.")
