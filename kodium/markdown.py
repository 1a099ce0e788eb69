"""Markdown rendering for content bodies."""

from __future__ import annotations

from functools import lru_cache

from markdown_it import MarkdownIt
from markupsafe import Markup
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin


@lru_cache(maxsize=1)
def _renderer() -> MarkdownIt:
    """Configure and cache a CommonMark renderer with tables and footnotes."""
    md = MarkdownIt("commonmark", {"html": True, "typographer": True})
    md.enable("table").enable("strikethrough")
    md.use(deflist_plugin)
    md.use(footnote_plugin)
    return md


def render_markdown(text: str) -> Markup:
    """Render Markdown to trusted HTML ready to embed in a markup tree."""
    if not text.strip():
        return Markup("")
    return Markup(_renderer().render(text).strip())
