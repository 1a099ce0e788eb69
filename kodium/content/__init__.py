"""Content model and source parsing for the Kodium website."""

from .metadata import ContentDocument, ContentMeta
from .models import Index, Item, Page, Section, SectionID, Site, Tag, TagDetailsPage, TagListPage
from .parsers import FrontMatterError, load_markdown_document

__all__ = [
    "ContentDocument",
    "ContentMeta",
    "FrontMatterError",
    "Index",
    "Item",
    "Page",
    "Section",
    "SectionID",
    "Site",
    "Tag",
    "TagDetailsPage",
    "TagListPage",
    "load_markdown_document",
]
