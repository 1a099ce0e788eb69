"""Immutable markup trees and the declarative builder used by the theme."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Protocol, TypeVar, Union, runtime_checkable

from markupsafe import Markup, escape

T = TypeVar("T")

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

DOCTYPE = "<!DOCTYPE html>"


@runtime_checkable
class Component(Protocol):
    """Reusable unit that renders itself into a single node."""

    def render(self) -> "Node": ...


Content = Union["Node", str]
Child = Union["Node", Component, str, None, Iterable["Child"]]


@dataclass(frozen=True, slots=True)
class Node:
    """A tagged element with ordered attributes and ordered children.

    Children are either nested nodes or strings. Plain strings are text and get
    escaped on output; :class:`markupsafe.Markup` strings are trusted markup and
    are emitted verbatim.
    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Content, ...] = ()

    def attribute(self, name: str) -> str | None:
        """Return the value of ``name`` or ``None`` when the attribute is not set."""
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple((self.attribute("class") or "").split())

    @property
    def elements(self) -> tuple["Node", ...]:
        """Direct children that are nodes, skipping text."""
        return tuple(child for child in self.children if isinstance(child, Node))

    def iter(self) -> Iterator["Node"]:
        """Walk this node and its descendants depth-first, in document order."""
        yield self
        for child in self.elements:
            yield from child.iter()

    def find_all(self, tag: str | None = None, class_name: str | None = None) -> list["Node"]:
        """Collect descendants (including this node) matching a tag and/or class."""
        return [
            node
            for node in self.iter()
            if (tag is None or node.tag == tag)
            and (class_name is None or class_name in node.classes)
        ]

    def find(self, tag: str | None = None, class_name: str | None = None) -> "Node | None":
        matches = self.find_all(tag, class_name)
        return matches[0] if matches else None

    def text(self) -> str:
        """Concatenate the text content of the subtree."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, Node):
                parts.append(child.text())
            elif isinstance(child, Markup):
                parts.append(child.striptags())
            else:
                parts.append(child)
        return "".join(parts)

    def render(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Document:
    """Root ``<html>`` node together with the language it declares."""

    root: Node
    language: str

    @property
    def head(self) -> Node | None:
        return self.root.find("head")

    @property
    def body(self) -> Node | None:
        return self.root.find("body")

    def render(self) -> str:
        return DOCTYPE + render(self.root)


def element(tag: str, *children: Child, **attributes: str | None) -> Node:
    """Build a node from a tag, nested child specs and keyword attributes.

    ``class_`` becomes ``class`` and underscores become hyphens
    (``aria_label`` -> ``aria-label``). Attributes set to ``None`` and children
    that are ``None``, empty strings or empty sequences are left out.
    """
    return Node(
        tag=tag,
        attributes=tuple(_normalize_attributes(attributes)),
        children=tuple(_flatten(children)),
    )


def each(values: Iterable[T], build: Callable[[T], Child]) -> tuple[Child, ...]:
    """Map every value to a child, preserving order."""
    return tuple(build(value) for value in values)


def when(condition: bool, *children: Child) -> tuple[Child, ...]:
    """Include ``children`` only when ``condition`` holds."""
    return children if condition else ()


def document(language: str, *children: Child) -> Document:
    """Build an ``<html lang=...>`` document around the given head and body."""
    return Document(root=element("html", *children, lang=language), language=language)


def render(content: Content) -> str:
    """Serialize a node (or a bare string) to markup text."""
    parts: list[str] = []
    _write(content, parts)
    return "".join(parts)


def _normalize_attributes(attributes: dict[str, str | None]) -> Iterator[tuple[str, str]]:
    for name, value in attributes.items():
        if value is None:
            continue
        yield name.rstrip("_").replace("_", "-"), str(value)


def _flatten(children: Iterable[Child]) -> Iterator[Content]:
    for child in children:
        if child is None:
            continue
        if isinstance(child, Node):
            yield child
        elif isinstance(child, str):
            if child:
                yield child
        elif isinstance(child, Document):
            raise TypeError("A Document cannot be nested; use its root node instead.")
        elif isinstance(child, Component):
            yield child.render()
        elif isinstance(child, Iterable):
            yield from _flatten(child)
        else:
            raise TypeError(f"Unsupported child of type {type(child).__name__!r}")


def _write(content: Content, parts: list[str]) -> None:
    if not isinstance(content, Node):
        parts.append(escape(content))
        return

    attributes = "".join(f' {name}="{escape(value)}"' for name, value in content.attributes)
    parts.append(f"<{content.tag}{attributes}>")
    if content.tag in VOID_ELEMENTS:
        return
    for child in content.children:
        _write(child, parts)
    parts.append(f"</{content.tag}>")
