"""Layout tree for printable itineraries.

Backends map these nodes onto their own primitives. An ``AtomicBlock`` must
never be split across a page boundary; a ``Section`` may break between its
children.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Text:
    content: str
    style: str = "body"  # title | subtitle | heading | strong | body | muted | small


@dataclass
class Badge:
    label: str
    tone: str = "default"  # default | primary | success | accent


@dataclass
class Icon:
    name: str


@dataclass
class Row:
    """Inline run of text, badges and icons."""

    children: list = field(default_factory=list)


@dataclass
class AtomicBlock:
    role: str
    children: list = field(default_factory=list)
    kind: str | None = None
    keep_with_next: bool = False


@dataclass
class Section:
    role: str
    children: list = field(default_factory=list)


@dataclass
class Document:
    title: str
    children: list = field(default_factory=list)


def walk(node) -> Iterator:
    yield node
    for child in getattr(node, "children", []):
        yield from walk(child)


def atomic_blocks(node, role: str | None = None) -> list[AtomicBlock]:
    return [
        n for n in walk(node)
        if isinstance(n, AtomicBlock) and (role is None or n.role == role)
    ]


def plain_text(node) -> str:
    """All text and badge labels below a node, space separated."""
    parts = []
    for n in walk(node):
        if isinstance(n, Text):
            parts.append(n.content)
        elif isinstance(n, Badge):
            parts.append(n.label)
    return " ".join(parts)
