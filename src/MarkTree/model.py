from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterator, Optional, Tuple


@dataclass(frozen=True)
class InlineElement:
    """Base class for inline nodes."""


@dataclass(frozen=True)
class Link(InlineElement):
    label: str
    url: str


@dataclass(frozen=True)
class Image(InlineElement):
    label: str
    url: str


@dataclass(frozen=True)
class InlineCode(InlineElement):
    code: str
    language: Optional[str] = None


@dataclass(frozen=True)
class Bold(InlineElement):
    text: str


@dataclass(frozen=True)
class Italic(InlineElement):
    text: str


@dataclass(frozen=True)
class Plain(InlineElement):
    text: str


# One decoded line, in rendering order.
MarkdownText = Tuple[InlineElement, ...]


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Heading(Block):
    level: int
    content: MarkdownText


@dataclass(frozen=True)
class OrderedList(Block):
    items: Tuple[MarkdownText, ...]


@dataclass(frozen=True)
class UnorderedList(Block):
    items: Tuple[MarkdownText, ...]


@dataclass(frozen=True)
class Quote(Block):
    lines: Tuple[MarkdownText, ...]


@dataclass(frozen=True)
class CodeBlock(Block):
    code: str
    language: Optional[str] = None


@dataclass(frozen=True)
class Text(Block):
    """A single paragraph line; blank lines have empty content."""

    content: MarkdownText = ()


@dataclass(frozen=True)
class Document:
    blocks: Tuple[Block, ...]

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)


def as_data(node: Any) -> Any:
    """Convert a node (or a tuple of nodes) into plain dicts and lists.

    Every dataclass becomes a mapping with a ``type`` key naming its class, which
    keeps the output readable when dumped as YAML.
    """
    if isinstance(node, Document):
        return [as_data(block) for block in node.blocks]
    if isinstance(node, (InlineElement, Block)):
        data: dict[str, Any] = {"type": type(node).__name__}
        for item in fields(node):
            data[item.name] = as_data(getattr(node, item.name))
        return data
    if isinstance(node, tuple):
        return [as_data(item) for item in node]
    return node
