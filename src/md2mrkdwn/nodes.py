"""
Document Tree Nodes

Typed nodes produced by the parser adapter and consumed by the renderer and
the block segmenter. The set is closed: constructs without a dedicated type
(tables, images, raw HTML, ...) become ``Unsupported``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Root:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class BlockQuote:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Break:
    pass


@dataclass(frozen=True)
class Code:
    value: str = ""


@dataclass(frozen=True)
class Delete:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Emphasis:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Heading:
    depth: int = 1
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class InlineCode:
    value: str = ""


@dataclass(frozen=True)
class Link:
    url: str = ""
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class List:
    ordered: bool = False
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class ListItem:
    # None: plain item, True/False: task item state
    checked: Optional[bool] = None
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Paragraph:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Strong:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Text:
    value: str = ""


@dataclass(frozen=True)
class ThematicBreak:
    pass


@dataclass(frozen=True)
class Unsupported:
    """A construct the converter recognises but does not render."""
    kind: str = ""


Node = Union[
    Root,
    BlockQuote,
    Break,
    Code,
    Delete,
    Emphasis,
    Heading,
    InlineCode,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
    Unsupported,
]
