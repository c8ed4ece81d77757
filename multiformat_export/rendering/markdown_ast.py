"""
Markdown AST (Abstract Syntax Tree) for Rendering

The typed tree the renderers walk. It is produced by the AST builder from
markdown-it tokens and is read-only for every renderer.

Node kinds form a closed set:

    Block:   Root, Heading, Paragraph, List, ListItem, Code
    Inline:  Text, Strong, Emphasis, InlineCode, Break
    Other:   Unsupported (block quotes, links, images, tables, rules, HTML...)

Renderers dispatch with an isinstance chain over the known kinds and one
explicit default arm for Unsupported.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Sequence, Union


# ============================================================================
# Node Kinds
# ============================================================================

class NodeKind(Enum):
    """Kinds of nodes in the Markdown AST."""
    ROOT = "root"

    # Blocks
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "list_item"
    CODE = "code"

    # Inlines
    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    INLINE_CODE = "inline_code"
    BREAK = "break"

    # Anything the renderers do not understand
    UNSUPPORTED = "unsupported"


# ============================================================================
# Node Classes
# ============================================================================

@dataclass
class Root:
    """Document root."""
    children: "list[Node]" = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.ROOT


@dataclass
class Heading:
    """ATX or setext heading, depth 1-6."""
    depth: int
    children: "list[Node]" = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    def __post_init__(self):
        if not 1 <= self.depth <= 6:
            raise ValueError(f"Heading depth must be 1-6, got {self.depth}")


@dataclass
class Paragraph:
    """Paragraph of inline content."""
    children: "list[Node]" = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH


@dataclass
class List:
    """Ordered or bullet list. `start` is the first ordinal of an ordered list."""
    ordered: bool
    start: Optional[int] = None
    children: "list[Node]" = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.LIST


@dataclass
class ListItem:
    """One item of a list; holds block children."""
    children: "list[Node]" = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM


@dataclass
class Code:
    """Fenced or indented code block."""
    value: str
    language: Optional[str] = None

    kind: ClassVar[NodeKind] = NodeKind.CODE


@dataclass
class Text:
    """Literal text. Soft line breaks are kept as '\\n'."""
    value: str

    kind: ClassVar[NodeKind] = NodeKind.TEXT


@dataclass
class Strong:
    """Strong emphasis (**bold**)."""
    children: "list[Node]" = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.STRONG


@dataclass
class Emphasis:
    """Emphasis (*italic*)."""
    children: "list[Node]" = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS


@dataclass
class InlineCode:
    """Code span."""
    value: str

    kind: ClassVar[NodeKind] = NodeKind.INLINE_CODE


@dataclass
class Break:
    """Hard line break."""

    kind: ClassVar[NodeKind] = NodeKind.BREAK


@dataclass
class Unsupported:
    """
    Node kind the renderers have no dedicated handling for.

    `name` is the parser's node type (e.g. "blockquote", "link").
    Children and literal content are kept so inline renderers can flatten them.
    """
    name: str
    children: "list[Node]" = field(default_factory=list)
    value: str = ""

    kind: ClassVar[NodeKind] = NodeKind.UNSUPPORTED


Node = Union[
    Root, Heading, Paragraph, List, ListItem, Code,
    Text, Strong, Emphasis, InlineCode, Break, Unsupported,
]

INLINE_NODE_TYPES = (Text, Strong, Emphasis, InlineCode, Break)


# ============================================================================
# Helpers
# ============================================================================

def plain_text(nodes: Sequence[Node]) -> str:
    """
    Flatten nodes to plain text.

    Text and InlineCode contribute their values, Break becomes a newline,
    container nodes contribute their children. Everything else is dropped.
    """
    parts = []
    for node in nodes:
        if isinstance(node, (Text, InlineCode)):
            parts.append(node.value)
        elif isinstance(node, Break):
            parts.append("\n")
        elif isinstance(node, (Strong, Emphasis, Unsupported, Paragraph, Heading)):
            parts.append(plain_text(node.children))
    return "".join(parts)


def count_nodes(node: Node) -> int:
    """Count a node and all of its descendants."""
    children = getattr(node, "children", None) or []
    return 1 + sum(count_nodes(child) for child in children)
