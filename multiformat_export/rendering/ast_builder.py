"""
AST Builder - Converts markdown-it Tokens to the Markdown AST

Flow:
    Markdown text → markdown-it (CommonMark) → SyntaxTreeNode → ASTBuilder → Root

Responsibilities:
- Map markdown-it node types to the closed set of AST node kinds
- Fold soft line breaks into the surrounding text as '\\n' and merge
  adjacent text fragments, so "**Title**\\nbody" becomes [Strong, Text("\\nbody")]
- Keep everything else as Unsupported, with its children
"""

from typing import List, Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from multiformat_export.errors import MarkdownError
from multiformat_export.rendering.markdown_ast import (
    Root,
    Heading,
    Paragraph,
    List as ListNode,
    ListItem,
    Code,
    Text,
    Strong,
    Emphasis,
    InlineCode,
    Break,
    Unsupported,
    Node,
    count_nodes,
)
from config.logging_config import get_logger

logger = get_logger(__name__)


def create_parser() -> MarkdownIt:
    """Create configured markdown-it parser."""
    return MarkdownIt("commonmark")


# Singleton parser instance
_parser: Optional[MarkdownIt] = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


class ASTBuilder:
    """
    Builds the Markdown AST from Markdown source.

    Usage:
        builder = ASTBuilder()
        root = builder.build("# Title\\n\\nBody")
    """

    def __init__(self, parser: Optional[MarkdownIt] = None):
        self.parser = parser or get_parser()

    def build(self, text: str) -> Root:
        """
        Parse Markdown text into a Root node.

        Raises:
            MarkdownError: If the parser fails
        """
        try:
            tokens = self.parser.parse(text)
            tree = SyntaxTreeNode(tokens)
        except Exception as e:
            logger.error(f"Markdown parse failed: {e}")
            raise MarkdownError(str(e)) from e

        root = Root(children=self._convert_blocks(tree.children))
        logger.debug(f"Built Markdown AST: {len(root.children)} blocks, "
                     f"{count_nodes(root)} nodes")
        return root

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _convert_blocks(self, nodes: List[SyntaxTreeNode]) -> List[Node]:
        return [self._convert_block(node) for node in nodes]

    def _convert_block(self, node: SyntaxTreeNode) -> Node:
        node_type = node.type

        if node_type == "heading":
            return Heading(depth=int(node.tag[1:]), children=self._inline_children(node))

        if node_type == "paragraph":
            return Paragraph(children=self._inline_children(node))

        if node_type in ("bullet_list", "ordered_list"):
            ordered = node_type == "ordered_list"
            start = None
            if ordered:
                start = int(node.attrs.get("start", 1))
            return ListNode(
                ordered=ordered,
                start=start,
                children=self._convert_blocks(node.children),
            )

        if node_type == "list_item":
            return ListItem(children=self._convert_blocks(node.children))

        if node_type in ("fence", "code_block"):
            return Code(
                value=_strip_final_newline(node.content),
                language=_language_from_info(node.info) if node_type == "fence" else None,
            )

        if node_type == "inline":
            # Only reachable for malformed trees; keep the inline content
            return Paragraph(children=self._convert_inlines(node.children))

        return Unsupported(
            name=node_type,
            children=self._convert_blocks(node.children),
            value=node.content or "",
        )

    def _inline_children(self, node: SyntaxTreeNode) -> List[Node]:
        inlines: List[Node] = []
        for child in node.children:
            if child.type == "inline":
                inlines.extend(self._convert_inlines(child.children))
            else:
                inlines.append(self._convert_block(child))
        return inlines

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def _convert_inlines(self, nodes: List[SyntaxTreeNode]) -> List[Node]:
        result: List[Node] = []
        for node in nodes:
            converted = self._convert_inline(node)
            # Merge adjacent text (soft breaks arrive as Text("\n"))
            if isinstance(converted, Text) and result and isinstance(result[-1], Text):
                result[-1] = Text(value=result[-1].value + converted.value)
            else:
                result.append(converted)
        return result

    def _convert_inline(self, node: SyntaxTreeNode) -> Node:
        node_type = node.type

        if node_type in ("text", "text_special"):
            return Text(value=node.content)
        if node_type == "softbreak":
            return Text(value="\n")
        if node_type == "hardbreak":
            return Break()
        if node_type == "code_inline":
            return InlineCode(value=node.content)
        if node_type == "strong":
            return Strong(children=self._convert_inlines(node.children))
        if node_type == "em":
            return Emphasis(children=self._convert_inlines(node.children))

        return Unsupported(
            name=node_type,
            children=self._convert_inlines(node.children),
            value=node.content or "",
        )


# ============================================================================
# Helpers
# ============================================================================

def _strip_final_newline(value: str) -> str:
    if value.endswith("\n"):
        return value[:-1]
    return value


def _language_from_info(info: str) -> Optional[str]:
    words = (info or "").split()
    return words[0] if words else None


def parse_markdown(text: str) -> Root:
    """
    Parse Markdown text into the Markdown AST.

    Args:
        text: Markdown source

    Returns:
        Root node of the AST

    Raises:
        MarkdownError: If parsing fails
    """
    return ASTBuilder().build(text)
