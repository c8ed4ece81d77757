"""
Typst Adapter - Converts the Markdown AST to Typst Markup

Very lightweight Markdown → Typst conversion. Escaping and markup are
applied while walking the tree; there is no intermediate model.

    Heading      → "= Title" (depth-many '=')
    Paragraph    → text + blank line
    Code         → ```lang fenced raw block (fence-defused body)
    List         → "- item" / "1. item", nested lists indented two spaces
    Strong       → *text*, or #strong[text] inside a word
    Emphasis     → _text_, or #emph[text] inside a word
    InlineCode   → `code`
    Break        → " \\" + newline

Bold-led paragraphs are NOT promoted to headings here, unlike the DOCX path.
"""

import re
from typing import List, NamedTuple, Sequence, Union

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
    Node,
    INLINE_NODE_TYPES,
)
from config.constants import TYPST_CONTENT_PLACEHOLDER
from config.logging_config import get_logger

logger = get_logger(__name__)


# Characters that would start Typst markup, code, math, labels or comments
RESERVED_CHARS = frozenset('\\#[]{}*_$`<@=/~')

ZERO_WIDTH_SPACE = "\u200b"
# A backtick that is followed by two more would let ``` appear in the body
_FENCE_PATTERN = re.compile(r"`(?=``)")

NESTED_LIST_INDENT = "  "
HARD_BREAK = " \\\n"

# List/enum markers Typst recognises at the start of a line
_LINE_START_MARKER = re.compile(r"(^|\\\n)([ \t]*)(-|\+|\d+\.)(?=\s|$)")
# Characters that would continue a #function[...] call after its closing bracket
_CALL_CONTINUATION = frozenset("([.")


# ============================================================================
# Escaping
# ============================================================================

def escape_text(text: str) -> str:
    """
    Escape literal text for Typst markup.

    Reserved characters get a backslash. Soft line breaks become spaces,
    which Typst renders identically while keeping literal text away from
    line-start markup such as headings.
    """
    if not any(ch in RESERVED_CHARS or ch == "\n" for ch in text):
        return text
    out = []
    for ch in text:
        if ch in RESERVED_CHARS:
            out.append("\\")
            out.append(ch)
        elif ch == "\n":
            out.append(" ")
        else:
            out.append(ch)
    return "".join(out)


def _escape_marker(match: "re.Match") -> str:
    lead, indent, marker = match.groups()
    if marker[-1] == ".":
        return f"{lead}{indent}{marker[:-1]}\\."
    return f"{lead}{indent}\\{marker}"


def escape_line_starts(markup: str) -> str:
    """
    Escape list markers ("- ", "+ ", "2. ") where rendered text begins a line:
    at the very start and after every hard break.
    """
    return _LINE_START_MARKER.sub(_escape_marker, markup)


def styled(delimiter: str, function: str, body: str, before: str = "", after: str = "") -> str:
    """
    Wrap strong/emphasis markup.

    Typst ignores * and _ between two letters, so when a letter or digit
    touches the span ("**Note**s", "*un*happy") the function form
    #strong[...] / #emph[...] is used instead.
    """
    if body and not before.isalnum() and not after.isalnum():
        return f"{delimiter}{body}{delimiter}"
    call = f"#{function}[{body}]"
    if after in _CALL_CONTINUATION:
        call += ";"
    return call


def escape_code(code: str) -> str:
    """Break up every ``` so code content cannot close its fence early."""
    return _FENCE_PATTERN.sub("`" + ZERO_WIDTH_SPACE, code)


def _typst_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def inline_raw(code: str) -> str:
    """Inline raw text; falls back to #raw("...") when the code holds a backtick."""
    if "`" in code:
        return f"#raw({_typst_string(code)})"
    return f"`{escape_code(code)}`"


def inject_content(template: str, content: str) -> str:
    """Substitute the first {{content}} placeholder of the template."""
    return template.replace(TYPST_CONTENT_PLACEHOLDER, content, 1)


class _Styled(NamedTuple):
    """Strong/emphasis span whose form depends on its neighbours."""
    delimiter: str
    function: str
    body: str


# ============================================================================
# Renderer
# ============================================================================

class TypstRenderer:
    """Renders the Markdown AST into Typst markup."""

    def render(self, root: Root) -> str:
        """Render every top-level block of the document."""
        out = "".join(self.render_block(child) for child in root.children)
        logger.debug(f"Rendered {len(root.children)} blocks into {len(out)} chars of Typst")
        return out

    def render_block(self, node: Node) -> str:
        if isinstance(node, Heading):
            text = self.collect_inlines(node.children)
            marker = "=" * node.depth
            return f"\n{marker} {text}\n\n"
        elif isinstance(node, Paragraph):
            text = self.render_inlines(node.children)
            if not text.strip():
                return ""
            return f"{text}\n\n"
        elif isinstance(node, Code):
            lang = node.language or ""
            return f"```{lang}\n{escape_code(node.value)}\n```\n\n"
        elif isinstance(node, ListNode):
            return self.render_list(node)
        elif isinstance(node, INLINE_NODE_TYPES):
            # Stray inline content at block level becomes a paragraph
            text = self.render_inlines([node])
            if not text:
                return ""
            return f"{text}\n\n"
        else:
            logger.debug(f"Skipping unsupported block: {node.kind.value}")
            return ""

    def render_list(self, list_node: ListNode) -> str:
        out = []
        index = list_node.start if list_node.start is not None else 1

        for item in list_node.children:
            if not isinstance(item, ListItem):
                continue

            item_buf = []
            for child in item.children:
                if isinstance(child, Paragraph):
                    text = self.render_inlines(child.children)
                    if item_buf:
                        # Continuation paragraphs stay inside the item
                        text = "\n\n" + NESTED_LIST_INDENT + text
                    item_buf.append(text)
                elif isinstance(child, ListNode):
                    for line in self.render_list(child).splitlines():
                        if line.strip():
                            item_buf.append("\n" + NESTED_LIST_INDENT + line)
                else:
                    item_buf.append(self.render_block(child))

            body = "".join(item_buf).strip()
            if list_node.ordered:
                out.append(f"{index}. {body}\n")
                index += 1
            else:
                out.append(f"- {body}\n")

        out.append("\n")
        return "".join(out)

    def collect_inlines(self, nodes: Sequence[Node]) -> str:
        """Render inline nodes to escaped Typst markup."""
        pieces: List[Union[str, _Styled]] = []
        for node in nodes:
            if isinstance(node, Text):
                pieces.append(escape_text(node.value))
            elif isinstance(node, (InlineCode, Code)):
                pieces.append(inline_raw(node.value))
            elif isinstance(node, Strong):
                pieces.append(_Styled("*", "strong", self.collect_inlines(node.children)))
            elif isinstance(node, Emphasis):
                pieces.append(_Styled("_", "emph", self.collect_inlines(node.children)))
            elif isinstance(node, Break):
                pieces.append(HARD_BREAK)
            else:
                # Fallback to the nested children, formatting kept
                pieces.append(self.collect_inlines(getattr(node, "children", [])))

        buf = []
        before = ""
        for i, piece in enumerate(pieces):
            if isinstance(piece, _Styled):
                piece = styled(piece.delimiter, piece.function, piece.body,
                               before=before, after=_first_char(pieces[i + 1:]))
            buf.append(piece)
            if piece:
                before = piece[-1]
        return "".join(buf)

    def render_inlines(self, nodes: Sequence[Node]) -> str:
        """collect_inlines() for text that starts a line of its own."""
        return escape_line_starts(self.collect_inlines(nodes))


def _first_char(pieces) -> str:
    for piece in pieces:
        if isinstance(piece, _Styled):
            # Both delimiter and function forms start with punctuation
            return piece.delimiter
        if piece:
            return piece[0]
    return ""
