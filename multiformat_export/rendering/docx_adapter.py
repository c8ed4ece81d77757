"""
DOCX Adapter - Converts the Markdown AST to the Word-Processor Model

This module walks the Markdown AST and produces DocxParagraph/DocxRun
values: paragraphs of styled runs with spacing and indentation, ready to be
packaged by python-docx.

Architecture:
    Root → DocxRenderer.render() → [DocxParagraph] → DocxPackager → .docx bytes

Typography:
    - Heading sizes scale from the body size (H1 = 1.60x ... H6 = 1.00x)
    - Heading/body spacing rescaled from an 11pt baseline
    - Bold-led paragraphs promoted to H2 (see heuristics.py)
    - Lists indented by nesting depth with a hanging indent for the marker
    - Code blocks in the monospace family, one run per line

Usage:
    from multiformat_export.rendering.ast_builder import parse_markdown
    from multiformat_export.rendering.docx_adapter import DocxRenderer

    paragraphs = DocxRenderer().render(parse_markdown(markdown_text))
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

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
    plain_text,
)
from multiformat_export.rendering.heuristics import split_strong_line_heading
from multiformat_export.rendering.styles import (
    StyleContext,
    BULLET_MARKER,
    LIST_HANGING,
    MIN_FONT_SIZE,
    PROMOTED_HEADING_DEPTH,
    body_spacing,
    heading_metrics,
    list_left_indent,
)
from config.constants import (
    DOCX_DEFAULT_FONT_FAMILY,
    DOCX_MONO_FONT_FAMILY,
    DOCX_DEFAULT_FONT_SIZE,
)
from config.logging_config import get_logger

logger = get_logger(__name__)


# ============================================================================
# Word-Processor Model
# ============================================================================

@dataclass(frozen=True)
class DocxRun:
    """
    A span of text sharing one style.

    `size` is in half-points. A run with `line_break=True` carries no text
    and stands for a text-wrapping line break.
    """
    text: str = ""
    bold: bool = False
    italic: bool = False
    monospace: bool = False
    font_family: str = DOCX_DEFAULT_FONT_FAMILY
    size: int = DOCX_DEFAULT_FONT_SIZE
    line_break: bool = False


@dataclass
class DocxParagraph:
    """
    A paragraph of runs. Spacing and indents are in twips; None leaves
    the document default in place.
    """
    runs: List[DocxRun] = field(default_factory=list)
    spacing_before: Optional[int] = None
    spacing_after: Optional[int] = None
    left_indent: Optional[int] = None
    hanging_indent: Optional[int] = None

    def add_run(self, run: DocxRun) -> None:
        self.runs.append(run)

    @property
    def text(self) -> str:
        """Paragraph text with line breaks as '\\n'."""
        return "".join("\n" if run.line_break else run.text for run in self.runs)

    @property
    def text_runs(self) -> List[DocxRun]:
        return [run for run in self.runs if not run.line_break]


# ============================================================================
# Renderer
# ============================================================================

class DocxRenderer:
    """
    Renders the Markdown AST into word-processor paragraphs.

    Holds only immutable configuration, so one instance can serve
    concurrent calls.
    """

    def __init__(
        self,
        default_font_family: str = DOCX_DEFAULT_FONT_FAMILY,
        mono_font_family: str = DOCX_MONO_FONT_FAMILY,
        default_font_size: int = DOCX_DEFAULT_FONT_SIZE,
    ):
        """
        Args:
            default_font_family: Body font, e.g. "Times New Roman"
            mono_font_family: Code font, e.g. "Courier New"
            default_font_size: Body size in half-points (22 = 11pt)
        """
        self.default_font_family = default_font_family
        self.mono_font_family = mono_font_family
        self.default_font_size = default_font_size

    def render(self, root: Root) -> List[DocxParagraph]:
        """Render every top-level block of the document."""
        paragraphs: List[DocxParagraph] = []
        for node in root.children:
            paragraphs.extend(self.render_block(node, 0))
        logger.debug(f"Rendered {len(root.children)} blocks into {len(paragraphs)} paragraphs")
        return paragraphs

    # ------------------------------------------------------------------
    # Block dispatch
    # ------------------------------------------------------------------

    def render_block(self, node: Node, depth: int) -> List[DocxParagraph]:
        """
        Dispatch one block node.

        Args:
            node: Block node
            depth: List nesting depth (0 outside lists)

        Returns:
            Zero or more paragraphs
        """
        if isinstance(node, Paragraph):
            return self._render_paragraph_block(node)
        elif isinstance(node, Heading):
            return [self._render_heading(node)]
        elif isinstance(node, Code):
            return [self._render_code_block(node)]
        elif isinstance(node, ListNode):
            return self._render_list(node, depth)
        elif isinstance(node, INLINE_NODE_TYPES):
            para = self._new_body_paragraph()
            self._append_inlines(para, [node], StyleContext())
            return [para]
        else:
            logger.debug(f"Skipping unsupported block: {node.kind.value}")
            return []

    # ------------------------------------------------------------------
    # Headings
    # ------------------------------------------------------------------

    def _new_heading_paragraph(self, depth: int) -> "tuple[DocxParagraph, int]":
        size, before, after = heading_metrics(self.default_font_size, depth)
        return DocxParagraph(spacing_before=before, spacing_after=after), size

    def _render_heading(self, heading: Heading) -> DocxParagraph:
        para, size = self._new_heading_paragraph(heading.depth)
        # Size conveys the heading; bold only where the source marks it
        self._append_inlines(para, heading.children, StyleContext(size=size))
        return para

    def _render_paragraph_block(self, paragraph: Paragraph) -> List[DocxParagraph]:
        split = split_strong_line_heading(paragraph)
        if split is None:
            return [self._render_paragraph(paragraph)]

        heading_para, size = self._new_heading_paragraph(PROMOTED_HEADING_DEPTH)
        self._append_inlines(heading_para, [split.heading], StyleContext(bold=True, size=size))
        result = [heading_para]

        if split.remainder is not None:
            body = self._new_body_paragraph()
            self._append_inlines(body, [Text(value=split.remainder)], StyleContext())
            result.append(body)

        logger.debug(f"Promoted bold-led paragraph to heading (body={split.remainder is not None})")
        return result

    # ------------------------------------------------------------------
    # Paragraphs and code
    # ------------------------------------------------------------------

    def _new_body_paragraph(self) -> DocxParagraph:
        before, after = body_spacing(self.default_font_size)
        return DocxParagraph(spacing_before=before, spacing_after=after)

    def _render_paragraph(self, paragraph: Paragraph) -> DocxParagraph:
        para = self._new_body_paragraph()
        self._append_inlines(para, paragraph.children, StyleContext())
        return para

    def _render_code_block(self, code: Code) -> DocxParagraph:
        para = self._new_body_paragraph()
        para.left_indent = 0

        lines = _code_lines(code.value)
        style = StyleContext(monospace=True)
        for i, line in enumerate(lines):
            para.add_run(self._make_run(line, style))
            if i < len(lines) - 1:
                para.add_run(self._break_run())
        return para

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _render_list(self, list_node: ListNode, depth: int) -> List[DocxParagraph]:
        out: List[DocxParagraph] = []
        ordinal = list_node.start if list_node.start is not None else 1
        left = list_left_indent(depth)

        for item in list_node.children:
            if not isinstance(item, ListItem):
                continue

            first_block = True
            for child in item.children:
                if isinstance(child, Paragraph):
                    if first_block:
                        para = DocxParagraph(left_indent=left, hanging_indent=LIST_HANGING)
                        marker = f"{ordinal}." if list_node.ordered else BULLET_MARKER
                        para.add_run(self._make_run(marker + " ", StyleContext(bold=True)))
                    else:
                        para = DocxParagraph(left_indent=left)
                    self._append_inlines(para, child.children, StyleContext())
                    out.append(para)
                    first_block = False
                elif isinstance(child, ListNode):
                    out.extend(self._render_list(child, depth + 1))
                else:
                    out.extend(self.render_block(child, depth + 1))

            if list_node.ordered:
                ordinal += 1

        return out

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def _append_inlines(
        self,
        paragraph: DocxParagraph,
        nodes: Sequence[Node],
        style: StyleContext,
    ) -> None:
        """Append runs for inline nodes, carrying the style context down."""
        for node in nodes:
            if isinstance(node, Text):
                parts = node.value.split("\n")
                for i, part in enumerate(parts):
                    if part:
                        paragraph.add_run(self._make_run(part, style))
                    if i < len(parts) - 1:
                        paragraph.add_run(self._break_run())
            elif isinstance(node, (InlineCode, Code)):
                if node.value:
                    paragraph.add_run(self._make_run(node.value, style.with_monospace()))
            elif isinstance(node, Emphasis):
                self._append_inlines(paragraph, node.children, style.force_italic())
            elif isinstance(node, Strong):
                self._append_inlines(paragraph, node.children, style.force_bold())
            elif isinstance(node, Break):
                paragraph.add_run(self._break_run())
            else:
                text = plain_text(getattr(node, "children", []))
                if text:
                    paragraph.add_run(self._make_run(text, style))

    def _resolve_size(self, size: Optional[int]) -> int:
        effective = size if size and size > 0 else self.default_font_size
        return max(MIN_FONT_SIZE, effective)

    def _make_run(self, text: str, style: StyleContext) -> DocxRun:
        family = self.mono_font_family if style.monospace else self.default_font_family
        return DocxRun(
            text=text,
            bold=style.bold,
            italic=style.italic,
            monospace=style.monospace,
            font_family=family,
            size=self._resolve_size(style.size),
        )

    def _break_run(self) -> DocxRun:
        return DocxRun(
            font_family=self.default_font_family,
            size=self._resolve_size(None),
            line_break=True,
        )


def _code_lines(value: str) -> List[str]:
    """
    Split code on '\\n' only (a trailing '\\r' is dropped from each line).

    Form feeds, vertical tabs and Unicode separators stay inside their line.
    A final newline does not start an empty line.
    """
    if not value:
        return []
    lines = value.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
