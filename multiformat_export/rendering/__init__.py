"""
Rendering Module

Markdown AST, the markdown-it adapter that builds it, and the renderers that
turn it into the word-processor model (DOCX) and Typst markup (PDF).
"""

from .markdown_ast import NodeKind, plain_text
from .ast_builder import ASTBuilder, parse_markdown
from .styles import StyleContext, heading_font_size, heading_spacing, body_spacing
from .heuristics import HeadingSplit, is_strong_line_heading, split_strong_line_heading
from .docx_adapter import DocxRenderer, DocxParagraph, DocxRun
from .typst_adapter import TypstRenderer, escape_text, escape_code, inject_content

__all__ = [
    'NodeKind',
    'plain_text',
    'ASTBuilder',
    'parse_markdown',
    'StyleContext',
    'heading_font_size',
    'heading_spacing',
    'body_spacing',
    'HeadingSplit',
    'is_strong_line_heading',
    'split_strong_line_heading',
    'DocxRenderer',
    'DocxParagraph',
    'DocxRun',
    'TypstRenderer',
    'escape_text',
    'escape_code',
    'inject_content',
]
