#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
DOCX Exporter
=============

Markdown → Markdown AST → word-processor paragraphs → .docx bytes.
"""

from typing import List, Optional

from config.constants import (
    DOCX_MIME,
    DOCX_EXTENSION,
    DOCX_DEFAULT_FONT_FAMILY,
    DOCX_MONO_FONT_FAMILY,
    DOCX_DEFAULT_FONT_SIZE,
)
from config.logging_config import get_logger
from multiformat_export.rendering.ast_builder import parse_markdown
from multiformat_export.rendering.docx_adapter import DocxRenderer, DocxParagraph

from .base import Exporter, Exported
from .docx_package import DocxPackager, PythonDocxPackager

logger = get_logger(__name__)


class DocxExporter(Exporter):
    """
    Word-processor exporter.

    Features:
    - Headings sized from the body size
    - Bold-led paragraphs promoted to subheadings
    - Indented, numbered/bulleted lists
    - Monospace code blocks
    """

    mime = DOCX_MIME
    extension = DOCX_EXTENSION

    def __init__(
        self,
        default_font_family: str = DOCX_DEFAULT_FONT_FAMILY,
        mono_font_family: str = DOCX_MONO_FONT_FAMILY,
        default_font_size: int = DOCX_DEFAULT_FONT_SIZE,
        packager: Optional[DocxPackager] = None,
    ):
        """
        Initialize DOCX exporter.

        Args:
            default_font_family: Body font family
            mono_font_family: Code font family
            default_font_size: Body size in half-points (22 = 11pt)
            packager: Container builder (python-docx if None)
        """
        self.renderer = DocxRenderer(
            default_font_family=default_font_family,
            mono_font_family=mono_font_family,
            default_font_size=default_font_size,
        )
        self.packager = packager or PythonDocxPackager()

    def render_document(self, content: str) -> List[DocxParagraph]:
        """Parse and render Markdown without packaging."""
        return self.renderer.render(parse_markdown(content))

    def export(self, content: str) -> Exported:
        paragraphs = self.render_document(content)
        data = self.packager.pack(paragraphs)
        logger.info(f"DOCX export complete: {len(paragraphs)} paragraphs, {len(data)} bytes")
        return self._exported(data)
