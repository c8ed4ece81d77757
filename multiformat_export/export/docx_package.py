#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
DOCX Packaging
==============

Turns the word-processor model (DocxParagraph/DocxRun) into a .docx
container. The renderer never touches python-docx; everything it knows
about the container format lives behind DocxPackager.
"""

import io
from abc import ABC, abstractmethod
from typing import Sequence

from docx import Document
from docx.enum.text import WD_BREAK
from docx.shared import Pt, Twips

from multiformat_export.errors import DocxError
from multiformat_export.rendering.docx_adapter import DocxParagraph, DocxRun
from config.logging_config import get_logger

logger = get_logger(__name__)


class DocxPackager(ABC):
    """Packages rendered paragraphs into .docx bytes."""

    @abstractmethod
    def pack(self, paragraphs: Sequence[DocxParagraph]) -> bytes:
        """
        Raises:
            DocxError: If the container cannot be built
        """
        raise NotImplementedError


class PythonDocxPackager(DocxPackager):
    """DocxPackager backed by python-docx."""

    def pack(self, paragraphs: Sequence[DocxParagraph]) -> bytes:
        try:
            doc = Document()
            for para in paragraphs:
                _add_paragraph(doc, para)

            buffer = io.BytesIO()
            doc.save(buffer)
        except Exception as e:
            logger.error(f"Failed to package DOCX: {e}")
            raise DocxError(str(e)) from e

        data = buffer.getvalue()
        logger.debug(f"Packaged {len(paragraphs)} paragraphs into {len(data)} bytes")
        return data


def _add_paragraph(doc, para: DocxParagraph) -> None:
    p = doc.add_paragraph()
    fmt = p.paragraph_format

    # Spacing
    if para.spacing_before is not None:
        fmt.space_before = Twips(para.spacing_before)
    if para.spacing_after is not None:
        fmt.space_after = Twips(para.spacing_after)

    # Indentation; a hanging indent is a negative first-line indent
    if para.left_indent is not None:
        fmt.left_indent = Twips(para.left_indent)
    if para.hanging_indent:
        fmt.first_line_indent = Twips(-para.hanging_indent)

    for run in para.runs:
        _add_run(p, run)


def _add_run(p, run: DocxRun) -> None:
    if run.line_break:
        p.add_run().add_break(WD_BREAK.LINE)
        return

    r = p.add_run(run.text)
    if run.bold:
        r.bold = True
    if run.italic:
        r.italic = True

    # font.name writes w:rFonts ascii + hAnsi
    r.font.name = run.font_family
    r.font.size = Pt(run.size / 2)
