#!/usr/bin/env python3
"""
PDF Exporter

Markdown → Markdown AST → Typst markup → template → PDF bytes.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from config.constants import PDF_MIME, PDF_EXTENSION, TYPST_CONTENT_PLACEHOLDER
from config.logging_config import get_logger
from multiformat_export.errors import MarkdownError, PdfError
from multiformat_export.rendering.ast_builder import parse_markdown
from multiformat_export.rendering.typst_adapter import TypstRenderer, inject_content

from .base import Exporter, Exported
from .pdf_adapter import TypstCompiler, TypstPyCompiler

logger = get_logger(__name__)

DEFAULT_TEMPLATE = """
#set page(paper: "a4")
#set text(font: ("Liberation Serif", "Libertinus Serif", "New Computer Modern"), 11pt)


{{content}}
"""

FontResource = Union[bytes, str, Path]


class PdfExporter(Exporter):
    """
    A simple Typst-based PDF exporter.

    The template must contain the placeholder `{{content}}`; only its first
    occurrence is replaced.
    """

    mime = PDF_MIME
    extension = PDF_EXTENSION

    def __init__(
        self,
        template: Optional[str] = None,
        fonts: Optional[Sequence[FontResource]] = None,
        compiler: Optional[TypstCompiler] = None,
    ):
        """
        Initialize PDF exporter.

        Args:
            template: Typst template; the built-in A4 template if None
            fonts: Font files as bytes or paths; Typst's defaults and the
                   system fonts are used when empty
            compiler: Typst compiler (typst package if None)

        Raises:
            ValueError: If the template has no {{content}} placeholder
        """
        self.template = template if template is not None else DEFAULT_TEMPLATE
        if TYPST_CONTENT_PLACEHOLDER not in self.template:
            raise ValueError(f"PDF template must contain {TYPST_CONTENT_PLACEHOLDER}")

        self.fonts: List[bytes] = [_load_font(font) for font in fonts or ()]
        self.compiler = compiler or TypstPyCompiler()
        self.renderer = TypstRenderer()

    def render_source(self, content: str) -> str:
        """Build the complete Typst source for Markdown content."""
        try:
            root = parse_markdown(content)
        except MarkdownError as e:
            raise PdfError(f"Markdown parse: {e}") from e

        body = self.renderer.render(root)
        return inject_content(self.template, body)

    def export(self, content: str) -> Exported:
        source = self.render_source(content)
        pdf = self.compiler.compile(source, self.fonts)
        logger.info(f"PDF export complete: {len(pdf)} bytes")
        return self._exported(pdf)


def _load_font(font: FontResource) -> bytes:
    if isinstance(font, (bytes, bytearray)):
        return bytes(font)
    return Path(font).read_bytes()
