"""
Exporters
=========

One exporter per output format. Each takes rendered Markdown and returns an
Exported payload (bytes, media type, extension).

Module structure:
- base: Exporter ABC and Exported payload
- markdown_exporter: Markdown passthrough
- html_exporter: Markdown → HTML
- docx_exporter / docx_package: Markdown → DOCX (python-docx packaging)
- pdf_exporter / pdf_adapter: Markdown → Typst → PDF
"""

from .base import Exporter, Exported
from .markdown_exporter import MarkdownExporter
from .html_exporter import HtmlExporter
from .docx_package import DocxPackager, PythonDocxPackager
from .docx_exporter import DocxExporter
from .pdf_adapter import TypstCompiler, TypstPyCompiler, is_typst_available
from .pdf_exporter import PdfExporter, DEFAULT_TEMPLATE

__all__ = [
    # Base
    'Exporter',
    'Exported',

    # Passthrough formats
    'MarkdownExporter',
    'HtmlExporter',

    # DOCX
    'DocxPackager',
    'PythonDocxPackager',
    'DocxExporter',

    # PDF
    'TypstCompiler',
    'TypstPyCompiler',
    'is_typst_available',
    'PdfExporter',
    'DEFAULT_TEMPLATE',
]
