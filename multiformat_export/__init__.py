"""
Multi-Format Export

Render one Markdown document (usually produced from a template) to Markdown,
HTML, DOCX and PDF.
"""

__version__ = "1.0.0"

from .errors import (
    ExportError,
    TemplateError,
    RenderError,
    MarkdownError,
    DocxError,
    PdfError,
    UnsupportedFormatError,
)
from .export import (
    Exporter,
    Exported,
    MarkdownExporter,
    HtmlExporter,
    DocxExporter,
    PdfExporter,
)
from .engine import MultiFormatExportEngine, OutputFormat

__all__ = [
    # Errors
    'ExportError',
    'TemplateError',
    'RenderError',
    'MarkdownError',
    'DocxError',
    'PdfError',
    'UnsupportedFormatError',

    # Exporters
    'Exporter',
    'Exported',
    'MarkdownExporter',
    'HtmlExporter',
    'DocxExporter',
    'PdfExporter',

    # Engine
    'MultiFormatExportEngine',
    'OutputFormat',
]
