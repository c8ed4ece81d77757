#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Export Errors

Every failure of an export call surfaces as exactly one ExportError subclass.
Collaborator exceptions (Jinja2, markdown-it, python-docx, Typst) are chained
as __cause__.
"""

from typing import Any


class ExportError(Exception):
    """Base error for all export failures"""
    pass


class TemplateError(ExportError):
    """Template could not be registered (syntax error)"""

    def __init__(self, message: str):
        super().__init__(f"Template error: {message}")


class RenderError(ExportError):
    """Template could not be rendered with the given data"""

    def __init__(self, message: str):
        super().__init__(f"Render error: {message}")


class MarkdownError(ExportError):
    """Markdown source could not be parsed"""

    def __init__(self, message: str):
        super().__init__(f"Markdown error: {message}")


class DocxError(ExportError):
    """Word-processor document could not be packaged"""

    def __init__(self, message: str):
        super().__init__(f"Docx error: {message}")


class PdfError(ExportError):
    """Typesetting source could not be compiled to PDF"""

    def __init__(self, message: str):
        super().__init__(f"Pdf error: {message}")


class UnsupportedFormatError(ExportError):
    """Requested output format has no registered exporter"""

    def __init__(self, output_format: Any):
        self.output_format = output_format
        super().__init__(f"Unsupported format: {output_format}")
