#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Multi-Format Export Engine

Renders a named template with data into Markdown, then hands the Markdown
to the exporter registered for the requested format.

Usage:
    engine = MultiFormatExportEngine()
    engine.register_template_string("meeting", "# {{ title }}\\n\\n{{ notes }}")
    markdown = engine.render("meeting", {"title": "Weekly", "notes": "..."})
    exported = engine.convert(markdown, OutputFormat.DOCX)
    exported.save("meeting.docx")
"""

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import jinja2

from config.logging_config import get_logger
from multiformat_export.errors import PdfError, RenderError, TemplateError, UnsupportedFormatError
from multiformat_export.export import (
    Exporter,
    Exported,
    MarkdownExporter,
    HtmlExporter,
    DocxExporter,
    PdfExporter,
)

logger = get_logger(__name__)


class OutputFormat(Enum):
    """Supported output formats"""
    MD = "md"
    HTML = "html"
    PDF = "pdf"
    DOCX = "docx"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, "OutputFormat"]) -> "OutputFormat":
        """
        Parse a format name (case-insensitive, "markdown" accepted for md).

        Raises:
            ValueError: If the name is not a known format
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "markdown":
            return cls.MD
        for fmt in cls:
            if fmt.value == name:
                return fmt
        raise ValueError(f"Invalid output format: {value}")


def default_exporters() -> Dict[OutputFormat, Exporter]:
    """One exporter per format with built-in defaults."""
    return {
        OutputFormat.HTML: HtmlExporter(),
        OutputFormat.PDF: PdfExporter(),
        OutputFormat.DOCX: DocxExporter(),
        OutputFormat.MD: MarkdownExporter(),
    }


class MultiFormatExportEngine:
    """
    Template registry plus a format → exporter registry.

    Templates use Jinja2 syntax ({{ name }}, {% for %}...). Output is Markdown,
    so autoescaping is off.
    """

    def __init__(self, exporters: Optional[Mapping[OutputFormat, Exporter]] = None):
        """
        Args:
            exporters: Format → exporter mapping; all four built-in formats if None
        """
        self.environment = jinja2.Environment(
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._templates: Dict[str, jinja2.Template] = {}
        self.exporters: Dict[OutputFormat, Exporter] = (
            dict(exporters) if exporters is not None else default_exporters()
        )

    @classmethod
    def from_settings(
        cls,
        settings,
        formats: Optional[Iterable[Union[str, OutputFormat]]] = None,
    ) -> "MultiFormatExportEngine":
        """
        Build an engine whose exporters follow the given Settings.

        Args:
            settings: config.settings.Settings
            formats: Only configure these formats (all if None), so a broken
                     PDF setup does not block Markdown/HTML/DOCX output

        Raises:
            PdfError: If the configured PDF template or fonts cannot be used
        """
        wanted = set(OutputFormat) if formats is None else {OutputFormat.parse(f) for f in formats}
        exporters: Dict[OutputFormat, Exporter] = {}

        if OutputFormat.MD in wanted:
            exporters[OutputFormat.MD] = MarkdownExporter()
        if OutputFormat.HTML in wanted:
            exporters[OutputFormat.HTML] = HtmlExporter()
        if OutputFormat.DOCX in wanted:
            exporters[OutputFormat.DOCX] = DocxExporter(
                default_font_family=settings.default_font_family,
                mono_font_family=settings.mono_font_family,
                default_font_size=settings.default_font_size,
            )
        if OutputFormat.PDF in wanted:
            try:
                exporters[OutputFormat.PDF] = PdfExporter(
                    template=settings.load_pdf_template(),
                    fonts=settings.load_pdf_fonts(),
                )
            except (OSError, ValueError) as e:
                logger.error(f"PDF configuration is unusable: {e}")
                raise PdfError(f"Configuration: {e}") from e

        return cls(exporters)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def register_template_string(self, name: str, source: str) -> None:
        """
        Compile and register a template under `name` (replacing any previous one).

        Raises:
            TemplateError: If the template has a syntax error
        """
        try:
            template = self.environment.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            logger.error(f"Template '{name}' failed to compile: {e}")
            raise TemplateError(f"{name}: {e}") from e

        self._templates[name] = template
        logger.debug(f"Registered template '{name}'")

    def has_template(self, name: str) -> bool:
        return name in self._templates

    def render(self, name: str, data: Any = None) -> str:
        """
        Render a registered template with data.

        Args:
            name: Template name
            data: Mapping, dataclass or pydantic model

        Raises:
            RenderError: If the template is unknown or rendering fails
        """
        template = self._templates.get(name)
        if template is None:
            raise RenderError(f"Template not found: {name}")

        try:
            return template.render(_to_context(data))
        except Exception as e:
            logger.error(f"Template '{name}' failed to render: {e}")
            raise RenderError(f"{name}: {e}") from e

    # ------------------------------------------------------------------
    # Exporters
    # ------------------------------------------------------------------

    def register_exporter(self, output_format: OutputFormat, exporter: Exporter) -> None:
        """Register (or replace) the exporter for a format."""
        self.exporters[output_format] = exporter

    def supported_formats(self) -> List[OutputFormat]:
        """Formats with a registered exporter."""
        return [fmt for fmt in OutputFormat if fmt in self.exporters]

    def convert(self, content: str, output_format: Union[str, OutputFormat]) -> Exported:
        """
        Export Markdown content to one format.

        Raises:
            UnsupportedFormatError: If no exporter is registered for the format
            ExportError: Whatever the exporter raises
        """
        try:
            fmt = OutputFormat.parse(output_format)
        except ValueError as e:
            raise UnsupportedFormatError(output_format) from e

        exporter = self.exporters.get(fmt)
        if exporter is None:
            raise UnsupportedFormatError(fmt)

        return exporter.export(content)

    def export(
        self,
        name: str,
        data: Any,
        output_format: Union[str, OutputFormat],
    ) -> Exported:
        """Render a template and convert the result in one call."""
        return self.convert(self.render(name, data), output_format)


def _to_context(data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    if hasattr(data, "model_dump"):
        return data.model_dump()
    if is_dataclass(data) and not isinstance(data, type):
        return asdict(data)
    raise TypeError(f"Template data must be a mapping, dataclass or model, got {type(data).__name__}")
