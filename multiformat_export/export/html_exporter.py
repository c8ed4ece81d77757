"""
HTML Exporter - CommonMark rendering through markdown-it-py.
"""

from typing import Optional

from markdown_it import MarkdownIt

from config.constants import HTML_MIME, HTML_EXTENSION
from config.logging_config import get_logger
from multiformat_export.errors import MarkdownError

from .base import Exporter, Exported

logger = get_logger(__name__)


class HtmlExporter(Exporter):
    """Markdown → HTML fragment."""

    mime = HTML_MIME
    extension = HTML_EXTENSION

    def __init__(self, parser: Optional[MarkdownIt] = None):
        self.parser = parser or MarkdownIt("commonmark")

    def export(self, content: str) -> Exported:
        try:
            html = self.parser.render(content)
        except Exception as e:
            logger.error(f"HTML rendering failed: {e}")
            raise MarkdownError(str(e)) from e
        return self._exported(html.encode("utf-8"))
