"""
Markdown Exporter - passes the rendered Markdown through unchanged.
"""

from config.constants import MARKDOWN_MIME, MARKDOWN_EXTENSION

from .base import Exporter, Exported


class MarkdownExporter(Exporter):
    """UTF-8 Markdown passthrough."""

    mime = MARKDOWN_MIME
    extension = MARKDOWN_EXTENSION

    def export(self, content: str) -> Exported:
        return self._exported(content.encode("utf-8"))
