#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exporter Base
=============

Abstract base class for all exporters.
Each exporter takes rendered Markdown text and returns an Exported payload:
the bytes plus the media type and file extension of the format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class Exported:
    """Result of one export call."""
    data: bytes
    mime: str
    extension: str

    def __len__(self) -> int:
        return len(self.data)

    def filename(self, stem: str) -> str:
        """File name for this payload, e.g. filename("report") -> "report.pdf"."""
        return f"{stem}.{self.extension}"

    def save(self, output_path: Union[str, Path]) -> Path:
        """Write the payload to disk and return the absolute path."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.data)
        return path.resolve()


class Exporter(ABC):
    """
    Abstract base class for exporters.

    Subclasses must implement `export`. Exporters keep only immutable
    configuration, so one instance may be shared between threads.
    """

    #: media type of the produced payload
    mime: str = "application/octet-stream"
    #: file extension of the produced payload (no dot)
    extension: str = ""

    @abstractmethod
    def export(self, content: str) -> Exported:
        """
        Export Markdown content.

        Args:
            content: Markdown source

        Returns:
            Exported payload

        Raises:
            ExportError: On any failure; no partial output is returned
        """
        raise NotImplementedError

    def _exported(self, data: bytes) -> Exported:
        return Exported(data=data, mime=self.mime, extension=self.extension)
