#!/usr/bin/env python3
"""
PDF Compilation Adapter

Compiles Typst source to PDF bytes with the `typst` Python bindings.

The source and any font resources are written to a private temporary
directory per call, so concurrent compilations never share files.

Requirements:
- typst (pip install typst)
"""

import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from config.constants import TYPST_MAIN_FILE
from config.logging_config import get_logger
from multiformat_export.errors import PdfError

logger = get_logger(__name__)

try:
    import typst
    TYPST_AVAILABLE = True
except ImportError:
    TYPST_AVAILABLE = False
    logger.debug("typst not available - PDF export will fail until it is installed")


class TypstCompiler(ABC):
    """Compiles Typst source to PDF bytes."""

    @abstractmethod
    def compile(self, source: str, fonts: Sequence[bytes] = ()) -> bytes:
        """
        Args:
            source: Complete Typst document
            fonts: Font files (TrueType/OpenType) to make available

        Raises:
            PdfError: If compilation or PDF serialization fails
        """
        raise NotImplementedError


def is_typst_available() -> bool:
    """Check if the typst bindings are installed."""
    return TYPST_AVAILABLE


def _font_suffix(data: bytes) -> str:
    """Pick a file extension Typst's font scanner will accept."""
    magic = data[:4]
    if magic == b"OTTO":
        return ".otf"
    if magic == b"ttcf":
        return ".ttc"
    return ".ttf"


class TypstPyCompiler(TypstCompiler):
    """TypstCompiler backed by the `typst` package."""

    def compile(self, source: str, fonts: Sequence[bytes] = ()) -> bytes:
        if not TYPST_AVAILABLE:
            raise PdfError("typst is not installed. Install with: pip install typst")

        with tempfile.TemporaryDirectory(prefix="mfexport_") as tmp:
            root = Path(tmp)
            main_file = root / TYPST_MAIN_FILE
            main_file.write_text(source, encoding="utf-8")

            font_dir = root / "fonts"
            font_dir.mkdir()
            for i, font in enumerate(fonts):
                (font_dir / f"font_{i}{_font_suffix(font)}").write_bytes(font)

            logger.debug(f"Compiling Typst source ({len(source)} chars, {len(fonts)} fonts)")
            try:
                pdf = typst.compile(
                    str(main_file),
                    root=str(root),
                    font_paths=[str(font_dir)],
                )
            except Exception as e:
                logger.error(f"Typst compilation failed: {e}")
                raise PdfError(f"Typst output error: {e}") from e

        if not isinstance(pdf, (bytes, bytearray)) or not pdf:
            raise PdfError(f"Typst PDF rendering error: no PDF bytes produced ({type(pdf).__name__})")

        return bytes(pdf)
