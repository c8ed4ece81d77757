#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings

from .constants import (
    DOCX_DEFAULT_FONT_FAMILY,
    DOCX_MONO_FONT_FAMILY,
    DOCX_DEFAULT_FONT_SIZE,
    LOG_LEVEL,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== DOCX Typography ==========
    default_font_family: str = DOCX_DEFAULT_FONT_FAMILY
    mono_font_family: str = DOCX_MONO_FONT_FAMILY
    default_font_size: int = DOCX_DEFAULT_FONT_SIZE  # half-points (22 = 11pt)

    # ========== PDF (Typst) ==========
    # Template file must contain the {{content}} placeholder; None = built-in template
    pdf_template_path: Optional[Path] = None
    # Extra font files (.ttf/.otf) handed to the Typst compiler
    pdf_font_paths: List[Path] = []

    # ========== Logging ==========
    log_level: str = LOG_LEVEL

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        env_prefix = "MFEXPORT_"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def load_pdf_template(self) -> Optional[str]:
        """Read the configured Typst template, if any."""
        if self.pdf_template_path is None:
            return None
        return self.pdf_template_path.read_text(encoding="utf-8")

    def load_pdf_fonts(self) -> List[bytes]:
        """Read the configured font files into memory."""
        return [path.read_bytes() for path in self.pdf_font_paths]

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "="*70)
        print("CONFIGURATION")
        print("="*70)
        print(f"Default font:    {self.default_font_family}")
        print(f"Mono font:       {self.mono_font_family}")
        print(f"Body size:       {self.default_font_size} half-points")
        print(f"PDF template:    {self.pdf_template_path or 'built-in'}")
        print(f"PDF fonts:       {len(self.pdf_font_paths)}")
        print("="*70 + "\n")


# Global settings instance
settings = Settings()
