"""
Pytest configuration and shared fixtures for Multi-Format Export tests.
"""
import sys
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator, List, Sequence

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from multiformat_export.export.docx_package import DocxPackager
from multiformat_export.export.pdf_adapter import TypstCompiler
from multiformat_export.rendering.docx_adapter import DocxRenderer, DocxParagraph
from multiformat_export.rendering.typst_adapter import TypstRenderer


# ============================================================================
# Fake collaborators
# ============================================================================

class RecordingPackager(DocxPackager):
    """Packager that records the paragraphs it receives."""

    def __init__(self):
        self.calls: List[List[DocxParagraph]] = []

    def pack(self, paragraphs: Sequence[DocxParagraph]) -> bytes:
        self.calls.append(list(paragraphs))
        return b"PK-fake-docx"


class RecordingCompiler(TypstCompiler):
    """Compiler that records the Typst source it receives."""

    def __init__(self):
        self.sources: List[str] = []
        self.fonts: List[Sequence[bytes]] = []

    def compile(self, source: str, fonts: Sequence[bytes] = ()) -> bytes:
        self.sources.append(source)
        self.fonts.append(list(fonts))
        return b"%PDF-fake"


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def docx_renderer() -> DocxRenderer:
    """Renderer with the default 11pt Times/Courier configuration."""
    return DocxRenderer()


@pytest.fixture
def typst_renderer() -> TypstRenderer:
    return TypstRenderer()


@pytest.fixture
def recording_packager() -> RecordingPackager:
    return RecordingPackager()


@pytest.fixture
def recording_compiler() -> RecordingCompiler:
    return RecordingCompiler()


@pytest.fixture
def meeting_template() -> str:
    """Meeting-notes template in the shape reports are usually written."""
    return (
        "# {{ title }}\n"
        "\n"
        "**Attendees**\n"
        "{{ attendees | join(', ') }}\n"
        "\n"
        "## Action items\n"
        "\n"
        "{% for item in items %}"
        "{{ loop.index }}. {{ item }}\n"
        "{% endfor %}"
    )


@pytest.fixture
def meeting_data() -> dict:
    return {
        "title": "Weekly Sync",
        "attendees": ["Alice", "Bob"],
        "items": ["Ship the exporter", "Review fonts"],
    }
