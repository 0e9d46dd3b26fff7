"""
Pytest configuration and shared fixtures for texpages tests.
"""
import sys
import pytest
import tempfile
import shutil
from datetime import date
from pathlib import Path
from typing import Generator

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from texpages.layout.geometry import DEFAULT_GEOMETRY


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture(scope="session")
def test_settings():
    """Settings independent of the environment."""
    return Settings(
        log_level="WARNING",
        lipsum_seed=42,
        lipsum_min_words=20,
        lipsum_max_words=40,
        lipsum_max_paragraphs=150,
        default_output_format="html",
    )


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 5)


@pytest.fixture
def default_geometry():
    return DEFAULT_GEOMETRY


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


# ============================================================================
# Fixtures: Sample Documents
# ============================================================================

@pytest.fixture
def sample_header() -> str:
    return (
        "\\documentclass[12pt]{article}\n"
        "\\usepackage[a4paper,margin=1in]{geometry}\n"
        "\\setlength{\\parindent}{1em}\n"
        "\\title{On Pagination}\n"
        "\\author{A. Writer}\n"
        "\\date{\\today}\n"
    )


@pytest.fixture
def sample_document(sample_header) -> str:
    """Complete document with title block, heading, paragraphs, math and a list."""
    return (
        sample_header
        + "\\begin{document}\n"
        "\\maketitle\n"
        "\n"
        "\\section{Introduction}\n"
        "This is the first paragraph.\n"
        "It continues on a second line.\n"
        "\n"
        "A second paragraph with \\textbf{bold} text.\n"
        "\n"
        "\\[\n"
        "E = mc^2\n"
        "\\]\n"
        "\n"
        "\\begin{itemize}\n"
        "\\item First\n"
        "\\item Second\n"
        "\\end{itemize}\n"
        "\\end{document}\n"
        "Ignored trailing text\n"
    )


@pytest.fixture
def sample_tex_file(temp_dir: Path, sample_document: str) -> Path:
    path = temp_dir / "sample.tex"
    path.write_text(sample_document, encoding="utf-8")
    return path
