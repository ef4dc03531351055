"""
Shared test configuration and fixtures for format-service tests.
"""

from io import BytesIO
from typing import Callable, List, Tuple

import pytest
from bs4 import BeautifulSoup
from docx import Document
from fastapi.testclient import TestClient

from app import app
from docformat.utils.html_utils import wrap_root_markup


# ===== DOCUMENT FACTORIES =====

def build_docx(blocks: List[Tuple[str, str]]) -> bytes:
    """
    Build a .docx in memory.

    Args:
        blocks: (kind, text) pairs where kind is "h1".."h3" or "p"

    Returns:
        The .docx file content
    """
    document = Document()
    for kind, text in blocks:
        if kind.startswith("h"):
            document.add_heading(text, level=int(kind[1:]))
        else:
            document.add_paragraph(text)

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def make_tree(markup: str) -> BeautifulSoup:
    """Parse body markup the same way the decoder does."""
    return BeautifulSoup(wrap_root_markup(markup), "html.parser")


# ===== STANDARD FIXTURES =====

@pytest.fixture(scope="session")
def client():
    """FastAPI test client for synchronous tests."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def docx_factory() -> Callable[[List[Tuple[str, str]]], bytes]:
    """Factory building .docx bytes from (kind, text) blocks."""
    return build_docx


@pytest.fixture
def tree_factory() -> Callable[[str], BeautifulSoup]:
    """Factory parsing body markup into a markup tree."""
    return make_tree


@pytest.fixture
def sample_docx_bytes() -> bytes:
    """A small document with headings, quotes and untidy spacing."""
    return build_docx([
        ("h1", "the quick BROWN fox jumps over a lazy-dog"),
        ("p", 'He said "hello" and it\'s fine'),
        ("h2", "results and discussion"),
        ("p", "Spacing   is   untidy ."),
    ])


@pytest.fixture
def docx_upload(sample_docx_bytes):
    """Multipart files payload for the sample document."""
    return {
        "file": (
            "sample.docx",
            sample_docx_bytes,
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        )
    }
