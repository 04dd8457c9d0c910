"""Pytest fixtures for feedlens tests."""

import pytest

from feedlens.diagnostics import DiagnosticLog
from feedlens.document import parse_document


@pytest.fixture
def diagnostics() -> DiagnosticLog:
    """Provide an empty diagnostics log."""
    return DiagnosticLog()


@pytest.fixture
def parse():
    """Parse an XML string into a tree."""
    return parse_document
