"""Pytest configuration and shared fixtures for the spdxdiff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import StubComparisonSource, make_annotation, make_document

from spdxdiff.sinks import MemorySheet

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Restore root logger handlers changed by ``configure_logging``."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sheet() -> MemorySheet:
    """Provide an empty in-memory sink.

    Returns
    -------
    MemorySheet
        Sheet with no rows.

    """
    return MemorySheet()


@pytest.fixture
def two_documents():
    """Provide two documents that differ only in their annotations.

    Returns
    -------
    tuple
        ``(doc_a, doc_b)``; ``doc_a`` has one annotation, ``doc_b`` has two.

    """
    doc_a = make_document("Document A", 0, annotations=[make_annotation("ok")])
    doc_b = make_document(
        "Document B",
        1,
        annotations=[make_annotation("ok"), make_annotation("bad", date="2024-02-01T00:00:00Z")],
    )
    return doc_a, doc_b


@pytest.fixture
def annotation_source(two_documents) -> StubComparisonSource:
    """Provide a source whose annotations differ and everything else is equal."""
    return StubComparisonSource(two_documents, verdicts={"annotations_equal": False})
