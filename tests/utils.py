"""Test utilities for the spdxdiff test suite.

This module provides factories for SPDX documents and a scriptable
comparison source, shared by the unit and integration tests.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional, Sequence

from spdxdiff.model import (
    Annotation,
    AnnotationType,
    CreationInfo,
    Relationship,
    RelationshipType,
    SpdxDocument,
    SpdxElement,
)

VERDICT_METHODS = (
    "versions_equal",
    "data_licenses_equal",
    "comments_equal",
    "creator_comments_equal",
    "creation_dates_equal",
    "license_list_versions_equal",
    "annotations_equal",
    "relationships_equal",
    "described_contents_equal",
)


def make_document(
    name: str = "Document A",
    index: int = 0,
    annotations: Optional[List[Annotation]] = None,
    relationships: Optional[List[Relationship]] = None,
    describes: Optional[List[SpdxElement]] = None,
    comment: Optional[str] = None,
    creator_comment: Optional[str] = None,
) -> SpdxDocument:
    """Create a minimal SPDX 2.3 document."""
    return SpdxDocument(
        id="SPDXRef-DOCUMENT",
        namespace=f"https://example.com/spdx/doc-{index}",
        spec_version="SPDX-2.3",
        data_license="CC0-1.0",
        name=name,
        comment=comment,
        creation_info=CreationInfo(
            created="2024-01-01T00:00:00Z",
            creators=["Tool: spdxdiff-tests"],
            comment=creator_comment,
            license_list_version="3.22",
        ),
        annotations=annotations if annotations is not None else [],
        relationships=relationships if relationships is not None else [],
        document_describes=describes if describes is not None else [SpdxElement("SPDXRef-Package", "pkg")],
    )


def make_annotation(comment: str = "ok", annotator: str = "Tool: x", date: str = "2024-01-01T00:00:00Z") -> Annotation:
    """Create a REVIEW annotation."""
    return Annotation(annotator=annotator, annotation_date=date, comment=comment, annotation_type=AnnotationType.REVIEW)


def make_relationship(element_id: str = "SPDXRef-Package", name: Optional[str] = "pkg") -> Relationship:
    """Create a DESCRIBES relationship to ``element_id``."""
    return Relationship(RelationshipType.DESCRIBES, SpdxElement(element_id, name))


class StubComparisonSource:
    """Comparison source with scripted verdicts.

    Parameters
    ----------
    documents : sequence of SpdxDocument
        Documents returned by :meth:`document`
    verdicts : dict, optional
        Verdict per method name; unspecified verdicts are True
    failing_documents : dict, optional
        Maps a document index to the exception raised when it is read

    """

    def __init__(
        self,
        documents: Sequence[SpdxDocument],
        verdicts: Optional[Dict[str, bool]] = None,
        failing_documents: Optional[Dict[int, Exception]] = None,
    ):
        self.documents = list(documents)
        self.verdicts = {name: True for name in VERDICT_METHODS}
        self.verdicts.update(verdicts or {})
        self.failing_documents = failing_documents or {}
        self.reads: Dict[int, int] = {}
        self._lock = threading.Lock()

    def document_count(self) -> int:
        return len(self.documents)

    def document(self, index: int) -> SpdxDocument:
        with self._lock:
            self.reads[index] = self.reads.get(index, 0) + 1
        if index in self.failing_documents:
            raise self.failing_documents[index]
        return self.documents[index]

    def __getattr__(self, name: str) -> Callable[[], bool]:
        if name in VERDICT_METHODS:
            return lambda: self.verdicts[name]
        raise AttributeError(name)
