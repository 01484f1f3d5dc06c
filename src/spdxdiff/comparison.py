#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/comparison.py
"""Equivalence helpers and an in-memory comparison source.

:class:`DocumentComparer` implements the
:class:`~spdxdiff.model.ComparisonSource` protocol over already-loaded
:class:`~spdxdiff.model.SpdxDocument` objects. Values are compared with
their own ``equivalent`` method when they have one and with ``==``
otherwise; collections are compared without regard to order. It does not
walk the element graph beyond the document level.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Collection, Dict, Optional, Sequence

from spdxdiff.model import SpdxDocument

logger = logging.getLogger(__name__)


def _equivalent(a: Any, b: Any) -> bool:
    method = getattr(a, "equivalent", None)
    if callable(method):
        return bool(method(b))
    return bool(a == b)


def equivalent_optional(first: Optional[Any], second: Optional[Any]) -> bool:
    """Compare two optional values.

    Both absent is equivalent; exactly one absent is not.
    """
    if first is None:
        return second is None
    if second is None:
        return False
    return _equivalent(first, second)


def equivalent_collections(first: Optional[Collection[Any]], second: Optional[Collection[Any]]) -> bool:
    """Compare two collections without regard to order.

    Parameters
    ----------
    first, second : collection or None
        Collections to compare; ``None`` only matches ``None``

    Returns
    -------
    bool
        True when both have the same size and every item of ``first`` has an
        equivalent item in ``second``

    """
    if first is None:
        return second is None
    if second is None:
        return False
    if len(first) != len(second):
        return False
    return all(any(_equivalent(a, b) for b in second) for a in first)


def _creation_attribute(document: SpdxDocument, attribute: str) -> Optional[Any]:
    if document.creation_info is None:
        return None
    return getattr(document.creation_info, attribute)


class DocumentComparer:
    """Comparison source over a list of in-memory documents.

    All verdicts are computed once, at construction.

    Parameters
    ----------
    documents : sequence of SpdxDocument
        Documents in report order

    Examples
    --------
        >>> comparer = DocumentComparer([doc_a, doc_b])
        >>> comparer.document_count()
        2
        >>> comparer.annotations_equal()
        True

    """

    def __init__(self, documents: Sequence[SpdxDocument]):
        """Compare ``documents`` pairwise against the first one."""
        self._documents = list(documents)
        checks: Dict[str, Callable[[SpdxDocument, SpdxDocument], bool]] = {
            "versions": lambda a, b: equivalent_optional(a.spec_version, b.spec_version),
            "data_licenses": lambda a, b: equivalent_optional(a.data_license, b.data_license),
            "comments": lambda a, b: equivalent_optional(a.comment, b.comment),
            "creator_comments": lambda a, b: equivalent_optional(
                _creation_attribute(a, "comment"), _creation_attribute(b, "comment")
            ),
            "creation_dates": lambda a, b: equivalent_optional(
                _creation_attribute(a, "created"), _creation_attribute(b, "created")
            ),
            "license_list_versions": lambda a, b: equivalent_optional(
                _creation_attribute(a, "license_list_version"), _creation_attribute(b, "license_list_version")
            ),
            "annotations": lambda a, b: equivalent_collections(a.annotations, b.annotations),
            "relationships": lambda a, b: equivalent_collections(a.relationships, b.relationships),
            "described_contents": lambda a, b: equivalent_collections(a.document_describes, b.document_describes),
        }
        self._verdicts = {name: self._all_equivalent(check) for name, check in checks.items()}
        logger.debug("Compared %d documents: %s", len(self._documents), self._verdicts)

    def _all_equivalent(self, check: Callable[[SpdxDocument, SpdxDocument], bool]) -> bool:
        if not self._documents:
            return True
        first = self._documents[0]
        return all(check(first, other) for other in self._documents[1:])

    def document_count(self) -> int:
        return len(self._documents)

    def document(self, index: int) -> SpdxDocument:
        return self._documents[index]

    def versions_equal(self) -> bool:
        return self._verdicts["versions"]

    def data_licenses_equal(self) -> bool:
        return self._verdicts["data_licenses"]

    def comments_equal(self) -> bool:
        return self._verdicts["comments"]

    def creator_comments_equal(self) -> bool:
        return self._verdicts["creator_comments"]

    def creation_dates_equal(self) -> bool:
        return self._verdicts["creation_dates"]

    def license_list_versions_equal(self) -> bool:
        return self._verdicts["license_list_versions"]

    def annotations_equal(self) -> bool:
        return self._verdicts["annotations"]

    def relationships_equal(self) -> bool:
        return self._verdicts["relationships"]

    def described_contents_equal(self) -> bool:
        return self._verdicts["described_contents"]
