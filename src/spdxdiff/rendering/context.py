#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/rendering/context.py
"""Cache-backed renderers scoped to one report build."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from spdxdiff.model import Annotation, Checksum, Relationship, SpdxElement
from spdxdiff.options import ReportOptions
from spdxdiff.rendering import formatting
from spdxdiff.rendering.cache import IdentityRenderCache, RenderCache
from spdxdiff.rendering.values import annotation_to_string, checksum_to_string, relationship_to_string


class RenderContext:
    """Renderers and caches shared by the field importers of one report.

    Annotations, checksums and relationships are cached per value object;
    finished cells are cached per ``(document_index, field_name)``. A new
    context is created for every build, so nothing leaks between reports.

    Parameters
    ----------
    options : ReportOptions or None, default None
        Report options; supplies the cell size bound

    """

    def __init__(self, options: ReportOptions | None = None):
        """Initialize empty caches."""
        self.options = options or ReportOptions()
        self.annotation_cache: IdentityRenderCache[Annotation] = IdentityRenderCache("annotations")
        self.checksum_cache: IdentityRenderCache[Checksum] = IdentityRenderCache("checksums")
        self.relationship_cache: IdentityRenderCache[Relationship] = IdentityRenderCache("relationships")
        self.field_cache: RenderCache[tuple[int, str]] = RenderCache("fields")

    @property
    def max_cell_chars(self) -> int:
        return self.options.max_cell_chars

    def annotation(self, annotation: Annotation) -> str:
        return self.annotation_cache.get(annotation, annotation_to_string)

    def checksum(self, checksum: Checksum) -> str:
        return self.checksum_cache.get(checksum, checksum_to_string)

    def relationship(self, relationship: Relationship) -> str:
        return self.relationship_cache.get(relationship, relationship_to_string)

    def annotations(self, annotations: Optional[Iterable[Annotation]]) -> str:
        return formatting.annotations_to_string(annotations, self.annotation, self.max_cell_chars)

    def checksums(self, checksums: Optional[Iterable[Checksum]]) -> str:
        return formatting.checksums_to_string(checksums, self.checksum, self.max_cell_chars)

    def relationships(self, relationships: Optional[Iterable[Relationship]]) -> str:
        return formatting.relationships_to_string(relationships, self.relationship, self.max_cell_chars)

    def elements(self, elements: Optional[Iterable[Optional[SpdxElement]]]) -> str:
        return formatting.element_list_to_string(elements)

    def field_value(self, document_index: int, field_name: str, compute: Callable[[], str]) -> str:
        """Return the cell text of one field for one document, computing it once."""
        return self.field_cache.get((document_index, field_name), lambda key: compute())
