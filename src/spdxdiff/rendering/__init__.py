#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/rendering/__init__.py
"""Rendering of SPDX values into worksheet cell strings.

Modules
-------
- values: canonical string form of a single value
- formatting: joining, sorting and size-bounding of collections
- cache: thread-safe compute-once caches
- context: cache-backed renderers for one report build

"""

from spdxdiff.rendering.cache import IdentityKey, IdentityRenderCache, RenderCache
from spdxdiff.rendering.context import RenderContext
from spdxdiff.rendering.formatting import (
    annotations_to_string,
    attributions_to_string,
    checksums_to_string,
    element_list_to_string,
    external_refs_to_string,
    file_types_to_string,
    join_bounded,
    license_infos_to_string,
    relationships_to_string,
)
from spdxdiff.rendering.values import (
    annotation_to_string,
    checksum_to_string,
    element_to_string,
    external_ref_to_string,
    optional_checksum_to_string,
    relationship_to_string,
)

__all__ = [
    "IdentityKey",
    "IdentityRenderCache",
    "RenderCache",
    "RenderContext",
    "annotation_to_string",
    "annotations_to_string",
    "attributions_to_string",
    "checksum_to_string",
    "checksums_to_string",
    "element_list_to_string",
    "element_to_string",
    "external_ref_to_string",
    "external_refs_to_string",
    "file_types_to_string",
    "join_bounded",
    "license_infos_to_string",
    "optional_checksum_to_string",
    "relationship_to_string",
    "relationships_to_string",
]
