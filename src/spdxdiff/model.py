#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/model.py
"""Data model consumed by the comparison report.

This module defines the SPDX values that appear in a document-level
comparison (annotations, checksums, relationships, external references,
described elements) and the ``ComparisonSource`` protocol through which
the report reads per-document values and cross-document verdicts.

The report only reads these objects. Identity matters: two structurally
equal values are still distinct objects, and the rendering caches key on
the object rather than its content.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable


class AnnotationType(str, Enum):
    """Type of an SPDX annotation."""

    REVIEW = "REVIEW"
    OTHER = "OTHER"


class ChecksumAlgorithm(str, Enum):
    """Checksum algorithms recognised by SPDX 2.3."""

    SHA1 = "SHA1"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"
    SHA3_256 = "SHA3-256"
    SHA3_384 = "SHA3-384"
    SHA3_512 = "SHA3-512"
    BLAKE2B_256 = "BLAKE2b-256"
    BLAKE2B_384 = "BLAKE2b-384"
    BLAKE2B_512 = "BLAKE2b-512"
    BLAKE3 = "BLAKE3"
    MD2 = "MD2"
    MD4 = "MD4"
    MD5 = "MD5"
    MD6 = "MD6"
    ADLER32 = "ADLER32"


class RelationshipType(str, Enum):
    """Relationship types recognised by SPDX 2.3."""

    DESCRIBES = "DESCRIBES"
    DESCRIBED_BY = "DESCRIBED_BY"
    CONTAINS = "CONTAINS"
    CONTAINED_BY = "CONTAINED_BY"
    DEPENDS_ON = "DEPENDS_ON"
    DEPENDENCY_OF = "DEPENDENCY_OF"
    DEPENDENCY_MANIFEST_OF = "DEPENDENCY_MANIFEST_OF"
    BUILD_DEPENDENCY_OF = "BUILD_DEPENDENCY_OF"
    DEV_DEPENDENCY_OF = "DEV_DEPENDENCY_OF"
    OPTIONAL_DEPENDENCY_OF = "OPTIONAL_DEPENDENCY_OF"
    PROVIDED_DEPENDENCY_OF = "PROVIDED_DEPENDENCY_OF"
    TEST_DEPENDENCY_OF = "TEST_DEPENDENCY_OF"
    RUNTIME_DEPENDENCY_OF = "RUNTIME_DEPENDENCY_OF"
    EXAMPLE_OF = "EXAMPLE_OF"
    GENERATES = "GENERATES"
    GENERATED_FROM = "GENERATED_FROM"
    ANCESTOR_OF = "ANCESTOR_OF"
    DESCENDANT_OF = "DESCENDANT_OF"
    VARIANT_OF = "VARIANT_OF"
    DISTRIBUTION_ARTIFACT = "DISTRIBUTION_ARTIFACT"
    PATCH_FOR = "PATCH_FOR"
    PATCH_APPLIED = "PATCH_APPLIED"
    COPY_OF = "COPY_OF"
    FILE_ADDED = "FILE_ADDED"
    FILE_DELETED = "FILE_DELETED"
    FILE_MODIFIED = "FILE_MODIFIED"
    EXPANDED_FROM_ARCHIVE = "EXPANDED_FROM_ARCHIVE"
    DYNAMIC_LINK = "DYNAMIC_LINK"
    STATIC_LINK = "STATIC_LINK"
    DATA_FILE_OF = "DATA_FILE_OF"
    TEST_CASE_OF = "TEST_CASE_OF"
    BUILD_TOOL_OF = "BUILD_TOOL_OF"
    DEV_TOOL_OF = "DEV_TOOL_OF"
    TEST_OF = "TEST_OF"
    TEST_TOOL_OF = "TEST_TOOL_OF"
    DOCUMENTATION_OF = "DOCUMENTATION_OF"
    OPTIONAL_COMPONENT_OF = "OPTIONAL_COMPONENT_OF"
    METAFILE_OF = "METAFILE_OF"
    PACKAGE_OF = "PACKAGE_OF"
    AMENDS = "AMENDS"
    PREREQUISITE_FOR = "PREREQUISITE_FOR"
    HAS_PREREQUISITE = "HAS_PREREQUISITE"
    REQUIREMENT_DESCRIPTION_FOR = "REQUIREMENT_DESCRIPTION_FOR"
    SPECIFICATION_FOR = "SPECIFICATION_FOR"
    OTHER = "OTHER"


class ReferenceCategory(str, Enum):
    """Category of an external reference."""

    SECURITY = "SECURITY"
    PACKAGE_MANAGER = "PACKAGE-MANAGER"
    PERSISTENT_ID = "PERSISTENT-ID"
    OTHER = "OTHER"


class FileType(str, Enum):
    """SPDX file types."""

    SOURCE = "SOURCE"
    BINARY = "BINARY"
    ARCHIVE = "ARCHIVE"
    APPLICATION = "APPLICATION"
    AUDIO = "AUDIO"
    IMAGE = "IMAGE"
    TEXT = "TEXT"
    VIDEO = "VIDEO"
    DOCUMENTATION = "DOCUMENTATION"
    SPDX = "SPDX"
    OTHER = "OTHER"


@dataclass
class SpdxElement:
    """An SPDX element as referenced from relationships and document-describes lists.

    Parameters
    ----------
    id : str or None
        SPDX identifier (e.g. ``SPDXRef-Package``)
    name : str or None, default = None
        Element name, when the element type carries one

    """

    id: Optional[str]
    name: Optional[str] = None


@dataclass
class Annotation:
    """An annotation attached to an SPDX document or element."""

    annotator: str
    annotation_date: str
    comment: str
    annotation_type: AnnotationType = AnnotationType.OTHER


@dataclass
class Checksum:
    """A checksum: content-addressed, so collections of checksums render sorted."""

    algorithm: ChecksumAlgorithm
    value: str


@dataclass
class Relationship:
    """A relationship from the owning element to a related element.

    Parameters
    ----------
    relationship_type : RelationshipType or None
        Type of the relationship
    related_element : SpdxElement or None, default = None
        Target of the relationship, ``None`` when it could not be resolved
    comment : str or None, default = None
        Optional relationship comment

    """

    relationship_type: Optional[RelationshipType]
    related_element: Optional[SpdxElement] = None
    comment: Optional[str] = None


@dataclass
class ReferenceType:
    """Type of an external reference, identified by URI."""

    individual_uri: str


@dataclass
class ExternalRef:
    """An external reference (package manager coordinate, CPE, advisory, ...)."""

    reference_category: Optional[ReferenceCategory] = None
    reference_type: Optional[ReferenceType] = None
    reference_locator: Optional[str] = None
    comment: Optional[str] = None


@dataclass
class CreationInfo:
    """Creation metadata of an SPDX document."""

    created: str
    creators: list[str] = field(default_factory=list)
    comment: Optional[str] = None
    license_list_version: Optional[str] = None


@dataclass
class SpdxDocument:
    """Document-level view of an SPDX document.

    Parameters
    ----------
    id : str
        SPDX identifier of the document
    namespace : str
        Document namespace URI
    spec_version : str
        SPDX specification version (e.g. ``SPDX-2.3``)
    data_license : Any
        Data license; rendered with ``str()``
    name : str or None, default = None
        Document name
    comment : str or None, default = None
        Document comment
    creation_info : CreationInfo or None, default = None
        Creation metadata
    annotations : list of Annotation
        Document annotations
    relationships : list of Relationship
        Document relationships
    document_describes : list of SpdxElement
        Elements the document describes

    """

    id: str
    namespace: str
    spec_version: str
    data_license: Any
    name: Optional[str] = None
    comment: Optional[str] = None
    creation_info: Optional[CreationInfo] = None
    annotations: list[Annotation] = field(default_factory=list)
    relationships: list[Relationship] = field(default_factory=list)
    document_describes: list[SpdxElement] = field(default_factory=list)


@runtime_checkable
class ComparisonSource(Protocol):
    """Protocol for the component that compared the documents.

    Implementations expose the compared documents by index, in the order the
    caller's document labels are given, and one equality verdict per
    comparable document-level field. Verdicts follow the implementation's own
    notion of equivalence; the report never recomputes them.
    """

    def document_count(self) -> int: ...

    def document(self, index: int) -> SpdxDocument: ...

    def versions_equal(self) -> bool: ...

    def data_licenses_equal(self) -> bool: ...

    def comments_equal(self) -> bool: ...

    def creator_comments_equal(self) -> bool: ...

    def creation_dates_equal(self) -> bool: ...

    def license_list_versions_equal(self) -> bool: ...

    def annotations_equal(self) -> bool: ...

    def relationships_equal(self) -> bool: ...

    def described_contents_equal(self) -> bool: ...
