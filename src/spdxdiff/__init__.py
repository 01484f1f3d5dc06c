"""spdxdiff - render an N-way SPDX document comparison as a worksheet.

spdxdiff takes the result of comparing several SPDX documents and writes it
into a table: one comparison row marking which document-level fields
differ, followed by one row per document holding that document's value of
each field. Multi-valued fields (annotations, relationships, described
elements) are rendered into stable, size-bounded cell text, and every value
is rendered at most once per report even though documents are processed
in parallel.

Key Features
------------
- Static field-to-column layout with header verification
- Deterministic rendering of annotations, checksums, relationships and
  external references, with documented sentinels (``[NONE]``,
  ``[MISSING]``, ``[UNKNOWNID]``)
- Thread-safe compute-once rendering caches
- In-memory and openpyxl worksheet sinks

Requirements
------------
- Python 3.10+
- openpyxl for writing Excel worksheets (``pip install spdxdiff[xlsx]``)

Examples
--------
Build a report in memory:

    >>> from spdxdiff import DocumentComparer, MemorySheet, ReportBuilder
    >>> sheet = MemorySheet()
    >>> ReportBuilder().build(DocumentComparer([doc_a, doc_b]), ["a.spdx", "b.spdx"], sheet)
    >>> sheet.values()[1][:3]
    ['Compare Results', 'N/A', 'Equals']

Write into an Excel workbook:

    >>> from openpyxl import Workbook
    >>> from spdxdiff import ReportBuilder
    >>> workbook = Workbook()
    >>> builder = ReportBuilder()
    >>> sheet = builder.create_worksheet(workbook)
    >>> builder.build(comparer, labels, sheet)
    >>> workbook.save("compare.xlsx")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from spdxdiff.comparison import DocumentComparer, equivalent_collections, equivalent_optional
from spdxdiff.exceptions import (
    AnalysisError,
    ComparisonError,
    DependencyError,
    InputConsistencyError,
    SinkError,
    SpdxDiffError,
    ValidationError,
    VerificationError,
)
from spdxdiff.fields import DOCUMENT_FIELDS, HEADER_TITLES, FieldDescriptor, FieldKind
from spdxdiff.importers import FieldImporter, Verdict
from spdxdiff.model import (
    Annotation,
    AnnotationType,
    Checksum,
    ChecksumAlgorithm,
    ComparisonSource,
    CreationInfo,
    ExternalRef,
    FileType,
    ReferenceCategory,
    ReferenceType,
    Relationship,
    RelationshipType,
    SpdxDocument,
    SpdxElement,
)
from spdxdiff.options import ReportOptions, load_options_file
from spdxdiff.references import ListedReferenceTypes
from spdxdiff.rendering import RenderContext
from spdxdiff.report import ReportBuilder, verify_header
from spdxdiff.sinks import CellStyle, MemorySheet, OpenpyxlSheet, TabularSink

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "AnnotationType",
    "AnalysisError",
    "CellStyle",
    "Checksum",
    "ChecksumAlgorithm",
    "ComparisonError",
    "ComparisonSource",
    "CreationInfo",
    "DOCUMENT_FIELDS",
    "DependencyError",
    "DocumentComparer",
    "ExternalRef",
    "FieldDescriptor",
    "FieldImporter",
    "FieldKind",
    "FileType",
    "HEADER_TITLES",
    "InputConsistencyError",
    "ListedReferenceTypes",
    "MemorySheet",
    "OpenpyxlSheet",
    "ReferenceCategory",
    "ReferenceType",
    "Relationship",
    "RelationshipType",
    "RenderContext",
    "ReportBuilder",
    "ReportOptions",
    "SinkError",
    "SpdxDiffError",
    "SpdxDocument",
    "SpdxElement",
    "TabularSink",
    "ValidationError",
    "Verdict",
    "VerificationError",
    "equivalent_collections",
    "equivalent_optional",
    "load_options_file",
    "verify_header",
    "__version__",
]
