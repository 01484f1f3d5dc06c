#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/fields.py
"""Static registry of the document-level fields shown in the report.

Each :class:`FieldDescriptor` fixes a field's column, header label, width,
whether it is required, how its cells are rendered and which comparison
source verdict (if any) fills its comparison row. Column 0 holds the
document labels; fields follow in declaration order, so the header row is
always ``HEADER_TITLES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from spdxdiff.constants import DOCUMENT_LABEL_HEADER, DOCUMENT_LABEL_WIDTH
from spdxdiff.exceptions import AnalysisError
from spdxdiff.model import ComparisonSource, SpdxDocument
from spdxdiff.rendering.context import RenderContext

Extractor = Callable[[RenderContext, SpdxDocument], str]

LABEL_COLUMN = 0


class FieldKind(str, Enum):
    """How a field's cells are produced."""

    SCALAR_EQUAL = "scalar-equal"
    """Single value with a cross-document verdict."""

    SCALAR_PASSTHROUGH = "scalar-passthrough"
    """Single value without a verdict; the comparison row reads ``N/A``."""

    COLLECTION = "collection"
    """Multi-valued field joined by the collection formatter."""


@dataclass(frozen=True)
class FieldDescriptor:
    """Definition of one report column.

    Parameters
    ----------
    name : str
        Stable identifier, used for cache keys and error messages
    label : str
        Header text
    column : int
        Zero-based column index
    required : bool
        Whether SPDX requires the field. Descriptive only; an empty cell is
        written the same way for required and optional fields.
    kind : FieldKind
        Rendering strategy. Passthrough fields write ``N/A`` in the
        comparison row and must not name a verdict; every other kind must.
    width : int
        Column width in characters
    extract : callable
        Produces the cell text of one document
    verdict : str or None
        Name of the :class:`ComparisonSource` method giving the verdict;
        ``None`` for fields without a cross-document equality

    """

    name: str
    label: str
    column: int
    required: bool
    kind: FieldKind
    width: int
    extract: Extractor
    verdict: Optional[str] = None

    def __post_init__(self) -> None:
        """Check that the verdict matches the field kind.

        Raises
        ------
        ValueError
            If a passthrough field names a verdict or a compared field lacks one

        """
        if (self.kind is FieldKind.SCALAR_PASSTHROUGH) != (self.verdict is None):
            raise ValueError(f"Field {self.name!r} of kind {self.kind.value} has verdict {self.verdict!r}")

    def verdict_of(self, source: ComparisonSource) -> Optional[bool]:
        """Return the source's verdict for this field, or None for passthrough fields."""
        if self.kind is FieldKind.SCALAR_PASSTHROUGH or self.verdict is None:
            return None
        return bool(getattr(source, self.verdict)())

    def render(self, context: RenderContext, document: SpdxDocument) -> str:
        """Render this field of ``document``.

        Raises
        ------
        AnalysisError
            If reading the field from the document fails

        """
        try:
            return self.extract(context, document)
        except AnalysisError:
            raise
        except Exception as e:
            raise AnalysisError(
                f"Unable to read {self.label} from document: {e}", value_kind=self.name, original_error=e
            ) from e


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _creation_text(document: SpdxDocument, attribute: str) -> str:
    if document.creation_info is None:
        return ""
    return _text(getattr(document.creation_info, attribute))


_FIELD_SPECS: tuple[tuple[str, str, bool, FieldKind, int, Extractor, Optional[str]], ...] = (
    ("name", "Document Name", True, FieldKind.SCALAR_PASSTHROUGH, 30, lambda ctx, doc: _text(doc.name), None),
    (
        "spec_version",
        "SPDX Version",
        True,
        FieldKind.SCALAR_EQUAL,
        15,
        lambda ctx, doc: _text(doc.spec_version),
        "versions_equal",
    ),
    (
        "data_license",
        "Data License",
        True,
        FieldKind.SCALAR_EQUAL,
        15,
        lambda ctx, doc: _text(doc.data_license),
        "data_licenses_equal",
    ),
    ("id", "ID", True, FieldKind.SCALAR_PASSTHROUGH, 15, lambda ctx, doc: _text(doc.id), None),
    (
        "namespace",
        "Document Namespace",
        True,
        FieldKind.SCALAR_PASSTHROUGH,
        60,
        lambda ctx, doc: _text(doc.namespace),
        None,
    ),
    (
        "document_describes",
        "Document Describes",
        True,
        FieldKind.COLLECTION,
        40,
        lambda ctx, doc: ctx.elements(doc.document_describes),
        "described_contents_equal",
    ),
    (
        "comment",
        "Document Comment",
        False,
        FieldKind.SCALAR_EQUAL,
        60,
        lambda ctx, doc: _text(doc.comment),
        "comments_equal",
    ),
    (
        "creation_date",
        "Creation Date",
        True,
        FieldKind.SCALAR_EQUAL,
        22,
        lambda ctx, doc: _creation_text(doc, "created"),
        "creation_dates_equal",
    ),
    (
        "creator_comment",
        "Creator Comment",
        False,
        FieldKind.SCALAR_EQUAL,
        60,
        lambda ctx, doc: _creation_text(doc, "comment"),
        "creator_comments_equal",
    ),
    (
        "license_list_version",
        "Lic. List. Ver.",
        False,
        FieldKind.SCALAR_EQUAL,
        22,
        lambda ctx, doc: _creation_text(doc, "license_list_version"),
        "license_list_versions_equal",
    ),
    (
        "annotations",
        "Annotations",
        False,
        FieldKind.COLLECTION,
        80,
        lambda ctx, doc: ctx.annotations(doc.annotations),
        "annotations_equal",
    ),
    (
        "relationships",
        "Relationships",
        False,
        FieldKind.COLLECTION,
        80,
        lambda ctx, doc: ctx.relationships(doc.relationships),
        "relationships_equal",
    ),
)

DOCUMENT_FIELDS: tuple[FieldDescriptor, ...] = tuple(
    FieldDescriptor(
        name=name,
        label=label,
        column=column,
        required=required,
        kind=kind,
        width=width,
        extract=extract,
        verdict=verdict,
    )
    for column, (name, label, required, kind, width, extract, verdict) in enumerate(
        _FIELD_SPECS, start=LABEL_COLUMN + 1
    )
)

HEADER_TITLES: tuple[str, ...] = (DOCUMENT_LABEL_HEADER,) + tuple(f.label for f in DOCUMENT_FIELDS)
COLUMN_WIDTHS: tuple[int, ...] = (DOCUMENT_LABEL_WIDTH,) + tuple(f.width for f in DOCUMENT_FIELDS)


def get_field(name: str) -> FieldDescriptor:
    """Return the descriptor named ``name``.

    Raises
    ------
    KeyError
        If no field has that name

    """
    for descriptor in DOCUMENT_FIELDS:
        if descriptor.name == name:
            return descriptor
    raise KeyError(name)
