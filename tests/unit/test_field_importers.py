#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for field importers."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from spdxdiff.exceptions import AnalysisError, ComparisonError
from spdxdiff.fields import get_field
from spdxdiff.importers import FieldImporter, Verdict
from spdxdiff.rendering.context import RenderContext
from spdxdiff.sinks import CellStyle, MemorySheet
from utils import StubComparisonSource, make_annotation, make_document


def _prepared_sheet(document_count):
    sheet = MemorySheet()
    sheet.add_row()  # header
    for _ in range(document_count + 1):
        sheet.add_row()
    return sheet


@pytest.fixture
def executor():
    with ThreadPoolExecutor(max_workers=4) as pool:
        yield pool


@pytest.mark.unit
class TestVerdict:
    """Tests for the Verdict enum."""

    def test_from_bool(self):
        """Test mapping booleans to markers."""
        assert Verdict.from_bool(True) is Verdict.EQUAL
        assert Verdict.from_bool(False).value == "Diff"

    def test_style(self):
        """Test the marker styles."""
        assert Verdict.EQUAL.style is CellStyle.EQUAL
        assert Verdict.DIFFERENT.style is CellStyle.DIFFERENT


@pytest.mark.unit
class TestFieldImporter:
    """Tests for FieldImporter.import_field."""

    def test_writes_verdict_and_documents(self, executor):
        """Test a collection field with differing documents."""
        documents = [
            make_document("A", 0, annotations=[make_annotation("ok")]),
            make_document("B", 1, annotations=[]),
        ]
        source = StubComparisonSource(documents, verdicts={"annotations_equal": False})
        sheet = _prepared_sheet(2)
        importer = FieldImporter(get_field("annotations"))

        verdict = importer.import_field(source, sheet, RenderContext(), executor, comparison_row=1)

        column = get_field("annotations").column
        assert verdict is Verdict.DIFFERENT
        assert sheet.get_value(1, column) == "Diff"
        assert sheet.get_style(1, column) is CellStyle.DIFFERENT
        assert sheet.get_value(2, column) == "2024-01-01T00:00:00Z Tool: x: ok[REVIEW]"
        assert sheet.get_value(3, column) == ""

    def test_passthrough_field_writes_not_applicable(self, executor):
        """Test that fields without a verdict get N/A."""
        source = StubComparisonSource([make_document("A", 0), make_document("B", 1)])
        sheet = _prepared_sheet(2)
        importer = FieldImporter(get_field("name"))

        assert importer.import_field(source, sheet, RenderContext(), executor, comparison_row=1) is None

        column = get_field("name").column
        assert sheet.get_value(1, column) == "N/A"
        assert sheet.get_style(1, column) is CellStyle.DEFAULT
        assert [sheet.get_value(row, column) for row in (2, 3)] == ["A", "B"]

    def test_document_failure_names_field_and_index(self, executor):
        """Test that a failing document is reported with its index."""
        source = StubComparisonSource(
            [make_document("A", 0), make_document("B", 1)],
            failing_documents={1: RuntimeError("unreadable")},
        )
        sheet = _prepared_sheet(2)
        importer = FieldImporter(get_field("namespace"))

        with pytest.raises(ComparisonError) as exc_info:
            importer.import_field(source, sheet, RenderContext(), executor, comparison_row=1)

        assert exc_info.value.field_name == "namespace"
        assert exc_info.value.document_index == 1
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_render_failure_wrapped(self, executor):
        """Test that an AnalysisError inside rendering becomes a ComparisonError."""
        broken = make_document("A", 0)
        broken.annotations = [object()]  # type: ignore[list-item]
        source = StubComparisonSource([broken])
        sheet = _prepared_sheet(1)

        with pytest.raises(ComparisonError) as exc_info:
            FieldImporter(get_field("annotations")).import_field(source, sheet, RenderContext(), executor, 1)

        assert exc_info.value.document_index == 0
        assert isinstance(exc_info.value.original_error, AnalysisError)

    def test_verdict_failure(self, executor):
        """Test that a failing verdict method is reported for the comparison row."""

        class FailingVerdicts(StubComparisonSource):
            def comments_equal(self):
                raise RuntimeError("no verdict")

        source = FailingVerdicts([make_document()])
        sheet = _prepared_sheet(1)

        with pytest.raises(ComparisonError) as exc_info:
            FieldImporter(get_field("comment")).import_field(source, sheet, RenderContext(), executor, 1)

        assert exc_info.value.document_index is None
        assert "comparison row" in str(exc_info.value)

    def test_values_rendered_once_per_report(self, executor):
        """Test that importing a field twice reads each document once."""
        source = StubComparisonSource([make_document("A", 0), make_document("B", 1)])
        sheet = _prepared_sheet(2)
        context = RenderContext()
        importer = FieldImporter(get_field("relationships"))

        importer.import_field(source, sheet, context, executor, 1)
        importer.import_field(source, sheet, context, executor, 1)

        assert source.reads == {0: 1, 1: 1}
