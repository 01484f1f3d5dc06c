#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests: build a comparison report into an Excel workbook."""

import pytest

from spdxdiff import DocumentComparer, OpenpyxlSheet, ReportBuilder, ReportOptions, load_options_file
from spdxdiff.fields import HEADER_TITLES, get_field
from utils import make_annotation, make_document, make_relationship

openpyxl = pytest.importorskip("openpyxl")


@pytest.fixture
def documents():
    shared = make_relationship("SPDXRef-Package")
    return [
        make_document("Alpha", 0, annotations=[make_annotation("reviewed")], relationships=[shared]),
        make_document("Beta", 1, annotations=[make_annotation("reviewed")], relationships=[shared]),
        make_document("Gamma", 2, annotations=[], relationships=[shared, make_relationship("SPDXRef-Extra", None)]),
    ]


@pytest.mark.integration
class TestXlsxReport:
    """End-to-end report builds through openpyxl."""

    def test_round_trip_through_file(self, documents, tmp_path):
        """Test that a saved report reloads with the expected grid."""
        workbook = openpyxl.Workbook()
        sheet = OpenpyxlSheet.create(workbook, "Document")
        builder = ReportBuilder()
        builder.build(DocumentComparer(documents), ["alpha.spdx", "beta.spdx", "gamma.spdx"], sheet)
        assert builder.verify(sheet) is None

        path = tmp_path / "compare.xlsx"
        workbook.save(path)
        reloaded = openpyxl.load_workbook(path)["Document"]

        assert [c.value for c in reloaded[1]] == list(HEADER_TITLES)
        assert reloaded.cell(row=2, column=1).value == "Compare Results"
        relationships = get_field("relationships").column + 1
        annotations = get_field("annotations").column + 1
        assert reloaded.cell(row=2, column=relationships).value == "Diff"
        assert reloaded.cell(row=2, column=annotations).value == "Diff"
        assert reloaded.cell(row=5, column=relationships).value == (
            "DESCRIBES:[pkg]SPDXRef-Package\nDESCRIBES:SPDXRef-Extra"
        )
        assert reloaded.column_dimensions["A"].width == 30

    def test_rebuild_reuses_sheet(self, documents):
        """Test that a second build replaces the rows of the first."""
        workbook = openpyxl.Workbook()
        sheet = OpenpyxlSheet.create(workbook, "Document")
        builder = ReportBuilder(ReportOptions(parallel_fields=True))
        builder.build(DocumentComparer(documents), ["a", "b", "c"], sheet)
        builder.build(DocumentComparer(documents[:1]), ["a"], sheet)
        assert sheet.row_count == 3
        assert sheet.worksheet.max_row == 3
        assert builder.verify(sheet) is None

    def test_options_from_pyproject(self, documents, tmp_path):
        """Test building with options read from pyproject.toml."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.spdxdiff]\nmax-cell-chars = 40\nsheet-name = \"Compare\"\n", encoding="utf-8")
        options = load_options_file(pyproject)

        workbook = openpyxl.Workbook()
        builder = ReportBuilder(options)
        sheet = builder.create_worksheet(workbook)
        assert builder.verify(sheet) is None
        many = make_document("Many", 0, annotations=[make_annotation(f"note {i}") for i in range(20)])
        builder.build(DocumentComparer([many]), ["many.spdx"], sheet)

        value = workbook["Compare"].cell(row=3, column=get_field("annotations").column + 1).value
        assert len(value) <= 40
        assert value.endswith("more...]")

    def test_create_worksheet_uses_default_sheet_name(self):
        """Test that the worksheet is named after the default options."""
        workbook = openpyxl.Workbook()
        sheet = ReportBuilder().create_worksheet(workbook)
        assert sheet.worksheet.title == "Document"
        assert sheet.row_count == 1

    def test_control_characters_in_comment(self, tmp_path):
        """Test that a form feed in a comment is escaped instead of failing the build."""
        documents = [make_document("A", 0, comment="line\x0cfeed"), make_document("B", 1, comment="plain")]
        workbook = openpyxl.Workbook()
        builder = ReportBuilder()
        sheet = builder.create_worksheet(workbook)

        builder.build(DocumentComparer(documents), ["a.spdx", "b.spdx"], sheet)

        comment = get_field("comment").column
        assert sheet.get_value(2, comment) == "line_x000C_feed"
        assert sheet.get_value(3, comment) == "plain"
        workbook.save(tmp_path / "compare.xlsx")

    def test_newlines_are_kept(self, documents):
        """Test that multi-line cells keep their line breaks."""
        workbook = openpyxl.Workbook()
        builder = ReportBuilder()
        sheet = builder.create_worksheet(workbook)
        builder.build(DocumentComparer(documents), ["a", "b", "c"], sheet)
        assert "\n" in sheet.get_value(4, get_field("relationships").column)
