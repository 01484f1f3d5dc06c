#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/report.py
"""Build the document-level comparison worksheet.

Layout
------
- row 0: header (``Document``, then one label per field)
- row 1: comparison row; ``Compare Results`` followed by one verdict per field
- rows 2..N+1: one row per document, in the order of the caller's labels

The first column holds the document labels; every other column belongs to
one :class:`~spdxdiff.fields.FieldDescriptor`.

Examples
--------
    >>> from spdxdiff import DocumentComparer, MemorySheet, ReportBuilder
    >>> source = DocumentComparer([doc_a, doc_b])
    >>> sheet = MemorySheet()
    >>> builder = ReportBuilder()
    >>> builder.create(sheet)
    >>> builder.build(source, ["a.spdx", "b.spdx"], sheet)
    >>> builder.verify(sheet) is None
    True

"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Sequence

from spdxdiff.constants import COMPARE_RESULTS_LABEL
from spdxdiff.exceptions import InputConsistencyError, VerificationError
from spdxdiff.fields import COLUMN_WIDTHS, DOCUMENT_FIELDS, HEADER_TITLES, LABEL_COLUMN
from spdxdiff.importers import FieldImporter
from spdxdiff.model import ComparisonSource
from spdxdiff.options import ReportOptions
from spdxdiff.rendering.context import RenderContext
from spdxdiff.sinks import CellStyle, OpenpyxlSheet, TabularSink

logger = logging.getLogger(__name__)

HEADER_ROW = 0


def verify_header(sink: TabularSink, titles: Sequence[str] = HEADER_TITLES) -> None:
    """Check that the header row matches ``titles`` exactly.

    Raises
    ------
    VerificationError
        Naming the first column whose header is missing or different

    """
    for column, title in enumerate(titles):
        if sink.get_value(HEADER_ROW, column) != title:
            raise VerificationError(title, column)


class ReportBuilder:
    """Write an N-way document comparison into a tabular sink.

    Parameters
    ----------
    options : ReportOptions or None, default None
        Build options

    """

    def __init__(self, options: ReportOptions | None = None):
        """Initialize the builder with one importer per declared field."""
        self.options = options or ReportOptions()
        self.importers = [FieldImporter(descriptor) for descriptor in DOCUMENT_FIELDS]

    def create(self, sink: TabularSink) -> None:
        """Write the styled header row and set the column widths.

        The sink must be empty.
        """
        row = sink.add_row()
        for column, (title, width) in enumerate(zip(HEADER_TITLES, COLUMN_WIDTHS)):
            sink.set_column_width(column, width)
            cell = sink.cell(row, column)
            cell.set_value(title)
            cell.set_style(CellStyle.HEADER)

    def create_worksheet(self, workbook: Any) -> OpenpyxlSheet:
        """Add a worksheet named after ``options.sheet_name`` and write its header.

        An existing sheet of that name is replaced.

        Parameters
        ----------
        workbook : openpyxl.Workbook
            Workbook to add the sheet to

        Returns
        -------
        OpenpyxlSheet
            Sink ready for :meth:`build`

        Raises
        ------
        DependencyError
            If openpyxl is not installed

        """
        sheet = OpenpyxlSheet.create(workbook, self.options.sheet_name)
        self.create(sheet)
        return sheet

    def verify(self, sink: TabularSink) -> Optional[str]:
        """Return None if the header row matches the field layout, else a message."""
        try:
            verify_header(sink)
        except VerificationError as e:
            return e.message
        return None

    def build(self, source: ComparisonSource, document_labels: Sequence[str], sink: TabularSink) -> None:
        """Import the comparison of every document into ``sink``.

        Parameters
        ----------
        source : ComparisonSource
            Compared documents and verdicts
        document_labels : sequence of str
            One label per document, in the source's document order
        sink : TabularSink
            Destination grid. A header row is created if the sink is empty;
            any previous report rows are cleared.

        Raises
        ------
        InputConsistencyError
            If the number of labels differs from the number of documents.
            Nothing is written to the sink.
        ComparisonError
            If a field could not be imported; cells written before the
            failure remain

        """
        document_count = source.document_count()
        if document_count != len(document_labels):
            raise InputConsistencyError(expected=document_count, actual=len(document_labels))

        started = time.perf_counter()
        if sink.row_count == 0:
            self.create(sink)
        sink.clear()

        comparison_row = sink.add_row()
        sink.cell(comparison_row, LABEL_COLUMN).set_value(COMPARE_RESULTS_LABEL)
        for label in document_labels:
            sink.cell(sink.add_row(), LABEL_COLUMN).set_value(label)

        context = RenderContext(self.options)
        with ThreadPoolExecutor(
            max_workers=self.options.max_workers, thread_name_prefix="spdxdiff-document"
        ) as documents_pool:
            if self.options.parallel_fields:
                with ThreadPoolExecutor(
                    max_workers=len(self.importers) or None, thread_name_prefix="spdxdiff-field"
                ) as fields_pool:
                    futures = [
                        fields_pool.submit(
                            importer.import_field, source, sink, context, documents_pool, comparison_row
                        )
                        for importer in self.importers
                    ]
                    # Surface the first failing field in declaration order
                    for future in futures:
                        future.result()
            else:
                for importer in self.importers:
                    importer.import_field(source, sink, context, documents_pool, comparison_row)

        logger.info(
            "Compared %d document(s) across %d field(s) in %.3fs",
            document_count,
            len(self.importers),
            time.perf_counter() - started,
        )
