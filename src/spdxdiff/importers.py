#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/importers.py
"""Field importers: fill one report column from the comparison source.

An importer writes the field's verdict into the comparison row, then
renders every document's value in parallel and writes it into that
document's row. Documents are independent of each other, so the order in
which rows are filled is unspecified.
"""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Executor, Future, wait
from enum import Enum
from typing import List, Optional

from spdxdiff.constants import DIFFERENT_STRING, EQUAL_STRING, NOT_APPLICABLE_STRING
from spdxdiff.exceptions import ComparisonError
from spdxdiff.fields import FieldDescriptor
from spdxdiff.model import ComparisonSource
from spdxdiff.rendering.context import RenderContext
from spdxdiff.sinks import CellStyle, TabularSink

logger = logging.getLogger(__name__)


class Verdict(str, Enum):
    """Cross-document equality of one field."""

    EQUAL = EQUAL_STRING
    DIFFERENT = DIFFERENT_STRING

    @classmethod
    def from_bool(cls, equal: bool) -> "Verdict":
        return cls.EQUAL if equal else cls.DIFFERENT

    @property
    def style(self) -> CellStyle:
        return CellStyle.EQUAL if self is Verdict.EQUAL else CellStyle.DIFFERENT


class FieldImporter:
    """Import one field of every compared document into the sink.

    Parameters
    ----------
    descriptor : FieldDescriptor
        Field to import

    """

    def __init__(self, descriptor: FieldDescriptor):
        """Initialize the importer for ``descriptor``."""
        self.descriptor = descriptor

    def __repr__(self) -> str:
        return f"FieldImporter({self.descriptor.name!r})"

    def write_verdict(self, source: ComparisonSource, sink: TabularSink, comparison_row: int) -> Optional[Verdict]:
        """Write the verdict marker, or ``N/A`` for fields without one.

        Returns
        -------
        Verdict or None
            The verdict written, None for fields without a verdict

        """
        cell = sink.cell(comparison_row, self.descriptor.column)
        equal = self.descriptor.verdict_of(source)
        if equal is None:
            cell.set_value(NOT_APPLICABLE_STRING)
            return None
        verdict = Verdict.from_bool(equal)
        cell.set_value(verdict.value)
        cell.set_style(verdict.style)
        return verdict

    def render_document(self, source: ComparisonSource, context: RenderContext, index: int) -> str:
        """Return the cell text for document ``index``, rendered at most once per report."""
        return context.field_value(
            index,
            self.descriptor.name,
            lambda: self.descriptor.render(context, source.document(index)),
        )

    def _import_document(
        self, source: ComparisonSource, sink: TabularSink, context: RenderContext, index: int, row: int
    ) -> None:
        try:
            text = self.render_document(source, context, index)
            sink.cell(row, self.descriptor.column).set_value(text)
        except Exception as e:
            raise ComparisonError(self.descriptor.name, index, original_error=e) from e

    def import_field(
        self,
        source: ComparisonSource,
        sink: TabularSink,
        context: RenderContext,
        executor: Executor,
        comparison_row: int,
    ) -> Optional[Verdict]:
        """Write the verdict and every document's value for this field.

        Document ``i`` is written to row ``comparison_row + 1 + i``.

        Parameters
        ----------
        source : ComparisonSource
            Compared documents and verdicts
        sink : TabularSink
            Destination grid; the rows must already exist
        context : RenderContext
            Caches shared by the importers of this report
        executor : Executor
            Runs the per-document work
        comparison_row : int
            Row holding the verdicts

        Returns
        -------
        Verdict or None
            The verdict written, None for fields without a verdict

        Raises
        ------
        ComparisonError
            If the verdict or any document's value could not be produced.
            Pending documents are cancelled; cells already written remain.

        """
        try:
            verdict = self.write_verdict(source, sink, comparison_row)
        except Exception as e:
            raise ComparisonError(self.descriptor.name, original_error=e) from e

        futures: List[Future[None]] = [
            executor.submit(self._import_document, source, sink, context, index, comparison_row + 1 + index)
            for index in range(source.document_count())
        ]
        _, pending = wait(futures, return_when=FIRST_EXCEPTION)
        if pending:
            for future in pending:
                future.cancel()
            wait(pending)

        for future in futures:
            if future.cancelled():
                continue
            error = future.exception()
            if error is not None:
                logger.debug("Import of field %s failed: %s", self.descriptor.name, error)
                raise error

        logger.debug("Imported field %s (%s)", self.descriptor.name, verdict.value if verdict else "N/A")
        return verdict
