#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/sinks.py
"""Tabular sinks the comparison report is written into.

A sink is a grid of rows and styled string cells. Rows and columns are
zero-based; row 0 holds the header and :meth:`TabularSink.clear` removes
every row after it. Field importers write to distinct cells from worker
threads, so sinks must tolerate concurrent cell creation on different
rows and columns.

Two sinks are provided:

- :class:`MemorySheet` keeps the grid in memory.
- :class:`OpenpyxlSheet` writes into an openpyxl worksheet (requires the
  ``xlsx`` extra).

"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from spdxdiff.constants import DIFFERENT_FILL_COLOR, EQUAL_FILL_COLOR, HEADER_FILL_COLOR
from spdxdiff.exceptions import SinkError
from spdxdiff.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class CellStyle(str, Enum):
    """Cell styles understood by every sink."""

    DEFAULT = "default"
    HEADER = "header"
    EQUAL = "equal"
    DIFFERENT = "different"


@runtime_checkable
class CellHandle(Protocol):
    """A single writable cell."""

    def set_value(self, value: str) -> None: ...

    def set_style(self, style: CellStyle) -> None: ...


@runtime_checkable
class TabularSink(Protocol):
    """Protocol for the grid a report is written into."""

    @property
    def row_count(self) -> int: ...

    def clear(self) -> None: ...

    def add_row(self) -> int: ...

    def cell(self, row: int, column: int) -> CellHandle: ...

    def get_value(self, row: int, column: int) -> Optional[str]: ...

    def set_column_width(self, column: int, width: int) -> None: ...


@dataclass
class MemoryCell:
    """In-memory cell holding a value and a style."""

    value: Optional[str] = None
    style: CellStyle = CellStyle.DEFAULT

    def set_value(self, value: str) -> None:
        self.value = value

    def set_style(self, style: CellStyle) -> None:
        self.style = style


class MemorySheet:
    """Thread-safe in-memory sink.

    Parameters
    ----------
    name : str, default "Document"
        Sheet name

    Examples
    --------
        >>> sheet = MemorySheet()
        >>> row = sheet.add_row()
        >>> sheet.cell(row, 0).set_value("Document")
        >>> sheet.values()
        [['Document']]

    """

    def __init__(self, name: str = "Document"):
        """Initialize an empty sheet."""
        self.name = name
        self.column_widths: Dict[int, int] = {}
        self._rows: List[Dict[int, MemoryCell]] = []
        self._lock = threading.Lock()

    @property
    def row_count(self) -> int:
        with self._lock:
            return len(self._rows)

    def clear(self) -> None:
        """Remove every row after the header row."""
        with self._lock:
            del self._rows[1:]

    def add_row(self) -> int:
        with self._lock:
            self._rows.append({})
            return len(self._rows) - 1

    def cell(self, row: int, column: int) -> MemoryCell:
        """Return the cell at ``(row, column)``, creating it if needed.

        Raises
        ------
        SinkError
            If ``row`` has not been added or ``column`` is negative

        """
        with self._lock:
            if not 0 <= row < len(self._rows) or column < 0:
                raise SinkError(f"No cell at row {row}, column {column} in sheet {self.name!r}")
            return self._rows[row].setdefault(column, MemoryCell())

    def get_value(self, row: int, column: int) -> Optional[str]:
        with self._lock:
            if not 0 <= row < len(self._rows):
                return None
            cell = self._rows[row].get(column)
            return cell.value if cell is not None else None

    def get_style(self, row: int, column: int) -> Optional[CellStyle]:
        with self._lock:
            if not 0 <= row < len(self._rows):
                return None
            cell = self._rows[row].get(column)
            return cell.style if cell is not None else None

    def set_column_width(self, column: int, width: int) -> None:
        with self._lock:
            self.column_widths[column] = width

    def values(self) -> List[List[Optional[str]]]:
        """Return the grid as a list of rows padded to the widest row."""
        with self._lock:
            width = max((max(row) + 1 for row in self._rows if row), default=0)
            return [[row[c].value if c in row else None for c in range(width)] for row in self._rows]


def _escape_control_characters(value: str) -> str:
    """Replace characters worksheets cannot hold with their ``_xHHHH_`` escape."""
    from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

    return ILLEGAL_CHARACTERS_RE.sub(lambda match: f"_x{ord(match.group(0)):04X}_", value)


class _OpenpyxlCell:
    def __init__(self, cell: Any, sheet: "OpenpyxlSheet"):
        self._cell = cell
        self._sheet = sheet

    def set_value(self, value: str) -> None:
        value = _escape_control_characters(value)
        with self._sheet._lock:
            self._cell.value = value
            # openpyxl treats a leading "=" as a formula; cell text is always literal
            if value.startswith("="):
                self._cell.data_type = "s"

    def set_style(self, style: CellStyle) -> None:
        font, fill, alignment = self._sheet._styles[style]
        with self._sheet._lock:
            self._cell.font = font
            self._cell.fill = fill
            self._cell.alignment = alignment


class OpenpyxlSheet:
    """Sink writing into an openpyxl worksheet.

    Header cells are bold on a grey fill, equal markers green and different
    markers yellow. All cells wrap text and align top-left.

    Parameters
    ----------
    worksheet : openpyxl.worksheet.worksheet.Worksheet
        Worksheet to write into

    Examples
    --------
        >>> from openpyxl import Workbook
        >>> sheet = OpenpyxlSheet.create(Workbook(), "Document")
        >>> sheet.row_count
        0

    """

    @requires_dependencies("xlsx sink", [("openpyxl", "openpyxl", ">=3.1")])
    def __init__(self, worksheet: Any):
        """Wrap ``worksheet`` and build the cell styles."""
        from openpyxl.styles import Alignment, Font, PatternFill

        self.worksheet = worksheet
        self._lock = threading.RLock()
        wrapped = Alignment(horizontal="left", vertical="top", wrap_text=True)
        self._styles = {
            CellStyle.DEFAULT: (Font(), PatternFill(fill_type=None), wrapped),
            CellStyle.HEADER: (
                Font(bold=True),
                PatternFill(start_color=HEADER_FILL_COLOR, end_color=HEADER_FILL_COLOR, fill_type="solid"),
                wrapped,
            ),
            CellStyle.EQUAL: (
                Font(),
                PatternFill(start_color=EQUAL_FILL_COLOR, end_color=EQUAL_FILL_COLOR, fill_type="solid"),
                wrapped,
            ),
            CellStyle.DIFFERENT: (
                Font(),
                PatternFill(start_color=DIFFERENT_FILL_COLOR, end_color=DIFFERENT_FILL_COLOR, fill_type="solid"),
                wrapped,
            ),
        }
        if worksheet.max_row > 1 or worksheet.cell(row=1, column=1).value is not None:
            self._row_count = worksheet.max_row
        else:
            self._row_count = 0

    @classmethod
    @requires_dependencies("xlsx sink", [("openpyxl", "openpyxl", ">=3.1")])
    def create(cls, workbook: Any, sheet_name: str) -> "OpenpyxlSheet":
        """Create a fresh worksheet named ``sheet_name``, replacing any existing one.

        Parameters
        ----------
        workbook : openpyxl.Workbook
            Workbook to add the sheet to
        sheet_name : str
            Sheet title

        """
        if sheet_name in workbook.sheetnames:
            logger.debug("Replacing existing worksheet %r", sheet_name)
            workbook.remove(workbook[sheet_name])
        return cls(workbook.create_sheet(sheet_name))

    @property
    def row_count(self) -> int:
        with self._lock:
            return self._row_count

    def clear(self) -> None:
        """Remove every row after the header row."""
        with self._lock:
            if self._row_count > 1:
                self.worksheet.delete_rows(2, self._row_count - 1)
                self._row_count = 1

    def add_row(self) -> int:
        with self._lock:
            self._row_count += 1
            return self._row_count - 1

    def cell(self, row: int, column: int) -> _OpenpyxlCell:
        """Return the cell at ``(row, column)``.

        Raises
        ------
        SinkError
            If ``row`` has not been added or ``column`` is negative

        """
        with self._lock:
            if not 0 <= row < self._row_count or column < 0:
                raise SinkError(f"No cell at row {row}, column {column} in sheet {self.worksheet.title!r}")
            return _OpenpyxlCell(self.worksheet.cell(row=row + 1, column=column + 1), self)

    def get_value(self, row: int, column: int) -> Optional[str]:
        with self._lock:
            if not 0 <= row < self._row_count:
                return None
            value = self.worksheet.cell(row=row + 1, column=column + 1).value
            return None if value is None else str(value)

    def set_column_width(self, column: int, width: int) -> None:
        from openpyxl.utils import get_column_letter

        with self._lock:
            self.worksheet.column_dimensions[get_column_letter(column + 1)].width = width
