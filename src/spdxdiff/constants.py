#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the spdxdiff library.

The sentinel strings below are part of the output contract: they are
written verbatim into worksheet cells and downstream consumers may parse
them, so they must not change between releases.

Constants are organized by category:
1. Cell Rendering Sentinels
2. Comparison Row Markers
3. Worksheet Layout Defaults
4. Reference Types
"""

from __future__ import annotations

# =============================================================================
# Cell Rendering Sentinels
# =============================================================================

# Excel caps a cell at 32767 characters; stay comfortably below it
MAX_CHARACTERS_PER_CELL = 32000

NONE_VALUE = "[NONE]"
MISSING_VALUE = "[MISSING]"
UNKNOWN_ID = "[UNKNOWNID]"
NULL_RELATED_ELEMENT = "?NULL"
UNKNOWN_RELATIONSHIP_TYPE = "Unknown relationship type"
DEFAULT_REFERENCE_CATEGORY = "OTHER"

# Format of the marker appended when a multi-line cell is cut short
ELIDED_ITEMS_TEMPLATE = "[{count} more...]"

LINE_SEPARATOR = "\n"
LIST_SEPARATOR = ", "
EXTERNAL_REF_SEPARATOR = "; "

# =============================================================================
# Comparison Row Markers
# =============================================================================

EQUAL_STRING = "Equals"
DIFFERENT_STRING = "Diff"
NOT_APPLICABLE_STRING = "N/A"
COMPARE_RESULTS_LABEL = "Compare Results"

# =============================================================================
# Worksheet Layout Defaults
# =============================================================================

DEFAULT_SHEET_NAME = "Document"
DOCUMENT_LABEL_HEADER = "Document"
DOCUMENT_LABEL_WIDTH = 30

HEADER_FILL_COLOR = "D9D9D9"
EQUAL_FILL_COLOR = "C6EFCE"
DIFFERENT_FILL_COLOR = "FFFF00"

# =============================================================================
# Reference Types
# =============================================================================

LISTED_REFERENCE_TYPE_PREFIX = "http://spdx.org/rdf/references/"
