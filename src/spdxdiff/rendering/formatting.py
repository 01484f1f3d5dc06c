#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/rendering/formatting.py
"""Join rendered values of a collection into a single cell string.

Content-addressed collections (checksums) are sorted after rendering so the
cell does not depend on the source's iteration order. Every other
collection keeps its source order.

Newline-joined cells are bounded: once the next line would push the cell
past the maximum length, the remaining lines are replaced by a
``[<k> more...]`` marker. Lines are never cut in the middle.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar

from spdxdiff.constants import (
    ELIDED_ITEMS_TEMPLATE,
    EXTERNAL_REF_SEPARATOR,
    LINE_SEPARATOR,
    LIST_SEPARATOR,
    MAX_CHARACTERS_PER_CELL,
)
from spdxdiff.model import Annotation, Checksum, ExternalRef, FileType, Relationship, SpdxElement
from spdxdiff.references import ReferenceTypeRegistry
from spdxdiff.rendering.values import (
    annotation_to_string,
    checksum_to_string,
    element_to_string,
    external_ref_to_string,
    file_type_to_string,
    license_info_to_string,
    relationship_to_string,
)

T = TypeVar("T")


def join_bounded(
    lines: Iterable[str],
    max_chars: int = MAX_CHARACTERS_PER_CELL,
    separator: str = LINE_SEPARATOR,
) -> str:
    """Join lines, eliding the tail when the result would exceed ``max_chars``.

    Parameters
    ----------
    lines : iterable of str
        Rendered lines, already in output order
    max_chars : int, default 32000
        Maximum length of the returned string
    separator : str, default "\\n"
        Separator placed between lines

    Returns
    -------
    str
        Joined lines. When lines were dropped, the last line is
        ``[<k> more...]`` where ``k`` is the number of dropped lines.

    Examples
    --------
        >>> join_bounded(["a", "b"])
        'a\\nb'
        >>> join_bounded(["aaaa", "bbbb", "cccccccccc"], max_chars=16)
        'aaaa\\n[2 more...]'

    """
    items = list(lines)
    kept: list[str] = []
    length = 0
    for line in items:
        added = len(line) + (len(separator) if kept else 0)
        if length + added > max_chars:
            break
        kept.append(line)
        length += added
    else:
        return separator.join(kept)

    # Make room for the marker, which may need more space than the last kept line left
    while True:
        marker = ELIDED_ITEMS_TEMPLATE.format(count=len(items) - len(kept))
        needed = len(marker) + (len(separator) if kept else 0)
        if length + needed <= max_chars or not kept:
            break
        dropped = kept.pop()
        length -= len(dropped) + (len(separator) if kept else 0)

    kept.append(marker)
    return separator.join(kept)


def _render_all(values: Optional[Iterable[T]], render: Callable[[T], str]) -> list[str]:
    if not values:
        return []
    return [render(value) for value in values]


def checksums_to_string(
    checksums: Optional[Iterable[Checksum]],
    render: Callable[[Checksum], str] = checksum_to_string,
    max_chars: int = MAX_CHARACTERS_PER_CELL,
) -> str:
    """Render checksums one per line, sorted lexicographically."""
    return join_bounded(sorted(_render_all(checksums, render)), max_chars)


def annotations_to_string(
    annotations: Optional[Iterable[Annotation]],
    render: Callable[[Annotation], str] = annotation_to_string,
    max_chars: int = MAX_CHARACTERS_PER_CELL,
) -> str:
    """Render annotations one per line in source order."""
    return join_bounded(_render_all(annotations, render), max_chars)


def relationships_to_string(
    relationships: Optional[Iterable[Relationship]],
    render: Callable[[Relationship], str] = relationship_to_string,
    max_chars: int = MAX_CHARACTERS_PER_CELL,
) -> str:
    """Render relationships one per line in source order."""
    return join_bounded(_render_all(relationships, render), max_chars)


def attributions_to_string(
    attributions: Optional[Iterable[str]],
    max_chars: int = MAX_CHARACTERS_PER_CELL,
) -> str:
    """Join attribution texts one per line in source order."""
    return join_bounded(_render_all(attributions, str), max_chars)


def license_infos_to_string(
    license_infos: Optional[Iterable[Any]],
    render: Callable[[Any], str] = license_info_to_string,
) -> str:
    """Join license expressions with ``", "``."""
    return LIST_SEPARATOR.join(_render_all(license_infos, render))


def element_list_to_string(
    elements: Optional[Iterable[Optional[SpdxElement]]],
    render: Callable[[Optional[SpdxElement]], str] = element_to_string,
) -> str:
    """Join element references (``<id>(<name>)``) with ``", "``."""
    return LIST_SEPARATOR.join(_render_all(elements, render))


def file_types_to_string(file_types: Optional[Sequence[FileType]]) -> str:
    """Join file types with ``", "``."""
    return LIST_SEPARATOR.join(_render_all(file_types, file_type_to_string))


def external_refs_to_string(
    external_refs: Optional[Iterable[ExternalRef]],
    namespace: Optional[str] = None,
    registry: Optional[ReferenceTypeRegistry] = None,
) -> str:
    """Join external references with ``"; "``.

    Parameters
    ----------
    external_refs : iterable of ExternalRef or None
        References in source order
    namespace : str, optional
        Namespace of the owning document
    registry : ReferenceTypeRegistry, optional
        Registry used to name listed reference types

    """
    return EXTERNAL_REF_SEPARATOR.join(
        _render_all(external_refs, lambda ref: external_ref_to_string(ref, namespace, registry))
    )
