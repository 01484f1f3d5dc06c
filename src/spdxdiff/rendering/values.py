#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/rendering/values.py
"""Canonical string forms of single SPDX values.

Each function turns one value into a deterministic string whose parts are
unambiguous (``<date> <annotator>: <comment>[<type>]`` and so on). The
functions are pure; caching is layered on top by
:class:`spdxdiff.rendering.context.RenderContext`.

Any failure raised while reading a value's attributes is re-raised as
:class:`~spdxdiff.exceptions.AnalysisError`. Defaults are substituted only
where the output format defines a sentinel (``[NONE]``, ``[MISSING]``,
``[UNKNOWNID]``, ``?NULL``).
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from spdxdiff.constants import (
    DEFAULT_REFERENCE_CATEGORY,
    MISSING_VALUE,
    NONE_VALUE,
    NULL_RELATED_ELEMENT,
    UNKNOWN_ID,
    UNKNOWN_RELATIONSHIP_TYPE,
)
from spdxdiff.exceptions import AnalysisError
from spdxdiff.model import Annotation, Checksum, ExternalRef, FileType, Relationship, SpdxElement
from spdxdiff.references import ListedReferenceTypes, ReferenceTypeRegistry

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., str])


def reads_model(value_kind: str) -> Callable[[F], F]:
    """Wrap accessor failures of a renderer in :class:`AnalysisError`.

    Parameters
    ----------
    value_kind : str
        Kind of value the decorated function renders, used in the error

    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> str:
            try:
                return func(*args, **kwargs)
            except AnalysisError:
                raise
            except Exception as e:
                raise AnalysisError(
                    f"Unable to render {value_kind}: {e}", value_kind=value_kind, original_error=e
                ) from e

        return wrapper  # type: ignore[return-value]

    return decorator


def token(value: Any) -> str:
    """Return the SPDX token for an enum member, or ``str(value)`` otherwise."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@reads_model("annotation")
def annotation_to_string(annotation: Optional[Annotation]) -> str:
    """Render an annotation as ``<date> <annotator>: <comment>[<type>]``."""
    if annotation is None:
        return ""
    return (
        f"{annotation.annotation_date} {annotation.annotator}: "
        f"{annotation.comment}[{token(annotation.annotation_type)}]"
    )


@reads_model("checksum")
def checksum_to_string(checksum: Optional[Checksum]) -> str:
    """Render a checksum as ``<algorithm> <hex-value>``."""
    if checksum is None:
        return ""
    return f"{token(checksum.algorithm)} {checksum.value}"


def optional_checksum_to_string(
    checksum: Optional[Checksum], render: Callable[[Checksum], str] = checksum_to_string
) -> str:
    """Render an optional checksum, ``[NONE]`` when absent."""
    if checksum is None:
        return NONE_VALUE
    return render(checksum)


@reads_model("relationship")
def relationship_to_string(relationship: Optional[Relationship]) -> str:
    """Render a relationship as ``<type>:[<relatedName>]<relatedId>(<comment>)``.

    The bracketed name appears only when the related element has one. A
    missing related element renders as ``?NULL``, a related element without
    an id as ``[UNKNOWNID]``, and an empty comment drops the parenthetical.

    Examples
    --------
        >>> rel = Relationship(RelationshipType.CONTAINS, SpdxElement("SPDXRef-1", "lib"), "")
        >>> relationship_to_string(rel)
        'CONTAINS:[lib]SPDXRef-1'

    """
    if relationship is None:
        return ""
    if relationship.relationship_type is None:
        return UNKNOWN_RELATIONSHIP_TYPE
    parts = [token(relationship.relationship_type), ":"]
    related = relationship.related_element
    if related is None:
        parts.append(NULL_RELATED_ELEMENT)
    else:
        if related.name is not None:
            parts.append(f"[{related.name}]")
        parts.append(related.id or UNKNOWN_ID)
    comment = relationship.comment
    if comment:
        parts.append(f"({comment})")
    return "".join(parts)


def _resolve_reference_type(uri: str, namespace: Optional[str], registry: ReferenceTypeRegistry) -> str:
    # Any lookup failure collapses into the raw-URI fallback
    try:
        name = registry.get_listed_reference_name(uri)
    except Exception as e:
        logger.debug("Reference type %s is not listed (%s), using raw URI", uri, e)
        name = None
    if name:
        return name
    if namespace and uri.startswith(namespace):
        return uri[len(namespace) :]
    return uri


@reads_model("external reference")
def external_ref_to_string(
    external_ref: ExternalRef,
    namespace: Optional[str] = None,
    registry: Optional[ReferenceTypeRegistry] = None,
) -> str:
    """Render an external reference as ``<category> <type> <locator>(<comment>)``.

    Parameters
    ----------
    external_ref : ExternalRef
        Reference to render
    namespace : str, optional
        Namespace of the owning document, stripped from unlisted type URIs
    registry : ReferenceTypeRegistry, optional
        Registry used to name listed reference types. Defaults to
        :meth:`ListedReferenceTypes.get_default`.

    Returns
    -------
    str
        Rendered reference; unset parts become ``OTHER`` (category) or
        ``[MISSING]`` (type and locator)

    """
    registry = registry or ListedReferenceTypes.get_default()

    category = DEFAULT_REFERENCE_CATEGORY
    if external_ref.reference_category is not None:
        category = token(external_ref.reference_category)

    if external_ref.reference_type is None:
        reference_type = MISSING_VALUE
    else:
        reference_type = _resolve_reference_type(external_ref.reference_type.individual_uri, namespace, registry)

    locator = external_ref.reference_locator
    if locator is None:
        locator = MISSING_VALUE

    result = f"{category} {reference_type} {locator}"
    if external_ref.comment:
        result += f"({external_ref.comment})"
    return result


@reads_model("element reference")
def element_to_string(element: Optional[SpdxElement]) -> str:
    """Render a described element as ``<id>(<name>)``, or ``[UNKNOWNID]``."""
    if element is None or not element.id:
        return UNKNOWN_ID
    if element.name is not None:
        return f"{element.id}({element.name})"
    return str(element.id)


@reads_model("license")
def license_info_to_string(license_info: Any) -> str:
    """Render a license expression with ``str()``."""
    return str(license_info)


def file_type_to_string(file_type: FileType) -> str:
    """Render a file type as its SPDX token."""
    return token(file_type)
