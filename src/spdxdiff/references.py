#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/references.py
"""Registry of SPDX listed external reference types.

External references name their type by URI. Listed types live under
``http://spdx.org/rdf/references/`` and are shown by their short name;
anything else is resolved by the caller's fallback.
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Protocol
from urllib.parse import urlsplit

from spdxdiff.constants import LISTED_REFERENCE_TYPE_PREFIX

LISTED_REFERENCE_TYPE_NAMES = (
    "cpe22Type",
    "cpe23Type",
    "advisory",
    "fix",
    "url",
    "swid",
    "maven-central",
    "npm",
    "nuget",
    "bower",
    "purl",
    "swh",
    "gitoid",
)


class ReferenceTypeRegistry(Protocol):
    """Protocol for resolving a reference type URI to its display name."""

    def get_listed_reference_name(self, uri: str) -> str: ...


class ListedReferenceTypes:
    """Resolve listed SPDX reference type URIs to their short names.

    Parameters
    ----------
    names : iterable of str, optional
        Listed reference type names. Defaults to the SPDX 2.3 list.
    prefix : str, optional
        URI prefix under which the listed types live.

    Examples
    --------
        >>> registry = ListedReferenceTypes()
        >>> registry.get_listed_reference_name("http://spdx.org/rdf/references/purl")
        'purl'

    """

    _default: Optional["ListedReferenceTypes"] = None
    _default_lock = threading.Lock()

    def __init__(self, names: Iterable[str] | None = None, prefix: str = LISTED_REFERENCE_TYPE_PREFIX):
        """Initialize the registry."""
        self.prefix = prefix
        self._names = frozenset(names if names is not None else LISTED_REFERENCE_TYPE_NAMES)

    @classmethod
    def get_default(cls) -> "ListedReferenceTypes":
        """Return the process-wide registry of SPDX listed reference types."""
        with cls._default_lock:
            if cls._default is None:
                cls._default = cls()
            return cls._default

    def get_listed_reference_name(self, uri: str) -> str:
        """Return the short name of a listed reference type.

        Parameters
        ----------
        uri : str
            Reference type URI

        Returns
        -------
        str
            Listed reference type name

        Raises
        ------
        ValueError
            If ``uri`` is not an absolute URI
        KeyError
            If ``uri`` is well formed but not a listed reference type

        """
        parts = urlsplit(uri)
        if not parts.scheme or not (parts.netloc or parts.path):
            raise ValueError(f"Malformed reference type URI: {uri!r}")
        if not uri.startswith(self.prefix):
            raise KeyError(uri)
        name = uri[len(self.prefix) :]
        if name not in self._names:
            raise KeyError(uri)
        return name
