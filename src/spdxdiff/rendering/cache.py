#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/rendering/cache.py
"""Thread-safe compute-once caches for rendered cell strings.

Field importers render documents in parallel and many cells can refer to
the same value object. :class:`RenderCache` guarantees that each key is
rendered by exactly one caller: concurrent callers for the same key wait
for that computation and receive its result (or its exception). A failed
computation is evicted so it never affects other keys, and a later call
for the same key computes afresh.

:class:`IdentityRenderCache` keys on the identity of a value object
instead of its content, so two equal values are still rendered on their
own.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Dict, Generic, Hashable, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class RenderCache(Generic[K]):
    """Memoize rendered strings by hashable key with single-flight semantics.

    Parameters
    ----------
    name : str, default ""
        Name used in log messages

    Examples
    --------
        >>> cache = RenderCache("fields")
        >>> cache.get((0, "name"), lambda key: "Document A")
        'Document A'
        >>> cache.get((0, "name"), lambda key: "never called")
        'Document A'

    """

    def __init__(self, name: str = ""):
        """Initialize an empty cache."""
        self.name = name
        self._lock = threading.Lock()
        self._entries: Dict[K, Future[str]] = {}
        self._compute_count = 0

    def get(self, key: K, compute: Callable[[K], str]) -> str:
        """Return the cached string for ``key``, computing it at most once.

        Parameters
        ----------
        key : hashable
            Cache key
        compute : callable
            Called with ``key`` by the first caller only

        Returns
        -------
        str
            Rendered string

        Raises
        ------
        Exception
            Whatever ``compute`` raised, for the triggering caller and for
            every caller waiting on the same key

        """
        with self._lock:
            future = self._entries.get(key)
            owner = future is None
            if future is None:
                future = Future()
                self._entries[key] = future
                self._compute_count += 1

        if not owner:
            return future.result()

        try:
            value = compute(key)
        except BaseException as e:
            with self._lock:
                if self._entries.get(key) is future:
                    del self._entries[key]
            logger.debug("Rendering failed in cache %r for key %r: %s", self.name, key, e)
            future.set_exception(e)
            raise
        future.set_result(value)
        return value

    @property
    def compute_count(self) -> int:
        """Number of computations started, including failed ones."""
        with self._lock:
            return self._compute_count

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        """Return the number of cached or in-flight keys."""
        with self._lock:
            return len(self._entries)


class IdentityKey:
    """Hashable wrapper comparing its value by identity.

    The wrapper keeps a strong reference to the value, so its ``id`` cannot
    be reused by another object while the key is alive.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any):
        """Wrap ``value``."""
        self.value = value

    def __hash__(self) -> int:
        return id(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IdentityKey) and other.value is self.value

    def __repr__(self) -> str:
        return f"IdentityKey({type(self.value).__name__}@{id(self.value):#x})"


class IdentityRenderCache(Generic[V]):
    """Memoize rendered strings per value object.

    Parameters
    ----------
    name : str, default ""
        Name used in log messages

    """

    def __init__(self, name: str = ""):
        """Initialize an empty identity cache."""
        self._cache: RenderCache[IdentityKey] = RenderCache(name)

    def get(self, value: V, render: Callable[[V], str]) -> str:
        """Return the rendering of ``value``, calling ``render`` at most once per object."""
        return self._cache.get(IdentityKey(value), lambda key: render(key.value))

    @property
    def compute_count(self) -> int:
        """Number of renderings started, including failed ones."""
        return self._cache.compute_count

    def clear(self) -> None:
        """Drop every cached entry."""
        self._cache.clear()

    def __len__(self) -> int:
        """Return the number of cached or in-flight values."""
        return len(self._cache)
