"""Content-addressed cache of annotated sources.

Shader packs include the same files from many programs. Caching by content
avoids re-classifying identical sources. Annotated sources are immutable, so
a cached instance can be handed to any number of callers.

Thread Safety:
    DictAnnotationCache is not thread-safe. For parallel use, wrap get/put
    with a lock or use a thread-safe implementation.

Example:
    >>> from shaderopts import annotate, DictAnnotationCache
    >>> cache = DictAnnotationCache()
    >>> first = annotate("#define SHADOWS\\n", cache=cache)
    >>> annotate("#define SHADOWS\\n", cache=cache) is first
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from shaderopts.source import OptionAnnotatedSource


class AnnotationCache(Protocol):
    """Protocol for annotated source caches keyed by ``hash_lines``."""

    def get(self, key: str) -> OptionAnnotatedSource | None:
        """Return the cached source if present, else None."""
        ...

    def put(self, key: str, source: OptionAnnotatedSource) -> None:
        """Store an annotated source."""
        ...


class DictAnnotationCache:
    """In-memory annotation cache using a dict."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[str, OptionAnnotatedSource] = {}

    def get(self, key: str) -> OptionAnnotatedSource | None:
        return self._data.get(key)

    def put(self, key: str, source: OptionAnnotatedSource) -> None:
        self._data[key] = source

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()


__all__ = [
    "AnnotationCache",
    "DictAnnotationCache",
]
