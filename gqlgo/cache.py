"""Cache hints that resolvers give about how long their results may be kept.

A transport opens a collection with ``hintable()``, runs the query, and reads
the combined hint to set an HTTP Cache-Control value.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class Scope(Enum):
    """Cache-Control scopes."""

    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True)
class Hint:
    """How long, and for whom, something may be cached."""

    max_age: timedelta | None = None
    scope: Scope = Scope.PUBLIC

    def __str__(self) -> str:
        if self.max_age is None:
            raise ValueError("hint has no max age")
        return f"{self.scope.value}, max-age={int(self.max_age.total_seconds())}"


def ttl(seconds: float) -> timedelta:
    """Return a cache duration of the given number of seconds."""
    return timedelta(seconds=seconds)


def resolve_hints(hints: Iterable[Hint]) -> Hint:
    """Combine hints: the shortest max age wins, and any private hint makes
    the result private. With no max age at all the result is zero."""
    min_age: timedelta | None = None
    scope = Scope.PUBLIC
    for hint in hints:
        if hint.scope is Scope.PRIVATE:
            scope = Scope.PRIVATE
        if hint.max_age is not None and (min_age is None or hint.max_age < min_age):
            min_age = hint.max_age
    return Hint(max_age=min_age if min_age is not None else timedelta(0), scope=scope)


class HintCollector:
    """Collects the hints given while one request is resolved."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hints: list[Hint] = []
        self._closed = False

    def add(self, hint: Hint) -> None:
        """Record a hint; fails once the collection is closed."""
        with self._lock:
            if self._closed:
                raise RuntimeError("hint collector is closed")
            self._hints.append(hint)

    def resolve(self) -> Hint:
        """Return the combined hint of everything collected so far."""
        with self._lock:
            hints = list(self._hints)
        return resolve_hints(hints)

    def _close(self) -> None:
        with self._lock:
            self._closed = True


_current: ContextVar[HintCollector | None] = ContextVar("gqlgo_cache_hints", default=None)


def add_hint(hint: Hint) -> None:
    """Give a hint to the current collection; ignored outside one."""
    collector = _current.get()
    if collector is not None:
        collector.add(hint)


@contextmanager
def hintable() -> Iterator[HintCollector]:
    """Collect the hints given inside the block."""
    collector = HintCollector()
    token = _current.set(collector)
    try:
        yield collector
    finally:
        _current.reset(token)
        collector._close()