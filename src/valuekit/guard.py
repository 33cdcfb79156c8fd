"""Recursion guard that tracks pairs of values whose comparison is in flight.

Traversals over possibly cyclic graphs mark a pair before descending into
it and unmark it on the way out. Meeting a pair that is still marked means
the traversal has looped back onto one of its own ancestors.

A guard belongs to a single traversal. Create one per top-level call and
never share it between threads or tasks.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, NamedTuple


class ComparisonPair(NamedTuple):
    left: Any
    right: Any

    @property
    def key(self) -> tuple[int, int]:
        return (id(self.left), id(self.right))


class RecursionGuard:
    """Ordered set of in-flight ComparisonPairs, keyed by identity.

    Usage::

        guard = RecursionGuard()
        with guard.hold(a, b):
            ...                     # guard.seen(a, b) is True in here
        guard.seen(a, b)            # False again
    """

    def __init__(self) -> None:
        self._pairs: list[ComparisonPair] = []
        self._keys: set[tuple[int, int]] = set()

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"RecursionGuard(depth={len(self._pairs)})"

    @property
    def depth(self) -> int:
        return len(self._pairs)

    @property
    def pairs(self) -> tuple[ComparisonPair, ...]:
        """Snapshot of the in-flight pairs, outermost first."""
        return tuple(self._pairs)

    def seen(self, a: Any, b: Any = None) -> bool:
        return (id(a), id(b)) in self._keys

    def mark(self, a: Any, b: Any = None) -> None:
        pair = ComparisonPair(a, b)
        if pair.key in self._keys:
            raise ValueError(f"{self!r}: pair is already marked")
        self._pairs.append(pair)
        self._keys.add(pair.key)

    def unmark(self, a: Any, b: Any = None) -> None:
        key = (id(a), id(b))
        if key not in self._keys:
            return
        self._keys.discard(key)
        # Pairs are released innermost first, so search from the end.
        for i in range(len(self._pairs) - 1, -1, -1):
            if self._pairs[i].key == key:
                del self._pairs[i]
                return

    @contextmanager
    def hold(self, a: Any, b: Any = None) -> Iterator[ComparisonPair]:
        """Mark ``(a, b)`` for the duration of the ``with`` block."""
        self.mark(a, b)
        try:
            yield ComparisonPair(a, b)
        finally:
            self.unmark(a, b)

    def detect(self, a: Any, b: Any, fn: Callable[[], Any]) -> bool:
        """Run *fn* unless ``(a, b)`` is already being visited.

        Returns True when recursion on the pair is detected (and *fn* is
        skipped). Otherwise calls *fn* with the pair marked and returns False.
        Exceptions from *fn* propagate after the pair is released.
        """
        if self.seen(a, b):
            return True
        with self.hold(a, b):
            fn()
        return False
