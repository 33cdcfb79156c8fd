"""Cycle-safe deep equality.

``equals`` compares two arbitrary values structurally. Composite values
(arrays, argument lists and keyed records) are walked on an explicit frame
stack, so nesting depth is not limited by the interpreter's recursion limit.

Cycles are handled with a RecursionGuard: a pair of composites that is met
again while its own comparison is still in progress is assumed equal. The
outcome is then decided by every other part of the two graphs, which gives
a bisimulation-style equality::

    a = [1]; a.append(a)
    b = [1]; b.append(b)
    equals(a, b)            # True
"""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Mapping
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Iterator

from .classifier import classify, is_composite, is_nan
from .guard import RecursionGuard
from .model import TypeTag, unbox
from .objects import delegate_for

logger = logging.getLogger(__name__)

_PRIMITIVE_TAGS = frozenset(
    {TypeTag.BOOLEAN, TypeTag.STRING, TypeTag.NUMBER, TypeTag.DATE}
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def equals(a: Any, b: Any, guard: RecursionGuard | None = None) -> bool:
    """Return True if *a* and *b* are deeply equal.

    If *a* is an equality delegate (see ``objects.EqualityDelegate``) the
    answer is whatever its ``eq`` method returns for *b*; only the first
    argument is consulted. Otherwise both values are classified and compared
    according to their TypeTag; values with different tags are unequal.

    A fresh RecursionGuard is used unless one is passed in. Every pair this
    call marks is unmarked again before it returns.
    """
    if guard is None:
        guard = RecursionGuard()

    stack: list[_Frame] = []
    try:
        result = _step(a, b, guard, stack)
        while result and stack:
            frame = stack[-1]
            child = next(frame.children, None)
            if child is None:
                stack.pop()
                guard.unmark(frame.left, frame.right)
                continue
            result = _step(child[0], child[1], guard, stack)
        return result
    finally:
        while stack:
            frame = stack.pop()
            guard.unmark(frame.left, frame.right)


def array_eq(a: Any, b: Any) -> bool:
    """Deep equality restricted to arrays; False if either value is not one."""
    if classify(a) is not TypeTag.ARRAY or classify(b) is not TypeTag.ARRAY:
        return False
    return equals(a, b)


def object_eq(a: Any, b: Any) -> bool:
    """Deep equality restricted to keyed records; False if either value is not one."""
    if classify(a) is not TypeTag.OBJECT or classify(b) is not TypeTag.OBJECT:
        return False
    return equals(a, b)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

@dataclass
class _Frame:
    """A composite comparison whose children are still being compared."""

    left: Any
    right: Any
    children: Iterator[tuple[Any, Any]]


def _step(a: Any, b: Any, guard: RecursionGuard, stack: list[_Frame]) -> bool:
    """Compare one pair.

    Leaves are decided outright. For composites a frame is pushed and True
    is returned; the caller then drains the frame's children.
    """
    # NaN is unequal even to itself
    if a is b and not is_nan(a):
        return True

    try:
        method = delegate_for(a)
        if method is not None:
            return bool(method(b))
    except Exception:
        logger.warning(
            "equals: %s.eq raised comparing against %s; treating as unequal",
            type(a).__name__, type(b).__name__, exc_info=True,
        )
        return False

    tag = classify(a)
    if tag is not classify(b):
        return False

    if tag in _PRIMITIVE_TAGS:
        return _primitive_eq(a, b)
    if tag is TypeTag.REGEXP:
        return (
            type(a.pattern) is type(b.pattern)
            and a.pattern == b.pattern
            and a.flags == b.flags
        )
    if tag is TypeTag.FUNCTION:
        return _same_callable(a, b)
    if is_composite(tag):
        return _open(a, b, tag, guard, stack)
    # NULL, UNDEFINED, UNKNOWN: equal only by identity; NAN never
    return False


def _open(
    a: Any, b: Any, tag: TypeTag, guard: RecursionGuard, stack: list[_Frame]
) -> bool:
    try:
        if tag is TypeTag.OBJECT:
            left, right = _entries(a), _entries(b)
        else:
            left, right = _elements(a), _elements(b)
        if len(left) != len(right):
            return False
        if guard.seen(a, b):
            logger.debug("equals: %s back-edge at depth %d assumed equal", tag, guard.depth)
            return True
        if tag is TypeTag.OBJECT:
            pairs = _entry_pairs(left, right)
        else:
            pairs = list(zip(left, right))
    except Exception as exc:
        logger.debug(
            "equals: could not read %s contents (%s); treating as unequal", tag, exc
        )
        return False

    if pairs is None:
        return False
    guard.mark(a, b)
    stack.append(_Frame(a, b, iter(pairs)))
    return True


def _primitive_eq(a: Any, b: Any) -> bool:
    try:
        return bool(unbox(a) == unbox(b))
    except Exception as exc:
        logger.debug(
            "equals: %s == %s failed (%s); treating as unequal",
            type(a).__name__, type(b).__name__, exc,
        )
        return False


def _same_callable(a: Any, b: Any) -> bool:
    # obj.method builds a new bound method on every access
    if isinstance(a, types.MethodType) and isinstance(b, types.MethodType):
        return a.__func__ is b.__func__ and a.__self__ is b.__self__
    return False


# ---------------------------------------------------------------------------
# Contents
# ---------------------------------------------------------------------------

def _elements(value: Any):
    """Indexed elements of an array or argument list; other attributes are ignored."""
    if isinstance(value, inspect.BoundArguments):
        return value.args
    if isinstance(value, Mapping):
        count = 0
        while count in value:
            count += 1
        return [value[i] for i in range(count)]
    return value


def _entry_pairs(left: Mapping, right: Mapping) -> list[tuple[Any, Any]] | None:
    pairs = []
    for key in left:
        if key not in right:
            return None
        pairs.append((left[key], right[key]))
    return pairs


def _entries(value: Any) -> Mapping:
    if isinstance(value, SimpleNamespace):
        return vars(value)
    return value
