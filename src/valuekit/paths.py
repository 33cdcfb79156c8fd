"""Dot-separated path resolution."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any

from .classifier import is_nan
from .errors import PathError
from .model import Undefined

_SCALARS = (bool, numbers.Number, str)


def get_path(obj: Any, path: str) -> Any:
    """Resolve *path* (e.g. ``"owner.address.city"``) starting at *obj*.

    - Mapping: key lookup
    - list / tuple: 0-based integer index
    - anything else: attribute lookup

    When a list is met and the next segment is not one of its indices, the
    segment is resolved on every item instead and the results are collected
    into a new list; list results are spliced in rather than nested::

        get_path({"people": [{"tags": ["a"]}, {"tags": ["b", "c"]}]}, "people.tags")
        # ["a", "b", "c"]

    Blank values (None, Undefined, False, zero, "" and NaN) have no
    segments: they are skipped while collecting, and the walk returns
    Undefined when it has to descend into one. Empty containers are not
    blank.
    """
    if not isinstance(path, str):
        raise PathError(f"get_path: path must be a string, got {type(path).__name__}")

    value = obj
    for segment in path.split("."):
        if _blank(value):
            return Undefined
        if isinstance(value, list) and _index(value, segment) is None:
            value = _collect(value, segment)
        else:
            value = _lookup(value, segment)
    return value


def _blank(value: Any) -> bool:
    if value is None or value is Undefined:
        return True
    if isinstance(value, _SCALARS):
        return is_nan(value) or not value
    return False


def _collect(items: list, segment: str) -> list:
    collected: list = []
    for item in items:
        if _blank(item):
            continue
        found = _lookup(item, segment)
        if isinstance(found, list):
            collected.extend(found)
        else:
            collected.append(found)
    return collected


def _lookup(value: Any, segment: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(segment, Undefined)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        idx = _index(value, segment)
        return Undefined if idx is None else value[idx]
    return getattr(value, segment, Undefined)


def _index(seq: Sequence, segment: str) -> int | None:
    # isdecimal, not isdigit: int() rejects digits such as "²"
    if not segment.isdecimal():
        return None
    idx = int(segment)
    return idx if idx < len(seq) else None
