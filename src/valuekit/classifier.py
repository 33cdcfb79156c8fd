"""Canonical type classification for arbitrary Python values."""

from __future__ import annotations

import datetime
import inspect
import logging
import numbers
import re
from collections import UserList, UserString, deque
from collections.abc import Mapping
from decimal import Decimal
from types import SimpleNamespace
from typing import Any

from .model import (
    COMPOSITE_TAGS,
    TypeTag,
    Undefined,
    VBool,
    VDate,
    VNumber,
    VText,
)

_ARRAY_TYPES = (list, UserList, deque)
_ARGUMENT_TYPES = (tuple, inspect.BoundArguments)
_STRING_TYPES = (str, UserString, VText)
_BOOLEAN_TYPES = (bool, VBool)
_NUMBER_TYPES = (numbers.Number, VNumber)
_DATE_TYPES = (datetime.date, VDate)

logger = logging.getLogger(__name__)

# Key that marks a mapping as a captured argument list rather than a record.
CALLEE_KEY = "callee"


def classify(value: Any) -> TypeTag:
    """Return the canonical TypeTag of *value*.

    Total and constant time: containers are never walked. The order of the
    checks matters; NaN must be recognised before any numeric check, and
    ``bool`` before ``numbers.Number`` since ``bool`` subclasses ``int``.

    Examples::

        classify([])                   # TypeTag.ARRAY
        classify({})                   # TypeTag.OBJECT
        classify(9)                    # TypeTag.NUMBER
        classify(float("nan"))         # TypeTag.NAN
        classify(re.compile("fo*"))    # TypeTag.REGEXP
    """
    if value is None:
        return TypeTag.NULL
    if value is Undefined:
        return TypeTag.UNDEFINED
    if is_nan(value):
        return TypeTag.NAN

    if isinstance(value, _ARRAY_TYPES):
        return TypeTag.ARRAY
    if isinstance(value, _ARGUMENT_TYPES):
        return TypeTag.ARGUMENTS
    if callable(value):
        return TypeTag.FUNCTION
    if isinstance(value, _STRING_TYPES):
        return TypeTag.STRING
    if isinstance(value, _BOOLEAN_TYPES):
        return TypeTag.BOOLEAN
    if isinstance(value, _NUMBER_TYPES):
        return TypeTag.NUMBER
    if isinstance(value, _DATE_TYPES):
        return TypeTag.DATE
    if isinstance(value, re.Pattern):
        return TypeTag.REGEXP

    if isinstance(value, Mapping):
        return TypeTag.ARGUMENTS if _has_callee(value) else TypeTag.OBJECT
    if isinstance(value, SimpleNamespace):
        return TypeTag.OBJECT

    return TypeTag.UNKNOWN


def is_composite(tag: TypeTag) -> bool:
    """True for tags whose values are compared element by element."""
    return tag in COMPOSITE_TAGS


def is_nan(value: Any) -> bool:
    """True for numbers that are unequal to themselves."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        return False
    try:
        if isinstance(value, Decimal):
            return value.is_nan()
        return bool(value != value)
    except Exception as exc:
        logger.debug("classify: %s self-comparison failed (%s)", type(value).__name__, exc)
        return False


def _has_callee(mapping: Mapping) -> bool:
    try:
        return CALLEE_KEY in mapping
    except Exception as exc:
        logger.debug("classify: %s membership test failed (%s)", type(mapping).__name__, exc)
        return False
