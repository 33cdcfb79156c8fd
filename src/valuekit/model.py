"""Data model for valuekit: type tags, the Undefined sentinel and boxed primitives."""

from __future__ import annotations

import datetime
import numbers
from collections import UserString
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .errors import BoxingError


# ---------------------------------------------------------------------------
# Undefined: singleton for absent values
# ---------------------------------------------------------------------------

class _UndefinedType:
    """Sentinel for a value that is absent, as opposed to ``None``."""

    _instance: _UndefinedType | None = None

    def __new__(cls) -> _UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False


Undefined = _UndefinedType()


# ---------------------------------------------------------------------------
# TypeTag
# ---------------------------------------------------------------------------

class TypeTag(Enum):
    NULL = "null"
    UNDEFINED = "undefined"
    NAN = "nan"
    ARRAY = "array"
    ARGUMENTS = "arguments"
    FUNCTION = "function"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    REGEXP = "regexp"
    OBJECT = "object"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


# Tags compared by contents rather than by primitive value.
COMPOSITE_TAGS = frozenset({TypeTag.ARRAY, TypeTag.ARGUMENTS, TypeTag.OBJECT})


# ---------------------------------------------------------------------------
# Boxed primitives
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VNumber:
    value: numbers.Number

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(slots=True)
class VDate:
    value: datetime.date

    def __str__(self) -> str:
        return self.value.isoformat()


Boxed = Union[VText, VNumber, VBool, VDate]

_BOXES = (VText, VNumber, VBool, VDate)


def box(value: Any) -> Boxed:
    """Wrap a primitive in its boxed counterpart.

    Already-boxed values are returned as they are.
    """
    if isinstance(value, _BOXES):
        return value
    # bool first: it is also an int
    if isinstance(value, bool):
        return VBool(value)
    if isinstance(value, numbers.Number):
        return VNumber(value)
    if isinstance(value, str):
        return VText(value)
    if isinstance(value, UserString):
        return VText(value.data)
    if isinstance(value, datetime.date):
        return VDate(value)
    raise BoxingError(f"box: no wrapper for {type(value).__name__} values")


def unbox(value: Any) -> Any:
    """Return the primitive inside *value*, or *value* itself if it is not boxed."""
    if isinstance(value, _BOXES):
        return value.value
    if isinstance(value, UserString):
        return value.data
    return value
