"""valuekit: type classification and cycle-safe deep equality for Python values."""

from .classifier import classify, is_composite
from .equality import array_eq, equals, object_eq
from .errors import BoxingError, PathError, ValueKitError
from .guard import ComparisonPair, RecursionGuard
from .model import (
    TypeTag,
    Undefined,
    VBool,
    VDate,
    VNumber,
    VText,
    _UndefinedType,
    box,
    unbox,
)
from .objects import EqualityDelegate, ModelObject, delegate_for
from .paths import get_path
from .text import camelize, capitalize, underscore

__version__ = "0.1.0"

__all__ = [
    "classify",
    "is_composite",
    "equals",
    "array_eq",
    "object_eq",
    "TypeTag",
    "Undefined",
    "VBool",
    "VDate",
    "VNumber",
    "VText",
    "box",
    "unbox",
    "ComparisonPair",
    "RecursionGuard",
    "EqualityDelegate",
    "ModelObject",
    "delegate_for",
    "get_path",
    "camelize",
    "capitalize",
    "underscore",
    "ValueKitError",
    "PathError",
    "BoxingError",
    "_UndefinedType",
]
