"""Model objects and the equality-delegate capability."""

from __future__ import annotations

import itertools
from typing import Any, Callable, Protocol, runtime_checkable

_object_ids = itertools.count(1)


@runtime_checkable
class EqualityDelegate(Protocol):
    """Protocol for values that decide their own equality.

    ``eq`` must accept any argument, including values of unrelated types,
    and answer False for anything it cannot compare instead of raising.
    """

    object_id: Any

    def eq(self, other: Any) -> bool:
        """Return True if *other* is equal to the receiver."""
        ...


def delegate_for(value: Any) -> Callable[[Any], bool] | None:
    """Return the bound ``eq`` of *value* if it is an equality delegate, else None.

    Classes are never delegates, even when they define ``object_id`` and
    ``eq`` for their instances.
    """
    if value is None or isinstance(value, type):
        return None
    if not isinstance(value, EqualityDelegate):
        return None
    if getattr(value, "object_id", None) is None:
        return None
    method = getattr(value, "eq", None)
    return method if callable(method) else None


class ModelObject:
    """Base for model objects that own an identity.

    Every instance receives a unique, increasing ``object_id``. Equality
    defaults to identity; subclasses override ``eq`` to compare meaningfully.

    Keyword arguments given to the constructor are assigned only when the
    class already declares an attribute of that name::

        class Person(ModelObject):
            name = None

        Person(name="Joe", nope=1).name   # "Joe"; ``nope`` is ignored
    """

    display_name: str | None = None

    def __init__(self, **props: Any) -> None:
        self._object_id = next(_object_ids)
        for key, value in props.items():
            if hasattr(self, key) and not isinstance(getattr(type(self), key, None), property):
                setattr(self, key, value)

    @property
    def object_id(self) -> int:
        return self._object_id

    @classmethod
    def type_name(cls) -> str:
        return cls.display_name or cls.__name__

    def eq(self, other: Any) -> bool:
        return self is other

    def __repr__(self) -> str:
        return f"<{self.type_name()} #{self._object_id}>"
