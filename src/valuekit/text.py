"""String casing helpers. Non-string arguments are returned unchanged."""

from __future__ import annotations

import re
from typing import Any

_SEPARATED_RE = re.compile(r"[-_](\w)")
_HUMP_RE = re.compile(r"([a-z\d])([A-Z]+)")
_DASH_SPACE_RE = re.compile(r"[-\s]+")


def camelize(s: Any) -> Any:
    """``"foo_bar"`` → ``"fooBar"``; the case of the first letter is kept."""
    if not isinstance(s, str):
        return s
    return _SEPARATED_RE.sub(lambda m: m.group(1).upper(), s)


def underscore(s: Any) -> Any:
    """``"fooBar"`` → ``"foo_bar"``"""
    if not isinstance(s, str):
        return s
    s = _HUMP_RE.sub(r"\1_\2", s)
    return _DASH_SPACE_RE.sub("_", s).lower()


def capitalize(s: Any) -> Any:
    """Upper-case the first letter only; ``str.capitalize`` would lower the rest."""
    if not isinstance(s, str) or not s:
        return s
    return s[0].upper() + s[1:]
