"""Structural kind detection and deep equality.

Kinds are derived from the value itself, never from a declared wrapper:

  None              -> null
  bool              -> boolean   (checked before int; ``True`` is not a number)
  int / float       -> number
  str               -> string
  Mapping           -> object
  list / tuple      -> array

Anything else is not a JSON-like value and raises ``UnsupportedValueError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from shape_validator.exceptions import UnsupportedValueError
from shape_validator.model import Kind


def kind_of(value: Any) -> Kind:
    """Return the structural ``Kind`` of *value*."""
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, Mapping):
        return Kind.OBJECT
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    raise UnsupportedValueError(value)


def deep_equal(first: Any, second: Any) -> bool:
    """Structural equality used by ``enum``, ``contains`` and ``uniqueItems``.

    Two values are equal iff their kinds match and their content matches
    recursively.  Object key order is irrelevant; array order is relevant.
    ``1`` and ``1.0`` are equal (one number kind); ``True`` and ``1`` are not.
    """
    kind = kind_of(first)
    if kind is not kind_of(second):
        return False

    if kind is Kind.ARRAY:
        if len(first) != len(second):
            return False
        return all(deep_equal(a, b) for a, b in zip(first, second))

    if kind is Kind.OBJECT:
        if len(first) != len(second):
            return False
        for key, value in first.items():
            if key not in second:
                return False
            if not deep_equal(value, second[key]):
                return False
        return True

    return first == second
