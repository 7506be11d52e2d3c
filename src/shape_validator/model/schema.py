"""Schema — the immutable, tagged schema model.

A schema node is exactly one of:

  LeafSchema    direct keyword constraints, checked by the predicate chain
  AnyOfSchema   value must satisfy at least one alternative
  OneOfSchema   value must satisfy exactly one alternative
  SchemaRef     indirection to another node (self-referencing documents)

``None`` in any schema slot means "no constraints".  The discriminant is
chosen once, when the schema is built (see ``shape_validator.compiler``);
composition nodes never carry leaf keywords.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


class _Missing:
    """Sentinel for keywords where ``None`` is a meaningful literal."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class LeafSchema:
    """A schema node whose keywords are evaluated by the predicate chain.

    Attributes mirror the schema document keywords (snake_case).  Every
    keyword is independently optional; ``None`` (or ``MISSING`` for
    ``contains``) means the keyword is absent.  ``nullable`` is the
    exception: it defaults to ``False`` and ``None`` marks a malformed value.
    """

    type: str | None = None
    nullable: bool | None = False

    # ── bounds ──────────────────────────────────────────────────────
    minimum: float | None = None
    maximum: float | None = None
    min_length: int | None = None
    max_length: int | None = None
    min_items: int | None = None
    max_items: int | None = None
    min_properties: int | None = None
    max_properties: int | None = None

    # ── strings ─────────────────────────────────────────────────────
    pattern: re.Pattern[str] | None = None
    format: str | None = None

    # ── membership ──────────────────────────────────────────────────
    enum: tuple[Any, ...] | None = None
    contains: Any = MISSING

    # ── arrays ──────────────────────────────────────────────────────
    unique_items: bool = False
    items: Schema | tuple[Schema, ...] | None = None

    # ── objects ─────────────────────────────────────────────────────
    required: tuple[str, ...] | None = None
    properties: Mapping[str, Schema] | None = None
    additional_properties: bool = True

    @property
    def has_contains(self) -> bool:
        return self.contains is not MISSING


@dataclass(frozen=True, slots=True)
class AnyOfSchema:
    """At least one alternative must accept the value."""

    alternatives: tuple[Schema, ...] = ()


@dataclass(frozen=True, slots=True)
class OneOfSchema:
    """Exactly one alternative must accept the value."""

    alternatives: tuple[Schema, ...] = ()


@dataclass(frozen=True, slots=True, eq=False)
class SchemaRef:
    """Late-bound pointer to another node.

    Built by the compiler when a document references one of its own
    ancestors.  ``target`` is bound once, right after the referenced node is
    constructed.
    """

    name: str = ""
    target: Schema | None = field(default=None, repr=False)

    def bind(self, target: Schema | None) -> None:
        object.__setattr__(self, "target", target)


Schema = Union[LeafSchema, AnyOfSchema, OneOfSchema, SchemaRef]

COMPOSITION_TYPES = (AnyOfSchema, OneOfSchema)
