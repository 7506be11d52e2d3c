"""Predicate library — one stateless check per schema keyword family.

Every predicate has the same calling convention::

    predicate(node, value, kind, conforms) -> Outcome

``node`` is the ``LeafSchema`` being evaluated, ``kind`` is the precomputed
kind of ``value`` and ``conforms(schema, value) -> bool`` is the engine's
sub-validation callback, used by the predicates that recurse (array items,
object properties).  Only the pass/fail of a sub-validation is visible here;
its own errors stay with the nested call.

A predicate returns ``Outcome.NOT_APPLICABLE`` when its keyword is absent,
malformed, or outside the value's kind; it never raises for a well-typed
value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, assert_never

from shape_validator.formats import resolve_format
from shape_validator.kinds import deep_equal
from shape_validator.model import DECLARABLE_KINDS, ErrorCode, Kind, Outcome
from shape_validator.model.schema import LeafSchema, Schema

Conforms = Callable[[Optional[Schema], Any], bool]


class Predicate(Protocol):
    """Calling convention shared by every check in this module."""

    def __call__(
        self, node: LeafSchema, value: Any, kind: Kind, conforms: Conforms
    ) -> Outcome:
        ...


def _outcome(ok: bool) -> Outcome:
    return Outcome.PASS if ok else Outcome.FAIL


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


# ── type / nullability ──────────────────────────────────────────────


def check_nullable(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """A null value is acceptable only when ``nullable`` is true.

    Applicable whenever ``nullable`` is a boolean, which includes the default
    ``False``; any other value (a malformed keyword) skips the check.
    """
    if not isinstance(node.nullable, bool):
        return Outcome.NOT_APPLICABLE
    return _outcome(kind is not Kind.NULL or node.nullable)


def check_unknown_type(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    if not isinstance(node.type, str):
        return Outcome.NOT_APPLICABLE
    return _outcome(node.type in DECLARABLE_KINDS)


def check_wrong_type(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """Non-null values must have the declared kind.

    Null values pass here; ``check_nullable`` owns that decision.  An
    unrecognised declared type matches nothing.
    """
    if not isinstance(node.type, str):
        return Outcome.NOT_APPLICABLE
    if kind is Kind.NULL:
        return Outcome.PASS
    return _outcome(kind.value == node.type)


# ── bounds ──────────────────────────────────────────────────────────


def _measure(node: LeafSchema, value: Any, kind: Kind, *, lower: bool) -> tuple[Any, Any]:
    """Select ``(bound, size)`` for *kind*; ``bound`` is None when unbounded."""
    match kind:
        case Kind.NUMBER:
            return (node.minimum if lower else node.maximum), value
        case Kind.STRING:
            return (node.min_length if lower else node.max_length), len(value)
        case Kind.ARRAY:
            return (node.min_items if lower else node.max_items), len(value)
        case Kind.OBJECT:
            return (node.min_properties if lower else node.max_properties), len(value)
        case Kind.NULL | Kind.BOOLEAN:
            return None, None
        case _:
            assert_never(kind)


def check_min_bound(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    bound, size = _measure(node, value, kind, lower=True)
    if not _is_number(bound):
        return Outcome.NOT_APPLICABLE
    return _outcome(size >= bound)


def check_max_bound(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    bound, size = _measure(node, value, kind, lower=False)
    if not _is_number(bound):
        return Outcome.NOT_APPLICABLE
    return _outcome(size <= bound)


# ── string content ──────────────────────────────────────────────────


def _match_pattern(pattern: Any, value: Any, kind: Kind) -> Outcome:
    if kind is not Kind.STRING or pattern is None or not hasattr(pattern, "search"):
        return Outcome.NOT_APPLICABLE
    return _outcome(pattern.search(value) is not None)


def check_string_pattern(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """The compiled ``pattern`` must match somewhere in a string value."""
    return _match_pattern(node.pattern, value, kind)


def check_string_format(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """Named formats delegate to their fixed pattern; unknown names are skipped."""
    return _match_pattern(resolve_format(node.format), value, kind)


# ── enumeration ─────────────────────────────────────────────────────


def check_enum(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    if not isinstance(node.enum, (list, tuple)):
        return Outcome.NOT_APPLICABLE
    return _outcome(any(deep_equal(value, allowed) for allowed in node.enum))


# ── arrays ──────────────────────────────────────────────────────────


def check_array_items(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """Every element satisfies ``items``.

    A tuple of schemas is a per-element any-of: each element must satisfy at
    least one of them (an empty tuple therefore rejects every element).
    """
    if kind is not Kind.ARRAY or node.items is None:
        return Outcome.NOT_APPLICABLE

    items = node.items
    if isinstance(items, (list, tuple)):
        for element in value:
            if not any(conforms(alternative, element) for alternative in items):
                return Outcome.FAIL
        return Outcome.PASS

    for element in value:
        if not conforms(items, element):
            return Outcome.FAIL
    return Outcome.PASS


def check_array_contains(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    if kind is not Kind.ARRAY or not node.has_contains:
        return Outcome.NOT_APPLICABLE
    return _outcome(any(deep_equal(element, node.contains) for element in value))


def check_array_unique(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """No two elements are deep-equal.

    Elements are compared against the ones seen so far, in array order; the
    first collision ends the scan.
    """
    if kind is not Kind.ARRAY or node.unique_items is not True:
        return Outcome.NOT_APPLICABLE

    seen: list[Any] = []
    for element in value:
        if any(deep_equal(previous, element) for previous in seen):
            return Outcome.FAIL
        seen.append(element)
    return Outcome.PASS


# ── objects ─────────────────────────────────────────────────────────


def check_required(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """Every required key is present; a ``null`` value still counts as present."""
    required = node.required
    if kind is not Kind.OBJECT or required is None:
        return Outcome.NOT_APPLICABLE
    if isinstance(required, str):
        required = (required,)
    elif not isinstance(required, (list, tuple)):
        return Outcome.NOT_APPLICABLE
    return _outcome(all(name in value for name in required))


def check_properties(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """Declared properties that are present must satisfy their sub-schema.

    Undeclared keys are ignored here; ``check_extra_properties`` rejects them.
    """
    properties = node.properties
    if kind is not Kind.OBJECT or properties is None:
        return Outcome.NOT_APPLICABLE
    for key, member in value.items():
        if key in properties and not conforms(properties[key], member):
            return Outcome.FAIL
    return Outcome.PASS


def check_extra_properties(node: LeafSchema, value: Any, kind: Kind, conforms: Conforms) -> Outcome:
    """Keys absent from ``properties`` are rejected when extras are disallowed.

    Applies only when ``properties`` is declared.
    """
    declared = node.properties
    if kind is not Kind.OBJECT or node.additional_properties is not False or declared is None:
        return Outcome.NOT_APPLICABLE
    return _outcome(all(key in declared for key in value))


# ── chain ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Rule:
    """A predicate bound to the error code it emits on failure."""

    name: str
    code: ErrorCode
    check: Predicate


PREDICATE_CHAIN: tuple[Rule, ...] = (
    Rule("nullable", ErrorCode.NOT_NULLABLE, check_nullable),
    Rule("unknown_type", ErrorCode.UNKNOWN_TYPE, check_unknown_type),
    Rule("wrong_type", ErrorCode.WRONG_TYPE, check_wrong_type),
    Rule("min_bound", ErrorCode.BELOW_MINIMUM, check_min_bound),
    Rule("max_bound", ErrorCode.ABOVE_MAXIMUM, check_max_bound),
    Rule("string_pattern", ErrorCode.PATTERN_MISMATCH, check_string_pattern),
    Rule("string_format", ErrorCode.FORMAT_MISMATCH, check_string_format),
    Rule("enum", ErrorCode.NOT_IN_ENUM, check_enum),
    Rule("array_items", ErrorCode.WRONG_TYPE, check_array_items),
    Rule("array_contains", ErrorCode.MISSING_CONTAINS, check_array_contains),
    Rule("array_unique", ErrorCode.DUPLICATE_ITEMS, check_array_unique),
    Rule("required", ErrorCode.MISSING_REQUIRED_PROPERTY, check_required),
    Rule("properties", ErrorCode.WRONG_TYPE, check_properties),
    Rule("extra_properties", ErrorCode.DISALLOWED_ADDITIONAL_PROPERTY, check_extra_properties),
)
