"""Canonical error-code registry.

Single source of truth for every error code the engine can emit.  The
``ErrorCode`` enum in ``shape_validator.model`` carries the same values;
the registry adds the orderings and groupings callers rely on.

Structure:
  CHAIN_ERROR_CODES        - codes emitted by the leaf predicate chain, in chain order
  COMPOSITION_ERROR_CODES  - codes emitted by anyOf / oneOf resolution
  SHARED_ERROR_CODES       - codes emitted by more than one predicate
  ALL_ERROR_CODES          - sorted union of everything above
"""

from __future__ import annotations

from shape_validator.model import ErrorCode

# ── Type / nullability ──────────────────────────────────────────────
NOT_NULLABLE = ErrorCode.NOT_NULLABLE.value
UNKNOWN_TYPE = ErrorCode.UNKNOWN_TYPE.value
WRONG_TYPE = ErrorCode.WRONG_TYPE.value

# ── Bounds ──────────────────────────────────────────────────────────
BELOW_MINIMUM = ErrorCode.BELOW_MINIMUM.value
ABOVE_MAXIMUM = ErrorCode.ABOVE_MAXIMUM.value

# ── Strings ─────────────────────────────────────────────────────────
PATTERN_MISMATCH = ErrorCode.PATTERN_MISMATCH.value
FORMAT_MISMATCH = ErrorCode.FORMAT_MISMATCH.value

# ── Membership / arrays ─────────────────────────────────────────────
NOT_IN_ENUM = ErrorCode.NOT_IN_ENUM.value
MISSING_CONTAINS = ErrorCode.MISSING_CONTAINS.value
DUPLICATE_ITEMS = ErrorCode.DUPLICATE_ITEMS.value

# ── Objects ─────────────────────────────────────────────────────────
MISSING_REQUIRED_PROPERTY = ErrorCode.MISSING_REQUIRED_PROPERTY.value
DISALLOWED_ADDITIONAL_PROPERTY = ErrorCode.DISALLOWED_ADDITIONAL_PROPERTY.value

# ── Composition ─────────────────────────────────────────────────────
NO_VALID_ALTERNATIVE = ErrorCode.NO_VALID_ALTERNATIVE.value
MULTIPLE_VALID_ALTERNATIVES = ErrorCode.MULTIPLE_VALID_ALTERNATIVES.value

# ── Buckets ─────────────────────────────────────────────────────────

# One entry per chain predicate; array-items and properties reuse wrong_type.
CHAIN_ERROR_CODES: tuple[str, ...] = (
    NOT_NULLABLE,
    UNKNOWN_TYPE,
    WRONG_TYPE,
    BELOW_MINIMUM,
    ABOVE_MAXIMUM,
    PATTERN_MISMATCH,
    FORMAT_MISMATCH,
    NOT_IN_ENUM,
    WRONG_TYPE,
    MISSING_CONTAINS,
    DUPLICATE_ITEMS,
    MISSING_REQUIRED_PROPERTY,
    WRONG_TYPE,
    DISALLOWED_ADDITIONAL_PROPERTY,
)

COMPOSITION_ERROR_CODES: list[str] = sorted([
    NO_VALID_ALTERNATIVE,
    MULTIPLE_VALID_ALTERNATIVES,
])

SHARED_ERROR_CODES: list[str] = sorted(
    {c for c in CHAIN_ERROR_CODES if CHAIN_ERROR_CODES.count(c) > 1}
)

ALL_ERROR_CODES: list[str] = sorted(set(CHAIN_ERROR_CODES) | set(COMPOSITION_ERROR_CODES))


def _assert_code_registry_invariants() -> None:
    """Fail fast on invariant violations.

    Called at import time so a bad edit breaks every test run immediately.
    """
    import re

    code_re = re.compile(r"^[a-z]+(?:_[a-z]+)*$")

    def _check_bucket(name: str, ids: list[str]) -> None:
        if ids != sorted(ids):
            raise AssertionError(f"{name} must be sorted")
        if len(ids) != len(set(ids)):
            raise AssertionError(f"{name} must contain unique codes")
        bad = [x for x in ids if not code_re.match(x)]
        if bad:
            raise AssertionError(f"{name} contains invalid codes: {bad}")

    _check_bucket("COMPOSITION_ERROR_CODES", COMPOSITION_ERROR_CODES)
    _check_bucket("SHARED_ERROR_CODES", SHARED_ERROR_CODES)
    _check_bucket("ALL_ERROR_CODES", ALL_ERROR_CODES)

    if len(CHAIN_ERROR_CODES) != 14:
        raise AssertionError(
            f"CHAIN_ERROR_CODES must have one entry per chain predicate (14), "
            f"got {len(CHAIN_ERROR_CODES)}"
        )

    overlap = set(CHAIN_ERROR_CODES) & set(COMPOSITION_ERROR_CODES)
    if overlap:
        raise AssertionError(
            f"Chain and composition codes must be disjoint; overlaps: {sorted(overlap)}"
        )

    enum_values = {c.value for c in ErrorCode}
    if set(ALL_ERROR_CODES) != enum_values:
        raise AssertionError(
            "ALL_ERROR_CODES must equal the ErrorCode enum; "
            f"missing={sorted(enum_values - set(ALL_ERROR_CODES))} "
            f"extra={sorted(set(ALL_ERROR_CODES) - enum_values)}"
        )


_assert_code_registry_invariants()
