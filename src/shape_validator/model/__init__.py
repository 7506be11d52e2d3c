"""Enums shared across the predicate library, the engine and the CLI."""

from __future__ import annotations

from enum import Enum, IntEnum


class Kind(str, Enum):
    """Structural category of a value, derived from the value itself."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


# Kinds a schema may name in ``type`` (``null`` is expressed via ``nullable``).
DECLARABLE_KINDS: frozenset[str] = frozenset(
    k.value for k in Kind if k is not Kind.NULL
)


class Outcome(str, Enum):
    """Three-state predicate result.

    ``NOT_APPLICABLE`` means the governing keyword is absent or the value's
    kind is outside the keyword's domain; it never produces an error.
    """

    NOT_APPLICABLE = "not_applicable"
    PASS = "pass"
    FAIL = "fail"


class ErrorCode(str, Enum):
    """Symbolic error-code catalog.  See ``shape_validator.codes``."""

    NOT_NULLABLE = "not_nullable"
    UNKNOWN_TYPE = "unknown_type"
    WRONG_TYPE = "wrong_type"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"
    PATTERN_MISMATCH = "pattern_mismatch"
    FORMAT_MISMATCH = "format_mismatch"
    NOT_IN_ENUM = "not_in_enum"
    MISSING_CONTAINS = "missing_contains"
    DUPLICATE_ITEMS = "duplicate_items"
    MISSING_REQUIRED_PROPERTY = "missing_required_property"
    DISALLOWED_ADDITIONAL_PROPERTY = "disallowed_additional_property"
    NO_VALID_ALTERNATIVE = "no_valid_alternative"
    MULTIPLE_VALID_ALTERNATIVES = "multiple_valid_alternatives"


class ExitCode(IntEnum):
    """CLI exit-code contract.

    Code  Meaning
    ----  -------
      0   Valid — the instance conforms to the schema
      1   Invalid — at least one violation was reported
      2   Error — usage error, unreadable file, malformed schema (strict)
    """

    VALID = 0
    INVALID = 1
    ERROR = 2
