"""Exception hierarchy for shape_validator.

Violations found while validating a value are never raised; they are
collected into the result list.  The exceptions below cover the conditions
that are *not* violations: malformed schemas in strict mode, runaway
recursion, values that are not JSON-like, and unreadable documents.
"""

from __future__ import annotations

from typing import Any


class ShapeValidatorError(Exception):
    """Base exception for shape_validator."""


class SchemaDefinitionError(ShapeValidatorError):
    """Raised in strict mode when a schema document has malformed keywords."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        detail = "\n".join(f"  - {issue}" for issue in self.issues)
        super().__init__(f"Malformed schema ({len(self.issues)} issue(s)):\n{detail}")


class SchemaTooDeepError(ShapeValidatorError, RecursionError):
    """Raised when nested schema evaluation exceeds the configured depth."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Schema evaluation exceeded max_depth={max_depth}; "
            f"the schema is likely self-referencing without descending into the value."
        )


class UnsupportedValueError(ShapeValidatorError, TypeError):
    """Raised when the subject contains an object with no structural kind."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Cannot determine the kind of {type(value).__name__!s} value {value!r}; "
            f"expected None, bool, int, float, str, a sequence or a mapping."
        )


class DocumentLoadError(ShapeValidatorError):
    """Raised when a schema or instance document cannot be read or decoded."""

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
