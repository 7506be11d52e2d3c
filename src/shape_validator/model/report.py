"""Violation and ValidationReport — the engine's output records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shape_validator.model import ErrorCode, Kind

REPORT_SCHEMA_VERSION = "validation_report_v1"


@dataclass(frozen=True, slots=True)
class Violation:
    """One failed, applicable predicate.

    ``kind`` is the kind of the value the predicate looked at; it selects
    the message variant (e.g. "too short string" vs "too few items").
    """

    code: ErrorCode
    kind: Kind
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "kind": self.kind.value,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Ordered violations for one ``(schema, value)`` pair."""

    violations: tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def codes(self) -> list[ErrorCode]:
        return [v.code for v in self.violations]

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def __len__(self) -> int:
        return len(self.violations)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": REPORT_SCHEMA_VERSION,
            "valid": self.is_valid,
            "error_count": len(self.violations),
            "errors": [v.to_dict() for v in self.violations],
        }
