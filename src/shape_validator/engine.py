"""Validation engine — evaluates a schema node against a value.

Algorithm per node:

1. ``None`` (or anything that is not a schema node) → no constraints.
2. ``OneOfSchema`` / ``AnyOfSchema`` → validate the value against every
   alternative and map the number of successes to at most one error code.
   The leaf predicate chain is *not* run for composition nodes.
3. ``LeafSchema`` → run every rule of ``PREDICATE_CHAIN`` in order, adding
   one violation per applicable, failing predicate.  The chain never
   short-circuits.

Nested validations (array items, object properties, alternatives) are
independent sub-runs; only their pass/fail reaches the parent.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from shape_validator.compiler import compile_schema
from shape_validator.core.config import ValidatorConfig
from shape_validator.exceptions import SchemaTooDeepError
from shape_validator.kinds import kind_of
from shape_validator.messages import message_for
from shape_validator.model import ErrorCode, Outcome
from shape_validator.model.report import ValidationReport, Violation
from shape_validator.model.schema import (
    AnyOfSchema,
    LeafSchema,
    OneOfSchema,
    Schema,
    SchemaRef,
)
from shape_validator.predicates import PREDICATE_CHAIN

_logger = logging.getLogger(__name__)


class Validator:
    """Validates values against schemas.

    ``validate`` and ``run`` are pure.  ``is_valid`` additionally caches the
    report of that call on the instance (``last_report`` / ``errors``) for
    the "check, then inspect the errors" pattern; the cache is overwritten
    by the next ``is_valid`` call and is not synchronised, so use one
    instance per thread.
    """

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self.config = config or ValidatorConfig()
        self.last_report: ValidationReport = ValidationReport()

    @property
    def errors(self) -> list[ErrorCode]:
        """Error codes recorded by the most recent ``is_valid`` call."""
        return self.last_report.codes

    # ── public API ───────────────────────────────────────────────────

    def prepare(self, schema: Any) -> Schema | None:
        """Compile raw mapping schemas; pass compiled nodes through."""
        if isinstance(schema, Mapping):
            return compile_schema(schema, strict=self.config.strict_schemas)
        return schema

    def run(self, schema: Any, value: Any) -> ValidationReport:
        """Validate *value* and return the full report."""
        node = self.prepare(schema)
        return ValidationReport(violations=tuple(self._evaluate(node, value, depth=0)))

    def validate(self, schema: Any, value: Any) -> list[ErrorCode]:
        """Return the ordered error codes for *value*; empty means valid."""
        return self.run(schema, value).codes

    def is_valid(self, schema: Any, value: Any) -> bool:
        """Validate, remember the report on this instance, return validity."""
        self.last_report = self.run(schema, value)
        return self.last_report.is_valid

    # ── evaluation ───────────────────────────────────────────────────

    def _evaluate(self, node: Any, value: Any, *, depth: int) -> list[Violation]:
        if depth >= self.config.max_depth:
            _logger.debug("Depth bound %d reached", self.config.max_depth)
            raise SchemaTooDeepError(self.config.max_depth)

        while isinstance(node, SchemaRef):
            node = node.target

        if isinstance(node, (OneOfSchema, AnyOfSchema)):
            return self._evaluate_composition(node, value, depth=depth)
        if isinstance(node, LeafSchema):
            return self._evaluate_leaf(node, value, depth=depth)
        return []

    def _evaluate_composition(
        self, node: OneOfSchema | AnyOfSchema, value: Any, *, depth: int
    ) -> list[Violation]:
        kind = kind_of(value)
        successes = sum(
            1 for alternative in node.alternatives
            if not self._evaluate(alternative, value, depth=depth + 1)
        )
        if successes == 0:
            code = ErrorCode.NO_VALID_ALTERNATIVE
        elif successes > 1 and isinstance(node, OneOfSchema):
            code = ErrorCode.MULTIPLE_VALID_ALTERNATIVES
        else:
            return []
        return [Violation(code=code, kind=kind, message=message_for(code, kind))]

    def _evaluate_leaf(self, node: LeafSchema, value: Any, *, depth: int) -> list[Violation]:
        kind = kind_of(value)

        def conforms(sub: Schema | None, sub_value: Any) -> bool:
            return not self._evaluate(sub, sub_value, depth=depth + 1)

        violations: list[Violation] = []
        for rule in PREDICATE_CHAIN:
            if rule.check(node, value, kind, conforms) is Outcome.FAIL:
                violations.append(
                    Violation(code=rule.code, kind=kind, message=message_for(rule.code, kind))
                )
        return violations


def validate(schema: Any, value: Any, *, config: ValidatorConfig | None = None) -> list[ErrorCode]:
    """Ordered error codes for *value* against *schema*; empty means valid."""
    return Validator(config).validate(schema, value)


def is_valid(schema: Any, value: Any, *, config: ValidatorConfig | None = None) -> bool:
    """``True`` iff ``validate(schema, value)`` is empty."""
    return Validator(config).run(schema, value).is_valid
