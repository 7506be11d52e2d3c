"""Compiler — turns a raw schema document into the tagged schema model.

Schema documents are plain mappings using the camelCase keyword names
(``minLength``, ``uniqueItems``, ``additionalProperties`` …), typically
decoded from JSON or YAML.  Compilation decides, once per node, whether the
node is a leaf or a composition node, compiles ``pattern`` strings, and
normalises sequences to tuples.

Two modes:

* **permissive** (default) — a malformed keyword (``pattern: 5``,
  ``required: {}`` …) is dropped, so its predicate is simply not applicable.
  A malformed node (not a mapping) compiles to ``None``: no constraints.
  Every drop is logged at DEBUG.
* **strict** — every node is checked against the bundled per-node
  meta-schema with ``jsonschema`` and every pattern must compile;
  all issues are raised together as ``SchemaDefinitionError``.

Documents that contain themselves (directly or through descendants)
compile into ``SchemaRef`` nodes bound to the enclosing node.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from shape_validator.exceptions import SchemaDefinitionError
from shape_validator.model.schema import (
    AnyOfSchema,
    LeafSchema,
    OneOfSchema,
    Schema,
    SchemaRef,
)

_logger = logging.getLogger(__name__)

# document keyword -> LeafSchema field, for the numeric bounds
BOUND_KEYWORDS: dict[str, str] = {
    "minimum": "minimum",
    "maximum": "maximum",
    "minLength": "min_length",
    "maxLength": "max_length",
    "minItems": "min_items",
    "maxItems": "max_items",
    "minProperties": "min_properties",
    "maxProperties": "max_properties",
}

_BOOLEAN_KEYWORDS: dict[str, str] = {
    "nullable": "nullable",
    "uniqueItems": "unique_items",
    "additionalProperties": "additional_properties",
}

LEAF_KEYWORDS: frozenset[str] = frozenset(
    {"type", "pattern", "format", "enum", "contains", "items", "required", "properties"}
    | set(BOUND_KEYWORDS)
    | set(_BOOLEAN_KEYWORDS)
)

COMPOSITION_KEYWORDS: tuple[str, ...] = ("oneOf", "anyOf")

_SCHEMA_TYPES = (LeafSchema, AnyOfSchema, OneOfSchema, SchemaRef)


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _jp_escape(token: str) -> str:
    return str(token).replace("~", "~0").replace("/", "~1")


def _join_path(base: str, *tokens: Any) -> str:
    for token in tokens:
        base = f"{base}/{_jp_escape(token)}"
    return base


class _Compiler:
    def __init__(self, *, strict: bool) -> None:
        self.strict = strict
        self.issues: list[str] = []
        self._done: dict[int, Schema | None] = {}
        self._in_progress: dict[int, str] = {}
        self._pending_refs: dict[int, list[SchemaRef]] = {}

    # ── bookkeeping ──────────────────────────────────────────────────

    def _drop(self, path: str, keyword: str, reason: str) -> None:
        _logger.debug("Ignoring %s at %s: %s", keyword, path or "#", reason)

    def _issue(self, path: str, message: str) -> None:
        self.issues.append(f"{path or '#'}: {message}")

    def _check_strict(self, doc: Any, path: str) -> None:
        if not self.strict:
            return
        from shape_validator.contracts.load import schema_node_issues

        for issue in schema_node_issues(doc):
            self._issue(path, issue)

    # ── nodes ────────────────────────────────────────────────────────

    def compile(self, doc: Any, path: str) -> Schema | None:
        if isinstance(doc, _SCHEMA_TYPES):
            return doc

        if not isinstance(doc, Mapping):
            self._check_strict(doc, path)
            self._drop(path, "schema node", f"expected a mapping, got {type(doc).__name__}")
            return None

        key = id(doc)
        if key in self._done:
            return self._done[key]
        if key in self._in_progress:
            ref = SchemaRef(name=self._in_progress[key] or "#")
            self._pending_refs.setdefault(key, []).append(ref)
            return ref

        self._check_strict(doc, path)
        self._in_progress[key] = path
        try:
            node = self._compile_node(doc, path)
        finally:
            del self._in_progress[key]

        self._done[key] = node
        for ref in self._pending_refs.pop(key, []):
            ref.bind(node)
        return node

    def _compile_node(self, doc: Mapping[str, Any], path: str) -> Schema:
        present = [k for k in COMPOSITION_KEYWORDS if k in doc]
        for keyword in present:
            alternatives = doc[keyword]
            if not isinstance(alternatives, (list, tuple)):
                self._drop(path, keyword, "expected a sequence of schemas")
                continue

            discarded = [k for k in present if k != keyword]
            if discarded:
                _logger.warning(
                    "Composition node at %s has both %s and %s; %s is ignored",
                    path or "#", keyword, ", ".join(discarded), ", ".join(discarded),
                )

            ignored = sorted(k for k in doc if k in LEAF_KEYWORDS)
            if ignored:
                _logger.debug(
                    "Composition node at %s uses %s; ignoring %s",
                    path or "#", keyword, ", ".join(ignored),
                )

            compiled = tuple(
                self.compile(alt, _join_path(path, keyword, i))
                for i, alt in enumerate(alternatives)
            )
            if keyword == "oneOf":
                return OneOfSchema(alternatives=compiled)
            return AnyOfSchema(alternatives=compiled)

        return self._compile_leaf(doc, path)

    def _compile_leaf(self, doc: Mapping[str, Any], path: str) -> LeafSchema:
        fields: dict[str, Any] = {}

        if "type" in doc:
            if isinstance(doc["type"], str):
                fields["type"] = doc["type"]
            else:
                self._drop(path, "type", "expected a string")

        for keyword, attr in _BOOLEAN_KEYWORDS.items():
            if keyword in doc:
                if isinstance(doc[keyword], bool):
                    fields[attr] = doc[keyword]
                else:
                    self._drop(path, keyword, "expected a boolean")
                    if attr == "nullable":
                        # a malformed nullable disables the null check
                        fields[attr] = None

        for keyword, attr in BOUND_KEYWORDS.items():
            if keyword in doc:
                if _is_number(doc[keyword]):
                    fields[attr] = doc[keyword]
                else:
                    self._drop(path, keyword, "expected a number")

        if "pattern" in doc:
            pattern = self._compile_pattern(doc["pattern"], _join_path(path, "pattern"))
            if pattern is not None:
                fields["pattern"] = pattern

        if "format" in doc:
            if isinstance(doc["format"], str):
                fields["format"] = doc["format"]
            else:
                self._drop(path, "format", "expected a string")

        if "enum" in doc:
            if isinstance(doc["enum"], (list, tuple)):
                fields["enum"] = tuple(doc["enum"])
            else:
                self._drop(path, "enum", "expected a sequence")

        if "contains" in doc:
            fields["contains"] = doc["contains"]

        if "items" in doc:
            items = doc["items"]
            if isinstance(items, (list, tuple)):
                fields["items"] = tuple(
                    self.compile(sub, _join_path(path, "items", i))
                    for i, sub in enumerate(items)
                )
            elif isinstance(items, (Mapping,) + _SCHEMA_TYPES):
                fields["items"] = self.compile(items, _join_path(path, "items"))
            else:
                self._drop(path, "items", "expected a schema or a sequence of schemas")

        if "required" in doc:
            required = doc["required"]
            if isinstance(required, str):
                fields["required"] = (required,)
            elif isinstance(required, (list, tuple)) and all(isinstance(r, str) for r in required):
                fields["required"] = tuple(required)
            else:
                self._drop(path, "required", "expected a name or a sequence of names")

        if "properties" in doc:
            properties = doc["properties"]
            if isinstance(properties, Mapping):
                fields["properties"] = MappingProxyType({
                    name: self.compile(sub, _join_path(path, "properties", name))
                    for name, sub in properties.items()
                })
            else:
                self._drop(path, "properties", "expected a mapping of schemas")

        return LeafSchema(**fields)

    def _compile_pattern(self, raw: Any, path: str) -> re.Pattern[str] | None:
        if isinstance(raw, re.Pattern):
            return raw
        if not isinstance(raw, str):
            self._drop(path, "pattern", "expected a regular expression string")
            return None
        try:
            return re.compile(raw)
        except re.error as e:
            if self.strict:
                self._issue(path, f"invalid regular expression: {e}")
            self._drop(path, "pattern", f"invalid regular expression: {e}")
            return None


def compile_schema(document: Any, *, strict: bool = False) -> Schema | None:
    """Compile a raw schema *document* into the tagged schema model.

    Already-compiled nodes are returned unchanged; ``None`` stays ``None``
    (no constraints).

    Raises
    ------
    SchemaDefinitionError
        In strict mode, when any node is malformed.
    """
    if document is None:
        return None
    compiler = _Compiler(strict=strict)
    node = compiler.compile(document, "")
    if compiler.issues:
        raise SchemaDefinitionError(compiler.issues)
    return node
