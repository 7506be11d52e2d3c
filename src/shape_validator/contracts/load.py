"""Load schema and instance documents; check schema nodes against the meta-schema.

Usage::

    from shape_validator.contracts.load import load_document, load_schema

    schema = load_schema(Path("person.schema.yaml"), strict=True)
    instance = load_document(Path("person.json"))
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from shape_validator.compiler import compile_schema
from shape_validator.exceptions import DocumentLoadError, SchemaDefinitionError
from shape_validator.model.schema import (
    AnyOfSchema,
    LeafSchema,
    OneOfSchema,
    Schema,
    SchemaRef,
)

_logger = logging.getLogger(__name__)

SCHEMA_DIR = "data/schemas"
NODE_META_SCHEMA = "schema_node.schema.json"

_YAML_SUFFIXES = (".yaml", ".yml")

_YAML_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _DocumentLoader(yaml.SafeLoader):
    """``SafeLoader`` that keeps unquoted dates and timestamps as strings."""


_DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _YAML_TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# ── bundled meta-schema ─────────────────────────────────────────────


def _meta_schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``data/schemas/`` relative to the package root (source checkout, editable install)
    2. package data via importlib.resources (wheel / zip installs)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical
    with resources.as_file(resources.files("shape_validator") / SCHEMA_DIR / name) as p:
        return p


@lru_cache(maxsize=None)
def load_meta_schema(name: str = NODE_META_SCHEMA) -> dict[str, Any]:
    """Load a bundled meta-schema by filename."""
    path = _meta_schema_path(name)
    return json.loads(path.read_text(encoding="utf-8"))


@lru_cache(maxsize=None)
def _node_validator() -> jsonschema.protocols.Validator:
    schema = load_meta_schema(NODE_META_SCHEMA)
    cls = jsonschema.validators.validator_for(schema)
    cls.check_schema(schema)
    return cls(schema)


def _as_json_like(obj: Any, _active: frozenset[int] = frozenset()) -> Any:
    """Convert a Python-built schema node into what ``jsonschema`` expects.

    Tuples become lists, compiled patterns their source, and already-compiled
    schema nodes an empty object.  A container that contains itself is cut
    off with an empty container of the same shape.
    """
    if isinstance(obj, re.Pattern):
        return obj.pattern
    if isinstance(obj, (LeafSchema, AnyOfSchema, OneOfSchema, SchemaRef)):
        return {}
    if isinstance(obj, (Mapping, list, tuple)):
        if id(obj) in _active:
            return {} if isinstance(obj, Mapping) else []
        active = _active | {id(obj)}
        if isinstance(obj, Mapping):
            return {k: _as_json_like(v, active) for k, v in obj.items()}
        return [_as_json_like(v, active) for v in obj]
    return obj


def schema_node_issues(node: Any) -> list[str]:
    """Check ONE schema node (not its children) against the meta-schema.

    Returns human-readable issues, ordered by keyword path; empty when the
    node is well-formed.
    """
    errors = sorted(
        _node_validator().iter_errors(_as_json_like(node)),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    issues: list[str] = []
    for e in errors:
        where = "/".join(str(p) for p in e.absolute_path)
        issues.append(f"{where}: {e.message}" if where else e.message)
    return issues


def validate_schema_document(document: Any) -> list[str]:
    """Return every strict-mode issue in *document* without raising."""
    try:
        compile_schema(document, strict=True)
    except SchemaDefinitionError as e:
        return e.issues
    return []


# ── documents on disk ───────────────────────────────────────────────


def load_document(path: Path) -> Any:
    """Parse a JSON or YAML file.

    ``.yaml`` / ``.yml`` files are read with a ``yaml.SafeLoader`` that leaves
    dates and timestamps as strings (they are not JSON-like); everything
    else is parsed as JSON.

    Raises
    ------
    DocumentLoadError
        If the file cannot be read or decoded.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(path, f"cannot read file: {e.strerror or e}") from e

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            document = yaml.load(text, Loader=_DocumentLoader)
        except yaml.YAMLError as e:
            raise DocumentLoadError(path, f"invalid YAML: {e}") from e
    else:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentLoadError(path, f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e

    _logger.debug("Loaded %s (%s)", path, type(document).__name__)
    return document


def load_schema(path: Path, *, strict: bool = False) -> Schema | None:
    """Load and compile the schema document at *path*."""
    return compile_schema(load_document(path), strict=strict)
