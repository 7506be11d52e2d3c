"""Document loading and per-node meta-schema checks."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shape_validator import DocumentLoadError, SchemaDefinitionError, is_valid
from shape_validator.contracts.load import (
    load_document,
    load_meta_schema,
    load_schema,
    schema_node_issues,
    validate_schema_document,
)
from shape_validator.model.schema import LeafSchema


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ── documents ───────────────────────────────────────────────────────


class TestLoadDocument:
    def test_json(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "doc.json", json.dumps({"a": [1, None]}))
        assert load_document(p) == {"a": [1, None]}

    def test_yaml(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "doc.yaml", "a:\n  - 1\n  - null\nb: text\n")
        assert load_document(p) == {"a": [1, None], "b": "text"}

    def test_yaml_dates_stay_strings(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "doc.yaml", "born: 2024-01-31\nseen: 2024-01-31T10:00:00Z\n")
        assert load_document(p) == {"born": "2024-01-31", "seen": "2024-01-31T10:00:00Z"}

    def test_yaml_scalars_still_resolve(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "doc.yaml", "n: 3\nf: 1.5\nb: true\nz: ~\n")
        assert load_document(p) == {"n": 3, "f": 1.5, "b": True, "z": None}

    def test_yml_suffix(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "doc.yml", "- x\n")
        assert load_document(p) == ["x"]

    def test_invalid_json(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "bad.json", "{not json")
        with pytest.raises(DocumentLoadError) as exc:
            load_document(p)
        assert "invalid JSON" in str(exc.value)
        assert exc.value.path == p

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "bad.yaml", "a: [1, 2\n")
        with pytest.raises(DocumentLoadError, match="invalid YAML"):
            load_document(p)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError, match="cannot read file"):
            load_document(tmp_path / "absent.json")


class TestLoadSchema:
    def test_yaml_schema(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "s.yaml", "type: string\nminLength: 2\n")
        assert load_schema(p) == LeafSchema(type="string", min_length=2)

    def test_strict_rejects_malformed(self, tmp_path: Path) -> None:
        p = _write(tmp_path / "s.json", json.dumps({"type": "string", "minLength": "2"}))
        assert load_schema(p) == LeafSchema(type="string")
        with pytest.raises(SchemaDefinitionError):
            load_schema(p, strict=True)

    def test_loaded_schema_validates(self, tmp_path: Path) -> None:
        p = _write(
            tmp_path / "person.yaml",
            "type: object\n"
            "required: [name]\n"
            "properties:\n"
            "  name: {type: string}\n"
            "  email: {type: string, format: email}\n",
        )
        schema = load_schema(p)
        assert is_valid(schema, {"name": "Ada", "email": "ada@example.com"})
        assert not is_valid(schema, {"email": "ada@example.com"})


# ── meta-schema ─────────────────────────────────────────────────────


class TestMetaSchema:
    def test_meta_schema_is_bundled(self) -> None:
        meta = load_meta_schema()
        assert meta["$schema"].endswith("2020-12/schema")
        assert "minLength" in meta["properties"]

    def test_well_formed_node(self) -> None:
        assert schema_node_issues({"type": "string", "nullable": True}) == []

    def test_issue_names_the_keyword(self) -> None:
        issues = schema_node_issues({"type": 5})
        assert len(issues) == 1
        assert issues[0].startswith("type: ")

    def test_non_mapping_node(self) -> None:
        assert schema_node_issues(5)

    def test_children_are_not_checked(self) -> None:
        assert schema_node_issues({"properties": {"a": {"type": 5}}}) == []

    def test_validate_schema_document_walks_children(self) -> None:
        assert validate_schema_document({"properties": {"a": {"type": "string"}}}) == []
        issues = validate_schema_document({"properties": {"a": {"type": 5}}})
        assert len(issues) == 1
        assert issues[0].startswith("/properties/a: ")
