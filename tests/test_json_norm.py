"""Tests for the canonical JSON normalization layer."""

import json
from pathlib import Path

from shape_validator.model import ErrorCode, Kind
from shape_validator.model.report import ValidationReport, Violation
from shape_validator.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    # Keys should be sorted in the serialized output
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_unwraps_enums():
    obj = json.loads(stable_json_dumps({"code": ErrorCode.WRONG_TYPE, "kind": Kind.ARRAY}))
    assert obj == {"code": "wrong_type", "kind": "array"}


def test_stable_json_dumps_normalizes_paths():
    s = stable_json_dumps({"p": Path("a") / "b"})
    obj = json.loads(s)
    assert obj["p"] == "a/b"


def test_stable_json_dumps_sorts_sets():
    obj = json.loads(stable_json_dumps({"s": {"b", "a", "c"}, "t": (1, 2)}))
    assert obj == {"s": ["a", "b", "c"], "t": [1, 2]}


def test_stable_json_dumps_uses_to_dict():
    report = ValidationReport(
        violations=(Violation(ErrorCode.NOT_NULLABLE, Kind.NULL, "null"),)
    )
    obj = json.loads(stable_json_dumps(report))
    assert obj == {
        "schema_version": "validation_report_v1",
        "valid": False,
        "error_count": 1,
        "errors": [{"code": "not_nullable", "kind": "null", "message": "null"}],
    }


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
