"""ValidatorConfig defaults and environment overrides."""

from __future__ import annotations

import pytest

from shape_validator.core.config import DEFAULT_MAX_DEPTH, ValidatorConfig


class TestDefaults:
    def test_defaults(self) -> None:
        cfg = ValidatorConfig()
        assert cfg.max_depth == DEFAULT_MAX_DEPTH == 128
        assert cfg.strict_schemas is False

    def test_max_depth_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            ValidatorConfig(max_depth=0)

    def test_frozen(self) -> None:
        cfg = ValidatorConfig()
        with pytest.raises(AttributeError):
            cfg.max_depth = 3


class TestFromEnv:
    def test_empty_env(self) -> None:
        assert ValidatorConfig.from_env({}) == ValidatorConfig()

    def test_max_depth(self) -> None:
        assert ValidatorConfig.from_env({"SHAPE_VALIDATOR_MAX_DEPTH": "7"}).max_depth == 7

    @pytest.mark.parametrize("raw", ["0", "", "  "])
    def test_max_depth_zero_or_blank_means_default(self, raw: str) -> None:
        cfg = ValidatorConfig.from_env({"SHAPE_VALIDATOR_MAX_DEPTH": raw})
        assert cfg.max_depth == DEFAULT_MAX_DEPTH

    def test_max_depth_invalid(self) -> None:
        with pytest.raises(ValueError, match="SHAPE_VALIDATOR_MAX_DEPTH"):
            ValidatorConfig.from_env({"SHAPE_VALIDATOR_MAX_DEPTH": "deep"})

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_strict_truthy(self, raw: str) -> None:
        assert ValidatorConfig.from_env({"SHAPE_VALIDATOR_STRICT": raw}).strict_schemas is True

    @pytest.mark.parametrize("raw", ["0", "false", "off", ""])
    def test_strict_falsy(self, raw: str) -> None:
        assert ValidatorConfig.from_env({"SHAPE_VALIDATOR_STRICT": raw}).strict_schemas is False

    def test_strict_invalid(self) -> None:
        with pytest.raises(ValueError, match="SHAPE_VALIDATOR_STRICT"):
            ValidatorConfig.from_env({"SHAPE_VALIDATOR_STRICT": "maybe"})

    def test_overrides_win(self) -> None:
        env = {"SHAPE_VALIDATOR_MAX_DEPTH": "7", "SHAPE_VALIDATOR_STRICT": "1"}
        cfg = ValidatorConfig.from_env(env, max_depth=9, strict_schemas=False)
        assert cfg == ValidatorConfig(max_depth=9, strict_schemas=False)

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHAPE_VALIDATOR_MAX_DEPTH", "11")
        monkeypatch.delenv("SHAPE_VALIDATOR_STRICT", raising=False)
        assert ValidatorConfig.from_env().max_depth == 11
