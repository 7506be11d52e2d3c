"""Validator configuration dataclass.

Environment variables override defaults when built via ``from_env``:

  SHAPE_VALIDATOR_MAX_DEPTH   nested schema evaluations allowed (0 = default)
  SHAPE_VALIDATOR_STRICT      1/true/yes/on -> reject malformed schema keywords
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

DEFAULT_MAX_DEPTH = 128

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class ValidatorConfig:
    """Immutable validator configuration."""

    max_depth: int = DEFAULT_MAX_DEPTH
    strict_schemas: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, **overrides) -> ValidatorConfig:
        """Build a config from *env* (defaults to :data:`os.environ`).

        Keyword *overrides* win over the environment.
        """
        if env is None:
            env = os.environ

        config = cls()

        raw_depth = env.get("SHAPE_VALIDATOR_MAX_DEPTH")
        if raw_depth is not None and raw_depth.strip():
            try:
                depth = int(raw_depth)
            except ValueError:
                raise ValueError(
                    f"SHAPE_VALIDATOR_MAX_DEPTH must be an integer, got {raw_depth!r}"
                ) from None
            if depth:
                config = replace(config, max_depth=depth)

        raw_strict = env.get("SHAPE_VALIDATOR_STRICT")
        if raw_strict is not None:
            flag = raw_strict.strip().lower()
            if flag in _TRUTHY:
                config = replace(config, strict_schemas=True)
            elif flag not in _FALSY:
                raise ValueError(
                    f"SHAPE_VALIDATOR_STRICT must be one of {_TRUTHY + _FALSY[:-1]}, got {raw_strict!r}"
                )

        if overrides:
            config = replace(config, **overrides)
        return config
