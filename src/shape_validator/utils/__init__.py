"""Shared utilities for shape_validator."""

from shape_validator.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "stable_json_dump",
    "stable_json_dumps",
]
