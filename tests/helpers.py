"""Shared helpers for generator tests."""

from __future__ import annotations

from typing import Any

from json_to_ts_generator.settings import GenerationSettings


def plain_settings(**overrides: Any) -> GenerationSettings:
    """Settings without the comment block or export keyword, for exact-output checks."""
    values: dict[str, Any] = {"generate_comments": False, "export_interface": False}
    values.update(overrides)
    return GenerationSettings(**values)


def nested_objects(levels: int) -> dict[str, Any]:
    """Build ``levels`` objects nested under key ``a`` with a numeric leaf."""
    value: dict[str, Any] = {"leaf": 1}
    for _ in range(levels - 1):
        value = {"a": value}
    return value
