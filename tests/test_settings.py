"""Unit tests for settings validation and YAML loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from json_to_ts_generator.settings import GenerationSettings, SettingsError, load_settings


def test_defaults() -> None:
    """Defaults mirror the interactive tool's initial settings."""
    settings = GenerationSettings()
    assert settings.interface_name == "GeneratedInterface"
    assert settings.use_optional_properties
    assert settings.generate_comments
    assert not settings.use_strict_types
    assert settings.export_interface
    assert not settings.use_readonly
    assert not settings.generate_utility_types
    assert settings.indent_size == 2
    assert not settings.canonical_union_members


def test_camel_case_aliases_are_accepted() -> None:
    """Settings documents use camelCase keys."""
    settings = GenerationSettings.model_validate(
        {"interfaceName": "User", "useStrictTypes": True, "indentSize": 4}
    )
    assert settings.interface_name == "User"
    assert settings.use_strict_types
    assert settings.indent_size == 4


@pytest.mark.parametrize(
    "payload",
    [
        {"indentSize": 0},
        {"indentSize": 9},
        {"interfaceName": ""},
        {"unknownOption": True},
    ],
)
def test_invalid_values_are_rejected(payload: dict[str, object]) -> None:
    """Out-of-range values and unknown keys fail validation."""
    with pytest.raises(ValidationError):
        GenerationSettings.model_validate(payload)


def test_settings_are_immutable() -> None:
    """Settings cannot be changed after construction."""
    settings = GenerationSettings()
    with pytest.raises(ValidationError):
        settings.use_readonly = True  # type: ignore[misc]


def test_load_settings_from_yaml(tmp_path: Path) -> None:
    """YAML settings files are validated into a settings model."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "interfaceName: ApiResponse\nuseReadonly: true\ngenerateUtilityTypes: true\n",
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.interface_name == "ApiResponse"
    assert settings.use_readonly
    assert settings.generate_utility_types
    assert settings.generate_comments


def test_empty_yaml_file_gives_defaults(tmp_path: Path) -> None:
    """An empty settings file means all defaults."""
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == GenerationSettings()


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "indentSize: [\n",
        "indentSize: 42\n",
    ],
)
def test_bad_settings_files_raise_settings_error(tmp_path: Path, content: str) -> None:
    """Non-mapping, unparsable and invalid files raise ``SettingsError``."""
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(path)


def test_missing_settings_file_raises_settings_error(tmp_path: Path) -> None:
    """A missing file is reported as a settings error."""
    with pytest.raises(SettingsError):
        load_settings(tmp_path / "missing.yaml")
