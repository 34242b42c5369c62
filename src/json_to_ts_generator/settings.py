"""Generation settings model and YAML settings loading."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .json_types import JSONValue


class SettingsError(RuntimeError):
    """Raised when generation settings are missing, unreadable or invalid."""


class GenerationSettings(BaseModel):
    """Options controlling how a declaration is inferred and rendered.

    Field names accept both snake_case and the camelCase spelling used in
    settings files (``interfaceName``, ``useStrictTypes``, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    interface_name: str = Field(default="GeneratedInterface", min_length=1)
    use_optional_properties: bool = True
    generate_comments: bool = True
    use_strict_types: bool = False
    export_interface: bool = True
    use_readonly: bool = False
    generate_utility_types: bool = False
    indent_size: int = Field(default=2, ge=1, le=8)
    canonical_union_members: bool = False


def load_settings(path: Path) -> GenerationSettings:
    """Load and validate generation settings from a YAML file."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except OSError as exc:
        raise SettingsError(f"Failed to read settings file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SettingsError(f"Failed to parse YAML in {path}: {exc}") from exc

    payload_value: JSONValue = payload if payload is not None else {}
    if not isinstance(payload_value, dict):
        raise SettingsError(
            f"Settings file must deserialize to a mapping, got {type(payload_value)!r}"
        )

    try:
        return GenerationSettings.model_validate(payload_value)
    except ValidationError as exc:
        raise SettingsError(f"Settings validation failed for {path}: {exc}") from exc


def ensure_settings(settings: object) -> GenerationSettings:
    """Reject anything that is not a ``GenerationSettings`` instance."""
    if not isinstance(settings, GenerationSettings):
        raise SettingsError(
            f"settings must be a GenerationSettings instance, got {type(settings)!r}"
        )
    return settings
