"""JSON to TypeScript declaration generator package."""

from __future__ import annotations

from .cli import main
from .generator import generate_batch, generate_single
from .json_types import UNDEFINED
from .model_types import BatchItem, GenerationBatch, GenerationResult
from .settings import GenerationSettings, SettingsError, load_settings
from .validator import validate_json

__all__ = [
    "UNDEFINED",
    "BatchItem",
    "GenerationBatch",
    "GenerationResult",
    "GenerationSettings",
    "SettingsError",
    "generate_batch",
    "generate_single",
    "load_settings",
    "main",
    "validate_json",
]
