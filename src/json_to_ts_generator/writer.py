"""Filesystem writer for generated declarations."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .model_types import GenerationResult


class WriteError(RuntimeError):
    """Raised when output files cannot be written."""


def write_declarations(path: Path, results: Iterable[GenerationResult]) -> int:
    """Write the outputs of valid results to one file, separated by blank lines.

    Args:
        path (Path): Destination file; parent directories are created.
        results (Iterable[GenerationResult]): Results to export.

    Returns:
        int: Number of declarations written.
    """
    outputs = [result.output for result in results if result.is_valid and result.output]
    content = "\n\n".join(outputs)
    if content:
        content += "\n"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write file {path}: {exc}") from exc
    return len(outputs)
