"""High-level generation pipeline for single documents and batches."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Optional

from .analyzer import analyze_value
from .complexity import count_types, measure_value
from .inference import infer_type
from .model_types import (
    BatchItem,
    BatchStatistics,
    ComplexityMetrics,
    GenerationBatch,
    GenerationResult,
    GenerationStatistics,
    TypeCount,
)
from .naming import declaration_name
from .renderer import render_declaration
from .settings import GenerationSettings, SettingsError, ensure_settings
from .validator import parse_json, validate_json

logger = logging.getLogger(__name__)

_GENERIC_FAILURE_MESSAGE = "Generation failed"


def generate_single(
    json_text: str,
    interface_name: str,
    settings: GenerationSettings,
) -> GenerationResult:
    """Generate a TypeScript declaration from one JSON document.

    Invalid JSON is reported on the result (``is_valid=False``, empty output,
    zeroed statistics) rather than raised.

    Args:
        json_text (str): JSON document text.
        interface_name (str): Declaration name; empty falls back to the settings name.
        settings (GenerationSettings): Generation options.

    Returns:
        GenerationResult: Output text, statistics and analysis.

    Raises:
        SettingsError: If ``settings`` is not a ``GenerationSettings`` instance.
    """
    settings = ensure_settings(settings)
    name = declaration_name(interface_name or settings.interface_name)
    started = time.perf_counter()

    validation = validate_json(json_text)
    if not validation.is_valid:
        message = validation.errors[0].message if validation.errors else _GENERIC_FAILURE_MESSAGE
        return _failed_result(
            json_text=json_text,
            interface_name=name,
            error=message,
            processing_time=_elapsed_ms(started),
        )

    value = parse_json(json_text)
    output = render_declaration(infer_type(value, settings), name, settings)
    analysis = analyze_value(value)
    complexity = measure_value(value)
    processing_time = _elapsed_ms(started)
    logger.debug("Generated %s in %.3f ms", name, processing_time)

    return GenerationResult(
        id=_new_id(),
        input=json_text,
        output=output,
        interface_name=name,
        is_valid=True,
        statistics=GenerationStatistics(
            input_size=_byte_size(json_text),
            output_size=_byte_size(output),
            input_lines=_line_count(json_text),
            output_lines=_line_count(output),
            processing_time=processing_time,
            complexity=complexity,
            type_count=count_types(output),
        ),
        analysis=analysis,
        created_at=_now(),
    )


def generate_batch(
    items: Iterable[BatchItem],
    settings: GenerationSettings,
    *,
    max_workers: int = 1,
) -> GenerationBatch:
    """Generate declarations for independent inputs and aggregate their statistics.

    A failing item yields an invalid result and never stops its siblings.
    Results keep the order of ``items`` regardless of ``max_workers``.

    Args:
        items (Iterable[BatchItem]): Inputs with their declaration labels.
        settings (GenerationSettings): Generation options shared by every item.
        max_workers (int): Thread count; ``1`` generates sequentially.

    Returns:
        GenerationBatch: Per-item results and batch statistics.

    Raises:
        SettingsError: If ``settings`` is invalid or ``max_workers`` is below 1.
    """
    settings = ensure_settings(settings)
    if max_workers < 1:
        raise SettingsError(f"max_workers must be at least 1, got {max_workers}")

    batch_items = list(items)

    def _run(item: BatchItem) -> GenerationResult:
        started = time.perf_counter()
        try:
            return generate_single(item.content, item.label, settings)
        except SettingsError:
            raise
        except Exception as exc:
            logger.warning("Batch item %r failed: %s", item.label, exc)
            return _failed_result(
                json_text=item.content,
                interface_name=declaration_name(item.label or settings.interface_name),
                error=str(exc) or _GENERIC_FAILURE_MESSAGE,
                processing_time=_elapsed_ms(started),
            )

    if max_workers == 1 or len(batch_items) <= 1:
        results = [_run(item) for item in batch_items]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(_run, batch_items))

    statistics = summarize_results(results)
    logger.debug(
        "Batch generated %d results (%d valid, %d invalid)",
        statistics.total_generated,
        statistics.valid_count,
        statistics.invalid_count,
    )
    return GenerationBatch(
        id=_new_id(),
        results=tuple(results),
        settings=settings,
        statistics=statistics,
        created_at=_now(),
        count=len(results),
    )


def summarize_results(results: list[GenerationResult]) -> BatchStatistics:
    """Aggregate validity, size and depth statistics over batch results."""
    total = len(results)
    valid_count = sum(1 for result in results if result.is_valid)
    if total:
        average_complexity = sum(r.statistics.complexity.depth for r in results) / total
        success_rate = valid_count / total * 100
    else:
        average_complexity = 0.0
        success_rate = 0.0
    return BatchStatistics(
        total_generated=total,
        valid_count=valid_count,
        invalid_count=total - valid_count,
        average_complexity=average_complexity,
        total_input_size=sum(result.statistics.input_size for result in results),
        total_output_size=sum(result.statistics.output_size for result in results),
        success_rate=success_rate,
    )


def _failed_result(
    *,
    json_text: str,
    interface_name: str,
    error: Optional[str],
    processing_time: float,
) -> GenerationResult:
    return GenerationResult(
        id=_new_id(),
        input=json_text,
        output="",
        interface_name=interface_name,
        is_valid=False,
        error=error,
        statistics=GenerationStatistics(
            input_size=_byte_size(json_text),
            output_size=0,
            input_lines=_line_count(json_text),
            output_lines=0,
            processing_time=processing_time,
            complexity=ComplexityMetrics(),
            type_count=TypeCount(),
        ),
        created_at=_now(),
    )


def _byte_size(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def _line_count(text: str) -> int:
    return len(text.split("\n"))


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


__all__ = [
    "generate_batch",
    "generate_single",
    "summarize_results",
]
