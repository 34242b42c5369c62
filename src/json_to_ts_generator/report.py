"""Plain-text reports for generation results and batches."""

from __future__ import annotations

from typing import Optional

from .model_types import GenerationBatch, GenerationResult


def format_result_report(result: GenerationResult, *, index: Optional[int] = None) -> str:
    """Render one result as an indented summary block."""
    stats = result.statistics
    heading = f"Interface: {result.interface_name}"
    if index is not None:
        heading = f"{index}. {heading}"
    lines = [
        heading,
        f"   Status: {'Valid' if result.is_valid else 'Invalid'}",
    ]
    if result.error:
        lines.append(f"   Error: {result.error}")
    lines.extend(
        [
            f"   Input Size: {format_file_size(stats.input_size)}",
            f"   Output Size: {format_file_size(stats.output_size)}",
            f"   Processing Time: {stats.processing_time:.2f}ms",
            (
                f"   Complexity: {stats.complexity.depth} levels, "
                f"{stats.complexity.total_properties} properties"
            ),
            (
                f"   Types: {stats.type_count.primitives} primitives, "
                f"{stats.type_count.objects} objects"
            ),
        ]
    )
    if result.analysis is not None and result.analysis.suggested_improvements:
        lines.append("   Suggestions:")
        lines.extend(f"   - {item}" for item in result.analysis.suggested_improvements)
    return "\n".join(lines)


def format_batch_report(batch: GenerationBatch) -> str:
    """Render a batch summary followed by one block per result."""
    stats = batch.statistics
    lines = [
        "TypeScript Interface Generation Report",
        "=" * 38,
        "",
        f"Total Results: {stats.total_generated}",
        f"Valid Results: {stats.valid_count}",
        f"Invalid Results: {stats.invalid_count}",
        "",
        "Results:",
    ]
    for index, result in enumerate(batch.results, start=1):
        lines.append(format_result_report(result, index=index))
    lines.extend(
        [
            "",
            "Statistics:",
            f"- Success Rate: {stats.success_rate:.1f}%",
            f"- Average Complexity: {stats.average_complexity:.1f} levels",
            f"- Total Input Size: {format_file_size(stats.total_input_size)}",
            f"- Total Output Size: {format_file_size(stats.total_output_size)}",
        ]
    )
    return "\n".join(lines)


def format_file_size(size: int) -> str:
    """Human-readable byte size using 1024-based units."""
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in ("KB", "MB", "GB"):
        value /= 1024
        if value < 1024 or unit == "GB":
            return f"{value:.2f} {unit}"
    return f"{value:.2f} GB"
