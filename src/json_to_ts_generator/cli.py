"""Command line interface for JSON to TypeScript generation."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .generator import generate_batch, generate_single
from .model_types import BatchItem, GenerationResult
from .report import format_batch_report, format_result_report
from .settings import GenerationSettings, SettingsError, load_settings
from .writer import WriteError, write_declarations

# CLI flag -> settings field; flags left unset keep the settings-file value.
_SETTING_FLAGS: tuple[tuple[str, str, str], ...] = (
    ("strict_types", "use_strict_types", "Emit literal types instead of widened primitives"),
    ("optional", "use_optional_properties", "Mark null-valued properties optional"),
    ("comments", "generate_comments", "Prefix the declaration with a comment block"),
    ("export", "export_interface", "Add the export keyword"),
    ("readonly", "use_readonly", "Mark every property readonly"),
    ("utility_types", "generate_utility_types", "Append Partial/Required/keyof helpers"),
    (
        "canonical_unions",
        "canonical_union_members",
        "Ignore property order when merging array element types",
    ),
)


class InputReadError(RuntimeError):
    """Raised when a JSON input file cannot be read."""


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="json-to-ts",
        description="Generate TypeScript interfaces and type aliases from JSON documents",
    )
    parser.add_argument(
        "--input",
        action="append",
        required=True,
        help="Path to a JSON file; repeat for a batch",
    )
    parser.add_argument("--name", help="Declaration name for a single input")
    parser.add_argument("--settings", help="Path to a YAML settings file")
    for flag, _field_name, help_text in _SETTING_FLAGS:
        parser.add_argument(
            f"--{flag.replace('_', '-')}",
            dest=flag,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )
    parser.add_argument("--indent", type=int, help="Spaces per nesting level (1-8)")
    parser.add_argument("--output", help="Write valid declarations to this file")
    parser.add_argument("--report", action="store_true", help="Print a statistics report")
    parser.add_argument("--workers", type=int, default=1, help="Threads used for batches")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = _resolve_settings(args)
        items = _read_inputs([Path(raw) for raw in args.input], name=args.name)
        if len(items) == 1:
            results = [generate_single(items[0].content, items[0].label, settings)]
            report = format_result_report(results[0]) if args.report else None
        else:
            batch = generate_batch(items, settings, max_workers=args.workers)
            results = list(batch.results)
            report = format_batch_report(batch) if args.report else None
        if args.output:
            write_declarations(Path(args.output), results)
    except (SettingsError, InputReadError, WriteError) as exc:
        parser.error(str(exc))
        return 2

    _print_results(results, to_stdout=not args.output)
    if report is not None:
        print(report)
    return 0 if all(result.is_valid for result in results) else 1


def _resolve_settings(args: argparse.Namespace) -> GenerationSettings:
    base = load_settings(Path(args.settings)) if args.settings else GenerationSettings()
    overrides: dict[str, object] = {}
    for flag, field_name, _help_text in _SETTING_FLAGS:
        value: Optional[bool] = getattr(args, flag)
        if value is not None:
            overrides[field_name] = value
    if args.indent is not None:
        overrides["indent_size"] = args.indent
    if args.name:
        overrides["interface_name"] = args.name
    if not overrides:
        return base
    try:
        return GenerationSettings.model_validate({**base.model_dump(), **overrides})
    except ValidationError as exc:
        raise SettingsError(f"Invalid command line settings: {exc}") from exc


def _read_inputs(paths: list[Path], *, name: Optional[str]) -> list[BatchItem]:
    items: list[BatchItem] = []
    for path in paths:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"Failed to read JSON file {path}: {exc}") from exc
        label = (name or "") if len(paths) == 1 else path.stem
        items.append(BatchItem(content=content, label=label))
    return items


def _print_results(results: list[GenerationResult], *, to_stdout: bool) -> None:
    for result in results:
        if not result.is_valid:
            print(f"Error ({result.interface_name}): {result.error}", file=sys.stderr)
        elif to_stdout:
            print(result.output)
            print()


if __name__ == "__main__":
    raise SystemExit(main())
