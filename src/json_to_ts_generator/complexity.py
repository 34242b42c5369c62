"""Structural complexity metrics and rendered-output type counts."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from .json_types import JSONValue, is_absent, runtime_tag
from .model_types import ComplexityMetrics, TypeCount
from .validator import JSONParseError, parse_json

_PRIMITIVE_RE = re.compile(r": (?:string|number|boolean);")
_OBJECT_RE = re.compile(r": \{")
_ARRAY_RE = re.compile(r"\[\]")
_UNION_RE = re.compile(r"\|")
_LITERAL_RE = re.compile(r': "[^"]*"')
_ANY_RE = re.compile(r": any")


@dataclass
class _Counters:
    depth: int = 0
    total_properties: int = 0
    nested_objects: int = 0
    arrays: int = 0
    optional_properties: int = 0
    union_types: int = 0


def calculate_complexity(text: str) -> ComplexityMetrics:
    """Parse JSON text and measure it; malformed input yields all-zero metrics."""
    try:
        value = parse_json(text)
    except JSONParseError:
        return ComplexityMetrics()
    return measure_value(value)


def measure_value(value: JSONValue) -> ComplexityMetrics:
    """Collect depth and node counters from a single walk over ``value``."""
    counters = _measure(value)
    return ComplexityMetrics(
        depth=counters.depth,
        total_properties=counters.total_properties,
        nested_objects=counters.nested_objects,
        arrays=counters.arrays,
        optional_properties=counters.optional_properties,
        union_types=counters.union_types,
    )


def _measure(root: JSONValue) -> _Counters:
    counters = _Counters()
    pending: list[tuple[JSONValue, int]] = [(root, 0)]
    while pending:
        value, current_depth = pending.pop()
        counters.depth = max(counters.depth, current_depth)
        if isinstance(value, list):
            counters.arrays += 1
            if len({runtime_tag(item) for item in value}) > 1:
                counters.union_types += 1
            pending.extend((item, current_depth + 1) for item in value)
        elif isinstance(value, Mapping):
            counters.nested_objects += 1
            for member in value.values():
                counters.total_properties += 1
                if is_absent(member):
                    counters.optional_properties += 1
                pending.append((member, current_depth + 1))
    return counters


def count_types(output: str) -> TypeCount:
    """Count type shapes in rendered declaration text.

    The counts are pattern matches over the text, not a walk of the type tree,
    so they are approximate: a literal string containing ``|`` counts as a
    union, for instance.
    """
    return TypeCount(
        primitives=len(_PRIMITIVE_RE.findall(output)),
        objects=len(_OBJECT_RE.findall(output)),
        arrays=len(_ARRAY_RE.findall(output)),
        unions=len(_UNION_RE.findall(output)),
        literals=len(_LITERAL_RE.findall(output)),
        any=len(_ANY_RE.findall(output)),
    )
