"""Qualitative shape analysis of JSON documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .json_types import JSONValue, is_absent, runtime_tag
from .model_types import TypeAnalysis
from .validator import JSONParseError, parse_json

OPTIONAL_PROPERTIES_SUGGESTION = "Consider using optional properties for null/undefined values"
UNION_TYPES_SUGGESTION = "Consider using union types for mixed array elements"
NESTED_OBJECTS_SUGGESTION = "Consider extracting nested objects into separate interfaces"
FIX_SYNTAX_SUGGESTION = "Fix JSON syntax errors first"
INVALID_JSON_ISSUE = "Invalid JSON format"


@dataclass
class _Findings:
    has_nested_objects: bool = False
    has_arrays: bool = False
    has_optional_properties: bool = False
    has_union_types: bool = False


def analyze_json(text: str) -> TypeAnalysis:
    """Parse and analyze JSON text, degrading to a fixed result when it is malformed."""
    try:
        value = parse_json(text)
    except JSONParseError:
        return TypeAnalysis(
            root_type="unknown",
            has_nested_objects=False,
            has_arrays=False,
            has_optional_properties=False,
            has_union_types=False,
            has_complex_types=False,
            suggested_improvements=(FIX_SYNTAX_SUGGESTION,),
            type_issues=(INVALID_JSON_ISSUE,),
        )
    return analyze_value(value)


def analyze_value(value: JSONValue) -> TypeAnalysis:
    """Walk a parsed value and report which structural features it uses.

    Mixed arrays are detected from the runtime tags of their immediate
    elements, which is coarser than the inferencer's type comparison: an
    array of differently-shaped objects is not reported as mixed.
    """
    findings = _walk(value)

    suggestions: list[str] = []
    if findings.has_optional_properties:
        suggestions.append(OPTIONAL_PROPERTIES_SUGGESTION)
    if findings.has_union_types:
        suggestions.append(UNION_TYPES_SUGGESTION)
    if findings.has_nested_objects:
        suggestions.append(NESTED_OBJECTS_SUGGESTION)

    return TypeAnalysis(
        root_type="array" if isinstance(value, list) else runtime_tag(value),
        has_nested_objects=findings.has_nested_objects,
        has_arrays=findings.has_arrays,
        has_optional_properties=findings.has_optional_properties,
        has_union_types=findings.has_union_types,
        has_complex_types=findings.has_union_types,
        suggested_improvements=tuple(suggestions),
        type_issues=(),
    )


def _walk(root: JSONValue) -> _Findings:
    findings = _Findings()
    # Explicit stack: documents may nest deeper than the interpreter recursion limit.
    pending: list[tuple[JSONValue, bool]] = [(root, True)]
    while pending:
        value, is_root = pending.pop()
        if isinstance(value, list):
            findings.has_arrays = True
            if len({runtime_tag(item) for item in value}) > 1:
                findings.has_union_types = True
            pending.extend((item, False) for item in value)
        elif isinstance(value, Mapping):
            if not is_root:
                findings.has_nested_objects = True
            for member in value.values():
                if is_absent(member):
                    findings.has_optional_properties = True
                pending.append((member, False))
    return findings
