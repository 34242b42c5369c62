"""Unit tests for shape analysis, complexity metrics and type counts."""

from __future__ import annotations

import pytest

from json_to_ts_generator.analyzer import (
    FIX_SYNTAX_SUGGESTION,
    INVALID_JSON_ISSUE,
    NESTED_OBJECTS_SUGGESTION,
    OPTIONAL_PROPERTIES_SUGGESTION,
    UNION_TYPES_SUGGESTION,
    analyze_json,
    analyze_value,
)
from json_to_ts_generator.complexity import calculate_complexity, count_types, measure_value
from json_to_ts_generator.json_types import UNDEFINED
from json_to_ts_generator.model_types import ComplexityMetrics, TypeCount

_RICH_DOCUMENT = '{"a": {"b": null}, "c": [1, "x"]}'


def test_analysis_reports_all_features() -> None:
    """Nested objects, arrays, nulls and mixed arrays should all be detected."""
    analysis = analyze_json(_RICH_DOCUMENT)
    assert analysis.root_type == "object"
    assert analysis.has_nested_objects
    assert analysis.has_arrays
    assert analysis.has_optional_properties
    assert analysis.has_union_types
    assert analysis.has_complex_types
    assert analysis.suggested_improvements == (
        OPTIONAL_PROPERTIES_SUGGESTION,
        UNION_TYPES_SUGGESTION,
        NESTED_OBJECTS_SUGGESTION,
    )
    assert analysis.type_issues == ()


def test_flat_root_object_is_not_nested() -> None:
    """The root object alone does not count as a nested object."""
    analysis = analyze_json('{"a": 1, "b": "x"}')
    assert not analysis.has_nested_objects
    assert analysis.suggested_improvements == ()


@pytest.mark.parametrize(
    ("text", "root_type"),
    [
        ("[1, 2]", "array"),
        ('"x"', "string"),
        ("3.5", "number"),
        ("true", "boolean"),
        ("null", "object"),
        ("{}", "object"),
    ],
)
def test_root_type(text: str, root_type: str) -> None:
    """Root type is ``array`` for arrays, otherwise the runtime tag."""
    assert analyze_json(text).root_type == root_type


def test_mixed_shapes_of_objects_are_not_unions_for_analysis() -> None:
    """The analyzer compares runtime tags only, so differing objects look uniform."""
    analysis = analyze_json('[{"a": 1}, {"b": "x"}]')
    assert not analysis.has_union_types
    assert analysis.has_nested_objects


def test_undefined_values_count_as_optional() -> None:
    """Undefined members are treated like null members."""
    assert analyze_value({"a": UNDEFINED}).has_optional_properties


def test_malformed_json_yields_degraded_analysis() -> None:
    """Invalid input gives a fixed analysis rather than an exception."""
    analysis = analyze_json('{"a":}')
    assert analysis.root_type == "unknown"
    assert analysis.type_issues == (INVALID_JSON_ISSUE,)
    assert analysis.suggested_improvements == (FIX_SYNTAX_SUGGESTION,)
    assert not analysis.has_arrays


def test_complexity_metrics_for_rich_document() -> None:
    """One traversal should fill every counter."""
    assert calculate_complexity(_RICH_DOCUMENT) == ComplexityMetrics(
        depth=2,
        total_properties=3,
        nested_objects=2,
        arrays=1,
        optional_properties=1,
        union_types=1,
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("[]", ComplexityMetrics(arrays=1)),
        ("[[1]]", ComplexityMetrics(depth=2, arrays=2)),
        ('"x"', ComplexityMetrics()),
        ('[1, null, {"k": 1}]', ComplexityMetrics(depth=2, arrays=1, nested_objects=1,
                                                  total_properties=1, union_types=1)),
    ],
)
def test_complexity_metrics(text: str, expected: ComplexityMetrics) -> None:
    """Depth and node counters follow the shape of the document."""
    assert calculate_complexity(text) == expected


def test_complexity_of_invalid_json_is_zero() -> None:
    """Malformed input yields all-zero metrics."""
    assert calculate_complexity("{not json") == ComplexityMetrics()


def test_measure_value_counts_undefined_as_optional() -> None:
    """Undefined members count as optional properties."""
    metrics = measure_value({"a": UNDEFINED, "b": None, "c": 0})
    assert metrics.optional_properties == 2
    assert metrics.total_properties == 3


def test_walks_survive_nesting_past_the_recursion_limit() -> None:
    """Analysis and metrics handle values nested deeper than the interpreter stack."""
    value: object = {"leaf": None}
    for _ in range(5000):
        value = [value]

    metrics = measure_value(value)
    assert metrics.depth == 5001
    assert metrics.arrays == 5000
    assert metrics.nested_objects == 1
    assert metrics.optional_properties == 1

    analysis = analyze_value(value)
    assert analysis.root_type == "array"
    assert analysis.has_nested_objects
    assert analysis.has_optional_properties
    assert not analysis.has_union_types


def test_count_types_uses_text_patterns() -> None:
    """Type counts are pattern matches over the rendered declaration."""
    output = (
        "interface U {\n"
        "  a: string;\n"
        "  b: number[];\n"
        "  c: {\n"
        "    d: any;\n"
        "  };\n"
        "  e: (number | string)[];\n"
        '  f: "fixed";\n'
        "}"
    )
    assert count_types(output) == TypeCount(
        primitives=1,
        objects=1,
        arrays=2,
        unions=1,
        literals=1,
        any=1,
    )


def test_count_types_of_empty_output() -> None:
    """No output text means no counts."""
    assert count_types("") == TypeCount()
