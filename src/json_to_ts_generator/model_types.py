"""Internal datatypes for inference, analysis and generation results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Optional, TypeAlias, Union

if TYPE_CHECKING:
    from .settings import GenerationSettings


class PrimitiveKind(StrEnum):
    """Widened primitive types a JSON value can infer to."""

    NULL = "null"
    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True)
class PrimitiveType:
    """A widened primitive such as ``string`` or ``number``."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class LiteralType:
    """A type inhabited by exactly one value, e.g. ``"abc"`` or ``42``."""

    kind: PrimitiveKind
    rendered_value: str


@dataclass(frozen=True)
class ArrayType:
    """An array whose elements all reduce to one distinct type."""

    element: InferredType


@dataclass(frozen=True)
class UnionArrayType:
    """An array whose elements reduce to several types, in first-seen order."""

    elements: tuple[InferredType, ...]


@dataclass(frozen=True)
class Property:
    """One object member of an inferred object type."""

    name: str
    type: InferredType
    optional: bool
    readonly: bool


@dataclass(frozen=True)
class ObjectType:
    """An object type with properties in source key order."""

    properties: tuple[Property, ...]


@dataclass(frozen=True)
class AnyType:
    """Fallback for values past the depth guard."""


InferredType: TypeAlias = Union[
    PrimitiveType, LiteralType, ArrayType, UnionArrayType, ObjectType, AnyType
]


@dataclass(frozen=True)
class ComplexityMetrics:
    """Structural metrics gathered from one traversal of a parsed value."""

    depth: int = 0
    total_properties: int = 0
    nested_objects: int = 0
    arrays: int = 0
    optional_properties: int = 0
    union_types: int = 0


@dataclass(frozen=True)
class TypeCount:
    """Approximate occurrence counts of type shapes in rendered output text."""

    primitives: int = 0
    objects: int = 0
    arrays: int = 0
    unions: int = 0
    literals: int = 0
    any: int = 0


@dataclass(frozen=True)
class TypeAnalysis:
    """Qualitative findings about a JSON document's shape."""

    root_type: str
    has_nested_objects: bool
    has_arrays: bool
    has_optional_properties: bool
    has_union_types: bool
    has_complex_types: bool
    suggested_improvements: tuple[str, ...]
    type_issues: tuple[str, ...]


@dataclass(frozen=True)
class JSONError:
    """A syntax error with a best-effort source position."""

    message: str
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass(frozen=True)
class JSONValidation:
    """Outcome of validating JSON input text."""

    is_valid: bool
    errors: tuple[JSONError, ...] = ()
    warnings: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationStatistics:
    """Size, timing and shape statistics for one generation."""

    input_size: int
    output_size: int
    input_lines: int
    output_lines: int
    processing_time: float
    complexity: ComplexityMetrics
    type_count: TypeCount


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of generating a declaration from one JSON document."""

    id: str
    input: str
    output: str
    interface_name: str
    is_valid: bool
    statistics: GenerationStatistics
    created_at: datetime
    error: Optional[str] = None
    analysis: Optional[TypeAnalysis] = None


@dataclass(frozen=True)
class BatchItem:
    """One batch input: JSON text and the interface name it should produce."""

    content: str
    label: str = ""


@dataclass(frozen=True)
class BatchStatistics:
    """Aggregated statistics over all results of a batch."""

    total_generated: int
    valid_count: int
    invalid_count: int
    average_complexity: float
    total_input_size: int
    total_output_size: int
    success_rate: float


@dataclass(frozen=True)
class GenerationBatch:
    """Results of a batch generation together with their aggregates."""

    id: str
    results: tuple[GenerationResult, ...]
    settings: GenerationSettings
    statistics: BatchStatistics
    created_at: datetime
    count: int = 0
