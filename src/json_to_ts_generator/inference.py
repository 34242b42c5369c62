"""Infer structural types from parsed JSON values."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal

from .json_types import UNDEFINED, JSONValue, is_absent
from .model_types import (
    AnyType,
    ArrayType,
    InferredType,
    LiteralType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    Property,
    UnionArrayType,
)
from .naming import quote_string
from .renderer import type_key
from .settings import GenerationSettings

MAX_DEPTH = 10

_EXPONENT_PADDING_RE = re.compile(r"e([+-])0+(?=\d)")


def infer_type(value: JSONValue, settings: GenerationSettings, depth: int = 0) -> InferredType:
    """Map a parsed JSON value to an inferred type tree.

    Objects and non-empty arrays nested deeper than ``MAX_DEPTH`` degrade to
    ``any`` instead of being expanded, so this never fails for any parsed value.

    Args:
        value (JSONValue): Parsed JSON value.
        settings (GenerationSettings): Strictness, optionality and readonly options.
        depth (int): Nesting depth of ``value`` below the document root.

    Returns:
        InferredType: Inferred type for ``value``.
    """
    strict = settings.use_strict_types

    if value is None:
        if strict:
            return LiteralType(kind=PrimitiveKind.NULL, rendered_value="null")
        return PrimitiveType(kind=PrimitiveKind.NULL)

    if value is UNDEFINED:
        return PrimitiveType(kind=PrimitiveKind.UNDEFINED)

    if isinstance(value, bool):
        if strict:
            return LiteralType(
                kind=PrimitiveKind.BOOLEAN,
                rendered_value="true" if value else "false",
            )
        return PrimitiveType(kind=PrimitiveKind.BOOLEAN)

    if isinstance(value, (int, float)):
        if strict and math.isfinite(value):
            return LiteralType(kind=PrimitiveKind.NUMBER, rendered_value=render_number(value))
        return PrimitiveType(kind=PrimitiveKind.NUMBER)

    if isinstance(value, str):
        if strict:
            return LiteralType(
                kind=PrimitiveKind.STRING,
                rendered_value=quote_string(value),
            )
        return PrimitiveType(kind=PrimitiveKind.STRING)

    if isinstance(value, list):
        if value and depth > MAX_DEPTH:
            return AnyType()
        return _infer_array(value, settings, depth)

    if isinstance(value, Mapping):
        if depth > MAX_DEPTH:
            return AnyType()
        return _infer_object(value, settings, depth)

    return AnyType()


def _infer_array(items: list[JSONValue], settings: GenerationSettings, depth: int) -> InferredType:
    if not items:
        return ArrayType(element=AnyType())

    # Keyed by rendered text, so first occurrence wins and order is stable.
    distinct: dict[str, InferredType] = {}
    for item in items:
        element = infer_type(item, settings, depth + 1)
        distinct.setdefault(type_key(element, settings), element)

    members = tuple(distinct.values())
    if len(members) == 1:
        return ArrayType(element=members[0])
    return UnionArrayType(elements=members)


def _infer_object(
    value: Mapping[str, JSONValue],
    settings: GenerationSettings,
    depth: int,
) -> ObjectType:
    properties: list[Property] = []
    for name, member in value.items():
        properties.append(
            Property(
                name=str(name),
                type=infer_type(member, settings, depth + 1),
                optional=settings.use_optional_properties and is_absent(member),
                readonly=settings.use_readonly,
            )
        )
    return ObjectType(properties=tuple(properties))


def render_number(value: int | float) -> str:
    """Render a number the way JavaScript prints it, e.g. ``1.5e-7`` or ``0.00001``."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        # Positional between 1e-6 and 1e-4, where repr already switches to exponents.
        return format(Decimal(text), "f")
    return _EXPONENT_PADDING_RE.sub(r"e\1", text)
