"""Serialize inferred type trees into TypeScript declaration text."""

from __future__ import annotations

from .model_types import (
    AnyType,
    ArrayType,
    InferredType,
    LiteralType,
    ObjectType,
    PrimitiveType,
    Property,
    UnionArrayType,
)
from .naming import declaration_name, property_key
from .settings import GenerationSettings

COMMENT_BLOCK = "/**\n * Generated TypeScript interface from JSON\n */\n"
UTILITY_TYPES_HEADER = "// Utility types"


def render_declaration(inferred: InferredType, name: str, settings: GenerationSettings) -> str:
    """Render a complete top-level declaration for an inferred type.

    Object roots become ``interface Name { ... }``; every other root becomes
    ``type Name = ...;``.

    Args:
        inferred (InferredType): Inferred type of the document root.
        name (str): Requested declaration name.
        settings (GenerationSettings): Rendering options.

    Returns:
        str: Declaration source text.
    """
    name = declaration_name(name)
    export_keyword = "export " if settings.export_interface else ""
    body = render_type(inferred, settings)

    sections: list[str] = []
    if settings.generate_comments:
        sections.append(COMMENT_BLOCK)
    if isinstance(inferred, ObjectType):
        sections.append(f"{export_keyword}interface {name} {body}")
        if settings.generate_utility_types:
            sections.append(_utility_types(name, export_keyword))
    else:
        sections.append(f"{export_keyword}type {name} = {body};")
    return "".join(sections)


def render_type(inferred: InferredType, settings: GenerationSettings, level: int = 0) -> str:
    """Render a type expression, indenting nested objects below ``level``."""
    return _render(inferred, indent=" " * settings.indent_size, level=level, sort_properties=False)


def type_key(inferred: InferredType, settings: GenerationSettings) -> str:
    """Return the text used to tell array element types apart.

    Two types are the same union member when their keys are equal. By default
    the key is the rendered text, so property order matters; with
    ``canonical_union_members`` object properties are keyed in name order.
    """
    return _render(
        inferred,
        indent=" " * settings.indent_size,
        level=0,
        sort_properties=settings.canonical_union_members,
    )


def _render(inferred: InferredType, *, indent: str, level: int, sort_properties: bool) -> str:
    if isinstance(inferred, PrimitiveType):
        return inferred.kind.value
    if isinstance(inferred, LiteralType):
        return inferred.rendered_value
    if isinstance(inferred, AnyType):
        return "any"
    if isinstance(inferred, ArrayType):
        element = _render(
            inferred.element, indent=indent, level=level, sort_properties=sort_properties
        )
        return f"{element}[]"
    if isinstance(inferred, UnionArrayType):
        members = " | ".join(
            _render(member, indent=indent, level=level, sort_properties=sort_properties)
            for member in inferred.elements
        )
        return f"({members})[]"
    if isinstance(inferred, ObjectType):
        return _render_object(
            inferred.properties, indent=indent, level=level, sort_properties=sort_properties
        )
    raise TypeError(f"Unsupported inferred type: {inferred!r}")


def _render_object(
    properties: tuple[Property, ...],
    *,
    indent: str,
    level: int,
    sort_properties: bool,
) -> str:
    if not properties:
        return "{}"
    ordered = sorted(properties, key=lambda item: item.name) if sort_properties else properties
    member_indent = indent * (level + 1)
    lines = ["{"]
    for prop in ordered:
        readonly = "readonly " if prop.readonly else ""
        optional = "?" if prop.optional else ""
        value = _render(prop.type, indent=indent, level=level + 1, sort_properties=sort_properties)
        lines.append(f"{member_indent}{readonly}{property_key(prop.name)}{optional}: {value};")
    lines.append(f"{indent * level}}}")
    return "\n".join(lines)


def _utility_types(name: str, export_keyword: str) -> str:
    return (
        f"\n\n{UTILITY_TYPES_HEADER}\n"
        f"{export_keyword}type Partial{name} = Partial<{name}>;\n"
        f"{export_keyword}type Required{name} = Required<{name}>;\n"
        f"{export_keyword}type {name}Keys = keyof {name};"
    )
