"""Naming helpers for declaration names and property keys."""

from __future__ import annotations

import json
import re

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_IDENTIFIER_SANITIZE_RE = re.compile(r"[^0-9a-zA-Z_$]+")

_DEFAULT_DECLARATION_NAME = "RootObject"

# Words that cannot name an interface or type alias.
_RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "any",
        "boolean",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "never",
        "new",
        "null",
        "number",
        "object",
        "return",
        "string",
        "super",
        "switch",
        "symbol",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "undefined",
        "unknown",
        "var",
        "void",
        "while",
        "with",
    }
)


def is_identifier(raw: str) -> bool:
    """Return whether text is a plain identifier usable without quoting."""
    return _IDENTIFIER_RE.fullmatch(raw) is not None


def declaration_name(raw: str) -> str:
    """Return a usable interface/type name for ``raw``.

    Valid identifiers are kept verbatim; anything else is converted to
    PascalCase.
    """
    text = raw.strip()
    if is_identifier(text) and text not in _RESERVED_WORDS:
        return text

    parts = [part for part in _IDENTIFIER_SANITIZE_RE.split(text) if part]
    name = "".join(part[0].upper() + part[1:] for part in parts)
    if not name or name in _RESERVED_WORDS:
        return _DEFAULT_DECLARATION_NAME
    if name[0].isdigit():
        name = f"_{name}"
    return name


def property_key(name: str) -> str:
    """Render an object key, quoting it when it is not a plain identifier."""
    if is_identifier(name):
        return name
    return quote_string(name)


def quote_string(text: str) -> str:
    """Quote text as a string literal.

    Non-ASCII characters stay readable; lone surrogates, which cannot be
    encoded as UTF-8, are written as ``\\uXXXX`` escapes.
    """
    quoted = json.dumps(text, ensure_ascii=False)
    return quoted.encode("utf-8", "backslashreplace").decode("utf-8")
