"""JSON input parsing and syntax validation."""

from __future__ import annotations

import json
from typing import Optional

from .json_types import JSONValue
from .model_types import JSONError, JSONValidation

EMPTY_INPUT_MESSAGE = "JSON input cannot be empty"
TAB_WARNING = "Contains tab characters - consider using spaces for indentation"
LARGE_INPUT_WARNING = "Large JSON file - processing may be slow"
LARGE_INPUT_THRESHOLD = 100_000


class JSONParseError(ValueError):
    """Raised when text is not valid RFC 8259 JSON."""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


def parse_json(text: str) -> JSONValue:
    """Parse JSON text, rejecting the non-standard ``NaN``/``Infinity`` tokens.

    Raises:
        JSONParseError: If the text is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise JSONParseError(str(exc), exc.pos) from exc
    except RecursionError as exc:
        raise JSONParseError("JSON nesting is too deep to parse") from exc


def _reject_constant(name: str) -> JSONValue:
    raise JSONParseError(f"Unexpected token {name} is not valid JSON")


def offset_to_line_column(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 1-based ``(line, column)`` pair."""
    prefix = text[:offset]
    line = prefix.count("\n") + 1
    column = offset - prefix.rfind("\n")
    return line, column


def validate_json(text: str) -> JSONValidation:
    """Check that text is syntactically valid JSON.

    Failures are reported through the returned ``JSONValidation``; this
    function does not raise for any input string.

    Args:
        text (str): Candidate JSON document.

    Returns:
        JSONValidation: Validity flag, errors with positions, and warnings.
    """
    if not text.strip():
        return JSONValidation(is_valid=False, errors=(JSONError(message=EMPTY_INPUT_MESSAGE),))

    try:
        parse_json(text)
    except JSONParseError as exc:
        line: Optional[int] = None
        column: Optional[int] = None
        if exc.position is not None:
            line, column = offset_to_line_column(text, exc.position)
        return JSONValidation(
            is_valid=False,
            errors=(JSONError(message=str(exc), line=line, column=column),),
        )

    warnings: list[str] = []
    if "\t" in text:
        warnings.append(TAB_WARNING)
    if len(text) > LARGE_INPUT_THRESHOLD:
        warnings.append(LARGE_INPUT_WARNING)
    return JSONValidation(is_valid=True, warnings=tuple(warnings))
