"""Parser error types shared by the markup and stylesheet parsers."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Which fatal condition aborted a parse."""

    STRUCTURAL_VIOLATION = "structural_violation"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNEXPECTED_TOKEN = "unexpected_token"
    NUMERIC_CONVERSION_FAILURE = "numeric_conversion_failure"
    UNKNOWN_UNIT = "unknown_unit"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ParseError(Exception):
    """Raised when markup or stylesheet source cannot be parsed.

    Attributes:
        message: Human-readable description of the failure.
        position: Character offset into the source where parsing stopped.
        line: 1-based line of ``position``.
        column: 1-based column of ``position``.
    """

    kind: ErrorKind = ErrorKind.STRUCTURAL_VIOLATION

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} at line {self.line}, column {self.column}"


class StructuralViolationError(ParseError):
    """A required literal token was not found where the grammar needs it."""

    kind = ErrorKind.STRUCTURAL_VIOLATION


class TagMismatchError(StructuralViolationError):
    """A closing tag does not match the element it closes."""

    def __init__(self, expected: str, found: str, **kwargs: int | None) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Closing tag </{found}> does not match <{expected}>", **kwargs
        )


class UnexpectedEndOfInputError(ParseError):
    kind = ErrorKind.UNEXPECTED_END_OF_INPUT


class UnexpectedTokenError(ParseError):
    kind = ErrorKind.UNEXPECTED_TOKEN


class NumericConversionError(ParseError):
    kind = ErrorKind.NUMERIC_CONVERSION_FAILURE


class UnknownUnitError(ParseError):
    """A length carried a unit outside the recognised set."""

    kind = ErrorKind.UNKNOWN_UNIT

    def __init__(self, unit: str, **kwargs: int | None) -> None:
        self.unit = unit
        super().__init__(f"Unknown unit {unit!r}", **kwargs)


class NestingTooDeepError(ParseError):
    """Element nesting went past the configured ceiling."""

    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, max_depth: int, **kwargs: int | None) -> None:
        self.max_depth = max_depth
        super().__init__(f"Elements nested deeper than {max_depth} levels", **kwargs)
