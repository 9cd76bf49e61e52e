from domstyle.parser.cursor import Cursor
from domstyle.parser.errors import (
    ErrorKind,
    NestingTooDeepError,
    NumericConversionError,
    ParseError,
    StructuralViolationError,
    TagMismatchError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnknownUnitError,
)

__all__ = [
    "Cursor",
    "ErrorKind",
    "ParseError",
    "StructuralViolationError",
    "TagMismatchError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "NumericConversionError",
    "UnknownUnitError",
    "NestingTooDeepError",
]
