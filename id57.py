"""id57 - compact, sortable, URL-safe identifiers over a base57 alphabet."""

from codec.base57 import ALPHABET, MAX_VALUE, decode, encode
from core.errors import (
    ClockError,
    EmptyInputError,
    Id57Error,
    InvalidCharacterError,
    InvalidLengthError,
    NegativeValueError,
    NotConvertibleError,
    ValueOverflowError,
    WidthExceededError,
)
from identifier.generator import (
    IDENTIFIER_WIDTH,
    PAYLOAD_WIDTH,
    TIMESTAMP_WIDTH,
    Id57Generator,
    configure,
    generate,
    is_valid,
    parse,
)

__version__ = "1.0.0"

__all__ = [
    "ALPHABET",
    "MAX_VALUE",
    "IDENTIFIER_WIDTH",
    "PAYLOAD_WIDTH",
    "TIMESTAMP_WIDTH",
    "encode",
    "decode",
    "generate",
    "parse",
    "is_valid",
    "configure",
    "Id57Generator",
    "Id57Error",
    "ClockError",
    "EmptyInputError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "NegativeValueError",
    "NotConvertibleError",
    "ValueOverflowError",
    "WidthExceededError",
]
