"""
Base57 - positional numerals over a visually unambiguous alphabet.

The alphabet drops 0, O, 1, I and l, and is sorted in ASCII order so that
digit order and character order agree. Values are unsigned and bounded to
128 bits.
"""

import operator

from core.errors import (
    EmptyInputError,
    InvalidCharacterError,
    NegativeValueError,
    NotConvertibleError,
    ValueOverflowError,
    WidthExceededError,
)

ALPHABET = "23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE = len(ALPHABET)
ZERO_DIGIT = ALPHABET[0]
MAX_VALUE = (1 << 128) - 1
INVALID = 0xFF


def _build_decode_table():
    table = [INVALID] * 256
    for digit, char in enumerate(ALPHABET):
        table[ord(char)] = digit
    return tuple(table)


# byte value -> digit, or INVALID
DECODE_TABLE = _build_decode_table()


def to_unsigned(value, name="value"):
    """Coerce an integer-like value into the unsigned 128-bit range."""
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise NotConvertibleError(f"{name} must be an integer", value, cause=exc) from exc
    if number < 0:
        raise NegativeValueError(f"{name} must be non-negative", number)
    if number > MAX_VALUE:
        raise ValueOverflowError(f"{name} exceeds 128 bits", context={name: number})
    return number


def _digits(number):
    if number == 0:
        return ZERO_DIGIT

    chars = []
    while number > 0:
        number, remainder = divmod(number, BASE)
        chars.append(ALPHABET[remainder])
    return "".join(reversed(chars))


def natural_length(value):
    """Digit count of the unpadded encoding (1 for zero)."""
    return len(_digits(to_unsigned(value)))


def encode(value, pad_to=None, strict=False):
    """Encode a non-negative integer, left-padding with the zero digit to pad_to.

    A value wider than pad_to is returned unpadded and untruncated, unless
    strict is set, in which case WidthExceededError is raised.
    """
    number = to_unsigned(value)
    digits = _digits(number)
    if pad_to is None:
        return digits

    try:
        width = operator.index(pad_to)
    except TypeError as exc:
        raise NotConvertibleError("pad_to must be an integer", pad_to, cause=exc) from exc
    if width < 0:
        raise NegativeValueError("pad_to must be non-negative", width)
    if strict and len(digits) > width:
        raise WidthExceededError(width, len(digits))
    return digits.rjust(width, ZERO_DIGIT)


def decode(value):
    """Decode a base57 string, most significant digit first."""
    if not isinstance(value, str):
        raise NotConvertibleError("value must be a string", value)
    if not value:
        raise EmptyInputError("Value cannot be empty")

    result = 0
    for position, char in enumerate(value):
        code = ord(char)
        digit = DECODE_TABLE[code] if code < 128 else INVALID
        if digit == INVALID:
            raise InvalidCharacterError(char, position)
        result = result * BASE + digit
        if result > MAX_VALUE:
            raise ValueOverflowError("Decoded value overflowed 128 bits",
                                     context={"position": position})
    return result
