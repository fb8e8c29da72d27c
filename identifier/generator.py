"""
id57 - time-sortable identifiers.

Format: 11 base57 digits of microseconds since the Unix epoch followed by
22 base57 digits of a 128-bit payload = 33 characters. Identifiers compare
in timestamp order as long as the timestamp fits 11 digits (until about the
year 655,000).
"""

import operator
import threading

from codec.base57 import MAX_VALUE, decode, encode
from core.errors import (
    InvalidCharacterError,
    InvalidLengthError,
    NegativeValueError,
    NotConvertibleError,
    ValueOverflowError,
)
from identifier.entropy import UUID4Entropy
from identifier.parts import IdentifierParts
from utils.timestamp import now_micros

TIMESTAMP_WIDTH = 11
PAYLOAD_WIDTH = 22
IDENTIFIER_WIDTH = TIMESTAMP_WIDTH + PAYLOAD_WIDTH

_generator = None
_generator_lock = threading.Lock()


def _coerce_timestamp(value):
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise NotConvertibleError("timestamp must be an integer", value, cause=exc) from exc
    if number < 0:
        raise NegativeValueError("timestamp must be non-negative", number)
    return number


def _coerce_payload(value):
    # int, then __index__, then __int__ (uuid.UUID)
    try:
        number = operator.index(value)
    except TypeError:
        convert = getattr(type(value), "__int__", None)
        if convert is None:
            raise NotConvertibleError("payload must be an int or expose an __int__ method", value) from None
        try:
            number = convert(value)
        except Exception as exc:
            raise NotConvertibleError("payload could not be converted to an int", value, cause=exc) from exc
        if not isinstance(number, int):
            raise NotConvertibleError("payload __int__ did not return an int", value)
    if number < 0:
        raise NegativeValueError("payload must be non-negative", number)
    if number > MAX_VALUE:
        raise ValueOverflowError("payload exceeds 128 bits", context={"payload": number})
    return number


class Id57Generator:
    """Builds identifiers from an injectable clock and payload source."""

    def __init__(self, entropy=None, clock=None, strict=False):
        self.entropy = entropy or UUID4Entropy()
        self.clock = clock or now_micros
        self.strict = strict

    def generate(self, timestamp=None, payload=None, strict=None):
        strict = self.strict if strict is None else strict
        ts_value = self.clock() if timestamp is None else _coerce_timestamp(timestamp)
        payload_value = self.entropy.next_payload() if payload is None else _coerce_payload(payload)
        return (encode(ts_value, TIMESTAMP_WIDTH, strict=strict)
                + encode(payload_value, PAYLOAD_WIDTH, strict=strict))


def parse(identifier):
    """Split an identifier into its timestamp and payload."""
    if not isinstance(identifier, str):
        raise NotConvertibleError("identifier must be a string", identifier)
    if len(identifier) != IDENTIFIER_WIDTH:
        raise InvalidLengthError(IDENTIFIER_WIDTH, len(identifier))

    timestamp = decode(identifier[:TIMESTAMP_WIDTH])
    try:
        payload = decode(identifier[TIMESTAMP_WIDTH:])
    except InvalidCharacterError as exc:
        raise InvalidCharacterError(exc.char, exc.position + TIMESTAMP_WIDTH) from exc
    return IdentifierParts(identifier, timestamp, payload)


def is_valid(identifier):
    try:
        parse(identifier)
    except (ValueError, TypeError):
        return False
    return True


def configure(entropy=None, clock=None, strict=False):
    """Replace the process-wide default generator."""
    global _generator
    with _generator_lock:
        _generator = Id57Generator(entropy=entropy, clock=clock, strict=strict)
    return _generator


def get_generator():
    global _generator
    if _generator is None:
        with _generator_lock:
            if _generator is None:
                _generator = Id57Generator()
    return _generator


def generate(timestamp=None, payload=None, strict=None):
    """Generate a 33-character time-sortable identifier."""
    return get_generator().generate(timestamp, payload, strict)
