"""Error taxonomy for the base57 codec and identifier generator."""


class Id57Error(Exception):
    """Base error carrying a context dict and optional cause."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.context = context or {}
        self.cause = cause


class NegativeValueError(Id57Error, ValueError):
    """Integer below zero where non-negativity is required."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        context["value"] = value
        super().__init__(message, context=context, **kwargs)
        self.value = value


class EmptyInputError(Id57Error, ValueError):
    """decode() called on a zero-length string."""


class InvalidCharacterError(Id57Error, ValueError):
    """Character outside the alphabet, including any non-ASCII character."""

    def __init__(self, char, position, **kwargs):
        context = kwargs.pop("context", {})
        context.update(char=char, position=position)
        super().__init__(f"Invalid base57 character: {char!r} at position {position}",
                         context=context, **kwargs)
        self.char = char
        self.position = position


class ValueOverflowError(Id57Error, ValueError):
    """Value does not fit in 128 bits."""


class NotConvertibleError(Id57Error, TypeError):
    """Value cannot be converted to a non-negative integer."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        context["type"] = type(value).__name__
        super().__init__(message, context=context, **kwargs)


class ClockError(Id57Error, RuntimeError):
    """System clock unavailable or before the Unix epoch."""


class WidthExceededError(Id57Error, ValueError):
    """Strict mode: encoding is wider than the requested width."""

    def __init__(self, width, length, **kwargs):
        context = kwargs.pop("context", {})
        context.update(width=width, length=length)
        super().__init__(f"Encoded value needs {length} digits, exceeds width {width}",
                         context=context, **kwargs)
        self.width = width
        self.length = length


class InvalidLengthError(Id57Error, ValueError):
    """Identifier is not exactly IDENTIFIER_WIDTH characters long."""

    def __init__(self, expected, actual, **kwargs):
        context = kwargs.pop("context", {})
        context.update(expected=expected, actual=actual)
        super().__init__(f"Identifier must be {expected} characters, got {actual}",
                         context=context, **kwargs)
        self.expected = expected
        self.actual = actual
