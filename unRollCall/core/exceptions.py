"""Error types raised by the roll-call pipeline."""


class ParseError(ValueError):
    """A field that must hold a number could not be parsed."""

    def __init__(self, field: str, value, message: str = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Cannot parse field '{field}' value {value!r} as a number")


class FetchError(RuntimeError):
    """A source file could not be downloaded."""
