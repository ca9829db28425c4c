"""Canonical string parse errors."""

from valobs.domain.errors.value_object_error import ValueObjectError


class ParseError(ValueObjectError):
    """Raised when text is not a canonical representation of a value.

    Attributes:
        text: The offending input.
        expected: Human-readable description of the expected pattern.
    """

    def __init__(self, text: object, expected: str) -> None:
        super().__init__(f"Cannot parse {text!r}: expected {expected}")
        self.text = text
        self.expected = expected
