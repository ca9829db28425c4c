"""Base exception for value object failures.

Value objects validate at construction time and raise instead of returning
partially-valid instances. Every failure is a ``ValueError`` subclass, so
callers (and pydantic validators) that already handle ``ValueError`` keep
working.
"""


class ValueObjectError(ValueError):
    """Base class for all value object validation and arithmetic errors."""
