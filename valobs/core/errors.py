"""Error values for Result-typed validation.

These are data, not exceptions: they describe why an input was rejected so
callers can branch on ``code`` without try/except.

Error Hierarchy:
    DomainError (base - does NOT inherit from Exception)
    └── ValidationError (input rejected by a value object)
"""

from dataclasses import dataclass

from valobs.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error value (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field or value type that failed validation.
    """

    field: str | None = None
