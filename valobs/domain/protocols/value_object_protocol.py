"""Value object contract.

Every value type in the catalog satisfies the same behavioral contract
without sharing a base class (PEP 544 structural subtyping):

- Structural equality: two instances are equal iff all attributes are equal.
- Hash consistent with equality, so values work as mapping keys.
- Immutability: attribute assignment raises AttributeError; every
  transformation returns a new instance.
- Canonical text form: ``to_canonical_string()`` and ``parse()`` round-trip.

Ordered value objects additionally support the rich comparison operators.
Temporal values order chronologically; Money orders only within a single
currency.

Usage:
    from valobs.domain.protocols import ValueObjectProtocol

    def render(value: ValueObjectProtocol) -> str:
        return value.to_canonical_string()
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class ValueObjectProtocol(Protocol):
    """Equality, hashing and canonical round-trip contract."""

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...

    def to_canonical_string(self) -> str:
        """Return the single authoritative text form of this value."""
        ...

    @classmethod
    def parse(cls, text: str) -> Self:
        """Build a value from its canonical text form.

        Raises:
            ParseError: If text is not a canonical representation.
        """
        ...


@runtime_checkable
class OrderedValueObjectProtocol(ValueObjectProtocol, Protocol):
    """Value object with a total ordering."""

    def __lt__(self, other: Self) -> bool: ...

    def __le__(self, other: Self) -> bool: ...

    def __gt__(self, other: Self) -> bool: ...

    def __ge__(self, other: Self) -> bool: ...
