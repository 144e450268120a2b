"""FieldState – Inherited, Overridden and NotApplicable variants.

A per-type phone-number description either inherits a field from its parent
(general) description, overrides it with its own value, or declares the
field not applicable (the ``"NA"`` sentinel of the compiled record).
"""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

NOT_APPLICABLE = "NA"


class Inherited(Generic[T]):
    """Field takes its parent's value."""

    __slots__ = ()

    def is_inherited(self) -> bool:
        return True

    def is_overridden(self) -> bool:
        return False

    def is_not_applicable(self) -> bool:
        return False

    def resolve(self, parent: T) -> T:
        return parent

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Inherited)

    def __hash__(self) -> int:
        return hash(Inherited)

    def __repr__(self) -> str:
        return "Inherited"


class Overridden(Generic[T]):
    """Field carries its own value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_inherited(self) -> bool:
        return False

    def is_overridden(self) -> bool:
        return True

    def is_not_applicable(self) -> bool:
        return False

    def resolve(self, parent: T) -> T:  # noqa: ARG002
        return self._value

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Overridden) and other._value == self._value

    def __hash__(self) -> int:
        return hash((Overridden, self._value))

    def __repr__(self) -> str:
        return f"Overridden({self._value!r})"


class NotApplicable(Generic[T]):
    """Field does not apply to this number type in this territory."""

    __slots__ = ()

    def is_inherited(self) -> bool:
        return False

    def is_overridden(self) -> bool:
        return False

    def is_not_applicable(self) -> bool:
        return True

    def resolve(self, parent: T) -> str:  # noqa: ARG002
        return NOT_APPLICABLE

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NotApplicable)

    def __hash__(self) -> int:
        return hash(NotApplicable)

    def __repr__(self) -> str:
        return "NotApplicable"


type FieldState[T] = Inherited[T] | Overridden[T] | NotApplicable[T]

__all__ = ["NOT_APPLICABLE", "FieldState", "Inherited", "NotApplicable", "Overridden"]
