from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Mapping, Sequence, TypeAlias, Union


@dataclass(frozen=True, slots=True)
class Named:
    """A real person who can be put on the roster."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Unfilled:
    """
    Sentinel for a slot nobody on the list can take ("whoever is here").
    Carries no penalty and never counts towards gaps.
    """

    def __str__(self) -> str:
        return "Whoever is here"


UNFILLED = Unfilled()

Person: TypeAlias = Union[Named, Unfilled]
Slot: TypeAlias = Hashable
Unavailability: TypeAlias = Mapping[Slot, frozenset[Named]]


def as_person(value: Any) -> Person:
    """Wrap a plain name into `Named`; pass through existing persons."""
    if isinstance(value, (Named, Unfilled)):
        return value
    if isinstance(value, str):
        if not value:
            raise ValueError("Person names must be non-empty strings.")
        return Named(value)
    raise TypeError(f"Cannot interpret {value!r} as a person; expected str or Named.")


def as_people(values: Iterable[Any]) -> tuple[Named, ...]:
    out: list[Named] = []
    for val in values:
        person = as_person(val)
        if not isinstance(person, Named):
            raise ValueError("The people list cannot contain the UNFILLED sentinel.")
        out.append(person)
    return tuple(out)


def is_available(
    person: Person, slot: Slot, unavailability: Unavailability
) -> bool:
    if isinstance(person, Unfilled):
        return True
    return person not in unavailability.get(slot, frozenset())


def choices(
    people: Sequence[Named], unavailability: Unavailability, slot: Slot
) -> tuple[Person, ...]:
    """
    Feasible persons for `slot`, in input order.

    Falls back to (UNFILLED,) when everyone is unavailable so a slot always
    has at least one option.
    """
    invalid = unavailability.get(slot)
    if invalid is None:
        return tuple(people)
    remaining = tuple(p for p in people if p not in invalid)
    if not remaining:
        return (UNFILLED,)
    return remaining
