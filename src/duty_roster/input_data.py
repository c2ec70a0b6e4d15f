from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from duty_roster.people import (
    UNFILLED,
    Named,
    Person,
    Slot,
    Unavailability,
    as_people,
    as_person,
)


def normalize_unavailability(
    unavailability: Mapping[Slot, Iterable[Any]] | None,
) -> dict[Slot, frozenset[Named]]:
    out: dict[Slot, frozenset[Named]] = {}
    for slot, names in (unavailability or {}).items():
        if isinstance(names, str):
            raise TypeError(
                f"Unavailability for slot {slot!r} must be a collection of names, "
                "not a single string."
            )
        out[slot] = frozenset(as_people(names))
    return out


def validate_inputs(
    people: Sequence[Named],
    slots: Sequence[Slot],
    unavailability: Unavailability,
) -> None:
    """Fail fast on malformed people/slots/unavailability."""
    if not people:
        raise ValueError("people must contain at least one person.")
    if not slots:
        raise ValueError("slots must contain at least one slot.")
    if len(set(people)) != len(people):
        dupes = sorted({p.name for p in people if people.count(p) > 1})
        raise ValueError(f"Duplicate people: {dupes}")
    if len(set(slots)) != len(slots):
        dupes = [s for i, s in enumerate(slots) if s in slots[:i]]
        raise ValueError(f"Duplicate slots: {dupes}")
    known = set(slots)
    unknown = [s for s in unavailability if s not in known]
    if unknown:
        raise ValueError(
            f"Unavailability references slot(s) not in slots: {unknown}"
        )


def normalize_previous_roster(
    previous_roster: Iterable[Any], people: Sequence[Named]
) -> tuple[Person, ...]:
    known = set(people)
    out: list[Person] = []
    for i, val in enumerate(previous_roster):
        person = as_person(val)
        if person != UNFILLED and person not in known:
            raise ValueError(
                f"previous_roster[{i}]={person} is not one of the people "
                "(or the UNFILLED sentinel)."
            )
        out.append(person)
    return tuple(out)


@dataclass
class InputData:
    """
    People, chronological slots and per-slot unavailability for one roster run.

    Plain strings are accepted everywhere a person is expected and are wrapped
    into `Named`.
    """

    people: Sequence[Any]
    slots: Sequence[Slot]
    unavailability: Mapping[Slot, Iterable[Any]] = field(default_factory=dict)
    previous_roster: Sequence[Any] = ()

    def __post_init__(self) -> None:
        self.people = as_people(self.people)
        self.slots = tuple(self.slots)
        self.unavailability = normalize_unavailability(self.unavailability)
        validate_inputs(self.people, self.slots, self.unavailability)
        self.previous_roster = normalize_previous_roster(
            self.previous_roster, self.people
        )
