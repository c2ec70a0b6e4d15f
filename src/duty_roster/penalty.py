from __future__ import annotations

from typing import Hashable, Iterable, Sequence, TypeVar

from duty_roster.people import Named, Person

K = TypeVar("K", bound=Hashable)


def target_spacing(n_people: int, max_spacing: int = 4) -> int:
    """Default spacing: one assignment every min(len(people), max_spacing) slots."""
    return max(1, min(int(n_people), int(max_spacing)))


def indexed_samples(xs: Iterable[K]) -> dict[K, list[int]]:
    """Group positions by value: ["a", "b", "a"] -> {"a": [0, 2], "b": [1]}."""
    out: dict[K, list[int]] = {}
    for idx, val in enumerate(xs):
        out.setdefault(val, []).append(idx)
    return out


def gap_penalty(indices: Sequence[int], target: int) -> int:
    """
    Sum of (target - gap)**2 over consecutive gaps shorter than target.
    `indices` must be sorted ascending.
    """
    total = 0
    for prev, cur in zip(indices, indices[1:]):
        gap = cur - prev
        if gap < target:
            total += (target - gap) ** 2
    return total


def penalty_by_person(roster: Sequence[Person], target: int) -> dict[Named, int]:
    """Per-person penalty; the UNFILLED sentinel is left out."""
    return {
        person: gap_penalty(idxs, target)
        for person, idxs in indexed_samples(roster).items()
        if isinstance(person, Named)
    }


def cost(roster: Sequence[Person], target: int) -> int:
    """Total clustering penalty of a roster."""
    if target < 1:
        raise ValueError("target spacing must be >= 1.")
    return sum(penalty_by_person(roster, target).values())
