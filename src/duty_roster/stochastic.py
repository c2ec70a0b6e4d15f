# duty_roster/stochastic.py
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Protocol, Sequence

import numpy as np

from duty_roster.input_data import (
    normalize_previous_roster,
    normalize_unavailability,
    validate_inputs,
)
from duty_roster.penalty import cost, target_spacing
from duty_roster.people import (
    Named,
    Person,
    Slot,
    Unavailability,
    as_people,
    choices,
)
from duty_roster.result_types import OptimizeResult

SlotChoices = Callable[[int], Sequence[Person]]


class ProgressCallback(Protocol):
    def on_solution(self, iteration: int, cost: float) -> None: ...
    def on_finish(self, iteration: int, cost: float) -> None: ...


def _rng(rng: Optional[np.random.Generator], seed: Optional[int]) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(seed) if seed is not None else np.random.default_rng()


def _pick(options: Sequence[Person], rng: np.random.Generator) -> Person:
    return options[int(rng.integers(len(options)))]


def random_solution(
    people: Sequence[Named],
    unavailability: Unavailability,
    slots: Sequence[Slot],
    rng: np.random.Generator,
) -> tuple[Person, ...]:
    """One uniform pick from the feasible choices of each slot, in slot order."""
    return tuple(_pick(choices(people, unavailability, slot), rng) for slot in slots)


def propose_mutation(
    roster: Sequence[Person],
    slot_choices: SlotChoices,
    rng: np.random.Generator,
    offset: int = 0,
    size: Optional[int] = None,
) -> tuple[Person, ...]:
    """
    Re-draw the person of one uniformly chosen index in [offset, offset + size).

    Returns a new roster; `roster` itself is left untouched. The old person is
    a legal draw, so the result may equal the input.
    """
    if size is None:
        size = len(roster) - offset
    if size <= 0 or offset < 0 or offset + size > len(roster):
        raise ValueError(
            f"Mutation range [{offset}, {offset + size}) outside roster of length {len(roster)}."
        )
    idx = offset + int(rng.integers(size))
    out = list(roster)
    out[idx] = _pick(slot_choices(idx), rng)
    return tuple(out)


def optimize(
    people: Iterable[Any],
    unavailability: Mapping[Slot, Iterable[Any]] | None,
    slots: Sequence[Slot],
    max_iterations: int = 10_000,
    previous_roster: Iterable[Any] = (),
    *,
    target: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    progress_cb: Optional[ProgressCallback] = None,
) -> OptimizeResult:
    """
    Strict stochastic hill-climber over the new `slots`.

    The returned roster is `previous_roster` followed by one person per slot.
    Entries of `previous_roster` are frozen: they count towards the cost but
    are never mutated. A move is accepted only if it strictly lowers the cost;
    the search stops at cost 0 or after `max_iterations` proposals.
    """
    people_t = as_people(people)
    unav = normalize_unavailability(unavailability)
    slots_t = tuple(slots)
    validate_inputs(people_t, slots_t, unav)
    prev = normalize_previous_roster(previous_roster, people_t)
    if max_iterations < 0:
        raise ValueError("max_iterations must be >= 0.")
    if target is None:
        target = target_spacing(len(people_t))
    if target < 1:
        raise ValueError("target spacing must be >= 1.")

    gen = _rng(rng, seed)
    offset, size = len(prev), len(slots_t)
    options = [choices(people_t, unav, slot) for slot in slots_t]

    def slot_choices(idx: int) -> Sequence[Person]:
        return options[idx - offset]

    sol = prev + random_solution(people_t, unav, slots_t, gen)
    sol_cost = cost(sol, target)
    history = [(0, sol_cost)]
    accepted = 0
    if progress_cb is not None:
        progress_cb.on_solution(0, sol_cost)

    it = 0
    while sol_cost != 0 and it < max_iterations:
        nxt = propose_mutation(sol, slot_choices, gen, offset, size)
        it += 1
        nxt_cost = cost(nxt, target)
        if nxt_cost < sol_cost:
            sol, sol_cost = nxt, nxt_cost
            accepted += 1
            history.append((it, sol_cost))
            if progress_cb is not None:
                progress_cb.on_solution(it, sol_cost)

    if progress_cb is not None:
        progress_cb.on_finish(it, sol_cost)

    return OptimizeResult(
        roster=sol,
        cost=sol_cost,
        iterations=it,
        accepted=accepted,
        history=history,
    )
