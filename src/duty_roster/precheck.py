# duty_roster/precheck.py
from __future__ import annotations

import sys
from typing import Dict, List, Sequence, Tuple

import numpy as np

from duty_roster.input_data import InputData
from duty_roster.people import Named, Slot, Unavailability, is_available


def availability_matrix(
    people: Sequence[Named], slots: Sequence[Slot], unavailability: Unavailability
) -> np.ndarray:
    """Boolean (len(people), len(slots)) mask; True where the person may take the slot."""
    mask = np.ones((len(people), len(slots)), dtype=bool)
    for j, slot in enumerate(slots):
        if slot not in unavailability:
            continue
        for i, person in enumerate(people):
            mask[i, j] = is_available(person, slot, unavailability)
    return mask


def precheck_availability(
    data: InputData,
    *,
    verbose: bool = True,
    examples: int = 3,
    stream=None,
) -> Tuple[
    List[Slot],  # unfillable slots
    List[Slot],  # single-choice slots
    Dict[str, int],  # available slots per person
]:
    """
    Returns:
      unfillable: slots every person is unavailable for (the stochastic path
                  fills them with UNFILLED, the flow path reports them)
      single:     slots exactly one person can take
      per_person: {name: number of slots the person is available for}
    If `verbose` is True, prints a ✅/❌ summary to `stream`.
    """
    stream = stream or sys.stdout
    people, slots = data.people, data.slots
    mask = availability_matrix(people, slots, data.unavailability)
    per_slot = mask.sum(axis=0) if mask.size else np.zeros(len(slots), dtype=int)

    unfillable = [s for s, n in zip(slots, per_slot) if n == 0]
    single = [s for s, n in zip(slots, per_slot) if n == 1]
    per_person = {p.name: int(n) for p, n in zip(people, mask.sum(axis=1))}

    if verbose:
        print("\nPre-check:\n", file=stream)
        _print_slot_line("unfillable", unfillable, examples, stream, bad=True)
        _print_slot_line("single-choice", single, examples, stream, bad=False)
        idle = [name for name, n in per_person.items() if n == 0]
        if idle:
            print(
                f"❌ {len(idle)} person(s) unavailable for every slot: {', '.join(idle)}",
                file=stream,
            )
        else:
            print("✅ Every person is available for at least one slot.", file=stream)

    return unfillable, single, per_person


def _print_slot_line(
    label: str, found: Sequence[Slot], examples: int, stream, *, bad: bool
) -> None:
    if not found:
        print(f"✅ No {label} slots.", file=stream)
        return
    sample = ", ".join(str(s) for s in found[:examples])
    more = f", +{len(found) - examples} more" if len(found) > examples else ""
    mark = "❌" if bad else "ℹ️ "
    print(f"{mark} {len(found)} {label} slot(s) — e.g. {sample}{more}", file=stream)
