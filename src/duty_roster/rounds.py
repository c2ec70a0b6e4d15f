from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Sequence

import pandas as pd

from duty_roster.people import Named, Person, Slot, as_people


def weekly_slots(
    start: date | datetime | str, count: int, step_days: int = 7
) -> list[str]:
    """ISO date labels for `count` slots, `step_days` apart, starting at `start`."""
    if count < 0:
        raise ValueError("count must be >= 0.")
    if step_days < 1:
        raise ValueError("step_days must be >= 1.")
    dates = pd.date_range(pd.Timestamp(start).normalize(), periods=count, freq=f"{step_days}D")
    return [d.date().isoformat() for d in dates]


def next_slots(slots: Sequence[Slot], count: int, step_days: int = 7) -> list[str]:
    """The `count` slot labels following the last (ISO-date) slot of a round."""
    if not slots:
        raise ValueError("slots must contain at least one slot to continue from.")
    try:
        if not isinstance(slots[-1], (str, date)):
            raise TypeError(type(slots[-1]).__name__)
        last = pd.Timestamp(slots[-1])
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Cannot continue from slot {slots[-1]!r}; expected an ISO date label."
        ) from exc
    return weekly_slots(last + pd.Timedelta(days=step_days), count, step_days)


def next_stack(people: Iterable[Any], roster: Sequence[Person]) -> list[Named]:
    """
    People ordered for the next round: never-assigned first (input order), then
    by how long ago they were last on the roster. UNFILLED is ignored.
    """
    people_t = as_people(people)
    last_seen: dict[Named, int] = {}
    for idx, person in enumerate(roster):
        if isinstance(person, Named):
            last_seen[person] = idx
    position = {p: i for i, p in enumerate(people_t)}
    return sorted(people_t, key=lambda p: (last_seen.get(p, -1), position[p]))
