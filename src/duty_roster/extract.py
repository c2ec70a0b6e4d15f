# duty_roster/extract.py
from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from duty_roster.network import PERSON, SLOT, Arc, FlowNetwork, Node
from duty_roster.penalty import gap_penalty, indexed_samples
from duty_roster.people import Named, Person, Slot, Unfilled


def _owner(network: FlowNetwork, period: Node) -> Named:
    """Walk period -> tier -> person (two hops back)."""
    node = period
    for _ in range(2):
        parents = network.sources(node)
        if not parents:
            raise RuntimeError(f"[extract] {node} has no incoming arcs.")
        node = parents[0]
    if node.kind != PERSON:
        raise RuntimeError(f"[extract] expected a person two hops above {period}, got {node}.")
    return node.key[0]


def extract_roster(
    active_arcs: Iterable[Arc | tuple[Arc, int]],
    slots: Sequence[Slot],
    network: FlowNetwork,
) -> list[tuple[Slot, Named]]:
    """
    Map active arcs into (slot, person) pairs, sorted by input slot order.
    Slots that received no flow are simply absent.
    """
    order = {s: i for i, s in enumerate(slots)}
    found: dict[Slot, Named] = {}
    for item in active_arcs:
        arc = item[0] if isinstance(item, tuple) else item
        if arc.head.kind != SLOT or arc.head.key[0] not in order:
            continue
        slot = arc.head.key[0]
        if slot in found:
            raise RuntimeError(f"[extract] slot {slot!r} received flow twice.")
        found[slot] = _owner(network, arc.tail)
    return sorted(found.items(), key=lambda kv: order[kv[0]])


def roster_frame(slots: Sequence[Slot], roster: Sequence[Person]) -> pd.DataFrame:
    """Return the slot-level roster dataframe."""
    if len(slots) != len(roster):
        raise ValueError(
            f"Roster has {len(roster)} entries for {len(slots)} slots."
        )
    rows = [
        {
            "slot_index": i,
            "slot": slot,
            "person": str(person),
            "unfilled": isinstance(person, Unfilled),
        }
        for i, (slot, person) in enumerate(zip(slots, roster))
    ]
    if not rows:
        return pd.DataFrame(columns=["slot_index", "slot", "person", "unfilled"])
    return pd.DataFrame(rows)


def person_totals(
    people: Sequence[Named], roster: Sequence[Person], target: int
) -> pd.DataFrame:
    """Return per-person totals: assignment count, tightest gap and penalty."""
    samples = indexed_samples(roster)
    rows: list[dict] = []
    for person in people:
        idxs = samples.get(person, [])
        gaps = [b - a for a, b in zip(idxs, idxs[1:])]
        rows.append(
            {
                "person": person.name,
                "assignments": len(idxs),
                "min_gap": min(gaps) if gaps else pd.NA,
                "penalty": gap_penalty(idxs, target),
            }
        )
    if not rows:
        return pd.DataFrame(columns=["person", "assignments", "min_gap", "penalty"])
    return (
        pd.DataFrame(rows)
        .sort_values(["penalty", "person"], ascending=[False, True])
        .reset_index(drop=True)
    )
