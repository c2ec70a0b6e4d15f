# duty_roster/network.py
from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterable, Mapping, Sequence

from duty_roster.input_data import normalize_unavailability, validate_inputs
from duty_roster.penalty import target_spacing
from duty_roster.people import Named, Slot, Unavailability, as_people, is_available

SOURCE, SINK, PERSON, PERIOD, TIER, SLOT = (
    "source",
    "sink",
    "person",
    "period",
    "tier",
    "slot",
)

TIER_LABELS = ("Once", "Twice", "Thrice", "Fourth")

DEFAULT_TIERS = 4
DEFAULT_SOURCE_CAPACITY = 9_999


@dataclass(frozen=True)
class Node:
    """
    A vertex of the roster flow network.

    key by kind:
      person -> (person,)
      period -> (person, period_idx)
      tier   -> (person, period_idx, c)
      slot   -> (slot,)
    """

    kind: str
    key: tuple[Any, ...] = ()

    def __str__(self) -> str:
        if self.kind == PERSON:
            return str(self.key[0])
        if self.kind == PERIOD:
            return f"{self.key[0]}-in-Period{self.key[1]}"
        if self.kind == TIER:
            person, period, c = self.key
            label = TIER_LABELS[c] if c < len(TIER_LABELS) else f"x{c + 1}"
            return f"{person}-{label}-in-Period{period}"
        if self.kind == SLOT:
            return str(self.key[0])
        return self.kind


SOURCE_NODE = Node(SOURCE)
SINK_NODE = Node(SINK)


def person_node(person: Named) -> Node:
    return Node(PERSON, (person,))


def period_node(person: Named, period: int) -> Node:
    return Node(PERIOD, (person, period))


def tier_node(person: Named, period: int, c: int) -> Node:
    return Node(TIER, (person, period, c))


def slot_node(slot: Slot) -> Node:
    return Node(SLOT, (slot,))


@dataclass(frozen=True)
class Arc:
    tail: Node
    head: Node
    cost: int
    capacity: int


@dataclass(frozen=True)
class FlowNetwork:
    """Immutable capacitated, costed digraph built for one solve."""

    nodes: tuple[Node, ...]
    arcs: tuple[Arc, ...]
    slots: tuple[Slot, ...]
    source: Node = field(default=SOURCE_NODE)
    sink: Node = field(default=SINK_NODE)

    @cached_property
    def _incoming(self) -> dict[Node, tuple[Node, ...]]:
        inc: dict[Node, list[Node]] = {}
        for arc in self.arcs:
            inc.setdefault(arc.head, []).append(arc.tail)
        return {k: tuple(v) for k, v in inc.items()}

    @cached_property
    def _index(self) -> dict[Node, int]:
        return {node: i for i, node in enumerate(self.nodes)}

    def sources(self, node: Node) -> tuple[Node, ...]:
        """Tails of every arc entering `node`."""
        return self._incoming.get(node, ())

    def node_index(self) -> dict[Node, int]:
        """Dense integer ids (0..len(nodes)-1) for external solvers."""
        return dict(self._index)


def partition_periods(slots: Sequence[Slot], target: int) -> list[tuple[Slot, ...]]:
    """Consecutive chunks of `target` slots; the last chunk may be shorter."""
    if target < 1:
        raise ValueError("target spacing must be >= 1.")
    return [tuple(slots[i : i + target]) for i in range(0, len(slots), target)]


def tier_arcs(
    person: Named, period: int, tiers: int = DEFAULT_TIERS
) -> list[Arc]:
    """
    person -> tier_c (0 cost, cap 1) -> period (cost c**2, cap 1) for c < tiers.
    The (c+1)-th use of a person inside one period costs c**2.
    """
    p_node = person_node(person)
    m_node = period_node(person, period)
    arcs: list[Arc] = []
    for c in range(tiers):
        t_node = tier_node(person, period, c)
        arcs.append(Arc(p_node, t_node, 0, 1))
        arcs.append(Arc(t_node, m_node, c * c, 1))
    return arcs


def period_arcs(
    person: Named,
    period: int,
    period_slots: Iterable[Slot],
    unavailability: Unavailability,
    tiers: int = DEFAULT_TIERS,
) -> list[Arc]:
    arcs = tier_arcs(person, period, tiers)
    m_node = period_node(person, period)
    for slot in period_slots:
        if is_available(person, slot, unavailability):
            arcs.append(Arc(m_node, slot_node(slot), 0, 1))
    return arcs


def build_network(
    people: Iterable[Any],
    slots: Sequence[Slot],
    unavailability: Mapping[Slot, Iterable[Any]] | None = None,
    target: int | None = None,
    *,
    tiers: int = DEFAULT_TIERS,
    source_capacity: int = DEFAULT_SOURCE_CAPACITY,
) -> FlowNetwork:
    """
    Build the roster network: source -> person -> tier -> person-in-period
    -> slot -> sink. Pushing len(slots) units of min-cost flow through it
    assigns one person per slot with quadratic per-period repetition cost.
    """
    people_t = as_people(people)
    unav = normalize_unavailability(unavailability)
    slots_t = tuple(slots)
    validate_inputs(people_t, slots_t, unav)
    if target is None:
        target = target_spacing(len(people_t))
    if tiers < 1 or source_capacity < 1:
        raise ValueError("tiers and source_capacity must be >= 1.")

    periods = partition_periods(slots_t, target)

    nodes: list[Node] = [SOURCE_NODE]
    nodes.extend(person_node(p) for p in people_t)
    arcs: list[Arc] = []
    for person in people_t:
        for k, period_slots in enumerate(periods):
            nodes.append(period_node(person, k))
            nodes.extend(tier_node(person, k, c) for c in range(tiers))
            arcs.extend(period_arcs(person, k, period_slots, unav, tiers))
    nodes.extend(slot_node(s) for s in slots_t)
    nodes.append(SINK_NODE)

    arcs.extend(Arc(SOURCE_NODE, person_node(p), 0, source_capacity) for p in people_t)
    arcs.extend(Arc(slot_node(s), SINK_NODE, 0, 1) for s in slots_t)

    return FlowNetwork(nodes=tuple(nodes), arcs=tuple(arcs), slots=slots_t)
