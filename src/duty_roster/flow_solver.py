# duty_roster/flow_solver.py
from __future__ import annotations

from dataclasses import dataclass

from ortools.graph.python import min_cost_flow

from duty_roster.network import Arc, FlowNetwork


@dataclass(frozen=True)
class FlowSolution:
    status_name: str
    max_flow: int
    optimal_cost: int
    active: tuple[tuple[Arc, int], ...]  # (arc, flow) with flow > 0
    demand: int = 0

    @property
    def deficit(self) -> int:
        """Units of demand (slots) the maximum flow could not reach."""
        return self.demand - self.max_flow


def setup_solver(network: FlowNetwork) -> tuple[min_cost_flow.SimpleMinCostFlow, list[int]]:
    """Load the network into OR-Tools; return the solver and per-arc ids."""
    smcf = min_cost_flow.SimpleMinCostFlow()
    index = network.node_index()
    arc_ids = [
        smcf.add_arc_with_capacity_and_unit_cost(
            index[arc.tail], index[arc.head], arc.capacity, arc.cost
        )
        for arc in network.arcs
    ]
    demand = len(network.slots)
    smcf.set_node_supply(index[network.source], demand)
    smcf.set_node_supply(index[network.sink], -demand)
    return smcf, arc_ids


def _status_name(status) -> str:
    return getattr(status, "name", str(status))


def solve_min_cost_flow(network: FlowNetwork) -> FlowSolution:
    """
    Minimum-cost maximum flow from network.source to network.sink.

    The flow value may fall short of len(slots) when some slots cannot be
    reached; `deficit` on the result counts them and the caller decides what
    a deficit means.
    """
    smcf, arc_ids = setup_solver(network)
    status = smcf.solve_max_flow_with_min_cost()
    if status != smcf.OPTIMAL:
        raise RuntimeError(
            f"[flow] min-cost flow solver returned {_status_name(status)}; "
            "expected OPTIMAL on a finite graph with integral capacities."
        )

    active = tuple(
        (arc, int(smcf.flow(arc_id)))
        for arc, arc_id in zip(network.arcs, arc_ids)
        if smcf.flow(arc_id) > 0
    )
    return FlowSolution(
        status_name=_status_name(status),
        max_flow=int(smcf.maximum_flow()),
        optimal_cost=int(smcf.optimal_cost()),
        active=active,
        demand=len(network.slots),
    )
