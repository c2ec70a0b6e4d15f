# duty_roster/result_types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from duty_roster.people import Named, Person, Slot


@dataclass
class OptimizeResult:
    """Outcome of one stochastic hill-climbing run."""

    roster: tuple[Person, ...]
    cost: int
    iterations: int
    accepted: int
    history: list[tuple[int, int]] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.cost == 0


@dataclass
class FlowResult:
    """Outcome of one min-cost-flow solve."""

    status_name: str
    assignments: list[tuple[Slot, Person]]
    flow_cost: int
    max_flow: int
    infeasible_slots: list[Slot] = field(default_factory=list)

    @property
    def feasible(self) -> bool:
        return not self.infeasible_slots


@dataclass
class SolveResult:
    """Structured output of a solve run, whichever method produced it."""

    method: str
    status_name: str
    objective_value: Optional[float]
    roster: tuple[Person, ...]
    df_roster: pd.DataFrame
    df_people: pd.DataFrame
    infeasible_slots: list[Slot] = field(default_factory=list)
    progress_history: list[tuple[int, float]] | None = None
    flow_cost: Optional[int] = None
    # next round: rotation order and slot labels (None for non-date slots)
    next_stack: list[Named] = field(default_factory=list)
    next_slots: Optional[list[str]] = None
