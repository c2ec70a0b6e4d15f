# duty_roster/model.py
from __future__ import annotations

from duty_roster.config import Config
from duty_roster.extract import extract_roster, person_totals, roster_frame
from duty_roster.flow_solver import solve_min_cost_flow
from duty_roster.input_data import InputData
from duty_roster.network import FlowNetwork, build_network
from duty_roster.penalty import cost
from duty_roster.people import UNFILLED, Person
from duty_roster.precheck import precheck_availability
from duty_roster.result_types import FlowResult, OptimizeResult, SolveResult
from duty_roster.rounds import next_slots, next_stack
from duty_roster.stochastic import ProgressCallback, optimize


class RosterModel:
    """
    Thin orchestrator around:
      - precheck_availability()
      - optimize()             -> stochastic hill-climber
      - build_network()        -> flow network for the current input
      - solve_min_cost_flow()  -> OR-Tools min-cost max-flow
      - extraction helpers     -> pandas DataFrames + summary stats
    """

    def __init__(self, cfg: Config, data: InputData):
        self.cfg = cfg
        self.data = data
        self.target = cfg.target_spacing(len(data.people))
        self._network: FlowNetwork | None = None  # populated by build()

    # ---------- Precheck ----------
    def precheck(self, verbose: bool = True):
        return precheck_availability(self.data, verbose=verbose)

    # ---------- Stochastic ----------
    def run_optimizer(self, progress_cb: ProgressCallback | None = None) -> OptimizeResult:
        return optimize(
            self.data.people,
            self.data.unavailability,
            self.data.slots,
            self.cfg.MAX_ITERATIONS,
            self.data.previous_roster,
            target=self.target,
            seed=self.cfg.SEED,
            progress_cb=progress_cb,
        )

    def optimize(self, progress_cb: ProgressCallback | None = None) -> SolveResult:
        """
        Run the stochastic optimizer and package the roster as a SolveResult.

        The full roster (previous rounds + new slots) is scored; the roster
        frame covers the new slots only.
        """
        res = self.run_optimizer(progress_cb)
        offset = len(self.data.previous_roster)
        return SolveResult(
            method="stochastic",
            status_name="OPTIMAL" if res.converged else "FEASIBLE",
            objective_value=float(res.cost),
            roster=res.roster,
            df_roster=roster_frame(self.data.slots, res.roster[offset:]),
            df_people=person_totals(self.data.people, res.roster, self.target),
            progress_history=[(it, float(c)) for it, c in res.history],
            next_stack=next_stack(self.data.people, res.roster),
            next_slots=self.next_round_slots(),
        )

    # ---------- Flow ----------
    def build(self) -> FlowNetwork:
        self._network = build_network(
            self.data.people,
            self.data.slots,
            self.data.unavailability,
            self.target,
            tiers=self.cfg.TIERS_PER_PERIOD,
            source_capacity=self.cfg.SOURCE_CAPACITY,
        )
        return self._network

    def solve_flow(self) -> FlowResult:
        """
        Solve the flow network. A flow deficit is returned as status INFEASIBLE
        with every slot that received no flow in `infeasible_slots`; the
        partial assignments are kept for inspection.
        """
        if self._network is None:
            raise RuntimeError("Call build() before solve_flow().")
        sol = solve_min_cost_flow(self._network)
        assignments: list[tuple] = list(
            extract_roster(sol.active, self.data.slots, self._network)
        )
        assigned = {slot for slot, _ in assignments}
        missing = [s for s in self.data.slots if s not in assigned]
        if len(missing) != sol.deficit:
            raise RuntimeError(
                f"[flow] {len(missing)} slot(s) without flow but a deficit of "
                f"{sol.deficit} units; extraction and solver disagree."
            )
        return FlowResult(
            status_name="INFEASIBLE" if missing else "OPTIMAL",
            assignments=assignments,
            flow_cost=sol.optimal_cost,
            max_flow=sol.max_flow,
            infeasible_slots=missing,
        )

    def solve(self) -> SolveResult:
        """
        Solve the flow network and package it like optimize(): the new slots
        are appended to previous_roster and the full roster is scored, so both
        methods report comparable objectives on the same InputData.
        """
        res = self.solve_flow()
        by_slot = dict(res.assignments)
        new: tuple[Person, ...] = tuple(
            by_slot.get(slot, UNFILLED) for slot in self.data.slots
        )
        roster = self.data.previous_roster + new
        return SolveResult(
            method="flow",
            status_name=res.status_name,
            objective_value=float(cost(roster, self.target)),
            roster=roster,
            df_roster=roster_frame(self.data.slots, new),
            df_people=person_totals(self.data.people, roster, self.target),
            infeasible_slots=list(res.infeasible_slots),
            flow_cost=res.flow_cost,
            next_stack=next_stack(self.data.people, roster),
            next_slots=self.next_round_slots(),
        )

    # ---------- Next round ----------
    def next_round_slots(self) -> list[str] | None:
        """
        Labels for a following round of the same length, SLOT_STEP_DAYS apart.
        None when the slots are not ISO dates.
        """
        try:
            return next_slots(
                self.data.slots, len(self.data.slots), self.cfg.SLOT_STEP_DAYS
            )
        except ValueError:
            return None
