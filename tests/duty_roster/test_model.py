from __future__ import annotations

import pytest

from duty_roster.config import Config
from duty_roster.input_data import InputData
from duty_roster.model import RosterModel
from duty_roster.penalty import cost
from duty_roster.people import UNFILLED, Named


def test_solve_flow_requires_build() -> None:
    model = RosterModel(Config(), InputData(people=["A"], slots=["w1"]))
    with pytest.raises(RuntimeError):
        model.solve_flow()


def test_flow_deficit_is_reported_as_infeasible() -> None:
    data = InputData(
        people=["P1", "P2"], slots=["W1", "W2"], unavailability={"W1": ["P1", "P2"]}
    )
    model = RosterModel(Config(), data)
    model.build()
    flow = model.solve_flow()
    assert flow.status_name == "INFEASIBLE"
    assert not flow.feasible
    assert flow.infeasible_slots == ["W1"]
    assert flow.max_flow == 1
    assert [s for s, _ in flow.assignments] == ["W2"]

    res = model.solve()
    assert res.method == "flow"
    assert res.status_name == "INFEASIBLE"
    assert res.roster[0] is UNFILLED
    assert res.infeasible_slots == ["W1"]
    assert bool(res.df_roster.loc[0, "unfilled"]) is True


def test_flow_solution_is_scored_with_the_gap_penalty(weekly_data) -> None:
    model = RosterModel(Config(), weekly_data)
    model.build()
    res = model.solve()
    assert res.status_name == "OPTIMAL"
    assert res.flow_cost is not None and res.flow_cost >= 0
    assert res.objective_value is not None and res.objective_value >= 0
    assert list(res.df_roster["slot"]) == list(weekly_data.slots)
    assert res.roster[2] == Named("Tom")


def test_optimize_wraps_the_stochastic_result(weekly_data) -> None:
    model = RosterModel(Config(MAX_ITERATIONS=2_000, SEED=5), weekly_data)
    res = model.optimize()
    assert res.method == "stochastic"
    assert res.status_name in ("OPTIMAL", "FEASIBLE")
    assert (res.status_name == "OPTIMAL") == (res.objective_value == 0)
    assert len(res.df_roster) == len(weekly_data.slots)
    assert set(res.df_people["person"]) == {"Rick", "Tom", "Craig"}
    assert res.progress_history and res.progress_history[0][0] == 0


def test_optimize_keeps_previous_rounds_out_of_the_frame() -> None:
    data = InputData(
        people=["A", "B", "C"],
        slots=["w3", "w4"],
        previous_roster=["A", "B", "C"],
    )
    res = RosterModel(Config(MAX_ITERATIONS=500, SEED=2), data).optimize()
    assert len(res.roster) == 5
    assert res.roster[:3] == (Named("A"), Named("B"), Named("C"))
    assert list(res.df_roster["slot"]) == ["w3", "w4"]
    assert int(res.df_people["assignments"].sum()) == 5


def test_explicit_target_spacing_reaches_both_solvers() -> None:
    data = InputData(people=["A", "B", "C", "D"], slots=[f"w{i}" for i in range(4)])
    model = RosterModel(Config(TARGET_SPACING=2), data)
    assert model.target == 2
    net = model.build()
    assert sum(1 for n in net.nodes if n.kind == "period") == 4 * 2


def test_flow_scores_previous_rounds_like_the_optimizer() -> None:
    data = InputData(
        people=["A", "B", "C"],
        slots=["w1", "w2", "w3", "w4"],
        previous_roster=["A", "B"],
    )
    model = RosterModel(Config(), data)
    model.build()
    res = model.solve()
    assert len(res.roster) == 6
    assert res.roster[:2] == (Named("A"), Named("B"))
    assert res.objective_value == float(cost(res.roster, model.target))
    assert list(res.df_roster["slot"]) == ["w1", "w2", "w3", "w4"]
    assert int(res.df_people["assignments"].sum()) == 6


def test_next_round_slots_need_date_labels() -> None:
    data = InputData(people=["A", "B"], slots=["w1", "w2"])
    assert RosterModel(Config(), data).next_round_slots() is None
