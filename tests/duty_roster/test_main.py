from __future__ import annotations

import pytest

from duty_roster.config import Config
from duty_roster.input_data import InputData
from duty_roster.main import run_solver
from duty_roster.people import UNFILLED


def test_run_solver_stochastic_without_reporting(weekly_data, capsys) -> None:
    res = run_solver(
        weekly_data,
        Config(MAX_ITERATIONS=1_000, SEED=9),
        method="stochastic",
        enable_reporting=False,
    )
    assert res.method == "stochastic"
    assert len(res.roster) == len(weekly_data.slots)
    assert "Stopped after" in capsys.readouterr().out


def test_run_solver_flow_scenario_c() -> None:
    data = InputData(people=["P1", "P2"], slots=["W1"], unavailability={"W1": ["P1", "P2"]})
    res = run_solver(data, Config(), method="flow", enable_reporting=False)
    assert res.status_name == "INFEASIBLE"
    assert res.infeasible_slots == ["W1"]
    assert res.roster == (UNFILLED,)


def test_run_solver_validates_config_and_method(weekly_data) -> None:
    with pytest.raises(ValueError):
        run_solver(weekly_data, Config(MAX_ITERATIONS=-5), enable_reporting=False)
    with pytest.raises(ValueError):
        run_solver(weekly_data, Config(), method="annealing", enable_reporting=False)  # type: ignore[arg-type]


def test_run_solver_calls_reporter_hooks(weekly_data) -> None:
    calls = []

    class FakeReporter:
        def pre_solve(self, model, *, method):
            calls.append(("pre", method))

        def post_solve(self, res, data):
            calls.append(("post", res.method))

    run_solver(weekly_data, Config(), method="flow", reporter=FakeReporter())  # type: ignore[arg-type]
    assert calls == [("pre", "flow"), ("post", "flow")]


@pytest.mark.parametrize("method", ["stochastic", "flow"])
def test_run_solver_prepares_the_next_round(weekly_data, method, capsys) -> None:
    res = run_solver(
        weekly_data,
        Config(MAX_ITERATIONS=500, SEED=1, SLOT_STEP_DAYS=14),
        method=method,
        enable_reporting=False,
    )
    assert res.next_slots == [
        "2017-05-22",
        "2017-06-05",
        "2017-06-19",
        "2017-07-03",
        "2017-07-17",
        "2017-07-31",
    ]
    assert sorted(p.name for p in res.next_stack) == ["Craig", "Rick", "Tom"]
    last = next(p for p in reversed(res.roster) if p is not UNFILLED)
    assert res.next_stack[-1] == last
