from __future__ import annotations

from duty_roster.extract import extract_roster
from duty_roster.flow_solver import solve_min_cost_flow
from duty_roster.network import build_network
from duty_roster.people import Named

P1, P2 = Named("P1"), Named("P2")


def _solve(people, slots, unav=None, target=None):
    net = build_network(people, slots, unav or {}, target)
    sol = solve_min_cost_flow(net)
    return net, sol, extract_roster(sol.active, slots, net)


def test_scenario_a_flow_is_free_and_covers_every_slot() -> None:
    slots = ["W1", "W2", "W3", "W4"]
    _, sol, roster = _solve(["P1", "P2"], slots, target=2)
    assert sol.status_name == "OPTIMAL"
    assert sol.max_flow == 4
    assert sol.optimal_cost == 0
    assert [s for s, _ in roster] == slots
    # one use per person per period
    assert {roster[0][1], roster[1][1]} == {P1, P2}
    assert {roster[2][1], roster[3][1]} == {P1, P2}


def test_scenario_c_flow_reports_deficit() -> None:
    _, sol, roster = _solve(["P1", "P2"], ["W1"], {"W1": ["P1", "P2"]})
    assert sol.max_flow == 0
    assert roster == []


def test_repeated_use_in_one_period_costs_squares() -> None:
    slots = ["w1", "w2", "w3", "w4"]
    _, sol, roster = _solve(["P1"], slots, target=4)
    assert sol.max_flow == 4
    assert sol.optimal_cost == 0 + 1 + 4 + 9
    assert [p for _, p in roster] == [P1] * 4


def test_fifth_use_in_one_period_is_not_possible() -> None:
    slots = ["w1", "w2", "w3", "w4", "w5"]
    _, sol, roster = _solve(["P1"], slots, target=5)
    assert sol.max_flow == 4
    assert sol.optimal_cost == 14
    assert len(roster) == 4


def test_flow_respects_unavailability() -> None:
    slots = ["2017-04-03", "2017-04-10", "2017-04-17", "2017-04-24"]
    unav = {"2017-04-10": ["Rick"], "2017-04-17": ["Rick", "Craig"]}
    _, sol, roster = _solve(["Rick", "Tom", "Craig"], slots, unav)
    assert sol.max_flow == 4
    assigned = dict(roster)
    assert assigned["2017-04-10"] != Named("Rick")
    assert assigned["2017-04-17"] == Named("Tom")


def test_extract_accepts_bare_arcs_and_ignores_non_slot_heads() -> None:
    net, sol, roster = _solve(["P1", "P2"], ["W1", "W2"], target=2)
    bare = [arc for arc, _ in sol.active]
    assert extract_roster(bare, ["W1", "W2"], net) == roster


def test_deficit_counts_unreachable_slots() -> None:
    _, sol, _ = _solve(["P1", "P2"], ["W1", "W2", "W3"], {"W2": ["P1", "P2"]}, target=2)
    assert sol.demand == 3
    assert sol.max_flow == 2
    assert sol.deficit == 1

    _, full, _ = _solve(["P1", "P2"], ["W1", "W2"], target=2)
    assert full.deficit == 0
