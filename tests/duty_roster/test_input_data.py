from __future__ import annotations

import pytest

from duty_roster.input_data import InputData
from duty_roster.people import UNFILLED, Named


def test_input_data_normalizes_names() -> None:
    data = InputData(
        people=["Rick", "Tom"],
        slots=["w1", "w2"],
        unavailability={"w1": ["Rick"]},
        previous_roster=["Tom", UNFILLED],
    )
    assert data.people == (Named("Rick"), Named("Tom"))
    assert data.slots == ("w1", "w2")
    assert data.unavailability == {"w1": frozenset({Named("Rick")})}
    assert data.previous_roster == (Named("Tom"), UNFILLED)


@pytest.mark.parametrize(
    "kwargs, match",
    [
        ({"people": [], "slots": ["w1"]}, "people"),
        ({"people": ["Rick"], "slots": []}, "slots"),
        ({"people": ["Rick", "Rick"], "slots": ["w1"]}, "Duplicate people"),
        ({"people": ["Rick"], "slots": ["w1", "w1"]}, "Duplicate slots"),
        (
            {"people": ["Rick"], "slots": ["w1"], "unavailability": {"w9": ["Rick"]}},
            "not in slots",
        ),
        (
            {"people": ["Rick"], "slots": ["w1"], "previous_roster": ["Bob"]},
            "previous_roster",
        ),
    ],
)
def test_input_data_fails_fast_on_malformed_input(kwargs, match) -> None:
    with pytest.raises(ValueError, match=match):
        InputData(**kwargs)


def test_unavailability_must_be_a_collection() -> None:
    with pytest.raises(TypeError):
        InputData(people=["Rick"], slots=["w1"], unavailability={"w1": "Rick"})
