# tests/conftest.py
from __future__ import annotations

import os
import random
from pathlib import Path

import numpy as np
import pytest

from duty_roster.input_data import InputData


# -----------------------------
# Global, deterministic seeding
# -----------------------------
@pytest.fixture(autouse=True, scope="session")
def _seed_everything() -> None:
    """
    Make tests deterministic across runs. The optimizer never touches the
    global generators, but plotting and pandas helpers might.
    """
    seed = int(os.environ.get("PYTEST_SEED", "1234"))
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


# -----------------------------
# Shared inputs
# -----------------------------
@pytest.fixture
def weekly_data() -> InputData:
    """Three people over six weeks with a couple of blocked weeks."""
    return InputData(
        people=["Rick", "Tom", "Craig"],
        slots=[
            "2017-04-03",
            "2017-04-10",
            "2017-04-17",
            "2017-04-24",
            "2017-05-01",
            "2017-05-08",
        ],
        unavailability={
            "2017-04-10": {"Rick"},
            "2017-04-17": {"Rick", "Craig"},
        },
    )
