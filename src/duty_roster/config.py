from dataclasses import dataclass
from typing import Optional

from duty_roster.penalty import target_spacing


@dataclass
class Config:

    ### PENALTY MODEL ###

    # Desired number of slots between two assignments of the same person.
    # None = min(number of people, MAX_SPACING)
    TARGET_SPACING: Optional[int] = None
    MAX_SPACING: int = 4

    ### STOCHASTIC OPTIMIZER ###

    MAX_ITERATIONS: int = 10_000

    # RANDOM SEED
    SEED: Optional[int] = None

    # Print a progress line at most every N iterations
    LOG_PROGRESS_EVERY: int = 1_000

    ### FLOW MODEL ###

    # Repetition tiers per (person, period); tier c costs c**2
    TIERS_PER_PERIOD: int = 4

    # Supply on source -> person arcs (effectively unbounded)
    SOURCE_CAPACITY: int = 9_999

    ### CALENDAR ###

    SLOT_STEP_DAYS: int = 7

    def validate(self):
        """
        Validate the Config object has sensible values before solving.
        """
        if self.TARGET_SPACING is not None and self.TARGET_SPACING < 1:
            raise ValueError("TARGET_SPACING must be >= 1 (or None for default).")
        if self.MAX_SPACING < 1:
            raise ValueError("MAX_SPACING must be >= 1.")
        if self.MAX_ITERATIONS < 0:
            raise ValueError("MAX_ITERATIONS must be >= 0.")
        if self.LOG_PROGRESS_EVERY <= 0:
            raise ValueError("LOG_PROGRESS_EVERY must be > 0.")
        if self.TIERS_PER_PERIOD < 1:
            raise ValueError("TIERS_PER_PERIOD must be >= 1.")
        if self.SOURCE_CAPACITY < 1:
            raise ValueError("SOURCE_CAPACITY must be >= 1.")
        if self.SLOT_STEP_DAYS < 1:
            raise ValueError("SLOT_STEP_DAYS must be >= 1.")
        if self.SEED is not None and not isinstance(self.SEED, int):
            raise ValueError("SEED must be an int or None.")

    def target_spacing(self, n_people: int) -> int:
        """Effective target spacing for a roster over `n_people` people."""
        if self.TARGET_SPACING is not None:
            return int(self.TARGET_SPACING)
        return target_spacing(n_people, self.MAX_SPACING)


cfg = Config(
    MAX_ITERATIONS=10_000,
    LOG_PROGRESS_EVERY=1_000,
    SEED=3,
)
