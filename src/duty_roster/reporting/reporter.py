from __future__ import annotations

import sys
from typing import Any

from duty_roster.input_data import InputData
from duty_roster.reporting.plots import show_cost_progress, show_roster_timeline
from duty_roster.reporting.text_report import render_text_report
from duty_roster.result_types import SolveResult


class Reporter:
    """High-level orchestrator: runs pre-check confirmations and renders reports."""

    def __init__(
        self,
        cfg: Any,
        num_print_examples: int = 6,
        enable_plots: bool = True,
    ) -> None:
        """
        cfg must expose target_spacing(n_people).
        """
        self.cfg = cfg
        self.num_print_examples = num_print_examples
        self.enable_plots = enable_plots

    def pre_solve(self, model: object, *, method: str = "stochastic") -> None:
        """
        Run the availability pre-check. Unfillable slots are fine for the
        stochastic method (they get the UNFILLED sentinel) but make the flow
        method infeasible, so ask before going on.
        """
        precheck = getattr(model, "precheck", None)
        if not callable(precheck):
            print("Pre-check: (model has no `precheck()`; skipping)")
            return

        unfillable, *_ = precheck()
        if unfillable and method == "flow":
            proceed = self._prompt_yes_no_default_yes(
                "Some slots cannot be filled by anyone. Continue anyway?"
            )
            if not proceed:
                raise SystemExit("Stopped by user after infeasible pre-check.")

    def post_solve(self, res: SolveResult, data: InputData) -> None:
        """Render textual report (and optional plots) after solving."""
        render_text_report(
            self.cfg, res, data, num_print_examples=self.num_print_examples
        )
        if not self.enable_plots:
            return
        show_roster_timeline(res.df_roster)
        show_cost_progress(res.progress_history or [])

    # ---------- helpers ----------

    def _prompt_yes_no_default_yes(self, msg: str) -> bool:
        """Prompt '[Y/n]' and return True for yes (default)."""
        try:
            if not sys.stdin or not sys.stdin.isatty():
                print(f"{msg} [Y/n] (non-interactive -> default: Y)")
                return True

            while True:
                resp = input(f"{msg} [Y/n]: ").strip().lower()
                if resp in ("", "y", "yes"):
                    return True
                if resp in ("n", "no"):
                    return False
                print("Please type 'y' or 'n'.")
        except (EOFError, KeyboardInterrupt):
            print("\nAborted by user.")
            return False
