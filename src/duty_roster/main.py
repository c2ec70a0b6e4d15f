from __future__ import annotations

from typing import Literal

from duty_roster.config import Config, cfg
from duty_roster.input_data import InputData
from duty_roster.model import RosterModel
from duty_roster.progress import MinimalProgress
from duty_roster.reporting import Reporter
from duty_roster.result_types import SolveResult
from duty_roster.stochastic import ProgressCallback

Method = Literal["stochastic", "flow"]


def run_solver(
    data: InputData,
    config: Config | None = None,
    method: Method = "stochastic",
    reporter: Reporter | None = None,
    progress_cb: ProgressCallback | None = None,
    validate_config: bool = True,
    enable_reporting: bool = True,
) -> SolveResult:
    """
    Pre-check, solve, and optionally report on a roster.

    Parameters
    ----------
    data:
        People, slots, unavailability and (for the stochastic method) the
        frozen roster of earlier rounds.
    config:
        The configuration for the run. Defaults to `duty_roster.config.cfg`.
    method:
        "stochastic" for the hill-climber, "flow" for the min-cost flow model.
    reporter:
        Custom reporter instance. When `enable_reporting` is True and no
        reporter is provided, the default `Reporter` is used.
    progress_cb:
        Progress callback for the stochastic method. Defaults to
        `MinimalProgress`.
    validate_config:
        Toggle to run `Config.validate()` before solving.
    enable_reporting:
        When False, skips reporter pre/post hooks even if a reporter is provided.

    Returns
    -------
    SolveResult
        Structured output from the solving phase.
    """
    cfg_obj = config or cfg
    if validate_config:
        cfg_obj.validate()
    if method not in ("stochastic", "flow"):
        raise ValueError(f"Unknown method {method!r}; use 'stochastic' or 'flow'.")

    model = RosterModel(cfg_obj, data)

    active_reporter = reporter if enable_reporting else None
    if active_reporter is None and enable_reporting:
        active_reporter = Reporter(cfg_obj)

    if active_reporter is not None:
        active_reporter.pre_solve(model, method=method)

    if method == "flow":
        model.build()
        result = model.solve()
    else:
        progress = progress_cb or MinimalProgress(
            cfg_obj.MAX_ITERATIONS, cfg_obj.LOG_PROGRESS_EVERY
        )
        result = model.optimize(progress_cb=progress)

    if active_reporter is not None:
        active_reporter.post_solve(result, data)

    return result
