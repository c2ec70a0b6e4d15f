from __future__ import annotations

import sys
from typing import Any

import numpy as np
import pandas as pd

from duty_roster.input_data import InputData
from duty_roster.result_types import SolveResult


def _fmt_float(x: float | None, nd: int = 2) -> str:
    if x is None:
        return "nan"
    try:
        if pd.isna(x):
            return "nan"
        return f"{float(x):.{nd}f}"
    except (TypeError, ValueError):
        return "nan"


def _print_assignment_histogram(df_people: pd.DataFrame, stream) -> None:
    if df_people.empty or "assignments" not in df_people.columns:
        print("\nAssignments distribution: (no data)", file=stream)
        return
    counts = df_people["assignments"].astype(int).value_counts().sort_index()
    print("\nAssignments distribution — how many people have each total:", file=stream)
    for k, n in counts.items():
        bar = "█" * min(int(n), 50)
        print(f"  {k:>3}x : {n:>4} people  {bar}", file=stream)


def render_text_report(
    cfg: Any,
    res: SolveResult,
    data: InputData,
    *,
    num_print_examples: int = 6,
    stream=None,
) -> None:
    stream = stream or sys.stdout
    target = cfg.target_spacing(len(data.people))

    print(f"Method: {res.method} | status: {res.status_name}", file=stream)
    if res.infeasible_slots:
        sample = ", ".join(str(s) for s in res.infeasible_slots[:num_print_examples])
        print(
            f"❌ {len(res.infeasible_slots)} slot(s) nobody can take: {sample}",
            file=stream,
        )
    if res.objective_value is None:
        print("No roster produced; exiting.", file=stream)
        return

    print(
        f"\nSpacing penalty={_fmt_float(res.objective_value, 0)} (target spacing {target})",
        file=stream,
    )
    if res.flow_cost is not None:
        print(
            f"Flow cost={res.flow_cost:,} (per-period repetition cost; periods of {target} slots)",
            file=stream,
        )

    if not res.df_roster.empty:
        print("\nRoster:", file=stream)
        print(res.df_roster[["slot", "person"]].to_string(index=False), file=stream)

    df_people = res.df_people
    if not df_people.empty:
        print(f"\nPer-person totals (top {num_print_examples} by penalty):", file=stream)
        print(df_people.head(num_print_examples).to_string(index=False), file=stream)

        counts = df_people["assignments"].to_numpy(dtype=float)
        if counts.size:
            std = float(np.std(counts, ddof=1)) if counts.size > 1 else float("nan")
            print(
                "\nAssignments across people: "
                f"mean={_fmt_float(float(np.mean(counts)))} | std={_fmt_float(std)} | "
                f"min={_fmt_float(float(np.min(counts)), 0)} | max={_fmt_float(float(np.max(counts)), 0)}",
                file=stream,
            )
        _print_assignment_histogram(df_people, stream)

    if res.next_stack:
        print(
            "\nNext stack: " + ", ".join(str(p) for p in res.next_stack), file=stream
        )
    if res.next_slots:
        print("Next slots: " + ", ".join(res.next_slots), file=stream)

    print(
        "\nDefinitions:"
        "\n- spacing penalty: Σ over people and consecutive assignments of (target - gap)² when gap < target."
        "\n- flow cost: Σ over people and fixed periods of c² for the (c+1)-th use inside the period.\n",
        file=stream,
    )
