from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import pandas as pd


def _save_and_show(fig: plt.Figure, filename: str) -> None:
    """Persist the plot under outputs/ and show it."""
    out_dir = Path("outputs")
    out_dir.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_dir / filename, dpi=fig.dpi, bbox_inches="tight")
    plt.show()


def show_cost_progress(history: Sequence[tuple[int, float]]) -> None:
    """
    Plot the accepted cost versus iteration.

    history entries are (iteration, cost).
    """
    if not history:
        return
    iterations = [pt[0] for pt in history]
    costs = [pt[1] for pt in history]

    fig, ax = plt.subplots(figsize=(7.5, 4), dpi=150)
    ax.set_title("Spacing penalty history", pad=20)
    ax.step(iterations, costs, where="post", color="tab:blue", linewidth=1.5)
    ax.scatter(iterations, costs, color="tab:blue", s=8, zorder=3)
    ax.set_xlabel("Iteration of accepted move")
    ax.set_ylabel(f"Roster cost. Final={costs[-1]:,.0f}")
    ax.set_ylim(*_expand_limits(costs))
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.xaxis.set_major_locator(plt.MaxNLocator(integer=True))
    ax.grid(alpha=0.3)
    fig.tight_layout()
    _save_and_show(fig, "cost_progress.png")


def show_roster_timeline(df_roster: pd.DataFrame) -> None:
    """One row per person, a mark at each slot they cover."""
    if df_roster.empty:
        return
    filled = df_roster[~df_roster["unfilled"]]
    people = sorted(filled["person"].unique())
    if not people:
        return
    y_of = {p: i for i, p in enumerate(people[::-1])}

    fig_height = 2 + len(people) * 0.3
    fig, ax = plt.subplots(figsize=(9, fig_height), dpi=150)
    ax.barh(
        [y_of[p] for p in filled["person"]],
        width=0.9,
        left=filled["slot_index"] - 0.45,
        height=0.7,
        color="#3B82F6",
        linewidth=0,
        zorder=3,
    )
    gaps = df_roster[df_roster["unfilled"]]
    for idx in gaps["slot_index"]:
        ax.axvspan(idx - 0.5, idx + 0.5, color="#FCA5A5", alpha=0.4, zorder=1)

    ax.set_yticks(list(y_of.values()), list(y_of.keys()))
    step = max(1, len(df_roster) // 12)
    ticks = df_roster.iloc[::step]
    ax.set_xticks(list(ticks["slot_index"]), [str(s) for s in ticks["slot"]], rotation=45)
    ax.set_xlim(-0.5, len(df_roster) - 0.5)
    ax.set_xlabel("Slot")
    ax.set_title("Roster timeline (red = unfilled)", fontsize=11)
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)
    fig.tight_layout()
    _save_and_show(fig, "roster_timeline.png")


def _expand_limits(
    values: Sequence[float], axis_padding: float = 0.05
) -> tuple[float, float]:
    lo = min(values)
    hi = max(values)
    if lo == hi:
        delta = max(abs(lo), 1.0) * max(axis_padding, 0.05)
        return lo - delta, hi + delta
    span = hi - lo
    pad = span * axis_padding
    return lo - pad, hi + pad
