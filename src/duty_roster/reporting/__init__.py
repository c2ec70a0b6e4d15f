from __future__ import annotations

from .plots import show_cost_progress, show_roster_timeline
from .reporter import Reporter
from .text_report import render_text_report

__all__ = [
    "Reporter",
    "render_text_report",
    "show_cost_progress",
    "show_roster_timeline",
]
