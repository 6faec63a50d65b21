# speed_TripLogReporter/core/reports.py
from __future__ import annotations
from typing import Sequence, TextIO
import sys

from .model import FileResult

_LABEL_WIDTH = 23   # "Adjusted Travel Speed: "

def _line(label: str, value: str) -> str:
    return f"{label + ':':<{_LABEL_WIDTH}}{value}"

def _mph(v: float) -> str:
    return f"{v:.2f} mph"

def format_result(r: FileResult, show_extended: bool = False) -> list[str]:
    lines = [
        _line("Start Time", r.meta("Start Time")),
        _line("Path", r.path.name),
        _line("Destination", r.destination),
        _line("Distance", r.meta("Distance")),
        _line("Average Speed", _mph(r.average_speed)),
        _line("Travel Speed", _mph(r.travel_speed)),
        _line("Adjusted Travel Speed", _mph(r.adjusted_travel_speed)),
    ]
    if show_extended:
        lines.append(_line("Max Speed", _mph(r.max_speed)))
        lines.append(_line("Mode Speed", _mph(r.mode_speed)))
    return lines

def render_report(results: Sequence[FileResult], show_extended: bool = False) -> str:
    """One block per result in the given order, each followed by a blank line."""
    out: list[str] = []
    for r in results:
        out.extend(format_result(r, show_extended))
        out.append("")
    return "".join(line + "\n" for line in out)

def write_report(results: Sequence[FileResult], stream: TextIO | None = None,
                 show_extended: bool = False) -> None:
    (stream or sys.stdout).write(render_report(results, show_extended))
