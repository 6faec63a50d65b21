# speed_TripLogReporter/core/model.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal
import pandas as pd

TieBreak = Literal["smallest", "first"]

@dataclass(frozen=True)
class TripExtract:
    destination: str          # "" when no <name> line was found
    metadata: dict[str, str]  # table rows, label -> trimmed value
    samples: pd.Series        # float mph, file order

@dataclass(frozen=True)
class StatsConfig:
    min_adjusted_speed: float = 20.0    # mph, inclusive lower bound for adjusted travel speed
    trim_fraction: float = 0.1          # buffer = floor(n * fraction) + 1 per end
    mode_tie_break: TieBreak = "smallest"

@dataclass(frozen=True)
class FileResult:
    path: Path
    destination: str
    average_speed: float
    travel_speed: float
    adjusted_travel_speed: float
    max_speed: float
    mode_speed: float
    n_samples: int
    metadata: dict[str, str] = field(default_factory=dict)

    def meta(self, key: str) -> str:
        return self.metadata.get(key, "")
