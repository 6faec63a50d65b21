# speed_TripLogReporter/core/statistics.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import get_args
import numpy as np
import pandas as pd

from .errors import EmptySampleSetError, NoAdjustedSamplesError, TrimBufferError
from .model import FileResult, StatsConfig, TieBreak, TripExtract

_LOG = logging.getLogger(__name__)

def configure_from_config(cfg: dict | None) -> StatsConfig:
    """
    Build the engine settings from the ``statistics`` section of config.yaml.
    Missing keys keep the StatsConfig defaults; the result is passed explicitly
    to compute_statistics instead of living in module globals.
    """
    defaults = StatsConfig()
    st = (cfg or {}).get("statistics") or {}

    min_adj = float(st.get("min_adjusted_speed_mph", defaults.min_adjusted_speed))
    frac = float(st.get("trim_fraction", defaults.trim_fraction))
    tie = str(st.get("mode_tie_break", defaults.mode_tie_break)).strip().lower()

    if min_adj < 0:
        raise ValueError(f"statistics.min_adjusted_speed_mph must be >= 0, got {min_adj}")
    if not 0.0 <= frac < 0.5:
        raise ValueError(f"statistics.trim_fraction must be in [0, 0.5), got {frac}")
    if tie not in get_args(TieBreak):
        raise ValueError(f"statistics.mode_tie_break must be one of {get_args(TieBreak)}, got {tie!r}")
    return StatsConfig(min_adjusted_speed=min_adj, trim_fraction=frac, mode_tie_break=tie)

def trim_buffer(n: int, fraction: float = 0.1) -> int:
    return int(n * fraction) + 1

def mid_section(samples: pd.Series, buffer: int) -> pd.Series:
    n = len(samples)
    if n <= 2 * buffer:
        raise TrimBufferError(n, buffer)
    return samples.iloc[buffer:n - buffer]

def max_speed(samples: pd.Series) -> float:
    # accumulator starts at zero, so an empty set reports 0
    if samples.empty:
        return 0.0
    return max(0.0, float(samples.max()))

def mode_speed(samples: pd.Series, tie_break: TieBreak = "smallest") -> float:
    """
    Most frequent speed after truncation toward zero.

    Ties: ``smallest`` picks the lowest tied value, ``first`` the tied value
    that occurs earliest in the samples.
    """
    if samples.empty:
        raise EmptySampleSetError("mode_speed")
    truncated = pd.Series(np.trunc(samples.to_numpy(dtype=float)).astype(np.int64))
    counts = truncated.value_counts(sort=False)
    tied = counts[counts == counts.max()].index
    if tie_break == "first":
        return float(truncated[truncated.isin(tied)].iloc[0])
    return float(min(tied))

def compute_statistics(extract: TripExtract, path: Path, cfg: StatsConfig | None = None) -> FileResult:
    cfg = cfg or StatsConfig()
    s = extract.samples.astype(float).reset_index(drop=True)
    n = len(s)
    if n == 0:
        raise EmptySampleSetError()

    b = trim_buffer(n, cfg.trim_fraction)
    mid = mid_section(s, b)
    adjusted = mid[mid >= cfg.min_adjusted_speed]
    if adjusted.empty:
        raise NoAdjustedSamplesError(n, cfg.min_adjusted_speed)

    _LOG.debug("%s: n=%d buffer=%d mid=%d adjusted=%d", path.name, n, b, len(mid), len(adjusted))
    return FileResult(
        path=path,
        destination=extract.destination,
        average_speed=float(s.mean()),
        travel_speed=float(mid.mean()),
        adjusted_travel_speed=float(adjusted.mean()),
        max_speed=max_speed(s),
        mode_speed=mode_speed(s, cfg.mode_tie_break),
        n_samples=n,
        metadata=dict(extract.metadata),
    )
