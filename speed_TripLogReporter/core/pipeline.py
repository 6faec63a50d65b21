# speed_TripLogReporter/core/pipeline.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable
import logging

from ..loaders import triplog_loader
from .errors import StatisticError
from .model import FileResult, StatsConfig
from .statistics import compute_statistics, configure_from_config

_LOG = logging.getLogger(__name__)

DEFAULT_SORT_KEY = "Start Time"

def analyze_file(path: Path, stats_cfg: StatsConfig) -> FileResult:
    extract = triplog_loader.load(path)   # handle is closed before the statistics run
    return compute_statistics(extract, path, stats_cfg)

def sort_results(results: Iterable[FileResult], sort_key: str = DEFAULT_SORT_KEY) -> list[FileResult]:
    # plain string comparison; files without the key sort first
    return sorted(results, key=lambda r: r.meta(sort_key))

def run_pipeline(paths: Iterable[Path], cfg: dict,
                 stats_cfg: StatsConfig | None = None) -> list[FileResult]:
    """
    Analyze every path in order and return the results sorted for the report.

    LogOpenError propagates and ends the run. A file whose statistics cannot be
    computed is logged and left out; the remaining files still get reported.
    """
    if stats_cfg is None:
        stats_cfg = configure_from_config(cfg)
    sort_key = str((cfg.get("report") or {}).get("sort_key", DEFAULT_SORT_KEY))

    results: list[FileResult] = []
    for path in paths:
        try:
            results.append(analyze_file(path, stats_cfg))
        except StatisticError as e:
            _LOG.warning("skipping %s: %s", path.name, e)
            continue
        _LOG.info("analyzed %s (%d samples)", path.name, results[-1].n_samples)

    return sort_results(results, sort_key)
