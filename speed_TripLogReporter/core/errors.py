# speed_TripLogReporter/core/errors.py
from __future__ import annotations
from pathlib import Path


class TripLogError(Exception):
    """Base class for everything the reporter raises on purpose."""


class LogOpenError(TripLogError):
    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"read file: {cause}")


class StatisticError(TripLogError, ValueError):
    """A statistic could not be computed from the samples of one file."""

    def __init__(self, statistic: str, n_samples: int, message: str):
        self.statistic = statistic
        self.n_samples = n_samples
        super().__init__(f"{statistic}: {message}")


class EmptySampleSetError(StatisticError):
    def __init__(self, statistic: str = "average_speed"):
        super().__init__(statistic, 0, "no speed samples found")


class TrimBufferError(StatisticError):
    def __init__(self, n_samples: int, buffer: int):
        self.buffer = buffer
        super().__init__(
            "travel_speed", n_samples,
            f"{n_samples} sample(s) cannot be trimmed by {buffer} on each end "
            f"(need more than {2 * buffer})",
        )


class NoAdjustedSamplesError(StatisticError):
    def __init__(self, n_samples: int, threshold: float):
        self.threshold = threshold
        super().__init__(
            "adjusted_travel_speed", n_samples,
            f"no mid-section sample at or above {threshold:g} mph",
        )
