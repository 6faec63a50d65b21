# speed_TripLogReporter/loaders/triplog_loader.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable
import logging, math, re
import pandas as pd

from ..core.errors import LogOpenError
from ..core.model import TripExtract

_LOG = logging.getLogger(__name__)

# ---------- line patterns (tested in this order) ----------
_DEST_RE        = re.compile(r"^        <name>(.*)</name>")   # exactly eight leading spaces
_TABLE_RE       = re.compile(r"<tr><td><b>(.*?)</b>(.*?)</td></tr>")
_SPEED_RE       = re.compile(r"Speed: ([0-9.]+) mph")          # ASCII digits only
_SPEED_TOKEN_RE = re.compile(r"Speed: (\S+) mph")

def _parse_speed(token: str) -> float | None:
    try:
        value = float(token)
    except ValueError:   # e.g. "1.2.3"
        return None
    return value if math.isfinite(value) else None

def extract(lines: Iterable[str], source: str = "<stream>") -> TripExtract:
    """
    Classify every line of one trip log.

    Order per line:
      1) destination ``<name>`` line, only while no destination is latched
      2) metadata table row; later rows overwrite earlier ones
      3) ``Speed: N mph``; unparseable tokens are logged and dropped
    Everything else is ignored.
    """
    destination = ""
    metadata: dict[str, str] = {}
    speeds: list[float] = []

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")

        m = _DEST_RE.match(line)
        if m and not destination:
            destination = m.group(1)
            continue

        m = _TABLE_RE.search(line)
        if m:
            metadata[m.group(1)] = m.group(2).strip()
            continue

        m = _SPEED_RE.search(line)
        if m is None:
            bad = _SPEED_TOKEN_RE.search(line)
            if bad:
                _LOG.warning("%s:%d: ignoring speed %r", source, lineno, bad.group(1))
            continue
        value = _parse_speed(m.group(1))
        if value is None:
            _LOG.warning("%s:%d: ignoring speed %r", source, lineno, m.group(1))
            continue
        speeds.append(value)

    _LOG.debug("%s: %d speed sample(s), %d metadata row(s)", source, len(speeds), len(metadata))
    return TripExtract(
        destination=destination,
        metadata=metadata,
        samples=pd.Series(speeds, dtype=float, name="speed_mph"),
    )

# ---------- public loader ----------
def load(path: Path) -> TripExtract:
    """
    Open one exported trip log, extract it and close the handle again.
    Raises LogOpenError when the file cannot be opened.
    """
    try:
        fh = path.open("r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise LogOpenError(path, e) from e
    with fh:
        return extract(fh, source=path.name)
