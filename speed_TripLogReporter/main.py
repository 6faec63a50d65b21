# speed_TripLogReporter/main.py
from __future__ import annotations
from pathlib import Path
import logging
import os
import sys
import yaml

from .core.errors import LogOpenError
from .core.pipeline import run_pipeline
from .core.reports import write_report
from .core.statistics import configure_from_config

CONFIG_ENV = "SPEED_TRIPLOG_CONFIG"
USAGE = "usage: speed-triplog-report <path> [<path> ...]"

def load_config(cfg_path: Path, required: bool = False) -> dict:
    if not required and not cfg_path.is_file():
        return {}
    with cfg_path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{cfg_path}: top level must be a mapping, got {type(cfg).__name__}")
    return cfg

def _resolve_config() -> tuple[Path, dict]:
    env = os.environ.get(CONFIG_ENV)
    if env:
        path = Path(env)
        return path, load_config(path, required=True)
    path = Path(__file__).resolve().parent / "config.yaml"
    return path, load_config(path)

def setup_logging(cfg: dict) -> bool:
    """Configure stderr logging from the ``logging`` section; returns the verbose flag."""
    log_cfg = cfg.get("logging") or {}
    verbose = bool(log_cfg.get("verbose", False))
    level = "INFO" if verbose else str(log_cfg.get("level", "WARNING"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return verbose

def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    # ---------- config ----------
    try:
        cfg_path, cfg = _resolve_config()
        stats_cfg = configure_from_config(cfg)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"[ERROR] invalid config: {e}")
        sys.exit(1)
    verbose = setup_logging(cfg)
    report_cfg = cfg.get("report") or {}
    if verbose:
        print(f"[cfg] config={cfg_path}", file=sys.stderr)
        print(f"[cfg] {len(args)} input file(s)", file=sys.stderr)

    # ---------- analyze ----------
    try:
        results = run_pipeline([Path(a) for a in args], cfg, stats_cfg)
    except LogOpenError as e:
        print(e)
        sys.exit(1)

    # ---------- report ----------
    write_report(results, show_extended=bool(report_cfg.get("show_extended", False)))

    if verbose:
        print(f"[summary] reported {len(results)} of {len(args)} file(s)", file=sys.stderr)

if __name__ == "__main__":
    main()
