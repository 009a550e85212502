import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler
from countdown.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(threadName)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Environment overrides for the session logger, e.g. COUNTDOWN_LOG_LEVEL=INFO COUNTDOWN_LOG_CONSOLE=1
LEVEL_ENV = "COUNTDOWN_LOG_LEVEL"
CONSOLE_ENV = "COUNTDOWN_LOG_CONSOLE"
DEBUG_RUNS_DIR = "debug"


# Adds the handler built by factory() unless the logger already carries one under the same name. Returns the handler
# that is attached afterwards, new or existing.
def _attach(logger: logging.Logger, handler_name: str, factory, level, fmt) -> logging.Handler:
    for existing in logger.handlers:
        if existing.get_name() == handler_name:
            return existing
    handler = factory()
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.set_name(handler_name)
    logger.addHandler(handler)
    return handler

# Deletes all but the newest `keep` per-run debug logs of this logger.
def prune_debug_runs(debug_dir: Path, name: str, keep: int) -> list[Path]:
    runs = sorted(debug_dir.glob(f"{name}_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
    removed = []
    for run in runs[keep:]:
        try:
            run.unlink()
        except OSError:
            # Still open elsewhere (Windows) or already gone, retried next run
            continue
        removed.append(run)
    return removed

def level_from_env(default=logging.DEBUG, environ=None) -> int:
    environ = os.environ if environ is None else environ
    raw = environ.get(LEVEL_ENV, "").strip().upper()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default

def console_from_env(default=False, environ=None) -> bool:
    environ = os.environ if environ is None else environ
    raw = environ.get(CONSOLE_ENV, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")

def get_logger(
        name = "countdown",
        level = logging.INFO,
        log_dir: Path | None = None,
        max_bytes = 5 * 1024 * 1024,
        backup_count = 5,
        persistent = True,
        console = False,
        historical_debugs: int = 10
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)

    log_dir = log_dir or PATHS.logs
    log_dir.mkdir(parents=True,exist_ok=True)
    fmt = logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT)

    # Rotating log kept across runs
    if persistent:
        _attach(logger, f"{name}:persistent", lambda: RotatingFileHandler(
            filename=log_dir / f"{name}.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        ), level, fmt)

    # Latest-only log, overwritten each run
    _attach(logger, f"{name}:latest",
            lambda: logging.FileHandler(log_dir / "latest.log", mode="w", encoding="utf-8"), level, fmt)

    # One full debug log per run, always at DEBUG regardless of `level`
    if historical_debugs > 0:
        debug_dir = log_dir / DEBUG_RUNS_DIR
        debug_dir.mkdir(parents=True,exist_ok=True)
        run_path = debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        handler_count = len(logger.handlers)
        _attach(logger, f"{name}:historical_debug",
                lambda: logging.FileHandler(run_path, encoding="utf-8"), logging.DEBUG, fmt)
        if len(logger.handlers) > handler_count:
            prune_debug_runs(debug_dir, name, historical_debugs)

    if console:
        _attach(logger, f"{name}:console", logging.StreamHandler, level, fmt)

    return logger

log = get_logger(level=level_from_env(), console=console_from_env(), historical_debugs=10)
log.info("=== INITIALIZED NEW SESSION ===")
