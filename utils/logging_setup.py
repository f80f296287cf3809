"""
Logging configuration for arena runs.

Game logs go to the console and to a file inside a timestamped run
directory, so several arena runs can be kept side by side.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Overrides the level passed by callers, e.g. AMAZONS_LOG_LEVEL=DEBUG
LOG_LEVEL_ENV = "AMAZONS_LOG_LEVEL"

# Marks handlers installed here so repeated setup replaces only those.
_HANDLER_TAG = "_amazons_run_handler"


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level name or number into a logging level, honouring AMAZONS_LOG_LEVEL.

    Raises:
        ValueError: if the name is not a logging level
    """
    level = os.environ.get(LOG_LEVEL_ENV) or level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    log_dir: Path,
    run_name: str,
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None
) -> Path:
    """
    Log to the console and to <log_dir>/<run_name>.log.

    Args:
        log_dir: Directory for the log file (created if missing)
        run_name: Log file name without extension
        level: Logging level or level name
        format_string: Record format; DEFAULT_FORMAT when None

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{run_name}.log"
    level = resolve_level(level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(level)

    for handler in (logging.FileHandler(log_file, mode="w", encoding="utf-8"), logging.StreamHandler()):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        root_logger.addHandler(handler)

    return log_file


def create_run_directory(base_dir: Path = Path("runs"), run_label: Optional[str] = None) -> Path:
    """Create <base_dir>/<YYYYMMDD>_<HHMMSS>_<run_label or 'games'>/."""
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(base_dir) / f"{stamp}_{run_label or 'games'}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def setup_game_logging(
    base_run_dir: Path = Path("runs"),
    run_label: Optional[str] = None,
    level: Union[int, str] = logging.INFO
) -> Tuple[Path, Path]:
    """
    Create a run directory and log into <run_dir>/games.log.

    Returns:
        Tuple of (run_directory, log_file_path)
    """
    run_dir = create_run_directory(base_run_dir, run_label)
    return run_dir, setup_logging(run_dir, "games", level)
