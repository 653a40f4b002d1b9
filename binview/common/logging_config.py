# binview/common/logging_config.py
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from binview.core.errors import InputFileError


@dataclass(frozen=True)
class LogDefaults:
    level: int = logging.WARNING   # without -v
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    stderr_fmt: str = "%(levelname)s %(name)s: %(message)s"

DEFAULTS = LogDefaults()

_STDERR_HANDLER_NAME = "binview.stderr"


def level_for_verbosity(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return DEFAULTS.level


def configure_logging(verbose: int = 0, log_file: Optional[Path] = None) -> None:
    """
    Attach stderr (and optionally file) handlers to the root logger.

    Idempotent: calling twice does not duplicate handlers.
    stdout is never touched; it carries decoded values only.
    """
    root = logging.getLogger()
    level = level_for_verbosity(verbose)

    stderr_handler = None
    for h in root.handlers:
        if getattr(h, "name", None) == _STDERR_HANDLER_NAME:
            stderr_handler = h
            break
    if stderr_handler is None:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.set_name(_STDERR_HANDLER_NAME)
        stderr_handler.setFormatter(logging.Formatter(DEFAULTS.stderr_fmt))
        root.addHandler(stderr_handler)
    stderr_handler.setLevel(level)

    if log_file is not None:
        configure_file_logging(Path(log_file), level=min(level, logging.INFO))

    root.setLevel(min(h.level for h in root.handlers) if root.handlers else level)


def configure_file_logging(app_log_path: Path, *, level: int = logging.INFO) -> None:
    """
    Add a file handler to the root logger (idempotent).

    The file is opened up front so a bad path fails before any output.
    """
    root = logging.getLogger()
    try:
        app_log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise InputFileError(
            f"Cannot create log directory {app_log_path.parent}: {e.strerror or e}",
            hint="Check the --log-file path.",
        ) from e
    target = str(app_log_path.resolve())

    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target:
            return

    try:
        fh = logging.FileHandler(app_log_path, encoding="utf-8")
    except OSError as e:
        raise InputFileError(
            f"Cannot open log file {app_log_path}: {e.strerror or e}",
            hint="Check the --log-file path.",
        ) from e
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(DEFAULTS.fmt))
    root.addHandler(fh)
