from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

LOG_FILE_NAME = "tasklist.log"


def setup_logging(log_dir: Union[str, Path], level: Union[str, int] = logging.WARNING) -> Path:
    """
    Configure file logging for the full-screen UI.

    Only a file handler is installed: anything written to stderr would land on
    top of the prompt_toolkit screen. Call this once, before the UI starts.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
