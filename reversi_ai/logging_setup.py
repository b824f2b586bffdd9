from __future__ import annotations

import logging
import pathlib
import sys
import threading
import traceback
from typing import Optional, Union

LOG_FILE_NAME = "reversi.log"


def get_log_path(file_name: Optional[str] = None) -> pathlib.Path:
    return pathlib.Path.cwd() / (file_name or LOG_FILE_NAME)


def setup_logging(
    overwrite: bool = True,
    level: Union[int, str] = logging.DEBUG,
    verbose: bool = False,
    file_name: Optional[str] = None,
) -> None:
    """Configure root logging to a single file in the current working directory.

    - Overwrites the log file on first setup (per process) if overwrite is True
    - Adds a STDERR handler for warnings, or info and up when verbose
    - Installs sys.excepthook and threading excepthook
    - Captures warnings via logging
    """
    root_logger = logging.getLogger()
    if getattr(root_logger, "_reversi_logging_configured", False):
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.DEBUG

    fmt = "%(asctime)s.%(msecs)03d %(levelname)s [%(process)d:%(threadName)s] %(name)s - %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    handlers: list[logging.Handler] = []
    file_mode = "w" if overwrite else "a"
    file_handler = logging.FileHandler(get_log_path(file_name), mode=file_mode, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    file_handler.setLevel(level)
    handlers.append(file_handler)

    # Console gets warnings only, unless verbose.
    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s - %(message)s"))
    stderr_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    handlers.append(stderr_handler)

    logging.basicConfig(level=min(level, stderr_handler.level), handlers=handlers, force=True)
    root_logger._reversi_logging_configured = True  # type: ignore[attr-defined]

    logging.captureWarnings(True)

    sys.excepthook = _log_unhandled_exception  # type: ignore[assignment]
    threading.excepthook = _log_thread_exception  # type: ignore[assignment]


def reset_logging() -> None:
    """Drop the handlers installed by setup_logging() so it can run again."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.WARNING)
    root_logger._reversi_logging_configured = False  # type: ignore[attr-defined]
    sys.excepthook = sys.__excepthook__
    threading.excepthook = threading.__excepthook__  # type: ignore[attr-defined]


def _log_unhandled_exception(exc_type, exc_value, exc_tb) -> None:  # type: ignore[no-untyped-def]
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    logger = logging.getLogger("unhandled")
    tb_str = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logger.critical("Unhandled exception:\n%s", tb_str)


def _log_thread_exception(args) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("thread")
    tb_str = "".join(traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback))
    logger.critical("Unhandled thread exception in %s:\n%s", getattr(args, "thread", None), tb_str)
