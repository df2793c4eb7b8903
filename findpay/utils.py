# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for findpay.

The parser only emits DEBUG records on the `findpay` logger. `setup_logging()`
routes them to a log file and keeps the console quiet unless a level is lowered.
Mode and file name can come from a `FindPayConfig`, from explicit arguments, or
from the environment.
"""
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pythonjsonlogger.json
from rich.logging import RichHandler

if TYPE_CHECKING:
    from findpay.config import FindPayConfig

LOG_MODES = ("cli", "json")
DEFAULT_LOG_FILE = "findpay.log"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(
        runtime in content for runtime in ("docker", "kubepods", "containerd", "podman")
    )


def resolve_log_mode(
    mode: str | None = None, config: FindPayConfig | None = None
) -> str:
    """
    Pick the logging mode.

    Order: explicit `mode`, then `config.log_mode`, then `FINDPAY_LOG_MODE`, then
    "json" inside a container and "cli" everywhere else.

    Raises:
        ValueError: If the chosen mode is not "cli" or "json".
    """
    resolved = (
        mode
        or (config.log_mode if config else None)
        or os.getenv("FINDPAY_LOG_MODE")
        or ("json" if running_in_container() else "cli")
    )
    if resolved not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {resolved}")
    return resolved


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    return handler


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
    return handler


def setup_logging(
    config: FindPayConfig | None = None,
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> str:
    """
    Configure root logging for an application that embeds the findpay parser.

    Args:
        config (FindPayConfig | None): Supplies `log_mode` and `log_file` when the
            matching argument is not given.
        mode (str | None): "cli" for Rich console output, "json" for structured
            output. See `resolve_log_mode()` for the fallbacks.
        log_filename (str | None): Log file path. Defaults to `config.log_file`,
            then "findpay.log".
        json_log_to_file (bool): Write the file log as JSON instead of plain text.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler. Parse traces are
            DEBUG, so the default WARNING hides them on screen.

    Returns:
        str: The mode that was applied.

    Raises:
        ValueError: If the resolved mode is invalid.

    Environment Variables:
        FINDPAY_LOG_MODE: Used when neither `mode` nor `config.log_mode` is set.
    """
    mode = resolve_log_mode(mode, config)
    log_filename = log_filename or (config.log_file if config else DEFAULT_LOG_FILE)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    file_handler = _file_handler(log_filename, json_log_to_file)
    file_handler.setLevel(file_log_level)
    root.addHandler(file_handler)

    logger = logging.getLogger("findpay")
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logger.debug(
        "Logging initialized in '%s' mode, writing to '%s'.", mode, log_filename
    )
    return mode
