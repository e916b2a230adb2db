# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_invocation() -> str:
    """Returns the name the current program was invoked as."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "argweave"
    program = shutil.which(script)
    if program:
        return os.path.basename(program)
    return os.path.basename(script) or script


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(
        marker in content for marker in ("docker", "kubepods", "containerd", "podman")
    )


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "argweave.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route "argweave" log records for a program that parses with Argweave.

    `ArgParser` never configures handlers itself. It logs registrations and
    token traces at DEBUG, failed validation at INFO and ignored bare tokens
    at WARNING. With the default console level a program therefore only sees
    stray-token warnings. The `argweave` command calls this with
    `log_filename=None` and lowers the console level to DEBUG for `--verbose`,
    which prints the full token trace of a parse.

    Any handlers already on the root logger are replaced.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one
            JSON object per record. Falls back on `ARGWEAVE_LOG_MODE`, then on
            "json" inside a container and "cli" elsewhere.
        log_filename (str | None): File that also receives records. `None`
            keeps logging on the console only.
        json_log_to_file (bool): Write the file as JSON instead of text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv("ARGWEAVE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("argweave")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
