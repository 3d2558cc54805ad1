# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console and file logging setup.

Usage::

    from hdrsweep.common.config import LoggingConfig
    from hdrsweep.common.logging import setup_rich_logging

    setup_rich_logging(LoggingConfig(log_level="DEBUG"))
"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console, ConsoleRenderable, Group
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.text import Text
from rich.traceback import Traceback

from hdrsweep.common.config import LoggingConfig
from hdrsweep.common.hdrsweep_logger import HdrSweepLogger

_logger = HdrSweepLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_rich_logging(config: LoggingConfig) -> None:
    """Set up rich console logging (and an optional file copy) on the root logger."""
    level = str(config.log_level).upper()
    logging.root.setLevel(level)

    # Remove all existing handlers to avoid duplicate logs
    for existing_handler in logging.root.handlers[:]:
        logging.root.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=config.rich_tracebacks,
        show_path=False,
        console=Console(stderr=True),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    logging.root.addHandler(rich_handler)

    if config.log_file is not None:
        logging.root.addHandler(create_file_handler(config.log_file, level))

    _logger.debug(lambda: f"Logging initialized with level: {level}")


def create_file_handler(log_file: Path, level: str | int) -> logging.FileHandler:
    """Configure a plain-text file handler for logging."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return file_handler


class LogHighlighter(RegexHighlighter):
    """Highlights numbers, rates, percentiles and quoted names in log messages."""

    base_style = "repr."
    highlights = [
        r"(?P<number>(?<![.\w])-?\d+\.?\d*(?:e[+-]?\d+)?(?:ns|us|ms|s)?\b)",
        r"(?P<str>'[^']*'|\"[^\"]*\")",
        r"\b(?P<bool_true>True)\b|\b(?P<bool_false>False)\b|\b(?P<none>None)\b",
        r"(?P<brace>[\[\](){}])",
    ]


class CustomRichHandler(RichHandler):
    """Rich logging handler with a compact single-line format.

    Example::

        HH:MM:SS.mmm LEVEL    message content (logger_name:lineno)
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "NOTICE": "blue",
        "WARNING": "yellow",
        "SUCCESS": "green",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.highlighter = LogHighlighter()

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")
        message = Text(record.getMessage())
        self.highlighter.highlight(message)

        formatted_log = Text.assemble(
            Text(f"{timestamp} ", style="log.time"),
            Text(f"{record.levelname:<8} ", style=level_style),
            message,
            Text(f" ({record.name}:{record.lineno})", style="dim italic"),
        )
        return Group(formatted_log, traceback) if traceback else formatted_log
