from __future__ import annotations

import logging
import os
import sys
from typing import Literal

import coloredlogs  # type: ignore[import]

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: LogLevel | None = None) -> None:
    # stdout is reserved for sweep output
    resolved = (level or os.environ.get("LOGLEVEL", "WARNING")).upper()

    coloredlogs.install(
        level=resolved,
        fmt=DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
        stream=sys.stderr,
    )

    logging.getLogger("dns").setLevel(logging.WARNING)
