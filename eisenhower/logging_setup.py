"""
FILE: eisenhower/logging_setup.py
PURPOSE: Logging configuration for the CLI and REPL
EXPORTS:
  - setup_logging(log_dir, verbose) -> None
DEPENDENCIES:
  - logging (stdlib)
NOTES:
  - Console handler goes to stderr so --json output on stdout stays clean
  - Console shows WARNING+ by default, DEBUG with --verbose
  - File handler keeps everything from eisenhower.* at DEBUG
  - Call once, before the first command runs
"""

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "eisenhower.log"

_FORMAT = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive console readable:
    - allow eisenhower logs at the handler's level
    - third-party and py.warnings only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "eisenhower" or record.name.startswith("eisenhower."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(log_dir=None, verbose: bool = False) -> None:
    """
    Configure the eisenhower logger.

    Args:
        log_dir: Directory for eisenhower.log (None = console only)
        verbose: Show DEBUG messages on the console
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates
    for handler in list(root.handlers):
        if getattr(handler, "_eisenhower", False):
            root.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(_FORMAT)
    console.addFilter(_ConsoleNoiseFilter())
    console._eisenhower = True
    root.addHandler(console)

    if log_dir is not None:
        log_dir = Path(log_dir)
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
        except OSError as e:
            logging.getLogger(__name__).warning("File logging disabled: %s", e)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(_FORMAT)
            file_handler.addFilter(_ConsoleNoiseFilter())
            file_handler._eisenhower = True
            root.addHandler(file_handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
