from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "song_browser"


class CallbackHandler(logging.Handler):
    """Forwards formatted records to a callable (the UI log pane)."""

    def __init__(self, sink: Callable[[str], None], level: int = logging.INFO) -> None:
        super().__init__(level)
        self.sink = sink
        self.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s", "%H:%M:%S"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sink(self.format(record))
        except Exception:
            self.handleError(record)


def setup_logger(
    log_file: Optional[Path] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file).expanduser().resolve()
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
        except OSError as e:
            # console only
            logger.warning("Cannot open log file %s: %s", log_file, e)
            return logger
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def attach_sink(sink: Callable[[str], None], level: int = logging.INFO) -> CallbackHandler:
    handler = CallbackHandler(sink, level)
    logging.getLogger(LOGGER_NAME).addHandler(handler)
    return handler


def detach_sink(handler: logging.Handler) -> None:
    logging.getLogger(LOGGER_NAME).removeHandler(handler)
    handler.close()
