"""Logging configuration for aichat."""

import logging

from rich.logging import RichHandler
from textual.logging import TextualHandler

_NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def setup_logging(level: str = "warning", tui: bool = False) -> None:
    """Configure the ``aichat`` logger.

    Args:
        level: Level name for aichat logs (debug/info/warning/error)
        tui: Route records to Textual's devtools console instead of the
            terminal, which the TUI owns while it runs
    """
    # Root logger - suppress everything by default
    logging.getLogger().setLevel(logging.WARNING)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    app_logger = logging.getLogger("aichat")
    app_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)

    if tui:
        handler: logging.Handler = TextualHandler()
        handler.setFormatter(logging.Formatter("%(name)s %(levelname)s %(message)s"))
    else:
        handler = RichHandler(
            show_time=False,
            show_path=level.lower() == "debug",
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    app_logger.addHandler(handler)
    app_logger.propagate = False  # Don't propagate to root logger
