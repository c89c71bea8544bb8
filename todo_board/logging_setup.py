"""Logging configuration shared by the server and the board client."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that are too chatty at INFO for an interactive console.
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: int | str = logging.INFO, console: Console | None = None) -> None:
    """Install a single rich handler on the root logger.

    Call this once, early. Calling it again replaces the previous handler
    instead of stacking a second one.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
