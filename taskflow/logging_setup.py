# taskflow/logging_setup.py

import logging
import sys


# Third-party loggers that are only interesting when something goes wrong
_NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy", "passlib")


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root logger with a single stderr handler.
    Call this once at startup, before the first log line.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
