import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger"""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Don't stack handlers when the app is created more than once (tests, reload)
    for handler in root.handlers:
        if getattr(handler, "_levellore", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._levellore = True
    root.addHandler(handler)
