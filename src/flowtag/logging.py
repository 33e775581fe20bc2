import logging
import sys
import json


def get_logger(name: str = __name__) -> logging.Logger:
    """Return a JSON-configured logger writing to ``stderr``.

    Reuses existing handlers to avoid duplicates when called multiple times.
    Diagnostics go to ``stderr`` so the CLI's stdout only carries its
    confirmation line.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    fmt = json.dumps(
        {
            "ts": "%(asctime)s",
            "lvl": "%(levelname)s",
            "mod": "%(name)s",
            "msg": "%(message)s",
        }
    )
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def set_log_level(level: str | int) -> None:
    """Apply ``level`` to every logger already created under ``flowtag``."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    for name, obj in logging.root.manager.loggerDict.items():
        if name.startswith("flowtag") and isinstance(obj, logging.Logger):
            obj.setLevel(level)
