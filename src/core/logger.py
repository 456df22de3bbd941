import logging

from src.core.config import settings


class CustomFormatter(logging.Formatter):
    """Console formatter that colours each record by level."""

    grey = "\x1b[37;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    dark_grey = "\x1b[30;1m"
    reset = "\x1b[0m"
    fmt = "[%(levelname)s] %(asctime)s %(name)s - %(message)s"

    FORMATS = {
        logging.DEBUG: dark_grey + fmt + reset,
        logging.INFO: grey + fmt + reset,
        logging.WARNING: yellow + fmt + reset,
        logging.ERROR: red + fmt + reset,
        logging.CRITICAL: bold_red + fmt + reset,
    }

    def format(self, record):
        formatter = logging.Formatter(self.FORMATS.get(record.levelno, self.fmt))
        return formatter.format(record)


_root = logging.getLogger("preptive")
if not _root.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(CustomFormatter())
    _root.addHandler(_handler)
_root.setLevel(settings.LOG_LEVEL.upper())


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger."""
    return _root.getChild(name)
