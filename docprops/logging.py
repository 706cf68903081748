# refer - https://loguru.readthedocs.io/en/stable/api/logger.html
import sys
from typing import Optional

from loguru import logger

logger.remove() # remove default stuff

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

logger.configure(extra={"name": "docprops"})

_console_sink_id = logger.add(
    sys.stderr,
    format=CONSOLE_FORMAT,
    level="INFO",
    colorize=True,
)


# Function to get logger with context
def get_logger(name: Optional[str] = None):
    if name:
        return logger.bind(name=name)
    return logger


def add_log_file(filepath: str, level: str = "INFO", **kwargs):
    kwargs.setdefault("format", FILE_FORMAT)
    return logger.add(filepath, level=level, **kwargs)


def set_log_level(level: str):
    global _console_sink_id
    logger.remove(_console_sink_id)
    _console_sink_id = logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)
