"""Logging setup shared by the web application and scripts.

Both the server and the scripts write to the same daily rotating log file,
so a failed article load shows up in one place no matter who triggered it.
"""
import logging
import logging.handlers
import sys
from datetime import datetime
import pytz
from app.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ESTFormatter(logging.Formatter):
    """Formatter that converts time to Eastern Time."""
    def __init__(self, fmt=None, datefmt=None):
        super().__init__(fmt, datefmt)
        self.eastern = pytz.timezone('America/New_York')

    def formatTime(self, record, datefmt=None):
        """Format time in EST timezone."""
        ct = datetime.fromtimestamp(record.created, tz=self.eastern)
        if datefmt:
            s = ct.strftime(datefmt)
        else:
            t = ct.strftime("%Y-%m-%d %H:%M:%S")
            s = f"{t} EST"
        return s


def _file_handler() -> logging.Handler:
    log_file = LOG_DIR / "articles.log"
    handler = logging.handlers.TimedRotatingFileHandler(
        log_file,
        when='midnight',
        interval=1,
        backupCount=30,  # Keep 30 days of logs
        encoding='utf-8'
    )
    handler.setFormatter(ESTFormatter(LOG_FORMAT))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ESTFormatter(LOG_FORMAT))
    return handler


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach file and console handlers to the root logger.

    Safe to call more than once: handlers are only added when the root
    logger has none yet.

    Args:
        level: Log level name (default: LOG_LEVEL from config)

    Returns:
        The root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        root_logger.addHandler(_file_handler())
        root_logger.addHandler(_console_handler())

    return root_logger


def setup_script_logger(name: str = "script") -> logging.Logger:
    """Setup a logger for scripts that writes to the main log file.

    Args:
        name: Logger name (default: "script")

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if they already exist
    if logger.handlers:
        return logger

    logger.setLevel(LOG_LEVEL)
    logger.addHandler(_file_handler())
    logger.addHandler(_console_handler())

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    return logger
