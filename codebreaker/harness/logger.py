import os
import logging
from logging.handlers import TimedRotatingFileHandler

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(module)s - %(message)s"


def setup_logger(
    level: int = logging.INFO,
    log_file: str | None = None,
    log_dir: str = "logs",
    name: str = "codebreaker",
    backup_count: int = 7,
) -> logging.Logger:
    """
    Attach console (and optionally rotating file) handlers to the package logger.
    Meant to be called once by an entry point; library modules only call getLogger.
    Args:
        level (int): Logging level for the logger and its handlers.
        log_file (str): Name of the log file inside log_dir. No file handler when None.
        log_dir (str): Directory where log files will be stored. Default is "logs".
        name (str): Logger to configure. Default is the package root.
        backup_count (int): Number of rotated files to keep. Default is 7.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger(name)
    logger.handlers = []
    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_handler = TimedRotatingFileHandler(
            filename=os.path.join(log_dir, log_file),
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug("Logger initialized")
    return logger
