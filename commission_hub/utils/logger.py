# commission_hub/utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
import os


def setup_logger(name: str, log_file: str, level=logging.INFO):
    """
    Create a logger that rotates its log file every midnight

    Args:
        name: logger name
        log_file: path of the log file
        level: log level

    Returns:
        logging.Logger: the configured logger
    """
    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # handlers are attached once per process
    if not logger.handlers:
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=30,
            encoding='utf-8'
        )
        file_handler.setLevel(level)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    return logger


app_logger = setup_logger("commission_hub", os.getenv("LOG_FILE", "logs/app.log"))
