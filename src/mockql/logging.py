import logging
import sys

FORMATTER = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def get_console_handler():
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(FORMATTER)
    return console_handler


def get_logger(logger_name, level=logging.ERROR):
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if not logger.handlers:
        logger.addHandler(get_console_handler())

    logger.propagate = False
    return logger


mockql_logger = get_logger("mockql")
