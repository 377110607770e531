import logging
import sys

from app.constants.environmental_variables import LOG_LEVEL

APP_LOGGERS = ["", "uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "starlette"]

# Client libraries that log every request at INFO.
QUIET_LOGGERS = ["httpx", "httpcore", "openai", "pymongo", "gradio"]


def setup_logging(level: str = LOG_LEVEL) -> None:
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    for logger_name in APP_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.handlers = [handler]
        logger.setLevel(level.upper())
        logger.propagate = False

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
