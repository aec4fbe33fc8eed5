import logging
from typing import Union

from cri_status.app.config import PROJECT_LOG_LEVEL, ROOT_LOG_LEVEL

log_format = "[%(asctime)s %(levelname)s %(name)s] %(message)s"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.FATAL,
    "critical": logging.CRITICAL,
    "notset": logging.NOTSET,
    "none": logging.NOTSET,
}


def to_log_level(level: Union[str, int]):
    if isinstance(level, int):
        return level
    if not isinstance(level, str):
        return logging.INFO
    return LOG_LEVELS.get(level.lower(), logging.INFO)


def init(project_log_level: Union[str, int] = PROJECT_LOG_LEVEL):
    root_log_level = to_log_level(ROOT_LOG_LEVEL)
    logging.basicConfig(format=log_format, level=root_log_level)
    project_log_level = to_log_level(project_log_level)
    logger = logging.getLogger("cri_status")
    logger.setLevel(project_log_level)
