# geomath/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Библиотека сама ничего не печатает: по умолчанию
# висит NullHandler, а init_logger() включает вывод для отладки.
# ---------------------------------------------------------------

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("geomath")
logger.addHandler(logging.NullHandler())


def init_logger(level=None):
    """Настроить вывод логов (формат как в движке) и вернуть логгер пакета."""
    if level is None:
        from geomath.utils.config import Config
        level = Config()["log_level"]
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return logger
