# geomath/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – объект logging.Logger пакета
    * init_logger – включить вывод логов
    * Config      – конфигурация библиотеки
"""

from .logger import logger, init_logger
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "init_logger", "Config", "DEFAULT_CONFIG"]
