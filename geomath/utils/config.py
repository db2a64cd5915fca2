"""
Конфигурация библиотеки в формате JSON.
В отличие от движка файл не создаётся сам: он читается и пишется
только по явному вызову load()/save().
"""

import json
import threading
from pathlib import Path
from geomath.utils.logger import logger

DEFAULT_CONFIG = {
    "precision": "float64",
    "print_precision": 6,
    "strict_indexing": False,
    "log_level": "WARNING",
}


class Config:
    """
    Singleton‑подобный объект конфигурации.

    Файл читается только при первом создании: Config(path) на уже
    созданном объекте его не перечитывает (для этого есть load()).
    """
    _instance = None
    _lock = threading.Lock()

    def __new__(cls, path=None):
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance.path = None
                instance._set_data(DEFAULT_CONFIG.copy())
                if path is not None:
                    instance.load(path)
                cls._instance = instance
            elif path is not None:
                logger.debug(f"[Config] Already initialised – {path} not re-read, use load().")
        return cls._instance

    def _set_data(self, data):
        self.data = data
        self._refresh()

    def _refresh(self):
        # горячий путь: индексирование компонент читает готовый флаг
        self.strict_indexing = bool(self.data.get("strict_indexing", False))

    def load(self, path):
        self.path = Path(path)
        if not self.path.is_file():
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
            self._set_data(DEFAULT_CONFIG.copy())
            return self
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError("top-level JSON value must be an object")
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            self._set_data(DEFAULT_CONFIG.copy())
            return self
        unknown = set(loaded) - set(DEFAULT_CONFIG)
        if unknown:
            logger.warning(f"[Config] Ignoring unknown keys: {sorted(unknown)}")
        data = DEFAULT_CONFIG.copy()
        data.update({k: v for k, v in loaded.items() if k in DEFAULT_CONFIG})
        self._set_data(data)
        logger.info("[Config] Loaded configuration.")
        return self

    def save(self, path=None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("no path to save the configuration to")
        with target.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        self.path = target
        logger.info("[Config] Configuration saved.")

    def reset(self):
        """Вернуть значения по умолчанию (файл не трогается)."""
        self.path = None
        self._set_data(DEFAULT_CONFIG.copy())

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self._refresh()

    def get(self, key, default=None):
        return self.data.get(key, default)
