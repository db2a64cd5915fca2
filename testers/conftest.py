# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: чистая конфигурация для каждого теста
и детерминированный генератор случайных чисел.
"""

import numpy as np
import pytest

from geomath.utils.config import Config


@pytest.fixture(autouse=True)
def clean_config():
    """Каждый тест начинается со значений по умолчанию."""
    cfg = Config()
    cfg.reset()
    yield cfg
    cfg.reset()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20261019)
