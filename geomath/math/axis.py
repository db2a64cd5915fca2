# geomath/math/axis.py
"""
Именованные индексы компонент и правило обработки индекса.

По умолчанию индекс вне диапазона молча указывает на последнюю
компоненту (v[7] – это z у Vec3 и w у Vec4). При ``strict_indexing``
в конфигурации вместо этого поднимается IndexError.
"""

import operator
from enum import IntEnum

from geomath.utils.config import Config


_config = Config()


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2
    W = 3


class QuatPart(IntEnum):
    S = 0
    I = 1
    J = 2
    K = 3


def component_index(i, size: int) -> int:
    i = operator.index(i)
    if 0 <= i < size:
        return i
    if _config.strict_indexing:
        raise IndexError(f"component index {i} out of range for size {size}")
    return size - 1
