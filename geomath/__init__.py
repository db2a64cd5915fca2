"""
geomath – векторы 3D/4D, матрицы 4×4 и кватернионы
с выбираемой точностью (float32 / float64 / longdouble).
"""

from geomath.utils import logger, init_logger, Config
from geomath.math import (
    Axis, QuatPart, Vec3, Vec4, Mat4, Quat, resolve_dtype,
)

__version__ = "1.0.0"

__all__ = [
    "logger",
    "init_logger",
    "Config",
    "Axis",
    "QuatPart",
    "Vec3",
    "Vec4",
    "Mat4",
    "Quat",
    "resolve_dtype",
]
