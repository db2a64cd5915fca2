"""
Математический суб‑пакет: Vec3, Vec4, Mat4, Quat и скалярный адаптер.
"""

from geomath.math.axis import Axis, QuatPart
from geomath.math.tmath import resolve_dtype, tsqrt, tsin, tcos, ttan
from geomath.math.vec3 import Vec3
from geomath.math.vec4 import Vec4
from geomath.math.mat4 import Mat4
from geomath.math.quat import Quat

__all__ = [
    "Axis",
    "QuatPart",
    "resolve_dtype",
    "tsqrt",
    "tsin",
    "tcos",
    "ttan",
    "Vec3",
    "Vec4",
    "Mat4",
    "Quat",
]
