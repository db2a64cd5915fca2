# geomath/math/vec3.py
"""
Трёхмерный вектор на базе NumPy с выбираемой точностью (float32/float64/longdouble).
"""

import numpy as np
from typing import Tuple

from geomath.math.axis import component_index
from geomath.math.tmath import resolve_dtype, is_scalar, ieee754, tsqrt, format_scalar, format_fixed
from geomath.utils.logger import logger


class Vec3:
    """Точка или направление в трёхмерном пространстве."""

    __slots__ = ("_v",)

    # numpy‑скаляры должны отдавать операцию нам: np.float32(2) * v
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0, dtype=None):
        self._v = np.array([x, y, z], dtype=resolve_dtype(dtype))

    @classmethod
    def _from_array(cls, values, dtype) -> "Vec3":
        obj = cls.__new__(cls)
        obj._v = np.array(values, dtype=dtype)
        return obj

    @property
    def dtype(self) -> np.dtype:
        return self._v.dtype

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self):
        return self._v[0]

    @x.setter
    def x(self, value):
        self._v[0] = value

    @property
    def y(self):
        return self._v[1]

    @y.setter
    def y(self, value):
        self._v[1] = value

    @property
    def z(self):
        return self._v[2]

    @z.setter
    def z(self, value):
        self._v[2] = value

    # 0 → x, 1 → y, всё остальное → z
    def __getitem__(self, i):
        return self._v[component_index(i, 3)]

    def __setitem__(self, i, value):
        self._v[component_index(i, 3)] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        return iter(self._v)

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        with ieee754():
            return Vec3._from_array(self._v + other._v, self.dtype)

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        with ieee754():
            return Vec3._from_array(self._v - other._v, self.dtype)

    def __neg__(self):
        return Vec3._from_array(-self._v, self.dtype)

    def __mul__(self, scalar):
        # Vec3 * Mat4 обрабатывает Mat4.__rmul__
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            return Vec3._from_array(self._v * scalar, self.dtype)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            return Vec3._from_array(self._v / self.dtype.type(scalar), self.dtype)

    # -------------------------------------------------
    # арифметика «на месте»
    # -------------------------------------------------
    def __iadd__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        with ieee754():
            self._v += other._v
        return self

    def __isub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        with ieee754():
            self._v -= other._v
        return self

    def __imul__(self, scalar):
        # v *= m сводится к v = v * m
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            self._v *= scalar
        return self

    def __itruediv__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            self._v /= self.dtype.type(scalar)
        return self

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vec3"):
        """Скалярное произведение x*bx + y*by + z*bz."""
        with ieee754():
            return self.dtype.type(np.dot(self._v, other._v.astype(self.dtype)))

    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение (правая тройка)."""
        with ieee754():
            return Vec3._from_array(np.cross(self._v, other._v), self.dtype)

    def norm(self):
        return tsqrt(self.dot(self))

    def normalize(self) -> "Vec3":
        """
        Нормировать на месте и вернуть self.

        Нулевой вектор не обрабатывается особо: компоненты становятся NaN.
        """
        n = self.norm()
        if n == 0:
            logger.debug("[Vec3] normalize() of a zero-length vector")
        self /= n
        return self

    def normal(self) -> "Vec3":
        return self.copy().normalize()

    def to_float(self) -> "Vec3":
        """Копия в одинарной точности."""
        return Vec3._from_array(self._v, np.float32)

    def isclose(self, other: "Vec3", rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        return bool(np.allclose(self._v, other._v, rtol=rtol, atol=atol))

    def copy(self) -> "Vec3":
        return Vec3._from_array(self._v, self.dtype)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    # -------------------------------------------------
    # представление
    # -------------------------------------------------
    def __str__(self):
        return "[" + " ".join(format_scalar(c) for c in self._v) + "]"

    def __repr__(self):
        return "Vec3(" + ", ".join(format_fixed(c) for c in self._v) + ")"
