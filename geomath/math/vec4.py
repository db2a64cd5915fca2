# geomath/math/vec4.py
"""
4‑мерный (однородный) вектор: w = 1 – точка, w = 0 – направление.
"""

import numpy as np
from typing import Tuple

from geomath.math.axis import component_index
from geomath.math.tmath import resolve_dtype, is_scalar, ieee754, tsqrt, format_scalar, format_fixed
from geomath.math.vec3 import Vec3
from geomath.utils.logger import logger


class Vec4:
    """Однородная координата или просто четвёрка чисел."""

    __slots__ = ("_v",)

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0, dtype=None):
        self._v = np.array([x, y, z, w], dtype=resolve_dtype(dtype))

    @classmethod
    def _from_array(cls, values, dtype) -> "Vec4":
        obj = cls.__new__(cls)
        obj._v = np.array(values, dtype=dtype)
        return obj

    @classmethod
    def from_vec3(cls, v: Vec3, w=1.0) -> "Vec4":
        """Однородная координата из Vec3 (по умолчанию – точка, w = 1)."""
        return cls(v.x, v.y, v.z, w, dtype=v.dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._v.dtype

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self):
        return self._v[0]

    @x.setter
    def x(self, value) -> None:
        self._v[0] = value

    @property
    def y(self):
        return self._v[1]

    @y.setter
    def y(self, value) -> None:
        self._v[1] = value

    @property
    def z(self):
        return self._v[2]

    @z.setter
    def z(self, value) -> None:
        self._v[2] = value

    @property
    def w(self):
        return self._v[3]

    @w.setter
    def w(self, value) -> None:
        self._v[3] = value

    def __getitem__(self, i):
        return self._v[component_index(i, 4)]

    def __setitem__(self, i, value):
        self._v[component_index(i, 4)] = value

    def __len__(self) -> int:
        return 4

    def __iter__(self):
        return iter(self._v)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        with ieee754():
            return Vec4._from_array(self._v + other._v, self.dtype)

    def __sub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        with ieee754():
            return Vec4._from_array(self._v - other._v, self.dtype)

    def __neg__(self) -> "Vec4":
        return Vec4._from_array(-self._v, self.dtype)

    def __mul__(self, scalar) -> "Vec4":
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            return Vec4._from_array(self._v * scalar, self.dtype)

    __rmul__ = __mul__

    def __truediv__(self, scalar) -> "Vec4":
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            return Vec4._from_array(self._v / self.dtype.type(scalar), self.dtype)

    def __iadd__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        with ieee754():
            self._v += other._v
        return self

    def __isub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        with ieee754():
            self._v -= other._v
        return self

    def __imul__(self, scalar) -> "Vec4":
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            self._v *= scalar
        return self

    def __itruediv__(self, scalar) -> "Vec4":
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            self._v /= self.dtype.type(scalar)
        return self

    def __eq__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other: "Vec4"):
        """Скалярное произведение по всем четырём компонентам."""
        with ieee754():
            return self.dtype.type(np.dot(self._v, other._v.astype(self.dtype)))

    def cross(self, other: "Vec4") -> "Vec4":
        """
        Векторное произведение по x, y, z; w берётся из self без изменений.
        Это не 4‑мерное обобщение, а удобство для однородных координат.
        """
        with ieee754():
            xyz = np.cross(self._v[:3], other._v[:3])
        return Vec4._from_array([xyz[0], xyz[1], xyz[2], self._v[3]], self.dtype)

    def norm(self):
        """Евклидова длина."""
        return tsqrt(self.dot(self))

    def normalize(self) -> "Vec4":
        n = self.norm()
        if n == 0:
            logger.debug("[Vec4] normalize() of a zero-length vector")
        self /= n
        return self

    def normal(self) -> "Vec4":
        """Нормализованная копия."""
        return self.copy().normalize()

    def to_vec3(self) -> Vec3:
        """Отбросить w."""
        return Vec3._from_array(self._v[:3], self.dtype)

    def to_float(self) -> "Vec4":
        return Vec4._from_array(self._v, np.float32)

    def isclose(self, other: "Vec4", rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        return bool(np.allclose(self._v, other._v, rtol=rtol, atol=atol))

    def copy(self) -> "Vec4":
        return Vec4._from_array(self._v, self.dtype)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray."""
        return self._v.copy()

    # -----------------------------------------------------------------
    # приведение к кортежу (удобно для передачи в графические API)
    # -----------------------------------------------------------------
    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        return "[" + " ".join(format_scalar(c) for c in self._v) + "]"

    def __repr__(self) -> str:
        return "Vec4(" + ", ".join(format_fixed(c) for c in self._v) + ")"
