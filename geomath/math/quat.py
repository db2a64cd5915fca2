# geomath/math/quat.py
# ---------------------------------------------------------------
# Кватернионы (s, i, j, k) с поддержкой:
# - создания из оси/угла и из углов Эйлера,
# - произведения Гамильтона, сопряжения и обращения,
# - нормализации,
# - преобразования в 4×4 матрицу поворота,
# - поворота вектора.
# Нормализация не выполняется неявно: только to_matrix() работает
# с нормированной копией.
# ---------------------------------------------------------------

import numpy as np

from geomath.math.axis import component_index
from geomath.math.tmath import (
    resolve_dtype, is_scalar, ieee754, tsqrt, tsin, tcos, format_scalar, format_fixed,
)
from geomath.math.vec3 import Vec3
from geomath.math.mat4 import Mat4
from geomath.utils.logger import logger


class Quat:
    __slots__ = ("_q",)

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, s=1.0, i=0.0, j=0.0, k=0.0, dtype=None):
        self._q = np.array([s, i, j, k], dtype=resolve_dtype(dtype))

    @classmethod
    def _from_array(cls, values, dtype) -> "Quat":
        obj = cls.__new__(cls)
        obj._q = np.array(values, dtype=dtype)
        return obj

    @staticmethod
    def from_vector(s, v: Vec3, dtype=None) -> "Quat":
        """Кватернион (s, v.x, v.y, v.z)."""
        return Quat(s, v.x, v.y, v.z, dtype=v.dtype if dtype is None else dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._q.dtype

    @property
    def s(self):
        return self._q[0]

    @s.setter
    def s(self, value):
        self._q[0] = value

    @property
    def i(self):
        return self._q[1]

    @i.setter
    def i(self, value):
        self._q[1] = value

    @property
    def j(self):
        return self._q[2]

    @j.setter
    def j(self, value):
        self._q[2] = value

    @property
    def k(self):
        return self._q[3]

    @k.setter
    def k(self, value):
        self._q[3] = value

    # 0 → s, 1 → i, 2 → j, остальное → k
    def __getitem__(self, n):
        return self._q[component_index(n, 4)]

    def __setitem__(self, n, value):
        self._q[component_index(n, 4)] = value

    def __len__(self) -> int:
        return 4

    def __iter__(self):
        return iter(self._q)

    # -----------------------------------------------------------
    #  Арифметика как над четвёркой чисел
    # -----------------------------------------------------------
    def __add__(self, other: "Quat") -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        with ieee754():
            return Quat._from_array(self._q + other._q, self.dtype)

    def __sub__(self, other: "Quat") -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        with ieee754():
            return Quat._from_array(self._q - other._q, self.dtype)

    def __neg__(self) -> "Quat":
        return Quat._from_array(-self._q, self.dtype)

    def __truediv__(self, scalar) -> "Quat":
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            return Quat._from_array(self._q / self.dtype.type(scalar), self.dtype)

    def __rmul__(self, scalar) -> "Quat":
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            return Quat._from_array(self._q * scalar, self.dtype)

    def __iadd__(self, other: "Quat") -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        with ieee754():
            self._q += other._q
        return self

    def __isub__(self, other: "Quat") -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        with ieee754():
            self._q -= other._q
        return self

    def __itruediv__(self, scalar) -> "Quat":
        if not is_scalar(scalar):
            return NotImplemented
        with ieee754():
            self._q /= self.dtype.type(scalar)
        return self

    # -----------------------------------------------------------
    #  Произведение Гамильтона
    # -----------------------------------------------------------
    def _hamilton(self, other: "Quat") -> np.ndarray:
        s, i, j, k = self._q
        bs, bi, bj, bk = other._q.astype(self.dtype)
        with ieee754():
            return np.array([
                s * bs - i * bi - j * bj - k * bk,
                s * bi + i * bs + j * bk - k * bj,
                s * bj + j * bs + k * bi - i * bk,
                s * bk + k * bs + i * bj - j * bi,
            ], dtype=self.dtype)

    def __mul__(self, other):
        """
        q * b – произведение Гамильтона (сначала поворот b, затем q);
        q * число – масштабирование всех компонент.
        """
        if isinstance(other, Quat):
            return Quat._from_array(self._hamilton(other), self.dtype)
        if is_scalar(other):
            with ieee754():
                return Quat._from_array(self._q * other, self.dtype)
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, Quat):
            self._q[:] = self._hamilton(other)
            return self
        if is_scalar(other):
            with ieee754():
                self._q *= other
            return self
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    # -----------------------------------------------------------
    #  Сопряжение, обращение, норма
    # -----------------------------------------------------------
    def conjugate(self) -> "Quat":
        s, i, j, k = self._q
        return Quat._from_array([s, -i, -j, -k], self.dtype)

    __invert__ = conjugate

    def dot(self, other: "Quat"):
        with ieee754():
            return self.dtype.type(np.dot(self._q, other._q.astype(self.dtype)))

    def inverse(self) -> "Quat":
        """Полное обращение: сопряжённый, делённый на квадрат нормы."""
        d = self.dot(self)
        if d == 0:
            logger.debug("[Quat] inverse() of a zero quaternion")
        return self.conjugate() / d

    def norm(self):
        return tsqrt(self.dot(self))

    def normalize(self) -> "Quat":
        n = self.norm()
        if n == 0:
            logger.debug("[Quat] normalize() of a zero quaternion")
        self /= n
        return self

    def normal(self) -> "Quat":
        return self.copy().normalize()

    # -----------------------------------------------------------
    #  Преобразования
    # -----------------------------------------------------------
    def to_matrix(self) -> Mat4:
        """4×4 матрица поворота (нормированная копия, без переноса)."""
        s, i, j, k = self.normal()._q
        t = self.dtype.type
        one, two = t(1), t(2)
        res = Mat4(dtype=self.dtype)
        a = res.a
        with ieee754():
            a[0] = one - two * j * j - two * k * k
            a[1] = two * i * j + two * k * s
            a[2] = two * i * k - two * j * s
            a[3] = 0

            a[4] = two * i * j - two * k * s
            a[5] = one - two * i * i - two * k * k
            a[6] = two * j * k + two * i * s
            a[7] = 0

            a[8] = two * i * k + two * j * s
            a[9] = two * j * k - two * i * s
            a[10] = one - two * i * i - two * j * j
            a[11] = 0

            a[12] = 0
            a[13] = 0
            a[14] = 0
            a[15] = 1
        return res

    def rotate(self, v: Vec3) -> Vec3:
        """Повернуть вектор `v` (через матрицу поворота)."""
        return self.to_matrix() * v

    @staticmethod
    def axis_angle(angle, axis: Vec3, dtype=None) -> "Quat":
        """
        Поворот на `angle` радиан вокруг `axis`.
        Ось не нормируется: для неединичной оси результат не является поворотом.
        """
        dt = axis.dtype if dtype is None else resolve_dtype(dtype)
        half = dt.type(angle) / dt.type(2)
        return Quat.from_vector(tcos(half, dt), axis * tsin(half, dt), dtype=dt)

    @staticmethod
    def euler(angles: Vec3, dtype=None) -> "Quat":
        """Углы Эйлера в радианах: yaw (Y), затем pitch (X), затем roll (Z)."""
        dt = angles.dtype if dtype is None else resolve_dtype(dtype)
        return (
            Quat.axis_angle(angles.y, Vec3(0, 1, 0, dtype=dt)) *
            Quat.axis_angle(angles.x, Vec3(1, 0, 0, dtype=dt)) *
            Quat.axis_angle(angles.z, Vec3(0, 0, 1, dtype=dt))
        )

    def to_float(self) -> "Quat":
        return Quat._from_array(self._q, np.float32)

    def isclose(self, other: "Quat", rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        return bool(np.allclose(self._q, other._q, rtol=rtol, atol=atol))

    def copy(self) -> "Quat":
        return Quat._from_array(self._q, self.dtype)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def as_np(self) -> np.ndarray:
        return self._q.copy()

    def __str__(self):
        s, i, j, k = (format_scalar(c) for c in self._q)
        return f"[{s} + i{i} + j{j} + k{k}]"

    def __repr__(self):
        return "Quat(" + ", ".join(format_fixed(c) for c in self._q) + ")"
