# geomath/math/mat4.py
"""
Матрица 4×4, хранящаяся плоским массивом из 16 чисел по столбцам:
элемент (строка r, столбец c) лежит по индексу r + c*4.
Такой порядок ожидают графические API, поэтому to_gl() отдаёт массив как есть.
"""

import numpy as np

from geomath.math.tmath import resolve_dtype, ieee754, ttan, format_scalar
from geomath.math.vec3 import Vec3
from geomath.math.vec4 import Vec4


class Mat4:
    __slots__ = ("a",)

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, values=None, dtype=None):
        """
        values – None (нулевая матрица), 16 чисел в порядке по столбцам
        или вложенный 4×4 массив вида [строка][столбец].
        """
        dt = resolve_dtype(dtype)
        if values is None:
            self.a = np.zeros(16, dtype=dt)
            return
        arr = np.array(values, dtype=dt)
        if arr.shape == (4, 4):
            arr = arr.reshape(16, order="F")
        elif arr.shape != (16,):
            raise ValueError(f"Mat4 expects 16 values or a 4x4 array, got shape {arr.shape}")
        self.a = arr

    @classmethod
    def _from_flat(cls, values, dtype) -> "Mat4":
        obj = cls.__new__(cls)
        obj.a = np.array(values, dtype=dtype).reshape(16)
        return obj

    @property
    def dtype(self) -> np.dtype:
        return self.a.dtype

    @property
    def _m(self) -> np.ndarray:
        # вид 4×4 на тот же буфер: _m[r, c] is a[r + c*4]
        return self.a.reshape((4, 4), order="F")

    # -----------------------------------------------------------
    #  Доступ к элементам
    # -----------------------------------------------------------
    @staticmethod
    def index(row: int, col: int) -> int:
        """Плоский индекс элемента (row, col). Единственное место, где он вычисляется."""
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"Mat4 element ({row}, {col}) out of range")
        return row + col * 4

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return self.a[Mat4.index(*key)]
        return self.a[key]

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            self.a[Mat4.index(*key)] = value
        else:
            self.a[key] = value

    # -----------------------------------------------------------
    #  Фабрики
    # -----------------------------------------------------------
    @staticmethod
    def zero(dtype=None) -> "Mat4":
        return Mat4(dtype=dtype)

    @staticmethod
    def identity(dtype=None) -> "Mat4":
        return Mat4(dtype=dtype).set_identity()

    @staticmethod
    def translation(x, y=None, z=None, dtype=None) -> "Mat4":
        """translation(x, y, z) или translation(Vec3)."""
        if dtype is None and isinstance(x, Vec3):
            dtype = x.dtype
        return Mat4(dtype=dtype).set_translation(x, y, z)

    @staticmethod
    def perspective(fov, far, near, dtype=None) -> "Mat4":
        """Симметричная перспективная проекция, fov – в градусах."""
        return Mat4(dtype=dtype).set_perspective(fov, far, near)

    @staticmethod
    def from_quat(q) -> "Mat4":
        """Матрица поворота для кватерниона (см. Quat.to_matrix)."""
        return q.to_matrix()

    # -----------------------------------------------------------
    #  Изменение на месте (возвращают self для цепочек)
    # -----------------------------------------------------------
    def set_zero(self) -> "Mat4":
        self.a[:] = 0
        return self

    def set_identity(self) -> "Mat4":
        self.set_zero()
        self.a[0::5] = 1
        return self

    def set_translation(self, x, y=None, z=None) -> "Mat4":
        self.set_identity()
        return self.translate(x, y, z)

    def translate(self, x, y=None, z=None) -> "Mat4":
        """
        Сдвиг столбца переноса с учётом однородного масштаба a[15]:
        a[12] += x*a[15] и т.д. Это не перезапись.
        """
        if isinstance(x, Vec3):
            if y is not None or z is not None:
                raise TypeError("translate() takes either a Vec3 or three scalars")
            x, y, z = x.x, x.y, x.z
        elif y is None or z is None:
            raise TypeError("translate() takes either a Vec3 or three scalars")
        t = self.dtype.type
        w = self.a[15]
        with ieee754():
            self.a[12] += t(x) * w
            self.a[13] += t(y) * w
            self.a[14] += t(z) * w
        return self

    def set_perspective(self, fov, far, near) -> "Mat4":
        t = self.dtype.type
        far, near = t(far), t(near)
        s = ttan(t(fov) * t(np.pi) / t(360), self.dtype)
        self.set_zero()
        with ieee754():
            # X,X и Y,Y
            self.a[0] = t(1) / s
            self.a[5] = t(1) / s
            # Z,Z
            self.a[10] = (far + near) / (far - near)
            # W,Z
            self.a[11] = 1
            # Z,W
            self.a[14] = t(-2) * (far * near) / (far - near)
        return self

    # -----------------------------------------------------------
    #  Сумма и разность
    # -----------------------------------------------------------
    def __add__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        with ieee754():
            return Mat4._from_flat(self.a + other.a, self.dtype)

    def __sub__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        with ieee754():
            return Mat4._from_flat(self.a - other.a, self.dtype)

    def __iadd__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        with ieee754():
            self.a += other.a
        return self

    def __isub__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        with ieee754():
            self.a -= other.a
        return self

    # -----------------------------------------------------------
    #  Произведения
    # -----------------------------------------------------------
    def _product(self, other: "Mat4") -> np.ndarray:
        # c[i + j*4] = Σk a[i + k*4] * b[k + j*4]
        with ieee754():
            c = self._m @ other._m.astype(self.dtype, copy=False)
        return c.reshape(16, order="F")

    def __mul__(self, other):
        """
        M * Mat4 – произведение матриц;
        M * Vec3 – преобразование точки (w = 1, нижняя строка игнорируется);
        M * Vec4 – полное 4×4 преобразование.
        """
        if isinstance(other, Mat4):
            return Mat4._from_flat(self._product(other), self.dtype)
        if isinstance(other, Vec3):
            m = self._m
            with ieee754():
                r = m[:3, :3] @ other.as_np().astype(self.dtype) + m[:3, 3]
            return Vec3._from_array(r, self.dtype)
        if isinstance(other, Vec4):
            with ieee754():
                r = self._m @ other.as_np().astype(self.dtype)
            return Vec4._from_array(r, self.dtype)
        return NotImplemented

    def __rmul__(self, other):
        """
        Вектор‑строка слева: v * M умножает v на столбцы M.
        Для Vec3 добавляется строка 3 (r[i] += a[3 + i*4]).
        """
        if isinstance(other, Vec3):
            m = self._m.astype(other.dtype)
            with ieee754():
                r = other.as_np() @ m[:3, :3] + m[3, :3]
            return Vec3._from_array(r, other.dtype)
        if isinstance(other, Vec4):
            with ieee754():
                r = other.as_np() @ self._m.astype(other.dtype)
            return Vec4._from_array(r, other.dtype)
        return NotImplemented

    __matmul__ = __mul__
    __rmatmul__ = __rmul__

    def __imul__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        self.a[:] = self._product(other)
        return self

    __imatmul__ = __imul__

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.a, other.a))

    # -----------------------------------------------------------
    #  Преобразования
    # -----------------------------------------------------------
    def transposed(self) -> "Mat4":
        return Mat4(self._m.T, dtype=self.dtype)

    def to_float(self) -> "Mat4":
        """Копия всех 16 элементов в одинарной точности."""
        return Mat4._from_flat(self.a, np.float32)

    def isclose(self, other: "Mat4", rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        return bool(np.allclose(self.a, other.a, rtol=rtol, atol=atol))

    def copy(self) -> "Mat4":
        return Mat4._from_flat(self.a, self.dtype)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def to_np(self) -> np.ndarray:
        """Копия в виде 4×4 массива [строка, столбец]."""
        return self._m.copy()

    def to_gl(self) -> np.ndarray:
        """Плоский массив по столбцам (для передачи в OpenGL и т.п.)."""
        return self.a.copy()

    def __str__(self):
        m = self._m
        return "\n".join(
            "[" + " ".join(format_scalar(m[r, c]) for c in range(4)) + "]"
            for r in range(4)
        )

    def __repr__(self):
        return f"Mat4({self.to_np()})"
