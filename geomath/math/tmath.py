# geomath/math/tmath.py
# ---------------------------------------------------------------
# Скалярный адаптер: выбор точности (float32 / float64 / longdouble)
# и sqrt, sin, cos, tan, вычисляемые в этой точности.
# NaN/Inf распространяются по IEEE 754 без исключений и warning'ов.
# ---------------------------------------------------------------

import numbers

import numpy as np

from geomath.utils.config import Config

SUPPORTED_DTYPES = (
    np.dtype(np.float32),
    np.dtype(np.float64),
    np.dtype(np.longdouble),
)

_ALIASES = {
    "float32": np.float32,
    "single": np.float32,
    "float64": np.float64,
    "double": np.float64,
    "longdouble": np.longdouble,
    "extended": np.longdouble,
}


def resolve_dtype(dtype=None) -> np.dtype:
    """
    Привести описание точности к numpy.dtype.

    None – точность по умолчанию из конфигурации (ключ ``precision``).
    Принимаются numpy‑типы/dtype и имена из ``_ALIASES``.
    Целочисленные и прочие не‑float типы – TypeError.
    """
    if dtype is None:
        dtype = Config()["precision"]
    if isinstance(dtype, str) and dtype.lower() in _ALIASES:
        dtype = _ALIASES[dtype.lower()]
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise TypeError(f"unsupported precision: {dtype!r}") from exc
    if dt not in SUPPORTED_DTYPES:
        raise TypeError(f"unsupported precision: {dt}")
    return dt


def is_scalar(value) -> bool:
    """True для python/numpy‑чисел (но не для векторов и массивов)."""
    return isinstance(value, numbers.Real)


def ieee754():
    """Контекст, в котором деление на ноль и NaN не порождают warning'ов."""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def _scalar(x, dtype):
    if dtype is None and isinstance(x, np.floating):
        return resolve_dtype(x.dtype).type(x)
    return resolve_dtype(dtype).type(x)


def tsqrt(x, dtype=None):
    with ieee754():
        return np.sqrt(_scalar(x, dtype))


def tsin(x, dtype=None):
    with ieee754():
        return np.sin(_scalar(x, dtype))


def tcos(x, dtype=None):
    with ieee754():
        return np.cos(_scalar(x, dtype))


def ttan(x, dtype=None):
    with ieee754():
        return np.tan(_scalar(x, dtype))


def _as_numpy_scalar(value):
    # без float(): longdouble за пределами диапазона double не должен стать inf
    if isinstance(value, np.floating):
        return value
    return np.float64(value)


def format_scalar(value) -> str:
    """
    Печать компоненты в стиле %g (число значащих цифр – из конфигурации),
    в точности самой компоненты.
    """
    value = _as_numpy_scalar(value)
    digits = max(int(Config()["print_precision"]), 1)
    if not np.isfinite(value):
        return np.format_float_positional(value)
    sci = np.format_float_scientific(
        value, precision=digits - 1, unique=False, trim="-", exp_digits=2,
    )
    exponent = int(sci.rsplit("e", 1)[1])
    if -4 <= exponent < digits:
        return np.format_float_positional(
            value, precision=digits, unique=False, fractional=False, trim="-",
        )
    return sci


def format_fixed(value, decimals: int = 3) -> str:
    """Фиксированное число знаков после запятой (для repr)."""
    return np.format_float_positional(
        _as_numpy_scalar(value), precision=decimals, unique=False, trim="k",
    )
