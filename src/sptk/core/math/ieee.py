"""
IEEE-754 Primitives — float64 операции без исключений

Модуль math стандартной библиотеки бросает исключения там, где IEEE-754
предписывает результат-значение:
- math.log(0.0) → ValueError (IEEE: -inf)
- math.exp(1000.0) → OverflowError (IEEE: inf)
- 1.0 / 0.0 → ZeroDivisionError (IEEE: inf)
- math.cos(inf) → ValueError (IEEE: nan)

Функции этого модуля вычисляют те же значения через numpy ufunc в контексте
np.errstate(all="ignore") и возвращают обычный float. Исключительные результаты
(NaN/±Inf) являются данными и распространяются дальше.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключение для float входов
2. Результат всегда Python float (или list[float] для массивов)
"""

from collections.abc import Sequence

import numpy as np


def _scalar(ufunc: np.ufunc, *args: float) -> float:
    with np.errstate(all="ignore"):
        return float(ufunc(*args))


def apply_ufunc(ufunc: np.ufunc, *operands: Sequence[float] | float) -> list[float]:
    """
    Поэлементное применение ufunc к массивам float64.

    Args:
        ufunc: numpy ufunc (np.sin, np.divide, ...)
        *operands: Массивы (одинаковой длины) или скаляры

    Returns:
        Новый list[float] той же длины, что и входные массивы
    """
    arrays = [np.asarray(operand, dtype=np.float64) for operand in operands]
    with np.errstate(all="ignore"):
        return np.atleast_1d(ufunc(*arrays)).tolist()


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def divide(a: float, b: float) -> float:
    """
    Деление a / b по правилам IEEE-754.

    Examples:
        >>> divide(1.0, 0.0)
        inf
        >>> divide(0.0, 0.0)
        nan
    """
    return _scalar(np.divide, a, b)


def power(base: float, exponent: float) -> float:
    return _scalar(np.power, base, exponent)


def sqrt(x: float) -> float:
    return _scalar(np.sqrt, x)


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМЫ
# =============================================================================


def exp(x: float) -> float:
    return _scalar(np.exp, x)


def log(x: float) -> float:
    return _scalar(np.log, x)


def log2(x: float) -> float:
    return _scalar(np.log2, x)


def log10(x: float) -> float:
    return _scalar(np.log10, x)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(x: float) -> float:
    return _scalar(np.sin, x)


def cos(x: float) -> float:
    return _scalar(np.cos, x)


def tan(x: float) -> float:
    return _scalar(np.tan, x)


def atan2(y: float, x: float) -> float:
    return _scalar(np.arctan2, y, x)


def sinh(x: float) -> float:
    return _scalar(np.sinh, x)


def cosh(x: float) -> float:
    return _scalar(np.cosh, x)


def tanh(x: float) -> float:
    return _scalar(np.tanh, x)
