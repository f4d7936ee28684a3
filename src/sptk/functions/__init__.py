"""
Функции одной переменной: полиномы и кусочные функции
"""

from sptk.functions.piecewise import PiecewiseFunction, PiecewiseLinear
from sptk.functions.polynomial import Polynomial

__all__ = [
    "PiecewiseFunction",
    "PiecewiseLinear",
    "Polynomial",
]
