"""
sptk — Численные утилиты: комплексные числа, массивы, полиномы, кусочные функции.

Библиотека не настраивает логирование: к логгеру "sptk" подключён NullHandler,
обработчики добавляет приложение.
"""

import logging

from sptk.constants import DOUBLE_EPS, FLOAT_EPS, TWO_PI
from sptk.core.contracts.dimension_checks import ArrayContractError, DimensionError, ShapeError
from sptk.core.domain.extrapolation import ExtrapolationError, ExtrapolationMethod, OutOfRangeError
from sptk.core.domain.tolerances import Tolerances
from sptk.core.math.complex_number import Complex, MutableComplex
from sptk.functions.piecewise import PiecewiseFunction, PiecewiseLinear
from sptk.functions.polynomial import Polynomial

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Constants
    "DOUBLE_EPS",
    "FLOAT_EPS",
    "TWO_PI",
    # Types
    "Complex",
    "MutableComplex",
    "Polynomial",
    "PiecewiseFunction",
    "PiecewiseLinear",
    "Tolerances",
    "ExtrapolationMethod",
    # Errors
    "ArrayContractError",
    "DimensionError",
    "ShapeError",
    "ExtrapolationError",
    "OutOfRangeError",
]
