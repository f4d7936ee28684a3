"""
Core math: скалярные примитивы и комплексные числа

Все функции следуют IEEE-754: NaN/Inf являются значениями, а не ошибками.
"""

# Scalar math
from sptk.core.math.scalar_math import (
    FrexpResult,
    acosh,
    asinh,
    atanh,
    ceil_to,
    fix,
    floor_to,
    frexp,
    hypot,
    is_close,
    is_valid_float,
    logb,
    rem,
    round_even,
)

# Complex numbers
from sptk.core.math.complex_number import (
    TAN_IMAG_SATURATION,
    Complex,
    ComplexLike,
    MutableComplex,
)

__all__ = [
    # Scalar math
    "FrexpResult",
    "acosh",
    "asinh",
    "atanh",
    "ceil_to",
    "fix",
    "floor_to",
    "frexp",
    "hypot",
    "is_close",
    "is_valid_float",
    "logb",
    "rem",
    "round_even",
    # Complex numbers
    "TAN_IMAG_SATURATION",
    "Complex",
    "ComplexLike",
    "MutableComplex",
]
