"""
Scalar Math — Скалярные численные примитивы

Модуль содержит скалярные функции, на которых строятся Complex и массивы:
- hypot без промежуточного переполнения
- Сравнения float/Complex с абсолютной и относительной толерантностью
- Округление к нулю, остаток от деления, округление к кратному
- Разложение float на мантиссу и двоичный порядок (frexp)
- Обратные гиперболические функции

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметические граничные случаи не бросают исключений: NaN/Inf — это данные
2. hypot(a, b) == hypot(b, a), hypot(a, 0) == |a|
3. Все операции детерминированы и воспроизводимы
"""

import math
import struct
from typing import TYPE_CHECKING, Final, NamedTuple

from sptk.core.domain.tolerances import DEFAULT_TOLERANCES
from sptk.core.math import ieee

if TYPE_CHECKING:
    from sptk.core.math.complex_number import Complex

# Смещение порядка float64 (1023) плюс 52 бита мантиссы:
# мантисса трактуется как целое m.0, а не 0.m
_FREXP_EXPONENT_BIAS: Final[int] = 1075

_MANTISSA_MASK: Final[int] = 0xFFFFFFFFFFFFF
_EXPONENT_MASK: Final[int] = 0x7FF
_IMPLICIT_BIT: Final[int] = 1 << 52


# =============================================================================
# HYPOT
# =============================================================================


def hypot(a: float, b: float) -> float:
    """
    Гипотенуза без промежуточного переполнения/антипереполнения.

    Нормирует на операнд с большим модулем:
        |a| > |b|: r = b / a, результат |a| * sqrt(1 + r^2)
        b != 0:    r = a / b, результат |b| * sqrt(1 + r^2)
        иначе:     0

    Args:
        a: Первый катет
        b: Второй катет

    Returns:
        sqrt(a^2 + b^2)

    Examples:
        >>> hypot(3.0, 4.0)
        5.0
        >>> math.isfinite(hypot(1e300, 1e300))  # a*a переполнился бы
        True
    """
    if abs(a) > abs(b):
        r = b / a
        return abs(a) * math.sqrt(1.0 + r * r)
    elif b != 0:
        r = a / b
        return abs(b) * math.sqrt(1.0 + r * r)
    else:
        return 0.0


# =============================================================================
# СРАВНЕНИЯ С ТОЛЕРАНТНОСТЬЮ
# =============================================================================


def is_close(
    a: "float | Complex",
    b: "float | Complex",
    abs_tol: float | None = None,
    rel_tol: float | None = None,
) -> bool:
    """
    Близость двух чисел с учётом толерантности (семантика numpy.isclose).

    Алгоритм:
        |a - b| <= abs_tol + rel_tol * |b|

    Для Complex модуль разности вычисляется через hypot.

    Иерархия значений по умолчанию:
    - abs_tol и rel_tol заданы → используются как есть
    - задан только abs_tol → rel_tol = 1e-5
    - не задано ничего → abs_tol = 1e-8, rel_tol = 1e-5

    Args:
        a: Первое значение (float или Complex)
        b: Опорное значение (float или Complex)
        abs_tol: Абсолютная толерантность (default: 1e-8)
        rel_tol: Относительная толерантность (default: 1e-5)

    Returns:
        True если значения близки

    Examples:
        >>> is_close(1.0, 1.0000001, abs_tol=1e-8, rel_tol=1e-5)
        True
        >>> is_close(1.0, 2.0)
        False
    """
    if abs_tol is None:
        abs_tol = DEFAULT_TOLERANCES.abs_tol
    if rel_tol is None:
        rel_tol = DEFAULT_TOLERANCES.rel_tol

    # abs() для Complex делегирует в hypot(real, imag)
    return abs(a - b) <= abs_tol + rel_tol * abs(b)


def is_valid_float(value: float) -> bool:
    """Проверка, является ли float конечным (не NaN, не Inf)."""
    return math.isfinite(value)


# =============================================================================
# ОКРУГЛЕНИЕ И ОСТАТОК
# =============================================================================


def fix(x: float) -> float:
    """
    Округление к нулю.

    Returns:
        ceil(x) если x <= 0, иначе floor(x)

    Examples:
        >>> fix(2.7)
        2.0
        >>> fix(-2.7)
        -2.0
    """
    if not math.isfinite(x):
        return x
    return float(math.ceil(x)) if x <= 0 else float(math.floor(x))


def rem(a: float, b: float) -> float:
    """
    Остаток от деления с округлением частного к нулю.

    Returns:
        a - b * fix(a / b); NaN если b == 0

    Examples:
        >>> rem(5.0, 3.0)
        2.0
        >>> rem(-5.0, 3.0)
        -2.0
    """
    if b == 0:
        return math.nan
    return a - b * fix(a / b)


def floor_to(x: float, threshold: float) -> float:
    """
    Округление вниз до ближайшего кратного threshold.

    Examples:
        >>> floor_to(7.3, 0.5)
        7.0
    """
    result = ieee.divide(x, threshold)
    if not math.isfinite(result):
        return result
    return math.floor(result) * threshold


def ceil_to(x: float, threshold: float) -> float:
    """
    Округление вверх до ближайшего кратного threshold.

    Examples:
        >>> ceil_to(7.3, 0.5)
        7.5
    """
    result = ieee.divide(x, threshold)
    if not math.isfinite(result):
        return result
    return math.ceil(result) * threshold


def round_even(d: float) -> float:
    """
    Округление до ближайшего чётного числа.

    Половинные значения d / 2 округляются от нуля.

    Examples:
        >>> round_even(3.0)
        4.0
        >>> round_even(2.9)
        2.0
    """
    half = d / 2
    if not math.isfinite(half):
        return d
    # Стандартное математическое округление (round half away from zero)
    if half >= 0:
        steps = math.floor(half + 0.5)
    else:
        steps = math.ceil(half - 0.5)
    return float(steps * 2)


def logb(x: float, base: int) -> float:
    """Логарифм x по основанию base."""
    return ieee.divide(ieee.log(x), ieee.log(float(base)))


# =============================================================================
# FREXP
# =============================================================================


class FrexpResult(NamedTuple):
    """Мантисса и двоичный порядок: value = mantissa * 2**exponent."""

    mantissa: float
    exponent: int


def frexp(value: float) -> FrexpResult:
    """
    Разложение float на мантиссу и двоичный порядок.

    Для конечного ненулевого value мантисса по модулю лежит в [0.5, 1)
    и несёт знак value. Вычисляется разбором битового представления
    (поддерживаются субнормальные числа).

    Граничные случаи:
    - 0.0 → (0.0, 0)
    - NaN → (NaN, -1)
    - ±Inf → (±Inf, -1)

    Examples:
        >>> frexp(8.0)
        FrexpResult(mantissa=0.5, exponent=4)
        >>> frexp(-3.0)
        FrexpResult(mantissa=-0.75, exponent=2)
    """
    if value == 0.0:
        return FrexpResult(0.0, 0)
    if math.isnan(value):
        return FrexpResult(math.nan, -1)
    if math.isinf(value):
        return FrexpResult(value, -1)

    bits = struct.unpack("<Q", struct.pack("<d", value))[0]
    negative = (bits >> 63) != 0
    exponent = (bits >> 52) & _EXPONENT_MASK
    mantissa = bits & _MANTISSA_MASK

    if exponent == 0:
        # Субнормальное число: неявной единицы нет
        exponent += 1
    else:
        mantissa |= _IMPLICIT_BIT

    exponent -= _FREXP_EXPONENT_BIAS
    real_mantissa = float(mantissa)

    # Нормализация в [0.5, 1)
    while real_mantissa >= 1.0:
        real_mantissa /= 2.0
        exponent += 1

    if negative:
        real_mantissa = -real_mantissa

    return FrexpResult(real_mantissa, exponent)


# =============================================================================
# ОБРАТНЫЕ ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def asinh(x: float) -> float:
    """Обратный гиперболический синус (симметричная log-формула)."""
    if x >= 0:
        return ieee.log(x + ieee.sqrt(x * x + 1.0))
    return -ieee.log(-x + ieee.sqrt(x * x + 1.0))


def acosh(x: float) -> float:
    """Обратный гиперболический косинус; NaN для x < 1."""
    return ieee.log(x + ieee.sqrt(x * x - 1.0))


def atanh(x: float) -> "Complex":
    """
    Обратный гиперболический тангенс.

    Для |x| < 1 результат вещественный: 0.5 * ln((1 + x) / (1 - x)).
    Иначе возвращается комплексное значение atan(i*x) / i. Граница |x| = 1
    не защищается: результат содержит Inf/NaN.

    Returns:
        Complex (мнимая часть 0 для |x| < 1)
    """
    # Complex использует hypot из этого модуля
    from sptk.core.math.complex_number import Complex

    if abs(x) < 1:
        at = 0.5 * ieee.log(ieee.divide(1 + x, 1 - x))
        return Complex.from_real(math.copysign(at, x))

    return Complex.from_imaginary(x).atan().divide(Complex.from_imaginary(1.0))
