"""
Complex Arrays — Утилиты для массивов Complex

Операции над последовательностями Complex:
- Сборка/разборка: zip, zip_split, split, real, imag
- Конструкторы: from_real, from_imaginary, zeros, deep_copy
- Редукции: sum, mean, product
- Поэлементная арифметика и свёртка

КОНТРАКТЫ:
1. Бинарные поэлементные операции проверяют размерности до вычислений
2. Complex неизменяем, поэтому результаты никогда не разделяют состояние
   с входными массивами; накопление идёт в MutableComplex
"""

import builtins
import math
from collections.abc import Sequence

from sptk.arrays.split_complex import SplitComplex
from sptk.core.contracts.dimension_checks import check_rectangular, check_xy_dimensions
from sptk.core.math.complex_number import Complex, ComplexLike, MutableComplex

# =============================================================================
# СБОРКА И РАЗБОРКА
# =============================================================================


def zip(reals: Sequence[float], imags: Sequence[float]) -> list[Complex]:
    """
    Сборка массива Complex из вещественных и мнимых частей.

    Raises:
        DimensionError: Если длины различаются

    Examples:
        >>> zip([1.0, 2.0], [3.0, 4.0])
        [Complex(real=1.0, imag=3.0), Complex(real=2.0, imag=4.0)]
    """
    check_xy_dimensions(reals, imags)
    return [Complex(r, i) for r, i in builtins.zip(reals, imags)]


def zip_split(reals: Sequence[float], imags: Sequence[float]) -> SplitComplex:
    """Сборка SplitComplex; DimensionError при разных длинах."""
    return SplitComplex(list(reals), list(imags))


def split(values: Sequence[Complex]) -> SplitComplex:
    return SplitComplex.from_complex(values)


def real(values: Sequence[Complex]) -> list[float]:
    return [v.real for v in values]


def imag(values: Sequence[Complex]) -> list[float]:
    return [v.imag for v in values]


def abs(values: Sequence[Complex]) -> list[float]:
    return [v.abs() for v in values]


def conj(values: Sequence[Complex]) -> list[Complex]:
    return [v.conj() for v in values]


# =============================================================================
# КОНСТРУКТОРЫ И КОПИРОВАНИЕ
# =============================================================================


def from_real(reals: Sequence[float]) -> list[Complex]:
    return [Complex.from_real(r) for r in reals]


def from_imaginary(imags: Sequence[float]) -> list[Complex]:
    return [Complex.from_imaginary(i) for i in imags]


def zeros(count: int) -> list[Complex]:
    return [Complex() for _ in range(count)]


def deep_copy(values: Sequence[ComplexLike]) -> list[Complex]:
    """Независимая копия: MutableComplex элементы копируются по значению."""
    return [Complex.copy_of(v) for v in values]


def concatenate(values1: Sequence[Complex], values2: Sequence[Complex]) -> list[Complex]:
    return [*values1, *values2]


def flatten(rows: Sequence[Sequence[Complex]]) -> list[Complex]:
    """
    Построчное объединение 2D массива Complex.

    Raises:
        ShapeError: Если строки имеют разную длину
    """
    check_rectangular(rows)

    result: list[Complex] = []
    for row in rows:
        result.extend(row)
    return result


# =============================================================================
# РЕДУКЦИИ
# =============================================================================


def sum(values: Sequence[ComplexLike]) -> Complex:
    total = MutableComplex()
    for v in values:
        total.add_equals(v)
    return total.to_complex()


def mean(values: Sequence[ComplexLike]) -> Complex:
    """Среднее; для пустого массива обе компоненты NaN."""
    if not values:
        return Complex(math.nan, math.nan)
    return sum(values).divide(len(values))


def product(values: Sequence[ComplexLike]) -> Complex:
    total = MutableComplex(1.0, 0.0)
    for v in values:
        total.multiply_equals(v)
    return total.to_complex()


# =============================================================================
# ПОЭЛЕМЕНТНАЯ АРИФМЕТИКА
# =============================================================================


def add_element_wise(
    values1: Sequence[Complex], values2: Sequence[Complex] | ComplexLike
) -> list[Complex]:
    """
    Поэлементное сложение: массив + массив или массив + скаляр.

    Raises:
        DimensionError: Если массивы разной длины
    """
    if isinstance(values2, Sequence):
        check_xy_dimensions(values1, values2)
        return [a.add(b) for a, b in builtins.zip(values1, values2)]
    return [v.add(values2) for v in values1]


def subtract_element_wise(
    values1: Sequence[Complex], values2: Sequence[Complex] | ComplexLike
) -> list[Complex]:
    if isinstance(values2, Sequence):
        check_xy_dimensions(values1, values2)
        return [a.subtract(b) for a, b in builtins.zip(values1, values2)]
    return [v.subtract(values2) for v in values1]


def multiply_element_wise(
    values1: Sequence[Complex], values2: Sequence[Complex] | ComplexLike
) -> list[Complex]:
    """
    Поэлементное умножение: массив * массив или массив * скаляр.

    Raises:
        DimensionError: Если массивы разной длины
    """
    if isinstance(values2, Sequence):
        check_xy_dimensions(values1, values2)
        return [a.multiply(b) for a, b in builtins.zip(values1, values2)]
    return [v.multiply(values2) for v in values1]


def multiply_element_wise_in_place(values: list[Complex], scalar: ComplexLike) -> None:
    """Умножение каждого элемента на скаляр; результат записывается в values."""
    for i, v in enumerate(values):
        values[i] = v.multiply(scalar)


def divide_element_wise(scalar: ComplexLike, values: Sequence[Complex]) -> list[Complex]:
    """
    Поэлементное деление скаляра на массив: result[i] = scalar / values[i].

    Деление на Complex(0, 0) даёт NaN/Inf компоненты.
    """
    numerator = Complex.copy_of(scalar)
    return [numerator.divide(v) for v in values]


# =============================================================================
# СВЁРТКА
# =============================================================================


def convolve(values1: Sequence[Complex], values2: Sequence[Complex]) -> list[Complex]:
    """
    Дискретная свёртка комплексных массивов прямым методом.

    Длина результата len(a) + len(b) - 1; пустой операнд даёт пустой результат.
    """
    if not values1 or not values2:
        return []

    accumulators = [MutableComplex() for _ in range(len(values1) + len(values2) - 1)]
    for i, a in enumerate(values1):
        for j, b in enumerate(values2):
            product_ij = a.multiply(b)
            accumulators[i + j].add_equals(product_ij)
    return [acc.to_complex() for acc in accumulators]

