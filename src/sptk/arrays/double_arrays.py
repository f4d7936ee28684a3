"""
Double Arrays — Утилиты для массивов float

Операции над последовательностями float64:
- Генерация: lin_space, lin_steps, log_space, zeros, ones, fill
- Поэлементная арифметика (чистые функции и *_in_place варианты)
- Поэлементные трансцендентные отображения (sin, ..., sqrt, abs)
- Редукции: sum, mean, rms, нормы, max/min, arg_min/arg_max, product
- Свёртка, произведение Кронекера, транспонирование, flatten
- Сортировка, arg_sort, binary_search, gradient, horner

КОНТРАКТЫ:
1. Бинарные поэлементные операции проверяют размерности ДО доступа к элементам
   (DimensionError); in-place варианты при ошибке не модифицируют аргумент
2. Чистые функции возвращают новый list, входные последовательности не изменяются
3. In-place функции требуют изменяемый list и возвращают None
4. NaN/Inf распространяются поэлементно, без clamp и без исключений
"""

import bisect
import logging
import math
import numbers
from collections.abc import Sequence

import numpy as np

from sptk.core.contracts.dimension_checks import (
    DimensionError,
    check_min_x_length,
    check_rectangular,
    check_reshape,
    check_xy_dimensions,
)
from sptk.core.math import ieee
from sptk.core.math.scalar_math import hypot

logger = logging.getLogger(__name__)

# =============================================================================
# ГЕНЕРАЦИЯ
# =============================================================================


def lin_space(lower_bound: float, upper_bound: float, count: int) -> list[float]:
    """
    count равномерно распределённых точек на [lower_bound, upper_bound].

    Шаг (upper_bound - lower_bound) / (count - 1). Последняя точка равна
    upper_bound побитово (без накопления ошибки шага).

    Raises:
        DimensionError: Если count < 2

    Examples:
        >>> lin_space(0.0, 10.0, 5)
        [0.0, 2.5, 5.0, 7.5, 10.0]
    """
    if count < 2:
        logger.debug("sample count check failed: count=%d", count)
        raise DimensionError(f"count must be >= 2, got {count}")

    delta = (upper_bound - lower_bound) / (count - 1)
    result = [lower_bound + i * delta for i in range(count - 1)]
    result.append(float(upper_bound))
    return result


def lin_steps(lower_bound: float, upper_bound: float, step: float = 1.0) -> list[float]:
    """
    Точки lower_bound + i * step, i < ceil((upper - lower) / step), затем upper_bound.

    Raises:
        DimensionError: Если step равен 0 или NaN, либо число шагов не конечно

    Examples:
        >>> lin_steps(0.0, 1.0, 0.3)
        [0.0, 0.3, 0.6, 0.8999999999999999, 1.0]
    """
    steps = ieee.divide(upper_bound - lower_bound, step)
    if step == 0 or not math.isfinite(steps):
        logger.debug("step check failed: [%r, %r] with step=%r", lower_bound, upper_bound, step)
        raise DimensionError(f"step must give a finite number of samples, got step={step}")

    count = math.ceil(steps)
    result = [lower_bound + i * step for i in range(count)]
    result.append(float(upper_bound))
    return result


def log_space(lower_decade: float, upper_decade: float, count: int) -> list[float]:
    """
    count точек, логарифмически распределённых между декадами.

    Точка i равна 10 ** (lower_decade + i * delta); последняя точка
    равна 10 ** upper_decade точно.

    Raises:
        DimensionError: Если count < 2

    Examples:
        >>> log_space(0, 2, 3)
        [1.0, 10.0, 100.0]
    """
    if count < 2:
        logger.debug("sample count check failed: count=%d", count)
        raise DimensionError(f"count must be >= 2, got {count}")

    delta = (upper_decade - lower_decade) / (count - 1)
    result = [ieee.power(10.0, lower_decade + i * delta) for i in range(count - 1)]
    result.append(ieee.power(10.0, upper_decade))
    return result


def zeros(count: int) -> list[float]:
    return [0.0] * count


def ones(count: int) -> list[float]:
    return [1.0] * count


def fill(count: int, value: float) -> list[float]:
    return [float(value)] * count


# =============================================================================
# КОПИРОВАНИЕ И ФОРМА
# =============================================================================


def deep_copy(values: Sequence[float]) -> list[float]:
    return list(values)


def reverse(values: Sequence[float]) -> list[float]:
    return list(reversed(values))


def concatenate(values1: Sequence[float], values2: Sequence[float]) -> list[float]:
    return [*values1, *values2]


def concatenate_all(first: Sequence[float], *rest: Sequence[float]) -> list[float]:
    """Конкатенация произвольного числа массивов в порядке аргументов."""
    result = list(first)
    for values in rest:
        result.extend(values)
    return result


def repeat(values: Sequence[float], count: int) -> list[float]:
    """
    Повторение массива целиком count раз.

    Examples:
        >>> repeat([1.0, 2.0], 2)
        [1.0, 2.0, 1.0, 2.0]
    """
    return list(values) * count


def flatten(rows: Sequence[Sequence[float]]) -> list[float]:
    """
    Построчное (row-major) объединение 2D массива.

    Raises:
        ShapeError: Если строки имеют разную длину
    """
    check_rectangular(rows)

    result: list[float] = []
    for row in rows:
        result.extend(row)
    return result


def transpose(rows: Sequence[Sequence[float]]) -> list[list[float]]:
    """
    Транспонирование 2D массива.

    Raises:
        ShapeError: Если строки имеют разную длину
    """
    columns = check_rectangular(rows)
    return [[row[c] for row in rows] for c in range(columns)]


def transpose_linear(buffer: Sequence[float], columns: int) -> list[float]:
    """
    Транспонирование матрицы, хранящейся построчно в линейном буфере.

    Args:
        buffer: Элементы матрицы rows x columns, row-major
        columns: Количество столбцов

    Returns:
        Элементы транспонированной матрицы columns x rows, row-major

    Raises:
        ShapeError: Если len(buffer) не делится на columns
    """
    rows = check_reshape(len(buffer), columns)

    result = [0.0] * len(buffer)
    for r in range(rows):
        for c in range(columns):
            result[c * rows + r] = buffer[r * columns + c]
    return result


def kronecker(values1: Sequence[float], values2: Sequence[float]) -> list[float]:
    """
    Произведение Кронекера векторов: result[i * len(b) + j] = a[i] * b[j].

    Операнд длины 1 сводится к умножению на скаляр.
    """
    if len(values1) == 1:
        return multiply_element_wise(values2, values1[0])
    if len(values2) == 1:
        return multiply_element_wise(values1, values2[0])

    return [a * b for a in values1 for b in values2]


# =============================================================================
# ПОЭЛЕМЕНТНАЯ АРИФМЕТИКА
# =============================================================================


def add_element_wise(values1: Sequence[float], values2: Sequence[float] | float) -> list[float]:
    """
    Поэлементное сложение: массив + массив или массив + скаляр.

    Raises:
        DimensionError: Если массивы разной длины
    """
    if isinstance(values2, numbers.Real):
        return [v + values2 for v in values1]

    check_xy_dimensions(values1, values2)
    return [a + b for a, b in zip(values1, values2)]


def add_element_wise_in_place(values1: list[float], values2: Sequence[float] | float) -> None:
    """
    Поэлементное сложение in-place; результат записывается в values1.

    Raises:
        DimensionError: Если массивы разной длины (values1 не изменяется)
    """
    if isinstance(values2, numbers.Real):
        for i in range(len(values1)):
            values1[i] += values2
        return

    check_xy_dimensions(values1, values2)
    for i in range(len(values1)):
        values1[i] += values2[i]


def subtract_element_wise(
    values1: Sequence[float] | float, values2: Sequence[float] | float
) -> list[float]:
    """
    Поэлементное вычитание values1 - values2.

    Любой из операндов может быть скаляром (scalar - array, array - scalar).

    Raises:
        DimensionError: Если оба операнда — массивы разной длины
    """
    if isinstance(values1, numbers.Real):
        return [values1 - v for v in values2]  # type: ignore[union-attr]
    if isinstance(values2, numbers.Real):
        return [v - values2 for v in values1]

    check_xy_dimensions(values1, values2)
    return [a - b for a, b in zip(values1, values2)]


def subtract_element_wise_in_place(values1: list[float], values2: Sequence[float] | float) -> None:
    if isinstance(values2, numbers.Real):
        for i in range(len(values1)):
            values1[i] -= values2
        return

    check_xy_dimensions(values1, values2)
    for i in range(len(values1)):
        values1[i] -= values2[i]


def multiply_element_wise(values1: Sequence[float], values2: Sequence[float] | float) -> list[float]:
    """
    Поэлементное умножение: массив * массив или массив * скаляр.

    Raises:
        DimensionError: Если массивы разной длины
    """
    if isinstance(values2, numbers.Real):
        return [v * values2 for v in values1]

    check_xy_dimensions(values1, values2)
    return [a * b for a, b in zip(values1, values2)]


def multiply_element_wise_in_place(values1: list[float], values2: Sequence[float] | float) -> None:
    if isinstance(values2, numbers.Real):
        for i in range(len(values1)):
            values1[i] *= values2
        return

    check_xy_dimensions(values1, values2)
    for i in range(len(values1)):
        values1[i] *= values2[i]


def divide_element_wise(
    values1: Sequence[float] | float, values2: Sequence[float] | float
) -> list[float]:
    """
    Поэлементное деление values1 / values2 по правилам IEEE-754.

    Деление на 0 даёт ±Inf или NaN, исключение не бросается.

    Raises:
        DimensionError: Если оба операнда — массивы разной длины
    """
    if not isinstance(values1, numbers.Real) and not isinstance(values2, numbers.Real):
        check_xy_dimensions(values1, values2)

    return ieee.apply_ufunc(np.divide, values1, values2)


def divide_element_wise_in_place(values1: list[float], values2: Sequence[float] | float) -> None:
    if not isinstance(values2, numbers.Real):
        check_xy_dimensions(values1, values2)

    values1[:] = ieee.apply_ufunc(np.divide, values1, values2)


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ОТОБРАЖЕНИЯ
# =============================================================================


def sin(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.sin, values)


def cos(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.cos, values)


def tan(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.tan, values)


def sinh(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.sinh, values)


def cosh(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.cosh, values)


def tanh(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.tanh, values)


def exp(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.exp, values)


def log(values: Sequence[float]) -> list[float]:
    """Натуральный логарифм; log(0) = -inf, log(x < 0) = nan."""
    return ieee.apply_ufunc(np.log, values)


def log2(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.log2, values)


def log10(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.log10, values)


def sqrt(values: Sequence[float]) -> list[float]:
    """Квадратный корень; sqrt(x < 0) = nan."""
    return ieee.apply_ufunc(np.sqrt, values)


def abs(values: Sequence[float]) -> list[float]:
    return ieee.apply_ufunc(np.fabs, values)


# =============================================================================
# РЕДУКЦИИ
# =============================================================================


def sum(values: Sequence[float]) -> float:
    result = 0.0
    for v in values:
        result += v
    return result


def sum_squares(values: Sequence[float]) -> float:
    result = 0.0
    for v in values:
        result += v * v
    return result


def cumulative_sum(values: Sequence[float]) -> list[float]:
    result: list[float] = []
    total = 0.0
    for v in values:
        total += v
        result.append(total)
    return result


def mean(values: Sequence[float]) -> float:
    """Среднее sum / count; NaN для пустого массива."""
    return ieee.divide(sum(values), len(values))


def rms(values: Sequence[float]) -> float:
    """Среднеквадратичное sqrt(sum_squares / count); NaN для пустого массива."""
    return ieee.sqrt(ieee.divide(sum_squares(values), len(values)))


def norm1(values: Sequence[float]) -> float:
    """L1 норма: сумма модулей."""
    result = 0.0
    for v in values:
        result += math.fabs(v)
    return result


def norm2(values: Sequence[float]) -> float:
    """Евклидова норма, накапливается через hypot (без переполнения)."""
    result = 0.0
    for v in values:
        result = hypot(result, v)
    return result


def norm_inf(values: Sequence[float]) -> float:
    """max(|v|); 0 для пустого массива."""
    result = 0.0
    for v in values:
        a = math.fabs(v)
        if math.isnan(a):
            return math.nan
        if a > result:
            result = a
    return result


def norm_neg_inf(values: Sequence[float]) -> float:
    """min(|v|); +inf для пустого массива."""
    result = math.inf
    for v in values:
        a = math.fabs(v)
        if math.isnan(a):
            return math.nan
        if a < result:
            result = a
    return result


def max(values: Sequence[float]) -> float:
    """Максимум; -inf для пустого массива, NaN распространяется."""
    result = -math.inf
    for v in values:
        if math.isnan(v):
            return math.nan
        if v > result:
            result = v
    return result


def min(values: Sequence[float]) -> float:
    """Минимум; +inf для пустого массива, NaN распространяется."""
    result = math.inf
    for v in values:
        if math.isnan(v):
            return math.nan
        if v < result:
            result = v
    return result


def arg_min(values: Sequence[float]) -> int:
    """Индекс первого минимума; -1 для пустого массива."""
    index = -1
    minimum = math.inf
    for i, v in enumerate(values):
        if index < 0 or v < minimum:
            index = i
            minimum = v
    return index


def arg_max(values: Sequence[float]) -> int:
    """Индекс первого максимума; -1 для пустого массива."""
    index = -1
    maximum = -math.inf
    for i, v in enumerate(values):
        if index < 0 or v > maximum:
            index = i
            maximum = v
    return index


def product(values: Sequence[float]) -> float:
    result = 1.0
    for v in values:
        result *= v
    return result


# =============================================================================
# ПОИСК И СОРТИРОВКА
# =============================================================================


def sort(values: list[float]) -> None:
    """Сортировка по возрастанию in-place."""
    values.sort()


def arg_sort(values: Sequence[float], ascending: bool = True) -> list[int]:
    """
    Индексы, упорядочивающие массив.

    Сортировка стабильна в обоих направлениях: равные элементы сохраняют
    исходный относительный порядок.

    Examples:
        >>> arg_sort([3.0, 1.0, 2.0])
        [1, 2, 0]
        >>> arg_sort([3.0, 1.0, 2.0], ascending=False)
        [0, 2, 1]
    """
    return sorted(range(len(values)), key=values.__getitem__, reverse=not ascending)


def binary_search(values: Sequence[float], target: float) -> int:
    """
    Двоичный поиск в отсортированном по возрастанию массиве.

    Returns:
        Индекс target, если найден; иначе -(insertion_point) - 1
    """
    index = bisect.bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return -index - 1


def is_ascending(values: Sequence[float]) -> bool:
    """True если каждая соседняя пара неубывающая."""
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))


# =============================================================================
# СВЁРТКА И ПРОЧЕЕ
# =============================================================================


def convolve(values1: Sequence[float], values2: Sequence[float]) -> list[float]:
    """
    Дискретная свёртка прямым методом.

    result[k] = Σ a[i] * b[k - i], длина результата len(a) + len(b) - 1.
    Сложность O(len(a) * len(b)). Пустой операнд даёт пустой результат.

    Examples:
        >>> convolve([1.0, 2.0, 3.0], [4.0, 5.0])
        [4.0, 13.0, 22.0, 15.0]
    """
    if not values1 or not values2:
        return []

    result = [0.0] * (len(values1) + len(values2) - 1)
    for i, a in enumerate(values1):
        for j, b in enumerate(values2):
            result[i + j] += a * b
    return result


def distance(values1: Sequence[float], values2: Sequence[float]) -> float:
    """
    Евклидово расстояние sqrt(Σ (a_i - b_i)^2).

    Raises:
        DimensionError: Если массивы разной длины
    """
    check_xy_dimensions(values1, values2)

    result = 0.0
    for a, b in zip(values1, values2):
        d = a - b
        result += d * d
    return ieee.sqrt(result)


def gradient(values: Sequence[float]) -> list[float]:
    """
    Численная первая производная при единичном шаге.

    Внутренние точки — центральные разности, края — односторонние.

    Raises:
        DimensionError: Если len(values) < 2
    """
    check_min_x_length(values, 2)

    n = len(values)
    result = [0.0] * n
    result[0] = values[1] - values[0]
    result[n - 1] = values[n - 1] - values[n - 2]
    for i in range(1, n - 1):
        result[i] = (values[i + 1] - values[i - 1]) / 2.0
    return result


def horner(coefficients: Sequence[float], x: float) -> float:
    """
    Значение полинома (коэффициенты по убыванию степени) методом Горнера.
    """
    result = 0.0
    for coefficient in coefficients:
        result = result * x + coefficient
    return result
