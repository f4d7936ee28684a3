"""
Piecewise — Кусочно-заданные функции одной переменной

PiecewiseFunction задаёт функцию набором сегментов на возрастающих
точках разбиения (breaks) x0 < x1 < ... < xn. Внутри [x0, xn] значение
вычисляет сегмент, вне — экстраполятор.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. breaks содержит >= 2 точек и не убывает (ShapeError при создании)
2. Сегмент i обслуживает [x_i, x_{i+1}); точка xn относится к последнему сегменту
3. По умолчанию экстраполяция запрещена (ThrowExtrapolator)
4. -0.0 нормализуется в 0.0 перед поиском сегмента
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from sptk.arrays import double_arrays
from sptk.core.contracts.dimension_checks import ShapeError, check_min_x_length, check_xy_dimensions
from sptk.core.domain.extrapolation import (
    ExtrapolationMethod,
    Extrapolator,
    ThrowExtrapolator,
    extrapolate,
    make_extrapolator,
)
from sptk.functions.polynomial import Polynomial

logger = logging.getLogger(__name__)


class PiecewiseFunction(ABC):
    """
    Абстрактная кусочная функция.

    Наследник реализует evaluate_segment() и segment(); поиск сегмента,
    экстраполяция и векторное вычисление реализованы здесь.
    """

    def __init__(self, breaks: Sequence[float]) -> None:
        """
        Args:
            breaks: Точки разбиения по возрастанию (минимум 2)

        Raises:
            ShapeError: Если точек меньше двух или они не упорядочены
        """
        if len(breaks) < 2:
            logger.debug("piecewise function needs >= 2 breaks, got %d", len(breaks))
            raise ShapeError(f"breaks length must be >= 2, got {len(breaks)}")
        if not double_arrays.is_ascending(breaks):
            logger.debug("piecewise breaks are not ascending")
            raise ShapeError("breaks must be sorted in ascending order")

        self._breaks = [float(b) for b in breaks]
        self.extrapolator: Extrapolator = ThrowExtrapolator(x0=self.x0, xn=self.xn)

    # =========================================================================
    # АБСТРАКТНЫЙ ИНТЕРФЕЙС
    # =========================================================================

    @abstractmethod
    def evaluate_segment(self, index: int, x: float) -> float:
        """Значение сегмента index в точке x."""

    @abstractmethod
    def segment(self, number: int) -> Polynomial:
        """Функция сегмента number."""

    # =========================================================================
    # ГРАНИЦЫ И СЕГМЕНТЫ
    # =========================================================================

    @property
    def x0(self) -> float:
        return self._breaks[0]

    @property
    def xn(self) -> float:
        return self._breaks[-1]

    @property
    def number_of_segments(self) -> int:
        return len(self._breaks) - 1

    @property
    def breaks(self) -> list[float]:
        """Копия точек разбиения."""
        return list(self._breaks)

    def first_segment(self) -> Polynomial:
        return self.segment(0)

    def last_segment(self) -> Polynomial:
        return self.segment(self.number_of_segments - 1)

    def find_segment_index(self, x: float) -> int:
        """
        Индекс сегмента, содержащего x.

        Точное попадание в точку разбиения xn относится к последнему сегменту.
        Для x вне [x0, xn] результат выходит за диапазон сегментов
        (-1 левее x0), поэтому вызывающий код проверяет границы.

        Examples:
            >>> PiecewiseLinear([0.0, 1.0, 2.0], [0.0, 1.0, 0.0]).find_segment_index(1.5)
            1
        """
        index = double_arrays.binary_search(self._breaks, x)
        if index < 0:
            return -(index + 2)
        return min(index, len(self._breaks) - 2)

    # =========================================================================
    # ЭКСТРАПОЛЯЦИЯ
    # =========================================================================

    def set_extrapolator(self, extrapolator: Extrapolator) -> None:
        self.extrapolator = extrapolator

    def set_extrapolation_method(self, method: ExtrapolationMethod) -> None:
        """
        Замена экстраполятора по именованной стратегии.

        LINEAR требует differentiate() у наследника; NATURAL продолжает
        первый и последний сегменты.
        """
        derivative = getattr(self, "differentiate", None)
        self.extrapolator = make_extrapolator(
            method,
            self.x0,
            self.xn,
            y0=self.evaluate_segment(0, self.x0),
            yn=self.evaluate_segment(self.number_of_segments - 1, self.xn),
            derivative=derivative,
            left_fn=self.first_segment(),
            right_fn=self.last_segment(),
        )

    def extrapolate(self, x: float) -> float:
        return extrapolate(self.extrapolator, x)

    # =========================================================================
    # ВЫЧИСЛЕНИЕ
    # =========================================================================

    def evaluate(self, x: float) -> float:
        """
        Значение функции в точке x.

        Raises:
            OutOfRangeError: Если x вне [x0, xn] и экстраполяция запрещена
        """
        x += 0.0  # -0.0 → 0.0
        if self.x0 <= x <= self.xn:
            return self.evaluate_segment(self.find_segment_index(x), x)
        return self.extrapolate(x)

    __call__ = evaluate

    def evaluate_many(self, xs: Sequence[float]) -> list[float]:
        return [self.evaluate(x) for x in xs]


class PiecewiseLinear(PiecewiseFunction):
    """
    Кусочно-линейная интерполяция по узлам (x_i, y_i).

    Examples:
        >>> f = PiecewiseLinear([0.0, 1.0, 2.0], [0.0, 2.0, 0.0])
        >>> f.evaluate(0.5), f.evaluate(1.5)
        (1.0, 1.0)
    """

    def __init__(self, x: Sequence[float], y: Sequence[float]) -> None:
        """
        Raises:
            DimensionError: Если len(x) != len(y) или узлов меньше двух
            ShapeError: Если x не упорядочен по возрастанию
        """
        check_xy_dimensions(x, y)
        check_min_x_length(x, 2)
        super().__init__(x)

        self._segments: list[Polynomial] = []
        for i in range(self.number_of_segments):
            x_left, x_right = self._breaks[i], self._breaks[i + 1]
            slope = (y[i + 1] - y[i]) / (x_right - x_left) if x_right != x_left else 0.0
            self._segments.append(Polynomial([slope, y[i] - slope * x_left]))

    def evaluate_segment(self, index: int, x: float) -> float:
        return self._segments[index].evaluate(x)

    def segment(self, number: int) -> Polynomial:
        return self._segments[number].copy()

    def differentiate(self, x: float) -> float:
        """Наклон сегмента, содержащего x (крайний сегмент для x вне [x0, xn])."""
        index = min(max(self.find_segment_index(x), 0), self.number_of_segments - 1)
        return self._segments[index].differentiate(x)
