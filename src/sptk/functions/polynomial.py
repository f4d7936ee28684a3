"""
Polynomial — Полином с вещественными коэффициентами

Коэффициенты хранятся по убыванию степени: [1, 3, 2] → P(x) = x^2 + 3x + 2.

Поддерживаются:
- Построение по коэффициентам или по корням
- Арифметика полиномов (чистые методы и *_equals варианты)
- Производная, первообразная, определённый интеграл
- Вычисление методом Горнера в вещественной и комплексной точке
- Корни: аналитически для степени <= 2, через сопровождающую матрицу выше

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ведущие нули отбрасываются при создании; нулевой полином хранится как [0.0]
2. Любая мутация коэффициентов сбрасывает кэш корней
3. coefficients возвращает копию: внешний код не может изменить полином
"""

import logging
import math
import numbers
from collections.abc import Sequence
from typing import Union, overload

import numpy as np

from sptk.arrays import complex_arrays, double_arrays
from sptk.core.math import ieee
from sptk.core.math.complex_number import Complex, ComplexLike, MutableComplex

logger = logging.getLogger(__name__)

PolynomialOperand = Union["Polynomial", Sequence[float], float]


def _strip_leading_zeros(coefficients: Sequence[float]) -> list[float]:
    for i, c in enumerate(coefficients):
        if c != 0.0:
            return [float(v) for v in coefficients[i:]]
    return [0.0]


def _aligned(lhs: Sequence[float], rhs: Sequence[float]) -> tuple[list[float], list[float]]:
    """Дополнение нулями слева до общей длины (выравнивание по младшей степени)."""
    length = max(len(lhs), len(rhs))
    return (
        [0.0] * (length - len(lhs)) + list(lhs),
        [0.0] * (length - len(rhs)) + list(rhs),
    )


class Polynomial:
    """
    Полином P(x) = c[0] * x^n + c[1] * x^(n-1) + ... + c[n].

    Экземпляр вызываем: p(x) эквивалентно p.evaluate(x), поэтому полином
    можно передавать как функцию (например, в NaturalExtrapolator).
    """

    __slots__ = ("_coefficients", "_roots")

    def __init__(self, coefficients: Sequence[float]) -> None:
        """
        Args:
            coefficients: Коэффициенты по убыванию степени
        """
        self._coefficients = _strip_leading_zeros(coefficients)
        self._roots: list[Complex] | None = None

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_roots(cls, *roots: ComplexLike) -> "Polynomial":
        """
        Полином по корням: P(x) = Π (x - r_i).

        Бесконечные и NaN корни пропускаются. Произведение раскрывается
        в комплексной арифметике, в коэффициентах сохраняется вещественная
        часть (для сопряжённых пар мнимая часть нулевая).

        Examples:
            >>> Polynomial.from_roots(-1.0, -2.0).coefficients
            [1.0, 3.0, 2.0]
        """
        finite_roots = [Complex.copy_of(r) for r in roots]
        finite_roots = [r for r in finite_roots if r.is_finite()]

        expanded = [MutableComplex() for _ in range(len(finite_roots) + 1)]
        expanded[0].set(1.0, 0.0)

        for i, root in enumerate(finite_roots):
            # Умножение на (x - root): сдвиг и вычитание root * предыдущих коэффициентов
            scaled = [root.multiply(expanded[j]) for j in range(i + 1)]
            for j in range(i + 1):
                expanded[j + 1].subtract_equals(scaled[j])

        polynomial = cls([c.real for c in expanded])
        polynomial._roots = finite_roots
        return polynomial

    def copy(self) -> "Polynomial":
        result = Polynomial(self._coefficients)
        if self._roots is not None:
            result._roots = list(self._roots)
        return result

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    @property
    def coefficients(self) -> list[float]:
        """Копия коэффициентов по убыванию степени."""
        return list(self._coefficients)

    def coefficient_at(self, index: int) -> float:
        return self._coefficients[index]

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # НОРМИРОВКА
    # =========================================================================

    def normalize(self) -> float:
        """
        Приведение к унитарному виду: старший коэффициент становится 1.

        Корни не меняются, кэш корней сохраняется.

        Returns:
            Нормирующий множитель 1 / c[0]
        """
        factor = ieee.divide(1.0, self._coefficients[0])
        self._coefficients = [c * factor for c in self._coefficients]
        return factor

    def denormalize(self) -> None:
        """Деление на младший ненулевой коэффициент: он становится 1."""
        i = len(self._coefficients) - 1
        while i > 0 and self._coefficients[i] == 0.0:
            i -= 1
        divisor = self._coefficients[i]
        self._coefficients = double_arrays.divide_element_wise(self._coefficients, divisor)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @staticmethod
    def _multiply_op(coefficients: Sequence[float], other: PolynomialOperand) -> list[float]:
        if isinstance(other, Polynomial):
            return double_arrays.convolve(coefficients, other._coefficients)
        if isinstance(other, numbers.Real):
            return double_arrays.multiply_element_wise(coefficients, other)
        return double_arrays.convolve(coefficients, other)

    def multiply(self, other: PolynomialOperand) -> "Polynomial":
        """
        Произведение на полином, список коэффициентов или скаляр.

        Examples:
            >>> Polynomial([1.0, 1.0]).multiply(Polynomial([1.0, 2.0]))
            Polynomial([1.0, 3.0, 2.0])
        """
        return Polynomial(self._multiply_op(self._coefficients, other))

    def multiply_equals(self, other: PolynomialOperand) -> None:
        self._coefficients = _strip_leading_zeros(self._multiply_op(self._coefficients, other))
        self._roots = None

    @staticmethod
    def _add_op(lhs: "Polynomial", rhs: "Polynomial") -> list[float]:
        a, b = _aligned(lhs._coefficients, rhs._coefficients)
        return double_arrays.add_element_wise(a, b)

    @staticmethod
    def _subtract_op(lhs: "Polynomial", rhs: "Polynomial") -> list[float]:
        a, b = _aligned(lhs._coefficients, rhs._coefficients)
        return double_arrays.subtract_element_wise(a, b)

    def add(self, other: "Polynomial") -> "Polynomial":
        return Polynomial(self._add_op(self, other))

    def add_equals(self, other: "Polynomial") -> None:
        self._coefficients = _strip_leading_zeros(self._add_op(self, other))
        self._roots = None

    def subtract(self, other: "Polynomial") -> "Polynomial":
        """Разность self - other."""
        return Polynomial(self._subtract_op(self, other))

    def subtract_equals(self, other: "Polynomial") -> None:
        self._coefficients = _strip_leading_zeros(self._subtract_op(self, other))
        self._roots = None

    def pow(self, n: int) -> "Polynomial":
        """
        Целая неотрицательная степень полинома.

        Raises:
            ValueError: Если n < 0
        """
        if n < 0:
            logger.debug("negative polynomial power requested: n=%d", n)
            raise ValueError("Power must be >= 0")
        if n == 0:
            return Polynomial([1.0])

        result = list(self._coefficients)
        for _ in range(n - 1):
            result = double_arrays.convolve(result, self._coefficients)
        return Polynomial(result)

    def substitute(self, d: "float | Polynomial") -> "Polynomial":
        """
        Подстановка x → d * x (для числа) или x → d(x) (для полинома).

        Examples:
            >>> Polynomial([1.0, 1.0, 1.0]).substitute(2.0)
            Polynomial([4.0, 2.0, 1.0])
        """
        if isinstance(d, Polynomial):
            degree = self.degree
            result = d.pow(degree)
            result.multiply_equals(self._coefficients[0])
            for j in range(1, degree + 1):
                term = d.pow(degree - j)
                term.multiply_equals(self._coefficients[j])
                result.add_equals(term)
            return result

        degree = self.degree
        return Polynomial(
            [c * ieee.power(d, degree - i) for i, c in enumerate(self._coefficients)]
        )

    def reverse_in_place(self) -> None:
        """Разворот порядка коэффициентов (x^n * P(1/x))."""
        self._coefficients = _strip_leading_zeros(double_arrays.reverse(self._coefficients))
        self._roots = None

    # =========================================================================
    # АНАЛИЗ
    # =========================================================================

    def derivative(self) -> "Polynomial":
        """
        Производная P'(x); для константы — нулевой полином.

        Examples:
            >>> Polynomial([1.0, 3.0, 2.0]).derivative()
            Polynomial([2.0, 3.0])
        """
        n = self.degree
        if n == 0:
            return Polynomial([0.0])
        return Polynomial([c * (n - i) for i, c in enumerate(self._coefficients[:-1])])

    def integral(self, constant: float = 0.0) -> "Polynomial":
        """
        Первообразная с константой интегрирования constant.

        Examples:
            >>> Polynomial([2.0, 3.0]).integral(2.0)
            Polynomial([1.0, 3.0, 2.0])
        """
        length = len(self._coefficients)
        result = [c / (length - i) for i, c in enumerate(self._coefficients)]
        result.append(float(constant))
        return Polynomial(result)

    def integrate(self, a: float, b: float) -> float:
        """Определённый интеграл на [a, b]."""
        antiderivative = self.integral()
        return antiderivative.evaluate(b) - antiderivative.evaluate(a)

    def differentiate(self, x: float) -> float:
        """Значение производной в точке x (Горнер без построения P')."""
        n = self.degree
        result = 0.0
        for i in range(n):
            result = result * x + self._coefficients[i] * (n - i)
        return result

    def roots(self) -> list[Complex]:
        """
        Корни полинома (кэшируются до первой мутации).

        Степень 0 — пустой список, 1 — линейное решение,
        2 — устойчивая квадратичная формула, выше — собственные числа
        сопровождающей матрицы (numpy.roots).
        """
        if self._roots is None:
            self._roots = self._calculate_roots()
        return list(self._roots)

    def _calculate_roots(self) -> list[Complex]:
        c = self._coefficients
        degree = self.degree
        if degree == 0:
            return []
        if degree == 1:
            return [Complex.from_real(ieee.divide(-c[1], c[0]))]
        if degree == 2:
            return _quadratic_roots(c[0], c[1], c[2])

        logger.debug("companion matrix roots for degree %d polynomial", degree)
        eigenvalues = np.roots(c)
        return complex_arrays.zip(eigenvalues.real.tolist(), eigenvalues.imag.tolist())

    # =========================================================================
    # ВЫЧИСЛЕНИЕ
    # =========================================================================

    @overload
    def evaluate(self, x: float) -> float: ...

    @overload
    def evaluate(self, x: "Complex | MutableComplex | complex") -> Complex: ...

    def evaluate(self, x):
        """
        Значение P(x) методом Горнера.

        Args:
            x: Вещественный или комплексный аргумент

        Returns:
            float для вещественного x, Complex для комплексного

        Examples:
            >>> Polynomial([1.0, 3.0, 2.0]).evaluate(1.0)
            6.0
        """
        if isinstance(x, numbers.Real):
            return double_arrays.horner(self._coefficients, x)

        point = Complex.copy_of(x)
        result = MutableComplex()
        for coefficient in self._coefficients:
            result.multiply_equals(point)
            result.add_equals(coefficient)
        return result.to_complex()

    __call__ = evaluate

    def evaluate_complex(self, real: float, imag: float) -> Complex:
        """Значение P(real + i * imag) методом Горнера."""
        result = MutableComplex()
        for coefficient in self._coefficients:
            result.multiply_equals_parts(real, imag)
            result.add_equals(coefficient)
        return result.to_complex()

    def evaluate_many(self, xs: Sequence[float]) -> list[float]:
        return self.polyval(self._coefficients, xs)

    # =========================================================================
    # СТАТИЧЕСКИЕ ВЫЧИСЛЕНИЯ
    # =========================================================================

    @staticmethod
    def polyval(coefficients: Sequence[float], x: "float | Sequence[float]") -> "float | list[float]":
        """
        Вычисление полинома по коэффициентам в точке или в массиве точек.

        Examples:
            >>> Polynomial.polyval([1.0, 0.0, -1.0], [0.0, 2.0])
            [-1.0, 3.0]
        """
        if isinstance(x, numbers.Real):
            return double_arrays.horner(coefficients, x)
        return [double_arrays.horner(coefficients, xi) for xi in x]

    @staticmethod
    def polyval_from_roots(roots: Sequence[ComplexLike], x: ComplexLike) -> Complex:
        """Значение Π (x - r_i) по корням."""
        point = Complex.copy_of(x)
        return complex_arrays.product([point.subtract(r) for r in roots])


def _quadratic_roots(a: float, b: float, c: float) -> list[Complex]:
    """
    Корни a*x^2 + b*x + c без катастрофического сокращения.

    Для вещественных корней q = -(b + sign(b) * sqrt(D)) / 2, x1 = q / a, x2 = c / q.
    """
    discriminant = b * b - 4.0 * a * c
    if discriminant >= 0:
        q = -0.5 * (b + math.copysign(math.sqrt(discriminant), b))
        if q == 0.0:
            return [Complex(), Complex()]
        return [Complex.from_real(q / a), Complex.from_real(c / q)]

    real = -b / (2.0 * a)
    imag = math.sqrt(-discriminant) / (2.0 * a)
    return [Complex(real, imag), Complex(real, -imag)]
