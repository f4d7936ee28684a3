"""
Тесты для Polynomial

Проверяет:
- Создание: отбрасывание ведущих нулей, from_roots (включая сопряжённые пары)
- Арифметику полиномов и сброс кэша корней при мутации
- derivative / integral / integrate / differentiate
- Вычисление в вещественной и комплексной точке (метод Горнера)
- pow, substitute, reverse_in_place, normalize, denormalize
- roots: аналитически для степени <= 2, numpy.roots выше
"""

import math

import pytest

from sptk.core.math.complex_number import Complex
from sptk.functions.polynomial import Polynomial


# =============================================================================
# ТЕСТЫ: Создание
# =============================================================================


class TestConstruction:
    """Тесты конструкторов"""

    def test_leading_zeros_stripped(self) -> None:
        """Ведущие нули отбрасываются"""
        p = Polynomial([0.0, 0.0, 1.0, 2.0])
        assert p.coefficients == [1.0, 2.0]
        assert p.degree == 1

    def test_zero_polynomial(self) -> None:
        """Нулевой и пустой полином → [0.0]"""
        assert Polynomial([0.0, 0.0]).coefficients == [0.0]
        assert Polynomial([]).coefficients == [0.0]
        assert Polynomial([0.0]).degree == 0

    def test_from_roots(self) -> None:
        """(x + 1)(x + 2) = x^2 + 3x + 2"""
        assert Polynomial.from_roots(-1.0, -2.0).coefficients == [1.0, 3.0, 2.0]

    def test_from_conjugate_roots(self) -> None:
        """(x - i)(x + i) = x^2 + 1"""
        p = Polynomial.from_roots(Complex(0.0, 1.0), Complex(0.0, -1.0))
        assert p.coefficients == [1.0, 0.0, 1.0]

    def test_from_roots_ignores_non_finite(self) -> None:
        """Бесконечные и NaN корни пропускаются"""
        p = Polynomial.from_roots(-1.0, math.inf, Complex(math.nan, 0.0))
        assert p.coefficients == [1.0, 1.0]

    def test_from_no_roots(self) -> None:
        """Пустой набор корней → константа 1"""
        assert Polynomial.from_roots().coefficients == [1.0]

    def test_coefficients_are_copies(self) -> None:
        """Изменение возвращённого списка не меняет полином"""
        p = Polynomial([1.0, 2.0])
        p.coefficients[0] = 99.0
        assert p.coefficient_at(0) == 1.0

    def test_copy_independent(self) -> None:
        """copy() не разделяет состояние"""
        p = Polynomial([1.0, 2.0])
        q = p.copy()
        q.multiply_equals(2.0)
        assert p == Polynomial([1.0, 2.0])
        assert q == Polynomial([2.0, 4.0])

    def test_equality(self) -> None:
        """Равенство по коэффициентам после нормализации ведущих нулей"""
        assert Polynomial([1.0, 2.0]) == Polynomial([0.0, 1.0, 2.0])
        assert Polynomial([1.0, 2.0]) != Polynomial([1.0, 3.0])
        assert repr(Polynomial([1.0, 2.0])) == "Polynomial([1.0, 2.0])"


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestArithmetic:
    """Тесты арифметики полиномов"""

    def test_multiply(self) -> None:
        """Произведение на полином, список и скаляр"""
        p = Polynomial([1.0, 1.0])
        assert p.multiply(Polynomial([1.0, 2.0])).coefficients == [1.0, 3.0, 2.0]
        assert p.multiply([1.0, -1.0]).coefficients == [1.0, 0.0, -1.0]
        assert p.multiply(2.0).coefficients == [2.0, 2.0]
        assert p.coefficients == [1.0, 1.0]

    def test_multiply_by_zero(self) -> None:
        """Умножение на 0 → нулевой полином"""
        assert Polynomial([1.0, 2.0]).multiply(0.0).coefficients == [0.0]

    def test_add_and_subtract(self) -> None:
        """Сложение и вычитание выравниваются по младшей степени"""
        a = Polynomial([1.0, 2.0, 3.0])
        b = Polynomial([1.0, 1.0])
        assert a.add(b).coefficients == [1.0, 3.0, 4.0]
        assert b.add(a).coefficients == [1.0, 3.0, 4.0]
        assert a.subtract(b).coefficients == [1.0, 1.0, 2.0]
        assert b.subtract(a).coefficients == [-1.0, -1.0, -2.0]

    def test_subtract_cancels_leading_terms(self) -> None:
        """Сокращение старших членов понижает степень"""
        a = Polynomial([1.0, 2.0, 3.0])
        assert a.subtract(Polynomial([1.0, 0.0, 0.0])).coefficients == [2.0, 3.0]
        assert a.subtract(a).coefficients == [0.0]

    def test_equals_variants(self) -> None:
        """*_equals изменяют получателя"""
        p = Polynomial([1.0, 1.0])
        p.add_equals(Polynomial([1.0]))
        assert p.coefficients == [1.0, 2.0]
        p.subtract_equals(Polynomial([2.0]))
        assert p.coefficients == [1.0, 0.0]
        p.multiply_equals([1.0, 1.0])
        assert p.coefficients == [1.0, 1.0, 0.0]

    def test_mutation_drops_cached_roots(self) -> None:
        """Мутация сбрасывает кэш корней"""
        p = Polynomial.from_roots(1.0)
        assert [r.real for r in p.roots()] == [1.0]

        p.multiply_equals(Polynomial([1.0, 1.0]))
        assert p.coefficients == [1.0, 0.0, -1.0]
        assert sorted(r.real for r in p.roots()) == [-1.0, 1.0]

    def test_pow(self) -> None:
        """Целые степени"""
        p = Polynomial([1.0, 1.0])
        assert p.pow(2).coefficients == [1.0, 2.0, 1.0]
        assert p.pow(3).coefficients == [1.0, 3.0, 3.0, 1.0]
        assert p.pow(1).coefficients == [1.0, 1.0]
        assert p.pow(0).coefficients == [1.0]

    def test_pow_negative(self) -> None:
        """Отрицательная степень → ValueError"""
        with pytest.raises(ValueError, match="Power must be >= 0"):
            Polynomial([1.0, 1.0]).pow(-1)

    def test_substitute_scalar(self) -> None:
        """P(d * x)"""
        assert Polynomial([1.0, 1.0, 1.0]).substitute(2.0).coefficients == [4.0, 2.0, 1.0]

    def test_substitute_polynomial(self) -> None:
        """P(q(x)): 2x + 1 при x = 3x + 2 → 6x + 5"""
        p = Polynomial([2.0, 1.0])
        assert p.substitute(Polynomial([3.0, 2.0])).coefficients == [6.0, 5.0]

    def test_reverse_in_place(self) -> None:
        """Разворот коэффициентов"""
        p = Polynomial([1.0, 2.0, 3.0])
        p.reverse_in_place()
        assert p.coefficients == [3.0, 2.0, 1.0]

        q = Polynomial([1.0, 2.0, 0.0])
        q.reverse_in_place()
        assert q.coefficients == [2.0, 1.0]

    def test_normalize(self) -> None:
        """Старший коэффициент → 1, возвращается множитель"""
        p = Polynomial([2.0, 4.0, 6.0])
        assert p.normalize() == 0.5
        assert p.coefficients == [1.0, 2.0, 3.0]

    def test_denormalize(self) -> None:
        """Младший ненулевой коэффициент → 1"""
        p = Polynomial([2.0, 4.0, 8.0])
        p.denormalize()
        assert p.coefficients == [0.25, 0.5, 1.0]

        q = Polynomial([1.0, 2.0, 0.0])
        q.denormalize()
        assert q.coefficients == [0.5, 1.0, 0.0]


# =============================================================================
# ТЕСТЫ: Анализ
# =============================================================================


class TestCalculus:
    """Тесты производных и интегралов"""

    def test_derivative(self) -> None:
        """d/dx (x^2 + 3x + 2) = 2x + 3"""
        assert Polynomial([1.0, 3.0, 2.0]).derivative().coefficients == [2.0, 3.0]

    def test_derivative_of_constant(self) -> None:
        """Производная константы — нулевой полином"""
        assert Polynomial([5.0]).derivative().coefficients == [0.0]

    def test_integral(self) -> None:
        """∫(2x + 3) dx + 2 = x^2 + 3x + 2"""
        assert Polynomial([2.0, 3.0]).integral(2.0).coefficients == [1.0, 3.0, 2.0]
        assert Polynomial([2.0, 3.0]).integral().coefficients == [1.0, 3.0, 0.0]

    @pytest.mark.parametrize("coefficients", [[3.0, 2.0, 1.0], [4.0, 0.0, -2.0, 1.0], [7.0]])
    def test_derivative_inverts_integral(self, coefficients: list[float]) -> None:
        """derivative(integral(P)) == P"""
        p = Polynomial(coefficients)
        assert p.integral(5.0).derivative() == p

    def test_integrate(self) -> None:
        """∫_0^2 3x^2 dx = 8"""
        assert Polynomial([3.0, 0.0, 0.0]).integrate(0.0, 2.0) == pytest.approx(8.0)

    def test_differentiate(self) -> None:
        """P'(x) без построения производной"""
        p = Polynomial([1.0, 3.0, 2.0])
        assert p.differentiate(2.0) == 7.0
        assert p.differentiate(2.0) == p.derivative().evaluate(2.0)
        assert Polynomial([5.0]).differentiate(1.0) == 0.0


# =============================================================================
# ТЕСТЫ: Вычисление
# =============================================================================


class TestEvaluation:
    """Тесты вычисления значений"""

    def test_evaluate_real(self) -> None:
        """Горнер в вещественной точке"""
        p = Polynomial([1.0, 3.0, 2.0])
        assert p.evaluate(1.0) == 6.0
        assert p.evaluate(-1.0) == 0.0
        assert p(2.0) == 12.0

    def test_evaluate_complex(self) -> None:
        """Горнер в комплексной точке: x^2 + 1 при x = i равно 0"""
        p = Polynomial([1.0, 0.0, 1.0])
        result = p.evaluate(Complex(0.0, 1.0))
        assert isinstance(result, Complex)
        assert result.abs() == pytest.approx(0.0, abs=1e-15)

        value = p.evaluate(Complex(1.0, 1.0))
        assert (value.real, value.imag) == (1.0, 2.0)

    def test_evaluate_complex_parts(self) -> None:
        """evaluate_complex(real, imag) совпадает с evaluate(Complex)"""
        p = Polynomial([2.0, -1.0, 3.0])
        assert p.evaluate_complex(0.5, -1.5) == p.evaluate(Complex(0.5, -1.5))

    def test_evaluate_many(self) -> None:
        """Вычисление в массиве точек"""
        assert Polynomial([1.0, 0.0, -1.0]).evaluate_many([0.0, 2.0]) == [-1.0, 3.0]

    def test_polyval(self) -> None:
        """Статическое вычисление по коэффициентам"""
        assert Polynomial.polyval([1.0, 0.0, -1.0], 2.0) == 3.0
        assert Polynomial.polyval([1.0, 0.0, -1.0], [0.0, 2.0]) == [-1.0, 3.0]

    def test_polyval_from_roots(self) -> None:
        """Π (x - r_i)"""
        result = Polynomial.polyval_from_roots([1.0, 2.0], Complex(3.0, 0.0))
        assert (result.real, result.imag) == (2.0, 0.0)


# =============================================================================
# ТЕСТЫ: Корни
# =============================================================================


class TestRoots:
    """Тесты roots()"""

    def test_constant_has_no_roots(self) -> None:
        """Степень 0 → пустой список"""
        assert Polynomial([3.0]).roots() == []

    def test_linear(self) -> None:
        """2x + 4 = 0 → x = -2"""
        assert Polynomial([2.0, 4.0]).roots() == [Complex(-2.0, 0.0)]

    def test_quadratic_real(self) -> None:
        """x^2 + 3x + 2 → -1, -2"""
        roots = Polynomial([1.0, 3.0, 2.0]).roots()
        assert sorted(r.real for r in roots) == pytest.approx([-2.0, -1.0])
        assert all(r.is_real() for r in roots)

    def test_quadratic_complex(self) -> None:
        """x^2 + 1 → ±i"""
        roots = Polynomial([1.0, 0.0, 1.0]).roots()
        assert [r.real for r in roots] == [0.0, 0.0]
        assert sorted(r.imag for r in roots) == [-1.0, 1.0]

    def test_quadratic_double_zero_root(self) -> None:
        """x^2 → 0, 0"""
        assert [r.abs() for r in Polynomial([1.0, 0.0, 0.0]).roots()] == [0.0, 0.0]

    def test_roots_satisfy_polynomial(self) -> None:
        """P(root) ≈ 0 для каждого корня"""
        p = Polynomial([2.0, -3.0, 5.0])
        for root in p.roots():
            assert p.evaluate(root).abs() == pytest.approx(0.0, abs=1e-12)

    def test_cubic(self) -> None:
        """(x - 1)(x - 2)(x - 3): корни без кэша from_roots"""
        p = Polynomial(Polynomial.from_roots(1.0, 2.0, 3.0).coefficients)
        assert p.coefficients == [1.0, -6.0, 11.0, -6.0]

        roots = p.roots()
        assert len(roots) == 3
        assert sorted(r.real for r in roots) == pytest.approx([1.0, 2.0, 3.0])
        assert all(r.imag == pytest.approx(0.0, abs=1e-9) for r in roots)

    def test_quartic_complex(self) -> None:
        """x^4 - 1 → ±1, ±i"""
        p = Polynomial([1.0, 0.0, 0.0, 0.0, -1.0])
        roots = p.roots()
        assert len(roots) == 4
        assert sorted(r.abs() for r in roots) == pytest.approx([1.0] * 4)
        assert sorted(r.imag for r in roots) == pytest.approx([-1.0, 0.0, 0.0, 1.0], abs=1e-9)
        for root in roots:
            assert p.evaluate(root).abs() == pytest.approx(0.0, abs=1e-9)

    def test_higher_degree_roots_cached(self) -> None:
        """Корни степени > 2 кэшируются и сбрасываются мутацией"""
        p = Polynomial([1.0, 0.0, 0.0, -1.0])
        assert len(p.roots()) == 3
        p.multiply_equals(Polynomial([1.0, 0.0]))
        assert len(p.roots()) == 4

    def test_roots_returns_copy(self) -> None:
        """Изменение возвращённого списка не затрагивает кэш"""
        p = Polynomial([1.0, 3.0, 2.0])
        p.roots().clear()
        assert len(p.roots()) == 2
