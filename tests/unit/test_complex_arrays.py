"""
Тесты для Complex Arrays, SplitComplex и GridData

Проверяет:
- zip / zip_split / split и проверку размерностей
- Редукции sum, mean, product (включая пустой вход)
- Поэлементную арифметику и свёртку
- Независимость deep_copy от MutableComplex источников
- SplitComplex: валидацию, add/subtract, convolve_valid
- GridData.of / mesh_grid
"""

import math

import pytest

from sptk.arrays import complex_arrays as ca
from sptk.arrays.grid import GridData, mesh_grid
from sptk.arrays.split_complex import SplitComplex
from sptk.core.contracts.dimension_checks import DimensionError, ShapeError
from sptk.core.math.complex_number import Complex, MutableComplex


def parts(values: list[Complex]) -> list[tuple[float, float]]:
    return [(v.real, v.imag) for v in values]


# =============================================================================
# ТЕСТЫ: Сборка и разборка
# =============================================================================


class TestZipAndSplit:
    """Тесты zip, zip_split, split, real, imag"""

    def test_zip(self) -> None:
        """Пары (real, imag) → Complex"""
        assert ca.zip([1.0, 2.0], [3.0, 4.0]) == [Complex(1.0, 3.0), Complex(2.0, 4.0)]

    def test_zip_mismatch(self) -> None:
        """Разные длины → DimensionError"""
        with pytest.raises(DimensionError):
            ca.zip([1.0, 2.0], [3.0])
        with pytest.raises(DimensionError):
            ca.zip_split([1.0], [])

    def test_real_imag_round_trip(self) -> None:
        """real/imag восстанавливают входы zip"""
        values = ca.zip([1.0, -2.0], [0.5, 7.0])
        assert ca.real(values) == [1.0, -2.0]
        assert ca.imag(values) == [0.5, 7.0]

    def test_split(self) -> None:
        """Complex → SplitComplex"""
        split = ca.split([Complex(1.0, 2.0), Complex(3.0, 4.0)])
        assert split.reals == [1.0, 3.0]
        assert split.imags == [2.0, 4.0]

    def test_abs_conj(self) -> None:
        """abs и conj поэлементно"""
        values = [Complex(3.0, 4.0), Complex(0.0, -2.0)]
        assert ca.abs(values) == [5.0, 2.0]
        assert ca.conj(values) == [Complex(3.0, -4.0), Complex(0.0, 2.0)]

    def test_constructors(self) -> None:
        """from_real, from_imaginary, zeros"""
        assert ca.from_real([1.0]) == [Complex(1.0, 0.0)]
        assert ca.from_imaginary([2.0]) == [Complex(0.0, 2.0)]
        assert ca.zeros(2) == [Complex(), Complex()]


class TestCopyAndShape:
    """Тесты deep_copy, concatenate, flatten"""

    def test_deep_copy_independent_of_mutable_source(self) -> None:
        """Мутация исходного MutableComplex не видна в копии"""
        source = [MutableComplex(1.0, 2.0)]
        copy = ca.deep_copy(source)
        source[0].add_equals(10.0)
        assert copy == [Complex(1.0, 2.0)]

    def test_concatenate(self) -> None:
        """Конкатенация в порядке аргументов"""
        assert ca.concatenate([Complex(1.0, 0.0)], [Complex(2.0, 0.0)]) == [
            Complex(1.0, 0.0),
            Complex(2.0, 0.0),
        ]

    def test_flatten(self) -> None:
        """Построчное объединение и рваные строки"""
        rows = [[Complex(1.0, 0.0), Complex(2.0, 0.0)], [Complex(3.0, 0.0), Complex(4.0, 0.0)]]
        assert ca.real(ca.flatten(rows)) == [1.0, 2.0, 3.0, 4.0]
        with pytest.raises(ShapeError):
            ca.flatten([[Complex()], []])


# =============================================================================
# ТЕСТЫ: Редукции
# =============================================================================


class TestReductions:
    """Тесты sum, mean, product"""

    def test_sum(self) -> None:
        """Сумма покомпонентно"""
        assert ca.sum([Complex(1.0, 2.0), Complex(3.0, 4.0)]) == Complex(4.0, 6.0)
        assert ca.sum([]) == Complex()

    def test_mean(self) -> None:
        """Среднее"""
        assert ca.mean([Complex(1.0, 2.0), Complex(3.0, 4.0)]) == Complex(2.0, 3.0)

    def test_mean_empty_is_nan(self) -> None:
        """Среднее пустого массива — обе компоненты NaN"""
        result = ca.mean([])
        assert math.isnan(result.real)
        assert math.isnan(result.imag)

    def test_product(self) -> None:
        """i * i = -1"""
        result = ca.product([Complex(0.0, 1.0), Complex(0.0, 1.0)])
        assert (result.real, result.imag) == (-1.0, 0.0)
        assert ca.product([]) == Complex(1.0, 0.0)


# =============================================================================
# ТЕСТЫ: Поэлементная арифметика и свёртка
# =============================================================================


class TestElementWise:
    """Тесты поэлементной арифметики"""

    def test_array_array(self) -> None:
        """Массив ⊕ массив"""
        a = [Complex(1.0, 1.0), Complex(2.0, 0.0)]
        b = [Complex(1.0, -1.0), Complex(0.0, 3.0)]
        assert parts(ca.add_element_wise(a, b)) == [(2.0, 0.0), (2.0, 3.0)]
        assert parts(ca.subtract_element_wise(a, b)) == [(0.0, 2.0), (2.0, -3.0)]
        assert parts(ca.multiply_element_wise(a, b)) == [(2.0, 0.0), (0.0, 6.0)]

    def test_array_scalar(self) -> None:
        """Массив ⊕ Complex или float"""
        a = [Complex(1.0, 1.0), Complex(2.0, 0.0)]
        assert parts(ca.add_element_wise(a, Complex(0.0, 1.0))) == [(1.0, 2.0), (2.0, 1.0)]
        assert parts(ca.subtract_element_wise(a, 1.0)) == [(0.0, 1.0), (1.0, 0.0)]
        assert parts(ca.multiply_element_wise(a, 2.0)) == [(2.0, 2.0), (4.0, 0.0)]

    @pytest.mark.parametrize(
        "function", [ca.add_element_wise, ca.subtract_element_wise, ca.multiply_element_wise]
    )
    def test_mismatch_raises(self, function) -> None:
        """Разные длины → DimensionError"""
        with pytest.raises(DimensionError):
            function([Complex()], [Complex(), Complex()])

    def test_divide_scalar_by_array(self) -> None:
        """result[i] = scalar / values[i]"""
        result = ca.divide_element_wise(Complex(1.0, 0.0), [Complex(0.0, 1.0), Complex(2.0, 0.0)])
        assert result[0].real == pytest.approx(0.0)
        assert result[0].imag == pytest.approx(-1.0)
        assert result[1].real == pytest.approx(0.5)
        assert result[1].imag == pytest.approx(0.0)

    def test_divide_by_zero_element(self) -> None:
        """Деление на Complex(0, 0) не бросает исключение"""
        result = ca.divide_element_wise(1.0, [Complex()])
        assert not result[0].is_finite()

    def test_multiply_in_place(self) -> None:
        """Умножение на скаляр in-place"""
        values = [Complex(1.0, 2.0), Complex(-1.0, 0.0)]
        assert ca.multiply_element_wise_in_place(values, 2.0) is None
        assert values == [Complex(2.0, 4.0), Complex(-2.0, 0.0)]

    def test_convolve(self) -> None:
        """Свёртка комплексных массивов"""
        a = ca.from_real([1.0, 2.0, 3.0])
        b = ca.from_real([4.0, 5.0])
        assert ca.real(ca.convolve(a, b)) == [4.0, 13.0, 22.0, 15.0]

        rotated = ca.convolve([Complex(1.0, 0.0), Complex(2.0, 0.0)], [Complex(0.0, 1.0)])
        assert parts(rotated) == [(0.0, 1.0), (0.0, 2.0)]

    def test_convolve_empty(self) -> None:
        """Пустой операнд → пустой результат"""
        assert ca.convolve([], [Complex()]) == []


# =============================================================================
# ТЕСТЫ: SplitComplex
# =============================================================================


class TestSplitComplex:
    """Тесты SplitComplex"""

    def test_mismatch_rejected(self) -> None:
        """Разные длины reals/imags → DimensionError"""
        with pytest.raises(DimensionError):
            SplitComplex([1.0, 2.0], [1.0])

    def test_constructors_and_access(self) -> None:
        """from_real, from_imaginary, zeros, count, индексирование"""
        split = SplitComplex.from_real([1.0, 2.0])
        assert split.count == 2
        assert len(split) == 2
        assert split.imags == [0.0, 0.0]
        assert split[1] == Complex(2.0, 0.0)
        assert SplitComplex.from_imaginary([3.0]).to_complex_list() == [Complex(0.0, 3.0)]
        assert SplitComplex.zeros(3).reals == [0.0, 0.0, 0.0]

    def test_add_subtract(self) -> None:
        """Поэлементные сумма и разность"""
        a = SplitComplex([1.0, 2.0], [3.0, 4.0])
        b = SplitComplex([1.0, 1.0], [1.0, 1.0])
        assert a.add(b) == SplitComplex([2.0, 3.0], [4.0, 5.0])
        assert a.subtract(b) == SplitComplex([0.0, 1.0], [2.0, 3.0])
        with pytest.raises(DimensionError):
            a.add(SplitComplex.zeros(1))

    def test_convolve_valid_real(self) -> None:
        """Режим valid: длина len(a) - len(b) + 1"""
        a = SplitComplex.from_real([1.0, 2.0, 3.0])
        result = a.convolve_valid(SplitComplex.from_real([1.0, 1.0]))
        assert result.reals == [3.0, 5.0]
        assert result.imags == [0.0, 0.0]

    def test_convolve_valid_complex(self) -> None:
        """Комплексное ядро поворачивает сигнал"""
        a = SplitComplex([0.0, 1.0], [1.0, 0.0])
        result = a.convolve_valid(SplitComplex.from_imaginary([1.0]))
        assert result.reals == [-1.0, 0.0]
        assert result.imags == [0.0, 1.0]

    def test_convolve_valid_matches_full_convolution(self) -> None:
        """valid совпадает с центральной частью полной свёртки"""
        signal = [1.0, -1.0, 2.0, 0.5, 3.0]
        kernel = [2.0, 1.0, -1.0]
        full = ca.real(ca.convolve(ca.from_real(signal), ca.from_real(kernel)))
        valid = SplitComplex.from_real(signal).convolve_valid(SplitComplex.from_real(kernel))
        assert valid.reals == full[len(kernel) - 1 : len(signal)]

    def test_convolve_valid_kernel_too_long(self) -> None:
        """Ядро длиннее сигнала → DimensionError"""
        with pytest.raises(DimensionError):
            SplitComplex.zeros(2).convolve_valid(SplitComplex.zeros(3))

    def test_convolve_valid_empty_kernel(self) -> None:
        """Пустое ядро → DimensionError, а не массив нулей"""
        with pytest.raises(DimensionError, match="x length must be >= 1"):
            SplitComplex.from_real([1.0, 2.0, 3.0]).convolve_valid(SplitComplex())


# =============================================================================
# ТЕСТЫ: GridData
# =============================================================================


class TestGrid:
    """Тесты GridData"""

    def test_of(self) -> None:
        """Узлы сетки 2x2"""
        grid = GridData.of([1.0, 2.0], [5.0, 6.0])
        assert grid.x == [1.0, 2.0, 1.0, 2.0]
        assert grid.y == [5.0, 5.0, 6.0, 6.0]
        assert (grid.rows, grid.cols) == (2, 2)

    def test_mesh_grid_rectangular(self) -> None:
        """rows = len(y), cols = len(x)"""
        grid = mesh_grid([1.0, 2.0, 3.0], [5.0, 6.0])
        assert grid.x == [1.0, 2.0, 3.0, 1.0, 2.0, 3.0]
        assert grid.y == [5.0, 5.0, 5.0, 6.0, 6.0, 6.0]
        assert (grid.rows, grid.cols) == (2, 3)
