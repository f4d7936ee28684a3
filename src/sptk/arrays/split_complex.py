"""
Split Complex — Комплексный массив в раздельном хранении

SplitComplex хранит комплексную последовательность двумя параллельными
массивами float: вещественные и мнимые части. Такое представление удобно для
векторных ядер (свёртка, сложение), которым не нужны объекты Complex.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(reals) == len(imags) проверяется при создании (DimensionError)
2. Операции возвращают новый SplitComplex, операнды не модифицируются
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from sptk.core.contracts.dimension_checks import check_min_x_length, check_xy_dimensions
from sptk.core.math.complex_number import Complex


@dataclass(frozen=True)
class SplitComplex:
    """
    Комплексный массив: reals[i] + i * imags[i].

    Attributes:
        reals: Вещественные части
        imags: Мнимые части (той же длины)
    """

    reals: list[float] = field(default_factory=list)
    imags: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        check_xy_dimensions(self.reals, self.imags)
        object.__setattr__(self, "reals", [float(r) for r in self.reals])
        object.__setattr__(self, "imags", [float(i) for i in self.imags])

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_real(cls, reals: Sequence[float]) -> "SplitComplex":
        return cls(list(reals), [0.0] * len(reals))

    @classmethod
    def from_imaginary(cls, imags: Sequence[float]) -> "SplitComplex":
        return cls([0.0] * len(imags), list(imags))

    @classmethod
    def zeros(cls, count: int) -> "SplitComplex":
        return cls([0.0] * count, [0.0] * count)

    @classmethod
    def from_complex(cls, values: Sequence[Complex]) -> "SplitComplex":
        return cls([v.real for v in values], [v.imag for v in values])

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def __len__(self) -> int:
        return len(self.reals)

    @property
    def count(self) -> int:
        return len(self.reals)

    def __getitem__(self, index: int) -> Complex:
        return Complex(self.reals[index], self.imags[index])

    def to_complex_list(self) -> list[Complex]:
        return [Complex(r, i) for r, i in zip(self.reals, self.imags)]

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "SplitComplex") -> "SplitComplex":
        """
        Поэлементная сумма.

        Raises:
            DimensionError: Если длины различаются
        """
        check_xy_dimensions(self, other)
        return SplitComplex(
            [a + b for a, b in zip(self.reals, other.reals)],
            [a + b for a, b in zip(self.imags, other.imags)],
        )

    def subtract(self, other: "SplitComplex") -> "SplitComplex":
        """
        Поэлементная разность self - other.

        Raises:
            DimensionError: Если длины различаются
        """
        check_xy_dimensions(self, other)
        return SplitComplex(
            [a - b for a, b in zip(self.reals, other.reals)],
            [a - b for a, b in zip(self.imags, other.imags)],
        )

    def convolve_valid(self, kernel: "SplitComplex") -> "SplitComplex":
        """
        Свёртка в режиме "valid": только позиции полного перекрытия.

        out[n] = Σ_k self[n + k] * kernel[m - 1 - k], k = 0..m-1,
        длина результата len(self) - len(kernel) + 1.

        Args:
            kernel: Ядро длины m <= len(self)

        Raises:
            DimensionError: Если ядро пустое или длиннее сигнала

        Examples:
            >>> a = SplitComplex.from_real([1.0, 2.0, 3.0])
            >>> a.convolve_valid(SplitComplex.from_real([1.0, 1.0])).reals
            [3.0, 5.0]
        """
        check_min_x_length(kernel, 1)
        check_min_x_length(self, len(kernel))

        m = len(kernel)
        count = len(self) - m + 1
        reals = [0.0] * count
        imags = [0.0] * count

        for n in range(count):
            re = 0.0
            im = 0.0
            for k in range(m):
                ar = self.reals[n + k]
                ai = self.imags[n + k]
                br = kernel.reals[m - 1 - k]
                bi = kernel.imags[m - 1 - k]
                re += ar * br - ai * bi
                im += ar * bi + ai * br
            reals[n] = re
            imags[n] = im

        return SplitComplex(reals, imags)
