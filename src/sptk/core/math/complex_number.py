"""
Complex — Комплексное число

Две модели одного значения:
- Complex: immutable value type. Все арифметические и трансцендентные
  операции возвращают новый экземпляр, операнды не модифицируются.
- MutableComplex: изменяемый аккумулятор с in-place операциями (*_equals),
  которые перезаписывают собственные компоненты и возвращают None.

Преобразования: Complex.to_mutable(), MutableComplex.to_complex().

ПОЛИТИКА ГРАНИЧНЫХ СЛУЧАЕВ:
Ни одна операция не бросает исключение для арифметических граничных случаев
(деление на Complex с нулевой нормой, log(0), переполнение cosh):
результаты содержат IEEE NaN/Inf. Проверка — через is_finite().

РАВЕНСТВО И ХЭШ:
- __eq__: точное побитовое сравнение обеих компонент (без толерантности)
- __hash__: из битовых представлений компонент с множителем 31,
  мнимая компонента хэшируется первой
"""

import math
import numbers
import struct
from dataclasses import dataclass
from typing import Final, Union

from sptk.core.math import ieee
from sptk.core.math.scalar_math import hypot

# Порог |imag|, после которого tan(z) возвращает ±j (cosh(2*imag) переполнился бы)
TAN_IMAG_SATURATION: Final[float] = 20.0

_HASH_PRIME: Final[int] = 31
_HASH_MASK: Final[int] = 0xFFFFFFFF


def _bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _fold(value: float) -> int:
    bits = _bits(value)
    return (bits ^ (bits >> 32)) & _HASH_MASK


def _parts(value: "ComplexLike") -> tuple[float, float]:
    """Разложение операнда на (real, imag)."""
    if isinstance(value, (Complex, MutableComplex)):
        return value.real, value.imag
    if isinstance(value, numbers.Real):
        return float(value), 0.0
    if isinstance(value, complex):
        return value.real, value.imag
    raise TypeError(f"Unsupported operand type: {type(value).__name__}")


def _multiply_parts(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    return a * c - b * d, a * d + b * c


def _invert_parts(real: float, imag: float) -> tuple[float, float]:
    # conj / norm; нулевая норма → Inf/NaN
    mag = ieee.divide(1.0, real * real + imag * imag)
    return real * mag, -imag * mag


# =============================================================================
# COMPLEX (IMMUTABLE)
# =============================================================================


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Неизменяемое комплексное число real + j*imag.

    Поддерживает операторы Python (+, -, *, /, **, унарный -, abs())
    с операндами Complex, MutableComplex, int/float и builtin complex.
    """

    real: float = 0.0
    imag: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_real(cls, d: float) -> "Complex":
        """Комплексное число (d, 0)."""
        return cls(d, 0.0)

    @classmethod
    def from_imaginary(cls, d: float) -> "Complex":
        """Комплексное число (0, d)."""
        return cls(0.0, d)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        """
        Комплексное число по модулю и фазе.

        Args:
            r: Модуль
            theta: Фаза (радианы)

        Returns:
            (r * cos(theta), r * sin(theta))
        """
        return cls(r * ieee.cos(theta), r * ieee.sin(theta))

    @classmethod
    def copy_of(cls, c: "ComplexLike") -> "Complex":
        real, imag = _parts(c)
        return cls(real, imag)

    @classmethod
    def from_builtin(cls, c: complex) -> "Complex":
        return cls(c.real, c.imag)

    def to_mutable(self) -> "MutableComplex":
        return MutableComplex(self.real, self.imag)

    # -------------------------------------------------------------------------
    # Равенство, хэш, сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Complex, MutableComplex)):
            return NotImplemented
        return _bits(self.real) == _bits(other.real) and _bits(self.imag) == _bits(other.imag)

    def __hash__(self) -> int:
        result = 1
        result = (_HASH_PRIME * result + _fold(self.imag)) & _HASH_MASK
        result = (_HASH_PRIME * result + _fold(self.real)) & _HASH_MASK
        return result

    def compare_to(self, other: "ComplexLike") -> int:
        """
        Лексикографическое сравнение: сначала real, затем imag.

        Returns:
            -1, 0 или +1
        """
        if isinstance(other, (Complex, MutableComplex)) and self == other:
            return 0

        real, imag = _parts(other)
        if self.real > real:
            return 1
        elif self.real < real:
            return -1
        elif self.imag == imag:
            return 0
        elif self.imag > imag:
            return 1
        else:
            return -1

    def compare_to_abs(self, other: "ComplexLike") -> int:
        """
        Сравнение по модулю hypot(real, imag).

        Равные значения дают 0 без вычисления модулей.
        """
        if isinstance(other, (Complex, MutableComplex)) and self == other:
            return 0

        self_abs = self.abs()
        other_abs = hypot(*_parts(other))

        if self_abs == other_abs:
            return 0
        elif self_abs > other_abs:
            return 1
        else:
            return -1

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def is_real(self) -> bool:
        return self.imag == 0

    def is_finite(self) -> bool:
        """True если обе компоненты конечны."""
        return math.isfinite(self.real) and math.isfinite(self.imag)

    def abs(self) -> float:
        """Модуль через hypot (без переполнения)."""
        return hypot(self.real, self.imag)

    def arg(self) -> float:
        """Аргумент atan2(imag, real), радианы."""
        return ieee.atan2(self.imag, self.real)

    def norm(self) -> float:
        """Квадрат модуля real^2 + imag^2."""
        return self.real * self.real + self.imag * self.imag

    def conj(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def uminus(self) -> "Complex":
        return Complex(-self.real, -self.imag)

    def invert(self) -> "Complex":
        """
        Обратное число 1 / self = conj / norm.

        Для нулевой нормы компоненты результата — Inf/NaN.
        """
        return Complex(*_invert_parts(self.real, self.imag))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "ComplexLike") -> "Complex":
        real, imag = _parts(other)
        return Complex(self.real + real, self.imag + imag)

    def add_parts(self, real: float, imag: float) -> "Complex":
        return Complex(self.real + real, self.imag + imag)

    def subtract(self, other: "ComplexLike") -> "Complex":
        real, imag = _parts(other)
        return Complex(self.real - real, self.imag - imag)

    def subtract_parts(self, real: float, imag: float) -> "Complex":
        return Complex(self.real - real, self.imag - imag)

    def multiply(self, other: "ComplexLike") -> "Complex":
        if isinstance(other, numbers.Real):
            d = float(other)
            return Complex(self.real * d, self.imag * d)
        real, imag = _parts(other)
        return Complex(*_multiply_parts(self.real, self.imag, real, imag))

    def multiply_parts(self, real: float, imag: float) -> "Complex":
        return Complex(*_multiply_parts(self.real, self.imag, real, imag))

    def divide(self, other: "ComplexLike") -> "Complex":
        """
        Деление на Complex (через invert) или на вещественное число (через 1/d).
        """
        if isinstance(other, numbers.Real):
            return self.multiply(ieee.divide(1.0, float(other)))
        real, imag = _parts(other)
        inv_real, inv_imag = _invert_parts(real, imag)
        return Complex(*_multiply_parts(self.real, self.imag, inv_real, inv_imag))

    def divide_parts(self, real: float, imag: float) -> "Complex":
        return self.divide(Complex(real, imag))

    # -------------------------------------------------------------------------
    # Степени, корни, логарифм, экспонента
    # -------------------------------------------------------------------------

    def sqrt(self) -> "Complex":
        """
        Главная ветвь квадратного корня.

        z = sqrt(0.5 * (|real| + abs()))
        real >= 0: (z, imag / (2z))
        real < 0:  (|imag| / (2z), copysign(z, imag))
        """
        if self.real == 0 and self.imag == 0:
            return Complex()

        z = ieee.sqrt(0.5 * (abs(self.real) + self.abs()))
        if self.real >= 0:
            return Complex(z, ieee.divide(0.5 * self.imag, z))
        return Complex(ieee.divide(0.5 * abs(self.imag), z), math.copysign(z, self.imag))

    def sqrt1z(self) -> "Complex":
        """sqrt(1 - z^2)."""
        return Complex.from_real(1.0).subtract(self.pow2()).sqrt()

    def pow(self, exponent: "ComplexLike") -> "Complex":
        """
        Комплексная степень exp(exponent * log(self)), главная ветвь.
        """
        return self.log().multiply(exponent).exp()

    def pow2(self) -> "Complex":
        """z^2 в замкнутой форме."""
        return Complex(
            self.real * self.real - self.imag * self.imag,
            2 * self.real * self.imag,
        )

    def log(self) -> "Complex":
        """Натуральный логарифм (ln(abs()), arg()); log(0) = (-inf, 0)."""
        return Complex(ieee.log(self.abs()), self.arg())

    def exp(self) -> "Complex":
        exp = ieee.exp(self.real)
        return Complex(exp * ieee.cos(self.imag), exp * ieee.sin(self.imag))

    # -------------------------------------------------------------------------
    # Тригонометрия
    # -------------------------------------------------------------------------

    def sin(self) -> "Complex":
        return Complex(
            ieee.sin(self.real) * ieee.cosh(self.imag),
            ieee.cos(self.real) * ieee.sinh(self.imag),
        )

    def cos(self) -> "Complex":
        return Complex(
            ieee.cos(self.real) * ieee.cosh(self.imag),
            -ieee.sin(self.real) * ieee.sinh(self.imag),
        )

    def tan(self) -> "Complex":
        """
        Тангенс. Для imag > 20 возвращает +j, для imag < -20 возвращает -j.
        """
        if self.imag > TAN_IMAG_SATURATION:
            return Complex.from_imaginary(1.0)
        if self.imag < -TAN_IMAG_SATURATION:
            return Complex.from_imaginary(-1.0)

        dreal = 2.0 * self.real
        dimag = 2.0 * self.imag
        tmp = ieee.divide(1.0, ieee.cos(dreal) + ieee.cosh(dimag))
        return Complex(ieee.sin(dreal) * tmp, ieee.sinh(dimag) * tmp)

    def asin(self) -> "Complex":
        """-i * log(sqrt(1 - z^2) + i*z)."""
        return self.sqrt1z().add(self.multiply_parts(0.0, 1.0)).log().multiply_parts(0.0, -1.0)

    def acos(self) -> "Complex":
        """-i * log(z + i*sqrt(1 - z^2))."""
        return self.add(self.sqrt1z().multiply_parts(0.0, 1.0)).log().multiply_parts(0.0, -1.0)

    def atan(self) -> "Complex":
        """(i/2) * log((z + i) / (i - z))."""
        i = Complex.from_imaginary(1.0)
        return self.add(i).divide(i.subtract(self)).log().multiply(i.multiply(0.5))

    # -------------------------------------------------------------------------
    # Гиперболические функции
    # -------------------------------------------------------------------------

    def sinh(self) -> "Complex":
        return Complex(
            ieee.sinh(self.real) * ieee.cos(self.imag),
            ieee.cosh(self.real) * ieee.sin(self.imag),
        )

    def cosh(self) -> "Complex":
        return Complex(
            ieee.cosh(self.real) * ieee.cos(self.imag),
            ieee.sinh(self.real) * ieee.sin(self.imag),
        )

    def tanh(self) -> "Complex":
        """(tanh(re) + i*tan(im)) / (1 + i*tanh(re)*tan(im))."""
        tanh_re = ieee.tanh(self.real)
        tan_im = ieee.tan(self.imag)
        return Complex(tanh_re, tan_im).divide(Complex(1.0, tanh_re * tan_im))

    # -------------------------------------------------------------------------
    # Протокол Python
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Complex":
        try:
            return self.add(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> "Complex":
        try:
            return self.subtract(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __rsub__(self, other: object) -> "Complex":
        try:
            return Complex.copy_of(other).subtract(self)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __mul__(self, other: object) -> "Complex":
        try:
            return self.multiply(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Complex":
        try:
            return self.divide(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __rtruediv__(self, other: object) -> "Complex":
        try:
            return Complex.copy_of(other).divide(self)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __pow__(self, exponent: object) -> "Complex":
        try:
            return self.pow(exponent)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __neg__(self) -> "Complex":
        return self.uminus()

    def __pos__(self) -> "Complex":
        return self

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        sign = "-" if math.copysign(1.0, self.imag) < 0 else "+"
        return f"({self.real} {sign} {abs(self.imag)}j)"


# =============================================================================
# MUTABLE COMPLEX
# =============================================================================


class MutableComplex:
    """
    Изменяемое комплексное число для in-place накопления.

    Операции *_equals перезаписывают компоненты получателя и возвращают None.
    Не хэшируется.
    """

    __slots__ = ("real", "imag")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, real: float = 0.0, imag: float = 0.0) -> None:
        self.real = float(real)
        self.imag = float(imag)

    @classmethod
    def copy_of(cls, c: "ComplexLike") -> "MutableComplex":
        return cls(*_parts(c))

    def to_complex(self) -> Complex:
        """Снимок текущего значения как immutable Complex."""
        return Complex(self.real, self.imag)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Complex, MutableComplex)):
            return NotImplemented
        return _bits(self.real) == _bits(other.real) and _bits(self.imag) == _bits(other.imag)

    def __repr__(self) -> str:
        return f"MutableComplex(real={self.real!r}, imag={self.imag!r})"

    def __abs__(self) -> float:
        return hypot(self.real, self.imag)

    def __sub__(self, other: object) -> Complex:
        return self.to_complex() - other

    def __rsub__(self, other: object) -> Complex:
        return other - self.to_complex()

    def abs(self) -> float:
        return hypot(self.real, self.imag)

    def is_finite(self) -> bool:
        return math.isfinite(self.real) and math.isfinite(self.imag)

    def set(self, real: float, imag: float) -> None:
        self.real = float(real)
        self.imag = float(imag)

    # -------------------------------------------------------------------------
    # In-place арифметика
    # -------------------------------------------------------------------------

    def add_equals(self, other: "ComplexLike") -> None:
        """self += other"""
        real, imag = _parts(other)
        self.real += real
        self.imag += imag

    def add_equals_parts(self, real: float, imag: float) -> None:
        self.real += real
        self.imag += imag

    def subtract_equals(self, other: "ComplexLike") -> None:
        """self -= other"""
        real, imag = _parts(other)
        self.real -= real
        self.imag -= imag

    def multiply_equals(self, other: "ComplexLike") -> None:
        """self *= other"""
        if isinstance(other, numbers.Real):
            d = float(other)
            self.real *= d
            self.imag *= d
            return
        real, imag = _parts(other)
        self.real, self.imag = _multiply_parts(self.real, self.imag, real, imag)

    def multiply_equals_parts(self, real: float, imag: float) -> None:
        self.real, self.imag = _multiply_parts(self.real, self.imag, real, imag)

    def divide_equals(self, other: "ComplexLike") -> None:
        """self /= other"""
        if isinstance(other, numbers.Real):
            self.multiply_equals(ieee.divide(1.0, float(other)))
            return
        inv_real, inv_imag = _invert_parts(*_parts(other))
        self.real, self.imag = _multiply_parts(self.real, self.imag, inv_real, inv_imag)

    def invert_equals(self) -> None:
        """self = 1 / self; нулевая норма даёт Inf/NaN компоненты."""
        self.real, self.imag = _invert_parts(self.real, self.imag)

    def conj_equals(self) -> None:
        self.imag = -self.imag


ComplexLike = Union[Complex, MutableComplex, float, int, complex]
