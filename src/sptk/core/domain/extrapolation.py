"""
Extrapolation — Стратегии вычисления функции вне области [x0, xn]

Каждая стратегия — immutable Pydantic модель с дискриминатором kind.
Вычисление выполняется единой функцией extrapolate() по типу модели.

Стратегии:
- THROW: любой вызов — ошибка (OutOfRangeError снаружи, ExtrapolationError внутри)
- CLAMP_TO_VALUE / CLAMP_TO_NAN / CLAMP_TO_ZERO: константа
- CLAMP_TO_END_POINT: y0 слева, yn справа
- LINEAR: касательная y_i + f'(x_i) * (x - x_i) в ближайшей граничной точке
- NATURAL: продолжение крайних сегментов left_fn / right_fn

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x0 <= xn проверяется при создании (pydantic ValidationError)
2. Граничные стратегии бросают ExtrapolationError для x внутри [x0, xn]:
   экстраполятор не подменяет интерполяцию
"""

import logging
import math
from collections.abc import Callable
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExtrapolationError(ValueError):
    """Экстраполятор вызван для аргумента, который он не обслуживает."""


class OutOfRangeError(ExtrapolationError, IndexError):
    """Аргумент вне [x0, xn] при стратегии THROW."""


# =============================================================================
# ENUMS
# =============================================================================


class ExtrapolationMethod(str, Enum):
    """Именованные стратегии экстраполяции кусочной функции"""

    THROW = "throw"
    LINEAR = "linear"
    NATURAL = "natural"
    CLAMP_TO_NAN = "clamp_to_nan"
    CLAMP_TO_ZERO = "clamp_to_zero"
    CLAMP_TO_END_POINT = "clamp_to_end_point"


# =============================================================================
# MODELS
# =============================================================================


class BoundedExtrapolator(BaseModel):
    """
    Базовая модель экстраполятора с областью определения [x0, xn].
    """

    x0: float = Field(..., description="Левая граница области определения")
    xn: float = Field(..., description="Правая граница области определения")

    model_config = {"frozen": True}

    @field_validator("xn")
    @classmethod
    def validate_bounds(cls, v: float, info) -> float:
        """Проверка, что x0 <= xn"""
        if "x0" in info.data and info.data["x0"] > v:
            raise ValueError(f"x0 {info.data['x0']} must not exceed xn {v}")
        return v


class ThrowExtrapolator(BoundedExtrapolator):
    """Экстраполяция запрещена."""

    kind: Literal["throw"] = "throw"


class ClampToEndPointExtrapolator(BoundedExtrapolator):
    """Значение y0 левее x0 и yn правее xn."""

    kind: Literal["clamp_to_end_point"] = "clamp_to_end_point"
    y0: float = Field(..., description="Значение в x0")
    yn: float = Field(..., description="Значение в xn")


class LinearExtrapolator(BoundedExtrapolator):
    """
    Касательная в ближайшей граничной точке.

    Наклон вычисляется производной derivative в x0 (x <= xn) или в xn (x > xn).
    """

    kind: Literal["linear"] = "linear"
    y0: float = Field(..., description="Значение в x0")
    yn: float = Field(..., description="Значение в xn")
    derivative: Callable[[float], float] = Field(..., description="Первая производная f'(x)")


class NaturalExtrapolator(BoundedExtrapolator):
    """Продолжение крайних сегментов функции за пределы [x0, xn]."""

    kind: Literal["natural"] = "natural"
    left_fn: Callable[[float], float] = Field(..., description="Функция для x < x0")
    right_fn: Callable[[float], float] = Field(..., description="Функция для x > xn")


class ClampToValueExtrapolator(BaseModel):
    """Константа value для любого x."""

    kind: Literal["clamp_to_value"] = "clamp_to_value"
    value: float = Field(..., description="Возвращаемое значение (допускается NaN/Inf)")

    model_config = {"frozen": True}


class ClampToNanExtrapolator(BaseModel):
    """NaN для любого x."""

    kind: Literal["clamp_to_nan"] = "clamp_to_nan"

    model_config = {"frozen": True}


class ClampToZeroExtrapolator(BaseModel):
    """0.0 для любого x."""

    kind: Literal["clamp_to_zero"] = "clamp_to_zero"

    model_config = {"frozen": True}


Extrapolator = Annotated[
    Union[
        ThrowExtrapolator,
        ClampToValueExtrapolator,
        ClampToNanExtrapolator,
        ClampToZeroExtrapolator,
        ClampToEndPointExtrapolator,
        LinearExtrapolator,
        NaturalExtrapolator,
    ],
    Field(discriminator="kind"),
]

_EXTRAPOLATOR_ADAPTER = TypeAdapter(Extrapolator)


# =============================================================================
# FACTORIES
# =============================================================================


def extrapolator_from_config(config: dict[str, Any]) -> Extrapolator:
    """
    Создание экстраполятора из словаря с ключом "kind".

    Examples:
        >>> extrapolator_from_config({"kind": "clamp_to_value", "value": 1.5})
        ClampToValueExtrapolator(kind='clamp_to_value', value=1.5)

    Raises:
        pydantic.ValidationError: Неизвестный kind или некорректные параметры
    """
    return _EXTRAPOLATOR_ADAPTER.validate_python(config)


def make_extrapolator(
    method: ExtrapolationMethod,
    x0: float,
    xn: float,
    y0: float = math.nan,
    yn: float = math.nan,
    derivative: Callable[[float], float] | None = None,
    left_fn: Callable[[float], float] | None = None,
    right_fn: Callable[[float], float] | None = None,
) -> Extrapolator:
    """
    Создание экстраполятора по именованной стратегии.

    Args:
        method: Стратегия
        x0, xn: Область определения функции
        y0, yn: Значения функции на границах (CLAMP_TO_END_POINT, LINEAR)
        derivative: Первая производная (LINEAR)
        left_fn, right_fn: Крайние сегменты (NATURAL)

    Raises:
        ExtrapolationError: Если стратегии не хватает параметров
    """
    method = ExtrapolationMethod(method)

    if method == ExtrapolationMethod.THROW:
        return ThrowExtrapolator(x0=x0, xn=xn)
    if method == ExtrapolationMethod.CLAMP_TO_NAN:
        return ClampToNanExtrapolator()
    if method == ExtrapolationMethod.CLAMP_TO_ZERO:
        return ClampToZeroExtrapolator()
    if method == ExtrapolationMethod.CLAMP_TO_END_POINT:
        return ClampToEndPointExtrapolator(x0=x0, xn=xn, y0=y0, yn=yn)
    if method == ExtrapolationMethod.LINEAR:
        if derivative is None:
            raise ExtrapolationError("LINEAR extrapolation requires a derivative")
        return LinearExtrapolator(x0=x0, xn=xn, y0=y0, yn=yn, derivative=derivative)

    # NATURAL
    if left_fn is None or right_fn is None:
        raise ExtrapolationError("NATURAL extrapolation requires left_fn and right_fn")
    return NaturalExtrapolator(x0=x0, xn=xn, left_fn=left_fn, right_fn=right_fn)


# =============================================================================
# EVALUATION
# =============================================================================


def _not_outside(x: float, x0: float, xn: float) -> ExtrapolationError:
    logger.debug("extrapolation requested inside domain: x=%r in [%r, %r]", x, x0, xn)
    return ExtrapolationError(f"{x} is not outside [{x0}, {xn}]")


def extrapolate(extrapolator: Extrapolator, x: float) -> float:
    """
    Значение функции вне области определения.

    Args:
        extrapolator: Стратегия экстраполяции
        x: Аргумент

    Returns:
        Экстраполированное значение

    Raises:
        OutOfRangeError: THROW и x вне [x0, xn]
        ExtrapolationError: Граничная стратегия и x внутри [x0, xn]

    Examples:
        >>> extrapolate(ClampToEndPointExtrapolator(x0=0, xn=1, y0=5, yn=7), 2.0)
        7.0
    """
    e = extrapolator

    if isinstance(e, ThrowExtrapolator):
        if x < e.x0:
            logger.debug("x=%r below domain [%r, %r]", x, e.x0, e.xn)
            raise OutOfRangeError(f"{x} is smaller than every number in [{e.x0}, {e.xn}]")
        if x > e.xn:
            logger.debug("x=%r above domain [%r, %r]", x, e.x0, e.xn)
            raise OutOfRangeError(f"{x} is bigger than every number in [{e.x0}, {e.xn}]")
        raise _not_outside(x, e.x0, e.xn)

    if isinstance(e, ClampToValueExtrapolator):
        return e.value

    if isinstance(e, ClampToNanExtrapolator):
        return math.nan

    if isinstance(e, ClampToZeroExtrapolator):
        return 0.0

    if isinstance(e, ClampToEndPointExtrapolator):
        if x < e.x0:
            return e.y0
        if x > e.xn:
            return e.yn
        raise _not_outside(x, e.x0, e.xn)

    if isinstance(e, LinearExtrapolator):
        xi, yi = (e.xn, e.yn) if x > e.xn else (e.x0, e.y0)
        return yi + e.derivative(xi) * (x - xi)

    if isinstance(e, NaturalExtrapolator):
        if x < e.x0:
            return e.left_fn(x)
        if x > e.xn:
            return e.right_fn(x)
        raise _not_outside(x, e.x0, e.xn)

    raise TypeError(f"Unsupported extrapolator: {type(extrapolator).__name__}")
