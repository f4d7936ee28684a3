"""
Доменные модели: толерантности сравнения и стратегии экстраполяции
"""

# Tolerances
from sptk.core.domain.tolerances import (
    DEFAULT_ABS_TOL,
    DEFAULT_REL_TOL,
    DEFAULT_TOLERANCES,
    Tolerances,
)

# Extrapolation
from sptk.core.domain.extrapolation import (
    BoundedExtrapolator,
    ClampToEndPointExtrapolator,
    ClampToNanExtrapolator,
    ClampToValueExtrapolator,
    ClampToZeroExtrapolator,
    ExtrapolationError,
    ExtrapolationMethod,
    Extrapolator,
    LinearExtrapolator,
    NaturalExtrapolator,
    OutOfRangeError,
    ThrowExtrapolator,
    extrapolate,
    extrapolator_from_config,
    make_extrapolator,
)

__all__ = [
    # Tolerances
    "DEFAULT_ABS_TOL",
    "DEFAULT_REL_TOL",
    "DEFAULT_TOLERANCES",
    "Tolerances",
    # Extrapolation: модели
    "BoundedExtrapolator",
    "ClampToEndPointExtrapolator",
    "ClampToNanExtrapolator",
    "ClampToValueExtrapolator",
    "ClampToZeroExtrapolator",
    "Extrapolator",
    "LinearExtrapolator",
    "NaturalExtrapolator",
    "ThrowExtrapolator",
    # Extrapolation: ошибки и функции
    "ExtrapolationError",
    "ExtrapolationMethod",
    "OutOfRangeError",
    "extrapolate",
    "extrapolator_from_config",
    "make_extrapolator",
]
