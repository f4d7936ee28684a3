"""
Контракты размерностей массивов
"""

from sptk.core.contracts.dimension_checks import (
    # Exceptions
    ArrayContractError,
    DimensionError,
    ShapeError,
    # Checks
    check_min_x_length,
    check_rectangular,
    check_reshape,
    check_xy_dimensions,
)

__all__ = [
    # Exceptions
    "ArrayContractError",
    "DimensionError",
    "ShapeError",
    # Checks
    "check_min_x_length",
    "check_rectangular",
    "check_reshape",
    "check_xy_dimensions",
]
