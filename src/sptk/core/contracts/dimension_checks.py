"""
Dimension Checks — Валидация размерностей массивов

Модуль проверяет контракты размерностей до того, как бинарная поэлементная
операция прочитает или запишет хотя бы один элемент.

Таксономия ошибок (закрытое множество):
- DimensionError: длины парных последовательностей различаются
  (или последовательность короче требуемого минимума)
- ShapeError: структурные ошибки 2D входа (рваные строки, нецелый reshape)

Обе ошибки — ValueError: это нарушение контракта вызывающей стороной,
восстановимое и не подлежащее повтору.
"""

import logging
from collections.abc import Sequence, Sized
from typing import Any

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArrayContractError(ValueError):
    """Базовый класс нарушений контракта массивов."""


class DimensionError(ArrayContractError):
    """
    Несовпадение размерностей.

    Бросается до любых вычислений; частичный результат не формируется,
    in-place операции не модифицируют аргументы.
    """


class ShapeError(ArrayContractError):
    """
    Структурная ошибка формы: рваный 2D массив или нецелый множитель reshape.
    """


# =============================================================================
# CHECKS
# =============================================================================


def check_xy_dimensions(x: Sized, y: Sized) -> None:
    """
    Проверка, что x и y имеют одинаковую длину.

    Принимает последовательности float, последовательности Complex
    и SplitComplex буферы (всё, что поддерживает len()).

    Raises:
        DimensionError: Если len(x) != len(y)
    """
    if len(x) != len(y):
        logger.debug("dimension mismatch: len(x)=%d, len(y)=%d", len(x), len(y))
        raise DimensionError("x and y dimensions must be the same")


def check_min_x_length(x: Sized, min_length: int) -> None:
    """
    Проверка минимальной длины последовательности.

    Raises:
        DimensionError: Если len(x) < min_length
    """
    if len(x) < min_length:
        logger.debug("length check failed: len(x)=%d < %d", len(x), min_length)
        raise DimensionError(f"x length must be >= {min_length}")


def check_rectangular(rows: Sequence[Sequence[Any]]) -> int:
    """
    Проверка, что все строки 2D массива имеют одинаковую длину.

    Args:
        rows: 2D массив (список строк)

    Returns:
        Количество столбцов (0 для пустого массива)

    Raises:
        ShapeError: Если строки имеют разную длину
    """
    columns = len(rows[0]) if rows else 0

    for index, row in enumerate(rows):
        if len(row) != columns:
            logger.debug(
                "jagged rows: row %d has %d columns, expected %d", index, len(row), columns
            )
            raise ShapeError("All rows must have the same length.")

    return columns


def check_reshape(length: int, columns: int) -> int:
    """
    Проверка, что линейный буфер длины length раскладывается на columns столбцов.

    Returns:
        Количество строк length // columns

    Raises:
        ShapeError: Если columns <= 0 или length не делится на columns
    """
    if columns <= 0 or length % columns != 0:
        logger.debug("invalid reshape: length=%d, columns=%d", length, columns)
        raise ShapeError(f"Buffer of length {length} cannot be split into {columns} columns")

    return length // columns
