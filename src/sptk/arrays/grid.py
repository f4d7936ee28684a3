"""
Grid — Прямоугольная сетка точек

GridData разворачивает оси x и y в плоские массивы координат всех узлов
сетки len(y) x len(x).
"""

from collections.abc import Sequence
from dataclasses import dataclass

from sptk.arrays import double_arrays


@dataclass(frozen=True)
class GridData:
    """
    Узлы сетки в виде плоских массивов.

    Attributes:
        x: x-координаты узлов (ось x, повторённая len(y) раз)
        y: y-координаты узлов (ось y, повторённая len(x) раз и отсортированная)
        rows: Количество строк (len(y))
        cols: Количество столбцов (len(x))
    """

    x: list[float]
    y: list[float]
    rows: int
    cols: int

    @classmethod
    def of(cls, x: Sequence[float], y: Sequence[float]) -> "GridData":
        """
        Построение сетки по осям.

        Examples:
            >>> g = GridData.of([1.0, 2.0], [5.0, 6.0])
            >>> g.x, g.y
            ([1.0, 2.0, 1.0, 2.0], [5.0, 5.0, 6.0, 6.0])
        """
        grid_x = double_arrays.repeat(x, len(y))
        grid_y = double_arrays.repeat(y, len(x))
        double_arrays.sort(grid_y)
        return cls(grid_x, grid_y, len(y), len(x))


def mesh_grid(x: Sequence[float], y: Sequence[float]) -> GridData:
    return GridData.of(x, y)
