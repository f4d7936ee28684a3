"""
Утилиты массивов float и Complex

Модули double_arrays и complex_arrays экспортируют функции с именами
sum, max, min, abs, zip: импортируйте модуль целиком, а не его функции.

    >>> from sptk.arrays import double_arrays
    >>> double_arrays.sum([1.0, 2.0])
    3.0
"""

from sptk.arrays import complex_arrays, double_arrays
from sptk.arrays.grid import GridData, mesh_grid
from sptk.arrays.split_complex import SplitComplex

__all__ = [
    "complex_arrays",
    "double_arrays",
    "GridData",
    "mesh_grid",
    "SplitComplex",
]
