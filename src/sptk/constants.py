"""
Constants — Числовые константы библиотеки

Единственные process-wide данные библиотеки: машинные epsilon и 2π.
Не содержит изменяемого состояния.
"""

import math
from typing import Final

# Машинный epsilon для float64 (IEEE-754 double)
DOUBLE_EPS: Final[float] = 2.220446049250313e-16

# Машинный epsilon для float32 (IEEE-754 single)
FLOAT_EPS: Final[float] = 1.1920929e-7

TWO_PI: Final[float] = 2.0 * math.pi
