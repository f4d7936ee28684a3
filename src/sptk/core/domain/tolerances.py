"""
Tolerances — Толерантности для сравнения чисел

Immutable Pydantic модель с абсолютной и относительной толерантностью,
используемая в is_close (скаляры и Complex).

Формула (как numpy.isclose):
    |a - b| <= abs_tol + rel_tol * |b|
"""

from typing import Final

from pydantic import BaseModel, Field

# Абсолютная толерантность по умолчанию
DEFAULT_ABS_TOL: Final[float] = 1e-8

# Относительная толерантность по умолчанию
DEFAULT_REL_TOL: Final[float] = 1e-5


class Tolerances(BaseModel):
    """
    Пара толерантностей для is_close.

    Несимметрична по аргументам: относительная часть масштабируется по |b|.
    """

    abs_tol: float = Field(DEFAULT_ABS_TOL, ge=0, description="Абсолютная толерантность")
    rel_tol: float = Field(DEFAULT_REL_TOL, ge=0, description="Относительная толерантность")

    model_config = {"frozen": True}

    def with_abs_tol(self, abs_tol: float) -> "Tolerances":
        """Копия с заменённой абсолютной толерантностью (rel_tol сохраняется)."""
        return Tolerances(abs_tol=abs_tol, rel_tol=self.rel_tol)


DEFAULT_TOLERANCES: Final[Tolerances] = Tolerances()
