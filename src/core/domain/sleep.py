"""Sleep — Входные модели sleep gate (стадии сна, нейрохимические прокси)

Immutable Pydantic модели для входов evaluator:
- StagePosteriors: апостериорные вероятности пяти стадий сна от upstream
  классификатора (не обязательно нормированы, могут содержать NaN/Inf)
- NeurochemInputs: нормированные физиологические прокси [0, 1]

Модели намеренно НЕ ограничивают диапазоны (ge/le): невалидные числа
поглощаются evaluator через clamp, а не отклоняются.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SleepStage(str, Enum):
    """Стадии сна в каноническом порядке распределения."""

    WAKE = "WAKE"
    N1 = "N1"
    N2 = "N2"
    N3 = "N3"
    REM = "REM"


# =============================================================================
# MODELS
# =============================================================================


class StagePosteriors(BaseModel):
    """Апостериорные вероятности стадий сна.

    Порядок значений фиксирован: WAKE, N1, N2, N3, REM.
    Сумма не обязана быть равна 1; допускаются отрицательные и NaN/Inf.
    """

    p_wake: float = Field(..., description="P(WAKE)")
    p_n1: float = Field(..., description="P(N1)")
    p_n2: float = Field(..., description="P(N2)")
    p_n3: float = Field(..., description="P(N3)")
    p_rem: float = Field(..., description="P(REM)")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        """Значения в каноническом порядке SleepStage."""
        return (self.p_wake, self.p_n1, self.p_n2, self.p_n3, self.p_rem)


class NeurochemInputs(BaseModel):
    """Нормированные нейрохимические прокси.

    Обязательные: lf_hf_norm, rmssd_norm, stress_norm.
    Опциональные (0.0 если недоступны): crp_proxy, il6_proxy.
    Все значения ожидаются в [0, 1]; выход за диапазон обрабатывается clamp.
    """

    lf_hf_norm: float = Field(..., description="LF/HF ratio, нормирован [0, 1]")
    rmssd_norm: float = Field(..., description="RMSSD, нормирован [0, 1]")
    stress_norm: float = Field(..., description="Stress index, нормирован [0, 1]")
    crp_proxy: float = Field(0.0, description="CRP proxy [0, 1] (optional)")
    il6_proxy: float = Field(0.0, description="IL-6 proxy [0, 1] (optional)")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        """Значения в порядке commitment вектора."""
        return (
            self.lf_hf_norm,
            self.rmssd_norm,
            self.stress_norm,
            self.crp_proxy,
            self.il6_proxy,
        )
