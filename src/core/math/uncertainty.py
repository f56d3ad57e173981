"""
Uncertainty — Метрики неопределённости распределения стадий сна

Две независимые оценки неопределённости по нормированному распределению:
- max-gap: 1 - max(p), высокая когда ни одна стадия не доминирует
- entropy: H(p) / ln(K), нормированная энтропия Шеннона (натуральный логарифм)

Комбинированная оценка — среднее двух метрик, лежит в [0, 1] без
дополнительного clamp.

ФОРМУЛЫ:
    u_question = clamp01(1 - max(p))
    H          = -Σ p_i * ln(p_i)   (только p_i > 0; 0 * ln 0 = 0)
    u_entropy  = clamp01(H / ln(K)) (K = 5 стадий)
    u_combined = 0.5 * (u_question + u_entropy)
"""

import math
from typing import Final, NamedTuple, Sequence

from src.core.math.numerical_safeguards import clamp01

# Число классов стадий сна (WAKE, N1, N2, N3, REM)
STAGE_CLASS_COUNT: Final[int] = 5

# Максимальная энтропия равномерного распределения по STAGE_CLASS_COUNT классам
MAX_STAGE_ENTROPY: Final[float] = math.log(float(STAGE_CLASS_COUNT))


class UncertaintyMetrics(NamedTuple):
    """Набор метрик неопределённости для одного распределения."""

    u_question: float
    u_entropy: float
    u_combined: float


def max_gap_uncertainty(post: Sequence[float]) -> float:
    """
    Max-gap неопределённость: clamp01(1 - max(p)).

    Максимум инициализируется нулём, поэтому для нулевого распределения
    результат равен 1.0.

    Examples:
        >>> max_gap_uncertainty([1.0, 0.0, 0.0, 0.0, 0.0])
        0.0
        >>> max_gap_uncertainty([0.0, 0.0, 0.0, 0.0, 0.0])
        1.0
    """
    peak = 0.0
    for v in post:
        if v > peak:
            peak = v
    return clamp01(1.0 - peak)


def shannon_entropy(post: Sequence[float]) -> float:
    """Энтропия Шеннона в натах; нулевые и отрицательные p пропускаются."""
    h = 0.0
    for v in post:
        if v > 0.0:
            h -= v * math.log(v)
    return h


def entropy_uncertainty(
    post: Sequence[float],
    h_max: float = MAX_STAGE_ENTROPY,
) -> float:
    """
    Нормированная энтропия: clamp01(H / h_max).

    Args:
        post: Нормированное распределение
        h_max: Нормировочная константа (default: ln 5)

    Returns:
        Неопределённость в [0, 1]; 0.0 если h_max <= 0
    """
    if h_max <= 0.0:
        return 0.0
    return clamp01(shannon_entropy(post) / h_max)


def compute_uncertainty(post: Sequence[float]) -> UncertaintyMetrics:
    """
    Вычисление всех метрик неопределённости.

    Args:
        post: Нормированное распределение стадий

    Returns:
        UncertaintyMetrics(u_question, u_entropy, u_combined)
    """
    u_question = max_gap_uncertainty(post)
    u_entropy = entropy_uncertainty(post)
    u_combined = 0.5 * (u_question + u_entropy)
    return UncertaintyMetrics(
        u_question=u_question,
        u_entropy=u_entropy,
        u_combined=u_combined,
    )
