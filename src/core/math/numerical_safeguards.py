"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость всех вычислений sleep gate:
- NaN/Inf санитизация (невалидные значения трактуются как 0)
- Clamp в единичный интервал [0, 1]
- Ренормализация распределения вероятностей с epsilon-защитой знаменателя
- Округление round-half-up для квантования

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (знаменатель заменяется на EPS_NORM_FLOOR)
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Порядок операций фиксирован: clamp → sum → divide (от него зависит commitment)
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Floor для знаменателя ренормализации
# Применяется ТОЛЬКО если сумма clamped значений <= 0
EPS_NORM_FLOOR: Final[float] = 1e-9

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


def count_invalid(values: Iterable[float]) -> int:
    """Количество NaN/Inf значений (для диагностики)."""
    return sum(1 for v in values if not is_valid_float(v))


# =============================================================================
# CLAMP
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp01(value: float) -> float:
    """
    Clamp в [0, 1] с санитизацией: NaN/Inf → 0.0.

    Порядок проверок важен: сначала finite, затем границы.
    Поэтому +Inf → 0.0, а не 1.0.

    Examples:
        >>> clamp01(0.25)
        0.25
        >>> clamp01(-3.0)
        0.0
        >>> clamp01(7.0)
        1.0
        >>> clamp01(float('inf'))
        0.0
    """
    return clamp(sanitize_float(value, fallback=0.0), 0.0, 1.0)


# =============================================================================
# РЕНОРМАЛИЗАЦИЯ РАСПРЕДЕЛЕНИЯ
# =============================================================================


def renormalize_distribution(
    values: Iterable[float],
    floor: float = EPS_NORM_FLOOR,
) -> list[float]:
    """
    Приведение зашумлённых вероятностей к распределению.

    Алгоритм:
        1. clamp01 каждого значения (NaN/Inf → 0)
        2. sum = Σ clamped; если sum <= 0 → sum = floor
        3. p_i = clamped_i / sum

    Floor применяется только при sum <= 0 и никогда иначе; дополнительного
    сглаживания нет. Сумма результата равна 1.0 с точностью float, кроме
    вырожденного случая (все clamped == 0), когда результат — нули.

    Args:
        values: Сырые значения (любые float)
        floor: Знаменатель для вырожденного случая (default: EPS_NORM_FLOOR)

    Returns:
        Список нормированных значений той же длины

    Examples:
        >>> renormalize_distribution([1.0, 0.5, 0.5])
        [0.5, 0.25, 0.25]
        >>> renormalize_distribution([2.0, 1.0, 1.0])    # 2.0 → 1.0 до суммы
        [0.3333333333333333, 0.3333333333333333, 0.3333333333333333]
        >>> renormalize_distribution([0.0, -1.0, float('nan')])
        [0.0, 0.0, 0.0]
    """
    clamped = [clamp01(v) for v in values]

    total = 0.0
    for v in clamped:
        total += v

    if total <= 0.0:
        total = floor

    return [v / total for v in clamped]


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до ближайшего целого, половина — вверх.

    Встроенный round() использует banker's rounding (178.5 → 178),
    что ломает переносимость commitment. Здесь 178.5 → 179.

    Дробная часть value - floor(value) вычисляется точно, поэтому
    значения чуть меньше .5 не округляются вверх из-за ошибки
    сложения value + 0.5.

    Args:
        value: Конечное значение

    Returns:
        Округлённое целое

    Examples:
        >>> round_half_up(178.5)
        179
        >>> round_half_up(25.49)
        25
        >>> round_half_up(-2.5)
        -2
    """
    floored = math.floor(value)
    if value - floored >= 0.5:
        return floored + 1
    return floored


# =============================================================================
# СРАВНЕНИЯ И ВАЛИДАЦИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
