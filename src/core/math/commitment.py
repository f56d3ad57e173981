"""
Commitment — Квантование фич и 64-битный commitment hash

Commitment используется для аудита и проверки воспроизводимости: одинаковые
входы и salt дают побайтно одинаковую 16-символьную hex строку в любой
реализации. Это НЕ криптографический хэш.

Алгоритм:
    1. Каждая фича: clamp01 → × 255 → round half up → clamp [0, 255] → byte
    2. acc = salt mod 2^64
       для каждого byte: acc ^= byte; acc *= MIX_MULTIPLIER; acc = rotl(acc, 27)
    3. hi = acc * HI_MULTIPLIER, lo = acc * LO_MULTIPLIER
    4. hex = hex8(hi & 0xFFFFFFFF) + hex8(lo & 0xFFFFFFFF)

Вся арифметика беззнаковая 64-битная с переполнением: после каждого
умножения и сдвига применяется MASK64.
"""

from typing import Final, Iterable, Sequence

from src.core.math.numerical_safeguards import clamp, clamp01, round_half_up

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MASK64: Final[int] = (1 << 64) - 1
MASK32: Final[int] = (1 << 32) - 1

INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

# Множитель шага перемешивания (нечётный)
MIX_MULTIPLIER: Final[int] = 0x9E3779B185EBCA87

# Сдвиг циклического поворота влево
MIX_ROTATION: Final[int] = 27

# Финализирующие множители для старшей и младшей половин commitment
HI_MULTIPLIER: Final[int] = 0xA5A5A5A585EBCA6B
LO_MULTIPLIER: Final[int] = 0x27D4EB2FC2B2AE35

QUANT_LEVELS: Final[int] = 255

COMMITMENT_HEX_LENGTH: Final[int] = 16


# =============================================================================
# 64-BIT ARITHMETIC
# =============================================================================


def to_u64(value: int) -> int:
    """
    Приведение int к беззнаковому 64-битному представлению.

    Отрицательные значения интерпретируются как two's complement:
    -1 → 0xFFFFFFFFFFFFFFFF.
    """
    return value & MASK64


def wrapping_mul64(a: int, b: int) -> int:
    """Умножение по модулю 2^64."""
    return (a * b) & MASK64


def rotl64(value: int, shift: int) -> int:
    """Циклический сдвиг 64-битного значения влево на shift бит."""
    shift %= 64
    value &= MASK64
    return ((value << shift) | (value >> (64 - shift))) & MASK64


def validate_salt(salt: int) -> None:
    """
    Валидация salt как знакового 64-битного целого.

    Raises:
        ValueError: Если salt не int (bool не допускается) или вне
            [INT64_MIN, INT64_MAX]
    """
    if isinstance(salt, bool) or not isinstance(salt, int):
        raise ValueError(f"hash_salt must be an int, got {type(salt).__name__}")

    if salt < INT64_MIN or salt > INT64_MAX:
        raise ValueError(
            f"hash_salt must fit in a signed 64-bit integer, got {salt}"
        )


# =============================================================================
# КВАНТОВАНИЕ
# =============================================================================


def quantize_unit(value: float) -> int:
    """
    Квантование значения из [0, 1] в байт [0, 255].

    Examples:
        >>> quantize_unit(0.7)    # 0.7 * 255 == 178.5
        179
        >>> quantize_unit(float('nan'))
        0
        >>> quantize_unit(2.0)
        255
    """
    q = round_half_up(clamp01(value) * float(QUANT_LEVELS))
    return int(clamp(q, 0, QUANT_LEVELS))


def quantize_features(features: Iterable[float]) -> bytes:
    """Квантование вектора фич в bytes (порядок сохраняется)."""
    return bytes(quantize_unit(f) for f in features)


# =============================================================================
# HASH
# =============================================================================


def mix_bytes(data: Sequence[int], salt: int) -> int:
    """
    Перемешивание байтов в 64-битный аккумулятор.

    Args:
        data: Байты (0..255) в фиксированном порядке
        salt: Знаковый 64-битный salt (начальное значение аккумулятора)

    Returns:
        Значение аккумулятора в [0, 2^64)
    """
    acc = to_u64(salt)
    for b in data:
        acc ^= b & 0xFF
        acc = wrapping_mul64(acc, MIX_MULTIPLIER)
        acc = rotl64(acc, MIX_ROTATION)
    return acc


def to_hex32(value: int) -> str:
    """Младшие 32 бита как 8 hex символов в нижнем регистре с ведущими нулями."""
    return format(value & MASK32, "08x")


def hash_to_hex64(data: Sequence[int], salt: int) -> str:
    """
    Commitment hash: 16 hex символов (hi32 + lo32).

    Examples:
        >>> hash_to_hex64(bytes(8), 0)
        '0000000000000000'
    """
    acc = mix_bytes(data, salt)
    hi = wrapping_mul64(acc, HI_MULTIPLIER)
    lo = wrapping_mul64(acc, LO_MULTIPLIER)
    return to_hex32(hi) + to_hex32(lo)


def commit_features(features: Iterable[float], salt: int) -> str:
    """Квантование фич и вычисление commitment одной операцией."""
    return hash_to_hex64(quantize_features(features), salt)
