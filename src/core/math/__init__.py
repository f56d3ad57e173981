"""
Core math modules для Neurochem Sleep Gate

Математические примитивы и численные алгоритмы с гарантией стабильности
и побайтной воспроизводимости.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_NORM_FLOOR,
    # NaN/Inf sanitization
    count_invalid,
    is_valid_float,
    sanitize_float,
    # Clamp / normalization
    clamp,
    clamp01,
    renormalize_distribution,
    # Rounding
    round_half_up,
    # Comparison / validation
    is_close,
    validate_non_negative,
)

# Uncertainty
from src.core.math.uncertainty import (
    MAX_STAGE_ENTROPY,
    STAGE_CLASS_COUNT,
    UncertaintyMetrics,
    compute_uncertainty,
    entropy_uncertainty,
    max_gap_uncertainty,
    shannon_entropy,
)

# Commitment hash
from src.core.math.commitment import (
    COMMITMENT_HEX_LENGTH,
    HI_MULTIPLIER,
    LO_MULTIPLIER,
    MASK64,
    MIX_MULTIPLIER,
    MIX_ROTATION,
    commit_features,
    hash_to_hex64,
    mix_bytes,
    quantize_features,
    quantize_unit,
    rotl64,
    to_hex32,
    to_u64,
    validate_salt,
    wrapping_mul64,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_NORM_FLOOR",
    # Numerical Safeguards — NaN/Inf sanitization
    "count_invalid",
    "is_valid_float",
    "sanitize_float",
    # Numerical Safeguards — Clamp / normalization
    "clamp",
    "clamp01",
    "renormalize_distribution",
    # Numerical Safeguards — Rounding
    "round_half_up",
    # Numerical Safeguards — Comparison / validation
    "is_close",
    "validate_non_negative",
    # Uncertainty — Constants
    "MAX_STAGE_ENTROPY",
    "STAGE_CLASS_COUNT",
    # Uncertainty — Types
    "UncertaintyMetrics",
    # Uncertainty — Functions
    "compute_uncertainty",
    "entropy_uncertainty",
    "max_gap_uncertainty",
    "shannon_entropy",
    # Commitment — Constants
    "COMMITMENT_HEX_LENGTH",
    "HI_MULTIPLIER",
    "LO_MULTIPLIER",
    "MASK64",
    "MIX_MULTIPLIER",
    "MIX_ROTATION",
    # Commitment — Functions
    "commit_features",
    "hash_to_hex64",
    "mix_bytes",
    "quantize_features",
    "quantize_unit",
    "rotl64",
    "to_hex32",
    "to_u64",
    "validate_salt",
    "wrapping_mul64",
]
