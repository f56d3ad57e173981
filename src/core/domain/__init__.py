"""
Domain models and value objects.

Contains the immutable sleep gate inputs (StagePosteriors, NeurochemInputs)
and the evaluation output (GateResult).
"""

from src.core.domain.gate_result import CONTRACT_FIELD_NAMES, GateResult
from src.core.domain.sleep import NeurochemInputs, SleepStage, StagePosteriors

__all__ = [
    # Inputs
    "SleepStage",
    "StagePosteriors",
    "NeurochemInputs",
    # Output
    "GateResult",
    "CONTRACT_FIELD_NAMES",
]
