"""
Contract Validation Module

Модуль для валидации JSON контрактов Neurochem Sleep Gate.
"""

from .validators import (
    GateResultValidator,
    SchemaLoader,
    validate_gate_result,
)

__all__ = [
    "SchemaLoader",
    "GateResultValidator",
    "validate_gate_result",
]
