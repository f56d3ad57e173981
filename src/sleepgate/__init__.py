"""Sleep gate — детерминированный evaluator safe-to-intervene gate.

- NeurochemSleepGate: posteriors + slow-wave + neurochem → GateResult
- SleepGateConfig: фиксированные веса depth/load/recovery
"""

from .neurochem_sleep_gate import NeurochemSleepGate, SleepGateConfig

__all__ = [
    "NeurochemSleepGate",
    "SleepGateConfig",
]
