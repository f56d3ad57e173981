"""
GateResult — Модель выхода Neurochem Sleep Gate

Immutable Pydantic модель с производными индексами и commitment hash.
Совместима с JSON Schema контрактом (src/core/contracts/schema/gate_result.json)
через to_contract().

Инварианты (проверяются моделью):
- Все скалярные поля лежат в [0, 1]
- hex_commit — ровно 16 hex символов в нижнем регистре
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

# Имена полей в контракте обмена (camelCase)
CONTRACT_FIELD_NAMES: Dict[str, str] = {
    "d_n2n3": "dN2N3",
    "u_question": "uQuestion",
    "u_entropy": "uEntropy",
    "u_combined": "uCombined",
    "g_safe": "gSafe",
    "neurochem_load": "neurochemLoad",
    "recovery_index": "recoveryIndex",
    "hex_commit": "hexCommit",
}


class GateResult(BaseModel):
    """
    Результат оценки sleep gate.

    Содержит:
    - d_n2n3: глубина сна (взвешенная N2/N3 + slow-wave)
    - u_question, u_entropy, u_combined: неопределённость классификации
    - g_safe: глубина, дисконтированная неопределённостью
    - neurochem_load, recovery_index: взвешенные индексы нагрузки/восстановления
    - hex_commit: commitment над квантованными фичами
    """

    d_n2n3: float = Field(..., ge=0.0, le=1.0, description="Sleep-depth score")
    u_question: float = Field(..., ge=0.0, le=1.0, description="Max-gap uncertainty")
    u_entropy: float = Field(..., ge=0.0, le=1.0, description="Entropy uncertainty")
    u_combined: float = Field(..., ge=0.0, le=1.0, description="Mean of both uncertainties")
    g_safe: float = Field(..., ge=0.0, le=1.0, description="Safe-to-intervene gate")
    neurochem_load: float = Field(..., ge=0.0, le=1.0, description="Neurochemical load")
    recovery_index: float = Field(..., ge=0.0, le=1.0, description="Recovery index")
    hex_commit: str = Field(
        ...,
        pattern="^[0-9a-f]{16}$",
        description="Commitment hash (16 lowercase hex)",
    )

    model_config = {"frozen": True}

    def commitment_scores(self) -> tuple[float, float, float]:
        """Производные значения, входящие в commitment (d_n2n3, u_combined, g_safe)."""
        return (self.d_n2n3, self.u_combined, self.g_safe)

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в контракт gate_result (camelCase ключи)."""
        data = self.model_dump(mode="json")
        return {CONTRACT_FIELD_NAMES[key]: value for key, value in data.items()}

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "GateResult":
        """Обратное преобразование из контракта gate_result."""
        reverse = {v: k for k, v in CONTRACT_FIELD_NAMES.items()}
        return cls(**{reverse[key]: value for key, value in data.items() if key in reverse})
