"""Neurochem Sleep Gate: глубина сна, неопределённость, safe-to-intervene gate

Детерминированный evaluator: вероятностная классификация стадий сна и
физиологические прокси → набор ограниченных индексов [0, 1] и commitment hash.

Порядок вычислений (фиксирован, от него зависит commitment):
1. Ренормализация posteriors (clamp → sum → divide, floor 1e-9 при sum <= 0)
2. d_n2n3 = clamp01(0.4*pN2 + 1.2*pN3 + 0.4*slow_wave_index)
3. u_question, u_entropy, u_combined
4. g_safe = clamp01(d_n2n3 * (1 - u_combined))
5. neurochem_load, recovery_index (взвешенные суммы clamped входов)
6. Квантование 8 фич в байты и commitment hash с salt

Evaluator не хранит состояния между вызовами (только salt и config),
поэтому evaluate() безопасно вызывать конкурентно.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.domain.gate_result import GateResult
from src.core.domain.sleep import NeurochemInputs, SleepStage, StagePosteriors
from src.core.math.commitment import commit_features, validate_salt
from src.core.math.numerical_safeguards import (
    clamp01,
    count_invalid,
    is_close,
    renormalize_distribution,
    validate_non_negative,
)
from src.core.math.uncertainty import compute_uncertainty

_LOGGER = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SleepGateConfig:
    """Конфигурация sleep gate.

    Веса — фиксированные проектные константы. Значения по умолчанию
    воспроизводят переносимый commitment; любые другие веса дают
    локальный вариант, несовместимый с эталонными hex.
    """

    # Depth score (сумма 2.0: emphasis score, насыщение в 1.0 ожидаемо)
    depth_w_n2: float = 0.4
    depth_w_n3: float = 1.2
    depth_w_slow_wave: float = 0.4

    # Neurochem load (сумма = 1.0)
    load_w_stress: float = 0.30
    load_w_lf_hf: float = 0.20
    load_w_inv_depth: float = 0.20
    load_w_uncertainty: float = 0.15
    load_w_crp: float = 0.075
    load_w_il6: float = 0.075

    # Recovery index (сумма = 1.0)
    recovery_w_rmssd: float = 0.40
    recovery_w_depth: float = 0.40
    recovery_w_inv_stress: float = 0.20

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            validate_non_negative(value, name)

        load_total = (
            self.load_w_stress
            + self.load_w_lf_hf
            + self.load_w_inv_depth
            + self.load_w_uncertainty
            + self.load_w_crp
            + self.load_w_il6
        )
        if not is_close(load_total, 1.0):
            raise ValueError(f"load weights must sum to 1.0, got {load_total}")

        recovery_total = (
            self.recovery_w_rmssd
            + self.recovery_w_depth
            + self.recovery_w_inv_stress
        )
        if not is_close(recovery_total, 1.0):
            raise ValueError(f"recovery weights must sum to 1.0, got {recovery_total}")


# =============================================================================
# GATE
# =============================================================================


class NeurochemSleepGate:
    """Neurochem Sleep Gate evaluator.

    Чистая функция входов + фиксированный salt. Невалидные числовые входы
    (NaN, Inf, отрицательные, вне [0, 1]) не приводят к исключениям:
    они поглощаются clamp/floor правилами, результат всегда валиден.
    """

    def __init__(
        self,
        hash_salt: int = 0,
        config: Optional[SleepGateConfig] = None,
    ):
        """
        Args:
            hash_salt: знаковый 64-битный salt commitment hash
            config: Конфигурация весов (default: SleepGateConfig())

        Raises:
            ValueError: Если hash_salt не int или вне диапазона int64
        """
        validate_salt(hash_salt)
        self._hash_salt = hash_salt
        self.config = config or SleepGateConfig()

    @property
    def hash_salt(self) -> int:
        return self._hash_salt

    def evaluate(
        self,
        posteriors: StagePosteriors,
        slow_wave_index: float,
        neurochem: NeurochemInputs,
    ) -> GateResult:
        """Оценка gate для одной эпохи сна.

        Args:
            posteriors: вероятности стадий WAKE/N1/N2/N3/REM (любые float)
            slow_wave_index: прокси slow-wave активности, ожидается [0, 1]
            neurochem: нормированные нейрохимические прокси

        Returns:
            GateResult со всеми индексами и commitment hash
        """
        self._log_degenerate_inputs(posteriors, slow_wave_index, neurochem)

        post = renormalize_distribution(posteriors.as_tuple())
        stage_post = dict(zip(SleepStage, post))
        p_n2 = stage_post[SleepStage.N2]
        p_n3 = stage_post[SleepStage.N3]

        d_n2n3 = self._compute_depth(p_n2, p_n3, slow_wave_index)

        uncertainty = compute_uncertainty(post)
        u_combined = uncertainty.u_combined

        g_safe = clamp01(d_n2n3 * (1.0 - u_combined))

        neurochem_load = self._compute_neurochem_load(d_n2n3, u_combined, neurochem)
        recovery_index = self._compute_recovery_index(d_n2n3, neurochem)

        hex_commit = self._commit(d_n2n3, u_combined, g_safe, neurochem)

        _LOGGER.debug(
            "sleep gate evaluated: d_n2n3=%.4f u_question=%.4f u_entropy=%.4f "
            "g_safe=%.4f load=%.4f recovery=%.4f commit=%s",
            d_n2n3,
            uncertainty.u_question,
            uncertainty.u_entropy,
            g_safe,
            neurochem_load,
            recovery_index,
            hex_commit,
        )

        return GateResult(
            d_n2n3=d_n2n3,
            u_question=uncertainty.u_question,
            u_entropy=uncertainty.u_entropy,
            u_combined=u_combined,
            g_safe=g_safe,
            neurochem_load=neurochem_load,
            recovery_index=recovery_index,
            hex_commit=hex_commit,
        )

    def verify_commitment(
        self,
        result: GateResult,
        neurochem: NeurochemInputs,
    ) -> bool:
        """Проверка, что commitment результата получен с этим salt.

        Пересчитывает hash из производных индексов результата и
        нейрохимических входов и сравнивает с result.hex_commit.

        Args:
            result: сохранённый GateResult (например, из audit log)
            neurochem: входы, с которыми был получен результат

        Returns:
            True если commitment совпадает
        """
        expected = self._commit(*result.commitment_scores(), neurochem)
        if expected != result.hex_commit:
            _LOGGER.warning(
                "commitment mismatch: stored=%s recomputed=%s",
                result.hex_commit,
                expected,
            )
            return False
        return True

    def _compute_depth(self, p_n2: float, p_n3: float, slow_wave_index: float) -> float:
        """Depth score; slow_wave_index не clamp-ится до формулы, только результат."""
        cfg = self.config
        d_band = (
            cfg.depth_w_n2 * p_n2
            + cfg.depth_w_n3 * p_n3
            + cfg.depth_w_slow_wave * slow_wave_index
        )
        return clamp01(d_band)

    def _compute_neurochem_load(
        self,
        d_n2n3: float,
        u_combined: float,
        nc: NeurochemInputs,
    ) -> float:
        cfg = self.config
        inv_depth = 1.0 - d_n2n3
        stress = clamp01(nc.stress_norm)
        lf_hf = clamp01(nc.lf_hf_norm)
        crp = clamp01(nc.crp_proxy)
        il6 = clamp01(nc.il6_proxy)

        raw = (
            cfg.load_w_stress * stress
            + cfg.load_w_lf_hf * lf_hf
            + cfg.load_w_inv_depth * inv_depth
            + cfg.load_w_uncertainty * u_combined
            + cfg.load_w_crp * crp
            + cfg.load_w_il6 * il6
        )
        return clamp01(raw)

    def _compute_recovery_index(self, d_n2n3: float, nc: NeurochemInputs) -> float:
        cfg = self.config
        rmssd = clamp01(nc.rmssd_norm)
        stress_low = 1.0 - clamp01(nc.stress_norm)

        raw = (
            cfg.recovery_w_rmssd * rmssd
            + cfg.recovery_w_depth * d_n2n3
            + cfg.recovery_w_inv_stress * stress_low
        )
        return clamp01(raw)

    def _commit(
        self,
        d_n2n3: float,
        u_combined: float,
        g_safe: float,
        nc: NeurochemInputs,
    ) -> str:
        # Порядок фич фиксирован
        features = (
            d_n2n3,
            u_combined,
            g_safe,
            nc.lf_hf_norm,
            nc.rmssd_norm,
            nc.stress_norm,
            nc.crp_proxy,
            nc.il6_proxy,
        )
        return commit_features(features, self._hash_salt)

    def _log_degenerate_inputs(
        self,
        posteriors: StagePosteriors,
        slow_wave_index: float,
        neurochem: NeurochemInputs,
    ) -> None:
        raw = posteriors.as_tuple() + (slow_wave_index,) + neurochem.as_tuple()
        invalid = count_invalid(raw)
        if invalid:
            _LOGGER.warning("sanitized %d non-finite input value(s) to 0.0", invalid)

        if not any(clamp01(p) > 0.0 for p in posteriors.as_tuple()):
            _LOGGER.warning(
                "no positive stage probability mass; normalization floor applied"
            )
