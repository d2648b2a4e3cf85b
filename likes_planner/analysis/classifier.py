"""Training characteristic classification.

Maps period statistics onto three independent qualitative axes. Each axis is
evaluated top to bottom and the first matching threshold wins; all
comparisons are strict.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from likes_planner.activities.types import PeriodStatistics
from likes_planner.i18n import CHARACTERISTIC_LABELS, LABEL_SEPARATOR, resolve_locale, translate

HIGH_FREQUENCY_RUNS_PER_DAY = 1.3
LOW_FREQUENCY_RUNS_PER_DAY = 0.7

SHORT_DISTANCE_KM = 2.5
LONG_DISTANCE_KM = 5.0

# Seconds per km; larger is slower
RECOVERY_PACE = 600
AEROBIC_BASE_PACE = 420
TEMPO_PACE = 330


class FrequencyBucket(StrEnum):
    HIGH = "high_frequency"
    MODERATE = "moderate_frequency"
    LOW = "low_frequency"


class DistanceBucket(StrEnum):
    SHORT = "short_distance"
    MODERATE = "moderate_distance"
    LONG = "long_distance"


class PaceBucket(StrEnum):
    RECOVERY_AEROBIC = "recovery_aerobic"
    AEROBIC_BASE = "aerobic_base"
    TEMPO = "tempo"
    SPEED_WORK = "speed_work"


@dataclass(frozen=True)
class TrainingCharacteristics:
    """One bucket per axis, in display order: frequency, distance, pace."""

    frequency: FrequencyBucket
    distance: DistanceBucket
    pace: PaceBucket

    def labels(self, locale: str | None = None) -> list[str]:
        return [translate(CHARACTERISTIC_LABELS, bucket.value, locale) for bucket in (self.frequency, self.distance, self.pace)]

    def describe(self, locale: str | None = None) -> str:
        return LABEL_SEPARATOR[resolve_locale(locale)].join(self.labels(locale))


def classify_frequency(runs_per_day: float) -> FrequencyBucket:
    if runs_per_day > HIGH_FREQUENCY_RUNS_PER_DAY:
        return FrequencyBucket.HIGH
    if runs_per_day < LOW_FREQUENCY_RUNS_PER_DAY:
        return FrequencyBucket.LOW
    return FrequencyBucket.MODERATE


def classify_distance(avg_distance_km: float) -> DistanceBucket:
    if avg_distance_km < SHORT_DISTANCE_KM:
        return DistanceBucket.SHORT
    if avg_distance_km > LONG_DISTANCE_KM:
        return DistanceBucket.LONG
    return DistanceBucket.MODERATE


def classify_pace(avg_pace: float) -> PaceBucket:
    if avg_pace > RECOVERY_PACE:
        return PaceBucket.RECOVERY_AEROBIC
    if avg_pace > AEROBIC_BASE_PACE:
        return PaceBucket.AEROBIC_BASE
    if avg_pace > TEMPO_PACE:
        return PaceBucket.TEMPO
    return PaceBucket.SPEED_WORK


def classify_training(stats: PeriodStatistics) -> TrainingCharacteristics:
    """Classify a period on the frequency, distance and pace axes.

    Args:
        stats: Period statistics

    Returns:
        TrainingCharacteristics with one bucket per axis
    """
    return TrainingCharacteristics(
        frequency=classify_frequency(stats.frequency),
        distance=classify_distance(stats.avg_distance),
        pace=classify_pace(stats.avg_pace),
    )
