"""Rule-based training advice.

Each rule is checked on its own; any number of them may fire for one period.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from likes_planner.activities.types import PeriodStatistics
from likes_planner.i18n import RECOMMENDATION_TEXT, translate


class Recommendation(StrEnum):
    KEEP_HIGH_FREQUENCY = "keep_high_frequency"
    INCREASE_FREQUENCY = "increase_frequency"
    INCREASE_DISTANCE = "increase_distance"
    SLOW_PACE_FAT_LOSS = "slow_pace_fat_loss"


# Evaluated in order; output keeps this order
RECOMMENDATION_RULES: tuple[tuple[Recommendation, Callable[[PeriodStatistics], bool]], ...] = (
    (Recommendation.KEEP_HIGH_FREQUENCY, lambda stats: stats.frequency > 1.5),
    (Recommendation.INCREASE_FREQUENCY, lambda stats: stats.frequency < 0.5),
    (Recommendation.INCREASE_DISTANCE, lambda stats: stats.avg_distance < 3),
    # 9 min/km
    (Recommendation.SLOW_PACE_FAT_LOSS, lambda stats: stats.avg_pace > 540),
)


def recommend(stats: PeriodStatistics) -> list[Recommendation]:
    """Return every recommendation whose rule matches ``stats``.

    An empty list means no advice applies.
    """
    return [recommendation for recommendation, applies in RECOMMENDATION_RULES if applies(stats)]


def render_recommendations(recommendations: list[Recommendation], locale: str | None = None) -> list[str]:
    return [translate(RECOMMENDATION_TEXT, recommendation.value, locale) for recommendation in recommendations]
