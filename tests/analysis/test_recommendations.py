"""Tests for rule-based recommendations."""

from dataclasses import replace
from datetime import date

from likes_planner.activities.types import PeriodStatistics
from likes_planner.analysis.recommendations import Recommendation, recommend, render_recommendations

BASE_STATS = PeriodStatistics(
    total_days=10,
    start=date(2026, 3, 1),
    end=date(2026, 3, 10),
    total_runs=10,
    total_km=50.0,
    total_time=18000,
    avg_daily_km=5.0,
    frequency=1.0,
    avg_pace=360.0,
    fastest_pace=300,
    slowest_pace=420,
    median_pace=360,
    avg_distance=5.0,
    max_distance=10.0,
)


def test_no_rule_matches_returns_empty_list():
    assert recommend(BASE_STATS) == []


def test_high_frequency_rule():
    assert recommend(replace(BASE_STATS, frequency=1.6)) == [Recommendation.KEEP_HIGH_FREQUENCY]
    assert recommend(replace(BASE_STATS, frequency=1.5)) == []


def test_low_frequency_rule():
    assert recommend(replace(BASE_STATS, frequency=0.4)) == [Recommendation.INCREASE_FREQUENCY]
    assert recommend(replace(BASE_STATS, frequency=0.5)) == []


def test_short_distance_rule():
    assert recommend(replace(BASE_STATS, avg_distance=2.9)) == [Recommendation.INCREASE_DISTANCE]
    assert recommend(replace(BASE_STATS, avg_distance=3.0)) == []


def test_slow_pace_rule():
    """Test the 9 min/km boundary."""
    assert recommend(replace(BASE_STATS, avg_pace=541)) == [Recommendation.SLOW_PACE_FAT_LOSS]
    assert recommend(replace(BASE_STATS, avg_pace=540)) == []


def test_rules_are_additive_and_ordered():
    """Test that several rules can fire together, in rule order."""
    stats = replace(BASE_STATS, frequency=0.3, avg_distance=2.0, avg_pace=620.0)

    assert recommend(stats) == [
        Recommendation.INCREASE_FREQUENCY,
        Recommendation.INCREASE_DISTANCE,
        Recommendation.SLOW_PACE_FAT_LOSS,
    ]


def test_render_recommendations_localizes_text():
    recommendations = [Recommendation.INCREASE_FREQUENCY]

    assert render_recommendations(recommendations) == ["建议增加运动频率，每周至少3-4次"]
    assert render_recommendations(recommendations, "en") == ["Run more often: aim for at least 3-4 sessions per week"]
