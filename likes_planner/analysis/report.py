"""Analysis report assembly.

Composes aggregation, classification and advice into the JSON envelope the
presentation layer consumes:

    {
        "period": {"days", "start", "end"},
        "summary": {"totalRuns", "totalKm", "totalTime", "avgDailyKm", "frequency"},
        "pace": {"avg", "fastest", "slowest", "median"},
        "distance": {"avg", "max"},
        "characteristics": "...",
        "recommendations": [...],
    }

or {"error": "No valid running data found"}.
"""

from __future__ import annotations

from typing import Any

from likes_planner.activities.aggregation import aggregate_activities
from likes_planner.activities.loader import parse_activities
from likes_planner.activities.types import NoValidRuns, PeriodStatistics
from likes_planner.analysis.classifier import classify_training
from likes_planner.analysis.formatting import format_duration, format_pace, round_half_up
from likes_planner.analysis.recommendations import recommend, render_recommendations


def build_analysis_report(stats: PeriodStatistics | NoValidRuns, locale: str | None = None) -> dict[str, Any]:
    """Render period statistics as the report envelope.

    Args:
        stats: Aggregation result
        locale: Display locale for characteristics and advice

    Returns:
        JSON-serializable report dictionary
    """
    if isinstance(stats, NoValidRuns):
        return {"error": stats.error}

    characteristics = classify_training(stats)

    return {
        "period": {
            "days": stats.total_days,
            "start": stats.start.isoformat(),
            "end": stats.end.isoformat(),
        },
        "summary": {
            "totalRuns": stats.total_runs,
            "totalKm": round_half_up(stats.total_km, 2),
            "totalTime": format_duration(stats.total_time),
            "avgDailyKm": round_half_up(stats.avg_daily_km, 2),
            "frequency": round_half_up(stats.frequency, 1),
        },
        "pace": {
            "avg": format_pace(stats.avg_pace),
            "fastest": format_pace(stats.fastest_pace),
            "slowest": format_pace(stats.slowest_pace),
            "median": format_pace(stats.median_pace),
        },
        "distance": {
            "avg": round_half_up(stats.avg_distance, 2),
            "max": round_half_up(stats.max_distance, 2),
        },
        "characteristics": characteristics.describe(locale),
        "recommendations": render_recommendations(recommend(stats), locale),
    }


def analyze_activities(payload: Any, locale: str | None = None) -> dict[str, Any]:
    """Parse a raw activity payload and build its report.

    Raises:
        ActivityPayloadError: If the payload shape is not accepted
    """
    records = parse_activities(payload)
    return build_analysis_report(aggregate_activities(records), locale)
