"""Activity parsing and period aggregation."""

from likes_planner.activities.aggregation import (
    aggregate_activities,
    filter_valid_runs,
    group_by_day,
    is_valid_run,
)
from likes_planner.activities.loader import parse_activities
from likes_planner.activities.types import ActivityRecord, DayAggregate, NoValidRuns, PeriodStatistics

__all__ = [
    "ActivityRecord",
    "DayAggregate",
    "NoValidRuns",
    "PeriodStatistics",
    "aggregate_activities",
    "filter_valid_runs",
    "group_by_day",
    "is_valid_run",
    "parse_activities",
]
