"""Period aggregation of activity records.

Groups valid runs by UTC calendar day and reduces the day buckets to
whole-period statistics.

Rules:
- A run is valid iff run_km > 0.5 and run_time > 60; everything else is ignored
- No valid runs = NoValidRuns result, nothing else is computed
- avg_pace is the plain mean over runs (one sample per run, not distance-weighted)
- median_pace is the upper median for even counts (no averaging)
- Day-based ratios divide by the inclusive calendar span, empty days included
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from loguru import logger

from likes_planner.activities.types import ActivityRecord, DayAggregate, NoValidRuns, PeriodStatistics

MIN_RUN_KM = 0.5
MIN_RUN_SECONDS = 60


def is_valid_run(record: ActivityRecord) -> bool:
    """Check whether a record counts towards the statistics."""
    return record.run_km > MIN_RUN_KM and record.run_time > MIN_RUN_SECONDS


def filter_valid_runs(records: Iterable[ActivityRecord]) -> list[ActivityRecord]:
    return [record for record in records if is_valid_run(record)]


def group_by_day(runs: Iterable[ActivityRecord]) -> dict[date, DayAggregate]:
    """Bucket runs by the UTC date of their sign_date.

    Args:
        runs: Valid runs

    Returns:
        Mapping of UTC date to that day's aggregate, ordered by date
    """
    by_day: dict[date, DayAggregate] = {}
    for run in runs:
        day = run.day
        if day not in by_day:
            by_day[day] = DayAggregate(day=day)
        by_day[day].add(run)

    return {day: by_day[day] for day in sorted(by_day)}


def aggregate_activities(records: Iterable[ActivityRecord]) -> PeriodStatistics | NoValidRuns:
    """Compute period statistics over the valid runs in ``records``.

    Args:
        records: Activity records (invalid ones are filtered out here)

    Returns:
        PeriodStatistics, or NoValidRuns when nothing survives the filter
    """
    runs = filter_valid_runs(records)
    if not runs:
        logger.debug("No valid runs after filtering")
        return NoValidRuns()

    by_day = group_by_day(runs)
    days = list(by_day)
    start, end = days[0], days[-1]
    total_days = (end - start).days + 1

    total_km = 0.0
    total_time = 0
    total_runs = 0
    all_paces: list[int] = []
    for aggregate in by_day.values():
        total_km += aggregate.km
        total_time += aggregate.time
        total_runs += aggregate.count
        all_paces.extend(aggregate.paces)

    paces_sorted = sorted(all_paces)

    logger.debug(f"Aggregated {total_runs} valid run(s) over {len(days)} active day(s), {start} to {end}")

    return PeriodStatistics(
        total_days=total_days,
        start=start,
        end=end,
        total_runs=total_runs,
        total_km=total_km,
        total_time=total_time,
        avg_daily_km=total_km / total_days,
        frequency=total_runs / total_days,
        avg_pace=sum(all_paces) / len(all_paces),
        fastest_pace=paces_sorted[0],
        slowest_pace=paces_sorted[-1],
        median_pace=paces_sorted[len(paces_sorted) // 2],
        avg_distance=total_km / total_runs,
        max_distance=max(run.run_km for run in runs),
    )
