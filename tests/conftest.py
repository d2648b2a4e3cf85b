"""Root conftest for all tests.

Shared factories for activity records and plan payloads.
"""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from likes_planner.activities.types import ActivityRecord


def epoch(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> int:
    """Unix seconds for a UTC wall-clock time."""
    return int(datetime(year, month, day, hour, minute, tzinfo=UTC).timestamp())


@pytest.fixture
def make_run() -> Callable[..., ActivityRecord]:
    """Factory for valid-by-default runs on a given UTC day."""

    def _make_run(
        day: tuple[int, int, int] = (2026, 3, 2),
        km: float = 5.0,
        time: int = 1800,
        pace: int = 360,
        hour: int = 12,
    ) -> ActivityRecord:
        return ActivityRecord(run_km=km, run_time=time, run_pace=pace, sign_date=epoch(*day, hour=hour))

    return _make_run


@pytest.fixture
def sample_plans() -> list[dict]:
    """A two-week plan batch in platform format."""
    return [
        {
            "name": "30min@(HRR+0.59~0.74)",
            "title": "Easy run",
            "start": "2026-03-02",
            "type": "qingsong",
            "weight": "q3",
        },
        {
            "name": "{400m@(PACE+4'00~4'10);200m@(rest)}x8",
            "title": "Track 400s",
            "start": "2026-03-04",
            "type": "i",
            "weight": "q1",
            "description": "Keep recoveries honest",
        },
        {
            "name": "休息",
            "title": "Rest",
            "start": "2026-03-06",
            "type": "xiuxi",
            "weight": "xuanxiu",
        },
        {
            "name": "12km@(VDOT+45~48)",
            "title": "Long run",
            "start": "2026-03-09 06:30:00",
            "type": "lsd",
            "weight": "q2",
        },
    ]
