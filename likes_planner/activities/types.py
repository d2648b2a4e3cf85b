"""Activity data models.

Raw activity records come from the coaching platform's activity feed and are
immutable. Day aggregates are built once per analysis call; period statistics
are the derived, read-only result.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, field_validator

NO_VALID_RUNS_MESSAGE = "No valid running data found"


class ActivityRecord(BaseModel):
    """One logged run as reported by the platform.

    Attributes:
        run_km: Distance in kilometers
        run_time: Moving time in seconds
        run_pace: Pace in seconds per kilometer (lower is faster)
        sign_date: Unix epoch seconds of the activity
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    run_km: float = 0.0
    run_time: int = 0
    run_pace: int = 0
    sign_date: int = 0

    @field_validator("sign_date")
    @classmethod
    def validate_sign_date(cls, value: int) -> int:
        """Reject timestamps outside the datetime range (e.g. milliseconds)."""
        try:
            datetime.fromtimestamp(value, tz=UTC)
        except (ValueError, OverflowError, OSError) as e:
            raise ValueError(f"sign_date {value} is not a valid epoch timestamp in seconds") from e
        return value

    @property
    def day(self) -> date:
        """UTC calendar date of the activity."""
        return datetime.fromtimestamp(self.sign_date, tz=UTC).date()


@dataclass
class DayAggregate:
    """Totals for one UTC calendar day.

    Attributes:
        day: UTC date
        km: Total distance in kilometers
        time: Total moving time in seconds
        count: Number of valid runs
        paces: Pace of each run, in insertion order
    """

    day: date
    km: float = 0.0
    time: int = 0
    count: int = 0
    paces: list[int] = field(default_factory=list)

    def add(self, run: ActivityRecord) -> None:
        self.km += run.run_km
        self.time += run.run_time
        self.count += 1
        self.paces.append(run.run_pace)


@dataclass(frozen=True)
class PeriodStatistics:
    """Whole-period statistics over valid runs.

    Paces are seconds per kilometer; distances are kilometers; times are seconds.

    Attributes:
        total_days: Calendar days from start to end, inclusive
        start: First day with a valid run
        end: Last day with a valid run
        total_runs: Number of valid runs
        total_km: Sum of distance
        total_time: Sum of moving time
        avg_daily_km: total_km / total_days
        frequency: total_runs / total_days
        avg_pace: Unweighted mean of every run's pace
        fastest_pace: Lowest pace
        slowest_pace: Highest pace
        median_pace: Upper median (index n // 2 of the sorted paces)
        avg_distance: total_km / total_runs
        max_distance: Longest single run
    """

    total_days: int
    start: date
    end: date
    total_runs: int
    total_km: float
    total_time: int
    avg_daily_km: float
    frequency: float
    avg_pace: float
    fastest_pace: int
    slowest_pace: int
    median_pace: int
    avg_distance: float
    max_distance: float


@dataclass(frozen=True)
class NoValidRuns:
    """Result of aggregating a period that has no valid runs.

    Callers must check for this before reading any statistic.
    """

    error: str = NO_VALID_RUNS_MESSAGE
