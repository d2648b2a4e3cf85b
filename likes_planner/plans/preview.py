"""Plan batch preview.

Builds the read-only view a coach checks before pushing a batch: sessions
grouped into weeks, workout notation decoded, type and intensity codes
labelled, and per-type / per-intensity counts.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date

from likes_planner.i18n import (
    INTENSITY_LABELS,
    PLAN_TYPE_LABELS,
    PREVIEW_TEXT,
    WEEKDAY_LABELS,
    resolve_locale,
    translate,
)
from likes_planner.notation.decoder import decode_workout_name
from likes_planner.plans.types import PlanBatch

RULE_WIDTH = 60


@dataclass(frozen=True)
class PreviewEntry:
    day: date
    weekday: str
    title: str
    workout: str
    type_label: str
    intensity_label: str
    description: str | None = None


@dataclass
class PreviewWeek:
    number: int
    entries: list[PreviewEntry] = field(default_factory=list)


@dataclass
class PlanPreview:
    """Preview of a plan batch.

    Attributes:
        weeks: Weeks in ascending order, counted from the earliest session (week 1)
        total: Number of sessions
        by_type: Session count per type label, in first-seen order
        by_intensity: Session count per intensity label, in first-seen order
    """

    weeks: list[PreviewWeek]
    total: int
    by_type: dict[str, int]
    by_intensity: dict[str, int]


def week_number(day: date, first_day: date) -> int:
    """1-based week index of ``day`` in a plan starting on ``first_day``."""
    return (day - first_day).days // 7 + 1


def build_plan_preview(batch: PlanBatch, locale: str | None = None) -> PlanPreview:
    """Build the preview for a validated batch.

    Args:
        batch: Validated plan batch
        locale: Display locale

    Returns:
        PlanPreview
    """
    locale = resolve_locale(locale)
    first_day = min(plan.day for plan in batch.plans)

    weeks: dict[int, PreviewWeek] = {}
    by_type: Counter[str] = Counter()
    by_intensity: Counter[str] = Counter()

    for plan in batch.plans:
        type_label = translate(PLAN_TYPE_LABELS, plan.type, locale)
        intensity_label = translate(INTENSITY_LABELS, plan.weight, locale)
        entry = PreviewEntry(
            day=plan.day,
            weekday=WEEKDAY_LABELS[locale][plan.day.weekday()],
            title=plan.title,
            workout=decode_workout_name(plan.name, locale),
            type_label=type_label,
            intensity_label=intensity_label,
            description=plan.description or None,
        )

        number = week_number(plan.day, first_day)
        if number not in weeks:
            weeks[number] = PreviewWeek(number=number)
        weeks[number].entries.append(entry)

        by_type[type_label] += 1
        by_intensity[intensity_label] += 1

    return PlanPreview(
        weeks=[weeks[number] for number in sorted(weeks)],
        total=len(batch.plans),
        by_type=dict(by_type),
        by_intensity=dict(by_intensity),
    )


def render_plan_preview(preview: PlanPreview, locale: str | None = None) -> str:
    """Render a preview as plain text."""
    locale = resolve_locale(locale)
    text = PREVIEW_TEXT
    heavy = "=" * RULE_WIDTH
    light = "-" * RULE_WIDTH

    lines = [heavy, text["title"][locale], heavy]

    for week in preview.weeks:
        lines += ["", text["week"][locale].format(week=week.number), light]
        for idx, entry in enumerate(week.entries, start=1):
            lines.append(f"{idx}. {entry.day.isoformat()} {entry.weekday}")
            if entry.title:
                lines.append(f"   {entry.title}")
            lines.append(f"   {entry.workout}")
            lines.append(f"   {text['type'][locale]}: {entry.type_label}")
            lines.append(f"   {text['intensity'][locale]}: {entry.intensity_label}")
            if entry.description:
                lines.append(f"   {entry.description}")

    lines += ["", heavy, text["summary"][locale], heavy]
    lines.append(text["total_days"][locale].format(count=preview.total))

    lines += ["", text["by_type"][locale]]
    for label, count in preview.by_type.items():
        lines.append(f"  {label}: {text['times'][locale].format(count=count)}")

    lines += ["", text["by_intensity"][locale]]
    for label, count in preview.by_intensity.items():
        lines.append(f"  {label}: {text['times'][locale].format(count=count)}")

    lines.append(heavy)
    return "\n".join(lines)
