"""Plan batches - validation and preview before push."""

from likes_planner.plans.preview import PlanPreview, PreviewEntry, PreviewWeek, build_plan_preview, render_plan_preview
from likes_planner.plans.types import MAX_PLANS_PER_BATCH, PlanBatch, PlanEntry

__all__ = [
    "MAX_PLANS_PER_BATCH",
    "PlanBatch",
    "PlanEntry",
    "PlanPreview",
    "PreviewEntry",
    "PreviewWeek",
    "build_plan_preview",
    "render_plan_preview",
]
