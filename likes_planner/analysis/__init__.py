"""Training classification, advice and report assembly."""

from likes_planner.analysis.classifier import (
    DistanceBucket,
    FrequencyBucket,
    PaceBucket,
    TrainingCharacteristics,
    classify_training,
)
from likes_planner.analysis.formatting import format_duration, format_pace
from likes_planner.analysis.recommendations import Recommendation, recommend, render_recommendations
from likes_planner.analysis.report import analyze_activities, build_analysis_report

__all__ = [
    "DistanceBucket",
    "FrequencyBucket",
    "PaceBucket",
    "Recommendation",
    "TrainingCharacteristics",
    "analyze_activities",
    "build_analysis_report",
    "classify_training",
    "format_duration",
    "format_pace",
    "recommend",
    "render_recommendations",
]
