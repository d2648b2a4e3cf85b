"""Workout notation decoding."""

from likes_planner.notation.decoder import decode_workout_name
from likes_planner.notation.rules import REWRITE_RULES, RewriteRule
from likes_planner.notation.tokens import (
    IntervalGroup,
    LiteralText,
    RestDay,
    UnitKind,
    UnitSuffix,
    WorkoutToken,
    ZoneAnnotation,
    ZoneKind,
    render_token,
)

__all__ = [
    "REWRITE_RULES",
    "IntervalGroup",
    "LiteralText",
    "RestDay",
    "RewriteRule",
    "UnitKind",
    "UnitSuffix",
    "WorkoutToken",
    "ZoneAnnotation",
    "ZoneKind",
    "decode_workout_name",
    "render_token",
]
