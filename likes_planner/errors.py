"""Canonical error types for payload handling.

Only malformed payloads are exceptional. A period without valid runs is a
normal result (see ``likes_planner.activities.types.NoValidRuns``).

Standard error codes:
- INVALID_ACTIVITY_PAYLOAD: Activity payload is neither a list nor {"activities": [...]}
- INVALID_PLAN_PAYLOAD: Plan payload is neither a list nor {"plans": [...]}
- EMPTY_PLAN_BATCH: Plan batch contains no entries
- TOO_MANY_PLANS: Plan batch exceeds the per-request maximum
- INVALID_PLAN_ENTRY: A plan entry failed validation
"""


class LikesPlannerError(ValueError):
    """Base error for payload problems.

    Attributes:
        code: Error code (e.g., "TOO_MANY_PLANS")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class ActivityPayloadError(LikesPlannerError):
    """Raised when an activity payload has an unusable shape."""


class PlanValidationError(LikesPlannerError):
    """Raised when a plan batch fails validation."""
