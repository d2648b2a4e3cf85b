"""Training plan batch schema.

A batch is what the push step sends in one request: ``{"plans": [...]}``
(a bare list is accepted too). Entries keep any extra keys the platform
defines so the batch can be forwarded untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from likes_planner.errors import PlanValidationError

MAX_PLANS_PER_BATCH = 200


class PlanEntry(BaseModel):
    """One planned session.

    Attributes:
        name: Workout in compact notation (e.g., "{400m@(PACE+4'00~4'10)}x8")
        title: Short session title
        start: Session date, YYYY-MM-DD optionally followed by a time
        type: Session type code (e.g., "qingsong", "lsd", "i")
        weight: Intensity code ("q1", "q2", "q3", "xuanxiu")
        description: Optional coach note
    """

    model_config = ConfigDict(extra="allow")

    name: str
    title: str = ""
    start: str
    type: str = ""
    weight: str = ""
    description: str | None = None

    @field_validator("start")
    @classmethod
    def validate_start(cls, value: str) -> str:
        """Validate that start begins with an ISO date."""
        date.fromisoformat(value[:10])
        return value

    @property
    def day(self) -> date:
        return date.fromisoformat(self.start[:10])


class PlanBatch(BaseModel):
    plans: list[PlanEntry]

    @classmethod
    def from_payload(cls, payload: Any) -> PlanBatch:
        """Validate a raw plan payload.

        Args:
            payload: Decoded JSON, {"plans": [...]} or a bare list

        Returns:
            Validated PlanBatch

        Raises:
            PlanValidationError: If the payload shape, size or any entry is invalid
        """
        entries = payload.get("plans") if isinstance(payload, Mapping) else payload
        if not isinstance(entries, list):
            raise PlanValidationError(
                "INVALID_PLAN_PAYLOAD",
                ['Expected {"plans": [...]} or a list of plans'],
            )

        if not entries:
            raise PlanValidationError("EMPTY_PLAN_BATCH", ["No plans in batch"])

        if len(entries) > MAX_PLANS_PER_BATCH:
            raise PlanValidationError(
                "TOO_MANY_PLANS",
                [f"Too many plans ({len(entries)}). Maximum is {MAX_PLANS_PER_BATCH} per request."],
            )

        plans: list[PlanEntry] = []
        errors: list[str] = []
        for idx, entry in enumerate(entries):
            try:
                plans.append(PlanEntry.model_validate(entry))
            except ValidationError as e:
                for error in e.errors():
                    location = ".".join(str(part) for part in error["loc"]) or "entry"
                    errors.append(f"plans[{idx}].{location}: {error['msg']}")

        if errors:
            raise PlanValidationError("INVALID_PLAN_ENTRY", errors)

        return cls(plans=plans)
