"""Activity payload parsing.

The fetch step hands over the platform's JSON either as a bare list of
activity records or wrapped as ``{"activities": [...]}``. Records that cannot
be read are skipped with a warning; only an unusable payload shape raises.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from likes_planner.activities.types import ActivityRecord
from likes_planner.errors import ActivityPayloadError


def _unwrap(payload: Any) -> list[Any]:
    if isinstance(payload, Mapping):
        if "activities" not in payload:
            raise ActivityPayloadError(
                "INVALID_ACTIVITY_PAYLOAD",
                ["Activity payload object must contain an 'activities' key"],
            )
        payload = payload["activities"]

    if not isinstance(payload, list):
        raise ActivityPayloadError(
            "INVALID_ACTIVITY_PAYLOAD",
            [f"Activities must be a list, got {type(payload).__name__}"],
        )
    return payload


def parse_activities(payload: Any) -> list[ActivityRecord]:
    """Parse a raw activity payload into activity records.

    Args:
        payload: Decoded JSON, a list of records or {"activities": [...]}

    Returns:
        Parsed records in input order (invalid entries omitted)

    Raises:
        ActivityPayloadError: If the payload is not one of the accepted shapes
    """
    entries = _unwrap(payload)

    records: list[ActivityRecord] = []
    skipped: list[tuple[int, str]] = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            skipped.append((idx, f"expected an object, got {type(entry).__name__}"))
            continue
        try:
            records.append(ActivityRecord.model_validate(dict(entry)))
        except ValidationError as e:
            skipped.append((idx, f"{e.error_count()} invalid field(s)"))

    if skipped:
        logger.warning(f"Skipped {len(skipped)} unreadable activity record(s)")
        for idx, reason in skipped:
            logger.debug(f"Activity record {idx} skipped: {reason}")

    logger.debug(f"Parsed {len(records)} activity record(s) from {len(entries)} entries")
    return records
