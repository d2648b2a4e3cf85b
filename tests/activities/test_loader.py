"""Tests for activity payload parsing."""

import pytest

from likes_planner.activities.aggregation import aggregate_activities
from likes_planner.activities.loader import parse_activities
from likes_planner.activities.types import NoValidRuns
from likes_planner.analysis.report import analyze_activities
from likes_planner.errors import ActivityPayloadError

RUN = {"run_km": 5.01, "run_time": 1800, "run_pace": 359, "sign_date": 1772452800}


def test_parse_bare_list():
    records = parse_activities([RUN, RUN])

    assert len(records) == 2
    assert records[0].run_km == 5.01
    assert records[0].run_pace == 359


def test_parse_wrapped_payload():
    """Test that {"activities": [...]} is unwrapped."""
    records = parse_activities({"activities": [RUN], "total": 1})

    assert len(records) == 1


def test_extra_fields_are_ignored():
    records = parse_activities([{**RUN, "id": 99, "title": "Morning run"}])

    assert records[0].model_dump() == RUN


def test_numeric_strings_are_coerced():
    records = parse_activities([{"run_km": "5.5", "run_time": "1800", "run_pace": "327", "sign_date": "1772452800"}])

    assert records[0].run_km == 5.5
    assert records[0].run_time == 1800


def test_unreadable_records_are_skipped():
    """Test that bad entries are dropped instead of failing the batch."""
    payload = [RUN, "not a record", {"run_km": "far", "run_time": 1800}, RUN]

    records = parse_activities(payload)

    assert len(records) == 2


def test_missing_fields_default_to_zero_and_fail_validity():
    """Test that incomplete records parse but never count as runs."""
    records = parse_activities([{"sign_date": 1772452800}])

    assert records[0].run_km == 0.0
    assert isinstance(aggregate_activities(records), NoValidRuns)


def test_object_without_activities_key_is_rejected():
    with pytest.raises(ActivityPayloadError, match="INVALID_ACTIVITY_PAYLOAD"):
        parse_activities({"data": [RUN]})


@pytest.mark.parametrize("payload", [None, 42, "runs", {"activities": {"run_km": 5}}])
def test_non_list_payloads_are_rejected(payload):
    with pytest.raises(ActivityPayloadError) as exc_info:
        parse_activities(payload)

    assert exc_info.value.code == "INVALID_ACTIVITY_PAYLOAD"


@pytest.mark.parametrize("sign_date", [1772452800000, 10**20, -(10**20)])
def test_out_of_range_sign_date_is_skipped(sign_date):
    """Test that millisecond or absurd timestamps drop the record, not the batch."""
    records = parse_activities([RUN, {**RUN, "sign_date": sign_date}])

    assert len(records) == 1
    assert records[0].sign_date == RUN["sign_date"]


def test_millisecond_timestamp_does_not_break_analysis():
    report = analyze_activities([RUN, {**RUN, "sign_date": 1772452800000}])

    assert report["summary"]["totalRuns"] == 1
    assert report["period"]["days"] == 1
