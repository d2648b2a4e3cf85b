"""Tests for the command-line adapter."""

import json

import pytest
from loguru import logger
from typer.testing import CliRunner

from cli.cli import app

runner = CliRunner()

ACTIVITIES = {
    "activities": [
        {"run_km": 5.0, "run_time": 1800, "run_pace": 360, "sign_date": 1772452800},
        {"run_km": 10.0, "run_time": 3725, "run_pace": 372, "sign_date": 1772625600},
    ]
}


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks bound to the runner's captured streams."""
    yield
    logger.remove()


def test_analyze_from_file(tmp_path):
    activities_file = tmp_path / "activities.json"
    activities_file.write_text(json.dumps(ACTIVITIES), encoding="utf-8")

    result = runner.invoke(app, ["analyze", str(activities_file)])

    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["summary"]["totalRuns"] == 2
    assert report["period"]["days"] == 3


def test_analyze_from_stdin_compact_english():
    result = runner.invoke(app, ["--locale", "en", "analyze", "--compact"], input=json.dumps(ACTIVITIES))

    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["characteristics"] == "low-frequency, long-distance, tempo"


def test_analyze_without_valid_runs_reports_error():
    payload = [{"run_km": 0.1, "run_time": 20, "run_pace": 300, "sign_date": 1772452800}]

    result = runner.invoke(app, ["analyze"], input=json.dumps(payload))

    assert result.exit_code == 0
    assert '"error": "No valid running data found"' in result.stdout


def test_analyze_rejects_invalid_json():
    result = runner.invoke(app, ["analyze"], input="{not json")

    assert result.exit_code == 1


def test_analyze_rejects_wrong_payload_shape():
    result = runner.invoke(app, ["analyze"], input=json.dumps({"runs": []}))

    assert result.exit_code == 1


def test_analyze_missing_file(tmp_path):
    result = runner.invoke(app, ["analyze", str(tmp_path / "missing.json")])

    assert result.exit_code == 1


def test_decode_prints_one_line_per_name():
    result = runner.invoke(app, ["decode", "休息", "{400m@(PACE+4'00~4'10)}x8"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["休息日", "【400米(配速 4'00-4'10)】×8组"]


def test_decode_in_english():
    result = runner.invoke(app, ["-l", "en", "decode", "20min@(HRR+0.6~0.7)"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "20 minutes(HRR 0.6-0.7)"


def test_preview(tmp_path, sample_plans):
    plans_file = tmp_path / "plans.json"
    plans_file.write_text(json.dumps({"plans": sample_plans}, ensure_ascii=False), encoding="utf-8")

    result = runner.invoke(app, ["preview", str(plans_file)])

    assert result.exit_code == 0
    assert "第 2 周" in result.stdout
    assert "总训练日: 4 天" in result.stdout


def test_preview_rejects_empty_batch(tmp_path):
    plans_file = tmp_path / "plans.json"
    plans_file.write_text(json.dumps({"plans": []}), encoding="utf-8")

    result = runner.invoke(app, ["preview", str(plans_file)])

    assert result.exit_code == 1
