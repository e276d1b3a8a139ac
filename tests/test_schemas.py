"""Tests for the exported report schema."""

import json

import pytest
from pydantic import ValidationError

from ai_footprint.config_loader import parse_inputs
from ai_footprint.estimation.engine import FootprintEngine
from ai_footprint.phases import FootprintInputs
from ai_footprint.schemas import (
    CURRENT_REPORT_SCHEMA_VERSION,
    FootprintReport,
    GreenHostingSection,
    build_report,
    write_report,
)


@pytest.fixture
def result(reference, scenario):
    return FootprintEngine(reference=reference).run(parse_inputs(scenario))


def test_report_mirrors_result(result):
    report = build_report(result)
    assert report.schema_version == CURRENT_REPORT_SCHEMA_VERSION
    assert report.total_kg == result.aggregate.total_kg
    assert report.label == "G"
    assert list(report.phases) == ["training", "inference", "devices", "network", "hosting"]
    assert report.phases["inference"].details["embedded_gpu_kg"] > 0
    assert set(report.phases["devices"].details["per_device"]) == {"smartphone", "laptop"}
    assert report.phases["network"].details is None
    assert sum(section.share for section in report.phases.values()) == pytest.approx(1.0)
    assert report.coefficients_version == "2023.1"


def test_display_strings(result):
    display = build_report(result).equivalences.display
    assert set(display) == {"car_km", "tree_years", "household_years"}
    assert "," in display["car_km"]


def test_per_inference_is_null_without_volume(reference):
    report = build_report(FootprintEngine(reference=reference).run(FootprintInputs()))
    assert report.per_inference_g is None
    assert "per_inference_g" not in report.model_dump_json_ready()
    assert json.loads(report.to_json())["per_inference_g"] is None


def test_green_hosting_section_is_optional(result):
    verdict = GreenHostingSection(url="https://chat.gemeente.example", green=True, hosted_by="Azure")
    report = build_report(result, green_hosting=verdict)
    assert report.green_hosting.green is True
    assert build_report(result).green_hosting is None


def test_report_is_frozen_and_strict(result):
    report = build_report(result)
    with pytest.raises(ValidationError):
        report.total_kg = 0.0
    payload = report.model_dump()
    payload["unexpected"] = 1
    with pytest.raises(ValidationError):
        FootprintReport(**payload)


def test_report_round_trips_through_json(result):
    report = build_report(result)
    restored = FootprintReport.model_validate_json(report.to_json())
    assert restored.total_kg == report.total_kg
    assert restored.inputs["network"]["data_unit"] == "kB"


def test_write_report(tmp_path, result):
    target = write_report(build_report(result), tmp_path / "report.json")
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["kind"] == "ai_footprint"
    assert data["inputs"]["hosting"]["url"] == "https://chat.gemeente.example"


def test_overflowing_scenario_still_builds_a_report(reference):
    inputs = parse_inputs(
        {"inference": {"inferencesPerYear": "1e300", "inferenceDuration": "1e300"}}
    )
    result = FootprintEngine(reference=reference).run(inputs)
    report = build_report(result)

    assert report.per_inference_g is None
    assert report.label == "G"
    assert {section.share for section in report.phases.values()} == {0.0}
    assert report.equivalences.display["car_km"] == "n/a"
    assert json.loads(report.to_json())["per_inference_g"] is None
