"""Tests for inference-phase emissions."""

import pytest

from ai_footprint.constants import SECONDS_PER_YEAR
from ai_footprint.carbon_models import InferenceBreakdown
from ai_footprint.phases import InferenceInput, compute_inference
from ai_footprint.phases.inference import resolve_grid

LIFETIME_S = 6 * SECONDS_PER_YEAR


def _cloud_input(**overrides):
    values = {
        "location": "cloud",
        "provider": "azure",
        "region": "West Europe",
        "energy_per_inference_kwh": 0.047 / 1000,
        "energy_source": "task_default",
        "inferences_per_year": 1_000_000,
        "inference_duration_seconds": 5,
    }
    values.update(overrides)
    return InferenceInput(**values)


def test_cloud_inference_formulas(reference):
    result = compute_inference(_cloud_input(), reference)

    expected_operational = (0.047 / 1000 * 1.2 * 1_000_000 * 300) / 1000
    expected_gpu_g = (150000 / LIFETIME_S) * 5 * 1_000_000
    expected_server_g = (2500000 / LIFETIME_S) * 5 * 1_000_000 * 0.4

    assert isinstance(result, InferenceBreakdown)
    assert result.operational_kg == pytest.approx(expected_operational)
    assert result.operational_kg == pytest.approx(16.92)
    assert result.embedded_gpu_kg == pytest.approx(expected_gpu_g / 1000)
    assert result.embedded_server_kg == pytest.approx(expected_server_g / 1000)
    assert result.embodied_kg == pytest.approx((expected_gpu_g + expected_server_g) / 1000)


def test_embodied_term_is_not_double_counted(reference):
    result = compute_inference(_cloud_input(), reference)
    assert result.total_kg == pytest.approx(
        result.operational_kg + result.embedded_gpu_kg + result.embedded_server_kg
    )


def test_unknown_region_zeroes_operational_only(reference):
    result = compute_inference(_cloud_input(region="Atlantis"), reference)
    assert result.operational_kg == 0.0
    assert result.embodied_kg > 0.0


def test_local_inference_has_no_operational_term(reference):
    result = compute_inference(
        _cloud_input(location="local", local_location="Utrecht", hardware="gpu"),
        reference,
    )
    assert result.operational_kg == 0.0
    assert result.embedded_gpu_kg > 0.0


def test_resolve_grid(reference):
    assert resolve_grid(_cloud_input(), reference) == (1.2, 300.0)
    assert resolve_grid(_cloud_input(provider="gcp", region="europe-west4"), reference) == (
        1.1,
        268.0,
    )
    assert resolve_grid(_cloud_input(location=None), reference) == (1.0, 0.0)


def test_zero_volume_gives_zero(reference):
    result = compute_inference(_cloud_input(inferences_per_year=0), reference)
    assert result.total_kg == 0.0


def test_zero_duration_removes_embodied_term(reference):
    result = compute_inference(_cloud_input(inference_duration_seconds=0), reference)
    assert result.embodied_kg == 0.0
    assert result.operational_kg > 0.0
