"""Tests for training-phase emissions."""

import pytest

from ai_footprint.constants import EmissionCoefficients
from ai_footprint.phases import TrainingInput, TrainingMode, compute_training


def test_preloaded_model_uses_published_total(reference):
    result = compute_training(TrainingInput(model_name="gpt-3"), reference)
    assert result.operational_kg == 552000.0
    assert result.embodied_kg == 0.0


def test_preloaded_unknown_model_contributes_zero(reference):
    result = compute_training(TrainingInput(model_name="Mystery-LM"), reference)
    assert result.total_kg == 0.0


def test_preloaded_without_selection_contributes_zero(reference):
    assert compute_training(TrainingInput(), reference).total_kg == 0.0


@pytest.mark.parametrize("mode", [TrainingMode.FINETUNED, TrainingMode.CUSTOM])
def test_gpu_hours_modes_use_linear_rate(reference, mode):
    result = compute_training(
        TrainingInput(mode=mode, gpu_hours=500, gpu_type="a100"), reference
    )
    assert result.operational_kg == pytest.approx(100.0)
    assert result.embodied_kg == 0.0


def test_gpu_type_does_not_change_estimate(reference):
    v100 = compute_training(
        TrainingInput(mode=TrainingMode.CUSTOM, gpu_hours=10, gpu_type="v100"), reference
    )
    h100 = compute_training(
        TrainingInput(mode=TrainingMode.CUSTOM, gpu_hours=10, gpu_type="h100"), reference
    )
    assert v100 == h100


def test_gpu_hours_ignored_in_preloaded_mode(reference):
    result = compute_training(
        TrainingInput(model_name="BLOOM", gpu_hours=1000), reference
    )
    assert result.operational_kg == 24700.0


def test_custom_coefficient_is_applied(reference):
    coefficients = EmissionCoefficients(training_kg_per_gpu_hour=0.5)
    result = compute_training(
        TrainingInput(mode=TrainingMode.FINETUNED, gpu_hours=4), reference, coefficients
    )
    assert result.operational_kg == pytest.approx(2.0)
