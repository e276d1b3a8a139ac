"""Training-phase emissions."""

from __future__ import annotations

import logging

from ai_footprint.carbon_models import EmissionBreakdown
from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.phases.inputs import TrainingInput, TrainingMode
from ai_footprint.reference import NotFound, ReferenceDataStore

LOGGER = logging.getLogger(__name__)

__all__ = ["compute_training"]


def compute_training(
    inp: TrainingInput,
    reference: ReferenceDataStore,
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> EmissionBreakdown:
    """Return the training footprint, all of it booked as operational.

    A preloaded foundation model contributes its published training total;
    an unknown model name contributes zero. Fine-tuned and custom models use
    a flat per-GPU-hour rate regardless of ``gpu_type``.
    """

    if inp.mode is TrainingMode.PRELOADED:
        row = reference.lookup_model(inp.model_name)
        if isinstance(row, NotFound):
            if inp.model_name:
                LOGGER.info(
                    "Unknown foundation model, training counted as zero",
                    extra={"model": inp.model_name},
                )
            return EmissionBreakdown(operational_kg=0.0, embodied_kg=0.0)
        return EmissionBreakdown(
            operational_kg=row.total_training_co2_kg, embodied_kg=0.0
        )

    return EmissionBreakdown(
        operational_kg=inp.gpu_hours * coefficients.training_kg_per_gpu_hour,
        embodied_kg=0.0,
    )
