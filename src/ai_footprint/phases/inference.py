"""Inference-phase emissions: electricity plus amortised GPU and server."""

from __future__ import annotations

import logging

from ai_footprint.carbon_models import InferenceBreakdown
from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.phases.inputs import InferenceInput
from ai_footprint.reference import NotFound, ReferenceDataStore

LOGGER = logging.getLogger(__name__)

__all__ = ["compute_inference", "resolve_grid"]


def resolve_grid(
    inp: InferenceInput,
    reference: ReferenceDataStore,
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> tuple[float, float]:
    """Return ``(pue, carbon_intensity_g_per_kwh)`` for the inference site.

    Only cloud execution resolves a datacenter row. Local execution and
    unresolved regions use the coefficient fallbacks (PUE 1, intensity 0),
    which makes the operational term zero.
    """

    if inp.location != "cloud":
        return coefficients.default_pue, coefficients.default_carbon_intensity_g_per_kwh
    row = reference.lookup_datacenter(inp.provider, inp.region)
    if isinstance(row, NotFound):
        LOGGER.info(
            "Inference datacenter not resolved, operational emissions counted as zero",
            extra={"provider": inp.provider, "region": inp.region},
        )
        return coefficients.default_pue, coefficients.default_carbon_intensity_g_per_kwh
    return row.pue, row.carbon_intensity_g_per_kwh


def compute_inference(
    inp: InferenceInput,
    reference: ReferenceDataStore,
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> InferenceBreakdown:
    """Return the annual inference footprint.

    Args:
        inp: Inference usage; ``energy_per_inference_kwh`` is already resolved.
        reference: Reference tables used to resolve the datacenter.
        coefficients: Emission coefficients.

    Returns:
        Breakdown whose embodied term is the sum of the GPU and server
        allocations, both also exposed separately.
    """

    pue, intensity = resolve_grid(inp, reference, coefficients)
    volume = inp.inferences_per_year
    active_seconds = inp.inference_duration_seconds * volume

    operational_kg = (
        inp.energy_per_inference_kwh * pue * volume * intensity
    ) / 1000
    lifetime_s = coefficients.hardware_lifetime_seconds
    gpu_g = (coefficients.gpu_embodied_g / lifetime_s) * active_seconds
    server_g = (
        (coefficients.server_embodied_g / lifetime_s)
        * active_seconds
        * coefficients.server_ai_share
    )

    return InferenceBreakdown(
        operational_kg=operational_kg,
        embodied_kg=(gpu_g + server_g) / 1000,
        embedded_gpu_kg=gpu_g / 1000,
        embedded_server_kg=server_g / 1000,
    )
