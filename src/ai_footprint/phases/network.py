"""Network transport emissions."""

from __future__ import annotations

from ai_footprint.carbon_models import EmissionBreakdown
from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.phases.inputs import DataUnit, NetworkInput

__all__ = [
    "co2_per_inference_g",
    "compute_network",
    "data_volume_gb",
    "energy_per_inference_kwh",
]

_UNIT_DIVISORS: dict[DataUnit, float] = {
    DataUnit.KB: 1_000_000.0,
    DataUnit.MB: 1_000.0,
    DataUnit.GB: 1.0,
}


def data_volume_gb(inp: NetworkInput) -> float:
    """Normalise the per-inference data volume to gigabytes."""
    return inp.data_amount / _UNIT_DIVISORS[inp.data_unit]


def energy_per_inference_kwh(
    inp: NetworkInput, coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS
) -> float:
    return data_volume_gb(inp) * coefficients.network_kwh_per_gb


def co2_per_inference_g(
    inp: NetworkInput, coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS
) -> float:
    return energy_per_inference_kwh(inp, coefficients) * coefficients.grid_intensity_g_per_kwh


def compute_network(
    inp: NetworkInput,
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
    *,
    inferences_per_year: float,
) -> EmissionBreakdown:
    """Annual transport footprint for ``inferences_per_year`` requests.

    Network transport carries no embodied term.
    """

    operational_kg = (
        data_volume_gb(inp)
        * coefficients.network_kwh_per_gb
        * inferences_per_year
        * coefficients.grid_intensity_g_per_kwh
        / 1000
    )
    return EmissionBreakdown(operational_kg=operational_kg, embodied_kg=0.0)
