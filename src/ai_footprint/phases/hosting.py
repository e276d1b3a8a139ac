"""Web-hosting emissions for applications offered online."""

from __future__ import annotations

from ai_footprint.carbon_models import EmissionBreakdown
from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.phases.inputs import HostingInput

__all__ = ["compute_hosting"]


def compute_hosting(
    inp: HostingInput,
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> EmissionBreakdown:
    """Return the annual hosting footprint.

    Operational carbon uses a flat per-page-view figure that already includes
    server power and grid mix, so no PUE or intensity is applied.

    Embodied carbon spreads one server's manufacturing cost over the visits
    it serves in its utilised lifetime and books this year's visits. The
    visit count cancels out, so for any positive ``annual_visits`` the result
    is the constant ``server_embodied_g / (lifetime * utilization) / 1000``
    (about 1041.67 kg). Local hosting has no embodied term and its
    ``server_energy_kwh`` is not used.
    """

    visits = inp.annual_visits
    operational_kg = visits * coefficients.hosting_g_per_visit / 1000

    embodied_kg = 0.0
    lifetime_visits = (
        visits * coefficients.hardware_lifetime_years * coefficients.server_utilization
    )
    if inp.is_online and inp.hosting_type == "cloud" and lifetime_visits > 0:
        embodied_kg = coefficients.server_embodied_g * (visits / lifetime_visits) / 1000

    return EmissionBreakdown(operational_kg=operational_kg, embodied_kg=embodied_kg)
