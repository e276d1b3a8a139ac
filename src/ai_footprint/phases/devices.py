"""End-user device emissions."""

from __future__ import annotations

import logging
from types import MappingProxyType

from ai_footprint.aggregators import sum_terms
from ai_footprint.carbon_models import DevicesBreakdown, EmissionBreakdown
from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.phases.inputs import DEVICE_TYPES, DeviceUsage, DevicesInput
from ai_footprint.reference import DeviceRow, NotFound, ReferenceDataStore

LOGGER = logging.getLogger(__name__)

__all__ = ["compute_device_usage", "compute_devices"]


def compute_device_usage(
    usage: DeviceUsage,
    device: DeviceRow,
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> EmissionBreakdown:
    """Return the annual footprint of one device type.

    Embodied carbon is the yearly share of the device's manufacturing cost,
    scaled by the session length against an eight-hour active day. Operational
    carbon is the electricity of every session at the national grid mix.
    """

    usage_fraction = usage.duration_minutes / coefficients.device_active_minutes_per_day
    embodied_kg = usage.count * device.embodied_kg_per_year * usage_fraction

    energy_per_session_kwh = (device.power_watts * usage.duration_minutes) / 1000 / 60
    operational_kg = (
        energy_per_session_kwh
        * coefficients.grid_intensity_g_per_kwh
        * usage.sessions_per_year
        * usage.count
        / 1000
    )
    return EmissionBreakdown(operational_kg=operational_kg, embodied_kg=embodied_kg)


def compute_devices(
    inp: DevicesInput,
    reference: ReferenceDataStore,
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> DevicesBreakdown:
    """Sum the device-type footprints over smartphone, laptop, desktop and tablet."""

    per_device: dict[str, EmissionBreakdown] = {}
    for device_type in DEVICE_TYPES:
        usage = inp.devices.get(device_type)
        if usage is None:
            continue
        row = reference.lookup_device(device_type)
        if isinstance(row, NotFound):
            LOGGER.info(
                "Device type missing from reference data, counted as zero",
                extra={"device_type": device_type},
            )
            continue
        per_device[device_type] = compute_device_usage(usage, row, coefficients)

    return DevicesBreakdown(
        operational_kg=sum_terms(b.operational_kg for b in per_device.values()),
        embodied_kg=sum_terms(b.embodied_kg for b in per_device.values()),
        per_device=MappingProxyType(per_device),
    )
