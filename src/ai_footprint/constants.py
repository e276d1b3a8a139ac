"""Emission coefficients shared by every phase calculator.

All literature constants used by the engine live in a single, versioned,
frozen table so the assumptions behind an estimate can be audited (and
swapped wholesale) without touching formula code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Mapping

__all__ = [
    "COEFFICIENTS_VERSION",
    "DEFAULT_COEFFICIENTS",
    "DEFAULT_TASK_ENERGY_KWH",
    "EmissionCoefficients",
    "SECONDS_PER_YEAR",
]

COEFFICIENTS_VERSION: Final[str] = "2023.1"

SECONDS_PER_YEAR: Final[int] = 365 * 24 * 3600

# Mean energy draw per inference by task, kWh (Luccioni et al. 2023).
DEFAULT_TASK_ENERGY_KWH: Final[Mapping[str, float]] = MappingProxyType(
    {
        "text-generation": 0.047 / 1000,
        "text-classification": 0.002 / 1000,
        "extractive-qa": 0.003 / 1000,
        "masked-lm": 0.003 / 1000,
        "token-classification": 0.004 / 1000,
        "image-classification": 0.007 / 1000,
        "object-detection": 0.038 / 1000,
        "summarization": 0.049 / 1000,
        "image-captioning": 0.063 / 1000,
        "image-generation": 2.907 / 1000,
    }
)


@dataclass(frozen=True, slots=True)
class EmissionCoefficients:
    """Point-estimate coefficients applied by the phase calculators.

    Attributes:
        version: Identifier of this coefficient set, reported with results.
        training_kg_per_gpu_hour: Linear training cost for custom and
            fine-tuned models (kg CO2e per GPU-hour).
        gpu_embodied_g: Manufacturing footprint of one inference GPU (g CO2e).
        server_embodied_g: Manufacturing footprint of one server (g CO2e).
        hardware_lifetime_years: Amortisation period for GPUs and servers.
        server_ai_share: Fraction of a server's embodied carbon attributed to
            the AI workload during inference.
        server_utilization: Annual utilisation rate of a web-hosting server.
        grid_intensity_g_per_kwh: Grid mix used for devices and network
            (Netherlands, 2023).
        device_active_minutes_per_day: Daily active-use baseline for end-user
            devices.
        network_kwh_per_gb: Transmission energy per gigabyte.
        hosting_g_per_visit: Operational footprint of one page view, already
            inclusive of server power and grid mix (WebsiteCarbon).
        default_pue: PUE assumed when no datacenter row is resolved.
        default_carbon_intensity_g_per_kwh: Intensity assumed when no
            datacenter row is resolved.
        task_energy_kwh: Default per-inference energy draw by task category.
    """

    version: str = COEFFICIENTS_VERSION
    training_kg_per_gpu_hour: float = 0.2
    gpu_embodied_g: float = 150_000.0
    server_embodied_g: float = 2_500_000.0
    hardware_lifetime_years: float = 6.0
    server_ai_share: float = 0.4
    server_utilization: float = 0.4
    grid_intensity_g_per_kwh: float = 268.0
    device_active_minutes_per_day: float = 480.0
    network_kwh_per_gb: float = 0.27
    hosting_g_per_visit: float = 0.8
    default_pue: float = 1.0
    default_carbon_intensity_g_per_kwh: float = 0.0
    task_energy_kwh: Mapping[str, float] = field(
        default_factory=lambda: DEFAULT_TASK_ENERGY_KWH
    )

    @property
    def hardware_lifetime_seconds(self) -> float:
        """Amortisation period for inference hardware in seconds."""
        return self.hardware_lifetime_years * SECONDS_PER_YEAR

    def task_energy(self, task: str | None) -> float | None:
        """Return the default kWh per inference for ``task`` if it is known."""
        if not task:
            return None
        return self.task_energy_kwh.get(task)


DEFAULT_COEFFICIENTS: Final[EmissionCoefficients] = EmissionCoefficients()
