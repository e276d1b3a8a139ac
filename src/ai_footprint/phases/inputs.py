"""Per-phase input records.

Each record holds only user-supplied scalars and selected reference keys.
Some fields are collected by the input forms but not used by any formula
(``gpu_type``, ``hardware``, ``server_energy_kwh``...). They are kept so
reports and forms can round-trip them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Literal, Mapping

__all__ = [
    "DEVICE_TYPES",
    "DataUnit",
    "DeviceUsage",
    "DevicesInput",
    "EnergySource",
    "FootprintInputs",
    "HostingInput",
    "InferenceInput",
    "NetworkInput",
    "TrainingInput",
    "TrainingMode",
]

DEVICE_TYPES: tuple[str, ...] = ("smartphone", "laptop", "desktop", "tablet")

EnergySource = Literal["measured", "task_default", "missing"]


class TrainingMode(StrEnum):
    PRELOADED = "preloaded"
    FINETUNED = "finetuned"
    CUSTOM = "custom"


class DataUnit(StrEnum):
    KB = "kB"
    MB = "MB"
    GB = "GB"


@dataclass(frozen=True, slots=True)
class TrainingInput:
    """Either a selected foundation model or GPU-hours of own training."""

    mode: TrainingMode = TrainingMode.PRELOADED
    model_name: str | None = None
    gpu_hours: float = 0.0
    gpu_type: str | None = None


@dataclass(frozen=True, slots=True)
class InferenceInput:
    """Where and how often the model answers requests.

    ``energy_per_inference_kwh`` is already resolved: the measured value when
    the user gave one, otherwise the task default. ``energy_source`` records
    which.
    """

    location: Literal["cloud", "local"] | None = None
    provider: str | None = None
    region: str | None = None
    task: str | None = None
    energy_per_inference_kwh: float = 0.0
    energy_source: EnergySource = "missing"
    inferences_per_year: float = 0.0
    inference_duration_seconds: float = 0.0
    local_location: str | None = None
    hardware: str | None = None


@dataclass(frozen=True, slots=True)
class DeviceUsage:
    """Usage of one device type across the user base."""

    count: float = 0.0
    duration_minutes: float = 0.0
    sessions_per_year: float = 0.0


@dataclass(frozen=True, slots=True)
class DevicesInput:
    """Device usage keyed by device type; absent types contribute nothing."""

    devices: Mapping[str, DeviceUsage] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True, slots=True)
class NetworkInput:
    """Data transferred per inference."""

    data_amount: float = 0.0
    data_unit: DataUnit = DataUnit.KB


@dataclass(frozen=True, slots=True)
class HostingInput:
    """Online availability of the application."""

    is_online: bool = False
    annual_visits: float = 0.0
    hosting_type: Literal["cloud", "local"] | None = None
    cloud_provider: str | None = None
    region: str | None = None
    url: str | None = None
    server_location: str | None = None
    server_energy_kwh: float = 0.0


@dataclass(frozen=True, slots=True)
class FootprintInputs:
    """Snapshot of all phase inputs for one estimate."""

    training: TrainingInput = field(default_factory=TrainingInput)
    inference: InferenceInput = field(default_factory=InferenceInput)
    devices: DevicesInput = field(default_factory=DevicesInput)
    network: NetworkInput = field(default_factory=NetworkInput)
    hosting: HostingInput = field(default_factory=HostingInput)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping of every collected field."""

        return {
            "training": asdict(self.training),
            "inference": asdict(self.inference),
            "devices": {
                device: asdict(usage) for device, usage in self.devices.devices.items()
            },
            "network": asdict(self.network),
            "hosting": asdict(self.hosting),
        }
