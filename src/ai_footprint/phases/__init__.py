"""Phase calculators: one pure function per lifecycle phase."""

from __future__ import annotations

from ai_footprint.phases.devices import compute_device_usage, compute_devices
from ai_footprint.phases.hosting import compute_hosting
from ai_footprint.phases.inference import compute_inference
from ai_footprint.phases.inputs import (
    DEVICE_TYPES,
    DataUnit,
    DeviceUsage,
    DevicesInput,
    FootprintInputs,
    HostingInput,
    InferenceInput,
    NetworkInput,
    TrainingInput,
    TrainingMode,
)
from ai_footprint.phases.network import compute_network
from ai_footprint.phases.training import compute_training

__all__ = [
    "DEVICE_TYPES",
    "DataUnit",
    "DeviceUsage",
    "DevicesInput",
    "FootprintInputs",
    "HostingInput",
    "InferenceInput",
    "NetworkInput",
    "TrainingInput",
    "TrainingMode",
    "compute_device_usage",
    "compute_devices",
    "compute_hosting",
    "compute_inference",
    "compute_network",
    "compute_training",
]
