"""Turn raw form values into typed phase input records.

Keys follow the field names of the input forms (``gpuHours``,
``inferencesPerYear``...); snake_case spellings are accepted as well.
Numeric fields go through :func:`ai_footprint.parsing.parse_number`, so
empty or non-numeric values become zero instead of failing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.parsing import Valid, parse_flag, parse_number, parse_text
from ai_footprint.phases.inputs import (
    DEVICE_TYPES,
    DataUnit,
    DeviceUsage,
    DevicesInput,
    EnergySource,
    FootprintInputs,
    HostingInput,
    InferenceInput,
    NetworkInput,
    TrainingInput,
    TrainingMode,
)

LOGGER = logging.getLogger(__name__)

__all__ = [
    "parse_devices",
    "parse_hosting",
    "parse_inference",
    "parse_inputs",
    "parse_network",
    "parse_training",
]


def _pick(section: Mapping[str, object], *keys: str) -> object:
    for key in keys:
        if key in section:
            return section[key]
    return None


def _number(section: Mapping[str, object], *keys: str) -> float:
    return parse_number(_pick(section, *keys), field=keys[0]).value


def _expect_mapping(value: object) -> Mapping[str, object]:
    """Return the string-keyed entries of ``value``, or ``{}`` for non-mappings."""

    if not isinstance(value, Mapping):
        return {}
    ignored = [key for key in value.keys() if not isinstance(key, str)]
    if not ignored:
        return value
    LOGGER.warning(
        "Ignoring non-string keys in scenario section",
        extra={"keys": [repr(key) for key in ignored]},
    )
    return {key: item for key, item in value.items() if isinstance(key, str)}


def _location(value: object) -> Literal["cloud", "local"] | None:
    text = parse_text(value)
    if text is None:
        return None
    lowered = text.lower()
    if lowered == "cloud":
        return "cloud"
    if lowered == "local":
        return "local"
    return None


def parse_training(section: Mapping[str, object]) -> TrainingInput:
    raw_mode = parse_text(_pick(section, "modelType", "mode"))
    try:
        mode = TrainingMode(raw_mode) if raw_mode else TrainingMode.PRELOADED
    except ValueError:
        LOGGER.warning("Unknown training mode, using preloaded", extra={"mode": raw_mode})
        mode = TrainingMode.PRELOADED
    return TrainingInput(
        mode=mode,
        model_name=parse_text(_pick(section, "selectedModel", "model_name")),
        gpu_hours=_number(section, "gpuHours", "gpu_hours"),
        gpu_type=parse_text(_pick(section, "gpuType", "gpu_type")),
    )


def parse_inference(
    section: Mapping[str, object],
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> InferenceInput:
    """Parse the inference section and resolve the per-inference energy once.

    A measured ``energyPerInference`` wins; otherwise the task default is
    used; otherwise the energy is zero.
    """

    task = parse_text(_pick(section, "task"))
    explicit = parse_number(
        _pick(section, "energyPerInference", "energy_per_inference_kwh"),
        field="energyPerInference",
    )
    task_default = coefficients.task_energy(task)
    energy: float
    source: EnergySource
    if isinstance(explicit, Valid):
        energy, source = explicit.value, "measured"
    elif task_default is not None:
        energy, source = task_default, "task_default"
    else:
        energy, source = 0.0, "missing"

    return InferenceInput(
        location=_location(_pick(section, "location")),
        provider=parse_text(_pick(section, "provider")),
        region=parse_text(_pick(section, "region")),
        task=task,
        energy_per_inference_kwh=energy,
        energy_source=source,
        inferences_per_year=_number(section, "inferencesPerYear", "inferences_per_year"),
        inference_duration_seconds=_number(
            section, "inferenceDuration", "inference_duration_seconds"
        ),
        local_location=parse_text(_pick(section, "localLocation", "local_location")),
        hardware=parse_text(_pick(section, "hardware")),
    )


def parse_devices(section: Mapping[str, object]) -> DevicesInput:
    # Forms nest the table under "devices"; scenario files may omit the level.
    devices_raw = _expect_mapping(section.get("devices", section))
    devices: dict[str, DeviceUsage] = {}
    for device_type in DEVICE_TYPES:
        entry = _expect_mapping(devices_raw.get(device_type))
        if not entry:
            continue
        devices[device_type] = DeviceUsage(
            count=_number(entry, "count"),
            duration_minutes=_number(entry, "duration", "duration_minutes"),
            sessions_per_year=_number(entry, "sessions", "sessions_per_year"),
        )
    ignored = set(devices_raw) - set(DEVICE_TYPES)
    if ignored:
        LOGGER.warning("Ignoring unknown device types", extra={"devices": sorted(ignored)})
    return DevicesInput(devices=MappingProxyType(devices))


def _data_unit(value: object) -> DataUnit:
    text = parse_text(value)
    if text is None:
        return DataUnit.KB
    for unit in DataUnit:
        if text.lower() == unit.value.lower():
            return unit
    LOGGER.warning("Unknown data unit, treating amount as GB", extra={"unit": text})
    return DataUnit.GB


def parse_network(section: Mapping[str, object]) -> NetworkInput:
    return NetworkInput(
        data_amount=_number(section, "dataAmount", "data_amount"),
        data_unit=_data_unit(_pick(section, "dataUnit", "data_unit")),
    )


def parse_hosting(section: Mapping[str, object]) -> HostingInput:
    return HostingInput(
        is_online=parse_flag(_pick(section, "isOnline", "is_online")),
        annual_visits=_number(section, "annualVisits", "annual_visits"),
        hosting_type=_location(_pick(section, "hostingType", "hosting_type")),
        cloud_provider=parse_text(_pick(section, "cloudProvider", "cloud_provider")),
        region=parse_text(_pick(section, "region")),
        url=parse_text(_pick(section, "url")),
        server_location=parse_text(_pick(section, "serverLocation", "server_location")),
        server_energy_kwh=_number(section, "serverEnergy", "server_energy_kwh"),
    )


def parse_inputs(
    data: Mapping[str, object],
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> FootprintInputs:
    """Build a :class:`FootprintInputs` snapshot from a raw scenario mapping.

    Args:
        data: Mapping with optional ``training``, ``inference``, ``devices``,
            ``network`` and ``hosting`` sections.
        coefficients: Coefficients supplying task energy defaults.

    Returns:
        Typed inputs; missing sections and fields default to zero/empty.
    """

    return FootprintInputs(
        training=parse_training(_expect_mapping(data.get("training"))),
        inference=parse_inference(_expect_mapping(data.get("inference")), coefficients),
        devices=parse_devices(_expect_mapping(data.get("devices"))),
        network=parse_network(_expect_mapping(data.get("network"))),
        hosting=parse_hosting(_expect_mapping(data.get("hosting"))),
    )
