"""Public entry points for loading estimation scenarios."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ai_footprint.config_loader.parsing import (
    parse_devices,
    parse_hosting,
    parse_inference,
    parse_inputs,
    parse_network,
    parse_training,
)
from ai_footprint.config_loader.sources import load_scenario_file, parse_scenario_text
from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.phases.inputs import FootprintInputs

__all__ = [
    "load_inputs",
    "load_scenario_file",
    "parse_devices",
    "parse_hosting",
    "parse_inference",
    "parse_inputs",
    "parse_network",
    "parse_scenario_text",
    "parse_training",
]


def load_inputs(
    source: str | Path | Mapping[str, object],
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
) -> FootprintInputs:
    """Load typed phase inputs from a scenario file path or raw mapping.

    Args:
        source: Path to a JSON/YAML scenario, or an already parsed mapping.
        coefficients: Coefficients supplying task energy defaults.

    Returns:
        Fully populated :class:`FootprintInputs`.
    """

    if isinstance(source, Mapping):
        return parse_inputs(source, coefficients)
    return parse_inputs(load_scenario_file(source), coefficients)
