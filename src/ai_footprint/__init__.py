"""AI Footprint - annual carbon estimates for public-sector generative-AI applications."""

from __future__ import annotations

from importlib import import_module
from typing import Any, TYPE_CHECKING

__all__ = [
    "AggregateResult",
    "EmissionBreakdown",
    "FootprintEngine",
    "FootprintEstimator",
    "FootprintInputs",
    "FootprintReport",
    "Label",
    "ReferenceDataStore",
    "aggregate",
]

if TYPE_CHECKING:
    from .aggregators import aggregate
    from .carbon_models import AggregateResult, EmissionBreakdown, Label
    from .estimation.engine import FootprintEngine
    from .estimation.estimator import FootprintEstimator
    from .phases.inputs import FootprintInputs
    from .reference import ReferenceDataStore
    from .schemas import FootprintReport


def __getattr__(name: str) -> Any:
    """Lazily import heavy modules to avoid eager dependency loading."""

    module_map = {
        "AggregateResult": "carbon_models",
        "EmissionBreakdown": "carbon_models",
        "Label": "carbon_models",
        "FootprintEngine": "estimation.engine",
        "FootprintEstimator": "estimation.estimator",
        "FootprintInputs": "phases.inputs",
        "FootprintReport": "schemas",
        "ReferenceDataStore": "reference",
        "aggregate": "aggregators",
    }

    if name not in module_map:
        raise AttributeError(name)

    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
