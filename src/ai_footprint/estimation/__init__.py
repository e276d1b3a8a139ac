"""Footprint estimation package.

Provides the high-level :class:`FootprintEstimator` API along with the
pipeline engine, reference-data defaults, labeling and equivalences.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = ["FootprintEngine", "FootprintEstimator", "FootprintResult"]

if TYPE_CHECKING:
    from .engine import FootprintEngine, FootprintResult
    from .estimator import FootprintEstimator


def __getattr__(name: str) -> Any:
    """Import the pipeline lazily so leaf modules can import siblings freely."""

    module_map = {
        "FootprintEngine": "engine",
        "FootprintResult": "engine",
        "FootprintEstimator": "estimator",
    }
    if name not in module_map:
        raise AttributeError(name)
    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
