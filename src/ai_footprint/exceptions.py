"""Exception hierarchy for :mod:`ai_footprint`.

User-supplied scenario values never raise: the engine degrades to zero
contributions instead. These errors cover broken reference data and
unreadable scenario documents only.
"""

from __future__ import annotations

__all__ = ["AiFootprintError", "ReferenceDataError", "ScenarioError"]


class AiFootprintError(Exception):
    """Base class for all errors raised by the package."""


class ReferenceDataError(AiFootprintError, ValueError):
    """Raised when a reference table is malformed or has duplicate keys."""


class ScenarioError(AiFootprintError, ValueError):
    """Raised when a scenario document cannot be read as a mapping."""
