"""Everyday equivalences for an annual footprint, separate from estimation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

__all__ = [
    "CAR_KG_PER_KM",
    "HOUSEHOLD_KG_PER_YEAR",
    "NOT_AVAILABLE",
    "TREE_KG_PER_YEAR",
    "Equivalences",
    "format_equivalences",
    "translate",
]

CAR_KG_PER_KM: Final[float] = 0.12
TREE_KG_PER_YEAR: Final[float] = 25.0
# Average Dutch household.
HOUSEHOLD_KG_PER_YEAR: Final[float] = 18_500.0
NOT_AVAILABLE: Final[str] = "n/a"


@dataclass(frozen=True, slots=True)
class Equivalences:
    """Unrounded equivalents of a footprint in kg CO2e."""

    car_km: float
    tree_years: float
    household_years: float

    def to_dict(self) -> dict[str, float]:
        return {
            "car_km": self.car_km,
            "tree_years": self.tree_years,
            "household_years": self.household_years,
        }


def translate(total_kg: float) -> Equivalences:
    """Convert a footprint into driving distance, tree uptake and households."""

    return Equivalences(
        car_km=total_kg / CAR_KG_PER_KM,
        tree_years=total_kg / TREE_KG_PER_YEAR,
        household_years=total_kg / HOUSEHOLD_KG_PER_YEAR,
    )


def _whole(value: float) -> str:
    return f"{round(value):,}" if math.isfinite(value) else NOT_AVAILABLE


def format_equivalences(equivalences: Equivalences) -> dict[str, str]:
    """Round equivalences for display: whole km and trees, households to 0.01.

    Values that are not finite are shown as ``"n/a"``.
    """

    households = equivalences.household_years
    return {
        "car_km": _whole(equivalences.car_km),
        "tree_years": _whole(equivalences.tree_years),
        "household_years": (
            f"{round(households, 2):.2f}" if math.isfinite(households) else NOT_AVAILABLE
        ),
    }
