"""Energy-label classification of an annual footprint."""

from __future__ import annotations

from typing import Final

from ai_footprint.carbon_models import Label

__all__ = ["LABEL_THRESHOLDS_KG", "derive_label", "label_bounds"]

# Inclusive upper bounds in kg CO2e/year; each step doubles the previous one.
LABEL_THRESHOLDS_KG: Final[tuple[tuple[Label, float], ...]] = (
    (Label.A, 10_000.0),
    (Label.B, 20_000.0),
    (Label.C, 40_000.0),
    (Label.D, 80_000.0),
    (Label.E, 160_000.0),
    (Label.F, 320_000.0),
)


def derive_label(total_kg: float) -> Label:
    """Classify ``total_kg`` into A to G; a total on a boundary gets the greener label."""

    for label, upper in LABEL_THRESHOLDS_KG:
        if total_kg <= upper:
            return label
    return Label.G


def label_bounds(label: Label) -> tuple[float, float | None]:
    """Return the ``(exclusive lower, inclusive upper)`` kg range of ``label``.

    The upper bound of ``G`` is ``None``.
    """

    lower = 0.0
    for candidate, upper in LABEL_THRESHOLDS_KG:
        if candidate is label:
            return lower, upper
        lower = upper
    return lower, None
