"""Aggregation of phase breakdowns into a single annual footprint.

The utilities in this module favour deterministic aggregation: totals are
computed with :func:`math.fsum`, so the result does not depend on the order
in which phases are supplied, and a zero inference count yields an explicit
:class:`~ai_footprint.carbon_models.DivisionUndefined` marker instead of
``NaN`` or ``Infinity``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ai_footprint.carbon_models import (
    ZERO_BREAKDOWN,
    AggregateResult,
    DivisionUndefined,
    EmissionBreakdown,
    Phase,
)
from ai_footprint.estimation.labeling import derive_label

LOGGER = logging.getLogger(__name__)

__all__ = ["aggregate", "per_inference_grams", "sum_terms"]


def sum_terms(terms: Iterable[float]) -> float:
    """Sum with :func:`math.fsum`, falling back to plain addition on overflow.

    ``fsum`` raises when partial sums overflow or when +inf meets -inf; the
    fallback yields ``inf`` or ``nan`` instead so aggregation never raises.
    """

    values = list(terms)
    try:
        return math.fsum(values)
    except (OverflowError, ValueError):
        return sum(values, 0.0)


def per_inference_grams(
    total_kg: float, inferences_per_year: float
) -> float | DivisionUndefined:
    """Return grams CO2e per inference, or ``DivisionUndefined`` for no volume."""

    if not math.isfinite(inferences_per_year) or inferences_per_year <= 0:
        return DivisionUndefined()
    grams = total_kg * 1000 / inferences_per_year
    if not math.isfinite(grams):
        return DivisionUndefined("footprint total is not a finite number")
    return grams


def aggregate(
    breakdowns: Mapping[Phase | str, EmissionBreakdown],
    inferences_per_year: float,
    *,
    coefficients_version: str | None = None,
) -> AggregateResult:
    """Sum phase breakdowns and derive the per-inference metric and label.

    Args:
        breakdowns: Breakdown per phase. Phases that are absent count as zero.
        inferences_per_year: Annual inference volume used for the
            per-inference metric.
        coefficients_version: Optional coefficient-set identifier recorded on
            the result.

    Returns:
        A complete :class:`AggregateResult`; this function never raises for
        numeric reasons.
    """

    per_phase: dict[Phase, EmissionBreakdown] = {}
    for phase in Phase:
        per_phase[phase] = breakdowns.get(phase, ZERO_BREAKDOWN)

    unknown = {str(key) for key in breakdowns} - {phase.value for phase in Phase}
    if unknown:
        LOGGER.warning("Ignoring unknown phases", extra={"phases": sorted(unknown)})

    total_kg = sum_terms(
        term
        for breakdown in per_phase.values()
        for term in (breakdown.operational_kg, breakdown.embodied_kg)
    )
    if not math.isfinite(total_kg):
        LOGGER.warning(
            "Footprint total overflowed",
            extra={"total_kg": total_kg, "inferences_per_year": inferences_per_year},
        )
    result = AggregateResult(
        total_kg=total_kg,
        per_phase=MappingProxyType(per_phase),
        per_inference_g=per_inference_grams(total_kg, inferences_per_year),
        label=derive_label(total_kg),
        coefficients_version=coefficients_version,
    )
    LOGGER.debug(
        "Footprint aggregated",
        extra={"total_kg": total_kg, "label": result.label.value},
    )
    return result
