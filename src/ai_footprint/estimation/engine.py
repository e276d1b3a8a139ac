"""Core footprint pipeline: phase calculators, aggregation and equivalences."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ai_footprint.aggregators import aggregate
from ai_footprint.carbon_models import AggregateResult, EmissionBreakdown, Phase
from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.estimation.reporting import Equivalences, translate
from ai_footprint.phases import (
    FootprintInputs,
    compute_devices,
    compute_hosting,
    compute_inference,
    compute_network,
    compute_training,
)
from ai_footprint.reference import ReferenceDataStore

_LOGGER = logging.getLogger("ai_footprint.estimation.engine")

__all__ = ["FootprintEngine", "FootprintResult"]


@dataclass(frozen=True, slots=True)
class FootprintResult:
    """Outcome of one pipeline run together with the inputs it was built from."""

    inputs: FootprintInputs
    aggregate: AggregateResult
    equivalences: Equivalences

    def to_dict(self) -> dict[str, object]:
        payload = self.aggregate.to_dict()
        payload["equivalences"] = self.equivalences.to_dict()
        return {"inputs": self.inputs.to_dict(), "results": payload}


@dataclass(frozen=True, slots=True)
class FootprintEngine:
    """Runs the five phase calculators against fixed reference data.

    The engine holds no mutable state; running it twice on the same inputs
    yields equal results.
    """

    reference: ReferenceDataStore
    coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS
    logger: logging.Logger = _LOGGER

    def breakdowns(self, inputs: FootprintInputs) -> dict[Phase, EmissionBreakdown]:
        """Compute every phase breakdown for ``inputs``."""

        volume = inputs.inference.inferences_per_year
        return {
            Phase.TRAINING: compute_training(
                inputs.training, self.reference, self.coefficients
            ),
            Phase.INFERENCE: compute_inference(
                inputs.inference, self.reference, self.coefficients
            ),
            Phase.DEVICES: compute_devices(
                inputs.devices, self.reference, self.coefficients
            ),
            Phase.NETWORK: compute_network(
                inputs.network, self.coefficients, inferences_per_year=volume
            ),
            Phase.HOSTING: compute_hosting(inputs.hosting, self.coefficients),
        }

    def run(self, inputs: FootprintInputs) -> FootprintResult:
        """Estimate the annual footprint of ``inputs``."""

        result = aggregate(
            self.breakdowns(inputs),
            inputs.inference.inferences_per_year,
            coefficients_version=self.coefficients.version,
        )
        self.logger.info(
            "Footprint estimated",
            extra={
                "total_kg": result.total_kg,
                "label": result.label.value,
                "coefficients_version": self.coefficients.version,
            },
        )
        return FootprintResult(
            inputs=inputs,
            aggregate=result,
            equivalences=translate(result.total_kg),
        )
