"""High-level footprint estimation facade."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ai_footprint.config_loader import parse_inputs
from ai_footprint.constants import DEFAULT_COEFFICIENTS, EmissionCoefficients
from ai_footprint.estimation import defaults as estimation_defaults
from ai_footprint.estimation.engine import FootprintEngine, FootprintResult
from ai_footprint.phases.inputs import FootprintInputs
from ai_footprint.reference import DatacenterRow, ReferenceDataStore


class FootprintEstimator:
    """Estimate the annual footprint of a generative-AI application.

    Reference tables are loaded once (see
    :func:`ai_footprint.estimation.defaults.load_reference_data`) unless a
    store is injected explicitly.
    """

    def __init__(
        self,
        reference: ReferenceDataStore | None = None,
        *,
        coefficients: EmissionCoefficients = DEFAULT_COEFFICIENTS,
    ) -> None:
        """Initialise the estimator.

        Args:
            reference: Pre-built reference store. Defaults to the packaged
                tables (or the ``AI_FOOTPRINT_REFERENCE_DIR`` override).
            coefficients: Coefficient set applied by every calculator.
        """

        self.logger = logging.getLogger("ai_footprint.estimator")
        self.reference = reference or estimation_defaults.load_reference_data()
        self.coefficients = coefficients
        self._engine = FootprintEngine(
            reference=self.reference,
            coefficients=coefficients,
            logger=self.logger,
        )
        self.logger.info(
            "FootprintEstimator initialised",
            extra={
                "reference": repr(self.reference),
                "coefficients_version": coefficients.version,
            },
        )

    def estimate(self, inputs: FootprintInputs) -> FootprintResult:
        """Run the full pipeline on a typed input snapshot."""

        return self._engine.run(inputs)

    def estimate_from_mapping(self, raw: Mapping[str, object]) -> FootprintResult:
        """Parse raw form values (zero-defaulting bad numbers) and estimate.

        Args:
            raw: Scenario mapping with ``training``, ``inference``,
                ``devices``, ``network`` and ``hosting`` sections.

        Returns:
            The pipeline result for the parsed inputs.
        """

        return self.estimate(parse_inputs(raw, self.coefficients))

    def available_models(self) -> tuple[str, ...]:
        return self.reference.model_names()

    def available_providers(self) -> tuple[str, ...]:
        return self.reference.providers()

    def available_regions(self, provider: str) -> tuple[DatacenterRow, ...]:
        return self.reference.lookup_datacenters(provider)

    def available_tasks(self) -> dict[str, float]:
        return dict(self.coefficients.task_energy_kwh)

    def available_devices(self) -> tuple[str, ...]:
        return self.reference.device_types()
