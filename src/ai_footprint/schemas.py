"""Pydantic models describing the exported footprint report."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ai_footprint.carbon_models import DivisionUndefined, EmissionBreakdown
from ai_footprint.estimation.engine import FootprintResult
from ai_footprint.estimation.reporting import format_equivalences

SchemaVersionLiteral = Literal["1.0.0"]
CURRENT_REPORT_SCHEMA_VERSION: SchemaVersionLiteral = "1.0.0"

__all__ = [
    "CURRENT_REPORT_SCHEMA_VERSION",
    "EquivalencesSection",
    "FootprintReport",
    "GreenHostingSection",
    "PhaseSection",
    "build_report",
    "write_report",
]


class PhaseSection(BaseModel):
    """Emissions of one lifecycle phase."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    operational_kg: float = Field(..., description="Electricity-related kg CO2e/year.")
    embodied_kg: float = Field(..., description="Manufacturing-related kg CO2e/year.")
    total_kg: float = Field(..., description="Sum of operational and embodied.")
    share: float = Field(
        ..., ge=0.0, description="Fraction of the total footprint (0 when total is 0)."
    )
    details: dict[str, object] | None = Field(
        default=None,
        description="Phase-specific extras such as per-device or GPU/server splits.",
    )


class EquivalencesSection(BaseModel):
    """Everyday equivalents of the total footprint."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    car_km: float
    tree_years: float
    household_years: float
    display: dict[str, str] = Field(
        ..., description="Rounded strings for presentation only."
    )


class GreenHostingSection(BaseModel):
    """Advisory green-hosting verdict; never used in any formula."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str = Field(..., min_length=1)
    green: bool
    hosted_by: str


class FootprintReport(BaseModel):
    """Immutable, versioned report of one footprint estimate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["ai_footprint"] = "ai_footprint"
    schema_version: SchemaVersionLiteral = CURRENT_REPORT_SCHEMA_VERSION
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="UTC timestamp at which the report was built.",
    )
    coefficients_version: str | None = None

    inputs: dict[str, object] = Field(..., description="Phase inputs as collected.")
    total_kg: float = Field(..., description="Annual footprint in kg CO2e.")
    label: Literal["A", "B", "C", "D", "E", "F", "G"]
    per_inference_g: float | None = Field(
        default=None,
        description="g CO2e per inference; null when there are no inferences.",
    )
    phases: dict[str, PhaseSection]
    equivalences: EquivalencesSection
    green_hosting: GreenHostingSection | None = None

    def model_dump_json_ready(self) -> dict[str, object]:
        """Return a JSON-serialisable payload with ``None`` values removed."""

        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, *, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)


def _phase_details(breakdown: EmissionBreakdown) -> dict[str, object] | None:
    payload = breakdown.to_dict()
    extras = {
        key: value
        for key, value in payload.items()
        if key not in {"operational_kg", "embodied_kg", "total_kg"}
    }
    return extras or None


def build_report(
    result: FootprintResult,
    *,
    green_hosting: GreenHostingSection | None = None,
) -> FootprintReport:
    """Convert a pipeline result into a :class:`FootprintReport`."""

    aggregate = result.aggregate
    shares = aggregate.phase_shares()
    per_inference = (
        None
        if isinstance(aggregate.per_inference_g, DivisionUndefined)
        else aggregate.per_inference_g
    )
    return FootprintReport(
        coefficients_version=aggregate.coefficients_version,
        inputs=result.inputs.to_dict(),
        total_kg=aggregate.total_kg,
        label=aggregate.label.value,
        per_inference_g=per_inference,
        phases={
            phase.value: PhaseSection(
                operational_kg=breakdown.operational_kg,
                embodied_kg=breakdown.embodied_kg,
                total_kg=breakdown.total_kg,
                share=max(shares[phase], 0.0),
                details=_phase_details(breakdown),
            )
            for phase, breakdown in aggregate.per_phase.items()
        },
        equivalences=EquivalencesSection(
            **result.equivalences.to_dict(),
            display=format_equivalences(result.equivalences),
        ),
        green_hosting=green_hosting,
    )


def write_report(report: FootprintReport, path: str | Path) -> Path:
    """Write ``report`` as indented JSON and return the path written."""

    target = Path(path)
    target.write_text(report.to_json(), encoding="utf-8")
    return target
