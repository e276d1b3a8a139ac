"""Carbon-related data models for the footprint engine.

Every result type is an immutable value object. ``to_dict`` methods return
plain JSON-ready mappings for the report exporter and the CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, TypedDict


class Phase(StrEnum):
    """Lifecycle phases, in reporting order."""

    TRAINING = "training"
    INFERENCE = "inference"
    DEVICES = "devices"
    NETWORK = "network"
    HOSTING = "hosting"


class Label(StrEnum):
    """Energy label, ordered from A (lowest emissions) to G."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    @property
    def rank(self) -> int:
        return _LABEL_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self.rank >= other.rank


_LABEL_ORDER: tuple[Label, ...] = tuple(Label)


class BreakdownDict(TypedDict):
    """Serialised shape of an :class:`EmissionBreakdown`."""

    operational_kg: float
    embodied_kg: float
    total_kg: float


@dataclass(frozen=True, slots=True)
class EmissionBreakdown:
    """Annual emissions of one phase, split by origin (kg CO2e/year)."""

    operational_kg: float = 0.0
    embodied_kg: float = 0.0

    @property
    def total_kg(self) -> float:
        return self.operational_kg + self.embodied_kg

    def to_dict(self) -> dict[str, object]:
        return {
            "operational_kg": float(self.operational_kg),
            "embodied_kg": float(self.embodied_kg),
            "total_kg": float(self.total_kg),
        }


ZERO_BREAKDOWN = EmissionBreakdown()


@dataclass(frozen=True, slots=True)
class InferenceBreakdown(EmissionBreakdown):
    """Inference emissions with the embodied term split by hardware."""

    embedded_gpu_kg: float = 0.0
    embedded_server_kg: float = 0.0

    def to_dict(self) -> dict[str, object]:
        payload = EmissionBreakdown.to_dict(self)
        payload["embedded_gpu_kg"] = float(self.embedded_gpu_kg)
        payload["embedded_server_kg"] = float(self.embedded_server_kg)
        return payload


@dataclass(frozen=True, slots=True)
class DevicesBreakdown(EmissionBreakdown):
    """End-user device emissions with the per-device-type contributions."""

    per_device: Mapping[str, EmissionBreakdown] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def to_dict(self) -> dict[str, object]:
        payload = EmissionBreakdown.to_dict(self)
        payload["per_device"] = {
            device: breakdown.to_dict() for device, breakdown in self.per_device.items()
        }
        return payload


@dataclass(frozen=True, slots=True)
class DivisionUndefined:
    """Marker for a per-unit metric whose denominator is zero.

    Callers must render it as "not applicable", never as a number.
    """

    reason: str = "inferences_per_year is zero"


@dataclass(frozen=True, slots=True)
class AggregateResult:
    """Total footprint, per-phase breakdowns, per-inference metric and label."""

    total_kg: float
    per_phase: Mapping[Phase, EmissionBreakdown]
    per_inference_g: float | DivisionUndefined
    label: Label
    coefficients_version: str | None = None

    @property
    def per_inference_defined(self) -> bool:
        return not isinstance(self.per_inference_g, DivisionUndefined)

    def phase_shares(self) -> dict[Phase, float]:
        """Return each phase's fraction of the total.

        Every share is 0 when the total is 0 or not finite; a share that
        cannot be computed as a finite number is also reported as 0.
        """

        if not math.isfinite(self.total_kg) or self.total_kg <= 0:
            return {phase: 0.0 for phase in self.per_phase}
        shares: dict[Phase, float] = {}
        for phase, breakdown in self.per_phase.items():
            share = breakdown.total_kg / self.total_kg
            shares[phase] = share if math.isfinite(share) else 0.0
        return shares

    def to_dict(self) -> dict[str, object]:
        per_inference = (
            None
            if isinstance(self.per_inference_g, DivisionUndefined)
            else float(self.per_inference_g)
        )
        return {
            "total_kg": float(self.total_kg),
            "label": self.label.value,
            "per_inference_g": per_inference,
            "per_phase": {
                phase.value: breakdown.to_dict()
                for phase, breakdown in self.per_phase.items()
            },
            "coefficients_version": self.coefficients_version,
        }
