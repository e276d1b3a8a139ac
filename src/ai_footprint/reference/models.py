"""Row types for the static reference tables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from ai_footprint.exceptions import ReferenceDataError

TableName = Literal["models", "datacenters", "devices"]

__all__ = [
    "DatacenterRow",
    "DeviceRow",
    "ModelEmissionRow",
    "NotFound",
    "TableName",
]


def _require_float(row: Mapping[str, object], key: str, table: str) -> float:
    try:
        value = row[key]
    except KeyError as exc:
        raise ReferenceDataError(f"{table} row is missing '{key}': {row!r}") from exc
    if isinstance(value, bool):
        raise ReferenceDataError(f"{table} row has non-numeric '{key}': {value!r}")
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ReferenceDataError(
            f"{table} row has non-numeric '{key}': {value!r}"
        ) from exc


def _require_str(row: Mapping[str, object], key: str, table: str) -> str:
    value = row.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ReferenceDataError(f"{table} row has no usable '{key}': {row!r}")
    return value.strip()


@dataclass(frozen=True, slots=True)
class ModelEmissionRow:
    """Published training footprint of a foundation model."""

    name: str
    parameter_count_b: float
    total_training_co2_kg: float

    def __post_init__(self) -> None:
        if self.total_training_co2_kg < 0:
            raise ReferenceDataError(
                f"total_training_co2_kg must be non-negative for {self.name}"
            )

    @classmethod
    def from_mapping(cls, row: Mapping[str, object]) -> ModelEmissionRow:
        return cls(
            name=_require_str(row, "name", "models"),
            parameter_count_b=_require_float(row, "parameter_count_b", "models"),
            total_training_co2_kg=_require_float(
                row, "total_training_co2_kg", "models"
            ),
        )


@dataclass(frozen=True, slots=True)
class DatacenterRow:
    """Power and grid characteristics of one provider region."""

    provider: str
    region_name: str
    country: str
    pue: float
    carbon_intensity_g_per_kwh: float

    def __post_init__(self) -> None:
        if self.pue < 1.0:
            raise ReferenceDataError(
                f"PUE must be >= 1 for {self.provider}/{self.region_name}"
            )
        if self.carbon_intensity_g_per_kwh < 0:
            raise ReferenceDataError(
                "carbon_intensity_g_per_kwh must be non-negative for "
                f"{self.provider}/{self.region_name}"
            )

    @property
    def key(self) -> tuple[str, str]:
        return (self.provider, self.region_name)

    @classmethod
    def from_mapping(cls, row: Mapping[str, object]) -> DatacenterRow:
        return cls(
            provider=_require_str(row, "provider", "datacenters"),
            region_name=_require_str(row, "region_name", "datacenters"),
            country=_require_str(row, "country", "datacenters"),
            pue=_require_float(row, "pue", "datacenters"),
            carbon_intensity_g_per_kwh=_require_float(
                row, "carbon_intensity_g_per_kwh", "datacenters"
            ),
        )


@dataclass(frozen=True, slots=True)
class DeviceRow:
    """Power draw and manufacturing footprint of an end-user device type."""

    type: str
    power_watts: float
    embodied_co2_kg: float
    lifetime_years: float

    def __post_init__(self) -> None:
        if self.lifetime_years <= 0:
            raise ReferenceDataError(
                f"lifetime_years must be positive for device {self.type}"
            )

    @property
    def embodied_kg_per_year(self) -> float:
        """Manufacturing footprint amortised per year of device life."""
        return self.embodied_co2_kg / self.lifetime_years

    @classmethod
    def from_mapping(cls, row: Mapping[str, object]) -> DeviceRow:
        return cls(
            type=_require_str(row, "type", "devices"),
            power_watts=_require_float(row, "power_watts", "devices"),
            embodied_co2_kg=_require_float(row, "embodied_co2_kg", "devices"),
            lifetime_years=_require_float(row, "lifetime_years", "devices"),
        )


@dataclass(frozen=True, slots=True)
class NotFound:
    """Explicit lookup miss; calculators treat it as a zero contribution."""

    table: TableName
    key: str
