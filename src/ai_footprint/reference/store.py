"""Immutable, loaded-once lookup over the three reference tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Final

from ai_footprint.exceptions import ReferenceDataError
from ai_footprint.reference.models import (
    DatacenterRow,
    DeviceRow,
    ModelEmissionRow,
    NotFound,
)

LOGGER = logging.getLogger(__name__)

__all__ = ["PROVIDER_LABELS", "ReferenceDataStore"]

# Short provider codes used by the input forms, mapped to table labels.
PROVIDER_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "azure": "Microsoft",
        "gcp": "Google",
        "aws": "AWS",
        "ibm": "IBM",
        "irm": "Iron Mountain",
        "meta": "Meta",
        "oracle": "Oracle",
        "sap": "SAP",
        "equ": "Equinix",
        "dgr": "Digital Realty",
    }
)


def _model_key(name: str) -> str:
    return name.strip().lower()


class ReferenceDataStore:
    """Read-only access to model, datacenter and device reference rows.

    The store is built once at start-up and handed to every calculator call.
    Lookups never raise for unknown keys; they return :class:`NotFound`.

    Raises:
        ReferenceDataError: If any table contains duplicate keys.
    """

    __slots__ = ("_models", "_datacenters", "_devices")

    def __init__(
        self,
        models: Iterable[ModelEmissionRow] = (),
        datacenters: Iterable[DatacenterRow] = (),
        devices: Iterable[DeviceRow] = (),
    ) -> None:
        model_index: dict[str, ModelEmissionRow] = {}
        for row in models:
            key = _model_key(row.name)
            if key in model_index:
                raise ReferenceDataError(f"Duplicate foundation model: {row.name!r}")
            model_index[key] = row

        seen_regions: set[tuple[str, str]] = set()
        datacenter_rows: list[DatacenterRow] = []
        for dc in datacenters:
            if dc.key in seen_regions:
                raise ReferenceDataError(
                    f"Duplicate datacenter: {dc.provider!r}/{dc.region_name!r}"
                )
            seen_regions.add(dc.key)
            datacenter_rows.append(dc)

        device_index: dict[str, DeviceRow] = {}
        for device in devices:
            if device.type in device_index:
                raise ReferenceDataError(f"Duplicate device type: {device.type!r}")
            device_index[device.type] = device

        self._models: Mapping[str, ModelEmissionRow] = MappingProxyType(model_index)
        self._datacenters: tuple[DatacenterRow, ...] = tuple(datacenter_rows)
        self._devices: Mapping[str, DeviceRow] = MappingProxyType(device_index)

    @classmethod
    def from_mappings(
        cls,
        *,
        models: Iterable[Mapping[str, object]] = (),
        datacenters: Iterable[Mapping[str, object]] = (),
        devices: Iterable[Mapping[str, object]] = (),
    ) -> ReferenceDataStore:
        """Build a store from raw JSON-style rows, validating each one."""

        return cls(
            models=[ModelEmissionRow.from_mapping(row) for row in models],
            datacenters=[DatacenterRow.from_mapping(row) for row in datacenters],
            devices=[DeviceRow.from_mapping(row) for row in devices],
        )

    def lookup_model(self, name: str | None) -> ModelEmissionRow | NotFound:
        """Return the model row matching ``name`` case-insensitively."""

        key = _model_key(name or "")
        row = self._models.get(key)
        if row is None:
            LOGGER.debug("Foundation model not found", extra={"model": name})
            return NotFound("models", name or "")
        return row

    def lookup_datacenters(self, provider: str | None) -> tuple[DatacenterRow, ...]:
        """Return all regions of ``provider`` in table order.

        ``provider`` may be the table label (``"Microsoft"``) or the short
        form code (``"azure"``).
        """

        label = self.resolve_provider(provider)
        if label is None:
            return ()
        return tuple(dc for dc in self._datacenters if dc.provider == label)

    def lookup_datacenter(
        self, provider: str | None, region_name: str | None
    ) -> DatacenterRow | NotFound:
        """Resolve a single provider region to its PUE and grid intensity."""

        for dc in self.lookup_datacenters(provider):
            if dc.region_name == region_name:
                return dc
        LOGGER.debug(
            "Datacenter region not found",
            extra={"provider": provider, "region": region_name},
        )
        return NotFound("datacenters", f"{provider}/{region_name}")

    def lookup_device(self, device_type: str | None) -> DeviceRow | NotFound:
        """Return the device profile for ``device_type``."""

        row = self._devices.get(device_type or "")
        if row is None:
            LOGGER.debug("Device type not found", extra={"device_type": device_type})
            return NotFound("devices", device_type or "")
        return row

    def resolve_provider(self, provider: str | None) -> str | None:
        """Map a provider code or label to the label used in the table."""

        if not provider:
            return None
        return PROVIDER_LABELS.get(provider, provider)

    def model_names(self) -> tuple[str, ...]:
        return tuple(row.name for row in self._models.values())

    def providers(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(dc.provider for dc in self._datacenters))

    def device_types(self) -> tuple[str, ...]:
        return tuple(self._devices)

    def __repr__(self) -> str:
        return (
            f"ReferenceDataStore(models={len(self._models)}, "
            f"datacenters={len(self._datacenters)}, devices={len(self._devices)})"
        )
