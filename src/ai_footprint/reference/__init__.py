"""Reference datasets: foundation models, datacenters and end-user devices."""

from __future__ import annotations

from ai_footprint.reference.models import (
    DatacenterRow,
    DeviceRow,
    ModelEmissionRow,
    NotFound,
)
from ai_footprint.reference.store import PROVIDER_LABELS, ReferenceDataStore

__all__ = [
    "DatacenterRow",
    "DeviceRow",
    "ModelEmissionRow",
    "NotFound",
    "PROVIDER_LABELS",
    "ReferenceDataStore",
]
