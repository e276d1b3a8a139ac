"""Default data loaders for the reference tables.

The module centralises disk/resource access for the foundation-model,
datacenter and device tables. Tables are read once per process; the
resulting :class:`~ai_footprint.reference.ReferenceDataStore` is immutable
and is passed explicitly into every calculator.
"""

from __future__ import annotations

import json
import logging
import pathlib
from functools import lru_cache
from importlib import resources
from typing import Final

from ai_footprint.exceptions import ReferenceDataError
from ai_footprint.reference import ReferenceDataStore
from ai_footprint.settings import get_settings

LOGGER = logging.getLogger(__name__)

MODELS_FILE: Final[str] = "foundation_models.json"
DATACENTERS_FILE: Final[str] = "datacenters.json"
DEVICES_FILE: Final[str] = "devices.json"

__all__ = [
    "DATACENTERS_FILE",
    "DEVICES_FILE",
    "MODELS_FILE",
    "load_reference_data",
    "load_table",
]


def _parse_rows(text: str, source: str) -> list[dict[str, object]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReferenceDataError(f"Failed to parse reference table {source}") from exc
    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise ReferenceDataError(f"Reference table {source} must be a list of objects")
    return data


def load_table(
    filename: str, override_dir: str | pathlib.Path | None = None
) -> list[dict[str, object]]:
    """Load one reference table as a list of raw rows.

    Args:
        filename: Table file name, e.g. ``"devices.json"``.
        override_dir: Optional directory checked before the packaged data.

    Returns:
        Raw rows in file order.

    Raises:
        FileNotFoundError: If ``override_dir`` itself does not exist.
        ReferenceDataError: If the table is not a JSON list of objects.
    """

    if override_dir is not None:
        directory = pathlib.Path(override_dir)
        if not directory.is_dir():
            raise FileNotFoundError(f"AI_FOOTPRINT_REFERENCE_DIR not found: {directory}")
        candidate = directory / filename
        if candidate.exists():
            LOGGER.info(
                "Loading reference table override",
                extra={"table": filename, "path": str(candidate)},
            )
            return _parse_rows(candidate.read_text(encoding="utf-8"), str(candidate))

    text = resources.files("ai_footprint.data").joinpath(filename).read_text(
        encoding="utf-8"
    )
    return _parse_rows(text, filename)


@lru_cache(maxsize=1)
def load_reference_data() -> ReferenceDataStore:
    """Load the three reference tables into an immutable store.

    Returns:
        Store built from packaged tables, or from the directory named by
        ``AI_FOOTPRINT_REFERENCE_DIR`` when set.
    """

    settings = get_settings()
    override_dir = settings.reference_dir
    store = ReferenceDataStore.from_mappings(
        models=load_table(MODELS_FILE, override_dir),
        datacenters=load_table(DATACENTERS_FILE, override_dir),
        devices=load_table(DEVICES_FILE, override_dir),
    )
    LOGGER.debug("Reference data loaded", extra={"store": repr(store)})
    return store
