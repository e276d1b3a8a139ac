"""Tests for reference-table loading."""

import json

import pytest

from ai_footprint.estimation import defaults
from ai_footprint.exceptions import ReferenceDataError


def test_packaged_tables_load():
    store = defaults.load_reference_data()
    assert len(store.model_names()) >= 10
    assert set(store.device_types()) == {"smartphone", "laptop", "desktop", "tablet"}
    assert "Microsoft" in store.providers()


def test_packaged_data_is_cached():
    assert defaults.load_reference_data() is defaults.load_reference_data()


def test_override_directory(tmp_path, monkeypatch):
    (tmp_path / defaults.DEVICES_FILE).write_text(
        json.dumps(
            [{"type": "laptop", "power_watts": 50, "embodied_co2_kg": 400, "lifetime_years": 5}]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("AI_FOOTPRINT_REFERENCE_DIR", str(tmp_path))

    store = defaults.load_reference_data()
    assert store.device_types() == ("laptop",)
    # Tables absent from the override directory come from the package.
    assert "GPT-3" in store.model_names()


def test_missing_override_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        defaults.load_table(defaults.MODELS_FILE, tmp_path / "nope")


@pytest.mark.parametrize("content", ["{not json", '{"name": "GPT-3"}', "[1, 2]"])
def test_malformed_table(tmp_path, content):
    (tmp_path / defaults.MODELS_FILE).write_text(content, encoding="utf-8")
    with pytest.raises(ReferenceDataError):
        defaults.load_table(defaults.MODELS_FILE, tmp_path)


def test_invalid_row_values_are_rejected(tmp_path, monkeypatch):
    (tmp_path / defaults.DATACENTERS_FILE).write_text(
        json.dumps(
            [
                {
                    "provider": "Google",
                    "region_name": "europe-west4",
                    "country": "Nederland",
                    "pue": 0.5,
                    "carbon_intensity_g_per_kwh": 268,
                }
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("AI_FOOTPRINT_REFERENCE_DIR", str(tmp_path))
    with pytest.raises(ReferenceDataError):
        defaults.load_reference_data()
