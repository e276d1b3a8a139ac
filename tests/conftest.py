"""Pytest configuration and fixtures."""

from __future__ import annotations

import asyncio
import inspect
import logging
import os
import sys
from typing import Any

import pytest

# Ensure src/ is on sys.path for tests so the src layout is used during test runs
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from ai_footprint.estimation import defaults as estimation_defaults  # noqa: E402
from ai_footprint.reference import ReferenceDataStore  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "asyncio: mark test as requiring an event loop")


def pytest_pyfunc_call(pyfuncitem: Any) -> bool | None:
    """Execute async test functions without requiring pytest-asyncio."""

    if inspect.iscoroutinefunction(pyfuncitem.obj):
        call_kwargs = {
            name: pyfuncitem.funcargs[name]
            for name in pyfuncitem._fixtureinfo.argnames  # type: ignore[attr-defined]
        }

        event_loop = asyncio.new_event_loop()
        try:
            event_loop.run_until_complete(pyfuncitem.obj(**call_kwargs))
        finally:
            event_loop.close()
        return True
    return None


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep host environment overrides out of tests and reset cached tables."""

    for name in list(os.environ):
        if name.startswith("AI_FOOTPRINT_"):
            monkeypatch.delenv(name, raising=False)
    estimation_defaults.load_reference_data.cache_clear()
    yield
    estimation_defaults.load_reference_data.cache_clear()
    package_logger = logging.getLogger("ai_footprint")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def reference() -> ReferenceDataStore:
    """Small, hand-written reference tables independent of packaged data."""

    return ReferenceDataStore.from_mappings(
        models=[
            {"name": "GPT-3", "parameter_count_b": 175, "total_training_co2_kg": 552000},
            {"name": "BLOOM", "parameter_count_b": 176, "total_training_co2_kg": 24700},
        ],
        datacenters=[
            {
                "provider": "Microsoft",
                "region_name": "West Europe",
                "country": "Nederland",
                "pue": 1.2,
                "carbon_intensity_g_per_kwh": 300,
            },
            {
                "provider": "Google",
                "region_name": "europe-west4",
                "country": "Nederland",
                "pue": 1.1,
                "carbon_intensity_g_per_kwh": 268,
            },
            {
                "provider": "Microsoft",
                "region_name": "North Europe",
                "country": "Ierland",
                "pue": 1.18,
                "carbon_intensity_g_per_kwh": 290,
            },
        ],
        devices=[
            {"type": "smartphone", "power_watts": 1, "embodied_co2_kg": 86.6, "lifetime_years": 3},
            {"type": "laptop", "power_watts": 75, "embodied_co2_kg": 522.6, "lifetime_years": 4},
            {"type": "desktop", "power_watts": 175, "embodied_co2_kg": 1273.4, "lifetime_years": 5},
            {"type": "tablet", "power_watts": 7.5, "embodied_co2_kg": 110.1, "lifetime_years": 4},
        ],
    )


@pytest.fixture
def scenario() -> dict[str, object]:
    """Raw form values for a municipal chatbot, as the wizard collects them."""

    return {
        "training": {"modelType": "preloaded", "selectedModel": "gpt-3"},
        "inference": {
            "location": "cloud",
            "provider": "azure",
            "region": "West Europe",
            "task": "text-generation",
            "inferencesPerYear": "1000000",
            "inferenceDuration": "5",
        },
        "devices": {
            "devices": {
                "smartphone": {"count": "1000", "duration": "5", "sessions": "300"},
                "laptop": {"count": "200", "duration": "10", "sessions": "100"},
            }
        },
        "network": {"dataAmount": "150", "dataUnit": "kB"},
        "hosting": {
            "isOnline": True,
            "annualVisits": "100000",
            "hostingType": "cloud",
            "cloudProvider": "azure",
            "region": "West Europe",
            "url": "https://chat.gemeente.example",
        },
    }
