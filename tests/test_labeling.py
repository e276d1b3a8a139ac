"""Tests for energy-label classification."""

import pytest
from hypothesis import given, strategies as st

from ai_footprint.carbon_models import Label
from ai_footprint.estimation.labeling import (
    LABEL_THRESHOLDS_KG,
    derive_label,
    label_bounds,
)


@pytest.mark.parametrize(
    "total_kg, expected",
    [
        (0.0, Label.A),
        (10_000.0, Label.A),
        (10_000.01, Label.B),
        (20_000.0, Label.B),
        (39_999.0, Label.C),
        (80_000.0, Label.D),
        (150_000.0, Label.E),
        (320_000.0, Label.F),
        (320_000.5, Label.G),
        (552_000.0, Label.G),
    ],
)
def test_label_thresholds(total_kg, expected):
    assert derive_label(total_kg) is expected


def test_negative_total_gets_best_label():
    assert derive_label(-1.0) is Label.A


def test_thresholds_double_each_step():
    uppers = [upper for _, upper in LABEL_THRESHOLDS_KG]
    assert all(b == 2 * a for a, b in zip(uppers, uppers[1:]))


def test_label_bounds():
    assert label_bounds(Label.A) == (0.0, 10_000.0)
    assert label_bounds(Label.C) == (20_000.0, 40_000.0)
    assert label_bounds(Label.G) == (320_000.0, None)


def test_labels_are_ordered():
    assert Label.A < Label.B < Label.G
    assert max(Label) is Label.G


@given(
    st.floats(min_value=0, max_value=1e9, allow_nan=False),
    st.floats(min_value=0, max_value=1e9, allow_nan=False),
)
def test_label_is_monotonic(a, b):
    low, high = sorted((a, b))
    assert derive_label(low) <= derive_label(high)
