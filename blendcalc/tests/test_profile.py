import pytest

from blendcalc.core.profile import classify_profile


@pytest.mark.parametrize(
    "weight, key",
    [
        (100, "aggressive_growth"),
        (80, "aggressive_growth"),
        (79, "aggressive_balance"),
        (60, "aggressive_balance"),
        (59, "neutral_balance"),
        (40, "neutral_balance"),
        (39, "stable_dividend"),
        (0, "stable_dividend"),
    ],
)
def test_profile_thresholds(weight, key):
    assert classify_profile(weight).key == key
