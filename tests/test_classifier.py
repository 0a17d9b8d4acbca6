"""Unit tests for condition band classification"""
import pytest
from vci.classifier import BAND_COLORS, NEUTRAL_COLOR, Band, band_color, classify, legend


@pytest.mark.parametrize(
    "value, expected",
    [
        (100, Band.GOOD),
        (70.0001, Band.GOOD),
        (70.0, Band.FAIR),
        (40.0001, Band.FAIR),
        (40, Band.POOR),
        (20.0001, Band.POOR),
        (20, Band.BAD),
        (1, Band.BAD),
        (0.99, None),
        (0, None),
        (-5, None),
        (100.5, None),
        (float("nan"), None),
    ],
)
def test_classify_numeric_boundaries(value, expected):
    assert classify(value) is expected


def test_classify_category_strings():
    assert classify("GOOD") is Band.GOOD
    assert classify(" fair ") is Band.FAIR
    assert classify("poor") is Band.POOR
    assert classify("Bad") is Band.BAD


def test_classify_numeric_strings():
    assert classify("78.22") is Band.GOOD
    assert classify("15") is Band.BAD


def test_classify_is_total():
    for junk in (None, "", "excellent", "abc", True, [], {}, object()):
        assert classify(junk) is None


def test_band_colors():
    assert band_color(Band.GOOD) == "#10b981"
    assert band_color("bad") == "#ef4444"
    assert band_color(None) == NEUTRAL_COLOR
    assert band_color("unknown") == NEUTRAL_COLOR
    assert set(BAND_COLORS) == set(Band)


def test_band_ordering():
    assert Band.BAD.rank < Band.POOR.rank < Band.FAIR.rank < Band.GOOD.rank
    assert [item["band"] for item in legend()] == ["good", "fair", "poor", "bad"]


def test_band_compares_as_string():
    assert Band.GOOD == "good"
