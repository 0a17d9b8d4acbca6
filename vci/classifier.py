"""
classifier.py - Condition bands over VCI for map segments and table cells
"""
import math
from enum import Enum
from typing import Any


class Band(str, Enum):
    BAD = "bad"
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"

    @property
    def rank(self) -> int:
        return _RANK[self]

    @property
    def color(self) -> str:
        return BAND_COLORS[self]


_RANK = {Band.BAD: 0, Band.POOR: 1, Band.FAIR: 2, Band.GOOD: 3}

BAND_COLORS: dict[Band, str] = {
    Band.GOOD: "#10b981",  # green-500
    Band.FAIR: "#f59e0b",  # amber-500
    Band.POOR: "#f97316",  # orange-500
    Band.BAD: "#ef4444",   # red-500
}
NEUTRAL_COLOR = "#3b82f6"  # blue-500, unclassified

# (band, lower, lower_inclusive, upper) checked in order; upper is inclusive
_BOUNDS = (
    (Band.GOOD, 70.0, False, 100.0),
    (Band.FAIR, 40.0, False, 70.0),
    (Band.POOR, 20.0, False, 40.0),
    (Band.BAD, 1.0, True, 20.0),
)


def classify(value: Any) -> Band | None:
    """
    Map a VCI number, numeric string or category name to a Band.
    Returns None for anything outside the bands; never raises.
    """
    if isinstance(value, Band):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        try:
            return Band(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    else:
        return None

    if math.isnan(number):
        return None
    for band, lower, lower_inclusive, upper in _BOUNDS:
        above = number >= lower if lower_inclusive else number > lower
        if above and number <= upper:
            return band
    return None


def band_color(band: Band | str | None) -> str:
    if band is None:
        return NEUTRAL_COLOR
    try:
        return BAND_COLORS[Band(band)]
    except ValueError:
        return NEUTRAL_COLOR


def legend() -> list[dict[str, str]]:
    """Bands best-first with their colours, as drawn in the map legend."""
    return [
        {"band": band.value, "label": band.value.capitalize(), "color": band.color}
        for band in sorted(Band, key=lambda b: b.rank, reverse=True)
    ]
