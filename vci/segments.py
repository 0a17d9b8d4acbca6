"""
segments.py - Map-ready road segments: coordinates, midpoint, condition colour
"""
import math
from typing import Any, Mapping

from .classifier import band_color, classify


def parse_coordinate(text: Any) -> tuple[float, float] | None:
    """Parse "lat, lng". Returns None for missing, unparseable or out-of-range input."""
    if not text or not isinstance(text, str):
        return None
    parts = text.split(",")
    if len(parts) < 2:
        return None
    try:
        lat, lng = float(parts[0].strip()), float(parts[1].strip())
    except ValueError:
        return None
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return None
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        return None
    return lat, lng


def midpoint(start: tuple[float, float], end: tuple[float, float]) -> tuple[float, float]:
    return (start[0] + end[0]) / 2, (start[1] + end[1]) / 2


def road_segment(road: Mapping[str, Any]) -> dict[str, Any] | None:
    """
    Straight start→end segment for a road, coloured by its VCI band.
    None when either endpoint is invalid.
    """
    start = parse_coordinate(road.get("start"))
    end = parse_coordinate(road.get("end"))
    if start is None or end is None:
        return None

    vci = road.get("vci")
    status = classify(vci) if vci is not None else None
    mid = midpoint(start, end)
    return {
        "id": road.get("id"),
        "road_name": road.get("road_name") or "Unnamed Road",
        "location": road.get("location"),
        "surface_type": road.get("surface_type"),
        "vci": vci,
        "status": status.value if status else None,
        "color": band_color(status),
        "path": [
            {"lat": start[0], "lng": start[1]},
            {"lat": end[0], "lng": end[1]},
        ],
        "midpoint": {"lat": mid[0], "lng": mid[1]},
    }
