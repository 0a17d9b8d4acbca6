"""
catalog.py - Distress catalogs (distress type -> weight factor) per surface type
"""
from typing import Literal, cast

SurfaceType = Literal["concrete", "asphalt"]

CONCRETE_DISTRESSES: tuple[tuple[str, float], ...] = (
    ("Cracking - Multiple Narrow", 3.6),
    ("Cracking - Transverse Wide", 5.5),
    ("Cracking - Transverse Narrow", 3.5),
    ("Spalling (severity)", 3),
    ("Faulting (average)", 4.2),
    ("Shattered Slabs (number)", 1.36),
    ("Scaling - Severe", 1.2),
    ("Scaling - Minor", 0.55),
    ("Joint Sealant Deterioration", 0.13),
)

ASPHALT_DISTRESSES: tuple[tuple[str, float], ...] = (
    ("Cracking - Crocodile Narrow", 3.5),
    ("Cracking - Crocodile Wide", 5.9),
    ("Cracking - Transverse Wide", 5.5),
    ("Cracking - Transverse Narrow", 3.3),
    ("Edge Break (Large)", 1.25),
    ("Edge Break (Medium)", 0.82),
    ("Edge Break (Small)", 0.41),
    ("Patching", 1.25),
    ("Potholes (Number)", 0.36),
    ("Surface Failures", 0.18),
    ("Rutting (RDM)", 4),
    ("Wearing Surface - Minor", 0.55),
    ("Wearing Surface - Severe", 1.2),
)

CATALOGS: dict[str, tuple[tuple[str, float], ...]] = {
    "concrete": CONCRETE_DISTRESSES,
    "asphalt": ASPHALT_DISTRESSES,
}

SURFACE_TYPES: tuple[str, ...] = tuple(CATALOGS)


class UnknownSurfaceType(ValueError):
    """Raised when a surface type has no distress catalog."""


def get_catalog(surface_type: str) -> tuple[tuple[str, float], ...]:
    """Return the (type, weight) template for a surface type."""
    key = (surface_type or "").strip().lower()
    try:
        return CATALOGS[key]
    except KeyError:
        raise UnknownSurfaceType(
            f"surface_type must be one of {list(SURFACE_TYPES)}, got '{surface_type}'"
        ) from None


def normalize_surface_type(surface_type: str) -> SurfaceType:
    """Canonical lowercase surface name; raises UnknownSurfaceType like get_catalog."""
    get_catalog(surface_type)
    return cast(SurfaceType, surface_type.strip().lower())
