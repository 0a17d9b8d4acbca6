from .catalog import CATALOGS, SURFACE_TYPES, UnknownSurfaceType, get_catalog
from .calculator import (
    DistressEntry,
    InvalidObservation,
    VCIResult,
    compute_vci,
    compute_vci_linear,
    evaluate,
    parse_observed,
    validate_observed,
)
from .classifier import Band, band_color, classify
from .session import EvaluationSession
from .segments import parse_coordinate, road_segment

__all__ = [
    "CATALOGS",
    "SURFACE_TYPES",
    "UnknownSurfaceType",
    "get_catalog",
    "DistressEntry",
    "InvalidObservation",
    "VCIResult",
    "compute_vci",
    "compute_vci_linear",
    "evaluate",
    "parse_observed",
    "validate_observed",
    "Band",
    "band_color",
    "classify",
    "EvaluationSession",
    "parse_coordinate",
    "road_segment",
]
