"""
session.py - Working copy of a distress catalog for one inspection form
"""
from typing import Any

from .catalog import SurfaceType, get_catalog, normalize_surface_type
from .calculator import DistressEntry, VCIResult, compute_vci
from .classifier import Band, classify


class EvaluationSession:
    """
    One live evaluation: the active surface type and its editable rows.

    Switching surface discards every observed value and reloads the new
    catalog template; there is no other state.
    """

    def __init__(self, surface_type: str = "concrete"):
        self.surface_type: SurfaceType = normalize_surface_type(surface_type)
        self.rows: list[DistressEntry] = _template_rows(self.surface_type)

    def set_observed(self, index: int, value: Any) -> DistressEntry:
        row = self.rows[index]
        row.observed = value
        return row

    def switch_surface(self, surface_type: str) -> None:
        self.surface_type = normalize_surface_type(surface_type)
        self.rows = _template_rows(self.surface_type)

    def result(self) -> VCIResult:
        return compute_vci(self.rows)

    def band(self) -> Band | None:
        return classify(self.result().vci)


def _template_rows(surface_type: str) -> list[DistressEntry]:
    return [DistressEntry(type=name, weight=weight) for name, weight in get_catalog(surface_type)]
