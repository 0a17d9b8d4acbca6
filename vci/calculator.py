"""
calculator.py - Visual Condition Index (VCI) from weighted distress observations

    weighted   = round(observed × weight, 2)        per entry, before summing
    total_sdwf = Σ weighted
    x          = (100 - min(300, total_sdwf) / 3) / 100
    vci        = max(0, 100 × (1 - √(1 - x²)))

0 deducts → VCI 100 (best), ≥300 deducts → VCI 0 (worst).
"""
import math
import re
import sys
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Mapping, Sequence

from .catalog import get_catalog

SDWF_CAP = 300.0
LINEAR_DIVISOR = 4.3

_FLOAT_MAX = sys.float_info.max
_EXACT_INTEGER_FLOAT = 2.0 ** 52

# Leading decimal literal, same prefix a browser number field would accept
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class InvalidObservation(ValueError):
    """Raised by the strict ingestion path for blank, negative or non-numeric values."""


@dataclass
class DistressEntry:
    type: str
    weight: float
    observed: Any = ""

    @property
    def weighted(self) -> float:
        return round_weighted(parse_observed(self.observed) * self.weight)


@dataclass(frozen=True)
class VCIResult:
    total_sdwf: float
    vci: float
    rows: tuple[DistressEntry, ...] = field(default=(), compare=False)


def parse_observed(value: Any) -> float:
    """
    Permissive parse of a form value. Blank, unparseable and non-finite input
    is 0.0; never raises.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMERIC_PREFIX.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(0))
    if not math.isfinite(number):
        return 0.0
    return number


def validate_observed(value: Any) -> float:
    """Strict parse for externally ingested observations."""
    if value is None or isinstance(value, bool):
        raise InvalidObservation(f"observed value must be a number, got {value!r}")
    if isinstance(value, str):
        if not value.strip():
            raise InvalidObservation("observed value is blank")
        try:
            number = float(value)
        except ValueError:
            raise InvalidObservation(f"observed value is not numeric: {value!r}") from None
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        raise InvalidObservation(f"observed value must be a number, got {value!r}")
    if not math.isfinite(number):
        raise InvalidObservation(f"observed value must be finite, got {value!r}")
    if number < 0:
        raise InvalidObservation(f"observed value must be >= 0, got {number}")
    return number


def round_weighted(value: float) -> float:
    """
    Round half away from zero to 2 dp on the exact binary value.

    Overflowed products saturate at the largest finite float. Floats at or
    above 2**52 have no fractional part and are returned as-is.
    """
    if not math.isfinite(value):
        return math.copysign(_FLOAT_MAX, value)
    if abs(value) >= _EXACT_INTEGER_FLOAT:
        return value
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def vci_from_sdwf(sdwf: float) -> float:
    clamped = min(SDWF_CAP, sdwf)
    x = (100 - clamped / 3) / 100
    radicand = max(0.0, 1 - x ** 2)
    vci = 100 * (1 - math.sqrt(radicand))
    return min(100.0, max(0.0, vci))


def total_sdwf(rows: Iterable[DistressEntry]) -> float:
    # Plain left-to-right float accumulation; sum() compensates on 3.12+
    total = 0.0
    for row in rows:
        total = min(_FLOAT_MAX, max(-_FLOAT_MAX, total + row.weighted))
    return total


def compute_vci(entries: Iterable[DistressEntry]) -> VCIResult:
    """Sum per-entry rounded weighted values and transform to a 0-100 index."""
    rows = tuple(entries)
    total = total_sdwf(rows)
    return VCIResult(total_sdwf=total, vci=vci_from_sdwf(total), rows=rows)


def compute_vci_linear(entries: Iterable[DistressEntry]) -> float:
    """
    Earlier linear rendition: total_sdwf / 4.3, unclamped and unbanded.
    Kept for comparison only; compute_vci is the formula in use.
    """
    return total_sdwf(entries) / LINEAR_DIVISOR


def build_entries(
    surface_type: str,
    observations: Sequence[Any] | Mapping[str, Any] = (),
) -> list[DistressEntry]:
    """
    Lay observations over a surface catalog in template order.

    observations may be positional raw values, {type, observed} dicts, or a
    {type: observed} mapping. Rows without an observation stay blank.
    """
    template = get_catalog(surface_type)
    if isinstance(observations, Mapping):
        by_type = dict(observations)
    elif observations and all(isinstance(o, Mapping) for o in observations):
        # rows naming no catalog type cannot match a template row
        by_type = {
            o["type"]: o.get("observed", "")
            for o in observations
            if isinstance(o.get("type"), str)
        }
    else:
        positional = list(observations)
        return [
            DistressEntry(type=name, weight=weight, observed=positional[i] if i < len(positional) else "")
            for i, (name, weight) in enumerate(template)
        ]
    return [
        DistressEntry(type=name, weight=weight, observed=by_type.get(name, ""))
        for name, weight in template
    ]


def evaluate(
    surface_type: str,
    observations: Sequence[Any] | Mapping[str, Any] = (),
) -> VCIResult:
    return compute_vci(build_entries(surface_type, observations))
