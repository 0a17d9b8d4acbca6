"""
schemas.py - Pydantic v2 request models for the Road VCI API
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from vci.catalog import get_catalog, normalize_surface_type
from vci.calculator import validate_observed


class ComputeRequest(BaseModel):
    """Live form payload. Observed values are parsed permissively (junk -> 0)."""

    surface_type: str = Field(
        default="concrete",
        description="Surface type: 'concrete' or 'asphalt'."
    )
    observations: list[Any] | dict[str, Any] = Field(
        default_factory=list,
        description="Raw observed values in catalog order, [{type, observed}] rows, or {type: observed}."
    )

    @field_validator("surface_type")
    @classmethod
    def validate_surface_type(cls, v: str) -> str:
        return normalize_surface_type(v)


class Observation(BaseModel):
    type: str = Field(..., description="Distress type, as named in the surface catalog.")
    observed: float = Field(..., description="Observed magnitude, >= 0.")

    @field_validator("observed", mode="before")
    @classmethod
    def validate_observed_value(cls, v: Any) -> float:
        return validate_observed(v)


class VCISubmission(BaseModel):
    """Strict submission stored against a road."""

    surface_type: str = Field(..., description="Surface type: 'concrete' or 'asphalt'.")
    observations: list[Observation] = Field(default_factory=list)
    user_id: str | None = Field(default=None, description="Submitting user's id (opaque).")
    user_email: str | None = None

    @field_validator("surface_type")
    @classmethod
    def validate_surface_type(cls, v: str) -> str:
        return normalize_surface_type(v)

    @model_validator(mode="after")
    def validate_distress_types(self) -> "VCISubmission":
        known = {name for name, _ in get_catalog(self.surface_type)}
        seen: set[str] = set()
        for obs in self.observations:
            if obs.type not in known:
                raise ValueError(f"'{obs.type}' is not a {self.surface_type} distress type")
            if obs.type in seen:
                raise ValueError(f"duplicate observation for '{obs.type}'")
            seen.add(obs.type)
        return self


class RoadCreate(BaseModel):
    road_name: str = Field(..., min_length=1, max_length=256)
    location: str | None = Field(default=None, max_length=256)
    start: str | None = Field(default=None, description="Start coordinate, 'lat, lng'.")
    end: str | None = Field(default=None, description="End coordinate, 'lat, lng'.")
    grid_annotations: dict[str, Any] | None = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "road_name": "Maharlika Highway - Sta. Rosa",
                "location": "Nueva Ecija",
                "start": "15.730244, 120.929880",
                "end": "15.735110, 120.934702",
            }
        }
    }


class RoadUpdate(BaseModel):
    road_name: str | None = Field(default=None, min_length=1, max_length=256)
    location: str | None = Field(default=None, max_length=256)
    start: str | None = None
    end: str | None = None
    grid_annotations: dict[str, Any] | None = None
