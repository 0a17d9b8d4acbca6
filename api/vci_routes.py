"""
vci_routes.py - Distress catalogs, live VCI computation, classification
"""
from fastapi import APIRouter, HTTPException, Query

from vci.catalog import CATALOGS, UnknownSurfaceType, get_catalog
from vci.calculator import build_entries, compute_vci
from vci.classifier import band_color, classify, legend
from api.schemas import ComputeRequest

router = APIRouter(prefix="/vci", tags=["VCI"])


def _catalog_rows(surface_type: str) -> list[dict]:
    return [{"type": name, "weight": weight} for name, weight in get_catalog(surface_type)]


@router.get("/catalogs")
async def list_catalogs():
    return {surface: _catalog_rows(surface) for surface in CATALOGS}


@router.get("/catalogs/{surface_type}")
async def get_surface_catalog(surface_type: str):
    try:
        rows = _catalog_rows(surface_type)
    except UnknownSurfaceType as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"surface_type": surface_type.strip().lower(), "distresses": rows}


@router.post("/compute")
async def compute(body: ComputeRequest):
    """
    Recompute the form on every edit. Blank or unparseable observed values
    count as 0; this endpoint never rejects a value.
    """
    result = compute_vci(build_entries(body.surface_type, body.observations))
    band = classify(result.vci)
    return {
        "surface_type": body.surface_type,
        "rows": [
            {
                "type": row.type,
                "weight": row.weight,
                "observed": row.observed,
                "weighted": row.weighted,
            }
            for row in result.rows
        ],
        "total_sdwf": result.total_sdwf,
        "vci": result.vci,
        "band": band.value if band else None,
        "color": band_color(band),
    }


@router.get("/classify")
async def classify_value(value: str = Query(..., description="VCI number or category name")):
    band = classify(value)
    return {
        "value": value,
        "band": band.value if band else None,
        "color": band_color(band),
    }


@router.get("/legend")
async def get_legend():
    return {"items": legend()}
