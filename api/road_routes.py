"""
road_routes.py - Roads CRUD and VCI submission
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import get_db
from models.road_models import Road, VCIReport
from vci.calculator import evaluate
from vci.classifier import band_color, classify
from vci.tables import ROAD_COLUMNS, describe_columns, filter_rows, format_cell_value, paginate, sort_rows
from api.schemas import RoadCreate, RoadUpdate, VCISubmission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roads", tags=["Roads"])

SEARCH_KEYS = ("id", "road_name", "location", "surface_type", "condition")


def road_to_dict(road: Road) -> dict:
    band = classify(road.vci) if road.vci is not None else None
    return {
        "id": road.id,
        "road_name": road.road_name,
        "location": road.location,
        "start": road.start,
        "end": road.end,
        "vci": road.vci,
        "condition": band.value if band else None,
        "color": band_color(band),
        "surface_type": road.surface_type,
        "grid_annotations": road.grid_annotations,
        "created_at": road.created_at.isoformat() if road.created_at else None,
        "updated_at": road.updated_at.isoformat() if road.updated_at else None,
    }


async def _get_road_or_404(session: AsyncSession, road_id: str) -> Road:
    r = await session.execute(select(Road).where(Road.id == road_id))
    road = r.scalar_one_or_none()
    if not road:
        raise HTTPException(status_code=404, detail="Road not found")
    return road


@router.get("")
async def list_roads(
    q: str | None = Query(None, description="Search name, location, id, surface or condition"),
    sort: str | None = Query(None, description="Column key to sort by"),
    descending: bool = Query(False),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    formatted: bool = Query(False, description="Return display strings instead of raw values"),
    session: AsyncSession = Depends(get_db),
):
    """List roads for the admin table with search, sort and pagination."""
    if sort and sort not in {c.key for c in ROAD_COLUMNS}:
        raise HTTPException(status_code=400, detail=f"Cannot sort by '{sort}'")

    r = await session.execute(select(Road).order_by(Road.road_name))
    rows = [road_to_dict(road) for road in r.scalars().all()]
    rows = sort_rows(filter_rows(rows, q, SEARCH_KEYS), sort, descending)
    page = paginate(rows, limit, offset)
    if formatted:
        page = [{c.key: format_cell_value(row.get(c.key)) for c in ROAD_COLUMNS} for row in page]

    return {
        "columns": describe_columns(ROAD_COLUMNS),
        "total": len(rows),
        "items": page,
    }


@router.get("/{road_id}")
async def get_road(
    road_id: str,
    session: AsyncSession = Depends(get_db),
):
    return road_to_dict(await _get_road_or_404(session, road_id))


@router.post("", status_code=201)
async def create_road(
    body: RoadCreate,
    session: AsyncSession = Depends(get_db),
):
    road = Road(**body.model_dump())
    session.add(road)
    await session.commit()
    await session.refresh(road)
    logger.info("Road created: %s (%s)", road.road_name, road.id)
    return road_to_dict(road)


@router.patch("/{road_id}")
async def update_road(
    road_id: str,
    body: RoadUpdate,
    session: AsyncSession = Depends(get_db),
):
    road = await _get_road_or_404(session, road_id)
    updates = body.model_dump(exclude_unset=True)
    if "road_name" in updates and updates["road_name"] is None:
        raise HTTPException(status_code=422, detail="road_name cannot be null")
    for key, value in updates.items():
        setattr(road, key, value)
    await session.commit()
    await session.refresh(road)
    logger.info("Road updated: %s fields=%s", road_id, sorted(updates))
    return road_to_dict(road)


@router.delete("/{road_id}", status_code=204)
async def delete_road(
    road_id: str,
    session: AsyncSession = Depends(get_db),
):
    road = await _get_road_or_404(session, road_id)
    await session.execute(delete(VCIReport).where(VCIReport.road_id == road_id))
    await session.delete(road)
    await session.commit()
    logger.info("Road deleted: %s", road_id)
    return Response(status_code=204)


@router.post("/{road_id}/vci", status_code=201)
async def submit_vci(
    road_id: str,
    body: VCISubmission,
    session: AsyncSession = Depends(get_db),
):
    """
    Recompute VCI from the submitted observations, store it on the road and
    append a report. Rejected when no distress value was entered.
    """
    road = await _get_road_or_404(session, road_id)
    if not any(obs.observed > 0 for obs in body.observations):
        raise HTTPException(
            status_code=422,
            detail="Please enter some distress values before saving.",
        )

    result = evaluate(body.surface_type, {obs.type: obs.observed for obs in body.observations})
    road.vci = result.vci
    road.surface_type = body.surface_type

    report = VCIReport(
        road_id=road_id,
        user_id=body.user_id,
        user_email=body.user_email,
        vci_value=result.vci,
        surface_type=body.surface_type,
    )
    session.add(report)
    await session.commit()
    await session.refresh(road)
    await session.refresh(report)

    band = classify(result.vci)
    logger.info("VCI %.2f (%s) saved for road %s", result.vci, band.value if band else "unclassified", road_id)
    return {
        "road": road_to_dict(road),
        "report_id": report.id,
        "total_sdwf": result.total_sdwf,
        "vci": result.vci,
        "band": band.value if band else None,
    }
