"""
map_routes.py - Road segments coloured by condition, for the map view
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from config import MAP_DEFAULT_LAT, MAP_DEFAULT_LNG, MAP_DEFAULT_ZOOM
from models.base import get_db
from models.road_models import Road
from vci.classifier import legend
from vci.segments import road_segment
from api.road_routes import road_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/map", tags=["Map"])


@router.get("/segments")
async def list_segments(
    session: AsyncSession = Depends(get_db),
):
    """One straight segment per road with valid start/end coordinates."""
    r = await session.execute(select(Road))
    segments = []
    skipped = 0
    for road in r.scalars().all():
        segment = road_segment(road_to_dict(road))
        if segment is None:
            logger.warning("Invalid coordinates for road %s (%s)", road.id, road.road_name)
            skipped += 1
            continue
        segments.append(segment)

    return {
        "center": {"lat": MAP_DEFAULT_LAT, "lng": MAP_DEFAULT_LNG},
        "zoom": MAP_DEFAULT_ZOOM,
        "legend": legend(),
        "segments": segments,
        "skipped": skipped,
    }


@router.get("/segments/{road_id}")
async def get_segment(
    road_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Segment for one road, e.g. to zoom to its midpoint."""
    r = await session.execute(select(Road).where(Road.id == road_id))
    road = r.scalar_one_or_none()
    if not road:
        raise HTTPException(status_code=404, detail="Road not found")
    segment = road_segment(road_to_dict(road))
    if segment is None:
        raise HTTPException(status_code=422, detail="Road has invalid coordinates")
    return segment
