"""
report_routes.py - VCI submission history (append-only reports)
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import get_db
from models.road_models import Road, VCIReport
from vci.classifier import classify
from vci.tables import REPORT_COLUMNS, describe_columns

router = APIRouter(prefix="/reports", tags=["Reports"])


def _report_dict(report: VCIReport, road_name: str | None = None) -> dict:
    band = classify(report.vci_value)
    return {
        "id": report.id,
        "road_id": report.road_id,
        "road_name": road_name or "Unknown Road",
        "user_id": report.user_id,
        "user_email": report.user_email,
        "vci_value": report.vci_value,
        "condition": band.value if band else None,
        "surface_type": report.surface_type,
        "created_at": report.created_at.isoformat() if report.created_at else None,
    }


async def _list(session: AsyncSession, *where, limit: int = 200, offset: int = 0) -> list[dict]:
    q = (
        select(VCIReport, Road.road_name)
        .outerjoin(Road, Road.id == VCIReport.road_id)
        .where(*where)
        .order_by(VCIReport.created_at.desc())
        .offset(offset)
        .limit(limit)
    )
    r = await session.execute(q)
    return [_report_dict(report, road_name) for report, road_name in r.all()]


@router.get("")
async def list_reports(
    limit: int = Query(200, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db),
):
    """All reports, newest first, with road name."""
    return {
        "columns": describe_columns(REPORT_COLUMNS),
        "items": await _list(session, limit=limit, offset=offset),
    }


@router.get("/road/{road_id}")
async def list_reports_for_road(
    road_id: str,
    session: AsyncSession = Depends(get_db),
):
    return {"road_id": road_id, "items": await _list(session, VCIReport.road_id == road_id)}


@router.get("/user/{user_id}")
async def list_reports_for_user(
    user_id: str,
    session: AsyncSession = Depends(get_db),
):
    return {"user_id": user_id, "items": await _list(session, VCIReport.user_id == user_id)}


@router.delete("/{report_id}", status_code=204)
async def delete_report(
    report_id: str,
    session: AsyncSession = Depends(get_db),
):
    r = await session.execute(select(VCIReport).where(VCIReport.id == report_id))
    report = r.scalar_one_or_none()
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    await session.delete(report)
    await session.commit()
    return Response(status_code=204)
