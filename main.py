"""
main.py - Road VCI API

Visual Condition Index service: distress catalogs and live scoring (/vci),
road register and survey submission (/roads), append-only survey history
(/reports), condition-coloured map segments (/map).

Run: uvicorn main:app --host 0.0.0.0 --port 8002 --reload
"""
from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from config import CORS_ORIGINS, LOG_LEVEL, VCI_API_PORT
from models.base import get_db, init_db
from models.road_models import Road, VCIReport
from vci import CATALOGS, SURFACE_TYPES
from api.vci_routes import router as vci_router
from api.road_routes import router as road_router
from api.report_routes import router as report_router
from api.map_routes import router as map_router

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
)
logger = logging.getLogger("roadvci.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Road VCI API starting; catalogs: %s",
        ", ".join(f"{name} ({len(CATALOGS[name])} distresses)" for name in SURFACE_TYPES),
    )
    await init_db()
    logger.info("Database initialized")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Road VCI API",
    description="Compute Visual Condition Index from distress surveys, manage roads, serve map segments.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(vci_router)
app.include_router(road_router)
app.include_router(report_router)
app.include_router(map_router)


@app.get("/health")
async def health(session: AsyncSession = Depends(get_db)):
    """Liveness plus a row count per table, so an empty database is visible."""
    roads = (await session.execute(select(func.count()).select_from(Road))).scalar_one()
    reports = (await session.execute(select(func.count()).select_from(VCIReport))).scalar_one()
    return {
        "status": "ok",
        "service": "road-vci",
        "surface_types": list(SURFACE_TYPES),
        "roads": roads,
        "reports": reports,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=VCI_API_PORT,
        reload=True,
    )
