"""
config.py - Configuration for the Road VCI backend
"""
import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.resolve()
ROADS_CSV_PATH = Path(
    os.environ.get(
        "ROADS_CSV_PATH",
        str(PROJECT_ROOT / "data" / "roads.csv")
    )
)
REPORTS_EXPORT_PATH = Path(
    os.environ.get(
        "REPORTS_EXPORT_PATH",
        str(PROJECT_ROOT / "data" / "road_vci_summary.csv")
    )
)

# Database: PostgreSQL preferred; SQLite for local dev without Postgres
DATABASE_URL = os.environ.get(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{PROJECT_ROOT / 'roads.db'}"
)
# Sync URL for seed/export scripts (SQLAlchemy sync engine)
DATABASE_URL_SYNC = (
    DATABASE_URL
    .replace("sqlite+aiosqlite", "sqlite")
    .replace("postgresql+asyncpg", "postgresql")
)

# Map defaults (used when a client has no roads to fit)
MAP_DEFAULT_LAT = float(os.environ.get("MAP_DEFAULT_LAT", 15.730244072653218))
MAP_DEFAULT_LNG = float(os.environ.get("MAP_DEFAULT_LNG", 120.92988069462204))
MAP_DEFAULT_ZOOM = int(os.environ.get("MAP_DEFAULT_ZOOM", 16))

# API
VCI_API_PORT = int(os.environ.get("VCI_API_PORT", 8002))
CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get(
        "CORS_ORIGINS",
        "http://localhost,http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")
    if o.strip()
]
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
