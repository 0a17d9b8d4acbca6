"""Shared fixtures: point the app at a throwaway SQLite database."""
import os
import tempfile
from pathlib import Path

_DB_DIR = Path(tempfile.mkdtemp(prefix="roadvci-test-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'test.db'}"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine


@pytest.fixture()
def client():
    from config import DATABASE_URL_SYNC
    from main import app
    from models.base import Base
    import models.road_models  # noqa: F401

    engine = create_engine(DATABASE_URL_SYNC)
    Base.metadata.create_all(engine)
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    engine.dispose()

    with TestClient(app) as c:
        yield c
