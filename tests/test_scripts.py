"""Tests for the seed and export scripts (sync engine, throwaway SQLite)"""
import pandas as pd
import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from config import PROJECT_ROOT
from models.road_models import Road, VCIReport
from scripts.export_vci_summary import SUMMARY_COLUMNS, build_summary, run
from scripts.seed_roads import parse_observations, run_sync

SAMPLE_CSV = PROJECT_ROOT / "data" / "roads.csv"


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'seed.db'}"


def test_parse_observations():
    assert parse_observations("2; 0;;1") == ["2", "0", "", "1"]
    assert parse_observations("") == []
    assert parse_observations(None) == []


def test_seed_roads(db_url):
    assert run_sync(SAMPLE_CSV, db_url) == 4
    # names already present are skipped
    assert run_sync(SAMPLE_CSV, db_url) == 0

    with Session(create_engine(db_url)) as session:
        roads = {r.road_name: r for r in session.execute(select(Road)).scalars()}
        reports = session.execute(select(VCIReport)).scalars().all()

    assert roads["Maharlika Highway - Sta. Rosa"].vci == pytest.approx(78.22, abs=0.01)
    assert roads["Maharlika Highway - Sta. Rosa"].surface_type == "concrete"
    assert roads["Sanctuary Road"].vci is None
    assert len(reports) == 3


def test_seed_missing_csv(tmp_path, db_url):
    assert run_sync(tmp_path / "nope.csv", db_url) == 0


def test_build_summary_worst_first():
    reports = pd.DataFrame(
        [
            {"road_id": "a", "road_name": "A", "location": None, "surface_type": "asphalt",
             "current_vci": 44.0, "vci_value": 60.0, "created_at": "2026-01-01 00:00:00"},
            {"road_id": "a", "road_name": "A", "location": None, "surface_type": "asphalt",
             "current_vci": 44.0, "vci_value": 44.0, "created_at": "2026-02-01 00:00:00"},
            {"road_id": "b", "road_name": "B", "location": None, "surface_type": "concrete",
             "current_vci": 10.0, "vci_value": 10.0, "created_at": "2026-01-15 00:00:00"},
        ]
    )
    summary = build_summary(reports)
    assert list(summary.columns) == SUMMARY_COLUMNS
    assert list(summary["road_id"]) == ["b", "a"]
    a = summary.iloc[1]
    assert a["report_count"] == 2
    assert a["mean_vci"] == 52.0
    assert a["condition"] == "fair"
    assert a["last_report_at"] == "2026-02-01 00:00:00"


def test_build_summary_empty():
    assert build_summary(pd.DataFrame()).empty


def test_export_summary_end_to_end(tmp_path, db_url):
    run_sync(SAMPLE_CSV, db_url)
    out = run(tmp_path / "summary.csv", db_url)

    summary = pd.read_csv(out)
    assert len(summary) == 4
    assert summary.iloc[0]["road_name"] == "Burgos Avenue"
    assert summary.iloc[0]["condition"] == "bad"
    assert summary.iloc[1]["condition"] == "fair"
    last = summary.iloc[-1]
    assert last["road_name"] == "Sanctuary Road"
    assert last["report_count"] == 0
