"""
export_vci_summary.py - Per-road VCI summary from the report history, as CSV
Run from the project root: python -m scripts.export_vci_summary [output.csv]
"""
import logging
import sys
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pandas as pd
from sqlalchemy import create_engine, select

from config import DATABASE_URL_SYNC, REPORTS_EXPORT_PATH

log = logging.getLogger("roadvci.export")

SUMMARY_COLUMNS = [
    "road_id", "road_name", "location", "surface_type",
    "current_vci", "condition", "report_count", "mean_vci", "min_vci",
    "max_vci", "last_report_at",
]


def load_reports(engine) -> pd.DataFrame:
    """Every report joined to its road; roads without reports get one empty row."""
    from models.road_models import Road, VCIReport

    q = (
        select(
            Road.id.label("road_id"),
            Road.road_name,
            Road.location,
            Road.surface_type,
            Road.vci.label("current_vci"),
            VCIReport.vci_value,
            VCIReport.created_at,
        )
        .outerjoin(VCIReport, VCIReport.road_id == Road.id)
    )
    with engine.connect() as conn:
        return pd.read_sql(q, conn)


def build_summary(reports: pd.DataFrame) -> pd.DataFrame:
    """
    One row per road: latest stored VCI and its band, plus count, mean, min
    and max over all submitted reports. Sorted worst condition first.
    """
    from vci.classifier import classify

    if reports.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    keys = ["road_id", "road_name", "location", "surface_type", "current_vci"]
    summary = (
        reports
        .groupby(keys, dropna=False, sort=False)
        .agg(
            report_count=("vci_value", "count"),
            mean_vci=("vci_value", "mean"),
            min_vci=("vci_value", "min"),
            max_vci=("vci_value", "max"),
            last_report_at=("created_at", "max"),
        )
        .reset_index()
    )

    def condition(v):
        band = classify(v) if pd.notna(v) else None
        return band.value if band else None

    summary["condition"] = summary["current_vci"].map(condition)
    summary["mean_vci"] = summary["mean_vci"].round(2)
    return (
        summary[SUMMARY_COLUMNS]
        .sort_values("current_vci", ascending=True, na_position="last")
        .reset_index(drop=True)
    )


def export_summary(summary: pd.DataFrame, path: Path = REPORTS_EXPORT_PATH) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(path, index=False)
    log.info("Summary exported → %s (%d roads)", path, len(summary))
    return path


def run(path: Path = REPORTS_EXPORT_PATH, database_url: str = DATABASE_URL_SYNC) -> Path:
    engine = create_engine(database_url)
    return export_summary(build_summary(load_reports(engine)), path)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    run(Path(sys.argv[1]) if len(sys.argv) > 1 else REPORTS_EXPORT_PATH)
