"""
seed_roads.py - Seed roads (and optional initial VCI surveys) from data/roads.csv
Run from the project root: python -m scripts.seed_roads

CSV columns: road_name, location, start, end, surface_type, observations
observations is optional: ';'-separated observed values in catalog order.
"""
import csv
import logging
import sys
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from config import DATABASE_URL_SYNC, ROADS_CSV_PATH

logger = logging.getLogger("roadvci.seed")


def parse_observations(val: str | None) -> list[str]:
    if not val:
        return []
    return [v.strip() for v in val.split(";")]


def run_sync(csv_path: Path = ROADS_CSV_PATH, database_url: str = DATABASE_URL_SYNC) -> int:
    """Insert roads that are not already present by name. Returns rows added."""
    from models.base import Base
    from models.road_models import Road, VCIReport
    from vci.catalog import UnknownSurfaceType, normalize_surface_type
    from vci.calculator import evaluate

    engine = create_engine(database_url)
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)

    if not csv_path.exists():
        logger.error("CSV not found: %s", csv_path)
        return 0

    added = 0
    with Session() as session, open(csv_path, encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for i, row in enumerate(reader, start=2):
            road_name = (row.get("road_name") or "").strip()
            if not road_name:
                continue

            existing = session.execute(
                select(Road).where(Road.road_name == road_name)
            ).scalar_one_or_none()
            if existing:
                continue

            road = Road(
                road_name=road_name,
                location=(row.get("location") or "").strip() or None,
                start=(row.get("start") or "").strip() or None,
                end=(row.get("end") or "").strip() or None,
            )
            session.add(road)
            session.flush()
            added += 1

            observations = parse_observations(row.get("observations"))
            surface = (row.get("surface_type") or "").strip()
            if not observations or not surface:
                continue
            try:
                surface = normalize_surface_type(surface)
            except UnknownSurfaceType as e:
                logger.warning("Line %d: %s; road seeded without VCI", i, e)
                continue

            result = evaluate(surface, observations)
            road.vci = result.vci
            road.surface_type = surface
            session.add(VCIReport(
                road_id=road.id,
                user_id="seed",
                vci_value=result.vci,
                surface_type=surface,
            ))

        session.commit()

    logger.info("Seeded %d roads from %s", added, csv_path)
    return added


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    run_sync()
