from .base import Base, get_db, init_db
from .road_models import Road, VCIReport

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "Road",
    "VCIReport",
]
