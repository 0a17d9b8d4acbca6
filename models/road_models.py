"""
road_models.py - roads and vci_reports tables
"""
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


def uuid4_str() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Road(Base):
    __tablename__ = "roads"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=uuid4_str)
    road_name: Mapped[str] = mapped_column(String(256), nullable=False)
    location: Mapped[str | None] = mapped_column(String(256), nullable=True)
    start: Mapped[str | None] = mapped_column(String(64), nullable=True)  # "lat, lng"
    end: Mapped[str | None] = mapped_column(String(64), nullable=True)
    vci: Mapped[float | None] = mapped_column(Float, nullable=True)  # 0-100, latest submission
    surface_type: Mapped[str | None] = mapped_column(String(16), nullable=True)  # concrete | asphalt
    grid_annotations: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class VCIReport(Base):
    """Append-only record of each VCI submission."""
    __tablename__ = "vci_reports"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=uuid4_str)
    road_id: Mapped[str] = mapped_column(String(36), ForeignKey("roads.id"), nullable=False, index=True)
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    user_email: Mapped[str | None] = mapped_column(String(256), nullable=True)
    vci_value: Mapped[float] = mapped_column(Float, nullable=False)
    surface_type: Mapped[str] = mapped_column(String(16), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
