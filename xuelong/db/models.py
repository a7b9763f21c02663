"""SQLAlchemy models mirroring the JSON documents."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, JSON, String, func

from .session import Base


class Document(Base):
    __tablename__ = "documents"

    name = Column(String(64), primary_key=True)
    data = Column(JSON, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
