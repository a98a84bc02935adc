"""SQLAlchemy model for patient records."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, func
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class PatientModel(Base):
    """Database representation of a patient record."""

    __tablename__ = "patient"

    id = Column(Integer, primary_key=True, index=True)
    creator_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    personal_info = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    deleted = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )


__all__ = ["PatientModel"]
