"""SQLAlchemy model for recorded therapy sessions."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class ClinicalSessionModel(Base):
    """Database representation of a therapy session log entry."""

    __tablename__ = "clinical_session"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patient.id"), nullable=False, index=True)
    professional_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    intervention_plan = Column(Text, nullable=True)
    achievements = Column(Text, nullable=True)
    patient_performance = Column(Text, nullable=True)
    vitals = Column(JSON, nullable=False, default=dict)
    has_incident = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    incident_details = Column(Text, nullable=True)
    next_session_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["ClinicalSessionModel"]
