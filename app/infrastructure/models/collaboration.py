"""SQLAlchemy model for patient collaborations."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class CollaborationModel(Base):
    """Database representation of a professional invited to a patient."""

    __tablename__ = "collaboration"
    __table_args__ = (
        UniqueConstraint("patient_id", "professional_id", name="uq_collaboration_member"),
    )

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patient.id"), nullable=False, index=True)
    professional_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="PENDING")
    invited_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    patient = relationship("PatientModel", lazy="joined")


__all__ = ["CollaborationModel"]
