"""SQLAlchemy model for support tickets."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from app.infrastructure.database import Base


class SupportTicketModel(Base):
    """Database representation of a support request."""

    __tablename__ = "support_ticket"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    subject = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="OPEN")
    admin_response = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


__all__ = ["SupportTicketModel"]
