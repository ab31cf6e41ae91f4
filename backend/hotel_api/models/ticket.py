"""
Ticket and TicketType models.

Key design decisions:
- One ticket per enrollment (unique enrollment_id)
- Hotel access is decided by the ticket type flags plus the payment status;
  tickets are written by the purchase flow and only read here
"""

import enum

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from hotel_api.db.base import Base, TimestampMixin


class TicketStatus(str, enum.Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


class TicketType(Base, TimestampMixin):
    __tablename__ = "ticket_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)  # cents
    is_remote = Column(Boolean, nullable=False)
    includes_hotel = Column(Boolean, nullable=False)

    tickets = relationship("Ticket", back_populates="ticket_type")

    def __repr__(self) -> str:
        return (
            f"<TicketType(id={self.id}, remote={self.is_remote}, "
            f"hotel={self.includes_hotel})>"
        )


class Ticket(Base, TimestampMixin):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    ticket_type_id = Column(Integer, ForeignKey("ticket_types.id"), nullable=False)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), unique=True, nullable=False)
    status = Column(Enum(TicketStatus, name="ticket_status"), nullable=False)

    # Relationships
    ticket_type = relationship("TicketType", back_populates="tickets")
    enrollment = relationship("Enrollment", back_populates="ticket")

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, enrollment={self.enrollment_id}, status={self.status})>"
