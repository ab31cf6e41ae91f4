"""
Enrollment model: a user's registration for the event.

A user has at most one enrollment (unique user_id), and a ticket can only be
issued against an enrollment.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from hotel_api.db.base import Base, TimestampMixin


class Enrollment(Base, TimestampMixin):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    # Relationships
    user = relationship("User", back_populates="enrollment")
    ticket = relationship("Ticket", back_populates="enrollment", uselist=False)

    def __repr__(self) -> str:
        return f"<Enrollment(id={self.id}, user={self.user_id})>"
