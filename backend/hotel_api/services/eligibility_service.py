"""
Hotel eligibility gate.

A user may see hotel data only with an enrollment, a ticket for it, and a
ticket that is paid, in person, and includes a hotel. Checks run in that order
and stop at the first failure:

  1. no enrollment                         -> 404
  2. no ticket                             -> 404
  3. reserved OR remote OR hotel excluded  -> 402

Step 3 is one combined predicate (TicketAccess.requires_payment). The response
does not say which of the three conditions held.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.errors import NotFoundError, PaymentRequiredError
from hotel_api.core.logging import get_logger
from hotel_api.core.metrics import record_access_check
from hotel_api.models import Ticket, TicketStatus
from hotel_api.repositories import enrollment_repository, ticket_repository

logger = get_logger(__name__)


@dataclass(frozen=True)
class TicketAccess:
    status: TicketStatus
    is_remote: bool
    includes_hotel: bool

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "TicketAccess":
        return cls(
            status=TicketStatus(ticket.status),
            is_remote=ticket.ticket_type.is_remote,
            includes_hotel=ticket.ticket_type.includes_hotel,
        )

    @property
    def requires_payment(self) -> bool:
        return (
            self.status == TicketStatus.RESERVED
            or self.is_remote
            or not self.includes_hotel
        )


async def check_hotel_eligibility(db: AsyncSession, user_id: int) -> TicketAccess:
    """Raise NotFoundError / PaymentRequiredError unless the user may see hotels."""
    enrollment = await enrollment_repository.find_enrollment_by_user_id(db, user_id)
    if enrollment is None:
        logger.info("hotel_access_denied", user_id=user_id, reason="no_enrollment")
        record_access_check("not_found")
        raise NotFoundError()

    ticket = await ticket_repository.find_ticket_by_enrollment_id(db, enrollment.id)
    if ticket is None:
        logger.info("hotel_access_denied", user_id=user_id, reason="no_ticket")
        record_access_check("not_found")
        raise NotFoundError()

    access = TicketAccess.from_ticket(ticket)
    if access.requires_payment:
        logger.info(
            "hotel_access_denied",
            user_id=user_id,
            reason="payment_required",
            ticket_id=ticket.id,
        )
        record_access_check("payment_required")
        raise PaymentRequiredError()

    record_access_check("granted")
    return access
