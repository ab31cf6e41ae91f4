"""
Domain errors and their HTTP mapping.

Services raise these instead of HTTPException so the same error kinds are
usable outside a request. The handlers below turn them into
`{"detail": ...}` responses with the matching status code.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hotel_api.core.logging import get_logger

logger = get_logger(__name__)


class DomainError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class UnauthorizedError(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "You must be signed in to continue"


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No result for this search"


class PaymentRequiredError(DomainError):
    """Ticket exists but does not grant hotel access (unpaid, remote, or no hotel)."""

    status_code = status.HTTP_402_PAYMENT_REQUIRED
    message = "Ticket does not grant hotel access"


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("database_error", error_type=type(exc).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


EXCEPTION_HANDLERS = {
    DomainError: domain_error_handler,
    SQLAlchemyError: database_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
