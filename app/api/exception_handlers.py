"""Centralized exception handlers for FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from app.api.schemas.common import APIResponse
from app.config.settings import settings
from app.core.exceptions import (
    ActiveTimerExistsError,
    AuthException,
    DatabaseConnectionError,
    DatabaseException,
    DatabaseHealthCheckError,
    DuplicateReviewError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidProjectStateError,
    InvalidProposalStateError,
    MessageException,
    NotificationException,
    NotificationNotFoundException,
    PaymentException,
    PaymentNotConfiguredError,
    PaymentProviderError,
    ProjectException,
    ProjectNotFoundException,
    ProjectValidationError,
    ProposalException,
    ProposalNotFoundException,
    ReviewException,
    ReviewValidationError,
    TimeEntryException,
    TimeEntryNotFoundException,
    UnauthenticatedError,
    UserAlreadyExistsError,
    UserException,
    UserNotFoundException,
)


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: str | None = None,
    field: str | None = None,
) -> JSONResponse:
    response = APIResponse.fail(code=code, message=message, details=details, field=field)
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json"),
    )


async def auth_exception_handler(request: Request, exc: AuthException) -> JSONResponse:
    """Handle caller resolution and permission failures."""
    logger.warning(f"Auth error on {request.method} {request.url.path}: {exc.message}")

    if isinstance(exc, InvalidCredentialsError):
        return _error_response(401, "INVALID_CREDENTIALS", exc.message)
    if isinstance(exc, UnauthenticatedError):
        return _error_response(401, "UNAUTHENTICATED", exc.message)
    if isinstance(exc, ForbiddenError):
        return _error_response(403, "FORBIDDEN", exc.message)
    return _error_response(401, "AUTH_ERROR", exc.message)


async def database_exception_handler(
    request: Request, exc: DatabaseException
) -> JSONResponse:
    """Handle custom database exceptions."""
    logger.error(f"Database error: {exc.message}")

    if isinstance(exc, DatabaseConnectionError):
        return _error_response(503, "DATABASE_CONNECTION_ERROR", exc.message)
    if isinstance(exc, DatabaseHealthCheckError):
        return _error_response(503, "DATABASE_HEALTH_CHECK_ERROR", exc.message)
    return _error_response(500, "DATABASE_ERROR", exc.message)


async def user_exception_handler(request: Request, exc: UserException) -> JSONResponse:
    logger.error(f"User error: {exc.message}")

    if isinstance(exc, UserNotFoundException):
        return _error_response(404, "USER_NOT_FOUND", exc.message)
    if isinstance(exc, UserAlreadyExistsError):
        return _error_response(409, "USER_ALREADY_EXISTS", exc.message, field="email")
    return _error_response(500, "USER_ERROR", exc.message)


async def project_exception_handler(
    request: Request, exc: ProjectException
) -> JSONResponse:
    """Handle project-related exceptions."""
    logger.error(f"Project error: {exc.message}")

    if isinstance(exc, ProjectNotFoundException):
        return _error_response(404, "PROJECT_NOT_FOUND", exc.message)
    if isinstance(exc, ProjectValidationError):
        return _error_response(400, "PROJECT_VALIDATION_ERROR", exc.message)
    if isinstance(exc, InvalidProjectStateError):
        return _error_response(409, "INVALID_PROJECT_STATE", exc.message, details=exc.current)
    return _error_response(500, "PROJECT_ERROR", exc.message)


async def proposal_exception_handler(
    request: Request, exc: ProposalException
) -> JSONResponse:
    logger.error(f"Proposal error: {exc.message}")

    if isinstance(exc, ProposalNotFoundException):
        return _error_response(404, "PROPOSAL_NOT_FOUND", exc.message)
    if isinstance(exc, InvalidProposalStateError):
        return _error_response(409, "INVALID_PROPOSAL_STATE", exc.message, details=exc.current)
    return _error_response(500, "PROPOSAL_ERROR", exc.message)


async def time_entry_exception_handler(
    request: Request, exc: TimeEntryException
) -> JSONResponse:
    logger.error(f"Time tracking error: {exc.message}")

    if isinstance(exc, ActiveTimerExistsError):
        return _error_response(409, "ACTIVE_TIMER_EXISTS", exc.message, details=exc.entry_id)
    if isinstance(exc, TimeEntryNotFoundException):
        return _error_response(404, "TIME_ENTRY_NOT_FOUND", exc.message)
    return _error_response(500, "TIME_ENTRY_ERROR", exc.message)


async def notification_exception_handler(
    request: Request, exc: NotificationException
) -> JSONResponse:
    logger.error(f"Notification error: {exc.message}")

    if isinstance(exc, NotificationNotFoundException):
        return _error_response(404, "NOTIFICATION_NOT_FOUND", exc.message)
    return _error_response(500, "NOTIFICATION_ERROR", exc.message)


async def review_exception_handler(request: Request, exc: ReviewException) -> JSONResponse:
    logger.error(f"Review error: {exc.message}")

    if isinstance(exc, DuplicateReviewError):
        return _error_response(409, "DUPLICATE_REVIEW", exc.message)
    if isinstance(exc, ReviewValidationError):
        return _error_response(400, "REVIEW_VALIDATION_ERROR", exc.message)
    return _error_response(500, "REVIEW_ERROR", exc.message)


async def message_exception_handler(request: Request, exc: MessageException) -> JSONResponse:
    logger.error(f"Message error: {exc.message}")
    return _error_response(400, "MESSAGE_VALIDATION_ERROR", exc.message)


async def payment_exception_handler(request: Request, exc: PaymentException) -> JSONResponse:
    logger.error(f"Payment error: {exc.message}")

    if isinstance(exc, PaymentNotConfiguredError):
        return _error_response(503, "PAYMENT_NOT_CONFIGURED", exc.message)
    if isinstance(exc, PaymentProviderError):
        return _error_response(502, "PAYMENT_PROVIDER_ERROR", exc.message)
    return _error_response(500, "PAYMENT_ERROR", exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed requests with the standard envelope."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or None
    logger.info(f"Invalid request on {request.method} {request.url.path}: {first.get('msg')}")

    response = APIResponse.fail(
        code="INVALID_INPUT",
        message=first.get("msg", "Invalid request"),
        details=str(jsonable_encoder(errors)),
        field=field,
    )
    return JSONResponse(
        status_code=422,
        content=response.model_dump(mode="json"),
    )


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handle SQLAlchemy errors."""
    logger.error(f"SQLAlchemy error: {str(exc)}")
    details = str(exc) if settings.ENV == "development" else None
    return _error_response(500, "DATABASE_ERROR", "A database error occurred", details=details)


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.exception(f"Unhandled exception: {str(exc)}")
    return _error_response(500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AuthException, auth_exception_handler)
    app.add_exception_handler(DatabaseException, database_exception_handler)
    app.add_exception_handler(UserException, user_exception_handler)
    app.add_exception_handler(ProjectException, project_exception_handler)
    app.add_exception_handler(ProposalException, proposal_exception_handler)
    app.add_exception_handler(TimeEntryException, time_entry_exception_handler)
    app.add_exception_handler(NotificationException, notification_exception_handler)
    app.add_exception_handler(ReviewException, review_exception_handler)
    app.add_exception_handler(MessageException, message_exception_handler)
    app.add_exception_handler(PaymentException, payment_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
