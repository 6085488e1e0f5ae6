"""Interface layer errors and HTTP error mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from duo.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    EmailMismatchError,
    InvitationExpiredError,
    NotFoundError,
    ValidationError,
)
from duo.util.jwt import JWTError


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Missing or malformed credentials."""

    pass


# Most specific first; the first matching class wins
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (InvitationExpiredError, status.HTTP_410_GONE),
    (EmailMismatchError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    for error_type, status_code in DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def register_error_handlers(app: FastAPI) -> None:
    """Translate domain and auth errors into JSON error responses.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        logfire.info(
            "Request refused",
            path=request.url.path,
            error_type=type(exc).__name__,
            status_code=status_code,
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    @app.exception_handler(JWTError)
    async def handle_jwt_error(request: Request, exc: JWTError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(
        request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )
