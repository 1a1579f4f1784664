"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from scribe.domain.error import (
    AuthenticationError,
    DomainError,
    DuplicateKeyError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from scribe.domain.repository import AfterCommit

# Most specific first; DomainError catches the rest
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateKeyError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (StorageError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def _fail_request_transaction(request: Request) -> None:
    # The error never leaves the request scope, so the session would commit
    container = getattr(request.state, "dishka_container", None)
    if container is None:
        return
    after_commit = await container.get(AfterCommit)
    after_commit.cancel()


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    await _fail_request_transaction(request)
    code = status_for(exc)
    if code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        detail = "Storage service unavailable"
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status_code=code,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        detail = str(exc)

    headers = {"WWW-Authenticate": "Bearer"} if code == 401 else None
    return JSONResponse(status_code=code, content={"detail": detail}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on the app."""
    app.add_exception_handler(DomainError, domain_error_handler)
