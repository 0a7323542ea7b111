"""Domain errors and their HTTP representation.

Services raise these; the handler installed by :func:`register_exception_handlers`
turns them into ``{"error": message}`` responses with the matching status code.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class RentalHavenError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Conflict(RentalHavenError):
    """The resource already exists (duplicate email)."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already in use"


class Unauthorized(RentalHavenError):
    """Credentials did not verify, or the looked-up user is unknown."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFound(RentalHavenError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class BadRequest(RentalHavenError):
    """A referenced record (e.g. the owner) does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class InternalFailure(RentalHavenError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal failure"


def validation_message(exc: RequestValidationError) -> str:
    """Flatten validation errors into one readable line, e.g. "ownerId: Field required"."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"][1:])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts) or "Invalid request"


async def rentalhaven_error_handler(request: Request, exc: RentalHavenError) -> JSONResponse:
    """Render a domain error as a single ``error`` field."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures in the same ``error`` shape."""
    return JSONResponse(
        status_code=422,
        content={"error": validation_message(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and validation error handlers on the application."""
    app.add_exception_handler(RentalHavenError, rentalhaven_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
