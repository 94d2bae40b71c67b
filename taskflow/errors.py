# taskflow/errors.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError


logger = logging.getLogger(__name__)


# -------------------------------
# Error Taxonomy
# -------------------------------

class TaskflowError(Exception):
    """
    Base class for errors raised by the service layer.
    Each subclass maps to one HTTP status code.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskflowError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(TaskflowError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(TaskflowError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(TaskflowError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(TaskflowError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(TaskflowError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


# -------------------------------
# Exception Handlers
# -------------------------------

def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


async def taskflow_error_handler(request: Request, exc: TaskflowError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return _error_response(exc.status_code, exc.message, headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        details.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error_response(status.HTTP_400_BAD_REQUEST, "; ".join(details) or "Invalid request")


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(InternalError.status_code, "Internal server error")


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(InternalError.status_code, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskflowError, taskflow_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
