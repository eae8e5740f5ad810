from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ..auth.exceptions import (
    AuthException,
    NotAuthenticatedException,
    UserNotFoundException,
)
from ..services.exceptions import (
    PortfolioServiceError,
    PortfolioNotFoundError,
    PortfolioConflictError,
    TemplateNotFoundError,
)
from ..services.resume.exceptions import ResumeProcessingError, UpstreamError
from .logger import logger


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse({"errors": jsonable_encoder(exc.errors())}, status_code=400)


async def auth_exception_handler(request: Request, exc: AuthException):
    if isinstance(exc, NotAuthenticatedException):
        return _error(401, str(exc))
    if isinstance(exc, UserNotFoundException):
        return _error(404, str(exc))
    return _error(400, str(exc))


async def portfolio_exception_handler(request: Request, exc: PortfolioServiceError):
    if isinstance(exc, (PortfolioNotFoundError, TemplateNotFoundError)):
        return _error(404, str(exc))
    if isinstance(exc, PortfolioConflictError):
        return _error(409, str(exc))
    return _error(400, str(exc))


async def resume_exception_handler(request: Request, exc: ResumeProcessingError):
    if isinstance(exc, UpstreamError):
        return _error(502, str(exc))
    logger.warning(f"Resume upload rejected: {exc}")
    return _error(400, str(exc))


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return _error(500, "Internal Server Error")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc!r}")
    return _error(500, "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(AuthException, auth_exception_handler)
    app.add_exception_handler(PortfolioServiceError, portfolio_exception_handler)
    app.add_exception_handler(ResumeProcessingError, resume_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
