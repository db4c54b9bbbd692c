# Path: readidx/api/app.py
"""
FastAPI Application

Builds the HTTP surface: report routes plus the error envelope.

Error mapping:
- ReportValidationError, ArchiveError, NoFactsFoundError -> 422
- 405 -> "Metode tidak diizinkan."
- anything else -> 500 with a generic message; details only in the log

Example:
    uvicorn readidx.api.app:app --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..constants import RESPONSE_ERROR, MSG_SERVER_ERROR, MSG_METHOD_NOT_ALLOWED
from ..core.logger import get_output_logger
from ..database import initialize_database
from ..services.errors import ReportValidationError
from ..xbrl_parser.models.error import ArchiveError, NoFactsFoundError
from . import routes


logger = get_output_logger('api')


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={'status': RESPONSE_ERROR, 'message': message},
    )


def create_app(initialize_db: bool = True) -> FastAPI:
    """
    Create the application.

    Args:
        initialize_db: Connect and create tables on startup

    Returns:
        FastAPI instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if initialize_db:
            initialize_database()
        yield

    app = FastAPI(
        title="readidx",
        description="Financial report upload and lookup for IDX XBRL filings",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.include_router(routes.router)

    @app.exception_handler(ReportValidationError)
    @app.exception_handler(ArchiveError)
    @app.exception_handler(NoFactsFoundError)
    async def user_error_handler(request: Request, exc: Exception):
        logger.info(f"{request.method} {request.url.path} rejected: {exc}")
        return error_response(422, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return error_response(405, MSG_METHOD_NOT_ALLOWED)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
        return error_response(500, MSG_SERVER_ERROR)

    @app.get("/")
    def root():
        return {"status": "ok", "message": "readidx backend running"}

    return app


app = create_app()


__all__ = ['create_app', 'app']
