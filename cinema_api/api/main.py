"""
FastAPI application entry point for the Cinema API.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from cinema_api import __version__
from cinema_api.api.config import get_api_host, get_api_port
from cinema_api.api.routers import movies, users, system
from cinema_api.api.validation import PayloadValidationError, to_violations
from cinema_api.database import close_db_manager, init_database
from cinema_api.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_database()
    logger.info("Cinema API ready")
    yield
    close_db_manager()


def validation_error_response(violations) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"validationErrors": [v.model_dump() for v in violations]},
    )


async def payload_validation_handler(request: Request, exc: PayloadValidationError):
    """Body broke its resource's rule set."""
    return validation_error_response(exc.violations)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Path or query parameter could not be parsed."""
    return validation_error_response(to_violations(exc.errors()))


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Any unclassified persistence failure."""
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    """Build the application with every route registered once."""
    app = FastAPI(
        title="Cinema API",
        description="REST API for movies and users",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_exception_handler(PayloadValidationError, payload_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    app.include_router(movies.router)
    app.include_router(users.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Cinema API",
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()


def run():
    """Serve the API with uvicorn (console script entry point)."""
    setup_logging()
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    run()
