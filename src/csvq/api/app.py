"""FastAPI application factory."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from csvq.domain.exceptions import (
    AgentNotFoundError,
    EmptyContentError,
    InvalidInputError,
    NoRowsError,
    RetrievalError,
)
from csvq.logging import logger


def create_app() -> FastAPI:
    app = FastAPI(
        title="CSV Questions API",
        version="0.1.0",
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from csvq.api.routers.questions import router as questions_router

    app.include_router(questions_router)

    @app.exception_handler(InvalidInputError)
    @app.exception_handler(EmptyContentError)
    @app.exception_handler(NoRowsError)
    def _unprocessable(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.message})

    @app.exception_handler(RetrievalError)
    def _bad_gateway(request: Request, exc: RetrievalError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "upstream_status": exc.status_code},
        )

    @app.exception_handler(AgentNotFoundError)
    def _agent_missing(request: Request, exc: AgentNotFoundError) -> JSONResponse:
        logger.error("Agent lookup failed: %s", exc.message)
        return JSONResponse(status_code=500, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
