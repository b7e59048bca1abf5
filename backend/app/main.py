# backend/app/main.py
"""FastAPI application entrypoint."""

import asyncio
import contextlib
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.core import AppException, logs, settings, setup_logging
from backend.app.features.triage.routes import cleanup_old_reports, router as triage_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    logs.info(
        f"Starting {settings.APP_NAME} v{settings.APP_VERSION}",
        "startup",
        {"environment": settings.ENVIRONMENT},
    )
    cleanup_task = asyncio.create_task(cleanup_old_reports())
    try:
        yield
    finally:
        cleanup_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await cleanup_task


def create_app() -> FastAPI:
    app = FastAPI(
        title="CyberGuard",
        version=settings.APP_VERSION,
        description="Cyber incident triage: classify what happened and what to do next",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        if exc.status_code >= 500:
            logs.error("Request failed", "api", {"path": request.url.path}, exception=exc)
        else:
            logs.warning(
                exc.message,
                "api",
                {"path": request.url.path, "status": exc.status_code},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "details": exc.details},
        )

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok", "version": settings.APP_VERSION}

    app.include_router(triage_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
