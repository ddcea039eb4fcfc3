from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.logging import configure_logging, logger
from app.routers.capacity import router as capacity_router
from app.services.assignment_service import ensure_assignments_file
from app.services.capacity_rules_service import ensure_rules_file
from app.services.staff_service import ensure_staff_file
from core.settings import get_settings
from db.store import JsonStore


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Seed empty collections and default rules so first reads succeed
    store = JsonStore(get_settings().resolved_data_dir)
    created = [
        name
        for name, made in (
            ("staff", await ensure_staff_file(store)),
            ("assignments", await ensure_assignments_file(store)),
            ("capacity rules", await ensure_rules_file(store)),
        )
        if made
    ]
    if created:
        logger.info("Initialised %s in %s", ", ".join(created), store.data_dir)
    yield


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


def create_app(allowed_origins: Sequence[str] | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        allowed_origins: Optional list of CORS origins to allow. If not provided,
            permissive defaults will be used for local development.

    Returns:
        Configured FastAPI application.
    """
    configure_logging(settings.debug)
    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

    cors_origins = list(
        allowed_origins
        or [
            "http://localhost",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Malformed input is a 400 across the API
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Routers
    app.include_router(capacity_router, prefix="/capacity", tags=["capacity"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
