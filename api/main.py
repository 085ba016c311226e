import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from core.config import Settings
from core.db import STORAGE_ERRORS, Database
from core.log import configure_logging
from entities import router as entities_router

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("storage_failure method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage unavailable."},
    )


def create_app(settings: Settings | None = None, *, database: Database | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings)
    db = database or Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One pool per process.
        await db.connect()
        try:
            yield
        finally:
            await db.close()

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db

    for exc_type in STORAGE_ERRORS:
        app.add_exception_handler(exc_type, storage_error_handler)

    app.include_router(entities_router.router, tags=["entities"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
