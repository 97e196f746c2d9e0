import logging
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from zapit.api.routes.feed import router as feed_router
from zapit.api.routes.health import router as health_router
from zapit.api.routes.links import router as links_router
from zapit.core.config import Settings, get_settings
from zapit.core.logging import setup_logging
from zapit.db.session import Database
from zapit.services.feed import ASSETS_PATH

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    for name in settings.defaulted():
        logger.warning("`%s` not set, defaulting to `%s`", name, getattr(settings, name))

    app = FastAPI(title="ZapIt", version="0.1.1")
    app.state.settings = settings
    app.state.database = Database(settings.DATABASE_URL, pool_size=settings.DB_POOL_SIZE)

    app.include_router(health_router, tags=["health"])
    app.include_router(links_router, tags=["links"])
    app.include_router(feed_router, tags=["feed"])
    app.mount(
        f"/{ASSETS_PATH}",
        StaticFiles(directory=settings.ASSETS_DIR, check_dir=False),
        name=ASSETS_PATH,
    )

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    @app.on_event("startup")
    def _startup_db() -> None:
        app.state.database.init_schema()

    @app.on_event("shutdown")
    def _shutdown_db() -> None:
        app.state.database.dispose()

    return app


def run() -> None:
    settings = get_settings()
    application = create_app(settings)
    logger.info("Listening on %s...", settings.listen_addr)
    uvicorn.run(
        application,
        host=settings.LISTEN_IFACE,
        port=settings.LISTEN_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
