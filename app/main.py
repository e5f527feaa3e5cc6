import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

from app.api.router import api_router
from app.core.config import Settings, settings as default_settings
from app.core.db import Database, init_models
from app.core.errors import install_error_handlers
from app.core.logging import request_id_ctx, setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application.

    The store handle is owned here: a ``Database`` passed in is used as is (and
    left for the caller to dispose); otherwise one is opened on startup from
    ``settings.DATABASE_DSN`` and disposed on shutdown.
    """
    settings = settings or default_settings
    setup_logging(settings.ENV)

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.db = database

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = (time.time() - start_time) * 1000
        logger.info(
            f"Request: {request.method} {request.url.path} - Response: {response.status_code} - Time: {process_time:.2f}ms"
        )
        return response

    # registered last so it runs first and the id is set for the log line above
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        rid = request.headers.get("x-request-id", "-")
        token = request_id_ctx.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers["x-request-id"] = rid
        return response

    install_error_handlers(app)

    @app.on_event("startup")
    async def on_startup():
        if app.state.db is None:
            app.state.db = Database(settings.DATABASE_DSN)
            app.state.owns_db = True
        await init_models(app.state.db, settings.DB_MANAGE)

    @app.on_event("shutdown")
    async def on_shutdown():
        if getattr(app.state, "owns_db", False):
            await app.state.db.dispose()
            app.state.db = None

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
