import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from glutools.core.config import get_settings
from glutools.core.errors import register_error_handlers
from glutools.core.logging import setup_logging
from glutools.core.security import require_api_key
from glutools.routers import admins, auth, contact, reviews, search, subjects, system, tools, uploads
from glutools.services.kv_store import build_store
from glutools.services.seed import seed_store

logger = logging.getLogger("glutools")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    store = build_store(settings.STORE_BACKEND, settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.SEED_ON_STARTUP:
            try:
                seed_store(
                    store,
                    admin_name=settings.DEFAULT_ADMIN_NAME,
                    admin_email=settings.DEFAULT_ADMIN_EMAIL,
                    admin_password=settings.DEFAULT_ADMIN_PASSWORD,
                )
            except Exception:
                logger.exception("Error initializing data")
        yield
        store.close()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API backend for the GLU AI tools directory (tools, reviews, uploads, admins)",
        lifespan=lifespan,
    )
    app.state.store = store

    # Middleware CORS
    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    register_error_handlers(app)

    # Routers
    prefix = settings.API_PREFIX.rstrip("/")
    protected = [Depends(require_api_key)]

    app.include_router(system.router)
    app.include_router(system.router, prefix=prefix, include_in_schema=False)
    for module in (subjects, tools, search, contact, reviews, uploads, auth, admins):
        app.include_router(module.router, prefix=prefix, dependencies=protected)

    # Redirect root → docs
    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    return app


app = create_app()
