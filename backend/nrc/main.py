import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from nrc.clock import now_iso
from nrc.config import Settings, get_settings
from nrc.exceptions import NRCError
from nrc.models import PATIENTS, USERS
from nrc.observability import RequestLogMiddleware, configure_logging
from nrc.routers import auth as auth_router
from nrc.routers import bed_requests, beds, dashboard, medical_records, notifications, patients, treatments, visits
from nrc.routers.anganwadi import centers_router, workers_router
from nrc.storage import SqlStore, build_store
from nrc.storage.seed import seed_sample_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: open the store, create missing tables, seed demo data
    settings: Settings = app.state.settings
    store = build_store(settings)
    store.initialize()
    if settings.seed_sample_data:
        seed_sample_data(store)
    app.state.store = store
    logger.info("Using %s at %s", store.backend_name, store.location)
    yield
    # Shutdown
    if isinstance(store, SqlStore):
        store.dispose()


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Middleware to add no-cache headers to prevent browser caching."""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, proxy-revalidate, max-age=0"
        response.headers["Expires"] = "0"
        response.headers["Pragma"] = "no-cache"
        return response


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NRCError)
    async def nrc_error_handler(request: Request, exc: NRCError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [{"field": _field_name(e["loc"]), "message": e["msg"]} for e in exc.errors()]
        return JSONResponse(status_code=400, content={"errors": errors})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        settings: Settings = request.app.state.settings
        return JSONResponse(
            status_code=500,
            content={
                "error": "Something went wrong!",
                "message": str(exc) if settings.is_development else "Internal server error",
            },
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_output=not settings.is_development)

    app = FastAPI(
        title=settings.app_name,
        description="Nutrition Rehabilitation Centre management: patients, beds, referrals and follow-up",
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(NoCacheMiddleware)
    app.add_middleware(RequestLogMiddleware)

    register_exception_handlers(app)

    app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(patients.router, prefix="/api/patients", tags=["Patients"])
    app.include_router(beds.router, prefix="/api/beds", tags=["Beds"])
    app.include_router(beds.hospitals_router, prefix="/api/hospitals", tags=["Hospitals"])
    app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])
    app.include_router(visits.router, prefix="/api/visits", tags=["Visits"])
    app.include_router(bed_requests.router, prefix="/api/bed-requests", tags=["Bed Requests"])
    app.include_router(medical_records.router, prefix="/api/medical-records", tags=["Medical Records"])
    app.include_router(centers_router, prefix="/api/centers", tags=["Anganwadi Centers"])
    app.include_router(workers_router, prefix="/api/workers", tags=["Workers"])
    app.include_router(treatments.router, prefix="/api/treatments", tags=["Treatments"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])

    @app.get("/api/health")
    def health_check(request: Request):
        store = request.app.state.store
        return {
            "status": "OK",
            "timestamp": now_iso(),
            "version": settings.version,
            "database": store.backend_name,
            "environment": settings.environment,
            "statistics": {
                "users": store.count(USERS),
                "patients": store.count(PATIENTS),
                "dataDirectory": store.location,
            },
        }

    return app


app = create_app()
