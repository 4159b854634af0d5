# app/main.py
"""
FastAPI application entry point.
Includes request timing, typed inventory error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.routers import alerts, catalog, floor_inventory, health, zone_inventory, zone_objects
from app.database import SessionLocal, create_tables
from app.config import settings
from app.services.catalog_service import seed_catalog
from app.services.exceptions import InventoryError
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Office Floor-Plan Inventory API",
    description="Floor stock, zone allocations and placed objects with capacity accounting.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (plan editor runs on a separate origin) ────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Inventory Error Handlers ─────────────────────────────────────────────────
ERROR_STATUS = {
    "NotFound": status.HTTP_404_NOT_FOUND,
    "InvalidReference": status.HTTP_400_BAD_REQUEST,
    "Conflict": status.HTTP_409_CONFLICT,
    "CapacityExceeded": status.HTTP_409_CONFLICT,
    "BadRequest": status.HTTP_400_BAD_REQUEST,
}


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.kind, status.HTTP_400_BAD_REQUEST),
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    detail = f"{where}: {first.get('msg')}" if where else str(first.get("msg", "Invalid request"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "BadRequest", "detail": detail},
    )


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(catalog.router,         prefix="/api/v1", tags=["📚 Catalog"])
app.include_router(floor_inventory.router, prefix="/api/v1", tags=["🏢 Floor Stock"])
app.include_router(zone_inventory.router,  prefix="/api/v1", tags=["📦 Zone Allocations"])
app.include_router(zone_objects.router,    prefix="/api/v1", tags=["🪑 Zone Objects"])
app.include_router(alerts.router,          prefix="/api/v1", tags=["🔔 Alerts"])
app.include_router(health.router,          prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Floor-plan inventory backend starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    if settings.SEED_CATALOG_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_catalog(db)
        finally:
            db.close()
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Floor-plan inventory backend shutting down...")
