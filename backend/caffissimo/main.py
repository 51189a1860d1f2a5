"""
Caffissimo Admin Platform - Main FastAPI Application
"""
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from contextlib import asynccontextmanager
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

import logging

from caffissimo.config import settings
from caffissimo.database import get_store

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)
from caffissimo.api.v1 import (
    attendance,
    audit_logs,
    branches,
    fridge,
    offers,
    orders,
    permissions,
    platforms,
    products,
    reports,
    search,
    settings as store_settings,
    users,
)

# Rate limiter instance (shared with route-level decorators)
limiter = Limiter(key_func=get_remote_address, default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info("Starting up %s %s...", settings.APP_NAME, settings.APP_VERSION)
    store = get_store()
    logger.info("Data store ready: %d branches, %d orders", len(store.list_branches()), len(store.list_orders()))
    yield
    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Role-scoped admin and reporting API for a multi-branch coffee shop",
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan
)

# Attach limiter to app state (required by slowapi)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Trusted Host Middleware - reject requests with spoofed Host headers
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"],
    allow_headers=[
        "Content-Type", "Accept",
        "X-Role", "X-Assigned-Branch-Id", "X-Selected-Branch-Id", "X-User-Id", "X-User-Name",
    ],
)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response: Response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# Include routers
app.include_router(reports.router, prefix="/api/v1/reports", tags=["Reports"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])
app.include_router(branches.router, prefix="/api/v1/branches", tags=["Branches"])
app.include_router(users.router, prefix="/api/v1/users", tags=["Users"])
app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
app.include_router(offers.router, prefix="/api/v1/offers", tags=["Offers"])
app.include_router(fridge.router, prefix="/api/v1/fridge-reports", tags=["Fridge Stock"])
app.include_router(attendance.router, prefix="/api/v1/attendance", tags=["Attendance"])
app.include_router(audit_logs.router, prefix="/api/v1/audit-logs", tags=["Audit Logs"])
app.include_router(platforms.router, prefix="/api/v1/platforms", tags=["Platforms"])
app.include_router(permissions.router, prefix="/api/v1/permissions", tags=["Permissions"])
app.include_router(search.router, prefix="/api/v1/search", tags=["Search"])
app.include_router(store_settings.router, prefix="/api/v1/settings", tags=["Settings"])


@app.get("/health")
@limiter.exempt
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}
