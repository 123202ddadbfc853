"""
FastAPI application entry point.

Beneficiary Care Portal - administrative backend for registering
beneficiaries, tracking daily attendance, managing compliance documents
and exporting CSV reports.
"""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from portal.config import settings, ensure_directories
from portal.database import init_db
from portal.exceptions import PortalError
from portal.schemas.common import HealthResponse
from portal.routers import (
    attendance,
    beneficiaries,
    dashboard,
    documents,
    reports,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    **Beneficiary Care Portal API**

    Backend for the NGO administrative portal.

    ## Key Features

    * **Beneficiaries**: Register and update persons with disabilities
    * **Attendance**: Mark daily present / absent per beneficiary
    * **Documents**: Upload compliance documents and track completeness
    * **Reports**: Download beneficiary and attendance CSV exports
    * **Dashboard**: Headline counters for today

    Write operations require the `X-User-Id` header set by the auth gateway.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Public document URLs
app.mount(
    settings.PUBLIC_STORAGE_URL,
    StaticFiles(directory=settings.STORAGE_DIR, check_dir=False),
    name="storage"
)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize application on startup."""
    # Ensure directories exist
    ensure_directories()

    # Initialize database (create tables if not exist)
    try:
        init_db()
        logger.info("Database initialized successfully")
    except SQLAlchemyError as e:
        logger.warning(f"Database initialization warning: {e}")


# Include routers with prefixes
app.include_router(
    beneficiaries.router,
    prefix=f"{settings.API_V1_PREFIX}/beneficiaries",
    tags=["Beneficiaries"]
)
app.include_router(
    attendance.router,
    prefix=f"{settings.API_V1_PREFIX}/attendance",
    tags=["Attendance"]
)
app.include_router(
    documents.router,
    prefix=f"{settings.API_V1_PREFIX}/documents",
    tags=["Documents"]
)
app.include_router(
    reports.router,
    prefix=f"{settings.API_V1_PREFIX}/reports",
    tags=["Reports"]
)
app.include_router(
    dashboard.router,
    prefix=f"{settings.API_V1_PREFIX}/dashboard",
    tags=["Dashboard"]
)


# Root endpoint
@app.get("/", tags=["Root"])
def root():
    """API root endpoint with basic information."""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "endpoints": {
            "beneficiaries": f"{settings.API_V1_PREFIX}/beneficiaries",
            "attendance": f"{settings.API_V1_PREFIX}/attendance",
            "documents": f"{settings.API_V1_PREFIX}/documents",
            "reports": f"{settings.API_V1_PREFIX}/reports",
            "dashboard": f"{settings.API_V1_PREFIX}/dashboard",
        }
    }


# Health check
@app.get(f"{settings.API_V1_PREFIX}/health", response_model=HealthResponse, tags=["Health"])
def health_check():
    """Health check endpoint."""
    from portal.database import engine
    from sqlalchemy import text

    # Check database connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        db_status = f"unhealthy: {str(e)}"

    storage_status = "healthy" if settings.bucket_dir.is_dir() else "missing"

    return {
        "status": "healthy" if db_status == "healthy" and storage_status == "healthy" else "degraded",
        "version": settings.VERSION,
        "database": db_status,
        "storage": storage_status
    }


def first_error_message(exc: RequestValidationError) -> str:
    """Single message naming the first failing field."""
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
    message = error.get("msg", "Invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{'.'.join(loc)}: {message}" if loc else message


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    return JSONResponse(
        status_code=422,
        content={
            "error": first_error_message(exc),
            "status_code": 422
        }
    )


@app.exception_handler(PortalError)
async def portal_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "status_code": exc.status_code
        }
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request, exc):
    logger.error(f"Database error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Database error",
            "detail": str(exc),
            "status_code": 500
        }
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "status_code": exc.status_code
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "status_code": 500
        }
    )
