from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
from api import email_verification
from services.config import app_config
from services.identity_store import IdentityStore
from services.security import SecurityUtils

# Configure logging
logging.basicConfig(
    level=app_config.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the identity store for the lifetime of the application."""
    app.state.identity_store = IdentityStore.open(app_config.database_url, echo=app_config.db_echo)

    logger.info("Starting Email Verification API")
    logger.info(f"  - Environment: {app_config.environment}")
    logger.info(f"  - Identity store: {app.state.identity_store.url}")

    yield

    await app.state.identity_store.dispose()
    logger.info("Email Verification API shutdown complete")

app = FastAPI(
    title="Email Verification API",
    description="Email verification requests backed by the identity database",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(email_verification.router, prefix="/api/account", tags=["email-verification"])

@app.get("/")
def root():
    """Root endpoint with basic application information."""
    return {
        "message": "Email Verification API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "operational"
    }

@app.get("/health")
def health_check():
    """Health check endpoint for load balancers and monitoring."""
    return {
        "status": "healthy",
        "timestamp": SecurityUtils.get_utc_now().isoformat(),
        "version": "1.0.0",
        "environment": app_config.environment
    }

@app.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe: the identity database must answer."""
    try:
        await request.app.state.identity_store.ping()
        return {
            "status": "ready",
            "timestamp": SecurityUtils.get_utc_now().isoformat(),
            "checks": {"database": "healthy"}
        }
    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "timestamp": SecurityUtils.get_utc_now().isoformat(),
                "error": "Database connection failed"
            }
        )

@app.get("/health/live")
def liveness_check():
    """Liveness probe for container orchestration."""
    return {
        "status": "alive",
        "timestamp": SecurityUtils.get_utc_now().isoformat()
    }

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies with security logging."""
    SecurityUtils.log_security_event(
        "request_validation_error",
        {
            "path": request.url.path,
            "method": request.method,
            "errors": exc.errors()
        },
        client_ip=SecurityUtils.get_client_ip(request)
    )

    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request format", "details": "Please check your request data"}
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with security logging."""
    if exc.status_code in [400, 401, 403, 404, 422, 429]:
        SecurityUtils.log_security_event(
            "http_exception",
            {
                "status_code": exc.status_code,
                "path": request.url.path,
                "method": request.method
            },
            client_ip=SecurityUtils.get_client_ip(request)
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail if hasattr(exc, 'detail') else "Request failed"}
    )

@app.exception_handler(500)
async def internal_server_error_handler(request: Request, exc: Exception):
    """Handle internal server errors with security logging."""
    SecurityUtils.log_security_event(
        "internal_server_error",
        {
            "path": request.url.path,
            "method": request.method,
            "error_type": type(exc).__name__
        },
        client_ip=SecurityUtils.get_client_ip(request)
    )

    logger.error(f"Internal server error: {exc}")

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )
