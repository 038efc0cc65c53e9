from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging

from catalog.config import settings
from catalog.db.database import create_repository
from catalog.api import products, categories, health
from catalog.schemas.common import ErrorResponse

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Catalog Service...")
    repository = create_repository(settings)
    app.state.repository = repository
    logger.info(
        f"Catalog loaded: {len(repository.list_categories())} categories, "
        f"{len(repository.list_products())} products"
    )
    logger.info("Catalog Service started successfully")
    yield
    # Shutdown
    logger.info("Shutting down Catalog Service...")


app = FastAPI(
    title="Catalog Service",
    description="""
    Product catalog browsing for the furniture store.

    **Features:**
    - Category listing in navigation order
    - Product listing with category filter, sorting and pagination

    **Responses:**
    Successful responses are wrapped as `{"success": true, "data": ...}`.
    Errors are returned as `{"success": false, "error": {"code": ..., "message": ...}}`.
    """,
    version=settings.app_version,
    lifespan=lifespan,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS", "HEAD"],
    allow_headers=["Authorization", "Content-Type", "Accept", "Origin", "X-Requested-With"],
    max_age=3600,
)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.build(code, message).model_dump()
    )


# Global exception handler for unhandled exceptions
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled exceptions; clients only get a generic 500"""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
        exc_info=exc,
        extra={
            "path": request.url.path,
            "method": request.method,
        }
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "Internal server error"
    )


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle query parameters that cannot be decoded"""
    logger.warning(
        f"Validation error: {exc.errors()}",
        extra={
            "path": request.url.path,
            "method": request.method,
        }
    )
    invalid = ", ".join(
        ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        for error in exc.errors()
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        f"Invalid parameters: {invalid}"
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    code = "NOT_FOUND" if exc.status_code == status.HTTP_404_NOT_FOUND else "HTTP_ERROR"
    return error_response(exc.status_code, code, str(exc.detail))


# Include routers
app.include_router(health.router)
app.include_router(products.router, prefix=settings.api_prefix)
app.include_router(categories.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {"service": settings.app_name, "version": settings.app_version}
