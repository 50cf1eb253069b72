from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.gzip import GZipMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from datetime import datetime, timezone
import logging

# .env must be loaded before settings are read
load_dotenv()

from .config import MAX_IMAGES_PER_CUSTOMER, settings
from .database import create_db_and_tables
from .exceptions import http_exception_handler, validation_exception_handler
from .middleware import ErrorHandlingMiddleware, LoggingMiddleware, SecurityMiddleware, RequestSizeLimitMiddleware
from .routers import customers_router, images_router
from .schemas.common.common import ApiResponse, HealthStatus

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format=settings.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} starting, image storage: {settings.IMAGE_STORAGE_MODE}")
    app.state.database_error = None
    try:
        create_db_and_tables()
    except Exception as e:
        # Stay up so /health can report the failure
        app.state.database_error = str(e)
        logger.exception("Could not create database tables")
    yield
    logger.info(f"{settings.APP_NAME} stopped")


def _install_middleware(application: FastAPI) -> None:
    # Added innermost first; CORS ends up outermost
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(LoggingMiddleware)
    application.add_middleware(SecurityMiddleware)
    application.add_middleware(RequestSizeLimitMiddleware)
    application.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


docs_enabled = settings.DOCS_ENABLED
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url="/docs" if docs_enabled else None,
    redoc_url="/redoc" if docs_enabled else None,
    openapi_url="/openapi.json" if docs_enabled else None,
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
_install_middleware(app)

app.include_router(customers_router.router)
app.include_router(images_router.router)


@app.get("/health", response_model=ApiResponse[HealthStatus])
def health_check():
    database_error = getattr(app.state, "database_error", None)
    status = HealthStatus(
        status="degraded" if database_error else "healthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        timestamp=datetime.now(timezone.utc),
        image_storage=settings.IMAGE_STORAGE_MODE,
        max_images_per_customer=MAX_IMAGES_PER_CUSTOMER,
        database_error=database_error,
    )
    return ApiResponse.ok(status, "Service is running" if not database_error else "Database unavailable")
