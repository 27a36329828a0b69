from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from config import app_config
from constants import ServerConfig, HTTPStatus, ErrorMessages
from dependencies import get_storage_service
from dtos.response import ErrorResponse, FieldError
from exceptions import StorageError
from init_db import init_database
from api import auth, users, artists, albums, songs, playlists, favorites, files, system
from utils.logging_utils import set_logging_context, clear_logging_context
from utils.uuid_helper import generate_uuid
import logging
from logging.handlers import RotatingFileHandler
import sys

# Configure logging with rotating file handler
LOG_DIR = app_config.LOG_DIR
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "groovy.log"

# Create formatters and handlers
log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# File handler with rotation (10MB per file, keep 5 backups)
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding='utf-8'
)
file_handler.setFormatter(log_formatter)
file_handler.setLevel(logging.INFO)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)
console_handler.setLevel(logging.INFO)

# Configure root logger
root_logger = logging.getLogger()
root_logger.setLevel(logging.INFO)
root_logger.addHandler(file_handler)
root_logger.addHandler(console_handler)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")

# Location prefixes FastAPI puts in front of validation error paths
_REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Starting Groovy backend...")

    init_database()

    try:
        get_storage_service().init()
    except StorageError as e:
        logger.error(f"Upload storage unavailable: {e.message}", exc_info=True)
        raise

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title=ServerConfig.API_TITLE,
    description=ServerConfig.API_DESCRIPTION,
    version=ServerConfig.API_VERSION,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_context_middleware(request: Request, call_next):
    """Attach request identifiers to every log line written while serving the request"""
    set_logging_context(request_id=generate_uuid()[:8], method=request.method, path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_logging_context()


def _error_response(request: Request, status: int, message: str, errors=None, headers=None) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        status=status,
        path=request.url.path,
        errors=errors or []
    )
    return JSONResponse(
        status_code=status,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    errors = []
    if isinstance(detail, dict):
        errors = [FieldError(**error) for error in detail.get("errors", [])]
        detail = detail.get("message", ErrorMessages.UNEXPECTED)
    return _error_response(request, exc.status_code, str(detail), errors, getattr(exc, "headers", None))


def _field_name(loc) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(parts)


def _clean_message(message: str) -> str:
    # Messages raised from validators come prefixed by pydantic
    prefix = "Value error, "
    return message[len(prefix):] if message.startswith(prefix) else message


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        FieldError(field=_field_name(error.get("loc", ())), message=_clean_message(error.get("msg", "")))
        for error in exc.errors()
    ]
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {[e.field for e in errors]}")
    return _error_response(request, HTTPStatus.BAD_REQUEST, ErrorMessages.VALIDATION_FAILED, errors)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return _error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, ErrorMessages.UNEXPECTED)


# Include API routers
app.include_router(auth.router, prefix="/api", tags=["auth"])
app.include_router(users.router, prefix="/api", tags=["users"])
app.include_router(artists.router, prefix="/api", tags=["artists"])
app.include_router(albums.router, prefix="/api", tags=["albums"])
app.include_router(songs.router, prefix="/api", tags=["songs"])
app.include_router(playlists.router, prefix="/api", tags=["playlists"])
app.include_router(favorites.router, prefix="/api", tags=["favorites"])
app.include_router(files.router, prefix="/api", tags=["files"])
app.include_router(system.router, prefix="/api", tags=["system"])


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Groovy on http://{app_config.HOST}:{app_config.PORT}...")
    uvicorn.run(app, host=app_config.HOST, port=app_config.PORT)
