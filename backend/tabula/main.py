"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tabula.api.v1 import auth, records, tables
from tabula.core.config import settings
from tabula.core.logging import get_logger, setup_logging
from tabula.services.errors import (
    NotFoundOrUnauthorizedError,
    RecordValidationError,
    SchemaDefinitionError,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging("DEBUG" if settings.APP_ENV == "development" else "INFO")
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Tabula API",
    description="User-defined tables with schema-validated records",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─── Service error mapping ────────────────────────────────
async def _record_validation_handler(request: Request, exc: RecordValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})


async def _schema_definition_handler(request: Request, exc: SchemaDefinitionError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


async def _not_found_handler(request: Request, exc: NotFoundOrUnauthorizedError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message})


app.add_exception_handler(RecordValidationError, _record_validation_handler)
app.add_exception_handler(SchemaDefinitionError, _schema_definition_handler)
app.add_exception_handler(NotFoundOrUnauthorizedError, _not_found_handler)

API_PREFIX = "/api/v1"
app.include_router(auth.router, prefix=API_PREFIX)
app.include_router(tables.router, prefix=API_PREFIX)
app.include_router(records.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
