# backend/economy/main.py

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

# --- Setup Logging First ---
from economy.core.logging_config import setup_logging

setup_logging()

# Get a logger for this module *after* setup is complete.
logger = logging.getLogger(__name__)

from economy import models  # noqa: E402,F401  (registers the tables on Base.metadata)
from economy.api.api_router import api_router  # noqa: E402
from economy.core.config import settings  # noqa: E402
from economy.core.errors import EconomyError, MissingParameter, StoreFailure  # noqa: E402
from economy.db import base_class  # noqa: E402
from economy.db import session as db_session  # noqa: E402
from economy.reference_data import load_reference_data  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    logger.info("--- Application Startup Initiated ---")

    # 1. Reference data (read-only for the life of the process)
    app.state.reference_data = load_reference_data(settings.REFERENCE_DATA_DIR)

    # 2. Database engine and session factory
    logger.info("Initializing database engine...")
    try:
        engine = db_session.create_db_engine_with_retries(settings.DATABASE_URL)
    except Exception as e:
        logger.critical(f"Failed to create database engine: {e}. Shutting down.")
        sys.exit(1)
    app.state.engine = engine
    app.state.session_factory = db_session.make_session_factory(engine)

    # 3. Tables
    logger.info("Creating database tables...")
    try:
        base_class.Base.metadata.create_all(bind=engine)
        logger.info("Database tables verified/created successfully.")
    except SQLAlchemyError as e:
        logger.critical(f"Error creating database tables: {e}", exc_info=True)
        sys.exit(1)

    logger.info("--- Application Startup Complete ---")

    yield  # The application is now running and accepting requests

    # --- SHUTDOWN ---
    logger.info("--- Application Shutdown Initiated ---")
    engine.dispose()
    logger.info("Database engine disposed.")
    logger.info("--- Application Shutdown Complete ---")


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# --- MIDDLEWARE ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH"],
    allow_headers=["accept", "authorization", "content-type", "x-requested-with", "x-pass-key"],
)


# --- ERROR HANDLERS ---
def _error_response(error: EconomyError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"detail": error.message, "code": error.code})


@app.exception_handler(EconomyError)
async def economy_error_handler(request: Request, exc: EconomyError):
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected ({exc.code}): {exc.message}")
    return _error_response(exc)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"{request.method} {request.url.path} hit a database error: {exc}", exc_info=exc)
    return _error_response(StoreFailure("Internal server error"))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields = ", ".join(".".join(str(part) for part in error["loc"][1:]) or "body" for error in exc.errors())
    logger.warning(f"{request.method} {request.url.path} rejected: invalid or missing {fields}")
    return _error_response(MissingParameter(f"Not all required values were provided: {fields}"))


# --- ROUTERS ---
app.include_router(api_router, prefix=settings.API_PREFIX)
logger.info("API routers included.")
