# products_api/main.py

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from . import config
from .db import Database
from .exceptions import validation_exception_handler
from .models import Product  # noqa: F401  registers the products table
from .routes import router

# --- Standard Logging Configuration ---
logging.basicConfig(
    level=config.get_log_level(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)
access_logger = logging.getLogger("products_api.access")

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)


def connect_to_db(database: Database) -> bool:
    """Check the connection once and create missing tables.

    Failures are logged and swallowed: the service keeps running and requests
    fail at the data-access layer until storage is reachable.
    """
    try:
        database.ping()
        database.create_tables()
    except SQLAlchemyError as e:
        logger.error(f"Product Service: Unable to connect to the database: {e}")
        return False
    logger.info("Product Service: Connection has been established successfully.")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    await run_in_threadpool(connect_to_db, database)
    yield
    logger.info("Product Service: Shutting down, closing database connections.")
    database.dispose()


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    access_logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.3f} ms"
    )
    return response


def create_app(
    database: Optional[Database] = None, frontend_url: Optional[str] = None
) -> FastAPI:
    """Build the Products API around an explicit database handle.

    When ``database`` or ``frontend_url`` is omitted it is taken from the
    environment (DATABASE_URL / POSTGRES_*, FRONTEND_URL).
    """
    if database is None:
        database = Database(config.get_database_url())
    if frontend_url is None:
        frontend_url = config.get_frontend_url()

    app = FastAPI(
        title="REST API Python / FastAPI",
        description="API Documentation",
        version="1.0.0",
        docs_url=config.DOCS_PREFIX,
        openapi_url=f"{config.DOCS_PREFIX}/openapi.json",
        redoc_url=None,
        swagger_ui_parameters={"layout": "BaseLayout"},
        openapi_tags=[{"name": "Products", "description": "Products related endpoints"}],
        lifespan=lifespan,
    )
    app.state.database = database

    if frontend_url:
        # Only the configured frontend may call the API from a browser.
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[frontend_url],
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.info(f"Product Service: CORS enabled for origin {frontend_url}")

    app.middleware("http")(log_requests)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(router, prefix=config.API_PREFIX)
    return app
