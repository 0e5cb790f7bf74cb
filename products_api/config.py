# products_api/config.py

import os
from typing import Optional

POSTGRES_USER = os.getenv("POSTGRES_USER", "postgres")
POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
POSTGRES_DB = os.getenv("POSTGRES_DB", "products")
POSTGRES_HOST = os.getenv("POSTGRES_HOST", "localhost")
POSTGRES_PORT = os.getenv("POSTGRES_PORT", "5432")

API_PREFIX = "/api/products"
DOCS_PREFIX = "/api-docs"


def get_database_url() -> str:
    """DATABASE_URL wins; otherwise the URL is built from the POSTGRES_* variables."""
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url
    return (
        "postgresql://"
        f"{POSTGRES_USER}:{POSTGRES_PASSWORD}@"
        f"{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}"
    )


def get_frontend_url() -> Optional[str]:
    # Only this origin is allowed through CORS; unset disables the policy.
    return os.getenv("FRONTEND_URL") or None


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_port() -> int:
    return int(os.getenv("PORT", "3000"))


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
