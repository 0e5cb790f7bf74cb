# products_api/__main__.py

"""
Command-line entry point.

    python -m products_api            # serve on $HOST:$PORT (default 0.0.0.0:3000)
    python -m products_api --clear    # drop and recreate the products table
"""

import argparse
import logging
import sys

import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from . import config
from .db import Database
from .main import create_app
from .repository import reset_products

logger = logging.getLogger("products_api")


def clear_database(database: Database) -> int:
    try:
        reset_products(database)
    except SQLAlchemyError as e:
        logger.error(f"Product Service: Error clearing the database: {e}")
        return 1
    finally:
        database.dispose()
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="products_api", description="Products REST API")
    parser.add_argument(
        "--clear", action="store_true", help="drop and recreate the products table, then exit"
    )
    parser.add_argument("--host", default=config.get_host())
    parser.add_argument("--port", type=int, default=config.get_port())
    args = parser.parse_args(argv)

    database = Database(config.get_database_url())
    if args.clear:
        return clear_database(database)

    logger.info(f"Product Service: Server is running on port {args.port}")
    uvicorn.run(create_app(database), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
