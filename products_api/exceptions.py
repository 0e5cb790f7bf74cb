# products_api/exceptions.py

import logging
from typing import Any, Dict

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .schemas import REQUIRED_MESSAGES

logger = logging.getLogger(__name__)

# FastAPI request locations as reported to clients.
LOCATIONS = {"path": "params", "query": "query", "body": "body"}

PARAM_MESSAGES = {"id": "Product ID must be a number"}


def format_error(error: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten one pydantic error into ``{type, value, msg, path, location}``."""
    location, *field = error["loc"]
    path = ".".join(str(part) for part in field)
    msg = error["msg"]

    if location == "path":
        msg = PARAM_MESSAGES.get(path, msg)
    elif error["type"] == "json_invalid":
        msg, path = "Malformed JSON body", ""
    elif error["type"] == "missing":
        msg = REQUIRED_MESSAGES.get(path, "Request body is required" if not path else msg)

    formatted: Dict[str, Any] = {"type": "field"}
    if error["type"] != "missing" and "input" in error:
        formatted["value"] = error["input"]
    formatted.update(
        {"msg": msg, "path": path, "location": LOCATIONS.get(location, location)}
    )
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [format_error(error) for error in exc.errors()]
    logger.info(
        f"Product Service: Rejected {request.method} {request.url.path} with {len(errors)} validation error(s)."
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"errors": errors}),
    )
