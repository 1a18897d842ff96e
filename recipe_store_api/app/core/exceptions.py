"""
Error taxonomy for the Recipe Store API.

Services raise the exceptions defined here; the handlers registered by
``create_app`` turn them into JSON responses of the form
``{"detail": "...", "field": "..."}``.  Request bodies rejected by
pydantic are folded into the same shape (and the same 400 status) by
``request_validation_error_handler``.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RecipeStoreError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "field": self.field}


class ValidationError(RecipeStoreError):
    """A required field is missing or invalid, or the ids disagree."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(RecipeStoreError):
    """No recipe exists with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


def validation_error_from_pydantic(errors: Sequence[Dict[str, Any]]) -> ValidationError:
    """Build a ``ValidationError`` from the first pydantic error.

    Only the first error is reported, which is enough for a client to
    identify the failing field.  The ``loc`` tuple of a body error
    starts with ``"body"``; the following item is the field name.
    """
    if not errors:
        return ValidationError("Invalid request body")
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    error_type = error.get("type", "")

    if error_type == "json_invalid":
        return ValidationError("Malformed JSON in request body")
    if not loc:
        if error_type == "missing":
            return ValidationError("Missing request body")
        return ValidationError(f"Invalid request body: {error.get('msg', 'invalid value')}")

    field = loc[0]
    if error_type == "missing":
        return ValidationError(f"Missing `{field}` in request body", field=field)
    # For list items the location also carries the index, e.g. ingredients.1
    where = ".".join(loc)
    return ValidationError(f"Invalid `{where}`: {error.get('msg', 'invalid value')}", field=field)


async def recipe_store_error_handler(request: Request, exc: RecipeStoreError) -> JSONResponse:
    logger.warning("%s %s failed with %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Respond 400 with a message naming the offending field."""
    return await recipe_store_error_handler(request, validation_error_from_pydantic(exc.errors()))
