"""
Error taxonomy for the recipe store and its mapping onto HTTP.

Services raise subclasses of ``RecipeStoreError``; each carries the
HTTP status code and a human readable ``detail``.  The handlers
registered by ``register_exception_handlers`` turn them into JSON
responses of the form ``{"detail": "..."}``.

Request bodies that fail pydantic validation never reach the service
layer.  FastAPI reports them as ``RequestValidationError`` (422 by
default); they are remapped here to 400 so that every shape or
required-field problem is surfaced as invalid input.
"""

import logging
from typing import Any, Dict, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class RecipeStoreError(Exception):
    """Base exception for all recipe store errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)

    def as_dict(self) -> Dict[str, Any]:
        """Return the error as a dictionary for API responses."""
        return {"detail": self.detail}


class InvalidInputError(RecipeStoreError):
    """The request body does not satisfy the contract of the operation."""

    status_code = status.HTTP_400_BAD_REQUEST


class RecipeNotFoundError(RecipeStoreError):
    """No recipe with the requested id exists in the collection."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe {recipe_id} not found")


def describe_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Build a single readable message out of pydantic error entries.

    Missing fields are reported as ``Missing `field` in request body``;
    everything else as ``Invalid `field`: <pydantic message>``.
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field_name = ".".join(loc)
        if error.get("type") == "json_invalid":
            messages.append("Request body is not valid JSON")
        elif error.get("type") == "missing":
            if field_name:
                messages.append(f"Missing `{field_name}` in request body")
            else:
                messages.append("Missing request body")
        elif field_name:
            messages.append(f"Invalid `{field_name}`: {error.get('msg', 'invalid value')}")
        else:
            messages.append(f"Invalid request body: {error.get('msg', 'invalid value')}")
    return "; ".join(messages) or "Invalid request body"


async def recipe_store_error_handler(request: Request, exc: RecipeStoreError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=exc.as_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = describe_validation_errors(exc.errors())
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers above to ``app``."""
    app.add_exception_handler(RecipeStoreError, recipe_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
