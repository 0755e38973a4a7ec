"""Global exception handlers for FastAPI."""

import logging

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from api.base import error_response, ErrorCodes

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the app.

    Actions turn validation and persistence failures into form state, so the
    only handler is the catch-all: the error boundary for failures they do not
    convert, e.g. unrecognized sign-in errors.
    """

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_response(
                ErrorCodes.INTERNAL_ERROR,
                "An internal error occurred",
            ).model_dump(mode="json"),
        )
