"""
Exception handlers for FastAPI applications hosting the configuration service.
Maps configuration errors to HTTP responses.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from .exceptions import (
    InvalidArgumentException,
    ParameterNotFoundException,
    UnexpectedConfigurationException
)


def register_exception_handlers(app: FastAPI) -> None:
    """Register configuration exception handlers with the FastAPI application."""

    @app.exception_handler(InvalidArgumentException)
    async def handle_invalid_argument(request: Request, exc: InvalidArgumentException):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid Argument", "message": exc.message}
        )

    @app.exception_handler(ParameterNotFoundException)
    async def handle_not_found(request: Request, exc: ParameterNotFoundException):
        return JSONResponse(
            status_code=404,
            content={"error": "Not Found", "message": exc.message}
        )

    @app.exception_handler(UnexpectedConfigurationException)
    async def handle_unexpected(request: Request, exc: UnexpectedConfigurationException):
        return JSONResponse(
            status_code=502,
            content={"error": "Configuration Unavailable", "message": "Failed to read configuration"}
        )
