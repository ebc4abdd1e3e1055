"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cutstock.application.config import ConfigError


class OptimizationError(Exception):
    """Raised when an optimization request is rejected before running."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Optimization failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(OptimizationError)
    async def optimization_error_handler(
        request: Request, exc: OptimizationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Optimization request is invalid",
                "error_type": "optimization",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_value",
                "details": None,
            },
        )
