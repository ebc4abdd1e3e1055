"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cutstock import __version__
from cutstock.web.exceptions import register_exception_handlers
from cutstock.web.routers import optimize_router, validate_router


def create_app() -> FastAPI:
    """Build the API: optimizers and validation under /api/v1, plus /health."""
    app = FastAPI(
        title="Cutting Stock API",
        description="REST API for bar cut list and panel nesting optimization",
        version=__version__,
    )

    # Layout viewers post jobs from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(optimize_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": __version__}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
