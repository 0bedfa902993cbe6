"""
WorldMonitor OG image service FastAPI application entry point.
This service renders story preview images for social link sharing.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .routes import og_routes
from .utils.debug import print_step


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application for the OG image service.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="WorldMonitor OG Image Service",
        version="1.0.0",
        description="Dynamic Open Graph story images rendered as SVG",
        debug=settings.DEBUG
    )

    print_step("CORS Configuration", {"origins": settings.ALL_CORS_ORIGINS}, "input")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALL_CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["Content-Type"],
    )

    @app.get("/")
    def read_root():
        return {"status": "WorldMonitor OG Image Service is online", "service": "og"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "service": "og"}

    app.include_router(og_routes.router)
    print_step("FastAPI App Initialization", "FastAPI app, CORS middleware and OG routes configured", "output")

    return app


app = create_app()

print_step("OG Service Startup", {
    "endpoints": [
        "GET  /              - Health check",
        "GET  /health        - Health check",
        "GET  /api/og-story  - Story preview image (SVG)",
    ],
    "debug": settings.DEBUG,
}, "info")
