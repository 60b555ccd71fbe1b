"""
IDOS Storefront - Main FastAPI Application

Single entry point for the cart widget API.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront import config
from storefront.logging import get_logger
from storefront.routers import cart_router, debug_router

logger = get_logger(__name__)


def create_app(debug: bool = config.DEBUG) -> FastAPI:
    app = FastAPI(
        title="IDOS Storefront",
        description="Shopping cart API for the IDOS storefront",
        version="1.0.0",
    )

    # The storefront page is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(cart_router)
    if debug:
        logger.warning("DEBUG enabled: token decoding endpoint is mounted")
        app.include_router(debug_router)

    @app.get("/api/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "ok", "service": "idos-storefront"}

    return app


app = create_app()
