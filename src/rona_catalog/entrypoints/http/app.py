import logging

from fastapi import FastAPI

from rona_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from rona_catalog.entrypoints.http.routes.health import router as health_router
from rona_catalog.entrypoints.http.routes.products import router as products_router

logger = logging.getLogger(__name__)


def build_app() -> FastAPI:
    app = FastAPI(
        title="Rona Catalog API",
        description="""
        Product catalog of an electrical and hydraulic materials store.

        ## Features
        - Search the catalog by category, brand, price range and text
        - Featured products and current offers
        - Product details

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(products_router, prefix="/v1")

    logger.info("Catalog API configured")
    return app


app = build_app()
