"""
AssetScan Engine Microservice
Main FastAPI application
"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse
import logging
import sys

from assetscan import __version__
from assetscan.config import settings
from assetscan.router.classify import Catalogs, router as classify_router
from assetscan.services.catalog_loader import (
    InvalidCatalogError,
    load_asset_catalog,
    load_equipment_catalog,
)
from assetscan.services.key_hashing import KeyHashRegistry

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="AssetScan Engine",
    description="Asset type and equipment classification from OCR text",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.state.catalogs = None
app.state.key_registry = KeyHashRegistry(digest_bytes=settings.digest_bytes)

# Include routers
app.include_router(classify_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    catalogs = app.state.catalogs
    return {
        "status": "healthy",
        "service": "assetscan-engine",
        "version": __version__,
        "catalogs_loaded": catalogs is not None,
        "asset_rules": len(catalogs.asset_rules) if catalogs else 0,
        "equipment_entries": len(catalogs.equipment_catalog) if catalogs else 0
    }


@app.on_event("startup")
async def startup_event():
    """Load pattern catalogs"""
    logger.info("AssetScan Engine starting up...")
    try:
        app.state.catalogs = Catalogs(
            asset_rules=load_asset_catalog(settings.asset_catalog_path),
            equipment_catalog=load_equipment_catalog(settings.equipment_catalog_path)
        )
        logger.info("Patterns loaded successfully.")
    except InvalidCatalogError as e:
        logger.error(f"Failed to load patterns: {e}")
        app.state.catalogs = None
    logger.info("Startup complete!")


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error": str(exc) if settings.debug else "An error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "assetscan.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level
    )
