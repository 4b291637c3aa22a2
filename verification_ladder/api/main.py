"""Verification Ladder API - static verification-rigor analysis.

This API exposes the analysis core without executing any submitted code:
- Schema inference and schema expression emission from sample payloads
- Keyword risk classification against the 6-level verification ladder
- Module analysis, coverage reports and validation-error formatting
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from verification_ladder import __version__
from verification_ladder.api.routes import boundaries, levels, reports, risks, schemas, validation
from verification_ladder.boundaries.registry import get_boundary_registry
from verification_ladder.levels.registry import get_level_registry
from verification_ladder.risks.registry import get_risk_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Pre-load all registries
    logger.info("Loading verification level catalog...")
    level_registry = get_level_registry()
    logger.info(f"Loaded {level_registry.count()} levels")

    logger.info("Loading risk pattern table...")
    risk_stats = get_risk_registry().get_stats()
    logger.info(f"Loaded {risk_stats['categories_loaded']} risk categories, {risk_stats['total_keywords']} keywords")

    logger.info("Loading boundary patterns...")
    boundary_registry = get_boundary_registry()
    logger.info(f"Loaded {boundary_registry.count()} boundary patterns")

    logger.info("Verification Ladder API ready")
    yield
    # Shutdown
    logger.info("Shutting down Verification Ladder API")


# Create FastAPI app
app = FastAPI(
    title="Verification Ladder API",
    description="""
## Static Verification Analysis

Infers validation schemas from example data and recommends verification
levels for source modules. Nothing submitted is executed.

### Key Endpoints

- `POST /v1/schemas/emit` - Schema expression for a sample payload
- `POST /v1/risks/analyze` - Recommended verification level for source text
- `POST /v1/reports/analyze` - Analyze several modules at once
- `POST /v1/reports/coverage` - Markdown coverage report
- `GET /v1/levels` - The verification ladder
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(schemas.router, prefix="/v1")
app.include_router(levels.router, prefix="/v1")
app.include_router(risks.router, prefix="/v1")
app.include_router(reports.router, prefix="/v1")
app.include_router(validation.router, prefix="/v1")
app.include_router(boundaries.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Verification Ladder API",
        "version": __version__,
        "description": "Static verification-rigor analysis",
        "docs": "/docs",
        "endpoints": {
            "schemas": "/v1/schemas",
            "levels": "/v1/levels",
            "risks": "/v1/risks",
            "reports": "/v1/reports",
            "validation": "/v1/validation",
            "boundaries": "/v1/boundaries",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "levels_loaded": get_level_registry().count(),
        "risk_categories_loaded": get_risk_registry().count(),
        "boundary_patterns_loaded": get_boundary_registry().count(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "verification_ladder.api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
