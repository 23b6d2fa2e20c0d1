"""schema-render API - render definitions over HTTP.

The service holds one default render engine with the built-in renderers
and one HTML component map:
- Renderer discovery per category
- Definition rendering to descriptors (wire form) or HTML
- Component map listing
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schema_render import __version__
from schema_render.api.routes import components, render, renderers
from schema_render.builtins import register_builtin_renderers
from schema_render.config import get_settings
from schema_render.engine import get_default_engine
from schema_render.html import get_component_registry

# Configure logging
logging.basicConfig(
    level=getattr(logging, get_settings().log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: register built-ins on the default engine
    logger.info("Registering built-in renderers...")
    engine = get_default_engine()
    if engine.get_renderer_stats().total == 0:
        register_builtin_renderers(engine)
    stats = engine.get_renderer_stats()
    logger.info(f"Loaded {stats.total} renderers: {stats.counts()}")

    logger.info("Loading component map...")
    component_registry = get_component_registry()
    logger.info(f"Loaded {component_registry.count()} components")

    logger.info("schema-render API ready")
    yield
    # Shutdown
    logger.info("Shutting down schema-render API")


# Create FastAPI app
app = FastAPI(
    title="schema-render API",
    description="""
## Render resolution service

Send a definition and a value, get back a render descriptor or HTML.

### Key Endpoints

- `GET /v1/renderers` - Registered renderers per category
- `GET /v1/renderers/{category}` - Registered types for one category
- `POST /v1/render/{category}` - Render a definition to a descriptor
- `POST /v1/render/{category}/html` - Render a definition to HTML
- `GET /v1/components` - Registered component ids
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
app.include_router(renderers.router, prefix="/v1")
app.include_router(render.router, prefix="/v1")
app.include_router(components.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "schema-render API",
        "version": __version__,
        "description": "Render resolution for schema-driven UIs",
        "docs": "/docs",
        "endpoints": {
            "renderers": "/v1/renderers",
            "render": "/v1/render/{category}",
            "render_html": "/v1/render/{category}/html",
            "components": "/v1/components",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    stats = get_default_engine().get_renderer_stats()
    return {
        "status": "healthy",
        "renderers_loaded": stats.total,
        "renderers_by_category": stats.counts(),
        "components_loaded": get_component_registry().count(),
    }
