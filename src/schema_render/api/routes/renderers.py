"""API routes for renderer discovery.

Consumers fetch the registered renderer types per category to learn which
definitions the service can render.
"""

import logging

from fastapi import APIRouter, HTTPException

from schema_render.engine import get_default_engine
from schema_render.renderers import RendererCategory, RendererStats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/renderers", tags=["renderers"])


def parse_category(category: str) -> RendererCategory:
    """Parse a path category or raise 404."""
    try:
        return RendererCategory(category)
    except ValueError:
        raise HTTPException(
            status_code=404,
            detail=f"Category '{category}' not found. Available: {[c.value for c in RendererCategory]}",
        )


@router.get("", response_model=RendererStats)
async def list_renderers():
    """Registered renderer count and types for every category."""
    return get_default_engine().get_renderer_stats()


@router.get("/{category}")
async def list_category_types(category: str):
    """Registered renderer types for one category."""
    parsed = parse_category(category)
    types = sorted(get_default_engine().get_available_types(parsed))
    return {"category": parsed.value, "count": len(types), "types": types}
