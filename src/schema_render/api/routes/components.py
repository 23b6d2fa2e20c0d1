"""API routes for the component map."""

from fastapi import APIRouter

from schema_render.html import get_component_registry

router = APIRouter(prefix="/components", tags=["components"])


@router.get("")
async def list_components():
    """Registered component ids, sorted."""
    registry = get_component_registry()
    return {"count": registry.count(), "components": registry.list_ids()}
