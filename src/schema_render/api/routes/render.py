"""API routes for rendering definitions.

POST a definition and a value; get back the render descriptor in wire form,
or the converted tree as HTML.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field, ValidationError

from schema_render.components import DescriptorConverter
from schema_render.descriptors import RenderDescriptor
from schema_render.engine import get_default_engine
from schema_render.errors import RendererNotFound
from schema_render.html import get_component_registry, render_html
from schema_render.renderers import RendererCategory

from .renderers import parse_category

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/render", tags=["render"])


class RenderBody(BaseModel):
    """Request body for a single render."""

    definition: dict[str, Any] = Field(..., description="Definition with at least a 'type' key")
    value: Any = Field(default=None, description="Runtime value or record data")
    context: Optional[dict[str, Any]] = Field(default=None, description="Render context (theme, mode, locale)")


async def _render(category: RendererCategory, body: RenderBody) -> RenderDescriptor:
    engine = get_default_engine()
    try:
        context = (
            engine.create_context(**body.context)
            if body.context is not None
            else engine.create_context()
        )
        return await engine.arender(category, body.definition, body.value, context)
    except RendererNotFound as e:
        raise HTTPException(
            status_code=404,
            detail=f"{e}. Available: {sorted(engine.get_available_types(category))}",
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))


@router.post("/{category}")
async def render_definition(category: str, body: RenderBody):
    """Render a definition to a descriptor (callable props are dropped)."""
    parsed = parse_category(category)
    descriptor = await _render(parsed, body)
    return descriptor.to_wire()


@router.post("/{category}/html", response_class=HTMLResponse)
async def render_definition_html(category: str, body: RenderBody):
    """Render a definition and convert it with the HTML component map."""
    parsed = parse_category(category)
    descriptor = await _render(parsed, body)
    converter = DescriptorConverter(get_component_registry())
    return HTMLResponse(render_html(converter.convert(descriptor)))
