"""Engine request schemas."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..definitions import RenderContext
from ..renderers import RendererCategory


class RenderRequest(BaseModel):
    """One item of a batch render: which category, what definition, which value."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    category: RendererCategory
    definition: Any = Field(
        ...,
        description="Definition model or mapping with at least a 'type' key",
    )
    value: Any = Field(
        default=None,
        description="Runtime value (data for views/groups, value for fields/data)",
    )
    context: Optional[RenderContext] = Field(
        default=None,
        description="Per-item context; falls back to the batch context",
    )
