"""Render engine façade and the constructed-on-demand default instance."""

from .engine import RenderEngine, get_default_engine, reset_default_engine
from .schemas import RenderRequest

__all__ = ["RenderEngine", "RenderRequest", "get_default_engine", "reset_default_engine"]
