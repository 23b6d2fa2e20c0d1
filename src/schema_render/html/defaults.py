"""Default component map for the HTML binding."""

import logging
from typing import Optional

from ..components.registry import ComponentRegistry
from .elements import HTML_TAGS, html_component

logger = logging.getLogger(__name__)


def create_default_component_map(registry: Optional[ComponentRegistry] = None) -> ComponentRegistry:
    """Register an Element factory for every standard HTML tag.

    Args:
        registry: Registry to fill; a new one is created when omitted

    Returns:
        The filled registry
    """
    registry = registry if registry is not None else ComponentRegistry()
    registry.register_components({tag: html_component(tag) for tag in HTML_TAGS})
    logger.debug(f"Registered {len(HTML_TAGS)} HTML components")
    return registry


# Global component registry instance
_registry: Optional[ComponentRegistry] = None


def get_component_registry() -> ComponentRegistry:
    """Get the process component registry, filled with the HTML tags on first use."""
    global _registry
    if _registry is None:
        _registry = create_default_component_map()
        logger.info(f"Created default component registry with {_registry.count()} components")
    return _registry


def reset_component_registry() -> None:
    """Drop the process component registry."""
    global _registry
    _registry = None
