"""Caller-side error recovery for rendering.

The engine and converter let renderer exceptions propagate. Callers that
would rather show something than fail wrap the call in error_boundary(),
which logs the exception and returns an error Element in its place.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from .elements import Element

logger = logging.getLogger(__name__)

ERROR_STYLE = {
    "padding": "20px",
    "margin": "20px 0",
    "border": "1px solid #f5c6cb",
    "border-radius": "4px",
    "background-color": "#f8d7da",
    "color": "#721c24",
}

ErrorFallback = Callable[[BaseException], Any]


def error_element(error: BaseException, title: str = "Render error") -> Element:
    """Default error UI: a styled block with a heading and the message."""
    return Element(
        tag="div",
        props={"class": "render-error", "style": ERROR_STYLE, "role": "alert"},
        children=[
            Element(tag="h3", children=[title]),
            Element(tag="p", children=[str(error) or type(error).__name__]),
        ],
    )


def error_boundary(
    fn: Callable[..., Any],
    *args: Any,
    fallback: Optional[ErrorFallback] = None,
    **kwargs: Any,
) -> Any:
    """Call fn(*args, **kwargs); on an exception, log it and return an error element.

    Args:
        fn: The render call to protect
        fallback: Builds the replacement from the exception (default error_element)
    """
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        logger.error(f"Render failed in {getattr(fn, '__name__', fn)!s}: {e}", exc_info=True)
        return (fallback or error_element)(e)


async def aerror_boundary(
    fn: Callable[..., Awaitable[Any]],
    *args: Any,
    fallback: Optional[ErrorFallback] = None,
    **kwargs: Any,
) -> Any:
    """Async variant of error_boundary() for coroutine functions."""
    try:
        return await fn(*args, **kwargs)
    except Exception as e:
        logger.error(f"Render failed in {getattr(fn, '__name__', fn)!s}: {e}", exc_info=True)
        return (fallback or error_element)(e)
