"""
Renderer — dispatch a parsed Tag to the handler registered for its type.

The handler's return value is passed back unchanged: no escaping, no
trimming.  Exceptions raised by the handler itself propagate as they are.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from tagtext.core.exceptions import InvalidRenderHandler

from .registry import TagTypeRegistry
from .tag import Tag

logger = logging.getLogger(__name__)


def resolve_handler(handler: object) -> Optional[Callable[[Tag], str]]:
    """Return the callable behind *handler*, or None if it cannot render."""
    render = getattr(handler, "render", None)
    if callable(render):
        return render
    if callable(handler):
        return handler
    return None


class Renderer:
    def __init__(self, registry: TagTypeRegistry) -> None:
        self._registry = registry

    def render(self, tag: Tag) -> str:
        """
        Render *tag* with its type's handler.

        Raises InvalidRenderHandler if the type is not registered or has
        no usable handler.
        """
        definition = self._registry.lookup(tag.type)
        fn = resolve_handler(definition.handler if definition else None)
        if fn is None:
            raise InvalidRenderHandler(tag.type)
        logger.debug("Rendering tag %s", tag.type)
        return fn(tag)
