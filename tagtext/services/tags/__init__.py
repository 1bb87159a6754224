"""
Tag subsystem — public API.
"""

from tagtext.core.exceptions import InvalidRenderHandler, TagError, UndefinedTagType

from .tag import Tag
from .registry import RenderHandler, TagHandler, TagTypeDefinition, TagTypeRegistry
from .parser import TagParser, parse_tag
from .renderer import Renderer
from .engine import TagEngine, find_spans

__all__ = [
    "Tag",
    "TagTypeDefinition",
    "TagTypeRegistry",
    "TagHandler",
    "RenderHandler",
    "TagParser",
    "parse_tag",
    "Renderer",
    "TagEngine",
    "find_spans",
    "TagError",
    "UndefinedTagType",
    "InvalidRenderHandler",
]
