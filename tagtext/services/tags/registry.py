"""
TagTypeRegistry — table of tag types, their attribute names and handlers.

A handler is either a plain callable or an object with a ``render`` method:
    def image(tag: Tag) -> str
    class Image:
        def render(self, tag: Tag) -> str

Register directly:
    registry.define("image", attrs=("alt", "link"), handler=image)

or with the decorator:
    @registry.handler("image", attrs=("alt", "link"))
    def image(tag):
        return f'<img src="{tag.value}" alt="{tag.attr("alt", "")}">'

Registration normally happens once at start-up.  Writers are serialised and
swap in a fresh table, so lookups never need the lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Protocol, Union, runtime_checkable

from tagtext.core.exceptions import UndefinedTagType

from .tag import Tag

logger = logging.getLogger(__name__)


@runtime_checkable
class TagHandler(Protocol):
    def render(self, tag: Tag) -> str: ...


RenderHandler = Union[Callable[[Tag], str], TagHandler]


@dataclass(frozen=True)
class TagTypeDefinition:
    """One tag type: the attribute markers it recognises and its handler."""

    name: str
    attrs: tuple[str, ...] = ()
    handler: Optional[Any] = None

    def __post_init__(self) -> None:
        attrs = (self.attrs,) if isinstance(self.attrs, str) else tuple(self.attrs)
        object.__setattr__(self, "attrs", attrs)

    @property
    def attribute_names(self) -> frozenset[str]:
        return frozenset(self.attrs)


class TagTypeRegistry:
    def __init__(self) -> None:
        self._types: dict[str, TagTypeDefinition] = {}
        self._write_lock = threading.Lock()

    # ---------------------------------------------------------------- register

    def register(self, name: str, definition: TagTypeDefinition) -> TagTypeDefinition:
        """Insert or replace the definition stored under *name*."""
        with self._write_lock:
            types = dict(self._types)
            types[name] = definition
            self._types = types
        logger.debug(
            "Registered tag type: %s (attrs=%s, handler=%s)",
            name, ",".join(definition.attrs), definition.handler is not None,
        )
        return definition

    def define(
        self,
        name: str,
        attrs: Iterable[str] = (),
        handler: Optional[RenderHandler] = None,
    ) -> TagTypeDefinition:
        return self.register(name, TagTypeDefinition(name, attrs, handler))

    def handler(self, name: str, attrs: Iterable[str] = ()):
        """
        Decorator that registers a function as the handler for *name*.

        Usage::

            @registry.handler("link", attrs=("text", "rel"))
            def link(tag):
                return f'<a href="{tag.value}">{tag.attr("text", tag.value)}</a>'
        """
        def decorator(fn: RenderHandler) -> RenderHandler:
            self.define(name, attrs, fn)
            return fn
        return decorator

    # ------------------------------------------------------------------ lookup

    def lookup(self, name: str) -> Optional[TagTypeDefinition]:
        """Exact, case-sensitive lookup.  Returns None for unknown types."""
        return self._types.get(name)

    def require(self, name: str) -> TagTypeDefinition:
        definition = self._types.get(name)
        if definition is None:
            raise UndefinedTagType(name)
        return definition

    def has(self, name: str) -> bool:
        return name in self._types

    def attribute_names(self, name: str) -> tuple[str, ...]:
        return self.require(name).attrs

    # ---------------------------------------------------------------- factory

    def new_tag(
        self,
        type: str,
        value: str = "",
        attrs: Optional[Mapping[str, str]] = None,
        data: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Tag:
        """Build a Tag without parsing, keeping only declared attributes."""
        definition = self.require(type)
        declared = definition.attribute_names
        kept: dict[str, str] = {}
        for key, val in (attrs or {}).items():
            if key in declared:
                kept[key] = val
            else:
                logger.warning("Dropping undeclared attribute %r for tag type %s", key, type)
        return Tag(type, value, kept, data or {}, options or {})

    # ---------------------------------------------------------- introspection

    def registered_names(self) -> list[str]:
        return sorted(self._types)

    def definitions(self) -> list[TagTypeDefinition]:
        return [self._types[name] for name in self.registered_names()]
