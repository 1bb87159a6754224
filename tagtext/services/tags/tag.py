"""
Tag — the parsed, read-only form of one inline tag.

    (image: photo.jpg alt: A sunset)
    → Tag(type="image", value="photo.jpg", attrs={"alt": "A sunset"})

``data`` and ``options`` are supplied by the caller and passed through to
the render handler untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from .registry import TagTypeRegistry


def _frozen(mapping: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Tag:
    type: str
    value: str = ""
    attrs: Mapping[str, str] = field(default_factory=dict)
    data: Mapping[str, Any] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value or "")
        object.__setattr__(self, "attrs", _frozen(self.attrs))
        object.__setattr__(self, "data", _frozen(self.data))
        object.__setattr__(self, "options", _frozen(self.options))

    # ------------------------------------------------------------- accessors

    def get(self, name: str) -> Optional[str]:
        """Stored value for *name*, or None when the attribute was not given."""
        return self.attrs.get(name)

    def attr(self, name: str, fallback: Any = None) -> Any:
        """Like get(), but returns *fallback* when absent.  ``""`` is a value."""
        if name in self.attrs:
            return self.attrs[name]
        return fallback

    def has(self, name: str) -> bool:
        return name in self.attrs

    def __getitem__(self, name: str) -> str:
        return self.attrs[name]

    # ---------------------------------------------------------------- render

    def render(self, registry: "TagTypeRegistry") -> str:
        from .renderer import Renderer
        return Renderer(registry).render(self)
