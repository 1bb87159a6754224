"""
TagParser
=========
Splits one raw tag string into type, primary value and attributes.

    test: test value a: attrA b: attrB
    → type="test", value="test value", attrs={"a": "attrA", "b": "attrB"}

Rules
-----
1. Everything before the first colon is the type; it must be registered.
2. Only names declared for that type start an attribute (``name:``).
   Any other ``word:`` is ordinary text and stays inside the segment it
   appears in:

       test: x a: attrA c: attrC b: attrB  →  a="attrA c: attrC", b="attrB"

3. Space after a colon is optional (``a:x`` ≡ ``a: x``).  Every segment
   is stripped of surrounding whitespace.
4. A repeated attribute keeps its last occurrence.
5. One pair of enclosing parentheses is tolerated: ``(test: x)``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Mapping, Optional

from .registry import TagTypeRegistry
from .tag import Tag


@lru_cache(maxsize=256)
def _marker_pattern(names: tuple[str, ...]) -> Optional[re.Pattern]:
    """Regex matching ``name:`` for the declared names, at a word start."""
    if not names:
        return None
    # longest first so that "alt" wins over "a" at the same position
    alternatives = "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))
    return re.compile(r'(?<![\w-])(' + alternatives + r'):')


def _unwrap(raw: str) -> str:
    text = raw.strip()
    if text.startswith("(") and text.endswith(")"):
        text = text[1:-1].strip()
    return text


class TagParser:
    """
    Parse raw tag strings against a registry.

    Usage::

        parser = TagParser(registry)
        tag = parser.parse("image: photo.jpg alt: A sunset")
    """

    def __init__(self, registry: TagTypeRegistry) -> None:
        self._registry = registry

    def parse(
        self,
        raw: str,
        data: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Tag:
        """
        Parse *raw* into a Tag.

        Raises
        ------
        UndefinedTagType
            When the text before the first colon is not a registered type.
        """
        type_part, _, remainder = _unwrap(raw).partition(":")
        type_name = type_part.strip()
        definition = self._registry.require(type_name)

        if not remainder.strip():
            return Tag(type_name, "", {}, data or {}, options or {})

        pattern = _marker_pattern(definition.attrs)
        markers = list(pattern.finditer(remainder)) if pattern else []

        if not markers:
            return Tag(type_name, remainder.strip(), {}, data or {}, options or {})

        value = remainder[:markers[0].start()].strip()
        attrs: dict[str, str] = {}
        for i, marker in enumerate(markers):
            end = markers[i + 1].start() if i + 1 < len(markers) else len(remainder)
            attrs[marker.group(1)] = remainder[marker.end():end].strip()

        return Tag(type_name, value, attrs, data or {}, options or {})


def parse_tag(
    raw: str,
    registry: TagTypeRegistry,
    data: Optional[Mapping[str, Any]] = None,
    options: Optional[Mapping[str, Any]] = None,
) -> Tag:
    """Shorthand for ``TagParser(registry).parse(raw, data, options)``."""
    return TagParser(registry).parse(raw, data, options)
