"""
TagEngine
=========
Finds ``(type: ...)`` spans in a piece of text, parses and renders each one
and splices the output back in place.

    Look at (image: photo.jpg alt: A sunset) here.
    → Look at <img src="photo.jpg" alt="A sunset"> here.

A span ends at the first closing parenthesis.  Handler output is not
re-scanned, so tags never nest.

Failures
--------
By default a span that cannot be rendered (unknown type, missing handler,
handler raised) is left in the text exactly as written.  With
``strict=True`` the error propagates to the caller instead.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from tagtext.core.exceptions import InvalidRenderHandler, UndefinedTagType

from .parser import TagParser
from .registry import TagTypeRegistry
from .renderer import Renderer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Pattern explanation:
#   (            — opening parenthesis
#   [\w-]+:      — type name followed by its colon
#   .*?)         — shortest body up to the first closing parenthesis
# ---------------------------------------------------------------------------
_TAG_PATTERN = re.compile(r'\([A-Za-z0-9_-]+:.*?\)', re.DOTALL)


def find_spans(text: str) -> list[str]:
    """Return every candidate tag span in *text*, parentheses included."""
    if not text:
        return []
    return [m.group(0) for m in _TAG_PATTERN.finditer(text)]


class TagEngine:
    """
    Expand all inline tags embedded in a piece of text.

    Usage::

        engine = TagEngine(registry)
        html = engine.expand(text, data={"page": page})
    """

    def __init__(self, registry: TagTypeRegistry, strict: bool = False) -> None:
        self._registry = registry
        self._parser = TagParser(registry)
        self._renderer = Renderer(registry)
        self.strict = strict

    # ----------------------------------------------------------------- public

    def expand(
        self,
        text: str,
        data: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Replace every tag span in *text* with its rendered output."""
        if not text:
            return text

        result_parts: list[str] = []
        last_end = 0

        for match in _TAG_PATTERN.finditer(text):
            result_parts.append(text[last_end:match.start()])
            result_parts.append(self._render_span(match.group(0), data, options))
            last_end = match.end()

        result_parts.append(text[last_end:])
        return "".join(result_parts)

    # ----------------------------------------------------------------- private

    def _render_span(self, span: str, data, options) -> str:
        try:
            tag = self._parser.parse(span, data, options)
            return self._renderer.render(tag)
        except UndefinedTagType as exc:
            if self.strict:
                raise
            logger.debug("Leaving %s untouched: %s", span, exc)
        except InvalidRenderHandler as exc:
            if self.strict:
                raise
            logger.warning("Leaving %s untouched: %s", span, exc)
        except Exception:
            if self.strict:
                raise
            logger.exception("Tag handler raised while rendering %s", span)
        return span
