#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Every test gets its own TagTypeRegistry; nothing is registered globally.
The ``test`` type mirrors the one used throughout the suite:

    attrs:   a, b
    handler: "test: <value>-<a>-<b>"
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from httpx import ASGITransport, AsyncClient

# ── Env vars must be set before importing app modules ────────────────────────
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL",   "DEBUG")

from tagtext.main import create_app
from tagtext.services.tags import Tag, TagTypeRegistry


# -----------------------------------------------------------------------------

def render_test(tag: Tag) -> str:
    return "test: " + tag.value + "-" + tag.attr("a", "") + "-" + tag.attr("b", "")


def build_registry() -> TagTypeRegistry:
    registry = TagTypeRegistry()
    registry.define("test", attrs=("a", "b"), handler=render_test)
    registry.define("noHtml", attrs=("a", "b"))
    registry.define("invalidHtml", attrs=("a", "b"), handler="some string")
    return registry


# -----------------------------------------------------------------------------

@pytest.fixture
def registry() -> TagTypeRegistry:
    return build_registry()


# ── HTTP client bound to the test's registry ─────────────────────────────────
@pytest_asyncio.fixture
async def client(registry: TagTypeRegistry) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(registry)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        # Attach the app so tests can override dependencies
        c._app = app  # type: ignore[attr-defined]
        yield c


# -----------------------------------------------------------------------------
