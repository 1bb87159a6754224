#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------

"""
TagText — FastAPI Application
=============================
Entry point.  Start with:
    uvicorn tagtext.main:app --reload

The module-level ``app`` is built with an empty registry: it serves the
health and docs endpoints, lists no tag types, and answers 404 to every
parse.  Embedding applications register their tag types first and serve
the result of create_app(registry) instead.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tagtext.core.config import get_settings
from tagtext.core.logging import configure_logging
from tagtext.routes import tags
from tagtext.services.tags import TagTypeRegistry


def create_app(registry: Optional[TagTypeRegistry] = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Inline tag parsing and rendering",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.tag_registry = registry if registry is not None else TagTypeRegistry()

    # ── CORS ──────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ───────────────────────────────────────────────────────────
    app.include_router(tags.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/api/docs",
        }

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


# Empty registry; see the module docstring.
app = create_app()
